"""
Analysis Result Data Models

Transient value objects produced by ChemistryEngine and FormationAnalyzer.
Created fresh on every call and owned by the caller.
"""

from dataclasses import dataclass, field
from typing import List

from .constants import (
    Priority,
    Impact,
    RecommendationCategory,
    ChemistryRecommendationKind,
)


# ========== CHEMISTRY ==========

@dataclass
class ChemistryConnection:
    """Symmetric compatibility between two players."""
    player1_id: str
    player2_id: str
    connection_strength: float
    factors: List[str] = field(default_factory=list)


@dataclass
class PlayerChemistryScore:
    """Compatibility of one player with the rest of the roster."""
    player_id: str
    individual_chemistry: float
    connections: int
    factors: List[str] = field(default_factory=list)


@dataclass
class ChemistryRecommendation:
    kind: ChemistryRecommendationKind
    priority: Priority
    message: str
    player_ids: List[str] = field(default_factory=list)


@dataclass
class ChemistryAnalysis:
    """
    Aggregate chemistry for a roster.

    Attributes:
        overall_chemistry: Mean of all individual chemistry values
        player_chemistry: One PlayerChemistryScore per player, roster order
        chemistry_matrix: Connections above the matrix threshold, strongest first
        team_cohesion: 0-100 cohesion score
        recommendations: Up to 5 chemistry recommendations
    """
    overall_chemistry: float
    player_chemistry: List[PlayerChemistryScore]
    chemistry_matrix: List[ChemistryConnection]
    team_cohesion: float
    recommendations: List[ChemistryRecommendation]


# ========== FORMATION ==========

@dataclass
class TacticalBalance:
    """Five spatial dimensions of a formation, each 0-100."""
    defensive: float
    attacking: float
    possession: float
    width: float
    compactness: float


@dataclass
class TacticalStrength:
    aspect: str
    score: float
    description: str
    impact: Impact


@dataclass
class TacticalWeakness:
    aspect: str
    severity: float
    description: str
    solution: str


@dataclass
class TacticalRecommendation:
    title: str
    description: str
    priority: Priority
    category: RecommendationCategory


@dataclass
class PlayerSuitabilityAnalysis:
    player_id: str
    position_id: str
    suitability_score: float
    reasons: List[str] = field(default_factory=list)


@dataclass
class FormationAnalysis:
    """
    Full tactical analysis of a formation for a roster.

    Attributes:
        overall_score: 0-100 headline score
        strengths: Top 5 strengths, highest score first
        weaknesses: Top 4 weaknesses, highest severity first
        recommendations: Up to 5 recommendations, most urgent first
        player_suitability: One entry per player
        tactical_balance: Spatial balance of the formation
    """
    overall_score: float
    strengths: List[TacticalStrength]
    weaknesses: List[TacticalWeakness]
    recommendations: List[TacticalRecommendation]
    player_suitability: List[PlayerSuitabilityAnalysis]
    tactical_balance: TacticalBalance
