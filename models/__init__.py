"""
Models package for the tactics analysis service.

Provides data models for players, formations and analysis results.
"""
from .constants import (
    FormationCategory,
    Difficulty,
    MatchSituation,
    Priority,
    Impact,
    RecommendationCategory,
    ChemistryRecommendationKind,
    PositionZone,
    ChemistryWeights,
    FormationThresholds,
)
from .tactics import Player, PositionSlot, Formation, AnalysisContext
from .analysis import (
    ChemistryConnection,
    PlayerChemistryScore,
    ChemistryRecommendation,
    ChemistryAnalysis,
    TacticalBalance,
    TacticalStrength,
    TacticalWeakness,
    TacticalRecommendation,
    PlayerSuitabilityAnalysis,
    FormationAnalysis,
)
from .role_adjacency import ROLE_ADJACENCY, are_roles_adjacent

__all__ = [
    'FormationCategory',
    'Difficulty',
    'MatchSituation',
    'Priority',
    'Impact',
    'RecommendationCategory',
    'ChemistryRecommendationKind',
    'PositionZone',
    'ChemistryWeights',
    'FormationThresholds',
    'Player',
    'PositionSlot',
    'Formation',
    'AnalysisContext',
    'ChemistryConnection',
    'PlayerChemistryScore',
    'ChemistryRecommendation',
    'ChemistryAnalysis',
    'TacticalBalance',
    'TacticalStrength',
    'TacticalWeakness',
    'TacticalRecommendation',
    'PlayerSuitabilityAnalysis',
    'FormationAnalysis',
    'ROLE_ADJACENCY',
    'are_roles_adjacent',
]
