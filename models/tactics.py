"""
Tactics Board Data Models

Players, formation slots and formations consumed by the analysis engines.
These are read-only inputs; the engines never mutate them.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .constants import FormationCategory, Difficulty, MatchSituation


@dataclass
class Player:
    """
    Represents a squad member placed on the tactics board.

    Attributes:
        id: Unique player identifier
        name: Display name
        nationality: Nationality code or name (e.g. "ENG")
        age: Age in years
        overall: Overall rating (0-100)
        role_id: Canonical position code (GK, CB, CM, ST, ...)
        attributes: Optional named attributes (pace, shooting, passing,
            dribbling, defending, physical), each 0-100
    """
    id: str
    name: str
    age: int
    overall: float
    nationality: Optional[str] = None
    role_id: Optional[str] = None
    attributes: Dict[str, float] = field(default_factory=dict)


@dataclass
class PositionSlot:
    """A positional slot in percentage field coordinates (y=0 is the opponent's goal)."""
    x: float
    y: float
    role_id: str
    label: Optional[str] = None


@dataclass
class Formation:
    """
    A named set of positional slots plus author-supplied metadata.

    Attributes:
        id: Formation identifier (e.g. "formation-4-3-3")
        name: Short name (e.g. "4-3-3")
        display_name: Human readable name
        category: FormationCategory
        difficulty: Difficulty tier
        positions: Ordered list of PositionSlot
        strengths: Declared strengths
        weaknesses: Declared weaknesses
        best_for: Situations the formation suits
        famous_teams: Reference teams that used it
        popularity: 1-10 popularity rating
    """
    id: str
    name: str
    category: FormationCategory
    difficulty: Difficulty
    positions: List[PositionSlot]
    display_name: str = ''
    description: str = ''
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    best_for: List[str] = field(default_factory=list)
    famous_teams: List[str] = field(default_factory=list)
    popularity: int = 5

    def __post_init__(self):
        """Allow string initialization for convenience."""
        if isinstance(self.category, str):
            self.category = FormationCategory(self.category.lower())
        if isinstance(self.difficulty, str):
            self.difficulty = Difficulty(self.difficulty.lower())
        if not self.display_name:
            self.display_name = self.name

    @property
    def slot_count(self) -> int:
        return len(self.positions)


@dataclass
class AnalysisContext:
    """Optional match context for formation recommendations."""
    match_situation: Optional[MatchSituation] = None
    opposing_formation: Optional[Formation] = None

    def __post_init__(self):
        if isinstance(self.match_situation, str):
            self.match_situation = MatchSituation(self.match_situation.lower())
