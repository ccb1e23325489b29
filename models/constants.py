"""
Centralized constants and scoring weights for tactical analysis.
"""

from dataclasses import dataclass
from enum import Enum


class PositionZone(Enum):
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    ATTACKER = "attacker"


class FormationCategory(Enum):
    DEFENSIVE = "defensive"
    BALANCED = "balanced"
    ATTACKING = "attacking"
    MODERN = "modern"
    CLASSIC = "classic"


class Difficulty(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class MatchSituation(Enum):
    LEADING = "leading"
    DRAWING = "drawing"
    LOSING = "losing"


class Priority(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Impact(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecommendationCategory(Enum):
    POSITIONING = "positioning"
    PERSONNEL = "personnel"
    TACTICAL = "tactical"
    STRATEGIC = "strategic"


class ChemistryRecommendationKind(Enum):
    LOW_CHEMISTRY = "low_chemistry"
    ISOLATED = "isolated"
    NATIONAL_CORE = "national_core"


# Sort order for recommendation priorities (lower sorts first)
PRIORITY_ORDER = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

# Canonical position codes understood by the engines
ROLE_CODES = (
    "GK", "CB", "LB", "RB", "LWB", "RWB",
    "CDM", "CM", "CAM", "LM", "RM",
    "LW", "RW", "CF", "ST",
)

PLAYER_ATTRIBUTES = ("pace", "shooting", "passing", "dribbling", "defending", "physical")


@dataclass(frozen=True)
class ChemistryWeights:
    """
    Heuristic weights for player chemistry scoring.

    Individual chemistry starts at base_score and collects bonuses.
    Pair strength is the sum of the pair_* bonuses.
    """
    version: str = "1.0"

    # Individual chemistry
    base_score: float = 50.0
    nationality_bonus_per_teammate: float = 5.0
    nationality_bonus_cap: float = 20.0
    role_familiarity_bonus: float = 10.0
    elite_rating_threshold: float = 85.0
    elite_rating_bonus: float = 10.0
    low_rating_threshold: float = 60.0
    low_rating_penalty: float = 5.0
    age_compatibility_window: float = 3.0
    age_compatibility_bonus: float = 5.0
    connection_age_window: int = 5

    # Pairwise connection strength
    pair_same_nationality: float = 30.0
    pair_close_age_gap: int = 3
    pair_close_age_bonus: float = 20.0
    pair_near_age_gap: int = 5
    pair_near_age_bonus: float = 10.0
    pair_adjacent_roles: float = 25.0
    pair_rating_gap: float = 5.0
    pair_similar_rating: float = 15.0
    matrix_min_strength: float = 30.0
    strong_connection_strength: float = 70.0

    # Cohesion
    cohesion_ratio_weight: float = 80.0
    cohesion_base: float = 20.0
    diversity_free_nationalities: int = 3
    diversity_penalty_per_nationality: float = 5.0

    # Recommendations
    low_chemistry_threshold: float = 50.0
    isolated_connection_threshold: int = 2
    national_core_size: int = 3
    max_recommendations: int = 5


@dataclass(frozen=True)
class FormationThresholds:
    """
    Zone boundaries and strength/weakness thresholds for formation analysis.

    Coordinates are percentages with y=0 at the attacking end.
    """
    version: str = "1.0"

    defender_min_y: float = 75.0
    attacker_max_y: float = 40.0

    defender_reference_count: int = 6
    attacker_reference_count: int = 5
    zone_floor: float = 30.0
    possession_per_midfielder: float = 15.0
    compactness_variance_divisor: float = 10.0

    strong_defensive: float = 70.0
    strong_attacking: float = 70.0
    strong_possession: float = 70.0
    strong_width: float = 80.0
    strong_compactness: float = 75.0

    weak_defensive: float = 50.0
    weak_attacking: float = 50.0
    weak_width: float = 50.0

    declared_strength_score: float = 80.0
    declared_strength_step: float = 5.0
    declared_strength_limit: int = 6
    declared_weakness_severity: float = 70.0
    declared_weakness_step: float = 10.0

    max_strengths: int = 5
    max_weaknesses: int = 4
    max_recommendations: int = 5
    full_squad_size: int = 11

    exact_role_base: float = 90.0
    role_agnostic_base: float = 60.0
    no_match_score: float = 50.0
    rating_pivot: float = 70.0
    rating_divisor: float = 3.0
    high_rating: float = 80.0
    low_rating: float = 65.0
    excellent_fit: float = 80.0
    poor_fit: float = 60.0
    max_reasons: int = 3

    balance_weight: float = 0.4
    strength_weight: float = 0.4
    weakness_weight: float = 0.2


DEFAULT_CHEMISTRY_WEIGHTS = ChemistryWeights()
DEFAULT_FORMATION_THRESHOLDS = FormationThresholds()


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))
