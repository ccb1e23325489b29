"""
Tactics Validation Schemas

Pydantic models for validating analysis request payloads before they
reach the engines. Accepts both snake_case and the camelCase keys sent
by the tactics board front end.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict, AliasChoices
from typing import Dict, List, Optional
from enum import Enum

from models.constants import ROLE_CODES, PLAYER_ATTRIBUTES
from models.tactics import Player, PositionSlot, Formation, AnalysisContext


class FormationCategoryEnum(str, Enum):
    """Valid formation category values."""
    DEFENSIVE = 'defensive'
    BALANCED = 'balanced'
    ATTACKING = 'attacking'
    MODERN = 'modern'
    CLASSIC = 'classic'


class DifficultyEnum(str, Enum):
    """Valid formation difficulty values."""
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    ADVANCED = 'advanced'
    EXPERT = 'expert'


class MatchSituationEnum(str, Enum):
    """Valid match situation values."""
    LEADING = 'leading'
    DRAWING = 'drawing'
    LOSING = 'losing'


def _normalize_role(v):
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    if isinstance(v, str):
        v = v.strip().upper()
        if v not in ROLE_CODES:
            raise ValueError(f"Unknown role code: {v}")
    return v


def _lower(v):
    if isinstance(v, str):
        return v.lower().strip()
    return v


class PlayerSchema(BaseModel):
    """
    Validation schema for a single player.

    Ratings and attributes are bounded to 0-100, ages must be positive.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    nationality: Optional[str] = Field(default=None, max_length=60)
    age: int = Field(..., gt=0, le=60)
    overall: float = Field(..., ge=0, le=100)
    role_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('role_id', 'roleId'),
        description="Canonical position code"
    )
    attributes: Dict[str, float] = Field(default_factory=dict)

    @field_validator('role_id', mode='before')
    @classmethod
    def normalize_role_id(cls, v):
        """Upper-case role codes and reject unknown ones."""
        return _normalize_role(v)

    @field_validator('nationality', mode='before')
    @classmethod
    def normalize_nationality(cls, v):
        """Treat blank nationality as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('attributes')
    @classmethod
    def validate_attributes(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Only known attributes, each within 0-100."""
        cleaned = {}
        for key, value in v.items():
            key = key.lower().strip()
            if key not in PLAYER_ATTRIBUTES:
                raise ValueError(f"Unknown attribute: {key}")
            if not 0 <= value <= 100:
                raise ValueError(f"Attribute {key} must be between 0 and 100")
            cleaned[key] = value
        return cleaned

    def to_model(self) -> Player:
        return Player(
            id=self.id,
            name=self.name,
            nationality=self.nationality,
            age=self.age,
            overall=self.overall,
            role_id=self.role_id,
            attributes=dict(self.attributes),
        )


class PositionSlotSchema(BaseModel):
    """Validation schema for a formation slot in percentage coordinates."""
    model_config = ConfigDict(str_strip_whitespace=True)

    x: float = Field(..., ge=0, le=100)
    y: float = Field(..., ge=0, le=100)
    role_id: str = Field(..., validation_alias=AliasChoices('role_id', 'roleId'))
    label: Optional[str] = Field(default=None, max_length=20)

    @field_validator('role_id', mode='before')
    @classmethod
    def normalize_role_id(cls, v):
        role = _normalize_role(v)
        if role is None:
            raise ValueError("Slot role cannot be empty")
        return role

    def to_model(self) -> PositionSlot:
        return PositionSlot(x=self.x, y=self.y, role_id=self.role_id, label=self.label)


class FormationSchema(BaseModel):
    """
    Validation schema for a custom formation.

    Requires at least one slot; metadata lists are optional.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    display_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('display_name', 'displayName')
    )
    category: FormationCategoryEnum = Field(default=FormationCategoryEnum.BALANCED)
    difficulty: DifficultyEnum = Field(default=DifficultyEnum.INTERMEDIATE)
    description: str = Field(default='', max_length=500)
    positions: List[PositionSlotSchema] = Field(..., min_length=1)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    best_for: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices('best_for', 'bestFor')
    )
    famous_teams: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices('famous_teams', 'famousTeams')
    )
    popularity: int = Field(default=5, ge=1, le=10)

    @field_validator('category', 'difficulty', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        """Convert category/difficulty to lowercase."""
        return _lower(v)

    def to_model(self) -> Formation:
        return Formation(
            id=self.id,
            name=self.name,
            display_name=self.display_name or self.name,
            category=self.category.value,
            difficulty=self.difficulty.value,
            description=self.description,
            positions=[slot.to_model() for slot in self.positions],
            strengths=list(self.strengths),
            weaknesses=list(self.weaknesses),
            best_for=list(self.best_for),
            famous_teams=list(self.famous_teams),
            popularity=self.popularity,
        )


class AnalysisContextSchema(BaseModel):
    """Optional match context for formation analysis."""
    match_situation: Optional[MatchSituationEnum] = Field(
        default=None,
        validation_alias=AliasChoices('match_situation', 'matchSituation')
    )
    opposing_formation_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('opposing_formation_id', 'opposingFormationId')
    )
    opposing_formation: Optional[FormationSchema] = Field(
        default=None,
        validation_alias=AliasChoices('opposing_formation', 'opposingFormation')
    )

    @field_validator('match_situation', mode='before')
    @classmethod
    def normalize_situation(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return _lower(v)


class ChemistryRequestSchema(BaseModel):
    """Roster payload for chemistry analysis."""
    players: List[PlayerSchema] = Field(default_factory=list)

    @field_validator('players')
    @classmethod
    def unique_ids(cls, v: List[PlayerSchema]) -> List[PlayerSchema]:
        """Player ids must be unique within a roster."""
        seen = set()
        for player in v:
            if player.id in seen:
                raise ValueError(f"Duplicate player id: {player.id}")
            seen.add(player.id)
        return v

    def to_players(self) -> List[Player]:
        return [p.to_model() for p in self.players]


class FormationRequestSchema(ChemistryRequestSchema):
    """
    Formation analysis payload.

    Either formation_id (library lookup) or an inline formation is required.
    """
    formation_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('formation_id', 'formationId')
    )
    formation: Optional[FormationSchema] = None
    context: Optional[AnalysisContextSchema] = None

    @model_validator(mode='after')
    def require_formation(self):
        """A library id or an inline formation must be supplied."""
        if not self.formation_id and self.formation is None:
            raise ValueError("Either formation_id or formation is required")
        return self


def validate_chemistry_request(data: dict) -> ChemistryRequestSchema:
    """
    Validate a chemistry request body.

    Args:
        data: Raw JSON dictionary

    Returns:
        Validated ChemistryRequestSchema instance

    Raises:
        ValueError: If validation fails
    """
    try:
        return ChemistryRequestSchema(**(data or {}))
    except Exception as e:
        raise ValueError(f"Invalid chemistry request: {str(e)}")


def validate_formation_request(data: dict) -> FormationRequestSchema:
    """
    Validate a formation analysis request body.

    Args:
        data: Raw JSON dictionary

    Returns:
        Validated FormationRequestSchema instance

    Raises:
        ValueError: If validation fails
    """
    try:
        return FormationRequestSchema(**(data or {}))
    except Exception as e:
        raise ValueError(f"Invalid formation request: {str(e)}")


def build_context(schema: Optional[AnalysisContextSchema], opposing: Optional[Formation] = None) -> Optional[AnalysisContext]:
    """Convert a validated context schema into an AnalysisContext."""
    if schema is None:
        return None
    if opposing is None and schema.opposing_formation is not None:
        opposing = schema.opposing_formation.to_model()
    situation = schema.match_situation.value if schema.match_situation else None
    return AnalysisContext(match_situation=situation, opposing_formation=opposing)
