"""
Professional Formation Library

Catalogue of 23 professional formations with slot coordinates,
tactical descriptions and metadata, plus lookup helpers.

Coordinates are percentages: x from the left touchline, y from the
opponent's goal line (GK sits near y=95).
"""

from typing import List, Optional, Sequence, Tuple

from .constants import FormationCategory, Difficulty
from .tactics import Formation, PositionSlot


def _slots(layout: Sequence[Tuple]) -> List[PositionSlot]:
    """Build slots from (x, y, role) or (x, y, role, label) tuples."""
    slots = []
    for entry in layout:
        x, y, role_id = entry[:3]
        label = entry[3] if len(entry) > 3 else role_id
        slots.append(PositionSlot(x=x, y=y, role_id=role_id, label=label))
    return slots


# Shared back lines
_BACK_FOUR = [(50, 95, 'GK'), (15, 80, 'LB'), (35, 85, 'CB'), (65, 85, 'CB'), (85, 80, 'RB')]
_BACK_THREE = [(50, 95, 'GK'), (25, 85, 'CB'), (50, 87, 'CB'), (75, 85, 'CB')]
_BACK_FIVE = [(50, 95, 'GK'), (10, 75, 'LWB'), (30, 85, 'CB'), (50, 87, 'CB'), (70, 85, 'CB'), (90, 75, 'RWB')]


# =============================================================================
# CLASSIC FORMATIONS
# =============================================================================

FORMATION_4_4_2 = Formation(
    id='formation-4-4-2',
    name='4-4-2',
    display_name='4-4-2 Classic',
    category=FormationCategory.CLASSIC,
    difficulty=Difficulty.BEGINNER,
    description='The most balanced and versatile formation. Two banks of four provide '
                'defensive stability while maintaining attacking options.',
    positions=_slots(_BACK_FOUR + [
        (15, 55, 'LM'), (35, 60, 'CM'), (65, 60, 'CM'), (85, 55, 'RM'),
        (35, 25, 'ST'), (65, 25, 'ST'),
    ]),
    strengths=['Balanced', 'Easy to understand', 'Solid defensively', 'Good width'],
    weaknesses=['Can be outnumbered in midfield', 'Less creative'],
    best_for=['Beginner coaches', 'Counter-attacking', 'Direct play'],
    famous_teams=['Man United (Ferguson)', 'Atletico Madrid (Simeone)', 'Leicester (Ranieri 2016)'],
    popularity=9,
)

FORMATION_4_3_3 = Formation(
    id='formation-4-3-3',
    name='4-3-3',
    display_name='4-3-3 Attack',
    category=FormationCategory.ATTACKING,
    difficulty=Difficulty.INTERMEDIATE,
    description='Modern attacking formation with three forwards providing width and '
                'penetration. Dominant in possession-based football.',
    positions=_slots(_BACK_FOUR + [
        (30, 60, 'CM'), (50, 55, 'CDM'), (70, 60, 'CM'),
        (15, 25, 'LW'), (50, 20, 'ST'), (85, 25, 'RW'),
    ]),
    strengths=['Strong attack', 'Width', 'Possession control', 'High pressing'],
    weaknesses=['Vulnerable to counters', 'Requires fit fullbacks'],
    best_for=['Possession football', 'Teams with wingers', 'High pressing'],
    famous_teams=['Barcelona (Guardiola)', 'Liverpool (Klopp)', 'Man City (Guardiola)'],
    popularity=10,
)

FORMATION_4_2_3_1 = Formation(
    id='formation-4-2-3-1',
    name='4-2-3-1',
    display_name='4-2-3-1 Modern',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.INTERMEDIATE,
    description='The most popular modern formation. Provides defensive stability with two '
                'holding midfielders while maintaining attacking creativity.',
    positions=_slots(_BACK_FOUR + [
        (35, 65, 'CDM'), (65, 65, 'CDM'),
        (20, 40, 'LM'), (50, 35, 'CAM'), (80, 40, 'RM'),
        (50, 15, 'ST'),
    ]),
    strengths=['Very balanced', 'Defensive solidarity', 'Creative attacking', 'Flexible'],
    weaknesses=['Can be predictable', 'Striker can be isolated'],
    best_for=['Modern football', 'Counter-attacking', 'Possession and pressing'],
    famous_teams=['Real Madrid (Ancelotti)', 'Chelsea (Mourinho)', 'Germany (Löw 2014)'],
    popularity=10,
)

# =============================================================================
# DEFENSIVE FORMATIONS
# =============================================================================

FORMATION_5_3_2 = Formation(
    id='formation-5-3-2',
    name='5-3-2',
    display_name='5-3-2 Defensive',
    category=FormationCategory.DEFENSIVE,
    difficulty=Difficulty.ADVANCED,
    description='Solid defensive formation with five at the back. Wing-backs provide width '
                'while three center-backs ensure defensive security.',
    positions=_slots(_BACK_FIVE + [
        (30, 55, 'CM'), (50, 57, 'CDM'), (70, 55, 'CM'),
        (40, 25, 'ST'), (60, 25, 'ST'),
    ]),
    strengths=['Very defensive', 'Hard to break down', 'Counter-attacking threat'],
    weaknesses=['Lack of width in attack', 'Requires fit wing-backs'],
    best_for=['Defending leads', 'Counter-attacking', 'Against stronger opponents'],
    famous_teams=['Italy (Conte)', 'Chelsea (Conte 2017)', 'Inter Milan (Conte)'],
    popularity=7,
)

FORMATION_5_4_1 = Formation(
    id='formation-5-4-1',
    name='5-4-1',
    display_name='5-4-1 Ultra Defensive',
    category=FormationCategory.DEFENSIVE,
    difficulty=Difficulty.INTERMEDIATE,
    description='The ultimate defensive setup. Five defenders, four midfielders, one '
                'striker. Perfect for protecting a lead.',
    positions=_slots(_BACK_FIVE + [
        (20, 55, 'LM'), (40, 60, 'CM'), (60, 60, 'CM'), (80, 55, 'RM'),
        (50, 20, 'ST'),
    ]),
    strengths=['Maximum defensive cover', 'Compact shape', 'Counter-attack ready'],
    weaknesses=['Very limited attacking', 'Isolated striker'],
    best_for=['Protecting a lead', 'Facing much stronger opponents', 'Time wasting'],
    famous_teams=['Greece (Rehhagel 2004)', 'Defensive masterclasses'],
    popularity=5,
)

FORMATION_4_5_1 = Formation(
    id='formation-4-5-1',
    name='4-5-1',
    display_name='4-5-1 Defensive Block',
    category=FormationCategory.DEFENSIVE,
    difficulty=Difficulty.INTERMEDIATE,
    description='Defensive formation with five midfielders forming a solid block. '
                'Perfect for sitting deep.',
    positions=_slots(_BACK_FOUR + [
        (15, 55, 'LM'), (30, 60, 'CM'), (50, 62, 'CDM'), (70, 60, 'CM'), (85, 55, 'RM'),
        (50, 25, 'ST'),
    ]),
    strengths=['Very defensive', 'Compact shape', 'Counter-attack ready'],
    weaknesses=['Limited attacking', 'Isolated striker'],
    best_for=['Parking the bus', 'Defending leads', 'Weak teams vs strong'],
    famous_teams=['Defensive masterclasses', 'Mourinho tactics'],
    popularity=7,
)

FORMATION_3_5_1_1 = Formation(
    id='formation-3-5-1-1',
    name='3-5-1-1',
    display_name='3-5-1-1 Counter',
    category=FormationCategory.DEFENSIVE,
    difficulty=Difficulty.ADVANCED,
    description='Counter-attacking setup with a #10 behind the striker and packed midfield.',
    positions=_slots(_BACK_THREE + [
        (10, 60, 'LWB'), (30, 58, 'CM'), (50, 60, 'CDM'), (70, 58, 'CM'), (90, 60, 'RWB'),
        (50, 35, 'CAM'), (50, 15, 'ST'),
    ]),
    strengths=['Very compact', 'Counter-attack ready', 'Defensive stability'],
    weaknesses=['Limited attacking numbers'],
    best_for=['Counter-attacking', 'Defending deep'],
    famous_teams=['Mourinho teams'],
    popularity=6,
)

# =============================================================================
# BALANCED FORMATIONS
# =============================================================================

FORMATION_4_1_4_1 = Formation(
    id='formation-4-1-4-1',
    name='4-1-4-1',
    display_name='4-1-4-1 Balanced',
    category=FormationCategory.BALANCED,
    difficulty=Difficulty.INTERMEDIATE,
    description='Balanced formation with a dedicated defensive midfielder. Provides '
                'defensive security while maintaining midfield presence.',
    positions=_slots(_BACK_FOUR + [
        (50, 68, 'CDM'),
        (15, 50, 'LM'), (35, 52, 'CM'), (65, 52, 'CM'), (85, 50, 'RM'),
        (50, 20, 'ST'),
    ]),
    strengths=['Midfield control', 'Defensive protection', 'Balanced approach'],
    weaknesses=['Striker isolation', 'Limited attacking width'],
    best_for=['Controlling midfield', 'Possession play', 'Balanced approach'],
    famous_teams=['France (Deschamps)', 'Various national teams'],
    popularity=7,
)

FORMATION_3_5_2 = Formation(
    id='formation-3-5-2',
    name='3-5-2',
    display_name='3-5-2 Wing-Back',
    category=FormationCategory.BALANCED,
    difficulty=Difficulty.ADVANCED,
    description='Three center-backs with attacking wing-backs. Strong in midfield with two '
                'strikers for partnership.',
    positions=_slots(_BACK_THREE + [
        (10, 60, 'LWB'), (35, 55, 'CM'), (50, 57, 'CDM'), (65, 55, 'CM'), (90, 60, 'RWB'),
        (40, 25, 'ST'), (60, 25, 'ST'),
    ]),
    strengths=['Strong midfield', 'Flexible wing-backs', 'Strike partnership'],
    weaknesses=['Requires very fit wing-backs', 'Wide areas vulnerable'],
    best_for=['Dominating midfield', 'Teams with strong wing-backs', 'Strike partnerships'],
    famous_teams=['Juventus (Conte)', 'Inter Milan (Conte)', 'Italy (Conte)'],
    popularity=8,
)

FORMATION_4_4_1_1 = Formation(
    id='formation-4-4-1-1',
    name='4-4-1-1',
    display_name='4-4-1-1 Compact',
    category=FormationCategory.BALANCED,
    difficulty=Difficulty.INTERMEDIATE,
    description='Compact formation with a #10 supporting a lone striker. Good for '
                'counter-attacking.',
    positions=_slots(_BACK_FOUR + [
        (15, 55, 'LM'), (35, 60, 'CM'), (65, 60, 'CM'), (85, 55, 'RM'),
        (50, 35, 'CAM'), (50, 15, 'ST'),
    ]),
    strengths=['Compact', 'Good for counters', 'Creative #10'],
    weaknesses=['Limited attacking numbers'],
    best_for=['Counter-attacking', 'Defensive teams with creative midfielder'],
    famous_teams=['Various counter-attacking teams'],
    popularity=6,
)

FORMATION_4_1_3_2 = Formation(
    id='formation-4-1-3-2',
    name='4-1-3-2',
    display_name='4-1-3-2 Hybrid',
    category=FormationCategory.BALANCED,
    difficulty=Difficulty.ADVANCED,
    description='Hybrid formation with one holding midfielder, three attacking '
                'midfielders, and two strikers.',
    positions=_slots(_BACK_FOUR + [
        (50, 68, 'CDM'),
        (20, 45, 'LM'), (50, 42, 'CAM'), (80, 45, 'RM'),
        (40, 20, 'ST'), (60, 20, 'ST'),
    ]),
    strengths=['Attacking creativity', 'Strike partnership', 'Defensive anchor'],
    weaknesses=['Midfield can be bypassed'],
    best_for=['Attacking teams', 'Creative play'],
    famous_teams=['Various attacking teams'],
    popularity=6,
)

# =============================================================================
# ATTACKING FORMATIONS
# =============================================================================

FORMATION_4_3_3_FALSE9 = Formation(
    id='formation-4-3-3-false9',
    name='4-3-3 False 9',
    display_name='4-3-3 False 9',
    category=FormationCategory.ATTACKING,
    difficulty=Difficulty.EXPERT,
    description='Revolutionary false 9 system. The striker drops deep to create space and '
                'overload midfield.',
    positions=_slots(_BACK_FOUR + [
        (30, 60, 'CM'), (50, 55, 'CDM'), (70, 60, 'CM'),
        (15, 25, 'LW'), (50, 35, 'CF', 'F9'), (85, 25, 'RW'),
    ]),
    strengths=['Overloads midfield', 'Unpredictable', 'Creates space for wingers'],
    weaknesses=['No target man', 'Requires intelligent striker'],
    best_for=['Possession football', 'Creative play', 'Confusing opponents'],
    famous_teams=['Barcelona (Guardiola with Messi)', 'Spain (Del Bosque 2012)'],
    popularity=8,
)

FORMATION_3_4_3 = Formation(
    id='formation-3-4-3',
    name='3-4-3',
    display_name='3-4-3 Attack',
    category=FormationCategory.ATTACKING,
    difficulty=Difficulty.ADVANCED,
    description='Aggressive attacking formation with three forwards. Wing-backs provide '
                'width while three strikers press high.',
    positions=_slots(_BACK_THREE + [
        (10, 60, 'LWB'), (40, 55, 'CM'), (60, 55, 'CM'), (90, 60, 'RWB'),
        (20, 25, 'LW'), (50, 20, 'ST'), (80, 25, 'RW'),
    ]),
    strengths=['Maximum attacking threat', 'High pressing', 'Width and penetration'],
    weaknesses=['Defensively exposed', 'Requires fit wing-backs'],
    best_for=['Attacking teams', 'Chasing a game', 'High pressing systems'],
    famous_teams=['Chelsea (Tuchel)', 'Germany (Flick)'],
    popularity=8,
)

FORMATION_4_2_4 = Formation(
    id='formation-4-2-4',
    name='4-2-4',
    display_name='4-2-4 Ultra Attack',
    category=FormationCategory.ATTACKING,
    difficulty=Difficulty.EXPERT,
    description='Extremely attacking formation with four forwards. High risk, high reward '
                'approach.',
    positions=_slots(_BACK_FOUR + [
        (35, 60, 'CDM'), (65, 60, 'CDM'),
        (15, 30, 'LW'), (40, 20, 'ST'), (60, 20, 'ST'), (85, 30, 'RW'),
    ]),
    strengths=['Maximum attacking threat', 'Overwhelming opponents', 'Width and penetration'],
    weaknesses=['Extremely exposed defensively', 'Requires dominance'],
    best_for=['Chasing games', 'Against weak opponents', 'All-out attack'],
    famous_teams=['Brazil (1970)', 'Classic attacking football'],
    popularity=5,
)

FORMATION_3_4_1_2 = Formation(
    id='formation-3-4-1-2',
    name='3-4-1-2',
    display_name='3-4-1-2 Christmas Tree',
    category=FormationCategory.ATTACKING,
    difficulty=Difficulty.EXPERT,
    description='The "Christmas Tree" formation with a creative #10 behind two strikers.',
    positions=_slots(_BACK_THREE + [
        (10, 60, 'LM'), (40, 58, 'CM'), (60, 58, 'CM'), (90, 60, 'RM'),
        (50, 35, 'CAM'), (40, 18, 'ST'), (60, 18, 'ST'),
    ]),
    strengths=['Creative #10', 'Strike partnership', 'Central overload'],
    weaknesses=['Lacks width', 'Requires exceptional CAM'],
    best_for=['Teams with star playmaker', 'Technical football'],
    famous_teams=['AC Milan (Ancelotti 2000s)'],
    popularity=6,
)

# =============================================================================
# MODERN FORMATIONS
# =============================================================================

FORMATION_4_3_3_HOLDING = Formation(
    id='formation-4-3-3-holding',
    name='4-3-3 Holding',
    display_name='4-3-3 Holding',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.INTERMEDIATE,
    description='Modern 4-3-3 with a dedicated holding midfielder for better defensive balance.',
    positions=_slots(_BACK_FOUR + [
        (30, 57, 'CM'), (50, 62, 'CDM'), (70, 57, 'CM'),
        (15, 25, 'LW'), (50, 20, 'ST'), (85, 25, 'RW'),
    ]),
    strengths=['Better defensive cover', 'Control transitions', 'Balanced'],
    weaknesses=['Less creative than standard 4-3-3'],
    best_for=['Teams needing defensive stability', 'Transition play'],
    famous_teams=['Liverpool (Klopp variant)', 'Real Madrid'],
    popularity=9,
)

FORMATION_4_4_2_DIAMOND = Formation(
    id='formation-4-4-2-diamond',
    name='4-4-2 Diamond',
    display_name='4-4-2 Diamond',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Midfield diamond formation. Dominates central areas with a creative '
                'attacking midfielder.',
    positions=_slots(_BACK_FOUR + [
        (50, 68, 'CDM'), (25, 53, 'LM'), (75, 53, 'RM'), (50, 38, 'CAM'),
        (40, 20, 'ST'), (60, 20, 'ST'),
    ]),
    strengths=['Midfield dominance', 'Creative CAM', 'Strike partnership'],
    weaknesses=['Lacks width', 'Fullbacks must provide width'],
    best_for=['Dominating possession', 'Central overload', 'Creative play'],
    famous_teams=['AC Milan (Ancelotti)', 'Real Madrid (Ancelotti 2014)'],
    popularity=7,
)

FORMATION_4_1_2_1_2 = Formation(
    id='formation-4-1-2-1-2',
    name='4-1-2-1-2',
    display_name='4-1-2-1-2 Narrow',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Narrow formation focusing on central control. One holding midfielder '
                'protects the defense.',
    positions=_slots(_BACK_FOUR + [
        (50, 68, 'CDM'), (40, 55, 'CM'), (60, 55, 'CM'), (50, 38, 'CAM'),
        (40, 20, 'ST'), (60, 20, 'ST'),
    ]),
    strengths=['Central dominance', 'Compact defensive shape', 'Multiple passing options'],
    weaknesses=['No natural width', 'Vulnerable to wide attacks'],
    best_for=['Narrow pitches', 'Central control', 'Technical teams'],
    famous_teams=['Brazil (various eras)'],
    popularity=6,
)

FORMATION_3_4_2_1 = Formation(
    id='formation-3-4-2-1',
    name='3-4-2-1',
    display_name='3-4-2-1 Modern',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Modern hybrid with three center-backs, four in midfield, and two '
                'supporting one striker.',
    positions=_slots(_BACK_THREE + [
        (10, 60, 'LWB'), (40, 58, 'CM'), (60, 58, 'CM'), (90, 60, 'RWB'),
        (35, 32, 'CAM'), (65, 32, 'CAM'), (50, 15, 'ST'),
    ]),
    strengths=['Flexible', 'Strong midfield', 'Creative support for striker'],
    weaknesses=['Complex positioning', 'Requires intelligent players'],
    best_for=['Flexible tactics', 'Creative teams'],
    famous_teams=['Various modern teams'],
    popularity=7,
)

FORMATION_3_3_3_1 = Formation(
    id='formation-3-3-3-1',
    name='3-3-3-1',
    display_name='3-3-3-1 Fluid',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.EXPERT,
    description='Ultra-fluid attacking formation with three lines of three and a target striker.',
    positions=_slots(_BACK_THREE + [
        (25, 62, 'CDM'), (50, 65, 'CDM'), (75, 62, 'CDM'),
        (20, 38, 'CAM'), (50, 35, 'CAM'), (80, 38, 'CAM'),
        (50, 15, 'ST'),
    ]),
    strengths=['Fluid movement', 'Creative freedom', 'Numerical superiority in all zones'],
    weaknesses=['Complex', 'Requires highly technical players'],
    best_for=['Total football', 'Possession dominance'],
    famous_teams=['Ajax (Cruyff philosophy)'],
    popularity=4,
)

FORMATION_4_3_3_INVERTED = Formation(
    id='formation-4-3-3-inverted',
    name='4-3-3 Inverted Wingers',
    display_name='4-3-3 Inverted Wingers',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Modern 4-3-3 with inverted wingers cutting inside. Creates central '
                'overload and shooting opportunities.',
    positions=_slots(_BACK_FOUR + [
        (30, 60, 'CM'), (50, 55, 'CDM'), (70, 60, 'CM'),
        (25, 28, 'LW', 'IW'), (50, 20, 'ST'), (75, 28, 'RW', 'IW'),
    ]),
    strengths=['Shooting from cutting inside', 'Central overload', 'Fullbacks provide width'],
    weaknesses=['Requires overlapping fullbacks'],
    best_for=['Teams with wingers who can shoot', 'Modern football'],
    famous_teams=['Man City (Guardiola)', 'Bayern Munich'],
    popularity=9,
)

FORMATION_4_3_2_1 = Formation(
    id='formation-4-3-2-1',
    name='4-3-2-1',
    display_name='4-3-2-1 Inverted Tree',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Inverted pyramid with two attacking midfielders behind a lone striker.',
    positions=_slots(_BACK_FOUR + [
        (30, 62, 'CM'), (50, 65, 'CDM'), (70, 62, 'CM'),
        (35, 35, 'CAM'), (65, 35, 'CAM'), (50, 15, 'ST'),
    ]),
    strengths=['Two #10s', 'Creative central play', 'Midfield control'],
    weaknesses=['Lacks width', 'Isolated striker'],
    best_for=['Creative football', 'Technical teams'],
    famous_teams=['France (various tournaments)'],
    popularity=6,
)

FORMATION_3_1_4_2 = Formation(
    id='formation-3-1-4-2',
    name='3-1-4-2',
    display_name='3-1-4-2 Pressing',
    category=FormationCategory.MODERN,
    difficulty=Difficulty.ADVANCED,
    description='Modern pressing formation with a dedicated holding midfielder and four '
                'in midfield.',
    positions=_slots(_BACK_THREE + [
        (50, 68, 'CDM'),
        (15, 52, 'LM'), (40, 55, 'CM'), (60, 55, 'CM'), (85, 52, 'RM'),
        (40, 22, 'ST'), (60, 22, 'ST'),
    ]),
    strengths=['High pressing', 'Midfield dominance', 'Good transitions'],
    weaknesses=['Defensive vulnerability', 'Requires high fitness'],
    best_for=['High pressing systems', 'Energetic teams'],
    famous_teams=['RB Leipzig', 'Modern pressing teams'],
    popularity=7,
)


PROFESSIONAL_FORMATIONS: List[Formation] = [
    FORMATION_4_4_2,
    FORMATION_4_3_3,
    FORMATION_4_2_3_1,
    FORMATION_5_3_2,
    FORMATION_5_4_1,
    FORMATION_4_1_4_1,
    FORMATION_3_5_2,
    FORMATION_4_3_3_FALSE9,
    FORMATION_3_4_3,
    FORMATION_4_3_3_HOLDING,
    FORMATION_4_4_2_DIAMOND,
    FORMATION_4_1_2_1_2,
    FORMATION_4_2_4,
    FORMATION_3_4_1_2,
    FORMATION_3_4_2_1,
    FORMATION_4_4_1_1,
    FORMATION_3_3_3_1,
    FORMATION_4_3_2_1,
    FORMATION_3_1_4_2,
    FORMATION_4_5_1,
    FORMATION_4_3_3_INVERTED,
    FORMATION_3_5_1_1,
    FORMATION_4_1_3_2,
]


def get_formations_by_category(category) -> List[Formation]:
    """Return formations in a category (enum or string value)."""
    if isinstance(category, str):
        category = FormationCategory(category.lower())
    return [f for f in PROFESSIONAL_FORMATIONS if f.category == category]


def get_formations_by_difficulty(difficulty) -> List[Formation]:
    """Return formations at a difficulty tier (enum or string value)."""
    if isinstance(difficulty, str):
        difficulty = Difficulty(difficulty.lower())
    return [f for f in PROFESSIONAL_FORMATIONS if f.difficulty == difficulty]


def get_popular_formations(limit: int = 5) -> List[Formation]:
    """Top formations by popularity, most popular first. Limit must be positive."""
    if limit < 1:
        raise ValueError(f"Popular limit must be at least 1, got {limit}")
    return sorted(PROFESSIONAL_FORMATIONS, key=lambda f: f.popularity, reverse=True)[:limit]


def search_formations(query: str) -> List[Formation]:
    """Case-insensitive search across name, display name and description."""
    lower_query = query.lower().strip()
    return [
        f for f in PROFESSIONAL_FORMATIONS
        if lower_query in f.name.lower()
        or lower_query in f.display_name.lower()
        or lower_query in f.description.lower()
    ]


def get_formation_by_id(formation_id: str) -> Optional[Formation]:
    for formation in PROFESSIONAL_FORMATIONS:
        if formation.id == formation_id:
            return formation
    return None
