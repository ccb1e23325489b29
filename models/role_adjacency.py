"""
Role Adjacency Graph

Static lookup of which positional role codes are tactically neighbouring.
Entries are directional, but chemistry treats two roles as adjacent when
either one lists the other.
"""

from typing import Dict, FrozenSet, Mapping, Optional


ROLE_ADJACENCY: Dict[str, FrozenSet[str]] = {
    'GK': frozenset({'CB', 'LB', 'RB'}),
    'CB': frozenset({'GK', 'CB', 'LB', 'RB', 'CDM', 'CM'}),
    'LB': frozenset({'GK', 'CB', 'LM', 'LWB', 'CDM'}),
    'RB': frozenset({'GK', 'CB', 'RM', 'RWB', 'CDM'}),
    'LWB': frozenset({'LB', 'CB', 'LM', 'LW'}),
    'RWB': frozenset({'RB', 'CB', 'RM', 'RW'}),
    'CDM': frozenset({'CB', 'CM', 'CDM', 'LB', 'RB'}),
    'CM': frozenset({'CB', 'CDM', 'CM', 'CAM', 'LM', 'RM'}),
    'CAM': frozenset({'CM', 'CF', 'ST', 'LW', 'RW'}),
    'LM': frozenset({'LB', 'LWB', 'CM', 'LW'}),
    'RM': frozenset({'RB', 'RWB', 'CM', 'RW'}),
    'LW': frozenset({'LM', 'LWB', 'CAM', 'ST'}),
    'RW': frozenset({'RM', 'RWB', 'CAM', 'ST'}),
    'CF': frozenset({'CAM', 'ST', 'LW', 'RW'}),
    'ST': frozenset({'CAM', 'CF', 'ST', 'LW', 'RW'}),
}


def are_roles_adjacent(role1: Optional[str], role2: Optional[str],
                       adjacency: Mapping[str, FrozenSet[str]] = ROLE_ADJACENCY) -> bool:
    """
    Check whether two role codes are neighbours in either direction.

    Args:
        role1: First role code (e.g. "CB")
        role2: Second role code
        adjacency: Table to consult, defaults to ROLE_ADJACENCY

    Returns:
        True if either role lists the other as adjacent
    """
    if not role1 or not role2:
        return False
    return role2 in adjacency.get(role1, frozenset()) or role1 in adjacency.get(role2, frozenset())
