"""
World Cup 2026 group stage match structure.

Each group has 4 teams identified by draw position (1-4) and plays 6 matches,
two per match day, in FIFA's official order.
"""

from typing import Dict, List, Tuple

ALL_GROUPS: List[str] = list("ABCDEFGHIJKL")

# match_number -> (team A draw position, team B draw position, match day)
GROUP_MATCH_STRUCTURE: Dict[int, Tuple[int, int, int]] = {
    1: (1, 2, 1),
    2: (3, 4, 1),
    3: (1, 3, 2),
    4: (2, 4, 2),
    5: (1, 4, 3),
    6: (2, 3, 3),
}

MATCHES_PER_GROUP = len(GROUP_MATCH_STRUCTURE)


def is_valid_group_letter(group_letter: str) -> bool:
    return group_letter in ALL_GROUPS


def get_match_positions(match_number: int) -> Tuple[int, int]:
    """Return the draw positions (team A, team B) playing a group match."""
    team_a, team_b, _ = GROUP_MATCH_STRUCTURE[match_number]
    return team_a, team_b
