"""
Lookup of the round-of-32 slots for the eight best third-placed teams.
"""

import logging
from typing import Dict, Iterable, List, Optional

from worldcup_predictor.exceptions import InvalidThirdPlaceCombinationError
from worldcup_predictor.engine.combinations_data import COMPACT_COMBINATIONS, SLOT_COLUMNS

logger = logging.getLogger(__name__)

QUALIFYING_THIRD_PLACES = 8

# Round-of-32 match played by each group winner facing a third-placed team
SLOT_TO_MATCH: Dict[str, str] = {
    "1A": "M79",
    "1B": "M85",
    "1D": "M81",
    "1E": "M74",
    "1G": "M82",
    "1I": "M77",
    "1K": "M87",
    "1L": "M80",
}

# Groups whose third-placed team may land in each of those matches
THIRD_PLACE_POOLS: Dict[str, str] = {
    "M74": "ABCDF",
    "M77": "CDFGH",
    "M79": "CEFHI",
    "M80": "EHIJK",
    "M81": "BEFIJ",
    "M82": "AEHIJ",
    "M85": "EFGIJ",
    "M87": "DEIJL",
}


class ThirdPlaceCombination:
    """One row of the official table."""

    def __init__(self, option: int, compact: str):
        self.option = option
        self.compact = compact
        self.assignments: Dict[str, str] = dict(zip(SLOT_COLUMNS, compact))
        self.qualifying_groups = "".join(sorted(compact))

    @property
    def match_assignments(self) -> Dict[str, str]:
        """Round-of-32 match id -> group letter of the third-placed team."""
        return {SLOT_TO_MATCH[slot]: group for slot, group in self.assignments.items()}

    def to_dict(self) -> dict:
        return {
            "option": self.option,
            "qualifying_groups": self.qualifying_groups,
            "assignments": self.assignments,
            "match_assignments": self.match_assignments,
        }

    def __repr__(self):
        return f"ThirdPlaceCombination({self.option}, {self.qualifying_groups} -> {self.compact})"


_COMBINATIONS: List[ThirdPlaceCombination] = [
    ThirdPlaceCombination(index + 1, compact)
    for index, compact in enumerate(COMPACT_COMBINATIONS)
]

_BY_GROUPS: Dict[str, ThirdPlaceCombination] = {
    combination.qualifying_groups: combination for combination in _COMBINATIONS
}


def normalize_groups(groups: Iterable[str]) -> str:
    """Sorted, upper-cased group letters as a single string."""
    return "".join(sorted(letter.upper() for letter in groups))


def all_combinations() -> List[ThirdPlaceCombination]:
    return list(_COMBINATIONS)


def find_third_place_combination(groups: Iterable[str]) -> Optional[ThirdPlaceCombination]:
    """Return the combination for exactly these 8 groups, or None."""
    key = normalize_groups(groups)
    if len(key) != QUALIFYING_THIRD_PLACES:
        return None
    return _BY_GROUPS.get(key)


def get_third_place_combination(groups: Iterable[str]) -> ThirdPlaceCombination:
    """
    Return the combination for exactly these 8 groups.

    Raises:
        InvalidThirdPlaceCombinationError: no official entry matches. Valid
            group outcomes always produce one of the 495 entries, so this
            points at bad upstream data and must never fall back to a default.
    """
    groups = list(groups)
    combination = find_third_place_combination(groups)
    if combination is None:
        logger.warning("No third-place combination for groups %s", normalize_groups(groups))
        raise InvalidThirdPlaceCombinationError(groups)
    return combination
