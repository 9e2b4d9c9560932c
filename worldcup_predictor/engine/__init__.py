"""
Pure tournament calculations: group standings, tiebreaks, third-place
ranking and the knockout bracket. Nothing in this package touches the
database.
"""

from .group_matches import ALL_GROUPS, GROUP_MATCH_STRUCTURE
from .standings import TeamRecord, calculate_team_records, is_group_complete
from .tiebreak import (
    GroupStandingsResult,
    TiebreakerDecision,
    UnresolvableTie,
    resolve_group_standings,
)
from .third_place import ThirdPlaceResult, rank_third_places
from .combinations import (
    ThirdPlaceCombination,
    find_third_place_combination,
    get_third_place_combination,
)
from .bracket import BRACKET, KnockoutBracket, build_bracket, build_qualifiers

__all__ = [
    "ALL_GROUPS",
    "GROUP_MATCH_STRUCTURE",
    "TeamRecord",
    "calculate_team_records",
    "is_group_complete",
    "GroupStandingsResult",
    "TiebreakerDecision",
    "UnresolvableTie",
    "resolve_group_standings",
    "ThirdPlaceResult",
    "rank_third_places",
    "ThirdPlaceCombination",
    "find_third_place_combination",
    "get_third_place_combination",
    "BRACKET",
    "KnockoutBracket",
    "build_bracket",
    "build_qualifiers",
]
