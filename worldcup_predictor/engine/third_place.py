"""
Ranking of the 12 third-placed teams to find the 8 that qualify.
"""

import logging
from typing import Dict, List, Mapping, Optional

from worldcup_predictor.exceptions import InvalidThirdPlaceCombinationError
from worldcup_predictor.engine.combinations import QUALIFYING_THIRD_PLACES, ThirdPlaceCombination, get_third_place_combination
from worldcup_predictor.engine.group_matches import ALL_GROUPS
from worldcup_predictor.engine.standings import TeamRecord

logger = logging.getLogger(__name__)

STATUS_INCOMPLETE = "incomplete"
STATUS_OK = "ok"
STATUS_INVALID_COMBINATION = "invalid_combination"


class RankedThirdPlace:
    def __init__(self, group_letter: str, record: TeamRecord, rank: int):
        self.group_letter = group_letter
        self.record = record
        self.rank = rank

    @property
    def qualifies(self) -> bool:
        return self.rank <= QUALIFYING_THIRD_PLACES

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data.update({
            "group": self.group_letter,
            "rank": self.rank,
            "qualifies": self.qualifies,
        })
        return data


class ThirdPlaceResult:
    def __init__(
        self,
        status: str,
        ranking: Optional[List[RankedThirdPlace]] = None,
        combination: Optional[ThirdPlaceCombination] = None,
        missing_groups: Optional[List[str]] = None,
        cutoff_tied: bool = False,
        error: Optional[InvalidThirdPlaceCombinationError] = None
    ):
        self.status = status
        self.ranking = ranking or []
        self.combination = combination
        self.missing_groups = missing_groups or []
        self.cutoff_tied = cutoff_tied
        self.error = error

    @property
    def is_valid(self) -> bool:
        return self.status == STATUS_OK

    @property
    def qualified_groups(self) -> str:
        return "".join(sorted(entry.group_letter for entry in self.ranking if entry.qualifies))

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "ranking": [entry.to_dict() for entry in self.ranking],
            "qualified_groups": self.qualified_groups if self.ranking else None,
            "combination": self.combination.to_dict() if self.combination else None,
            "missing_groups": self.missing_groups,
            "cutoff_tied": self.cutoff_tied,
            "error": self.error.to_dict() if self.error else None,
        }


def sort_third_places(third_records: Mapping[str, TeamRecord]) -> List[RankedThirdPlace]:
    """
    Rank third-placed teams by points, goal difference, goals scored.

    Teams from different groups never met, so there is no head-to-head step.
    Teams level on all three criteria are kept in group-letter order; this is
    a best-effort order, not FIFA's (fair play and ranking are not modeled).
    """
    ordered = sorted(
        third_records.items(),
        key=lambda item: (-item[1].points, -item[1].goal_difference, -item[1].goals_for, item[0])
    )
    return [
        RankedThirdPlace(group_letter, record, rank)
        for rank, (group_letter, record) in enumerate(ordered, start=1)
    ]


def rank_third_places(third_records: Mapping[str, Optional[TeamRecord]]) -> ThirdPlaceResult:
    """
    Select the 8 best third-placed teams and look up their bracket slots.

    Args:
        third_records: group letter -> record of its settled 3rd-placed team,
            or None while that group's 3rd place is not final

    Returns:
        ThirdPlaceResult; status "incomplete" until all 12 groups are in
    """
    available: Dict[str, TeamRecord] = {
        group: record for group, record in third_records.items() if record is not None
    }
    missing = [group for group in ALL_GROUPS if group not in available]

    ranking = sort_third_places(available)

    if missing:
        return ThirdPlaceResult(STATUS_INCOMPLETE, ranking=ranking, missing_groups=missing)

    cutoff_tied = False
    if len(ranking) > QUALIFYING_THIRD_PLACES:
        last_in = ranking[QUALIFYING_THIRD_PLACES - 1].record
        first_out = ranking[QUALIFYING_THIRD_PLACES].record
        cutoff_tied = last_in.sort_key() == first_out.sort_key()

    if cutoff_tied:
        logger.debug("Third-place cutoff is level on points, goal difference and goals scored")

    result = ThirdPlaceResult(STATUS_OK, ranking=ranking, cutoff_tied=cutoff_tied)
    try:
        result.combination = get_third_place_combination(result.qualified_groups)
    except InvalidThirdPlaceCombinationError as exc:
        result.status = STATUS_INVALID_COMBINATION
        result.error = exc

    return result
