"""
Group ranking with the tiebreak cascade used for World Cup 2026 groups.

Criteria, applied at each position boundary:
  1) Points
  2) Goal difference
  3) Goals scored
  4) Head-to-head: the same criteria 1-3 reapplied to a mini-table built only
     from the matches between the still-tied teams (recursively, so a partial
     separation reapplies the cascade to the smaller tied subset)
  5) Otherwise the tie is unresolvable and needs a manual order

Disciplinary points and FIFA ranking are not modeled, so the cascade stops at
head-to-head and reports the tie instead of guessing.
"""

import logging
from itertools import groupby
from typing import Any, Dict, List, Mapping, Optional, Sequence

from worldcup_predictor.exceptions import InvalidTiebreakerDecisionError
from worldcup_predictor.engine.standings import (
    ScorePair,
    TeamRecord,
    calculate_team_records,
    count_completed_matches,
)
from worldcup_predictor.engine.group_matches import MATCHES_PER_GROUP

logger = logging.getLogger(__name__)

HEAD_TO_HEAD = "head_to_head"


class TiebreakerDecision:
    """A manual order for teams the cascade could not separate."""

    def __init__(
        self,
        tied_team_ids: Sequence[int],
        resolved_order: Sequence[int],
        group_letter: Optional[str] = None
    ):
        self.group_letter = group_letter
        self.tied_team_ids = list(tied_team_ids)
        self.resolved_order = list(resolved_order)

    def validate(self) -> None:
        if len(self.tied_team_ids) < 2:
            raise InvalidTiebreakerDecisionError("A tiebreaker needs at least 2 tied teams")
        if len(set(self.tied_team_ids)) != len(self.tied_team_ids):
            raise InvalidTiebreakerDecisionError("Tied team ids must be unique")
        if sorted(self.resolved_order) != sorted(self.tied_team_ids):
            raise InvalidTiebreakerDecisionError(
                "Resolved order must be a permutation of the tied team ids"
            )

    def applies_to(self, team_ids: Sequence[int]) -> bool:
        return set(self.tied_team_ids) == set(team_ids)

    def to_dict(self) -> dict:
        return {
            "group_letter": self.group_letter,
            "tied_team_ids": self.tied_team_ids,
            "resolved_order": self.resolved_order,
        }


class UnresolvableTie:
    """Teams still level after the whole cascade, starting at `position`."""

    def __init__(self, team_ids: List[int], position: int, reason: str, criterion: str = HEAD_TO_HEAD):
        self.team_ids = team_ids
        self.position = position
        self.reason = reason
        self.criterion = criterion

    @property
    def positions(self) -> List[int]:
        return list(range(self.position, self.position + len(self.team_ids)))

    def spans(self, position: int) -> bool:
        return position in self.positions

    def to_dict(self) -> dict:
        return {
            "team_ids": self.team_ids,
            "position": self.position,
            "positions": self.positions,
            "reason": self.reason,
            "criterion": self.criterion,
        }


class GroupStandingsResult:
    """Final order of a group plus completeness and tie information."""

    def __init__(
        self,
        standings: List[TeamRecord],
        is_complete: bool,
        completed_matches: int,
        unresolved_ties: Optional[List[UnresolvableTie]] = None,
        decision_applied: bool = False,
        group_letter: Optional[str] = None
    ):
        self.group_letter = group_letter
        self.standings = standings
        self.is_complete = is_complete
        self.completed_matches = completed_matches
        # Every block still level after the cascade, top block first
        self.unresolved_ties = unresolved_ties or []
        self.decision_applied = decision_applied

    @property
    def unresolvable_tie(self) -> Optional[UnresolvableTie]:
        """The highest unresolved block; the one a manual order is asked for first."""
        return self.unresolved_ties[0] if self.unresolved_ties else None

    def team_at(self, position: int) -> Optional[TeamRecord]:
        if 1 <= position <= len(self.standings):
            return self.standings[position - 1]
        return None

    def is_position_settled(self, position: int) -> bool:
        """True when the team at `position` is final and authoritative."""
        if not self.is_complete or self.team_at(position) is None:
            return False
        return not any(tie.spans(position) for tie in self.unresolved_ties)

    @property
    def is_final(self) -> bool:
        return self.is_complete and not self.unresolved_ties

    def to_dict(self) -> dict:
        return {
            "group_letter": self.group_letter,
            "standings": [record.to_dict() for record in self.standings],
            "is_complete": self.is_complete,
            "completed_matches": self.completed_matches,
            "total_matches": MATCHES_PER_GROUP,
            "unresolvable_tie": self.unresolvable_tie.to_dict() if self.unresolvable_tie else None,
            "unresolved_ties": [tie.to_dict() for tie in self.unresolved_ties],
            "decision_applied": self.decision_applied,
        }


def _tie_reason(block: List[TeamRecord]) -> str:
    names = ", ".join(record.team.name for record in block)
    if any(record.played == 0 for record in block):
        return (
            f"{names} are level on points, goal difference and goals scored, "
            f"and the head-to-head matches between them have not all been played"
        )
    return (
        f"{names} are level on points, goal difference, goals scored "
        f"and head-to-head results"
    )


class _Cascade:
    """One run of the cascade over a group; collects ties as it recurses."""

    def __init__(
        self,
        teams: Sequence[Any],
        scores: Mapping[int, ScorePair],
        decisions: Sequence[TiebreakerDecision]
    ):
        self.teams = teams
        self.scores = scores
        self.decisions = decisions
        self.decision_applied = False
        self.ties: List[List[TeamRecord]] = []

    def order(self, team_ids: set, head_to_head: bool) -> List[int]:
        records = calculate_team_records(
            self.teams,
            self.scores,
            only_team_ids=team_ids if head_to_head else None
        )
        # Stable sort keeps draw order among teams that stay level
        records.sort(key=TeamRecord.sort_key, reverse=True)

        ordered: List[int] = []
        for _, group in groupby(records, key=TeamRecord.sort_key):
            block = list(group)
            block_ids = [record.team_id for record in block]

            if len(block) == 1:
                ordered.extend(block_ids)
            elif head_to_head and set(block_ids) == team_ids:
                ordered.extend(self._settle(block))
            else:
                ordered.extend(self.order(set(block_ids), head_to_head=True))

        return ordered

    def _settle(self, block: List[TeamRecord]) -> List[int]:
        block_ids = [record.team_id for record in block]

        for decision in self.decisions:
            if decision.applies_to(block_ids):
                self.decision_applied = True
                return list(decision.resolved_order)

        self.ties.append(block)
        return block_ids


def resolve_group_standings(
    teams: Sequence[Any],
    scores: Mapping[int, ScorePair],
    decisions: Optional[Sequence[TiebreakerDecision]] = None,
    group_letter: Optional[str] = None
) -> GroupStandingsResult:
    """
    Order a group's 4 teams from its match scores.

    Args:
        teams: The group's teams in draw order
        scores: match_number (1-6) -> (score team A, score team B)
        decisions: Stored manual orders for this group, at most one per tied block
        group_letter: Echoed back on the result

    Returns:
        GroupStandingsResult with positions 1-4 assigned
    """
    records_by_id: Dict[int, TeamRecord] = {
        record.team_id: record for record in calculate_team_records(teams, scores)
    }

    cascade = _Cascade(teams, scores, decisions or [])
    ordered_ids = cascade.order(set(records_by_id), head_to_head=False)

    standings = [records_by_id[team_id] for team_id in ordered_ids]
    for index, record in enumerate(standings):
        record.position = index + 1

    unresolved_ties: List[UnresolvableTie] = []
    for block in cascade.ties:
        tied_ids = [record.team_id for record in block]
        tie = UnresolvableTie(
            team_ids=tied_ids,
            position=ordered_ids.index(tied_ids[0]) + 1,
            reason=_tie_reason(block),
        )
        unresolved_ties.append(tie)
        logger.debug(
            "Group %s: unresolvable tie at position %d between %s",
            group_letter or "?", tie.position, tied_ids
        )

    completed = count_completed_matches(scores)

    return GroupStandingsResult(
        standings=standings,
        is_complete=completed == MATCHES_PER_GROUP,
        completed_matches=completed,
        unresolved_ties=unresolved_ties,
        decision_applied=cascade.decision_applied,
        group_letter=group_letter,
    )
