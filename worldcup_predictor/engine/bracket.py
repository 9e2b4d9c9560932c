"""
Knockout bracket structure (M73-M104) and winner propagation.

Each match names where its two teams come from: a group position, a
third-place slot filled through the official combination table, or the
winner/loser of an earlier match. Picks are kept as match id -> winning team
id; a team only reaches a match once every upstream pick is in place.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from worldcup_predictor.exceptions import UnknownMatchError
from worldcup_predictor.engine.group_matches import ALL_GROUPS
from worldcup_predictor.engine.third_place import ThirdPlaceResult, rank_third_places
from worldcup_predictor.engine.tiebreak import GroupStandingsResult

logger = logging.getLogger(__name__)

ROUND_OF_32 = "round_of_32"
ROUND_OF_16 = "round_of_16"
QUARTER_FINAL = "quarter_final"
SEMI_FINAL = "semi_final"
THIRD_PLACE = "third_place"
FINAL = "final"

ROUND_ORDER = [ROUND_OF_32, ROUND_OF_16, QUARTER_FINAL, SEMI_FINAL, THIRD_PLACE, FINAL]

REASON_SLOTS_NOT_READY = "slots_not_ready"
REASON_TEAM_NOT_IN_MATCH = "team_not_in_match"


class SlotSource:
    GROUP_POSITION = "group_position"
    THIRD_PLACE = "third_place"
    WINNER = "winner"
    LOSER = "loser"

    def __init__(self, kind: str, ref: str):
        self.kind = kind
        self.ref = ref

    @classmethod
    def group(cls, key: str) -> "SlotSource":
        return cls(cls.GROUP_POSITION, key)

    @classmethod
    def third(cls, pool: str) -> "SlotSource":
        return cls(cls.THIRD_PLACE, pool)

    @classmethod
    def winner(cls, match_id: str) -> "SlotSource":
        return cls(cls.WINNER, match_id)

    @classmethod
    def loser(cls, match_id: str) -> "SlotSource":
        return cls(cls.LOSER, match_id)

    @property
    def upstream_match(self) -> Optional[str]:
        if self.kind in (self.WINNER, self.LOSER):
            return self.ref
        return None

    @property
    def label(self) -> str:
        if self.kind == self.GROUP_POSITION:
            return self.ref
        if self.kind == self.THIRD_PLACE:
            return f"3{self.ref}"
        prefix = "W" if self.kind == self.WINNER else "L"
        return f"{prefix}{self.ref[1:]}"

    def __repr__(self):
        return f"SlotSource({self.kind}, {self.ref})"


class BracketMatch:
    def __init__(self, match_id: str, round: str, slot_a: SlotSource, slot_b: SlotSource, label: Optional[str] = None):
        self.match_id = match_id
        self.round = round
        self.slot_a = slot_a
        self.slot_b = slot_b
        self.label = label

    @property
    def match_number(self) -> int:
        return int(self.match_id[1:])

    @property
    def slots(self) -> Tuple[SlotSource, SlotSource]:
        return self.slot_a, self.slot_b

    @property
    def upstream(self) -> List[str]:
        return [slot.upstream_match for slot in self.slots if slot.upstream_match]


def _r32(match_id: str, slot_a: str, slot_b: str) -> BracketMatch:
    def source(key: str) -> SlotSource:
        if key.startswith("3"):
            return SlotSource.third(key[1:])
        return SlotSource.group(key)
    return BracketMatch(match_id, ROUND_OF_32, source(slot_a), source(slot_b))


def _next(match_id: str, round: str, from_a: str, from_b: str, label: Optional[str] = None) -> BracketMatch:
    return BracketMatch(match_id, round, SlotSource.winner(from_a), SlotSource.winner(from_b), label)


_MATCHES = [
    # Round of 32
    _r32("M73", "2A", "2B"),
    _r32("M74", "1E", "3ABCDF"),
    _r32("M75", "1F", "2C"),
    _r32("M76", "1C", "2F"),
    _r32("M77", "1I", "3CDFGH"),
    _r32("M78", "2E", "2I"),
    _r32("M79", "1A", "3CEFHI"),
    _r32("M80", "1L", "3EHIJK"),
    _r32("M81", "1D", "3BEFIJ"),
    _r32("M82", "1G", "3AEHIJ"),
    _r32("M83", "2K", "2L"),
    _r32("M84", "1H", "2J"),
    _r32("M85", "1B", "3EFGIJ"),
    _r32("M86", "1J", "2H"),
    _r32("M87", "1K", "3DEIJL"),
    _r32("M88", "2D", "2G"),
    # Round of 16
    _next("M89", ROUND_OF_16, "M74", "M77"),
    _next("M90", ROUND_OF_16, "M73", "M75"),
    _next("M91", ROUND_OF_16, "M76", "M78"),
    _next("M92", ROUND_OF_16, "M79", "M80"),
    _next("M93", ROUND_OF_16, "M83", "M84"),
    _next("M94", ROUND_OF_16, "M81", "M82"),
    _next("M95", ROUND_OF_16, "M86", "M88"),
    _next("M96", ROUND_OF_16, "M85", "M87"),
    # Quarter finals
    _next("M97", QUARTER_FINAL, "M89", "M90", "QF1"),
    _next("M98", QUARTER_FINAL, "M93", "M94", "QF2"),
    _next("M99", QUARTER_FINAL, "M91", "M92", "QF3"),
    _next("M100", QUARTER_FINAL, "M95", "M96", "QF4"),
    # Semi finals
    _next("M101", SEMI_FINAL, "M97", "M98", "SF1"),
    _next("M102", SEMI_FINAL, "M99", "M100", "SF2"),
    # Third place and final
    BracketMatch("M103", THIRD_PLACE, SlotSource.loser("M101"), SlotSource.loser("M102"), "3rd Place"),
    BracketMatch("M104", FINAL, SlotSource.winner("M101"), SlotSource.winner("M102"), "Final"),
]

# Definition order is topological: every match comes after its upstream matches
BRACKET: Dict[str, BracketMatch] = {match.match_id: match for match in _MATCHES}


def _build_dependents() -> Dict[str, List[str]]:
    dependents: Dict[str, List[str]] = {match_id: [] for match_id in BRACKET}
    for match in BRACKET.values():
        for upstream in match.upstream:
            dependents[upstream].append(match.match_id)
    return dependents


DEPENDENTS: Dict[str, List[str]] = _build_dependents()


def get_bracket_match(match_id: str) -> BracketMatch:
    match = BRACKET.get(match_id)
    if match is None:
        raise UnknownMatchError(match_id)
    return match


def get_downstream_matches(match_id: str) -> List[str]:
    """All matches that transitively take a team from `match_id`, in bracket order."""
    get_bracket_match(match_id)
    seen = set()
    stack = list(DEPENDENTS[match_id])
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        stack.extend(DEPENDENTS[current])
    return [m for m in BRACKET if m in seen]


class WinnerRecordResult:
    def __init__(self, accepted: bool, reason: Optional[str] = None, cleared: Optional[List[str]] = None):
        self.accepted = accepted
        self.reason = reason
        self.cleared = cleared or []

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "reason": self.reason,
            "cleared": self.cleared,
        }


class KnockoutBracket:
    """
    Bracket state for one set of picks.

    Args:
        qualifiers: placeholder -> team id, e.g. {"1A": 12, "2A": 7, "3A": 3};
            a missing or None entry means that group position is not settled
        third_place_assignments: round-of-32 match id -> group letter of the
            third-placed team playing there (empty until the 8 are known)
        winners: match id -> recorded winning team id
    """

    def __init__(
        self,
        qualifiers: Optional[Mapping[str, Optional[int]]] = None,
        third_place_assignments: Optional[Mapping[str, str]] = None,
        winners: Optional[Mapping[str, int]] = None
    ):
        self.qualifiers = dict(qualifiers or {})
        self.third_place_assignments = dict(third_place_assignments or {})
        self.winners: Dict[str, int] = dict(winners or {})

    def _resolve_slot(self, match: BracketMatch, source: SlotSource) -> Optional[int]:
        if source.kind == SlotSource.GROUP_POSITION:
            return self.qualifiers.get(source.ref)

        if source.kind == SlotSource.THIRD_PLACE:
            group = self.third_place_assignments.get(match.match_id)
            if group is None:
                return None
            return self.qualifiers.get(f"3{group}")

        winner, loser = self.outcome(source.ref)
        return winner if source.kind == SlotSource.WINNER else loser

    def resolve(self, match_id: str) -> Tuple[Optional[int], Optional[int]]:
        """Team ids occupying the two slots of a match (None while unresolved)."""
        match = get_bracket_match(match_id)
        return self._resolve_slot(match, match.slot_a), self._resolve_slot(match, match.slot_b)

    def outcome(self, match_id: str) -> Tuple[Optional[int], Optional[int]]:
        """(winner, loser) of a match, only when its pick is still valid."""
        team_a, team_b = self.resolve(match_id)
        winner = self.winners.get(match_id)
        if team_a is None or team_b is None or winner not in (team_a, team_b):
            return None, None
        return winner, (team_b if winner == team_a else team_a)

    def is_playable(self, match_id: str) -> bool:
        team_a, team_b = self.resolve(match_id)
        return team_a is not None and team_b is not None

    def playable_matches(self) -> List[str]:
        return [match_id for match_id in BRACKET if self.is_playable(match_id)]

    def record_winner(self, match_id: str, team_id: int) -> WinnerRecordResult:
        """
        Record `team_id` as the winner of `match_id`.

        Rejected when the match does not have both teams yet or the team is not
        one of them. Changing an existing pick clears every downstream pick.
        """
        team_a, team_b = self.resolve(match_id)
        if team_a is None or team_b is None:
            return WinnerRecordResult(False, REASON_SLOTS_NOT_READY)
        if team_id not in (team_a, team_b):
            return WinnerRecordResult(False, REASON_TEAM_NOT_IN_MATCH)

        previous = self.winners.get(match_id)
        cleared: List[str] = []
        if previous is not None and previous != team_id:
            cleared = self.invalidate_downstream(match_id)

        self.winners[match_id] = team_id
        return WinnerRecordResult(True, cleared=cleared)

    def clear_winner(self, match_id: str) -> List[str]:
        """Remove the pick for `match_id` and every pick depending on it."""
        get_bracket_match(match_id)
        cleared = []
        if self.winners.pop(match_id, None) is not None:
            cleared.append(match_id)
        cleared.extend(self.invalidate_downstream(match_id))
        return cleared

    def invalidate_downstream(self, match_id: str) -> List[str]:
        """Clear the picks of all matches fed by `match_id`; return their ids."""
        cleared = []
        for downstream in get_downstream_matches(match_id):
            if self.winners.pop(downstream, None) is not None:
                cleared.append(downstream)
        if cleared:
            logger.debug("Cleared picks downstream of %s: %s", match_id, cleared)
        return cleared

    def prune_invalid_winners(self) -> List[str]:
        """
        Drop picks whose team no longer plays in that match, e.g. after group
        results changed, together with everything downstream of them.
        """
        cleared: List[str] = []
        for match_id in BRACKET:
            winner = self.winners.get(match_id)
            if winner is None:
                continue
            if winner in self.resolve(match_id) and self.is_playable(match_id):
                continue
            del self.winners[match_id]
            cleared.append(match_id)
            cleared.extend(self.invalidate_downstream(match_id))
        return cleared

    def match_to_dict(self, match_id: str) -> dict:
        match = get_bracket_match(match_id)
        team_a, team_b = self.resolve(match_id)
        winner, loser = self.outcome(match_id)
        return {
            "match_id": match.match_id,
            "match_number": match.match_number,
            "round": match.round,
            "label": match.label,
            "slot_a": {"source": match.slot_a.label, "team_id": team_a},
            "slot_b": {"source": match.slot_b.label, "team_id": team_b},
            "playable": team_a is not None and team_b is not None,
            "winner_team_id": winner,
            "loser_team_id": loser,
        }

    def to_dict(self) -> dict:
        rounds: Dict[str, List[dict]] = {round_name: [] for round_name in ROUND_ORDER}
        for match in BRACKET.values():
            rounds[match.round].append(self.match_to_dict(match.match_id))
        return rounds


def build_qualifiers(group_results: Mapping[str, GroupStandingsResult]) -> Dict[str, Optional[int]]:
    """Map settled group positions 1-3 to placeholders like "1A", "2A", "3A"."""
    qualifiers: Dict[str, Optional[int]] = {}
    for group in ALL_GROUPS:
        result = group_results.get(group)
        for position in (1, 2, 3):
            key = f"{position}{group}"
            if result is not None and result.is_position_settled(position):
                qualifiers[key] = result.team_at(position).team_id
            else:
                qualifiers[key] = None
    return qualifiers


def rank_group_third_places(group_results: Mapping[str, GroupStandingsResult]) -> ThirdPlaceResult:
    """Feed the settled 3rd-placed record of every group to the third-place ranker."""
    third_records = {}
    for group in ALL_GROUPS:
        result = group_results.get(group)
        if result is not None and result.is_position_settled(3):
            third_records[group] = result.team_at(3)
        else:
            third_records[group] = None
    return rank_third_places(third_records)


def build_bracket(
    group_results: Mapping[str, GroupStandingsResult],
    winners: Optional[Mapping[str, int]] = None
) -> Tuple[KnockoutBracket, ThirdPlaceResult]:
    """Populate the round of 32 from group results and apply recorded picks."""
    third_places = rank_group_third_places(group_results)
    assignments = third_places.combination.match_assignments if third_places.is_valid else {}
    bracket = KnockoutBracket(build_qualifiers(group_results), assignments, winners)
    return bracket, third_places
