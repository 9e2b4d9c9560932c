import logging
from datetime import datetime, UTC
from typing import Dict, List, Optional, Sequence, Tuple
from sqlmodel import Session

from worldcup_predictor.engine.tiebreak import GroupStandingsResult, TiebreakerDecision
from worldcup_predictor.exceptions import InvalidTiebreakerDecisionError, StaleGroupVersionError
from worldcup_predictor.models.group_score import GroupMatchScore
from worldcup_predictor.models.tiebreaker import GroupTiebreaker, tied_key_for
from worldcup_predictor.services.knockout import prune_knockout_picks
from worldcup_predictor.services.standings import (
    calculate_group_standings,
    get_score_rows,
    get_tiebreakers,
    to_decision,
)

logger = logging.getLogger(__name__)


class GroupSaveResult:
    def __init__(
        self,
        standings: GroupStandingsResult,
        version: int,
        changed: bool,
        tiebreaker_cleared: bool = False,
        cleared_picks: Optional[List[str]] = None
    ):
        self.standings = standings
        self.version = version
        self.changed = changed
        self.tiebreaker_cleared = tiebreaker_cleared
        self.cleared_picks = cleared_picks or []


def save_group_scores(
    db: Session,
    set_id: int,
    group_letter: str,
    scores: Dict[int, Tuple[Optional[int], Optional[int]]],
    expected_version: Optional[int] = None
) -> GroupSaveResult:
    """
    Store a group's scores in one transaction.

    Any score change deletes the group's tiebreaker decisions (they were made
    for the old numbers) and drops knockout picks that no longer hold.

    Raises:
        StaleGroupVersionError: expected_version is given and another write
            happened since it was read
    """
    rows = {row.match_number: row for row in get_score_rows(db, set_id, group_letter)}
    current_version = max((row.version for row in rows.values()), default=0)

    if expected_version is not None and expected_version != current_version:
        logger.warning(
            "Set %s group %s: stale save (expected version %s, current %s)",
            set_id, group_letter, expected_version, current_version
        )
        raise StaleGroupVersionError(group_letter, expected_version, current_version)

    changed = any(
        number not in rows or (rows[number].score_a, rows[number].score_b) != score
        for number, score in scores.items()
    )
    if not changed:
        standings = calculate_group_standings(db, set_id, group_letter)
        return GroupSaveResult(standings, current_version, changed=False)

    new_version = current_version + 1
    now = datetime.now(UTC)

    for number, (score_a, score_b) in scores.items():
        row = rows.get(number)
        if row is None:
            row = GroupMatchScore(
                prediction_set_id=set_id,
                group_letter=group_letter,
                match_number=number
            )
            rows[number] = row
        row.score_a = score_a
        row.score_b = score_b
        row.updated_at = now

    for row in rows.values():
        row.version = new_version
        db.add(row)

    tiebreaker_cleared = False
    for stored in get_tiebreakers(db, set_id, group_letter):
        db.delete(stored)
        tiebreaker_cleared = True
    if tiebreaker_cleared:
        logger.info("Set %s group %s: scores changed, tiebreaker decisions cleared", set_id, group_letter)

    cleared_picks = prune_knockout_picks(db, set_id)
    db.commit()

    logger.info("Set %s group %s: saved scores (version %s)", set_id, group_letter, new_version)

    standings = calculate_group_standings(db, set_id, group_letter)
    return GroupSaveResult(standings, new_version, True, tiebreaker_cleared, cleared_picks)


def save_tiebreaker(
    db: Session,
    set_id: int,
    group_letter: str,
    tied_team_ids: Sequence[int],
    resolved_order: Sequence[int]
) -> Tuple[GroupStandingsResult, List[str]]:
    """
    Store a manual order for one of the group's unresolvable ties.

    The tie is checked against the standings with the group's other stored
    decisions applied, so a second tied block can be decided after the first.
    Deciding a block again replaces its previous order.

    Raises:
        InvalidTiebreakerDecisionError: the order is malformed or the teams
            are not a block the cascade currently reports as tied
    """
    decision = TiebreakerDecision(tied_team_ids, resolved_order, group_letter=group_letter)
    decision.validate()
    key = tied_key_for(decision.tied_team_ids)

    stored_rows = get_tiebreakers(db, set_id, group_letter)
    others = [to_decision(row) for row in stored_rows if row.tied_key != key]

    undecided = calculate_group_standings(db, set_id, group_letter, decisions=others)
    if not any(decision.applies_to(tie.team_ids) for tie in undecided.unresolved_ties):
        raise InvalidTiebreakerDecisionError(
            f"Group {group_letter} has no unresolvable tie between teams {sorted(tied_team_ids)}"
        )

    stored = next((row for row in stored_rows if row.tied_key == key), None)
    if stored is None:
        stored = GroupTiebreaker(prediction_set_id=set_id, group_letter=group_letter, tied_key=key)
    stored.tied_team_ids = list(decision.tied_team_ids)
    stored.resolved_order = list(decision.resolved_order)
    db.add(stored)

    cleared_picks = prune_knockout_picks(db, set_id)
    db.commit()

    logger.info("Set %s group %s: tiebreaker stored %s", set_id, group_letter, decision.resolved_order)
    return calculate_group_standings(db, set_id, group_letter), cleared_picks


def delete_tiebreaker(db: Session, set_id: int, group_letter: str) -> Tuple[bool, List[str]]:
    """Remove every stored decision of the group."""
    stored_rows = get_tiebreakers(db, set_id, group_letter)
    if not stored_rows:
        return False, []

    for stored in stored_rows:
        db.delete(stored)
    cleared_picks = prune_knockout_picks(db, set_id)
    db.commit()

    logger.info("Set %s group %s: %d tiebreaker decision(s) removed", set_id, group_letter, len(stored_rows))
    return True, cleared_picks
