import logging
from datetime import datetime, UTC
from typing import Any, Dict, Iterable, List, Optional, Tuple
from sqlmodel import Session, select

from worldcup_predictor.engine.bracket import KnockoutBracket, WinnerRecordResult, build_bracket
from worldcup_predictor.engine.third_place import ThirdPlaceResult
from worldcup_predictor.models.team import Team
from worldcup_predictor.models.knockout_pick import KnockoutPick
from worldcup_predictor.services.standings import calculate_all_groups

logger = logging.getLogger(__name__)


def get_picks(db: Session, set_id: int) -> Dict[str, KnockoutPick]:
    statement = select(KnockoutPick).where(KnockoutPick.prediction_set_id == set_id)
    return {pick.match_id: pick for pick in db.exec(statement).all()}


def load_bracket(db: Session, set_id: int) -> Tuple[KnockoutBracket, ThirdPlaceResult]:
    """Build the bracket from the set's group results and stored picks."""
    winners = {match_id: pick.winner_team_id for match_id, pick in get_picks(db, set_id).items()}
    return build_bracket(calculate_all_groups(db, set_id), winners)


def _delete_picks(db: Session, set_id: int, match_ids: Iterable[str]) -> None:
    match_ids = list(match_ids)
    if not match_ids:
        return
    statement = select(KnockoutPick).where(
        KnockoutPick.prediction_set_id == set_id,
        KnockoutPick.match_id.in_(match_ids)
    )
    for pick in db.exec(statement).all():
        db.delete(pick)


def prune_knockout_picks(db: Session, set_id: int) -> List[str]:
    """
    Delete picks whose team no longer reaches that match.
    Does not commit; callers run it inside their own transaction.
    """
    db.flush()
    bracket, _ = load_bracket(db, set_id)
    cleared = bracket.prune_invalid_winners()
    if cleared:
        _delete_picks(db, set_id, cleared)
        logger.info("Set %s: invalidated knockout picks %s", set_id, cleared)
    return cleared


def record_knockout_winner(
    db: Session,
    set_id: int,
    match_id: str,
    team_id: int,
    score_a: Optional[int] = None,
    score_b: Optional[int] = None
) -> WinnerRecordResult:
    """Validate and store a winner pick; rejected picks write nothing."""
    bracket, _ = load_bracket(db, set_id)
    result = bracket.record_winner(match_id, team_id)
    if not result.accepted:
        logger.info("Set %s: rejected winner %s for %s (%s)", set_id, team_id, match_id, result.reason)
        return result

    _delete_picks(db, set_id, result.cleared)

    pick = get_picks(db, set_id).get(match_id)
    if pick:
        pick.winner_team_id = team_id
        pick.score_a = score_a
        pick.score_b = score_b
        pick.updated_at = datetime.now(UTC)
    else:
        pick = KnockoutPick(
            prediction_set_id=set_id,
            match_id=match_id,
            winner_team_id=team_id,
            score_a=score_a,
            score_b=score_b
        )
    db.add(pick)
    db.commit()

    logger.info("Set %s: recorded %s as winner of %s, cleared %s", set_id, team_id, match_id, result.cleared)
    return result


def clear_knockout_winner(db: Session, set_id: int, match_id: str) -> List[str]:
    bracket, _ = load_bracket(db, set_id)
    cleared = bracket.clear_winner(match_id)
    _delete_picks(db, set_id, cleared)
    db.commit()

    if cleared:
        logger.info("Set %s: cleared knockout picks %s", set_id, cleared)
    return cleared


def _team_summary(team: Optional[Team]) -> Optional[Dict[str, Any]]:
    if not team:
        return None
    return {
        "id": team.id,
        "name": team.name,
        "code": team.code,
        "flag_url": team.flag_url,
    }


def get_bracket_view(db: Session, set_id: int) -> Dict[str, Any]:
    """Bracket for display: every match with its teams and recorded winner."""
    bracket, third_places = load_bracket(db, set_id)
    teams_map = {t.id: t for t in db.exec(select(Team)).all()}
    picks = get_picks(db, set_id)

    rounds = bracket.to_dict()
    for matches in rounds.values():
        for match in matches:
            match["slot_a"]["team"] = _team_summary(teams_map.get(match["slot_a"]["team_id"]))
            match["slot_b"]["team"] = _team_summary(teams_map.get(match["slot_b"]["team_id"]))
            pick = picks.get(match["match_id"])
            valid_pick = pick is not None and match["winner_team_id"] is not None
            match["score_a"] = pick.score_a if valid_pick else None
            match["score_b"] = pick.score_b if valid_pick else None

    return {
        "rounds": rounds,
        "playable_matches": bracket.playable_matches(),
        "third_place": {
            "status": third_places.status,
            "qualified_groups": third_places.qualified_groups if third_places.is_valid else None,
            "error": third_places.error.to_dict() if third_places.error else None,
        },
    }
