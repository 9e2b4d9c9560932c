from typing import Dict, List, Optional, Tuple
from sqlmodel import Session, select

from worldcup_predictor.engine.group_matches import ALL_GROUPS, GROUP_MATCH_STRUCTURE
from worldcup_predictor.engine.tiebreak import GroupStandingsResult, TiebreakerDecision, resolve_group_standings
from worldcup_predictor.models.team import Team
from worldcup_predictor.models.group_score import GroupMatchScore
from worldcup_predictor.models.tiebreaker import GroupTiebreaker


def get_group_teams(db: Session, group_letter: str) -> List[Team]:
    """
    Teams of a group in draw order, with playoff placeholders replaced by the
    playoff winner once it is known.
    """
    statement = select(Team).where(Team.group_letter == group_letter).order_by(Team.group_position, Team.id)
    teams = db.exec(statement).all()

    resolved = []
    for team in teams:
        if team.is_playoff_slot and team.playoff_winner_id:
            winner = db.get(Team, team.playoff_winner_id)
            if winner:
                resolved.append(winner)
                continue
        resolved.append(team)
    return resolved


def get_score_rows(db: Session, set_id: int, group_letter: str) -> List[GroupMatchScore]:
    statement = select(GroupMatchScore).where(
        GroupMatchScore.prediction_set_id == set_id,
        GroupMatchScore.group_letter == group_letter
    ).order_by(GroupMatchScore.match_number)
    return list(db.exec(statement).all())


def get_group_scores(db: Session, set_id: int, group_letter: str) -> Dict[int, Tuple[Optional[int], Optional[int]]]:
    """Snapshot of match_number -> (score_a, score_b) for one group."""
    return {
        row.match_number: (row.score_a, row.score_b)
        for row in get_score_rows(db, set_id, group_letter)
        if row.match_number in GROUP_MATCH_STRUCTURE
    }


def get_group_version(db: Session, set_id: int, group_letter: str) -> int:
    rows = get_score_rows(db, set_id, group_letter)
    return max((row.version for row in rows), default=0)


def get_tiebreakers(db: Session, set_id: int, group_letter: str) -> List[GroupTiebreaker]:
    statement = select(GroupTiebreaker).where(
        GroupTiebreaker.prediction_set_id == set_id,
        GroupTiebreaker.group_letter == group_letter
    ).order_by(GroupTiebreaker.id)
    return list(db.exec(statement).all())


def to_decision(stored: GroupTiebreaker) -> TiebreakerDecision:
    return TiebreakerDecision(stored.tied_team_ids, stored.resolved_order, group_letter=stored.group_letter)


def get_tiebreaker_decisions(db: Session, set_id: int, group_letter: str) -> List[TiebreakerDecision]:
    return [to_decision(stored) for stored in get_tiebreakers(db, set_id, group_letter)]


def calculate_group_standings(
    db: Session,
    set_id: int,
    group_letter: str,
    decisions: Optional[List[TiebreakerDecision]] = None
) -> GroupStandingsResult:
    """
    Standings of one group for a prediction set.

    Uses the group's stored tiebreaker decisions unless `decisions` is given.
    """
    teams = get_group_teams(db, group_letter)
    scores = get_group_scores(db, set_id, group_letter)
    if decisions is None:
        decisions = get_tiebreaker_decisions(db, set_id, group_letter)
    return resolve_group_standings(teams, scores, decisions=decisions, group_letter=group_letter)


def calculate_all_groups(db: Session, set_id: int) -> Dict[str, GroupStandingsResult]:
    return {group: calculate_group_standings(db, set_id, group) for group in ALL_GROUPS}
