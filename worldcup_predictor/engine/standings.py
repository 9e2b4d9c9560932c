"""
Group standings calculation from raw match scores.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from worldcup_predictor.engine.group_matches import GROUP_MATCH_STRUCTURE, MATCHES_PER_GROUP

ScorePair = Tuple[Optional[int], Optional[int]]


class TeamRecord:
    """Aggregate record of a team within its group."""

    def __init__(self, team: Any):
        self.team = team
        self.played = 0
        self.won = 0
        self.drawn = 0
        self.lost = 0
        self.goals_for = 0
        self.goals_against = 0
        self.points = 0
        self.position: Optional[int] = None

    @property
    def team_id(self) -> int:
        return self.team.id

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def sort_key(self) -> Tuple[int, int, int]:
        return (self.points, self.goal_difference, self.goals_for)

    def add_result(self, scored: int, conceded: int) -> None:
        self.played += 1
        self.goals_for += scored
        self.goals_against += conceded

        if scored > conceded:
            self.won += 1
            self.points += 3
        elif scored < conceded:
            self.lost += 1
        else:
            self.drawn += 1
            self.points += 1

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "position": self.position,
            "team_id": self.team.id,
            "team_name": self.team.name,
            "team_code": getattr(self.team, "code", None),
            "flag_url": getattr(self.team, "flag_url", None),
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }

    def __repr__(self):
        return f"{self.team.name}: {self.points}pts (GD: {self.goal_difference})"


def _is_goal_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_complete_score(score: Optional[ScorePair]) -> bool:
    """A match is complete when both scores are non-negative integers."""
    if not score:
        return False
    return _is_goal_count(score[0]) and _is_goal_count(score[1])


def count_completed_matches(scores: Mapping[int, ScorePair]) -> int:
    return sum(
        1 for number in GROUP_MATCH_STRUCTURE
        if is_complete_score(scores.get(number))
    )


def is_group_complete(scores: Mapping[int, ScorePair]) -> bool:
    return count_completed_matches(scores) == MATCHES_PER_GROUP


def iter_completed_matches(teams: Sequence[Any], scores: Mapping[int, ScorePair]):
    """
    Yield (team_a, team_b, goals_a, goals_b) for every completed match.

    `teams` is the group in draw order, so teams[0] is draw position 1.
    """
    for number, (pos_a, pos_b, _) in GROUP_MATCH_STRUCTURE.items():
        score = scores.get(number)
        if not is_complete_score(score):
            continue
        if pos_a > len(teams) or pos_b > len(teams):
            continue
        yield teams[pos_a - 1], teams[pos_b - 1], score[0], score[1]


def calculate_team_records(
    teams: Sequence[Any],
    scores: Mapping[int, ScorePair],
    only_team_ids: Optional[set] = None
) -> List[TeamRecord]:
    """
    Calculate aggregate records from the group's match scores.

    Args:
        teams: The group's teams in draw order (objects with `id` and `name`)
        scores: match_number (1-6) -> (score team A, score team B)
        only_team_ids: Restrict both the records and the counted matches to
            this subset of teams (head-to-head mini-table)

    Returns:
        One TeamRecord per team, in the order given
    """
    selected = [t for t in teams if only_team_ids is None or t.id in only_team_ids]
    records: Dict[int, TeamRecord] = {t.id: TeamRecord(t) for t in selected}

    for team_a, team_b, goals_a, goals_b in iter_completed_matches(teams, scores):
        if team_a.id not in records or team_b.id not in records:
            continue
        records[team_a.id].add_result(goals_a, goals_b)
        records[team_b.id].add_result(goals_b, goals_a)

    return [records[t.id] for t in selected]
