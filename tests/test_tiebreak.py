import pytest

from worldcup_predictor.engine.tiebreak import TiebreakerDecision, resolve_group_standings
from worldcup_predictor.exceptions import InvalidTiebreakerDecisionError


def order(result):
    return [record.team_id for record in result.standings]


def test_distinct_records_give_full_order(group_teams):
    # A-B 2-1, C-D 0-0, A-C 1-1, B-D 3-0, A-D 2-0, B-C 1-2
    scores = {1: (2, 1), 2: (0, 0), 3: (1, 1), 4: (3, 0), 5: (2, 0), 6: (1, 2)}
    result = resolve_group_standings(group_teams, scores, group_letter="A")

    assert order(result) == [1, 3, 2, 4]
    assert [r.position for r in result.standings] == [1, 2, 3, 4]
    assert result.is_complete
    assert result.unresolvable_tie is None
    assert result.is_final


def test_goal_difference_separates_level_points(group_teams):
    # B and C on 4 pts; C has GD +2, B has GD 0
    scores = {1: (1, 0), 2: (3, 0), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (0, 0)}
    result = resolve_group_standings(group_teams, scores)

    assert order(result) == [1, 3, 2, 4]


def test_goals_scored_separates_level_goal_difference(group_teams):
    # B and C on 4 pts, GD 0; C scored 2, B scored 1
    scores = {1: (1, 0), 2: (2, 1), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (0, 0)}
    result = resolve_group_standings(group_teams, scores)

    assert order(result) == [1, 3, 2, 4]
    assert result.unresolvable_tie is None


def test_drawn_head_to_head_is_unresolvable(group_teams):
    # A and B: 5 pts, GD +1, GF 2 each, drew 1-1 with each other
    scores = {1: (1, 1), 2: (2, 0), 3: (1, 0), 4: (1, 0), 5: (0, 0), 6: (0, 0)}
    result = resolve_group_standings(group_teams, scores, group_letter="A")

    tie = result.unresolvable_tie
    assert tie is not None
    assert sorted(tie.team_ids) == [1, 2]
    assert tie.position == 1
    assert tie.positions == [1, 2]
    assert tie.criterion == "head_to_head"
    assert "Alpha" in tie.reason and "Bravo" in tie.reason

    # The rest of the group is still ordered
    assert order(result)[2:] == [3, 4]
    assert not result.is_position_settled(1)
    assert not result.is_position_settled(2)
    assert result.is_position_settled(3)
    assert not result.is_final


def test_three_way_tie_broken_by_mini_table(group_teams):
    # A, B, C all on 6 pts, GD +2, GF 4; each won one match between them,
    # and goal difference in those matches orders them A, C, B
    scores = {1: (2, 0), 2: (3, 1), 3: (0, 1), 4: (3, 0), 5: (2, 1), 6: (1, 0)}
    result = resolve_group_standings(group_teams, scores)

    assert order(result) == [1, 3, 2, 4]
    assert result.unresolvable_tie is None


def test_head_to_head_win_separates_pair(group_teams):
    # A and B on 4 pts, GD 0, GF 2; A beat B 1-0
    scores = {1: (1, 0), 2: (0, 0), 3: (0, 1), 4: (1, 0), 5: (1, 1), 6: (1, 1)}
    result = resolve_group_standings(group_teams, scores)

    assert order(result) == [3, 1, 2, 4]
    assert result.unresolvable_tie is None


def test_group_without_results_reports_full_tie(group_teams):
    result = resolve_group_standings(group_teams, {})

    assert not result.is_complete
    assert result.completed_matches == 0
    assert sorted(result.unresolvable_tie.team_ids) == [1, 2, 3, 4]
    assert "have not all been played" in result.unresolvable_tie.reason
    assert not result.is_position_settled(1)


def test_incomplete_group_is_not_settled(group_teams):
    scores = {1: (2, 1), 2: (0, 0), 3: (1, 1), 4: (3, 0), 5: (2, 0)}
    result = resolve_group_standings(group_teams, scores)

    assert not result.is_complete
    assert result.completed_matches == 5
    assert not any(result.is_position_settled(p) for p in (1, 2, 3, 4))


def test_decision_resolves_tie_and_is_idempotent(group_teams):
    scores = {1: (1, 1), 2: (2, 0), 3: (1, 0), 4: (1, 0), 5: (0, 0), 6: (0, 0)}
    decision = TiebreakerDecision([1, 2], [2, 1], group_letter="A")

    first = resolve_group_standings(group_teams, scores, decisions=[decision])
    second = resolve_group_standings(group_teams, scores, decisions=[decision])

    assert order(first) == [2, 1, 3, 4]
    assert order(second) == order(first)
    assert first.decision_applied
    assert first.unresolvable_tie is None
    assert first.is_final


def test_decision_for_other_teams_is_ignored(group_teams):
    scores = {1: (1, 1), 2: (2, 0), 3: (1, 0), 4: (1, 0), 5: (0, 0), 6: (0, 0)}
    decision = TiebreakerDecision([3, 4], [4, 3])

    result = resolve_group_standings(group_teams, scores, decisions=[decision])

    assert not result.decision_applied
    assert sorted(result.unresolvable_tie.team_ids) == [1, 2]


# A-B 1-1, C-D 1-1, A-C 1-0, B-D 1-0, A-D 1-0, B-C 1-0
DOUBLE_TIE_SCORES = {1: (1, 1), 2: (1, 1), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (1, 0)}


def test_two_separate_ties_are_both_reported(group_teams):
    result = resolve_group_standings(group_teams, DOUBLE_TIE_SCORES)

    assert order(result) == [1, 2, 3, 4]
    assert [tie.team_ids for tie in result.unresolved_ties] == [[1, 2], [3, 4]]
    assert [tie.position for tie in result.unresolved_ties] == [1, 3]
    assert result.unresolvable_tie.team_ids == [1, 2]
    assert not any(result.is_position_settled(p) for p in (1, 2, 3, 4))
    assert not result.is_final

    data = result.to_dict()
    assert data["unresolvable_tie"]["team_ids"] == [1, 2]
    assert [tie["positions"] for tie in data["unresolved_ties"]] == [[1, 2], [3, 4]]


def test_deciding_one_of_two_ties_leaves_the_other(group_teams):
    upper = TiebreakerDecision([1, 2], [2, 1])
    result = resolve_group_standings(group_teams, DOUBLE_TIE_SCORES, decisions=[upper])

    assert order(result) == [2, 1, 3, 4]
    assert result.decision_applied
    assert result.unresolvable_tie.team_ids == [3, 4]
    assert result.unresolvable_tie.position == 3
    assert result.is_position_settled(1)
    assert result.is_position_settled(2)
    assert not result.is_position_settled(3)
    assert not result.is_position_settled(4)

    lower = TiebreakerDecision([3, 4], [4, 3])
    result = resolve_group_standings(group_teams, DOUBLE_TIE_SCORES, decisions=[lower])

    assert order(result) == [1, 2, 4, 3]
    assert result.unresolvable_tie.team_ids == [1, 2]
    assert not result.is_position_settled(1)
    assert result.is_position_settled(3)


def test_both_ties_decided(group_teams):
    decisions = [TiebreakerDecision([3, 4], [4, 3]), TiebreakerDecision([2, 1], [2, 1])]
    result = resolve_group_standings(group_teams, DOUBLE_TIE_SCORES, decisions=decisions)

    assert order(result) == [2, 1, 4, 3]
    assert result.unresolved_ties == []
    assert result.is_final
    assert all(result.is_position_settled(p) for p in (1, 2, 3, 4))


def test_mini_table_partial_split_leaves_pair_tied(group_teams):
    # A, B, C on 5 pts, GD +1, GF 5. Their mini-table is three draws and
    # C scored most in it (4); A and B drew 1-1 and stay level.
    scores = {1: (1, 1), 2: (1, 0), 3: (2, 2), 4: (2, 1), 5: (2, 1), 6: (2, 2)}
    result = resolve_group_standings(group_teams, scores)

    assert order(result) == [3, 1, 2, 4]
    assert len(result.unresolved_ties) == 1
    tie = result.unresolvable_tie
    assert tie.team_ids == [1, 2]
    assert tie.position == 2
    assert tie.positions == [2, 3]
    assert result.is_position_settled(1)
    assert not result.is_position_settled(2)
    assert not result.is_position_settled(3)
    assert result.is_position_settled(4)

    decided = resolve_group_standings(
        group_teams, scores, decisions=[TiebreakerDecision([1, 2], [2, 1])]
    )
    assert order(decided) == [3, 2, 1, 4]
    assert decided.is_final


def test_decision_validation():
    TiebreakerDecision([1, 2], [2, 1]).validate()

    with pytest.raises(InvalidTiebreakerDecisionError):
        TiebreakerDecision([1], [1]).validate()
    with pytest.raises(InvalidTiebreakerDecisionError):
        TiebreakerDecision([1, 1], [1, 1]).validate()
    with pytest.raises(InvalidTiebreakerDecisionError):
        TiebreakerDecision([1, 2], [1, 3]).validate()
    with pytest.raises(InvalidTiebreakerDecisionError):
        TiebreakerDecision([1, 2], [1, 2, 2]).validate()


def test_to_dict_shape(group_teams):
    scores = {1: (1, 1), 2: (2, 0), 3: (1, 0), 4: (1, 0), 5: (0, 0), 6: (0, 0)}
    data = resolve_group_standings(group_teams, scores, group_letter="A").to_dict()

    assert data["group_letter"] == "A"
    assert data["completed_matches"] == 6
    assert data["total_matches"] == 6
    assert data["unresolvable_tie"]["positions"] == [1, 2]
    assert data["standings"][0]["team_code"] in ("ALP", "BRV")
