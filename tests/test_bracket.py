import pytest

from worldcup_predictor.engine.bracket import (
    BRACKET,
    REASON_SLOTS_NOT_READY,
    REASON_TEAM_NOT_IN_MATCH,
    KnockoutBracket,
    SlotSource,
    build_qualifiers,
    get_bracket_match,
    get_downstream_matches,
)
from worldcup_predictor.engine.combinations import get_third_place_combination
from worldcup_predictor.engine.group_matches import ALL_GROUPS
from worldcup_predictor.engine.tiebreak import TiebreakerDecision, resolve_group_standings
from worldcup_predictor.exceptions import UnknownMatchError


def qualifiers():
    """1st of group X -> 100+i, 2nd -> 200+i, 3rd -> 300+i."""
    data = {}
    for i, group in enumerate(ALL_GROUPS):
        data[f"1{group}"] = 100 + i
        data[f"2{group}"] = 200 + i
        data[f"3{group}"] = 300 + i
    return data


def new_bracket(winners=None):
    assignments = get_third_place_combination("ABDEGIKL").match_assignments
    return KnockoutBracket(qualifiers(), assignments, winners)


def play_all(bracket):
    """Advance slot A of every match."""
    for match_id in BRACKET:
        team_a, _ = bracket.resolve(match_id)
        assert bracket.record_winner(match_id, team_a).accepted


def test_bracket_structure():
    assert list(BRACKET) == [f"M{n}" for n in range(73, 105)]
    assert sum(1 for m in BRACKET.values() if m.round == "round_of_32") == 16

    loser_matches = [
        m.match_id for m in BRACKET.values()
        if SlotSource.LOSER in (m.slot_a.kind, m.slot_b.kind)
    ]
    assert loser_matches == ["M103"]
    assert get_bracket_match("M103").upstream == ["M101", "M102"]
    assert get_bracket_match("M104").upstream == ["M101", "M102"]
    assert get_bracket_match("M89").upstream == ["M74", "M77"]

    # Every upstream match is defined before the match that needs it
    seen = set()
    for match_id, match in BRACKET.items():
        assert set(match.upstream) <= seen
        seen.add(match_id)


def test_slot_labels():
    assert get_bracket_match("M74").slot_b.label == "3ABCDF"
    assert get_bracket_match("M89").slot_a.label == "W74"
    assert get_bracket_match("M103").slot_b.label == "L102"


def test_downstream_matches():
    assert get_downstream_matches("M74") == ["M89", "M97", "M101", "M103", "M104"]
    assert get_downstream_matches("M104") == []


def test_unknown_match():
    with pytest.raises(UnknownMatchError):
        get_bracket_match("M72")
    with pytest.raises(UnknownMatchError):
        new_bracket().record_winner("M105", 1)


def test_round_of_32_from_qualifiers():
    bracket = new_bracket()

    assert bracket.resolve("M73") == (200, 201)          # 2A v 2B
    assert bracket.resolve("M79") == (100, 304)          # 1A v 3E
    assert bracket.resolve("M74") == (104, 300)          # 1E v 3A
    assert bracket.playable_matches() == [f"M{n}" for n in range(73, 89)]


def test_third_place_slots_empty_without_combination():
    bracket = KnockoutBracket(qualifiers(), {})

    assert bracket.resolve("M79") == (100, None)
    assert not bracket.is_playable("M79")
    assert bracket.record_winner("M79", 100).reason == REASON_SLOTS_NOT_READY


def test_winner_rejected_until_slots_are_populated():
    bracket = new_bracket()

    result = bracket.record_winner("M89", 104)

    assert not result.accepted
    assert result.reason == REASON_SLOTS_NOT_READY
    assert bracket.winners == {}


def test_winner_must_be_in_match():
    bracket = new_bracket()

    result = bracket.record_winner("M74", 100)

    assert not result.accepted
    assert result.reason == REASON_TEAM_NOT_IN_MATCH
    assert "M74" not in bracket.winners


def test_winners_propagate_to_final_and_third_place():
    bracket = new_bracket()
    play_all(bracket)

    sf1 = bracket.resolve("M101")
    sf2 = bracket.resolve("M102")
    assert bracket.resolve("M104") == (sf1[0], sf2[0])
    assert bracket.resolve("M103") == (sf1[1], sf2[1])
    assert bracket.outcome("M104")[0] == sf1[0]


def test_changing_winner_clears_downstream():
    bracket = new_bracket()
    play_all(bracket)

    result = bracket.record_winner("M74", 300)

    assert result.accepted
    assert result.cleared == ["M89", "M97", "M101", "M103", "M104"]
    for match_id in result.cleared:
        assert match_id not in bracket.winners
    # Other half of the draw is untouched
    assert "M102" in bracket.winners
    assert bracket.resolve("M89") == (300, 108)


def test_same_winner_again_clears_nothing():
    bracket = new_bracket()
    play_all(bracket)

    result = bracket.record_winner("M74", 104)

    assert result.accepted
    assert result.cleared == []
    assert len(bracket.winners) == 32


def test_clear_winner():
    bracket = new_bracket()
    play_all(bracket)

    cleared = bracket.clear_winner("M97")

    assert cleared == ["M97", "M101", "M103", "M104"]
    assert "M89" in bracket.winners
    assert bracket.clear_winner("M97") == []


def test_prune_after_group_change():
    bracket = new_bracket()
    play_all(bracket)

    # Group E winner changes
    bracket.qualifiers["1E"] = 999
    cleared = bracket.prune_invalid_winners()

    assert cleared == ["M74", "M89", "M97", "M101", "M103", "M104"]
    assert bracket.prune_invalid_winners() == []
    assert bracket.is_playable("M74")


def test_stale_winner_is_not_propagated():
    bracket = new_bracket({"M73": 999})

    assert bracket.outcome("M73") == (None, None)
    assert bracket.resolve("M90") == (None, None)


def test_build_qualifiers_only_uses_settled_positions(group_teams):
    complete = resolve_group_standings(
        group_teams, {1: (1, 0), 2: (1, 0), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (1, 0)}
    )
    tied = resolve_group_standings(
        group_teams, {1: (1, 1), 2: (2, 0), 3: (1, 0), 4: (1, 0), 5: (0, 0), 6: (0, 0)}
    )

    data = build_qualifiers({"A": complete, "B": tied})

    assert (data["1A"], data["2A"], data["3A"]) == (1, 2, 3)
    assert data["1B"] is None
    assert data["2B"] is None
    assert data["3B"] == 3
    assert data["1C"] is None


def test_build_qualifiers_skips_every_tied_block(group_teams):
    # A-B 1-1 and C-D 1-1 leave both pairs tied
    double_tie = {1: (1, 1), 2: (1, 1), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (1, 0)}
    upper_decided = resolve_group_standings(
        group_teams, double_tie, decisions=[TiebreakerDecision([1, 2], [2, 1])]
    )

    data = build_qualifiers({"A": upper_decided})

    assert (data["1A"], data["2A"]) == (2, 1)
    assert data["3A"] is None
