from itertools import combinations

import pytest

from worldcup_predictor.engine.combinations import (
    SLOT_TO_MATCH,
    THIRD_PLACE_POOLS,
    all_combinations,
    find_third_place_combination,
    get_third_place_combination,
)
from worldcup_predictor.engine.group_matches import ALL_GROUPS
from worldcup_predictor.exceptions import InvalidThirdPlaceCombinationError


def test_table_covers_every_set_of_eight_groups():
    table = all_combinations()
    assert len(table) == 495
    assert {c.qualifying_groups for c in table} == {
        "".join(groups) for groups in combinations(ALL_GROUPS, 8)
    }


def test_every_entry_round_trips():
    for combination in all_combinations():
        assert get_third_place_combination(combination.qualifying_groups) is combination


def test_assignments_respect_slot_pools():
    for combination in all_combinations():
        for match_id, group in combination.match_assignments.items():
            assert group in THIRD_PLACE_POOLS[match_id]
        assert sorted(combination.assignments.values()) == list(combination.qualifying_groups)


def test_known_assignment():
    combination = get_third_place_combination("LKIGEDBA")

    assert combination.qualifying_groups == "ABDEGIKL"
    assert combination.compact == "EGBAIDLK"
    assert combination.assignments == {
        "1A": "E", "1B": "G", "1D": "B", "1E": "A",
        "1G": "I", "1I": "D", "1K": "L", "1L": "K",
    }
    assert combination.match_assignments["M79"] == "E"
    assert combination.match_assignments[SLOT_TO_MATCH["1E"]] == "A"


def test_lookup_is_order_and_case_independent():
    assert find_third_place_combination("abdegikl") is find_third_place_combination(list("LKIGEDBA"))


@pytest.mark.parametrize("groups", ["ABCDEFG", "ABCDEFGHI", "ABCDEFGM", "AABCDEFG", ""])
def test_unknown_sets_fail_explicitly(groups):
    assert find_third_place_combination(groups) is None

    with pytest.raises(InvalidThirdPlaceCombinationError) as exc_info:
        get_third_place_combination(groups)

    error = exc_info.value.to_dict()
    assert error["error"] == "NO_VALID_COMBINATION"
    assert error["groups"] == "".join(sorted(groups))
