"""Tests for matchup key derivation."""
import pytest
from counterpick.models.selection import Lane, Tier
from counterpick.services.matchup_keys import (
    matchup_key,
    parse_matchup_key,
    required_keys,
)


def test_matchup_key_normalizes_components():
    key = matchup_key("MonkeyKing", "Darius", Lane.TOP, Tier.DIAMOND_PLUS)
    assert key == "wukong|darius|top|diamond_plus"


def test_matchup_key_accepts_plain_strings():
    assert matchup_key("Aatrox", "Darius", "TOP", "diamond_plus") == "aatrox|darius|top|diamond_plus"


def test_identical_selections_produce_identical_keys():
    a = matchup_key("Garen", "MonkeyKing", "top", "emerald_plus")
    b = matchup_key("garen", "Wukong", Lane.TOP, Tier.EMERALD_PLUS)
    assert a == b


def test_required_keys_end_to_end_example():
    keys = required_keys(["Aatrox", "Garen"], "Darius", Lane.TOP, Tier.DIAMOND_PLUS)
    assert keys == [
        "aatrox|darius|top|diamond_plus",
        "garen|darius|top|diamond_plus",
    ]


def test_required_keys_keep_selection_order():
    keys = required_keys(["Garen", "Aatrox", "Sett"], "Darius", "top", "all")
    assert [parse_matchup_key(k).own_slug for k in keys] == ["garen", "aatrox", "sett"]


def test_required_keys_skip_mirror_matchup():
    keys = required_keys(["Darius", "Garen"], "darius", "top", "all")
    assert keys == ["garen|darius|top|all"]


def test_required_keys_skip_mirror_through_alias():
    keys = required_keys(["Wukong", "Garen"], "MonkeyKing", "top", "all")
    assert keys == ["garen|wukong|top|all"]


@pytest.mark.parametrize(
    "own, opponent, lane",
    [
        (["Aatrox"], "Darius", None),
        (["Aatrox"], "Darius", ""),
        (["Aatrox"], "", "top"),
        ([], "Darius", "top"),
    ],
)
def test_required_keys_empty_when_selection_incomplete(own, opponent, lane):
    assert required_keys(own, opponent, lane, "diamond_plus") == []


def test_required_keys_never_contain_mirror():
    own = ["Aatrox", "Darius", "MonkeyKing", "Garen", "Wukong"]
    for opponent in own:
        for key in required_keys(own, opponent, "top", "all"):
            parts = parse_matchup_key(key)
            assert parts.own_slug != parts.opponent_slug


def test_required_keys_have_no_duplicates():
    keys = required_keys(["MonkeyKing", "Wukong", "Garen"], "Darius", "top", "all")
    assert keys == ["wukong|darius|top|all", "garen|darius|top|all"]


def test_parse_matchup_key_round_trip():
    parts = parse_matchup_key("aatrox|darius|top|diamond_plus")
    assert parts.own_slug == "aatrox"
    assert parts.opponent_slug == "darius"
    assert parts.lane == "top"
    assert parts.tier == "diamond_plus"


def test_parse_matchup_key_rejects_malformed():
    with pytest.raises(ValueError):
        parse_matchup_key("aatrox|darius|top")


def test_tier_component_is_lowercased():
    plain = matchup_key("Aatrox", "Darius", "top", "Diamond_Plus")
    assert plain == matchup_key("Aatrox", "Darius", Lane.TOP, Tier.DIAMOND_PLUS)
    assert plain == "aatrox|darius|top|diamond_plus"


def test_required_keys_lowercase_plain_string_tier():
    keys = required_keys(["Aatrox"], "Darius", "Top", "EMERALD_PLUS")
    assert keys == ["aatrox|darius|top|emerald_plus"]
