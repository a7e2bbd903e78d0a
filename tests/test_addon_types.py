"""Tests for add-on type string mapping."""

import pytest

from addonpack.addon_types import AddonType, get_addon_type, get_addon_type_string


@pytest.mark.parametrize("addon_type", list(AddonType))
def test_string_round_trip(addon_type):
    assert get_addon_type(get_addon_type_string(addon_type)) is addon_type


def test_known_strings():
    assert get_addon_type("campaign") is AddonType.CAMPAIGN
    assert get_addon_type("map_pack") is AddonType.MAP_PACK
    assert get_addon_type_string(AddonType.MOD_MP) == "mod_mp"


@pytest.mark.parametrize("value", ["", "Campaign", "gui", "nonsense"])
def test_unrecognized_is_unknown(value):
    assert get_addon_type(value) is AddonType.UNKNOWN
