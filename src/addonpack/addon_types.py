"""Add-on type names as used in server metadata."""

from __future__ import annotations

from enum import Enum


class AddonType(Enum):
    UNKNOWN = "unknown"
    CORE = "core"
    CAMPAIGN = "campaign"
    SCENARIO = "scenario"
    CAMPAIGN_SP_MP = "campaign_sp_mp"
    CAMPAIGN_MP = "campaign_mp"
    SCENARIO_MP = "scenario_mp"
    MAP_PACK = "map_pack"
    ERA = "era"
    FACTION = "faction"
    MOD_MP = "mod_mp"
    MEDIA = "media"
    OTHER = "other"


_BY_STRING = {t.value: t for t in AddonType}


def get_addon_type(value: str) -> AddonType:
    """Map a type string to :class:`AddonType`; anything unrecognized is UNKNOWN."""
    return _BY_STRING.get(value, AddonType.UNKNOWN)


def get_addon_type_string(addon_type: AddonType) -> str:
    return addon_type.value
