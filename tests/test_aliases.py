import pytest

from rnog_config.aliases import COMMON_SETTINGS, DEFAULT_ALIASES, AliasTable, resolve_alias
from rnog_config.errors import ErrorKind, SettingNotFound, UnknownAlias
from rnog_config.node import ConfigNode
from rnog_config.resolver import resolve


def _warnings(records):
    return [record for record in records if record["level"].name == "WARNING"]


def test_seeded_entries():
    assert dict(COMMON_SETTINGS) == {
        "rf0_enabled": "radiant.trigger.RF0.enabled",
        "rf1_enabled": "radiant.trigger.RF1.enabled",
        "scalers_use_pps": "radiant.scalers.use_pps",
    }
    assert dict(DEFAULT_ALIASES) == dict(COMMON_SETTINGS)


def test_seeded_table_is_read_only():
    with pytest.raises(TypeError):
        COMMON_SETTINGS["extra"] = "a.b"  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_ALIASES["extra"] = "a.b"  # type: ignore[index]


def test_alias_matches_direct_path(station_tree):
    by_alias = resolve_alias(station_tree, "rf0_enabled")
    by_path = resolve(station_tree, "radiant.trigger.RF0.enabled")
    assert by_alias.value == by_path.value == "1"
    assert by_alias.path == by_path.path
    assert by_alias.query == "rf0_enabled"


def test_dotted_input_bypasses_table(station_tree):
    table = AliasTable({"radiant.scalers.use_pps": "radiant.trigger.RF1.enabled"})
    assert table.expand("radiant.scalers.use_pps") == "radiant.scalers.use_pps"
    assert resolve_alias(station_tree, "radiant.scalers.use_pps", table).value == "1"


def test_unknown_alias(station_tree, log_records):
    resolution = resolve_alias(station_tree, "rf9_enabled")
    assert resolution.value == ""
    assert isinstance(resolution.error, UnknownAlias)
    assert resolution.error.alias == "rf9_enabled"
    assert resolution.error.kind is ErrorKind.UNKNOWN_ALIAS
    assert resolution.path is None

    warnings = _warnings(log_records)
    assert len(warnings) == 1
    assert warnings[0]["message"] == "Error: Unknown common setting alias: rf9_enabled"


def test_expand_unknown_raises():
    with pytest.raises(UnknownAlias):
        DEFAULT_ALIASES.expand("nothing")


def test_extra_entries():
    table = AliasTable({"period": "radiant.scalers.period"})
    assert table.expand("period") == "radiant.scalers.period"
    assert table.expand("rf1_enabled") == "radiant.trigger.RF1.enabled"
    assert "period" not in DEFAULT_ALIASES
    assert len(table) == len(COMMON_SETTINGS) + 1


def test_alias_to_missing_setting(log_records):
    tree = ConfigNode.from_python({"radiant": {"trigger": {}}})
    resolution = resolve_alias(tree, "rf1_enabled")
    assert isinstance(resolution.error, SettingNotFound)
    assert resolution.query == "rf1_enabled"
    assert resolution.path == "radiant.trigger.RF1.enabled"
    assert len(_warnings(log_records)) == 1
