"""Tests for writing nested values by path."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

import pytest
from pydantic import BaseModel, ConfigDict

from nestpath import PathSyntaxError, PathWriteError, read, write


@pytest.fixture()
def data() -> dict:
    return {"user": {"profile": {"name": "John"}}}


def test_write_sets_nested_value(data: dict) -> None:
    write(data, "user.profile.age", 30)

    assert data["user"]["profile"] == {"name": "John", "age": 30}


def test_write_creates_intermediate_dicts(data: dict) -> None:
    write(data, "user.profile.address.street", "Second St")

    assert data["user"]["profile"]["address"] == {"street": "Second St"}


def test_write_into_empty_root() -> None:
    root: dict = {}
    write(root, "user.profile.age", 30)

    assert root == {"user": {"profile": {"age": 30}}}


def test_write_list_value_over_none() -> None:
    root = {"user": {"test": None}}
    write(root, "user.test", [{"foo": "bar"}])

    assert root["user"]["test"] == [{"foo": "bar"}]


def test_write_then_read_round_trips(data: dict) -> None:
    for path, value in [
        ("user.profile.age", 30),
        ("user.tags", ["a"]),
        ("settings.theme.dark", False),
        ("settings.items", [{"foo": "bar"}]),
    ]:
        write(data, path, value)
        assert read(data, path) == value


def test_write_overwrites_terminal_value(data: dict) -> None:
    write(data, "user.profile", "gone")

    assert data == {"user": {"profile": "gone"}}


def test_write_keeps_existing_containers(data: dict) -> None:
    profile = data["user"]["profile"]
    write(data, "user.profile.age", 1)

    assert data["user"]["profile"] is profile


def test_write_replaces_none_intermediate() -> None:
    root = {"user": None}
    write(root, "user.name", "x")

    assert root == {"user": {"name": "x"}}


def test_write_absent_mode_keeps_falsy_scalars(nestpath_config) -> None:
    nestpath_config.create_missing = "absent"
    root = {"count": 0, "empty": {}}

    write(root, "empty.key", 1)
    assert root["empty"] == {"key": 1}

    with pytest.raises(PathWriteError, match="cannot descend into scalar"):
        write(root, "count.value", 1)
    assert root["count"] == 0


def test_write_falsy_mode_replaces_falsy_values(nestpath_config) -> None:
    nestpath_config.create_missing = "falsy"
    root = {"count": 0, "name": "", "flag": False, "items": []}

    write(root, "count.value", 1)
    write(root, "name.first", "a")
    write(root, "flag.on", True)
    write(root, "items.first", "x")

    assert root == {
        "count": {"value": 1},
        "name": {"first": "a"},
        "flag": {"on": True},
        "items": {"first": "x"},
    }


def test_write_falsy_mode_keeps_truthy_containers(nestpath_config) -> None:
    nestpath_config.create_missing = "falsy"
    inner = {"a": 1}
    root = {"inner": inner}

    write(root, "inner.b", 2)

    assert root["inner"] is inner
    assert inner == {"a": 1, "b": 2}


def test_write_through_scalar_fails_fast() -> None:
    root = {"name": "John"}

    with pytest.raises(PathWriteError) as excinfo:
        write(root, "name.first", "J")

    assert excinfo.value.segment == "first"
    assert excinfo.value.path == "name.first"
    assert root == {"name": "John"}


def test_write_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        write(5, "a", 1)


def test_write_indexes_existing_sequences() -> None:
    root = {"rows": [{"v": 1}, None]}

    write(root, "rows[0].v", 10)
    write(root, "rows.1.v", 20)
    write(root, "rows[1]", "replaced")

    assert root == {"rows": [{"v": 10}, "replaced"]}


def test_write_never_extends_sequences() -> None:
    root = {"rows": [1]}

    with pytest.raises(PathWriteError, match="in-range indices"):
        write(root, "rows[1]", 2)
    with pytest.raises(PathWriteError):
        write(root, "rows.name", 2)
    assert root == {"rows": [1]}


def test_write_rejects_tuples_and_read_only_mappings() -> None:
    with pytest.raises(PathWriteError):
        write({"t": (1, 2)}, "t.0", 5)
    with pytest.raises(PathWriteError, match="read-only"):
        write(MappingProxyType({"a": 1}), "a", 2)


def test_write_matches_integer_dict_keys() -> None:
    root = {"by_id": {7: {"name": "seven"}}}

    write(root, "by_id.7.name", "SEVEN")
    write(root, "by_id.8.name", "eight")

    assert root == {"by_id": {7: {"name": "SEVEN"}, "8": {"name": "eight"}}}


def test_write_empty_path_is_rejected() -> None:
    with pytest.raises(PathSyntaxError, match="root path"):
        write({}, "", 1)


def test_write_malformed_path_is_rejected() -> None:
    root: dict = {}

    with pytest.raises(PathSyntaxError):
        write(root, "a[", 1)
    assert root == {}


@dataclass
class Settings:
    theme: dict | None = None
    size: int = 0


@dataclass(frozen=True)
class Frozen:
    value: int = 0


class Profile(BaseModel):
    name: str = ""
    extra: dict | None = None


class LockedProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""


def test_write_into_dataclass_fields() -> None:
    settings = Settings()
    root = {"settings": settings}

    write(root, "settings.theme.dark", True)
    write(root, "settings.size", 3)

    assert settings.theme == {"dark": True}
    assert settings.size == 3


def test_write_into_pydantic_fields() -> None:
    profile = Profile()

    write(profile, "name", "Ada")
    write(profile, "extra.level", 2)

    assert profile.name == "Ada"
    assert profile.extra == {"level": 2}


def test_write_rejects_undeclared_record_fields() -> None:
    with pytest.raises(PathWriteError, match="has no field 'color'"):
        write(Settings(), "color", "red")


def test_write_reports_frozen_records() -> None:
    with pytest.raises(PathWriteError):
        write(Frozen(), "value", 1)
    with pytest.raises(PathWriteError):
        write(LockedProfile(), "name", "x")


class ValidatedProfile(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    extra: dict | None = None


def test_write_descends_into_the_stored_container() -> None:
    """Records that copy on assignment still receive the nested write."""

    profile = ValidatedProfile()

    write(profile, "extra.level", 2)
    write(profile, "extra.mode", "fast")

    assert profile.extra == {"level": 2, "mode": "fast"}
    assert read(profile, "extra.level") == 2
