import dataclasses
from datetime import datetime
from typing import Optional

import pytest

from oradialect.core import (
    FieldDescription,
    FieldError,
    FieldKind,
    TagSettings,
    declares_data_type,
    describe_fields,
    first_member,
    is_scanner,
    is_struct,
    reflect_kind,
    table_name_for,
)


@dataclasses.dataclass
class NullInt32:
    value: int = dataclasses.field(default=0, metadata={"kind": FieldKind.INT32})
    valid: bool = False

    def scan(self, raw):
        self.value, self.valid = raw, raw is not None


class Money:
    @classmethod
    def db_data_type(cls, dialect):
        return "NUMBER(12,2)"


@dataclasses.dataclass
class AuditEntry:
    id: int = dataclasses.field(metadata={"primary_key": True})
    actor: str = dataclasses.field(default="", metadata={"tags": {"size": "64"}})
    recorded_at: Optional[datetime] = None
    tags: list[str] = dataclasses.field(default_factory=list)


def test_tag_settings_are_case_insensitive():
    tags = TagSettings({"size": "50", "Not Null": "NOT NULL"})
    assert "SIZE" in tags
    assert tags["not null"] == "NOT NULL"
    assert tags.get("DEFAULT") is None
    assert set(tags) == {"SIZE", "NOT NULL"}


def test_field_description_reads_modifiers_from_tags():
    field = FieldDescription(
        "name",
        kind=FieldKind.TEXT,
        tag_settings={"SIZE": "50", "NOT NULL": "NOT NULL", "DEFAULT": "'x'", "COMMENT": "'note'"},
    )
    assert field.size == 50
    assert field.not_null == "NOT NULL"
    assert field.unique == ""
    assert field.default_value == "'x'"
    assert field.comment == "'note'"
    assert field.explicit_type == ""


def test_size_defaults_to_255_and_unparseable_size_reads_as_zero():
    assert FieldDescription("a", kind=FieldKind.TEXT).size == 255
    assert FieldDescription("b", kind=FieldKind.TEXT, tag_settings={"SIZE": "wide"}).size == 0


def test_field_description_is_immutable():
    field = FieldDescription("flag", value_type=bool)
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.name = "other"


def test_field_description_requires_kind_or_value_type():
    with pytest.raises(FieldError):
        FieldDescription("broken")


def test_kind_strings_are_coerced():
    assert FieldDescription("n", kind="int32").kind is FieldKind.INT32


@pytest.mark.parametrize(
    "python_type, expected",
    [
        (bool, FieldKind.BOOLEAN),
        (int, FieldKind.INT),
        (float, FieldKind.FLOAT64),
        (str, FieldKind.TEXT),
        (datetime, FieldKind.TIMESTAMP),
        (bytes, FieldKind.BINARY),
        (bytearray, FieldKind.BINARY),
        (NullInt32, FieldKind.STRUCT),
        (Optional[str], FieldKind.TEXT),
        (object, FieldKind.CUSTOM),
    ],
)
def test_reflect_kind(python_type, expected):
    assert reflect_kind(python_type) is expected


def test_reflected_kind_prefers_declared_kind():
    field = FieldDescription("count", kind=FieldKind.INT16, value_type=int)
    assert field.reflected_kind is FieldKind.INT16
    assert FieldDescription("count", value_type=int).reflected_kind is FieldKind.INT


def test_optional_value_types_are_unwrapped():
    assert FieldDescription("when", value_type=Optional[datetime]).value_type is datetime


def test_capability_queries():
    assert declares_data_type(Money)
    assert not declares_data_type(str)
    assert not declares_data_type(None)
    assert is_scanner(NullInt32)
    assert not is_scanner(Money)
    assert is_struct(NullInt32)
    assert not is_struct(Money)


def test_first_member_uses_metadata_kind():
    member = first_member(NullInt32)
    assert member is not None
    assert member.name == "value"
    assert member.reflected_kind is FieldKind.INT32


def test_describe_fields_for_dataclass_model():
    fields = describe_fields(AuditEntry)
    assert [field.name for field in fields] == ["id", "actor", "recorded_at", "tags"]
    assert fields[0].primary_key is True
    assert fields[1].size == 64
    assert fields[2].reflected_kind is FieldKind.TIMESTAMP
    assert fields[3].reflected_kind is FieldKind.CUSTOM


def test_describe_fields_rejects_plain_classes():
    with pytest.raises(FieldError):
        describe_fields(Money)


def test_table_name_for():
    assert table_name_for(AuditEntry) == "audit_entry"

    class Legacy:
        __tablename__ = "LEGACY_T"

    assert table_name_for(Legacy) == "LEGACY_T"
