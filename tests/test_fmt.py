"""Tests for type and object dumps."""

import dyntype
from dyntype import PropertyValue


def test_format_type(registry):
    text = dyntype.format_type(registry, "Player")
    assert text.splitlines() == [
        "type_name: Player",
        "base: Entity",
        "properties:",
        "  - id:",
        "    type: int",
        "    default_value: 0",
        "    inherited: false",
        "  - name:",
        "    type: string",
        '    default_value: ""',
        "    inherited: false",
        "  - level:",
        "    type: int",
        "    default_value: 1",
        "    inherited: false",
        "  - health:",
        "    type: double",
        "    default_value: 100.000000",
        "    inherited: false",
    ]


def test_format_type_without_base(registry):
    assert dyntype.format_type(registry, "Entity").splitlines()[1] == "base: none"


def test_format_unknown_type(registry):
    assert dyntype.format_type(registry, "Missing") == "Type 'Missing' not found!"


def test_format_object(factory):
    weapon = factory.create("Entity")
    weapon.set_property("name", "Excalibur")
    weapon.set_property("magical", True)
    assert dyntype.format_object(weapon).splitlines() == [
        "object_type: Entity",
        "properties:",
        "  - id:",
        "    value: 0",
        "    runtime_type: int",
        "  - magical:",
        "    value: true",
        "    runtime_type: bool",
        "  - name:",
        '    value: "Excalibur"',
        "    runtime_type: string",
    ]


def test_iter_type_properties(registry):
    rows = list(dyntype.iter_type_properties(registry, "Player"))
    assert rows[2] == ("level", "int", PropertyValue(1), False)
    assert [row[0] for row in rows] == ["id", "name", "level", "health"]


def test_iter_object_properties(factory):
    player = factory.create("Player")
    rows = dict(dyntype.iter_object_properties(player))
    assert rows == {
        "id": PropertyValue(0),
        "name": PropertyValue(""),
        "level": PropertyValue(1),
        "health": PropertyValue(100.0),
    }


def test_runtime_kind_name():
    assert dyntype.runtime_kind_name(PropertyValue(1)) == "int"
    assert dyntype.runtime_kind_name(PropertyValue(1.0)) == "double"
    assert dyntype.runtime_kind_name(PropertyValue("a")) == "string"
    assert dyntype.runtime_kind_name(PropertyValue(False)) == "bool"
