import pytest

import dyntype
import typetest


@pytest.fixture
def registry():
    """Registry with the Entity and Player types."""
    reg = dyntype.TypeRegistry()
    typetest.register(reg, "Entity",
        ("id", "int", 0),
        ("name", "string", ""),
    )
    typetest.register(reg, "Player",
        ("level", "int", 1),
        ("health", "double", 100.0),
        base="Entity",
    )
    return reg


@pytest.fixture
def factory(registry):
    return dyntype.ObjectFactory(registry)
