"""Text dumps of types and objects.

These helpers only read from the registry and objects. They produce the
same layout as the type and object listings of the command line.

Public API
----------
iter_type_properties(registry, name) -> (name, type_tag, default, is_inherited)
iter_object_properties(obj)          -> (name, value)
runtime_kind_name(value)             -> str
format_type(registry, name)          -> str
format_object(obj)                   -> str
"""

__all__ = [
    "iter_type_properties",
    "iter_object_properties",
    "runtime_kind_name",
    "format_type",
    "format_object",
]

from ._value import Kind


def iter_type_properties(registry, type_name):
    """Iterate resolved properties of a type as plain tuples.

    Yields:
        (str, str, PropertyValue, bool) name, type tag, default, inherited flag
    """
    for prop in registry.get_all_properties(type_name):
        yield prop.name, prop.type_tag, prop.default, prop.is_inherited


def iter_object_properties(obj):
    """Iterate the current (name, PropertyValue) pairs of an object."""
    for name in obj.get_property_names():
        yield name, obj.get_property_variant(name)


def runtime_kind_name(value):
    """Name of the kind a value currently holds."""
    match value.kind:
        case Kind.INT:
            return "int"
        case Kind.DOUBLE:
            return "double"
        case Kind.STRING:
            return "string"
        case Kind.BOOL:
            return "bool"


def format_type(registry, type_name):
    """Describe a type and its resolved properties.

    Args:
        registry: (TypeRegistry) Registry holding the type
        type_name: (str) Type to describe
    Returns:
        (str) Multi-line description, or a not found message
    """
    descriptor = registry.get_type(type_name)
    if descriptor is None:
        return f"Type '{type_name}' not found!"

    lines = [
        f"type_name: {descriptor.type_name}",
        f"base: {descriptor.base_type_name or 'none'}",
        "properties:",
    ]
    for name, type_tag, default, inherited in iter_type_properties(registry, type_name):
        lines.append(f"  - {name}:")
        lines.append(f"    type: {type_tag}")
        lines.append(f"    default_value: {default.format()}")
        lines.append(f"    inherited: {'true' if inherited else 'false'}")
    return "\n".join(lines)


def format_object(obj):
    """Describe an object's current property values.

    Properties are listed sorted by name so output is stable.
    """
    lines = [
        f"object_type: {obj.type_name}",
        "properties:",
    ]
    for name, value in sorted(iter_object_properties(obj), key=lambda item: item[0]):
        lines.append(f"  - {name}:")
        lines.append(f"    value: {value.format()}")
        lines.append(f"    runtime_type: {runtime_kind_name(value)}")
    return "\n".join(lines)
