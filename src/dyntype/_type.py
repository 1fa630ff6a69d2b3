"""Type and property descriptors"""

__all__ = ["TypeDescriptor", "PropertyDescriptor"]

from ._value import PropertyValue


class PropertyDescriptor:
    """Static metadata for one property of a type.

    The type tag is free text. Tags naming one of the four value kinds
    ("int", "double", "string", "bool") are recognized, anything else is
    carried along as an opaque tag.

    Args:
        name: (str) Property name
        type_tag: (str) Declared type tag
        default: (PropertyValue | int | float | str | bool | None) Default
            value, None for the empty value
        is_inherited: (bool) Informational flag

    Attributes:
        name: (str) Property name
        type_tag: (str) Declared type tag
        default: (PropertyValue) Default value
        is_inherited: (bool) Informational flag, resolution never sets it
    """

    __slots__ = ("name", "type_tag", "default", "is_inherited")

    def __init__(self, name, type_tag, default=None, is_inherited=False):
        self.name = name
        self.type_tag = type_tag
        self.default = PropertyValue() if default is None else PropertyValue.from_python(default)
        self.is_inherited = is_inherited

    def __repr__(self):
        return f"Property<{self.name}:{self.type_tag}={self.default.format()}>"

    def __eq__(self, other):
        if not isinstance(other, PropertyDescriptor):
            return False
        return (
            self.name == other.name
            and self.type_tag == other.type_tag
            and self.default == other.default
            and self.is_inherited == other.is_inherited
        )

    def __hash__(self):
        return hash((self.name, self.type_tag, self.default, self.is_inherited))


class TypeDescriptor:
    """A named type definition.

    Types have an optional single base type, referenced by name, and an
    ordered list of the properties declared locally on this type. Inherited
    properties are only combined in when a registry resolves the type.

    The descriptor is built up with `add_property` and `set_base_type`,
    then handed to a `TypeRegistry`, which owns it from then on.

    Args:
        type_name: (str) Unique type name
        base_type_name: (str | None) Name of the base type

    Attributes:
        type_name: (str) Unique type name
        base_type_name: (str | None) Name of the base type
        properties: (list[PropertyDescriptor]) Locally declared properties
    """

    __slots__ = ("type_name", "base_type_name", "properties")

    def __init__(self, type_name, base_type_name=None):
        self.type_name = type_name
        self.base_type_name = base_type_name or None
        self.properties = []

    def add_property(self, name, type_tag, default=None):
        """Append a locally declared property.

        Args:
            name: (str) Property name
            type_tag: (str) Declared type tag
            default: Default value, None for the empty value
        Returns:
            (PropertyDescriptor) The new descriptor
        """
        prop = PropertyDescriptor(name, type_tag, default)
        self.properties.append(prop)
        return prop

    def set_base_type(self, base_type_name):
        self.base_type_name = base_type_name or None

    def __repr__(self):
        if self.base_type_name:
            return f"Type<{self.type_name}:{self.base_type_name}>"
        return f"Type<{self.type_name}>"
