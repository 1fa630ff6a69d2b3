"""Dynamic objects bound to registered types"""

__all__ = ["DynamicObject"]

from ._value import Kind, PropertyValue


class DynamicObject:
    """An instance of a registered type.

    The property map is seeded once from the resolved defaults of the type
    and is independent of the registry afterward. Changing or re-registering
    the type has no effect on objects that already exist. When resolution
    lists a name more than once, the most derived declaration supplies the
    initial value.

    Writes are not checked against the type, so properties the type never
    declared can be set freely.

    The type name is a label. The registry is kept only to answer `is_type`
    and `satisfies`, which look up the current type definitions.

    Args:
        type_name: (str) Name of the type to instantiate
        registry: (TypeRegistry) Registry used to resolve the type

    Attributes:
        type_name: (str) Name of the type this object was created from
        registry: (TypeRegistry) Registry the object was created from
    """

    __slots__ = ("type_name", "registry", "_properties")

    def __init__(self, type_name, registry):
        self.type_name = type_name
        self.registry = registry
        self._properties = {}
        for prop in registry.get_all_properties(type_name):
            self._properties[prop.name] = prop.default

    def set_property(self, name, value):
        """Set a property, adding it if needed.

        Args:
            name: (str) Property name
            value: (PropertyValue | int | float | str | bool) New value
        Raises:
            TypeError: If value is not a supported primitive
        """
        self._properties[name] = PropertyValue.from_python(value)

    def get_property(self, name, kind):
        """Get a property's data if it holds the expected kind.

        Args:
            name: (str) Property name
            kind: (Kind | str | type) Expected kind, as a Kind, a type tag
                like "int", or one of int, float, str, bool
        Returns:
            Python data of the value, or None when the property is missing
            or holds a different kind
        """
        value = self._properties.get(name)
        if value is None or value.kind is not Kind.coerce(kind):
            return None
        return value.data

    def get_property_variant(self, name):
        """Get a property's value regardless of kind.

        Returns:
            (PropertyValue) Stored value, or the empty value when missing
        """
        value = self._properties.get(name)
        return value if value is not None else PropertyValue()

    def get_property_names(self):
        """Get the names of all properties currently set.

        Returns:
            (set[str]) Property names, no ordering is implied
        """
        return set(self._properties)

    def items(self):
        """Iterate (name, PropertyValue) pairs."""
        return iter(list(self._properties.items()))

    def is_type(self, type_name):
        """Check this object against a type name.

        True when type_name is the object's own type, otherwise the
        structural `satisfies` check decides.
        """
        if self.type_name == type_name:
            return True
        return self.satisfies(type_name)

    def satisfies(self, type_name):
        """Check the object's type has at least the properties of another.

        This compares resolved property names and type tags only, it does
        not follow declared inheritance. See `TypeRegistry.inherits` for
        the nominal check.
        """
        return self.registry.satisfies(self.type_name, type_name)

    def __contains__(self, name):
        return name in self._properties

    def __repr__(self):
        return f"DynamicObject<{self.type_name}>"
