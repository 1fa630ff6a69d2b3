"""Property values held by types and objects."""

__all__ = ["Kind", "PropertyValue"]

import enum


class Kind(enum.Enum):
    """The closed set of primitive kinds a property value can hold.

    Each member's value is the tag used for it in type declarations.
    """

    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    BOOL = "bool"

    @property
    def tag(self):
        """(str) Declaration tag for this kind."""
        return self.value

    @classmethod
    def from_tag(cls, tag):
        """Look up the kind for a declaration tag.

        Args:
            tag: (str) Type tag like "int" or "double"
        Returns:
            (Kind | None) Matching kind, None for unrecognized tags
        """
        try:
            return cls(tag)
        except ValueError:
            return None

    @classmethod
    def of(cls, data):
        """Classify a Python value.

        Args:
            data: Python value to classify
        Returns:
            (Kind) Kind for the value
        Raises:
            TypeError: If the value is not one of the supported primitives
        """
        # bool is a subclass of int, check it first
        if isinstance(data, bool):
            return cls.BOOL
        if isinstance(data, int):
            return cls.INT
        if isinstance(data, float):
            return cls.DOUBLE
        if isinstance(data, str):
            return cls.STRING
        raise TypeError(f"Cannot store Python type {type(data).__name__} as a property value")

    @classmethod
    def coerce(cls, kind):
        """Accept a Kind, a declaration tag, or a Python type.

        Args:
            kind: (Kind | str | type) Requested kind
        Returns:
            (Kind) Resolved kind
        Raises:
            ValueError: If the kind cannot be recognized
        """
        if isinstance(kind, Kind):
            return kind
        if isinstance(kind, str):
            found = cls.from_tag(kind)
            if found is not None:
                return found
        elif isinstance(kind, type) and kind in _pytypes:
            return _pytypes[kind]
        raise ValueError(f"Unknown property kind {kind!r}")


_pytypes = {
    int: Kind.INT,
    float: Kind.DOUBLE,
    str: Kind.STRING,
    bool: Kind.BOOL,
}


class PropertyValue:
    """A single property value.

    Holds exactly one of an integer, a double, a text string or a boolean,
    along with the kind that is active. A value constructed without data is
    integer zero, which is the defined empty state. Missing values are
    represented by None at the API level, never by a PropertyValue.
    Values are immutable, so descriptors and objects can share them.

    Values of different kinds never compare equal, so `PropertyValue(1)`,
    `PropertyValue(1.0)` and `PropertyValue(True)` are all distinct.

    Args:
        data: (int | float | str | bool) The underlying data
    Attributes:
        kind: (Kind) Active kind
        data: The underlying Python data
    """

    __slots__ = ("kind", "data")

    def __init__(self, data=0):
        if isinstance(data, PropertyValue):
            raise TypeError(f"PropertyValue init called with existing PropertyValue {data!r}")
        object.__setattr__(self, "kind", Kind.of(data))
        object.__setattr__(self, "data", data)

    def __setattr__(self, name, value):
        raise AttributeError(f"PropertyValue is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"PropertyValue is immutable, cannot delete {name!r}")

    @property
    def is_empty(self):
        """(bool) Value is the default integer zero."""
        return self.kind is Kind.INT and self.data == 0

    def holds(self, kind):
        """Check the active kind.

        Args:
            kind: (Kind | str | type) Kind to test for
        Returns:
            (bool) True if this value holds that kind
        """
        return self.kind is Kind.coerce(kind)

    def to_python(self):
        """Get the underlying Python value."""
        return self.data

    def format(self):
        """Convert value to its display literal.

        Returns:
            (str) Text in double quotes, booleans as true/false, integers
            in decimal and doubles with six fractional digits
        """
        match self.kind:
            case Kind.STRING:
                return f'"{self.data}"'
            case Kind.BOOL:
                return "true" if self.data else "false"
            case Kind.INT:
                return str(self.data)
            case Kind.DOUBLE:
                return f"{self.data:f}"

    @classmethod
    def from_python(cls, value):
        """Wrap a Python value, passing existing PropertyValues through."""
        if isinstance(value, PropertyValue):
            return value
        return cls(value)

    def __repr__(self):
        return f"PropertyValue({self.format()})"

    def __eq__(self, other):
        if not isinstance(other, PropertyValue):
            return False
        return self.kind is other.kind and self.data == other.data

    def __hash__(self):
        return hash((self.kind, self.data))
