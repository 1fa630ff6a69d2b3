"""Error classes and helpers"""

__all__ = ["RegistryError", "CyclicInheritance", "ParseError", "MalformedDefaultValue"]


class RegistryError(Exception):
    """Error resolving types held by a registry."""


class CyclicInheritance(RegistryError):
    """A chain of base types leads back to a type already visited.

    Args:
        chain: (list[str]) Type names walked, ending with the repeated name

    Attributes:
        chain: (list[str]) Type names walked, ending with the repeated name
    """

    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(f"Cyclic inheritance: {' -> '.join(self.chain)}")


class ParseError(Exception):
    """Exception raised for type declaration parsing errors.

    Args:
        message: (str) Error description
        line: (int | None) Optional line number where error occurred

    Attributes:
        message: (str) Error description
        line: (int | None) Line number where error occurred
    """

    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class MalformedDefaultValue(ParseError):
    """Default literal cannot be read as the declared numeric kind.

    Attributes:
        name: (str) Property name
        kind: (str) Declared type tag
        literal: (str) Offending literal text
    """

    def __init__(self, name, kind, literal, line=None):
        self.name = name
        self.kind = kind
        self.literal = literal
        super().__init__(
            f"Invalid {kind} default {literal!r} for property '{name}'", line
        )
