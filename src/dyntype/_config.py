"""Registry configuration"""

__all__ = ["RegistryConfig", "DuplicatePolicy"]

import enum
from dataclasses import dataclass


class DuplicatePolicy(enum.Enum):
    """How resolution treats a property name declared at several levels.

    KEEP lists every declaration, base first, so a redeclared name appears
    more than once. OVERRIDE lists each name once, at the position of its
    first declaration, using the most derived descriptor.
    """

    KEEP = "keep"
    OVERRIDE = "override"


@dataclass
class RegistryConfig:
    """Options for a `TypeRegistry`.

    Attributes:
        duplicates: Treatment of redeclared property names during resolution
        thread_safe: Guard registry access with a re-entrant lock
    """
    duplicates: DuplicatePolicy = DuplicatePolicy.KEEP
    thread_safe: bool = False
