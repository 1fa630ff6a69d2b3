"""
dyntype: runtime type declarations with dynamic objects

Types are declared by name with typed properties and an optional base
type, either in code or with a small text format. Objects created from a
registered type carry a mutable bag of property values seeded from the
resolved defaults.
"""

__version__ = "0.1.0"


from ._error import *
from ._value import *
from ._type import *
from ._config import *
from ._registry import *
from ._object import *
from ._factory import *
from ._parse import *
from ._fmt import *
