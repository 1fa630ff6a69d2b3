"""Parse type declaration text into type descriptors.

A declaration is a small line oriented block of text:

    Weapon: Entity
    damage: int = 50
    range: double = 10.5
    magical: bool = false

The first line names the type and optionally its base type. Each following
line declares a property with a type tag and an optional default literal.
Defaults for "int", "double" and "bool" are converted to values of those
kinds. Any other type tag keeps the literal as text. A property without a
default gets the empty value (integer zero) regardless of its type.

The result is a `TypeDescriptor` that has not been registered anywhere.
"""

__all__ = ["parse_declaration", "parse_default"]

import logging
import re

import lark

from ._error import MalformedDefaultValue
from ._type import TypeDescriptor
from ._value import Kind, PropertyValue


logger = logging.getLogger(__name__)

_parsers = {}

_INT_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)


def parse_declaration(source):
    """Parse declaration text into a type descriptor.

    Args:
        source: (str) Declaration text
    Returns:
        (TypeDescriptor | None) Parsed type, or None when the text is empty
        or the first line has no type name
    Raises:
        MalformedDefaultValue: If an int or double default cannot be read
    """
    parser = _lark_parser("typedecl")
    try:
        tree = parser.parse(source)
    except lark.exceptions.UnexpectedInput as e:
        # The grammar accepts any line, only missing input gets here
        logger.debug("No type declaration found: %s", e)
        return None
    return _build_descriptor(tree)


def parse_default(type_tag, literal, name="", line=None):
    """Convert a default literal according to its declared type tag.

    Args:
        type_tag: (str) Declared type tag
        literal: (str) Default literal text, already trimmed
        name: (str) Property name, used for error messages
        line: (int | None) Source line, used for error messages
    Returns:
        (PropertyValue) Converted default
    Raises:
        MalformedDefaultValue: If an int or double literal cannot be read
    """
    match Kind.from_tag(type_tag):
        case Kind.INT:
            if not _INT_LITERAL.fullmatch(literal):
                raise MalformedDefaultValue(name, type_tag, literal, line)
            return PropertyValue(int(literal, 10))
        case Kind.DOUBLE:
            if "_" in literal:
                raise MalformedDefaultValue(name, type_tag, literal, line)
            try:
                return PropertyValue(float(literal))
            except ValueError:
                raise MalformedDefaultValue(name, type_tag, literal, line) from None
        case Kind.BOOL:
            return PropertyValue(literal in ("true", "1"))
        case _:
            return PropertyValue(literal)


def _build_descriptor(tree):
    """Create the type descriptor from a parsed start tree."""
    header, *entries = tree.children
    if header.data == "unnamed_header":
        logger.debug("Type declaration header has no type name")
        return None

    name_token, *rest = header.children
    type_name = name_token.strip()
    base_name = None
    if rest:
        base_name = _base_name(rest[0])
    descriptor = TypeDescriptor(type_name, base_name)

    for entry in entries:
        match entry.data:
            case "property":
                _add_property(descriptor, entry)
            case "stray":
                token = entry.children[0]
                logger.debug("Skipping line %d without a type: %r", token.line, token.strip())
    return descriptor


def _base_name(base):
    """Get the trimmed base name from a base tree, None if blank."""
    for kid in base.children:
        if isinstance(kid, lark.Token) and kid.type == "NAME":
            return kid.strip() or None
    return None


def _add_property(descriptor, entry):
    """Add one property line to the descriptor."""
    name = None
    type_tag = None
    literal = None
    line = entry.meta.line if not entry.meta.empty else None
    for kid in entry.children:
        if isinstance(kid, lark.Token):
            if kid.type == "NAME":
                name = kid.strip()
            elif kid.type == "KIND":
                type_tag = kid.strip()
            if line is None:
                line = kid.line
        elif kid.data == "default":
            literal = ""
            for token in kid.children:
                literal = token.strip()

    if not name or not type_tag:
        logger.debug("Skipping property line %s missing a name or type", line)
        return

    if literal is not None:
        default = parse_default(type_tag, literal, name, line)
    else:
        default = None
    descriptor.add_property(name, type_tag, default)


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(
        path,
        rel_to=__file__,
        parser="lalr",
        propagate_positions=True,
        maybe_placeholders=False,
    )
    _parsers[name] = parser
    return parser
