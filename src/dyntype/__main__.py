#!/usr/bin/env python3
"""dyntype CLI - Load type declarations and inspect types and objects.

Usage:
    dyntype --demo                          # Sample types and objects
    dyntype <file>... --type Weapon         # Show resolved type
    dyntype <file>... --create Weapon       # Show a default object
    dyntype <file> --lark                   # Show Lark parse tree
"""

import argparse
import logging
import pathlib
import sys

import dyntype
from lark import Token, Tree, UnexpectedInput


DEMO_DECLARATION = """
Weapon: Entity
damage: int = 50
range: double = 10.5
magical: bool = false
"""


def prettylark(node, indent=0, show_positions=False):
    """Pretty-print a Lark parse tree of a declaration."""
    prefix = "  " * indent

    if isinstance(node, Token):
        pos = f" @{node.line}:{node.column}" if show_positions else ""
        print(f"{prefix}{node.type}: {node.value!r}{pos}")

    elif isinstance(node, Tree):
        pos = ""
        if show_positions and not node.meta.empty:
            pos = f" @{node.meta.line}:{node.meta.column}"

        if len(node.children) == 0:
            print(f"{prefix}{node.data}(){pos}")
        elif len(node.children) == 1 and isinstance(node.children[0], Token):
            child = node.children[0]
            print(f"{prefix}{node.data}: {child.value!r}{pos}")
        else:
            print(f"{prefix}{node.data}:{pos}")
            for child in node.children:
                prettylark(child, indent + 1, show_positions)

    else:
        print(f"{prefix}??? {type(node).__name__}: {node!r}")


def load_demo(registry):
    """Register the sample types and create a player and a weapon.

    Returns:
        (list[DynamicObject]) The created objects
    """
    entity = dyntype.TypeDescriptor("Entity")
    entity.add_property("id", "int", 0)
    entity.add_property("name", "string", "")
    registry.register_type(entity)

    player = dyntype.TypeDescriptor("Player")
    player.set_base_type("Entity")
    player.add_property("level", "int", 1)
    player.add_property("health", "double", 100.0)
    registry.register_type(player)

    weapon = dyntype.parse_declaration(DEMO_DECLARATION)
    registry.register_type(weapon)

    factory = dyntype.ObjectFactory(registry)
    hero = factory.create("Player")
    hero.set_property("name", "Hero")
    hero.set_property("level", 30)
    hero.set_property("health", 65.0)

    sword = factory.create("Weapon")
    sword.set_property("name", "Excalibur")
    sword.set_property("damage", 75)
    return [hero, sword]


def load_file(registry, path):
    """Parse a declaration file and register its type.

    Returns:
        (TypeDescriptor) The registered type
    Raises:
        ParseError: If the file has a malformed default
        ValueError: If the file does not declare a type
    """
    source = pathlib.Path(path).read_text(encoding="utf-8")
    descriptor = dyntype.parse_declaration(source)
    if descriptor is None:
        raise ValueError(f"No type declared in {path}")
    registry.register_type(descriptor)
    return descriptor


def _emit(text, rich):
    if rich:
        try:
            import rich.console
            import rich.syntax
        except ImportError:
            print("rich is not installed, showing plain output", file=sys.stderr)
        else:
            rich.console.Console().print(rich.syntax.Syntax(text, "yaml"))
            return
    print(text)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="dyntype",
        description="Inspect runtime type declarations and objects")
    parser.add_argument("files", nargs="*",
        help="Type declaration files, registered in order")
    parser.add_argument("--demo", action="store_true",
        help="Register the sample Entity, Player and Weapon types")
    parser.add_argument("--type", action="append", default=[], dest="types",
        metavar="NAME", help="Show a resolved type (default all types)")
    parser.add_argument("--create", action="append", default=[],
        metavar="NAME", help="Create and show an object of a type")
    parser.add_argument("--lark", action="store_true",
        help="Show the Lark parse tree of each file instead")
    parser.add_argument("--pos", action="store_true",
        help="Show line:column positions with --lark")
    parser.add_argument("--override-duplicates", action="store_true",
        help="List each property name once when resolving types")
    parser.add_argument("--rich", action="store_true",
        help="Highlight output with rich")
    parser.add_argument("--verbose", action="store_true",
        help="Log debug messages")

    args = parser.parse_args(argv)
    if not args.files and not args.demo:
        parser.error("No declaration files given, use --demo for sample types")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.lark:
        grammar = dyntype._parse._lark_parser("typedecl")
        for path in args.files:
            try:
                tree = grammar.parse(pathlib.Path(path).read_text(encoding="utf-8"))
            except (OSError, UnexpectedInput) as e:
                print(f"Error parsing {path}:", file=sys.stderr)
                print(f"  {e}", file=sys.stderr)
                return 1
            prettylark(tree, show_positions=args.pos)
        return 0

    config = dyntype.RegistryConfig()
    if args.override_duplicates:
        config.duplicates = dyntype.DuplicatePolicy.OVERRIDE
    registry = dyntype.TypeRegistry(config)

    objects = []
    if args.demo:
        objects.extend(load_demo(registry))

    for path in args.files:
        try:
            load_file(registry, path)
        except (OSError, ValueError, dyntype.ParseError) as e:
            print(f"Error loading {path}:", file=sys.stderr)
            print(f"  {e}", file=sys.stderr)
            return 1

    factory = dyntype.ObjectFactory(registry)
    try:
        for name in args.create:
            obj = factory.create(name)
            if obj is None:
                print(f"Error: Type '{name}' not found", file=sys.stderr)
                return 1
            objects.append(obj)

        blocks = [dyntype.format_type(registry, name) for name in args.types or registry.names()]
        blocks.extend(dyntype.format_object(obj) for obj in objects)
    except dyntype.CyclicInheritance as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit("\n\n".join(blocks), args.rich)
    return 0


if __name__ == "__main__":
    sys.exit(main())
