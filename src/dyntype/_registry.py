"""Type registry and inheritance resolution"""

__all__ = ["TypeRegistry"]

import contextlib
import logging
import threading

from ._config import DuplicatePolicy, RegistryConfig
from ._error import CyclicInheritance
from ._type import TypeDescriptor


logger = logging.getLogger(__name__)


class TypeRegistry:
    """Catalog of type descriptors by name.

    The registry is created explicitly and passed to whatever needs it,
    there is no process-wide instance. Registering a name that already
    exists replaces the previous descriptor. Nothing is ever removed.

    Base types are referenced by name and are not checked at registration,
    so a type can be registered before its base. A base that is still
    missing when the type is resolved simply ends the chain.

    Args:
        config: (RegistryConfig | None) Options, defaults when None

    Attributes:
        config: (RegistryConfig) Options used by this registry
    """

    def __init__(self, config=None):
        self.config = config if config is not None else RegistryConfig()
        self._types = {}
        if self.config.thread_safe:
            self._lock = threading.RLock()
        else:
            self._lock = contextlib.nullcontext()

    def register_type(self, descriptor):
        """Insert or replace a type by its name.

        Args:
            descriptor: (TypeDescriptor) Type to register
        Raises:
            TypeError: If descriptor is not a TypeDescriptor
        """
        if not isinstance(descriptor, TypeDescriptor):
            raise TypeError(f"Expected TypeDescriptor, got {type(descriptor).__name__}")
        name = descriptor.type_name
        with self._lock:
            replaced = name in self._types
            self._types[name] = descriptor
        if replaced:
            logger.debug("Replaced type %r", name)
        else:
            logger.debug("Registered type %r (base %r)", name, descriptor.base_type_name)

    def get_type(self, name):
        """Look up a type by name.

        Returns:
            (TypeDescriptor | None) The descriptor, or None when unknown
        """
        with self._lock:
            return self._types.get(name)

    def resolve_chain(self, type_name):
        """Get the registered inheritance chain for a type.

        The chain is walked iteratively from the type toward its bases,
        stopping at the first type with no base or a base that is not
        registered.

        Args:
            type_name: (str) Type to start from
        Returns:
            (list[TypeDescriptor]) Chain ordered root-most base first,
            empty when the type is unknown
        Raises:
            CyclicInheritance: If a base leads back to a visited type
        """
        chain = []
        visited = []
        seen = set()
        with self._lock:
            name = type_name
            while name:
                if name in seen:
                    raise CyclicInheritance(visited + [name])
                descriptor = self._types.get(name)
                if descriptor is None:
                    break
                visited.append(name)
                seen.add(name)
                chain.append(descriptor)
                name = descriptor.base_type_name
        chain.reverse()
        return chain

    def get_all_properties(self, type_name):
        """Resolve the full property list for a type.

        Base properties come first, followed by each derived type's own
        properties in declared order. With the default KEEP policy a name
        redeclared by a derived type is listed again rather than replacing
        the inherited entry.

        Args:
            type_name: (str) Type to resolve
        Returns:
            (list[PropertyDescriptor]) Resolved properties, empty when the
            type is unknown
        Raises:
            CyclicInheritance: If the base chain is cyclic
        """
        props = []
        for descriptor in self.resolve_chain(type_name):
            props.extend(descriptor.properties)

        match self.config.duplicates:
            case DuplicatePolicy.KEEP:
                return props
            case DuplicatePolicy.OVERRIDE:
                merged = {}
                for prop in props:
                    merged[prop.name] = prop
                return list(merged.values())

    def inherits(self, type_name, base_name):
        """Nominal check that a type is, or derives from, another.

        Returns:
            (bool) True if base_name is type_name or one of its registered bases
        """
        return any(d.type_name == base_name for d in self.resolve_chain(type_name))

    def satisfies(self, type_name, candidate):
        """Structural check that a type has the shape of another.

        Every resolved property of the candidate must be matched by name and
        type tag in the resolved properties of type_name. Declared
        inheritance plays no part, so an unrelated type with the same
        properties also satisfies. A candidate without properties, including
        an unknown one, is never satisfied.

        Args:
            type_name: (str) Type being checked
            candidate: (str) Type whose shape is required
        Returns:
            (bool) True if the shape of candidate is covered
        """
        required = self.get_all_properties(candidate)
        if not required:
            return False
        have = {(p.name, p.type_tag) for p in self.get_all_properties(type_name)}
        return all((p.name, p.type_tag) in have for p in required)

    def names(self):
        """Get registered type names in registration order."""
        with self._lock:
            return list(self._types)

    def __contains__(self, name):
        with self._lock:
            return name in self._types

    def __iter__(self):
        return iter(self.names())

    def __len__(self):
        with self._lock:
            return len(self._types)

    def __repr__(self):
        return f"TypeRegistry<{len(self)} types>"
