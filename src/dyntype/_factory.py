"""Object creation"""

__all__ = ["ObjectFactory"]

import logging

from ._object import DynamicObject


logger = logging.getLogger(__name__)


class ObjectFactory:
    """Create dynamic objects for types in a registry.

    Args:
        registry: (TypeRegistry) Registry to look types up in
    """

    def __init__(self, registry):
        self.registry = registry

    def create(self, type_name):
        """Create an object with the defaults of a registered type.

        Args:
            type_name: (str) Type to instantiate
        Returns:
            (DynamicObject | None) New object, or None when the type is not
            registered
        """
        if self.registry.get_type(type_name) is None:
            logger.debug("Cannot create object of unknown type %r", type_name)
            return None
        return DynamicObject(type_name, self.registry)
