"""
DefinitionRegistry

This module provides the lookup table from bean id to BeanDefinition.
The registry is filled once while a container is being constructed and
frozen afterwards, so concurrent reads need no locking.
"""

import logging
from typing import Dict, Iterable, Iterator, List

from .definition import BeanDefinition
from .exceptions import DuplicateDefinitionError, NotFoundError, RegistryFrozenError

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Registry of bean definitions keyed by id.

    Attributes:
        _definitions: Dictionary mapping bean ids to their definitions
        _strict: Raise on duplicate ids instead of overwriting
        _frozen: Flag set once the owning container is constructed

    Example::

        registry = DefinitionRegistry()
        registry.register(BeanDefinition("db", "app.Database"))
        registry.freeze()

        definition = registry.lookup("db")
    """

    def __init__(self, definitions: Iterable[BeanDefinition] = (), strict: bool = False):
        """Initialize the registry.

        Args:
            definitions: Definitions to register initially (optional)
            strict: If True, a duplicate id raises DuplicateDefinitionError.
                Otherwise the last definition wins and a warning is logged.
        """
        self._definitions: Dict[str, BeanDefinition] = {}
        self._strict: bool = strict
        self._frozen: bool = False

        for definition in definitions:
            self.register(definition)

    def register(self, definition: BeanDefinition) -> None:
        """Insert or overwrite the definition for ``definition.id``.

        Args:
            definition: The BeanDefinition to register

        Raises:
            RegistryFrozenError: When the registry has been frozen
            DuplicateDefinitionError: When the id is already registered
                and the registry is strict
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{definition.id}': definitions are read-only "
                f"once the container is constructed"
            )

        existing = self._definitions.get(definition.id)
        if existing is not None:
            if self._strict:
                raise DuplicateDefinitionError(
                    f"Bean '{definition.id}' is already registered "
                    f"(class {existing.class_name})"
                )
            logger.warning(
                "Bean '%s' is defined more than once; %s replaces %s",
                definition.id, definition.class_name, existing.class_name,
            )
        self._definitions[definition.id] = definition

    def lookup(self, bean_id: str) -> BeanDefinition:
        """Get the definition registered under ``bean_id``.

        Raises:
            NotFoundError: When no definition has this id
        """
        definition = self._definitions.get(bean_id)
        if definition is None:
            registered = ", ".join(self._definitions) or "None"
            raise NotFoundError(
                f"No bean named '{bean_id}' is defined.\n"
                f"Registered beans: {registered}",
                bean_id=bean_id,
            )
        return definition

    def freeze(self) -> None:
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def ids(self) -> List[str]:
        """Registered ids in registration order."""
        return list(self._definitions)

    def __contains__(self, bean_id: object) -> bool:
        return bean_id in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())

    def __len__(self) -> int:
        return len(self._definitions)
