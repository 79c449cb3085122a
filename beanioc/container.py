"""
BeanContainer

This module provides the resolution engine shared by every container
variant. It is responsible for:

- Building the definition registry from definitions and modules
- Resolving bean ids through one code path, used for top-level
  requests, constructor arguments and properties alike
- Detecting circular dependencies
- Delegating caching to the variant (see lazy_container,
  eager_container and factory_container)

The base class caches nothing: every request builds a new object graph.
"""

import logging
from typing import Any, IO, Iterable, List, Optional, Union

from .definition import BeanDefinition
from .exceptions import ContainerClosedError
from .instance_factory import InstanceFactory
from .lifecycle import BeanLifeCycle
from .module import BeanModule
from .property_binder import PropertyBinder
from .registry import DefinitionRegistry
from .resolution_context import _resolution_context, current_context
from .singleton_cache import _MISSING
from .type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class BeanContainer:
    """Core DI container with dependency resolution.

    Attributes:
        lifecycle: Lifecycle of the beans this container serves
        _registry: Definitions by bean id, frozen after construction
        _types: Constructors and setters by type name
        _factory: Builds raw instances
        _binder: Applies setter injection
        _closed: Flag indicating if the container has been closed

    Note:
        Use one of the variants (LazySingletonContainer,
        EagerSingletonContainer, FactoryBeanContainer) rather than
        this class directly.
    """

    lifecycle: BeanLifeCycle = BeanLifeCycle.FACTORY

    def __init__(
        self,
        definitions: Optional[Iterable[BeanDefinition]] = None,
        modules: Optional[List[BeanModule]] = None,
        types: Optional[TypeRegistry] = None,
        strict: bool = False
    ):
        """Initialize the container.

        Module definitions are registered first, then ``definitions``.

        Args:
            definitions: Bean definitions, e.g. from XmlDefinitionReader
            modules: BeanModules to load
            types: Explicit constructors and setters by type name
            strict: If True, a duplicate bean id or a type name bound to
                different classes raises DuplicateDefinitionError instead
                of replacing the earlier entry

        Raises:
            DuplicateDefinitionError: On duplicate ids or types when ``strict``
        """
        self._types: TypeRegistry = TypeRegistry()
        if types is not None:
            self._types.update(types, strict=strict)

        self._registry: DefinitionRegistry = DefinitionRegistry(strict=strict)
        for module in modules or []:
            self._types.update(module.types, strict=strict)
            for definition in module.definitions:
                self._registry.register(definition)
        for definition in definitions or []:
            self._registry.register(definition)
        self._registry.freeze()

        self._factory = InstanceFactory(self._types, self._resolve)
        self._binder = PropertyBinder(self._types, self._resolve)
        self._closed: bool = False

        logger.debug(
            "%s loaded %d bean definition(s)", type(self).__name__, len(self._registry)
        )

    @classmethod
    def from_xml(cls, source: Union[str, IO], **kwargs: Any) -> 'BeanContainer':
        """Create a container from an XML definition file.

        Args:
            source: Path or file object of a ``<beans>`` document
            **kwargs: Passed on to the container constructor

        Raises:
            DefinitionParseError: When the document cannot be read

        Example::

            container = EagerSingletonContainer.from_xml("beans.xml")
        """
        from .xml_reader import XmlDefinitionReader

        definitions = XmlDefinitionReader().read(source)
        return cls(definitions=definitions, **kwargs)

    def _ensure_not_closed(self) -> None:
        """Ensure the container is not closed.

        Raises:
            ContainerClosedError: When the container has been closed
        """
        if self._closed:
            raise ContainerClosedError("This container is already closed")

    def get_bean(self, bean_id: str) -> Any:
        """Get a fully wired bean.

        Args:
            bean_id: Id of the bean

        Returns:
            The bean, with constructor arguments and properties injected

        Raises:
            NotFoundError: When no definition has this id
            InstantiationError: When the bean or a dependency cannot be built
            BindingError: When a property dependency cannot be injected
            CyclicDependencyError: When the definitions form a cycle
            ContainerClosedError: When the container has been closed

        Example::

            service = container.get_bean("userService")
        """
        self._ensure_not_closed()
        return self._resolve(bean_id)

    def __getitem__(self, bean_id: str) -> Any:
        """Support subscript syntax: container["id"]."""
        return self.get_bean(bean_id)

    def _resolve(self, bean_id: str) -> Any:
        """Internal resolution shared by get_bean, the factory and the binder.

        1. Look up the definition
        2. Return the cached instance, if the variant caches one
        3. Check for circular dependencies
        4. Create the instance and bind its properties
        5. Hand the instance to the variant for caching
        """
        definition = self._registry.lookup(bean_id)

        cached = self._get_cached(bean_id)
        if cached is not _MISSING:
            return cached

        ctx = current_context(self)
        ctx.check(bean_id)

        token = _resolution_context.set(ctx.enter(bean_id))
        try:
            instance = self._create_bean(definition)
        finally:
            _resolution_context.reset(token)

        return self._store(bean_id, instance)

    def _create_bean(self, definition: BeanDefinition) -> Any:
        instance = self._factory.create(definition)
        self._binder.bind(definition, instance)
        return instance

    def _get_cached(self, bean_id: str) -> Any:
        """Cached instance for ``bean_id`` or ``_MISSING``. Never caches here."""
        return _MISSING

    def _store(self, bean_id: str, instance: Any) -> Any:
        """Record a new instance; returns the instance callers should get."""
        return instance

    def contains_bean(self, bean_id: str) -> bool:
        return bean_id in self._registry

    def __contains__(self, bean_id: object) -> bool:
        return bean_id in self._registry

    @property
    def bean_ids(self) -> List[str]:
        """Registered bean ids in registration order."""
        return self._registry.ids()

    def get_definition(self, bean_id: str) -> BeanDefinition:
        """Get the definition of a bean.

        Raises:
            NotFoundError: When no definition has this id
        """
        return self._registry.lookup(bean_id)

    def close(self) -> None:
        """Close the container and release cached beans.

        After closing, get_bean() raises ContainerClosedError.
        This method is idempotent.
        """
        if not self._closed:
            self._closed = True
            self._release()

    def _release(self) -> None:
        pass

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __enter__(self) -> 'BeanContainer':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Close the container; exceptions are not suppressed."""
        self.close()
        return False
