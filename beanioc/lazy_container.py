"""
LazySingletonContainer

Singleton container that builds each bean on first request.
Construction instantiates nothing; the first get_bean(id) creates
only ``id`` and the beans it transitively depends on.
"""

from typing import Any, Iterable, List, Optional

from .container import BeanContainer
from .definition import BeanDefinition
from .lifecycle import BeanLifeCycle
from .module import BeanModule
from .singleton_cache import _MISSING, SingletonCache
from .type_registry import TypeRegistry


class LazySingletonContainer(BeanContainer):
    """On-demand singleton container.

    The same instance is returned for an id whether it is requested
    directly or injected into another bean.

    Attributes:
        _singletons: Cache of created beans

    Example::

        container = LazySingletonContainer(modules=[module])
        repo = container.get_bean("repository")
        assert container.get_bean("repository") is repo
    """

    lifecycle = BeanLifeCycle.SINGLETON

    def __init__(
        self,
        definitions: Optional[Iterable[BeanDefinition]] = None,
        modules: Optional[List[BeanModule]] = None,
        types: Optional[TypeRegistry] = None,
        strict: bool = False
    ):
        self._singletons: SingletonCache = SingletonCache()
        super().__init__(definitions=definitions, modules=modules, types=types, strict=strict)

    def _get_cached(self, bean_id: str) -> Any:
        return self._singletons.get(bean_id, _MISSING)

    def _store(self, bean_id: str, instance: Any) -> Any:
        return self._singletons.register(bean_id, instance)

    def register_singleton(self, bean_id: str, instance: Any) -> Any:
        """Register a pre-built instance for a defined bean.

        An id that already has a cached instance keeps it: the new
        instance is ignored and a warning is logged.

        Args:
            bean_id: Id of a defined bean
            instance: The instance to serve for this id

        Returns:
            The instance that is now cached for ``bean_id``

        Raises:
            NotFoundError: When no definition has this id
            ContainerClosedError: When the container has been closed
        """
        self._ensure_not_closed()
        self._registry.lookup(bean_id)
        return self._singletons.register(bean_id, instance)

    def is_instantiated(self, bean_id: str) -> bool:
        """Whether a singleton for ``bean_id`` has been created."""
        return bean_id in self._singletons

    @property
    def instantiated_ids(self) -> List[str]:
        """Ids of the singletons created so far."""
        return self._singletons.ids()

    def _release(self) -> None:
        self._singletons.clear()
