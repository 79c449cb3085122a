"""
EagerSingletonContainer

Singleton container that materializes every bean at construction.
"""

import logging
from typing import Iterable, List, Optional

from .definition import BeanDefinition
from .lazy_container import LazySingletonContainer
from .module import BeanModule
from .type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class EagerSingletonContainer(LazySingletonContainer):
    """Preloading singleton container.

    Every registered bean is created before the constructor returns, so
    a broken definition fails construction instead of a later
    get_bean() call. Afterwards get_bean() only reads the cache.

    Example::

        container = EagerSingletonContainer(modules=[module])  # builds all
        service = container.get_bean("service")               # cache read
    """

    def __init__(
        self,
        definitions: Optional[Iterable[BeanDefinition]] = None,
        modules: Optional[List[BeanModule]] = None,
        types: Optional[TypeRegistry] = None,
        strict: bool = False
    ):
        """Initialize the container and create all beans.

        Raises:
            NotFoundError: When a definition refers to an unknown id
            InstantiationError: When any bean cannot be built
            BindingError: When any property cannot be injected
            CyclicDependencyError: When the definitions form a cycle
        """
        super().__init__(definitions=definitions, modules=modules, types=types, strict=strict)
        self.preinstantiate_singletons()

    def preinstantiate_singletons(self) -> None:
        """Create every bean not created yet, in registration order.

        Beans already built as a dependency of an earlier one are
        not built again.
        """
        for bean_id in self._registry.ids():
            if not self.is_instantiated(bean_id):
                self.get_bean(bean_id)

        logger.debug("Pre-instantiated %d singleton(s)", len(self._singletons))
