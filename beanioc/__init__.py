# Public API
from .container import BeanContainer
from .definition import BeanDefinition
from .eager_container import EagerSingletonContainer
from .exceptions import (
    BeanError,
    BindingError,
    ContainerClosedError,
    CyclicDependencyError,
    DefinitionParseError,
    DuplicateDefinitionError,
    InstantiationError,
    NotFoundError,
    RegistryFrozenError,
)
from .factory_container import FactoryBeanContainer
from .lazy_container import LazySingletonContainer
from .lifecycle import BeanLifeCycle
from .module import BeanModule
from .registry import DefinitionRegistry
from .singleton_cache import SingletonCache
from .type_registry import TypeRegistry
from .xml_reader import XmlDefinitionReader

__all__ = [
    "BeanContainer",
    "LazySingletonContainer",
    "EagerSingletonContainer",
    "FactoryBeanContainer",
    "BeanDefinition",
    "BeanLifeCycle",
    "BeanModule",
    "DefinitionRegistry",
    "SingletonCache",
    "TypeRegistry",
    "XmlDefinitionReader",
    # Exceptions
    "BeanError",
    "NotFoundError",
    "InstantiationError",
    "BindingError",
    "CyclicDependencyError",
    "DuplicateDefinitionError",
    "RegistryFrozenError",
    "ContainerClosedError",
    "DefinitionParseError",
]

try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("beanioc")
except PackageNotFoundError:
    # Fallback for development
    __version__ = '0.0.0'
