"""
TypeRegistry

This module provides the type-instantiation capability used by the
container: locating a class by name, enumerating its constructors and
finding explicitly declared setters.

By default a class name is a dotted import path (``package.module.Class``,
nested classes allowed) loaded with importlib. Types can also be
registered explicitly, which is how local classes, aliases and types
with several alternative constructors are made available.

Example::

    types = TypeRegistry()
    types.register_type(Database)                     # by dotted name
    types.register("cache", RedisCache, MemoryCache)  # two constructors
    types.register(
        "legacy.Client",
        LegacyClient,
        setters={"transport": lambda client, t: client.attach(t)},
    )
"""

import importlib
import inspect
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from .exceptions import DuplicateDefinitionError

logger = logging.getLogger(__name__)

Setter = Callable[[Any, Any], None]


def qualified_name(cls: Type) -> str:
    """Dotted name a class is registered under by default."""
    return f"{cls.__module__}.{cls.__qualname__}"


def accepts_arity(func: Callable, arity: int) -> bool:
    """Check whether ``func`` can be called with ``arity`` positional arguments.

    Args:
        func: A class or any other callable
        arity: Number of positional arguments that will be passed

    Returns:
        True when no more than ``arity`` positional parameters are required,
        at least ``arity`` positionals are accepted and no keyword-only
        parameter is required. Callables whose signature cannot be
        inspected (some built-ins) are assumed to match.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return True

    required = 0
    accepted = 0
    variadic = False
    for param in sig.parameters.values():
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY,
                          inspect.Parameter.POSITIONAL_OR_KEYWORD):
            accepted += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind == inspect.Parameter.VAR_POSITIONAL:
            variadic = True
        elif param.kind == inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                return False

    return required <= arity and (variadic or arity <= accepted)


class TypeRegistry:
    """Explicit table of constructors and setters by type name.

    Attributes:
        _constructors: Type name to constructors, in declaration order
        _setters: Type name to {property name: setter(instance, value)}
    """

    def __init__(self):
        self._constructors: Dict[str, List[Callable[..., Any]]] = {}
        self._setters: Dict[str, Dict[str, Setter]] = {}

    def register(
        self,
        class_name: str,
        *constructors: Callable[..., Any],
        setters: Optional[Mapping[str, Setter]] = None
    ) -> None:
        """Register constructors (and optionally setters) for a type name.

        The first constructor whose arity matches the number of declared
        constructor arguments is used, so order matters.

        Args:
            class_name: Name used as ``class`` in bean definitions
            *constructors: Callables producing an instance
            setters: Optional table of property name to setter callable

        Raises:
            ValueError: When neither constructors nor setters are given
        """
        if not constructors and not setters:
            raise ValueError(f"Nothing to register for type '{class_name}'")
        if constructors:
            self._constructors.setdefault(class_name, []).extend(constructors)
        if setters:
            self._setters.setdefault(class_name, {}).update(setters)

    def register_type(self, cls: Type, name: Optional[str] = None) -> str:
        """Register a class as its own constructor.

        Args:
            cls: The class to register
            name: Alias to register under; defaults to the dotted name

        Returns:
            The name the class was registered under
        """
        class_name = name or qualified_name(cls)
        self.register(class_name, cls)
        return class_name

    def update(self, other: 'TypeRegistry', strict: bool = False) -> None:
        """Merge another registry's tables into this one.

        A type name already present with different constructors is
        replaced by ``other``'s entry; a warning is logged.

        Args:
            other: Registry to merge in
            strict: If True, a conflicting type name raises instead

        Raises:
            DuplicateDefinitionError: On a conflicting type name when ``strict``
        """
        for class_name, constructors in other._constructors.items():
            existing = self._constructors.get(class_name)
            if existing is not None and existing != constructors:
                if strict:
                    raise DuplicateDefinitionError(
                        f"Type '{class_name}' is already registered with other constructors"
                    )
                logger.warning(
                    "Type '%s' registered with other constructors; replacing", class_name
                )
            self._constructors[class_name] = list(constructors)
        for class_name, setters in other._setters.items():
            self._setters.setdefault(class_name, {}).update(setters)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._constructors

    def constructors_for(self, class_name: str) -> List[Callable[..., Any]]:
        """Constructors for a type name, explicit ones first.

        Raises:
            ImportError: When the name is not registered and its module
                cannot be imported
            AttributeError: When the module has no such attribute
        """
        constructors = self._constructors.get(class_name)
        if constructors:
            return list(constructors)
        return [self.load_class(class_name)]

    def setter_for(self, class_name: str, property_name: str) -> Optional[Setter]:
        return self._setters.get(class_name, {}).get(property_name)

    @staticmethod
    def load_class(class_name: str) -> Type:
        """Import a class from its dotted name.

        The longest importable module prefix is imported and the rest of
        the name is walked as attributes, so ``pkg.mod.Outer.Inner`` works.

        Raises:
            ImportError: When no prefix of the name is an importable module
            ModuleNotFoundError: When the module exists but one of its own
                imports is missing
            AttributeError: When the attribute path does not exist
            TypeError: When the name resolves to something that is not callable
        """
        parts = class_name.split(".")
        if len(parts) < 2 or not all(parts):
            raise ImportError(f"'{class_name}' is not a dotted class path")

        module = None
        index = len(parts) - 1
        while index > 0:
            prefix = ".".join(parts[:index])
            try:
                module = importlib.import_module(prefix)
                break
            except ModuleNotFoundError as e:
                # A shorter prefix is tried only when this prefix itself is missing
                if e.name is None or not (prefix == e.name or prefix.startswith(e.name + ".")):
                    raise
                index -= 1
        if module is None:
            raise ImportError(f"No module found for class '{class_name}'")

        obj: Any = module
        for attr in parts[index:]:
            obj = getattr(obj, attr)

        if not callable(obj):
            raise TypeError(f"'{class_name}' is not callable")
        return obj
