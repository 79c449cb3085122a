"""
InstanceFactory

This module builds raw bean instances from definitions. It chooses
between the two instantiation strategies:

- Constructor injection: the definition lists constructor arguments.
  The first constructor whose arity equals the number of arguments
  is called with the resolved beans, in order.
- Setter injection: no constructor arguments. The first constructor
  callable with no arguments is used; properties are applied later
  by the PropertyBinder.

Only arity is matched, not parameter types. If a type offers several
constructors of the same arity, the first declared one wins.
"""

import logging
from typing import Any, Callable, List

from .definition import BeanDefinition
from .exceptions import BeanError, InstantiationError
from .type_registry import TypeRegistry, accepts_arity

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Any]


class InstanceFactory:
    """Create raw, not yet property-bound, bean instances.

    Attributes:
        _types: TypeRegistry used to find constructors
        _resolve: Callback resolving a bean id through the container's
            shared resolution path (and its caching policy)
    """

    def __init__(self, types: TypeRegistry, resolve: Resolver):
        self._types = types
        self._resolve = resolve

    def create(self, definition: BeanDefinition) -> Any:
        """Create an instance for ``definition``.

        Args:
            definition: The definition to instantiate

        Returns:
            The new instance

        Raises:
            InstantiationError: When the class cannot be located, no
                constructor matches the argument count, or the constructor
                raised
            BeanError: Propagated unchanged from resolving a constructor
                argument (e.g. NotFoundError, CyclicDependencyError)
        """
        arity = len(definition.constructor_args)
        constructor = self._select_constructor(definition, arity)

        # Dependencies are resolved only once a constructor is known to fit
        args = [self._resolve(ref) for ref in definition.constructor_args]

        try:
            instance = constructor(*args)
        except BeanError:
            raise
        except Exception as e:
            raise InstantiationError(
                definition.id,
                f"{definition.class_name} raised {type(e).__name__}: {e}"
            ) from e

        logger.debug(
            "Created bean '%s' (%s) with %d constructor argument(s)",
            definition.id, definition.class_name, arity,
        )
        return instance

    def _select_constructor(self, definition: BeanDefinition, arity: int) -> Callable[..., Any]:
        try:
            constructors = self._types.constructors_for(definition.class_name)
        except Exception as e:
            raise InstantiationError(
                definition.id,
                f"cannot load class '{definition.class_name}': {e}"
            ) from e

        for constructor in constructors:
            if accepts_arity(constructor, arity):
                return constructor

        raise InstantiationError(
            definition.id,
            f"{definition.class_name} has no constructor taking {arity} argument(s) "
            f"({self._describe(constructors)})"
        )

    @staticmethod
    def _describe(constructors: List[Callable[..., Any]]) -> str:
        return ", ".join(
            getattr(c, "__qualname__", repr(c)) for c in constructors
        )
