"""
PropertyBinder

Setter injection. After a bean has been instantiated, each declared
property ``foo`` is matched against a setter on the instance and the
bean whose id is ``foo`` is passed to it.

Setters are looked up in this order, first match wins:

1. A setter declared for the bean's class in the TypeRegistry
2. A method ``setFoo`` (property name with its first letter upper-cased)
3. A method ``set_foo``

A property without any setter is skipped, so definitions may declare
properties the class does not expose.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from .definition import BeanDefinition
from .exceptions import BindingError, CyclicDependencyError
from .type_registry import TypeRegistry, accepts_arity

logger = logging.getLogger(__name__)


def setter_names(property_name: str) -> Tuple[str, str]:
    """Method names tried for a property, in lookup order."""
    return (
        "set" + property_name[:1].upper() + property_name[1:],
        "set_" + property_name,
    )


class PropertyBinder:
    """Apply setter injection to freshly created instances.

    Attributes:
        _types: TypeRegistry holding explicitly declared setters
        _resolve: Callback resolving a bean id through the container
    """

    def __init__(self, types: TypeRegistry, resolve: Callable[[str], Any]):
        self._types = types
        self._resolve = resolve

    def bind(self, definition: BeanDefinition, instance: Any) -> None:
        """Inject every declared property of ``definition`` into ``instance``.

        Raises:
            BindingError: When the dependency for a matched setter cannot be
                resolved, or the setter raised
            CyclicDependencyError: Propagated unchanged
        """
        for property_name in definition.property_names:
            setter = self._find_setter(definition, instance, property_name)
            if setter is None:
                logger.debug(
                    "No setter for property '%s' on bean '%s' (%s), skipped",
                    property_name, definition.id, type(instance).__name__,
                )
                continue

            try:
                setter(self._resolve(property_name))
            except CyclicDependencyError:
                raise
            except Exception as e:
                raise BindingError(definition.id, property_name, str(e)) from e

    def _find_setter(
        self,
        definition: BeanDefinition,
        instance: Any,
        property_name: str
    ) -> Optional[Callable[[Any], Any]]:
        declared = self._types.setter_for(definition.class_name, property_name)
        if declared is not None:
            return lambda value: declared(instance, value)

        for name in setter_names(property_name):
            method = getattr(instance, name, None)
            if callable(method) and accepts_arity(method, 1):
                return method
        return None
