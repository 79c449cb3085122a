"""
beanioc Exceptions

Custom exception hierarchy for the beanioc container
"""

from typing import Optional


class BeanError(Exception):
    """
    Base exception for all beanioc errors.

    All beanioc-specific exceptions inherit from this class.
    You can catch this to handle any container error generically.

    Example:
        >>> try:
        ...     service = container.get_bean("userService")
        ... except BeanError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class NotFoundError(BeanError):
    """
    Raised when a requested bean id is not registered in the container.

    This error occurs when calling ``get_bean(id)`` for an id that no
    definition declares, or when a constructor argument or property
    refers to such an id.

    Common causes:
        - Typo in the bean id or in a ``ref`` attribute
        - Property name that does not match any bean id
          (the bean injected into property ``foo`` is the bean ``foo``)

    Note:
        The error message includes the list of registered ids
        to help identify available beans.
    """

    def __init__(self, message: str, bean_id: Optional[str] = None):
        super().__init__(message)
        self.bean_id = bean_id


class InstantiationError(BeanError):
    """
    Raised when a bean instance cannot be constructed.

    Common causes:
        - ``class`` names a module or attribute that cannot be imported
        - No constructor accepts the number of declared constructor arguments
        - The constructor itself raised an exception

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, bean_id: str, message: str):
        super().__init__(f"Failed to instantiate bean '{bean_id}': {message}")
        self.bean_id = bean_id


class BindingError(BeanError):
    """
    Raised when setter injection fails for a declared property.

    The dependency named by the property could not be resolved,
    or the setter raised while being invoked. A property without a
    matching setter is not an error; it is skipped.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, bean_id: str, property_name: str, message: str):
        super().__init__(
            f"Failed to bind property '{property_name}' of bean '{bean_id}': {message}"
        )
        self.bean_id = bean_id
        self.property_name = property_name


class CyclicDependencyError(BeanError):
    """
    Raised when circular dependency is detected during resolution.

    This error occurs when bean ``a`` depends on bean ``b``, and ``b``
    (directly or indirectly) depends on ``a``, through constructor
    arguments or properties.

    Example of circular definitions::

        <bean id="a" class="app.A"><constructor-arg ref="b"/></bean>
        <bean id="b" class="app.B"><property name="a"/></bean>

    Solution:
        Refactor to remove the cycle, or extract the shared part
        into a third bean both can depend on.
    """

    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(
            "Circular dependency detected: " + " -> ".join(self.chain)
        )


class DuplicateDefinitionError(BeanError):
    """
    Raised when the same bean id is defined twice in a strict registry,
    or when a strict container merges a type name bound to different classes.

    Non-strict registries (the default) keep the last definition
    and log a warning instead.
    """

    pass


class RegistryFrozenError(BeanError):
    """
    Raised when registering a definition after the registry was frozen.

    A container freezes its registry at the end of construction;
    definitions are read-only afterwards.
    """

    pass


class ContainerClosedError(BeanError):
    """
    Raised when attempting to use a closed container.

    Solution:
        Create a new container instead of reusing a closed one::

            with LazySingletonContainer(definitions) as container:
                service = container.get_bean("service")  # OK
            # Container is now closed
    """

    pass


class DefinitionParseError(BeanError):
    """
    Raised when an XML definition source cannot be read.

    Common causes:
        - Malformed XML
        - A ``<bean>`` element without ``id`` or ``class``
    """

    pass
