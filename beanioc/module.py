"""
BeanModule

This module provides a programmatic source of bean definitions,
an alternative to XML configuration. A BeanModule collects
BeanDefinitions and the classes they refer to; containers load
them at construction time.

Example::

    module = BeanModule()
    with module:
        module.bean("database", Database)
        module.bean("repository", UserRepository, constructor_args=["database"])
        module.bean("service", UserService, properties=["repository"])

    container = LazySingletonContainer(modules=[module])
"""

from typing import Iterable, List, Type, Union

from .definition import BeanDefinition
from .type_registry import TypeRegistry


class BeanModule:
    """Collection of bean definitions with their classes.

    Classes passed to ``bean()`` are recorded in the module's
    TypeRegistry under their dotted name, so classes defined inside
    functions resolve without being importable. Such local classes get
    their object id appended to the name, since every call of the
    enclosing function yields a distinct class with the same qualname.

    Attributes:
        _definitions: Definitions in registration order
        _types: Classes referenced by the definitions
    """

    def __init__(self):
        self._definitions: List[BeanDefinition] = []
        self._types: TypeRegistry = TypeRegistry()

    def __enter__(self) -> 'BeanModule':
        """Enter context manager for cleaner definition blocks.

        The context manager is optional but provides visual structure
        for module definitions.
        """
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False

    @property
    def definitions(self) -> List[BeanDefinition]:
        """Registered definitions (read-only access for containers)."""
        return self._definitions

    @property
    def types(self) -> TypeRegistry:
        return self._types

    def bean(
        self,
        bean_id: str,
        cls: Union[Type, str],
        constructor_args: Iterable[str] = (),
        properties: Iterable[str] = ()
    ) -> BeanDefinition:
        """Define a bean.

        Args:
            bean_id: Id the bean is requested by
            cls: The class, or a class name understood by TypeRegistry
            constructor_args: Ids of beans passed positionally to the
                constructor. When given, the bean is constructor-injected.
            properties: Property names to inject through setters; each
                name is also the id of the bean injected

        Returns:
            The created BeanDefinition

        Raises:
            ValueError: When ``bean_id`` is empty
        """
        if not bean_id:
            raise ValueError("Bean id must not be empty")

        if isinstance(cls, str):
            class_name = cls
        else:
            class_name = cls.__module__ + "." + cls.__qualname__
            if "<locals>" in cls.__qualname__:
                # Each call of the enclosing function makes a new class
                class_name += f"@{id(cls):x}"
            if class_name not in self._types:
                self._types.register_type(cls, class_name)

        definition = BeanDefinition(bean_id, class_name)
        for ref in constructor_args:
            definition.add_constructor_arg(ref)
        for name in properties:
            definition.add_property(name)

        self.add_definition(definition)
        return definition

    def add_definition(self, definition: BeanDefinition) -> None:
        """Add an already built definition.

        Note:
            This method does not check for duplicates. Duplicate handling
            is performed when the module is loaded into a container.
        """
        self._definitions.append(definition)
