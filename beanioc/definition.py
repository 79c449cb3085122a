"""
Definition

Data class describing one bean: its id, class and references
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class BeanDefinition:
    """Bean definition.

    Property names double as bean ids: the bean injected into
    property ``foo`` is the bean whose id is ``foo``.
    """
    id: str
    class_name: str
    constructor_args: List[str] = field(default_factory=list)  # Ordered bean ids
    property_names: List[str] = field(default_factory=list)  # Insertion-ordered, unique

    def has_constructor_args(self) -> bool:
        """Whether this bean is built by constructor injection."""
        return bool(self.constructor_args)

    def add_constructor_arg(self, ref: str) -> None:
        self.constructor_args.append(ref)

    def add_property(self, name: str) -> None:
        if name not in self.property_names:
            self.property_names.append(name)
