"""
Test Configuration and Utilities

Common base classes and helper functions for beanioc tests
"""

import os
import sys
import unittest
from typing import List

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from beanioc import BeanDefinition

from fixtures import reset_counters


class BeanTestCase(unittest.TestCase):
    """
    Base test case class for beanioc tests.

    Resets fixture instance counters before each test and closes
    every container registered with ``track()`` afterwards.
    """

    def setUp(self):
        reset_counters()
        self._containers = []

    def tearDown(self):
        for container in self._containers:
            container.close()

    def track(self, container):
        self._containers.append(container)
        return container


def definition(bean_id: str, class_name: str, args=(), props=()) -> BeanDefinition:
    """Build a BeanDefinition from plain values.

    Example:
        >>> definition("a", "fixtures.Foo", args=["b"])
    """
    return BeanDefinition(bean_id, class_name, list(args), list(props))


def scenario_definitions() -> List[BeanDefinition]:
    """A: Foo(B), B: Bar with property C, C: Baz."""
    return [
        definition("A", "fixtures.Foo", args=["B"]),
        definition("B", "fixtures.Bar", props=["C"]),
        definition("C", "fixtures.Baz"),
    ]


def repository_definitions() -> List[BeanDefinition]:
    """userService -> userRepository(database, cache), plus cache property."""
    return [
        definition("userService", "fixtures.UserService", props=["userRepository", "cache"]),
        definition("userRepository", "fixtures.UserRepository", args=["database", "cache"]),
        definition("database", "fixtures.Database"),
        definition("cache", "fixtures.CacheService"),
    ]
