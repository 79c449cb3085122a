"""
Bean Module Tests

Tests for the programmatic definition source.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from beanioc import BeanDefinition, BeanModule, LazySingletonContainer

from conftest import BeanTestCase
from fixtures import Baz, Database


class TestBeanModule(unittest.TestCase):

    def test_context_manager_returns_module(self):
        module = BeanModule()
        with module as m:
            self.assertIs(m, module)

    def test_bean_with_class(self):
        module = BeanModule()
        with module:
            definition = module.bean("db", Database)

        self.assertEqual(definition.class_name, "fixtures.Database")
        self.assertEqual(module.definitions, [definition])
        self.assertIn("fixtures.Database", module.types)

    def test_bean_with_class_name(self):
        module = BeanModule()
        definition = module.bean("db", "app.Database", properties=["cache", "cache"])

        self.assertEqual(definition.class_name, "app.Database")
        self.assertEqual(definition.property_names, ["cache"])
        self.assertNotIn("app.Database", module.types)

    def test_constructor_args(self):
        module = BeanModule()
        definition = module.bean("repo", "app.Repo", constructor_args=("db", "cache"))

        self.assertTrue(definition.has_constructor_args())
        self.assertEqual(definition.constructor_args, ["db", "cache"])

    def test_empty_id_rejected(self):
        with self.assertRaises(ValueError):
            BeanModule().bean("", Database)

    def test_add_definition(self):
        module = BeanModule()
        definition = BeanDefinition("db", "fixtures.Database")
        module.add_definition(definition)

        self.assertEqual(module.definitions, [definition])


class TestModulesInContainer(BeanTestCase):

    def test_local_classes_resolve(self):
        class Engine:
            pass

        class Car:
            def __init__(self, engine):
                self.engine = engine

        module = BeanModule()
        with module:
            module.bean("engine", Engine)
            module.bean("car", Car, constructor_args=["engine"])

        container = self.track(LazySingletonContainer(modules=[module]))
        car = container.get_bean("car")

        self.assertIsInstance(car, Car)
        self.assertIs(car.engine, container.get_bean("engine"))

    def test_same_local_class_name_from_two_modules(self):
        """Each call of a module factory keeps its own local class."""
        def make_module(value):
            class Config:
                def __init__(self):
                    self.value = value

            module = BeanModule()
            with module:
                module.bean("config_" + value, Config)
            return module

        first = make_module("a")
        second = make_module("b")
        self.assertNotEqual(
            first.definitions[0].class_name, second.definitions[0].class_name
        )

        container = self.track(LazySingletonContainer(modules=[first, second], strict=True))

        self.assertEqual(container.get_bean("config_a").value, "a")
        self.assertEqual(container.get_bean("config_b").value, "b")

    def test_several_modules_and_definitions(self):
        infra = BeanModule()
        with infra:
            infra.bean("C", Baz)

        app = BeanModule()
        with app:
            app.bean("B", "fixtures.Bar", properties=["C"])

        container = self.track(LazySingletonContainer(
            modules=[infra, app],
            definitions=[BeanDefinition("A", "fixtures.Foo", ["B"])],
        ))

        self.assertEqual(container.bean_ids, ["C", "B", "A"])
        self.assertIsInstance(container.get_bean("A").bar.c, Baz)


if __name__ == '__main__':
    unittest.main()
