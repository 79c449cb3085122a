"""
Thread Safety Tests

Tests for concurrent get_bean() calls on a constructed container.
Resolution chains live in a ContextVar, and the singleton cache
inserts atomically.
"""

import concurrent.futures
import os
import sys
import threading
import time
import unittest
from typing import List

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from beanioc import (
    BeanModule,
    CyclicDependencyError,
    FactoryBeanContainer,
    LazySingletonContainer,
)

from conftest import definition, scenario_definitions
from fixtures import reset_counters


class SlowService:
    """Constructor slow enough to make threads race."""

    def __init__(self):
        time.sleep(0.01)
        self.thread_id = threading.current_thread().ident


class TestSingletonAcrossThreads(unittest.TestCase):

    def setUp(self):
        reset_counters()

    def test_racing_threads_observe_one_instance(self):
        """Redundant construction is allowed; the cached instance is shared."""
        module = BeanModule()
        with module:
            module.bean("slow", SlowService)
            module.bean("user", "fixtures.Foo", constructor_args=["slow"])
        container = LazySingletonContainer(modules=[module])

        barrier = threading.Barrier(10)
        results: List[object] = []
        errors: List[Exception] = []
        lock = threading.Lock()

        def resolve_in_thread():
            try:
                barrier.wait()
                user = container.get_bean("user")
                with lock:
                    results.append(user)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=resolve_in_thread) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(errors), 0, f"Errors occurred: {errors}")
        self.assertEqual(len(results), 10)
        self.assertTrue(all(r is results[0] for r in results))
        self.assertIs(container.get_bean("slow"), results[0].bar)

    def test_thread_pool_resolution(self):
        container = LazySingletonContainer(definitions=scenario_definitions())

        with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
            futures = [executor.submit(container.get_bean, "A") for _ in range(20)]
            results = [f.result() for f in futures]

        self.assertEqual(len({id(r) for r in results}), 1)
        self.assertIs(container.get_bean("B"), results[0].bar)


class TestFactoryAcrossThreads(unittest.TestCase):

    def test_each_thread_gets_its_own_graph(self):
        container = FactoryBeanContainer(definitions=scenario_definitions())

        with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
            results = list(executor.map(lambda _: container.get_bean("A"), range(20)))

        self.assertEqual(len({id(r) for r in results}), 20)
        self.assertEqual(len({id(r.bar.c) for r in results}), 20)


class TestResolutionChainIsolation(unittest.TestCase):

    def test_concurrent_resolution_of_same_id_is_not_a_cycle(self):
        """Chains are per thread: parallel requests for one id never collide."""
        module = BeanModule()
        with module:
            module.bean("slow", SlowService)
            module.bean("wrapper", "fixtures.Foo", constructor_args=["slow"])
        container = FactoryBeanContainer(modules=[module])

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(container.get_bean, "wrapper") for _ in range(16)]
            results = [f.result() for f in futures]

        self.assertEqual(len(results), 16)

    def test_cycle_error_only_affects_calling_thread(self):
        container = LazySingletonContainer(definitions=[
            definition("a", "fixtures.Foo", args=["b"]),
            definition("b", "fixtures.Foo", args=["a"]),
            definition("C", "fixtures.Baz"),
        ])

        def resolve(bean_id):
            try:
                return container.get_bean(bean_id)
            except CyclicDependencyError as e:
                return e

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(resolve, ["a", "C", "b", "C"]))

        self.assertIsInstance(results[0], CyclicDependencyError)
        self.assertIsInstance(results[2], CyclicDependencyError)
        self.assertIs(results[1], results[3])


if __name__ == '__main__':
    unittest.main()
