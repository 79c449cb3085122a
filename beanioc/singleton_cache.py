"""
SingletonCache

Thread-safe store of one bean instance per id.

Creation of a bean is not locked, so two threads racing on the same
uncached id may both build it. Insertion is an atomic check-then-insert:
the first instance stored stays authoritative and every caller gets
that instance back from register().
"""

import logging
import threading
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Marks a cache miss; None is a legitimate bean value
_MISSING = object()


class SingletonCache:
    """One instance per bean id, never evicted while the container lives.

    Example::

        cache = SingletonCache()
        db = cache.register("db", Database())
        cache.register("db", Database())  # Warning logged, db kept
        assert cache.get("db") is db
    """

    def __init__(self):
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, bean_id: str, default: Optional[Any] = None) -> Any:
        return self._instances.get(bean_id, default)

    def register(self, bean_id: str, instance: Any) -> Any:
        """Store ``instance`` unless ``bean_id`` is already cached.

        Args:
            bean_id: The bean id
            instance: The instance to cache

        Returns:
            The cached instance, which is the earlier one when the id was
            already present
        """
        with self._lock:
            existing = self._instances.get(bean_id, _MISSING)
            if existing is _MISSING:
                self._instances[bean_id] = instance
                return instance

        if existing is not instance:
            logger.warning(
                "Singleton '%s' is already registered (%r); keeping the original",
                bean_id, existing,
            )
        return existing

    def ids(self) -> List[str]:
        return list(self._instances)

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()

    def __contains__(self, bean_id: object) -> bool:
        return bean_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

