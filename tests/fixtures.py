"""
Test Fixtures

Common test classes used across test modules.
Definitions refer to them by dotted name, e.g. ``fixtures.Foo``.
"""


class Baz:
    """Leaf bean; counts its instances"""

    created = 0

    def __init__(self):
        Baz.created += 1


class Bar:
    """Setter-injected bean with property ``C``"""

    def __init__(self):
        self.c = None

    def setC(self, c):
        self.c = c


class Foo:
    """Constructor-injected bean"""

    def __init__(self, bar):
        self.bar = bar


class Database:
    """Test database class"""

    created = 0

    def __init__(self):
        Database.created += 1
        self.name = "TestDB"


class CacheService:
    """Test cache service"""

    def __init__(self):
        self.cache = {}


class UserRepository:
    """Test repository with constructor dependencies"""

    def __init__(self, db, cache):
        self.db = db
        self.cache = cache


class UserService:
    """Setter-injected service using both setter naming styles"""

    def __init__(self):
        self.repository = None
        self.cache = None

    def setUserRepository(self, repository):
        self.repository = repository

    def set_cache(self, cache):
        self.cache = cache


class AuditedRepository:
    """Constructor argument plus a setter-injected property"""

    def __init__(self, db=None):
        self.db = db
        self.cache = None

    def setCache(self, cache):
        self.cache = cache


class OptionalArgs:
    """Constructor accepting zero to two arguments"""

    def __init__(self, first=None, second=None):
        self.first = first
        self.second = second


class Exploding:
    """Constructor that always fails"""

    def __init__(self):
        raise RuntimeError("boom")


class BrokenSetter:
    """Setter that always fails"""

    def setDatabase(self, database):
        raise ValueError("read-only")


class Left:
    """Half of a constructor/setter cycle"""

    def __init__(self, right):
        self.right = right


class Right:
    """Other half of a constructor/setter cycle"""

    def __init__(self):
        self.left = None

    def setLeft(self, left):
        self.left = left


class Outer:
    """Holds a nested class for dotted-path loading"""

    class Inner:
        pass


def reset_counters():
    Baz.created = 0
    Database.created = 0
