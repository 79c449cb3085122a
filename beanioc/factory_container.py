"""
FactoryBeanContainer

Container that builds a new object graph on every request
"""

from .container import BeanContainer
from .lifecycle import BeanLifeCycle


class FactoryBeanContainer(BeanContainer):
    """Non-singleton container.

    Every get_bean() call re-runs instantiation and property binding,
    for the requested bean and for all of its dependencies. Two calls
    return objects equal in shape but distinct in identity, so
    dependents never share mutable state.

    Example::

        container = FactoryBeanContainer(modules=[module])
        assert container.get_bean("cart") is not container.get_bean("cart")
    """

    lifecycle = BeanLifeCycle.FACTORY
