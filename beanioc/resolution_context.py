"""
ResolutionContext

This module provides the context management for dependency resolution.
The ResolutionContext tracks:

- The chain of bean ids currently being resolved (cycle detection)
- The container performing the resolution

The context is stored in a ContextVar for thread-safety and is
automatically managed during dependency resolution.
"""

from contextvars import ContextVar
from typing import List, Optional, Tuple, TYPE_CHECKING

from .exceptions import CyclicDependencyError

if TYPE_CHECKING:
    from .container import BeanContainer


class ResolutionContext:
    """Context for one nested step of dependency resolution.

    Attributes:
        container: Reference to the container performing the resolution
        resolving: Ordered ids in the resolution chain, outermost first

    Note:
        This class is used internally by BeanContainer.
        Users should not need to interact with it directly.

    Example (internal usage)::

        ctx = ResolutionContext(container, ("a", "b"))
        ctx.check("c")           # OK
        ctx.check("a")           # Raises CyclicDependencyError: a -> b -> a
        child = ctx.enter("c")   # chain a -> b -> c
    """

    def __init__(self, container: 'BeanContainer', resolving: Tuple[str, ...] = ()):
        self.container = container
        self.resolving: Tuple[str, ...] = resolving

    def check(self, bean_id: str) -> None:
        """Fail if ``bean_id`` is already being resolved in this chain.

        Raises:
            CyclicDependencyError: When the id is already in progress
        """
        if bean_id in self.resolving:
            raise CyclicDependencyError(list(self.resolving) + [bean_id])

    def enter(self, bean_id: str) -> 'ResolutionContext':
        """Child context with ``bean_id`` appended to the chain."""
        return ResolutionContext(self.container, self.resolving + (bean_id,))

    @property
    def chain(self) -> List[str]:
        return list(self.resolving)


def current_context(container: 'BeanContainer') -> ResolutionContext:
    """Get the active context for ``container``, or a fresh empty one.

    A context opened by a different container does not count: each
    container tracks its own chain.
    """
    ctx = _resolution_context.get()
    if ctx is None or ctx.container is not container:
        return ResolutionContext(container)
    return ctx


# Resolution context of the current thread / task
_resolution_context: ContextVar[Optional[ResolutionContext]] = ContextVar(
    '_BEANIOC_RESOLUTION_CONTEXT',
    default=None
)
