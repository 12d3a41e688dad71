"""Acceptable base class for composite-pattern hierarchies.

Guidelines for a hierarchy built on Acceptable:
  1. Once a composite, all derived classes MUST ALSO be composite
  2. Leaves can have composites derived from them
  3. Leaves do not override anything; composites override accept_nested()

Deriving from Acceptable is optional. Any object with an ``accept(visitor)``
that calls generic_accept() participates in traversal.
"""

from typing import Any, ClassVar, Optional

from .engine import AcceptEngine, default_engine


class Acceptable:
    """Root marker providing default accept entry points.

    Acceptable itself never appears in a dispatch chain, so the first class
    derived from it is the most basal type visitors see.
    """

    __derivation_root__ = True

    # Set on a hierarchy root to traverse it with a custom engine
    accept_engine: ClassVar[Optional[AcceptEngine]] = None

    def accept_nested(self) -> Any:
        """Return the child descriptors of this object.

        Leaves return an empty tuple. Composites return a ``Nested`` or a
        list of them.
        """
        return ()

    def accept(self, visitor: Any) -> Any:
        """Traverse this object with ``visitor`` and return the visitor."""
        engine = self.accept_engine or default_engine()
        return engine.accept(self, visitor, self.accept_nested())

    async def accept_async(self, visitor: Any) -> Any:
        """Traverse this object with ``visitor``, awaiting async handlers."""
        from ..aio.engine import AsyncAcceptEngine

        engine = AsyncAcceptEngine(self.accept_engine.config if self.accept_engine else None)
        return await engine.accept(self, visitor, self.accept_nested())


__all__ = ['Acceptable']
