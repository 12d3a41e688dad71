"""Async accept engine.

Runs the same enter/visit/exit sequence as the sync engine, awaiting every
handler that returns an awaitable before making the next call. Children are
traversed one after another through their ``accept_async(visitor)`` entry
point, so no two children's sequences ever interleave.
"""

import inspect
from typing import Any, Iterable, List

from .._common.config import Phase
from ..core.descriptor import normalize_nested
from ..core.dispatch import find_handler
from ..core.engine import AcceptEngine
from ..core.hierarchy import class_for, derivation
from ..errors import InvalidDescriptorError


class AsyncAcceptEngine(AcceptEngine):
    """Async counterpart of AcceptEngine.

    Handlers may be plain functions or coroutine functions; both can be mixed
    on the same visitor.
    """

    async def accept(self, obj: Any, visitor: Any, nested_raw: Any = ()) -> Any:
        """Traverse ``obj`` (and its children, if any) with ``visitor``.

        Args:
            obj: The object whose accept_async() is running
            visitor: Visitor to dispatch to
            nested_raw: Child descriptor(s); empty or None for leaves

        Returns:
            The visitor, unchanged
        """
        neutral = self.config.neutral_context
        nested = normalize_nested(nested_raw, neutral)

        class_path = derivation(class_for(obj))
        reversed_class_path = class_path[::-1]

        await self._apply_path_async(obj, visitor, reversed_class_path, (Phase.ENTER, Phase.VISIT), neutral)

        for descriptor in nested:
            await self._apply_path_async(obj, visitor, reversed_class_path, (Phase.ENTER,), descriptor.intention)
            for child in descriptor.vals:
                await self._accept_child_async(child, visitor)
            await self._apply_path_async(obj, visitor, class_path, (Phase.EXIT,), descriptor.intention)

        await self._apply_path_async(obj, visitor, class_path, (Phase.EXIT,), neutral)

        return visitor

    async def _apply_path_async(self, obj: Any, visitor: Any, path: List[type],
                                phases: Iterable[Phase], context: Any) -> None:
        for klass in path:
            for phase in phases:
                result = find_handler(visitor, phase, klass, self.config)(obj, context)
                if inspect.isawaitable(result):
                    await result

    @staticmethod
    async def _accept_child_async(child: Any, visitor: Any) -> None:
        accept_async = getattr(child, "accept_async", None)
        if not callable(accept_async):
            raise InvalidDescriptorError(
                f"Child {child!r} has no accept_async() entry point"
            )
        await accept_async(visitor)


async def generic_accept_async(obj: Any, visitor: Any, nested_raw: Any = ()) -> Any:
    """Async version of generic_accept() using the default configuration.

    Example:
        >>> class Box(Toy):
        ...     async def accept_async(self, visitor):
        ...         return await generic_accept_async(
        ...             self, visitor, Nested('content', self.toys))
    """
    return await AsyncAcceptEngine().accept(obj, visitor, nested_raw)
