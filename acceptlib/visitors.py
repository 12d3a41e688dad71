"""Generic visitor provider.

``TracingVisitor`` answers every ``enter_*``, ``visit_*`` and ``exit_*``
handler name, so it sees the complete call sequence of a traversal without
any user-defined handlers. Each call is recorded and logged, indented by the
current nesting depth::

    >>> logging.basicConfig(level=logging.DEBUG)
    >>> box.accept(provide_generic_visitor())

It assumes the default ``{phase}_{name}`` handler template.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ._common.config import DispatchConfig, Phase


@dataclass(frozen=True)
class HandlerCall:
    """One handler invocation observed during a traversal."""

    phase: str
    type_name: str
    node: Any
    context: Any


class TracingVisitor:
    """Visitor that records and logs every handler call.

    Depth increases when a composite's most-derived type is entered with an
    intention and decreases on the matching intention-tagged exit.
    """

    PHASES = tuple(phase.value for phase in Phase)

    def __init__(self,
                 logger: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG,
                 record: bool = True,
                 neutral_context: Any = None,
                 indent: str = "  ",
                 config: Optional[DispatchConfig] = None):
        """Initialize the visitor.

        Args:
            logger: Logger to write to (defaults to this module's logger)
            level: Log level for each handler call
            record: If True, append a HandlerCall to ``calls`` per call
            neutral_context: Neutral context used by the engine
            indent: Indentation unit per nesting level
            config: Dispatch configuration of the traversed hierarchy; when
                given, its neutral_context and type names are used
        """
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.record = record
        self.config = config or DispatchConfig(neutral_context=neutral_context)
        self.neutral_context = self.config.neutral_context
        self.indent = indent
        self.calls: List[HandlerCall] = []
        self.depth = 0

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        phase, sep, type_name = name.partition("_")
        if not sep or not type_name or phase not in self.PHASES:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return functools.partial(self._handle, phase, type_name)

    def is_own_type(self, type_name: str, node: Any) -> bool:
        """Check if ``type_name`` names the most-derived type of ``node``."""
        return type_name == self.config.name_for(type(node))

    def is_neutral(self, context: Any) -> bool:
        return context is self.neutral_context or context == self.neutral_context

    def _handle(self, phase: str, type_name: str, node: Any, context: Any) -> None:
        nested = not self.is_neutral(context)
        most_derived = self.is_own_type(type_name, node)

        if phase == Phase.EXIT.value and nested and most_derived:
            self.depth -= 1

        if self.record:
            self.calls.append(HandlerCall(phase, type_name, node, context))
        self.logger.log(self.level, "%s%s_%s(%r, %r)",
                        self.indent * self.depth, phase, type_name, node, context)

        if phase == Phase.ENTER.value and nested and most_derived:
            self.depth += 1

    def clear(self) -> None:
        """Forget recorded calls so the visitor can be reused."""
        self.calls.clear()
        self.depth = 0


def provide_generic_visitor(**kwargs: Any) -> TracingVisitor:
    """Return a visitor that traces every enter/visit/exit call.

    Keyword arguments are passed to TracingVisitor.
    """
    return TracingVisitor(**kwargs)
