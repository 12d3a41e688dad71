"""High-level API for AcceptLib.

This module provides simple, functional interfaces for common questions about
a composite tree. Each function runs one traversal through the root's own
``accept()`` entry point with a tracing visitor and reads the answer off the
recorded calls.

Every function takes an optional ``config``: the DispatchConfig of the
engine the tree is traversed with. When omitted, the config of the root's
``accept_engine`` (see Acceptable) is used, falling back to the defaults.
"""

from typing import Any, Callable, Iterator, List, Optional

from ._common.config import DispatchConfig, Phase
from .visitors import HandlerCall, TracingVisitor


def _config_for(root: Any, config: Optional[DispatchConfig]) -> DispatchConfig:
    if config is not None:
        return config
    engine = getattr(root, "accept_engine", None)
    engine_config = getattr(engine, "config", None)
    if isinstance(engine_config, DispatchConfig):
        return engine_config
    return DispatchConfig()


def _trace(root: Any, config: Optional[DispatchConfig]) -> TracingVisitor:
    visitor = TracingVisitor(config=_config_for(root, config))
    root.accept(visitor)
    return visitor


def trace_calls(root: Any, config: Optional[DispatchConfig] = None) -> List[HandlerCall]:
    """Traverse ``root`` and return every handler call in order.

    Args:
        root: Object exposing accept(visitor)
        config: Dispatch configuration of root's engine

    Returns:
        List of HandlerCall records

    Example:
        >>> for call in trace_calls(box):
        ...     print(call.phase, call.type_name, call.context)
    """
    return _trace(root, config).calls


def _own_visits(visitor: TracingVisitor) -> Iterator[HandlerCall]:
    # Each node gets exactly one visit for its most-derived type
    for call in visitor.calls:
        if call.phase == Phase.VISIT.value and visitor.is_own_type(call.type_name, call.node):
            yield call


def iter_nodes(root: Any, config: Optional[DispatchConfig] = None) -> Iterator[Any]:
    """Yield every node of the tree once, parents before children.

    Example:
        >>> [toy.describe() for toy in iter_nodes(box)]
    """
    for call in _own_visits(_trace(root, config)):
        yield call.node


def count_nodes(root: Any, config: Optional[DispatchConfig] = None) -> int:
    """Count the nodes in the tree, ``root`` included."""
    return sum(1 for _ in iter_nodes(root, config))


def find_nodes(root: Any, predicate: Callable[[Any], bool],
               config: Optional[DispatchConfig] = None) -> List[Any]:
    """Return the nodes for which ``predicate`` is true, in traversal order.

    Example:
        >>> books = find_nodes(box, lambda toy: isinstance(toy, Book))
    """
    return [node for node in iter_nodes(root, config) if predicate(node)]


def get_leaf_nodes(root: Any, config: Optional[DispatchConfig] = None) -> List[Any]:
    """Return the nodes that did not bracket any children.

    A composite whose accept() passed no descriptors counts as a leaf, while
    a composite with an empty descriptor does not.
    """
    visitor = _trace(root, config)
    composites = {
        id(call.node) for call in visitor.calls
        if not visitor.is_neutral(call.context)
    }
    return [
        call.node for call in _own_visits(visitor)
        if id(call.node) not in composites
    ]
