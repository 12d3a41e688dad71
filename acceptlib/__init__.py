"""AcceptLib - Generic accept() for composite-pattern trees.

AcceptLib lets any tree of typed objects be walked by independently written
visitors. Leaves need no dispatch code, composites describe their children,
and visitors implement only the handlers they care about:

    enter_<Type>(obj, context)
    visit_<Type>(obj, context)
    exit_<Type>(obj, context)

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from acceptlib import generic_accept

Asynchronous:
    from acceptlib.aio import generic_accept_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from ._common.config import Phase, DispatchConfig
from .errors import AcceptError, InvalidDescriptorError, ConfigurationError
from .core import (
    class_for,
    derivation,
    Nested,
    NOOP,
    Visitor,
    find_handler,
    on_enter,
    on_visit,
    on_exit,
    AcceptEngine,
    generic_accept,
    Acceptable,
)
from .visitors import HandlerCall, TracingVisitor, provide_generic_visitor
from .api import trace_calls, iter_nodes, count_nodes, find_nodes, get_leaf_nodes
from . import aio

__all__ = [
    "__version__",
    # Config
    "Phase",
    "DispatchConfig",
    # Errors
    "AcceptError",
    "InvalidDescriptorError",
    "ConfigurationError",
    # Core
    "class_for",
    "derivation",
    "Nested",
    "NOOP",
    "Visitor",
    "find_handler",
    "on_enter",
    "on_visit",
    "on_exit",
    "AcceptEngine",
    "generic_accept",
    "Acceptable",
    # Generic visitor
    "HandlerCall",
    "TracingVisitor",
    "provide_generic_visitor",
    # API
    "trace_calls",
    "iter_nodes",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "aio",
]
