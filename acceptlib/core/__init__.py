"""Core abstractions for AcceptLib.

This module contains the dispatch chain resolution, handler lookup and the
accept engine itself.
"""

from .hierarchy import class_for, derivation, is_root_marker
from .descriptor import Nested, normalize_nested
from .dispatch import NOOP, Visitor, find_handler, on_enter, on_visit, on_exit
from .engine import AcceptEngine, default_engine, generic_accept
from .acceptable import Acceptable

__all__ = [
    "class_for",
    "derivation",
    "is_root_marker",
    "Nested",
    "normalize_nested",
    "NOOP",
    "Visitor",
    "find_handler",
    "on_enter",
    "on_visit",
    "on_exit",
    "AcceptEngine",
    "default_engine",
    "generic_accept",
    "Acceptable",
]
