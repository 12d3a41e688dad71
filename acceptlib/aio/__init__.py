"""Asynchronous implementation of AcceptLib.

Handlers may be coroutine functions; the engine awaits them in the same
order the sync engine would call them.
"""

from .engine import AsyncAcceptEngine, generic_accept_async

__all__ = [
    'AsyncAcceptEngine',
    'generic_accept_async',
]
