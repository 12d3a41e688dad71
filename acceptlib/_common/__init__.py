"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both engines. It should NOT be imported directly by users.

Important: This package must NEVER import from core or aio to avoid
circular dependencies.
"""

from .config import (
    Phase,
    DispatchConfig,
)

__all__ = [
    'Phase',
    'DispatchConfig',
]
