"""Type identity and hierarchy resolution for AcceptLib.

Given the hierarchy::

    class Toy(Acceptable): ...
    class Box(Toy): ...
    class SpecialBox(Box): ...

``derivation(SpecialBox)`` returns ``[SpecialBox, Box, Toy]``. The walk stops
at the implicit root: ``object``, ``abc.ABC``, ``typing.Generic`` and any
class that declares ``__derivation_root__ = True`` in its own body
(``Acceptable`` does). Those classes never appear in a dispatch chain.
"""

from abc import ABC
from typing import Any, Generic, List, Optional


ROOT_MARKER_ATTR = "__derivation_root__"

# Library bases shared by user hierarchies, never user types themselves
_IMPLICIT_ROOTS = (object, ABC, Generic)


def is_root_marker(klass: type) -> bool:
    """Check if ``klass`` is part of the implicit universal root.

    Only a flag set in the class's own namespace counts, so subclasses of a
    root marker are ordinary user types.
    """
    if klass in _IMPLICIT_ROOTS:
        return True
    return bool(vars(klass).get(ROOT_MARKER_ATTR, False))


def parent_of(klass: type) -> Optional[type]:
    """Return the user-defined parent of ``klass`` or None for root types.

    With several bases only the first eligible one is followed.
    """
    for base in klass.__bases__:
        if not is_root_marker(base):
            return base
    return None


def derivation(klass: type) -> List[type]:
    """Return the inheritance chain from ``klass`` to its most basal type.

    Args:
        klass: Class to resolve

    Returns:
        List ordered most-derived first, inclusive of ``klass``

    Raises:
        TypeError: If ``klass`` is not a class
    """
    if not isinstance(klass, type):
        raise TypeError(f"derivation() expects a class, got {klass!r}")

    parent = parent_of(klass)

    # if it's the base, end the recursion
    if parent is None:
        return [klass]

    return [klass, *derivation(parent)]


def class_for(obj: Any) -> type:
    """Return the most-derived runtime type of ``obj``."""
    return type(obj)
