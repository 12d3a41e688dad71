"""Child collection descriptors for composites.

A composite describes each group of children it owns with a ``Nested``
descriptor: an opaque ``intention`` tag (why the children are attached) and
the ordered ``vals``. The engine also accepts the plain shapes
``{"intention": ..., "vals": ...}`` and ``(intention, vals)``. A bare tuple
passed as ``nested_raw`` is read as a sequence of descriptors, so the pair
form has to sit inside a list or tuple.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, List

from ..errors import InvalidDescriptorError


@dataclass(frozen=True)
class Nested:
    """One intention-tagged collection of children."""

    intention: Any
    vals: Iterable


def _coerce(raw: Any) -> Nested:
    """Turn one raw descriptor into a Nested instance."""
    if isinstance(raw, Nested):
        return raw

    if isinstance(raw, Mapping):
        missing = [key for key in ("intention", "vals") if key not in raw]
        if missing:
            raise InvalidDescriptorError(
                f"Descriptor is missing {', '.join(missing)}: {raw!r}"
            )
        return Nested(raw["intention"], raw["vals"])

    if isinstance(raw, tuple) and len(raw) == 2:
        return Nested(*raw)

    raise InvalidDescriptorError(
        f"Expected Nested, mapping or (intention, vals) pair, got {raw!r}"
    )


def _check(descriptor: Nested, neutral: Any) -> None:
    vals = descriptor.vals
    if isinstance(vals, (str, bytes)) or not isinstance(vals, Iterable):
        raise InvalidDescriptorError(
            f"Descriptor vals must be an iterable of children, got {vals!r}"
        )
    if descriptor.intention is neutral or descriptor.intention == neutral:
        raise InvalidDescriptorError(
            f"Descriptor intention {descriptor.intention!r} is the neutral context"
        )


def normalize_nested(nested_raw: Any, neutral: Any = None) -> List[Nested]:
    """Normalize the ``nested_raw`` argument of accept into a list.

    Args:
        nested_raw: None, a single descriptor, or a sequence of descriptors
        neutral: The neutral context; no intention may equal it

    Returns:
        List of validated Nested descriptors (empty for leaves)

    Raises:
        InvalidDescriptorError: If any descriptor is malformed
    """
    if nested_raw is None:
        return []

    # A single descriptor rather than a sequence of them
    if isinstance(nested_raw, (Nested, Mapping)):
        items = [nested_raw]
    elif isinstance(nested_raw, (list, tuple)):
        items = list(nested_raw)
    else:
        raise InvalidDescriptorError(
            f"Expected a descriptor or a list of descriptors, got {nested_raw!r}"
        )

    descriptors = [_coerce(item) for item in items]
    for descriptor in descriptors:
        _check(descriptor, neutral)
    return descriptors
