"""The generic accept engine.

``generic_accept`` goes into the ``accept()`` of a composite-pattern root and
of every composite, so leaves need no dispatch code and visitors only
implement the handlers they care about.

NOTE: this only works for trees. Cycles recurse until the stack runs out.

For a leaf of a two-level hierarchy (``Book`` derived from ``Toy``) the
visitor sees::

    enter_Toy(book, None)
    visit_Toy(book, None)
    enter_Book(book, None)
    visit_Book(book, None)
    exit_Book(book, None)
    exit_Toy(book, None)

A composite (``Box`` derived from ``Toy``) holding one book adds an
intention-tagged bracket around its children::

    enter_Toy(box, None)
    visit_Toy(box, None)
    enter_Box(box, None)
    visit_Box(box, None)
      enter_Toy(box, 'content')
      enter_Box(box, 'content')
        ... full sequence for the book ...
      exit_Box(box, 'content')
      exit_Toy(box, 'content')
    exit_Box(box, None)
    exit_Toy(box, None)

A visitor that ignores the context argument therefore enters and exits each
composite twice.
"""

from typing import Any, Iterable, List, Optional

from .._common.config import DispatchConfig, Phase
from ..errors import ConfigurationError, InvalidDescriptorError
from .descriptor import normalize_nested
from .dispatch import find_handler
from .hierarchy import class_for, derivation


class AcceptEngine:
    """Runs the enter/visit/exit sequence for one object and its children.

    The engine holds only its configuration, so one instance can serve any
    number of traversals.
    """

    def __init__(self, config: Optional[DispatchConfig] = None):
        """Initialize the engine.

        Args:
            config: Dispatch configuration (defaults to DispatchConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or DispatchConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    def accept(self, obj: Any, visitor: Any, nested_raw: Any = ()) -> Any:
        """Traverse ``obj`` (and its children, if any) with ``visitor``.

        Args:
            obj: The object whose accept() is running
            visitor: Visitor to dispatch to
            nested_raw: Child descriptor(s); empty or None for leaves

        Returns:
            The visitor, unchanged

        Raises:
            InvalidDescriptorError: If a descriptor or child is malformed
        """
        neutral = self.config.neutral_context
        nested = normalize_nested(nested_raw, neutral)

        class_path = derivation(class_for(obj))
        reversed_class_path = class_path[::-1]

        # The mainline pass always runs, for leaves and composites alike
        self._apply_path(obj, visitor, reversed_class_path, (Phase.ENTER, Phase.VISIT), neutral)

        for descriptor in nested:
            self._apply_path(obj, visitor, reversed_class_path, (Phase.ENTER,), descriptor.intention)
            for child in descriptor.vals:
                self._accept_child(child, visitor)
            self._apply_path(obj, visitor, class_path, (Phase.EXIT,), descriptor.intention)

        self._apply_path(obj, visitor, class_path, (Phase.EXIT,), neutral)

        return visitor

    def _apply_path(self, obj: Any, visitor: Any, path: List[type],
                    phases: Iterable[Phase], context: Any) -> None:
        for klass in path:
            for phase in phases:
                find_handler(visitor, phase, klass, self.config)(obj, context)

    @staticmethod
    def _accept_child(child: Any, visitor: Any) -> None:
        accept = getattr(child, "accept", None)
        if not callable(accept):
            raise InvalidDescriptorError(
                f"Child {child!r} has no accept() entry point"
            )
        accept(visitor)


_default_engine = AcceptEngine()


def default_engine() -> AcceptEngine:
    """Return the engine used by generic_accept()."""
    return _default_engine


def generic_accept(obj: Any, visitor: Any, nested_raw: Any = ()) -> Any:
    """Traverse ``obj`` with ``visitor`` using the default configuration.

    Args:
        obj: The composite-pattern entry (composite or leaf)
        visitor: Visitor to dispatch to
        nested_raw: ``Nested`` descriptor, ``{'intention', 'vals'}`` mapping,
            or a list of them; omit for leaves

    Returns:
        The visitor, for chaining

    Example:
        >>> class Box(Toy):
        ...     def accept(self, visitor):
        ...         return generic_accept(self, visitor,
        ...                               Nested('content', self.toys))
    """
    return _default_engine.accept(obj, visitor, nested_raw)
