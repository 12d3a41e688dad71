"""Test fixtures for AcceptLib consumers.

A small toy hierarchy written the way a consumer would write it, plus a
recording visitor, so test suites can check traversal order without building
their own trees.

Toy is the composite-pattern root. Box is its composite and holds other
toys, including other boxes::

    Toy
    ├── Box ── SpecialBox
    ├── Book ── ArtBook
    ├── Ball
    └── Doll
"""

from typing import Any, Iterable, List, Tuple

from ..core import Acceptable, Nested
from ..visitors import TracingVisitor


CONTENT = "content"


class Toy(Acceptable):
    """Base of the toy hierarchy."""

    def describe(self) -> str:
        raise NotImplementedError("Implement describe()")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.describe()!r})"


class Box(Toy):
    """Composite holding an ordered list of toys."""

    def __init__(self, toys: Iterable[Toy] = ()):
        self.toys = list(toys)

    def describe(self) -> str:
        return f"Box holds {len(self.toys)} items:"

    def accept_nested(self):
        return Nested(CONTENT, self.toys)


class SpecialBox(Box):
    pass


class Book(Toy):
    def __init__(self, title: str):
        self.title = title

    def describe(self) -> str:
        return f"A book named {self.title}"


class ArtBook(Book):
    def __init__(self, title: str, domain: str):
        super().__init__(title)
        self.domain = domain

    def describe(self) -> str:
        return f'An art book from "{self.domain}" named {self.title}'


class Ball(Toy):
    def __init__(self, size: str, color: str):
        self.size = size
        self.color = color

    def describe(self) -> str:
        return f"A {self.size} {self.color} ball"


class Doll(Toy):
    def __init__(self, size: str, desc: str):
        self.size = size
        self.desc = desc

    def describe(self) -> str:
        return f"A {self.size} doll that has {self.desc}"


def make_sample_box() -> Box:
    """Build the sample tree: two books and a special box of four toys.

    Returns:
        Box with 7 descendants (8 nodes in total)
    """
    return Box([
        Book("Lord of the Rings"),
        Book("Design Patterns"),
        SpecialBox([
            Ball("small", "red"),
            Ball("small", "green"),
            Doll("large", "green hair and a blue shirt"),
            ArtBook("The Art of How to Train Your Dragon",
                    "How to Train Your Dragon"),
        ]),
    ])


class CallRecorder(TracingVisitor):
    """TracingVisitor with helpers for asserting on call sequences.

    Example:
        recorder = CallRecorder()
        Book("A").accept(recorder)
        assert recorder.names() == ['enter_Toy', 'visit_Toy', ...]
    """

    def names(self) -> List[str]:
        """Return the handler names called, in order."""
        return [f"{call.phase}_{call.type_name}" for call in self.calls]

    def sequence(self) -> List[Tuple[str, Any, Any]]:
        """Return (handler name, node, context) triples, in order."""
        return [
            (f"{call.phase}_{call.type_name}", call.node, call.context)
            for call in self.calls
        ]
