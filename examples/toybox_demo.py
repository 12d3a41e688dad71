#!/usr/bin/env python3
"""
Toy box example showing the generic accept facility.

This example demonstrates:
- A generic visitor that traces every handler call
- A visitor that only handles the hierarchy root (every toy)
- A visitor that only handles one leaf type (books)
- A visitor that uses the intention context to track nesting
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from acceptlib import class_for, provide_generic_visitor
from acceptlib.testing import make_sample_box


class ToyDescriber:
    """Show each toy."""

    def visit_Toy(self, toy, context):
        print(toy.describe())


class BookLister:
    """List just books."""

    def visit_Book(self, book, context):
        print(book.describe())


class NestingDemo:
    """Print every toy, indented by how many boxes it sits in.

    The neutral (None) context marks the plain pass over a box, the
    'content' context marks entering its children. The intention reaches
    enter_Toy too, which is why the Toy handlers print twice per box.
    """

    def __init__(self):
        self.depth = 0

    def _print(self, s):
        print(f"{'  ' * self.depth}{s}")

    def enter_Toy(self, toy, context):
        self._print(f"Entered toy ({class_for(toy).__name__}) with context {context}: {toy.describe()}")

    def exit_Toy(self, toy, context):
        self._print(f"Exited toy with context {context}: {toy.describe()}")

    def enter_Box(self, box, context):
        if context is not None:
            self._print(f"Entering box of {len(box.toys)} items")
            self.depth += 1

    def exit_Box(self, box, context):
        if context is not None:
            self.depth -= 1
            self._print(f"Exiting box of {len(box.toys)} items")


def main():
    """Run every demo visitor over the sample box."""
    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    stuff = make_sample_box()

    print("*** GENERIC VISITOR ***")
    stuff.accept(provide_generic_visitor())

    print("*** EACH TOY (ToyDescriber) ***")
    stuff.accept(ToyDescriber())

    print("*** EACH BOOK (BookLister) ***")
    stuff.accept(BookLister())

    print("*** EACH THING ONLY FOR NESTING (NestingDemo) ***")
    stuff.accept(NestingDemo())


if __name__ == "__main__":
    main()
