"""Testing utilities for AcceptLib consumers."""

from .fixtures import (
    CONTENT,
    Toy,
    Box,
    SpecialBox,
    Book,
    ArtBook,
    Ball,
    Doll,
    make_sample_box,
    CallRecorder,
)

__all__ = [
    'CONTENT',
    'Toy',
    'Box',
    'SpecialBox',
    'Book',
    'ArtBook',
    'Ball',
    'Doll',
    'make_sample_box',
    'CallRecorder',
]
