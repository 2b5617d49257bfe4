"""Composition utilities: pipe(), compose() and curry()."""

from remote_maybe.compose.curry import Curried, curry
from remote_maybe.compose.pipe import compose, identity, pipe

__all__ = [
    'Curried',
    'compose',
    'curry',
    'identity',
    'pipe',
]
