"""Errors raised while assembling or driving a network.

Every error is a ``ValueError`` so callers that only care about bad input can
catch the builtin; callers that want the exact failure catch the subclass.
"""

from __future__ import annotations


class NetworkError(ValueError):
    """Base class for every error raised by this package."""


class DuplicateInputLayer(NetworkError):
    """``add_input`` was called on a network that already has an input."""


class MissingInputLayer(NetworkError):
    """A layer was appended before ``add_input``."""


class OutputAlreadyFinalized(NetworkError):
    """A layer was appended after the output layer was added."""


class LayerShapeMismatch(NetworkError):
    """A replacement weight matrix does not match ``(input_size + 1, output_size)``."""


class InputShapeMismatch(NetworkError):
    """An input batch does not have ``input_size`` columns."""


__all__ = [
    "NetworkError",
    "DuplicateInputLayer",
    "MissingInputLayer",
    "OutputAlreadyFinalized",
    "LayerShapeMismatch",
    "InputShapeMismatch",
]
