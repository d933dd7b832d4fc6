from __future__ import annotations
import logging
import numbers
from typing import Optional, Union

import numpy as np

from . import activations
from .activations import ActivationKind
from .config import CFG, float_dtype
from .errors import InputShapeMismatch, LayerShapeMismatch

logger = logging.getLogger(__name__)


def check_size(name: str, n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")
    return int(n)


class Layer:
    """Fully-connected layer: ``act([1, x] @ W)``.

    ``W`` has shape ``(input_size + 1, output_size)``; row 0 holds the bias of
    each output unit.
    """

    def __init__(self, input_size: int, output_size: int,
                 activation: Union[ActivationKind, str] = ActivationKind.SIGMOID,
                 rng: Optional[np.random.Generator] = None,
                 dtype: Optional[str] = None):
        self.input_size = check_size("input_size", input_size)
        self.output_size = check_size("output_size", output_size)
        self.activation = ActivationKind.parse(activation)
        self.dtype = float_dtype(dtype or CFG.dtype)

        if rng is None:
            rng = np.random.default_rng(CFG.seed)
        fan = self.input_size + self.output_size
        self.epsilon = float(np.sqrt(6.0) / np.sqrt(fan)) if fan else 0.0
        weights = rng.uniform(-self.epsilon, self.epsilon, size=self.shape)
        self._weights = self._freeze(weights)
        logger.debug("created layer %dx%d (%s), epsilon=%.6f",
                     self.input_size, self.output_size, self.activation.value, self.epsilon)

    @property
    def shape(self) -> tuple:
        return (self.input_size + 1, self.output_size)

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def parameter_count(self) -> int:
        return (self.input_size + 1) * self.output_size

    def _freeze(self, weights) -> np.ndarray:
        arr = np.array(weights, dtype=self.dtype)
        arr.flags.writeable = False
        return arr

    def activate(self, inputs) -> np.ndarray:
        x = np.atleast_2d(np.asarray(inputs, dtype=self.dtype))
        if x.ndim != 2 or x.shape[1] != self.input_size:
            logger.warning("rejected input batch of shape %s for layer expecting %d features",
                           x.shape, self.input_size)
            raise InputShapeMismatch(
                f"Expected an input batch of shape (n_samples, {self.input_size}), got {x.shape}"
            )
        augmented = np.hstack([np.ones((x.shape[0], 1), dtype=self.dtype), x])
        return activations.activate(self.activation, augmented @ self._weights)

    def update_weights(self, weights) -> np.ndarray:
        candidate = np.asarray(weights, dtype=self.dtype)
        if candidate.shape != self.shape:
            logger.warning("rejected weights of shape %s, expected %s", candidate.shape, self.shape)
            raise LayerShapeMismatch(
                f"Weight matrix must have shape {self.shape}, got {candidate.shape}"
            )
        self._weights = self._freeze(candidate)
        return self._weights

    def __repr__(self) -> str:
        return f"Layer({self.input_size}, {self.output_size}, {self.activation.value!r})"


__all__ = ["Layer"]
