from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Tuple, Union

import numpy as np


class ActivationKind(str, Enum):
    SIGMOID = "sigmoid"
    RELU = "relu"
    TANH = "tanh"

    @classmethod
    def parse(cls, value: Union["ActivationKind", str]) -> "ActivationKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(k.value for k in cls)
            raise ValueError(f"Unsupported activation: {value!r} (expected one of {supported})") from None


def sigmoid(x: np.ndarray) -> np.ndarray:
    # 1 / (1 + e^-x) == exp(-log(1 + e^-x)); logaddexp does not overflow
    return np.exp(-np.logaddexp(0.0, -x))


def sigmoid_derivative(x: np.ndarray) -> np.ndarray:
    s = sigmoid(x)
    return s * (1.0 - s)


def relu(x: np.ndarray) -> np.ndarray:
    return np.where(x > 0.0, x, 0.0)


def relu_derivative(x: np.ndarray) -> np.ndarray:
    return np.where(x > 0.0, 1.0, 0.0)


def tanh(x: np.ndarray) -> np.ndarray:
    return np.tanh(x)


def tanh_derivative(x: np.ndarray) -> np.ndarray:
    t = np.tanh(x)
    return 1.0 - t * t


Fn = Callable[[np.ndarray], np.ndarray]

# One entry per ActivationKind, no fallback.
ACT: Dict[ActivationKind, Tuple[Fn, Fn]] = {
    ActivationKind.SIGMOID: (sigmoid, sigmoid_derivative),
    ActivationKind.RELU: (relu, relu_derivative),
    ActivationKind.TANH: (tanh, tanh_derivative),
}


def _as_float(matrix) -> np.ndarray:
    x = np.asarray(matrix)
    return x if x.dtype.kind == "f" else x.astype(float)


def activate(kind: Union[ActivationKind, str], matrix) -> np.ndarray:
    fn, _ = ACT[ActivationKind.parse(kind)]
    return fn(_as_float(matrix))


def derivative(kind: Union[ActivationKind, str], matrix) -> np.ndarray:
    """Elementwise derivative w.r.t. the pre-activation values.

    Nothing in the forward pass calls this; it is the contract a trainer
    would use for backpropagation.
    """
    _, fn = ACT[ActivationKind.parse(kind)]
    return fn(_as_float(matrix))


__all__ = ["ActivationKind", "ACT", "activate", "derivative", "sigmoid", "relu", "tanh"]
