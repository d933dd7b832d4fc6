"""Feed-forward inference for dense multilayer perceptrons, on NumPy."""

from .activations import ActivationKind, activate, derivative
from .config import CFG, Config
from .errors import (
    DuplicateInputLayer,
    InputShapeMismatch,
    LayerShapeMismatch,
    MissingInputLayer,
    NetworkError,
    OutputAlreadyFinalized,
)
from .export_utils import export_trace_csv, export_trace_json
from .interpreter import compile_network
from .layer import Layer
from .network import NeuralNetwork

__version__ = "0.1.0"

__all__ = [
    "ActivationKind",
    "activate",
    "derivative",
    "CFG",
    "Config",
    "NetworkError",
    "DuplicateInputLayer",
    "MissingInputLayer",
    "OutputAlreadyFinalized",
    "LayerShapeMismatch",
    "InputShapeMismatch",
    "Layer",
    "NeuralNetwork",
    "compile_network",
    "export_trace_csv",
    "export_trace_json",
]
