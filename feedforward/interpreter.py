"""Compiles a textual architecture into a :class:`NeuralNetwork`.

Syntax: tokens joined by ``->``, e.g. ``Input(2) -> Dense(3, relu) -> Dense(1, sigmoid)``.
The last ``Dense`` becomes the output layer; the others are hidden layers.
"""

from __future__ import annotations
import logging
import re
from typing import List, Optional, Tuple

from .activations import ActivationKind
from .config import CFG, Config
from .network import NeuralNetwork

logger = logging.getLogger(__name__)

_PAT = {
    "input": re.compile(r"^Input\((\d+)\)$", re.IGNORECASE),
    "dense": re.compile(r"^Dense\((\d+)\s*,\s*([A-Za-z]+)\)$", re.IGNORECASE),
}


def _parse(tok: str) -> Tuple[str, tuple]:
    tok = tok.strip()
    m = _PAT["input"].match(tok)
    if m:
        return ("Input", (int(m.group(1)),))
    m = _PAT["dense"].match(tok)
    if m:
        return ("Dense", (int(m.group(1)), ActivationKind.parse(m.group(2))))
    raise ValueError(f"Unrecognized token: {tok}")


def parse_architecture(architecture: str) -> List[Tuple[str, tuple]]:
    if not architecture or not isinstance(architecture, str):
        raise ValueError("architecture must be a non-empty string")
    tokens = [t for t in (s.strip() for s in architecture.split("->")) if t]
    return [_parse(t) for t in tokens]


def compile_network(architecture: str, input_dim: Optional[int] = None,
                    config: Config = CFG) -> NeuralNetwork:
    layers = parse_architecture(architecture)
    inputs = [args[0] for (name, args) in layers if name == "Input"]
    if len(inputs) > 1:
        raise ValueError("architecture declares more than one Input")
    if inputs and layers[0][0] != "Input":
        raise ValueError("Input must be the first token")
    dense = [args for (name, args) in layers if name == "Dense"]
    if not dense:
        raise ValueError("architecture needs at least one Dense layer")
    final_in = inputs[0] if inputs else input_dim
    if final_in is None:
        raise ValueError("Specify Input(dim) or input_dim=...")

    net = NeuralNetwork(config=config).add_input(final_in)
    for units, act in dense[:-1]:
        net.add_hidden_layer(units, act)
    net.add_output_layer(*dense[-1])
    logger.debug("compiled %r into %r", architecture, net)
    return net


__all__ = ["compile_network", "parse_architecture"]
