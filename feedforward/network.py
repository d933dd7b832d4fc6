from __future__ import annotations
import logging
from typing import List, Tuple, Union

import numpy as np

from .activations import ActivationKind
from .config import CFG, Config
from .errors import DuplicateInputLayer, MissingInputLayer, OutputAlreadyFinalized
from .layer import Layer, check_size

logger = logging.getLogger(__name__)


class NeuralNetwork:
    """Stack of dense layers built as ``input -> hidden* -> output``.

    Builder calls return the network itself so they can be chained::

        net = (NeuralNetwork()
               .add_input(2)
               .add_hidden_layer(3, "sigmoid")
               .add_output_layer(2, "sigmoid"))

    A call that fails raises before touching any state.
    """

    def __init__(self, config: Config = CFG):
        self.config = config
        self.input_size = 0
        self.input_created = False
        self.output_created = False
        self._layers: List[Layer] = []
        self._rng = np.random.default_rng(config.seed)

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)

    @property
    def output_size(self) -> int:
        return self._layers[-1].output_size if self._layers else self.input_size

    def add_input(self, n: int) -> "NeuralNetwork":
        if self.input_created:
            logger.warning("add_input(%r) rejected: input of size %d already set", n, self.input_size)
            raise DuplicateInputLayer(f"Network already has an input layer of size {self.input_size}")
        self.input_size = check_size("Input size", n)
        self.input_created = True
        logger.debug("input layer set: %d features", self.input_size)
        return self

    def _check_can_append(self, what: str) -> None:
        if not self.input_created:
            logger.warning("%s rejected: no input layer", what)
            raise MissingInputLayer(f"Call add_input before {what}")
        if self.output_created:
            logger.warning("%s rejected: output layer already added", what)
            raise OutputAlreadyFinalized(f"Cannot call {what}: the output layer was already added")

    def _append(self, n: int, activation: Union[ActivationKind, str]) -> Layer:
        layer = Layer(self.output_size, n, activation, rng=self._rng, dtype=self.config.dtype)
        self._layers.append(layer)
        return layer

    def add_hidden_layer(self, n: int, activation: Union[ActivationKind, str]) -> "NeuralNetwork":
        self._check_can_append("add_hidden_layer")
        layer = self._append(n, activation)
        logger.debug("hidden layer %d appended: %r", len(self._layers) - 1, layer)
        return self

    def add_output_layer(self, n: int, activation: Union[ActivationKind, str]) -> "NeuralNetwork":
        self._check_can_append("add_output_layer")
        layer = self._append(n, activation)
        self.output_created = True
        logger.debug("output layer appended: %r", layer)
        return self

    def feed_forward(self, inputs) -> List[np.ndarray]:
        """Run ``inputs`` (n_samples x input_size) through every layer.

        Returns the full trace: ``trace[0]`` is the input batch and
        ``trace[i + 1]`` is the activation of ``layers[i]``.
        """
        out = np.atleast_2d(np.asarray(inputs, dtype=self.config.dtype))
        trace = [out]
        for lyr in self._layers:
            out = lyr.activate(out)
            trace.append(out)
        return trace

    def predict(self, inputs) -> np.ndarray:
        return self.feed_forward(inputs)[-1]

    def summary(self) -> str:
        lines = [
            "Model: \"feedforward\"",
            "Layer (type)           Output Shape        Param #",
            "==================================================",
            f"{'input (Input)':<23}{str((None, self.input_size)):<20}{0:>7}",
        ]
        total = 0
        for i, lyr in enumerate(self._layers):
            kind = "Output" if self.output_created and i == len(self._layers) - 1 else "Dense"
            name = f"dense_{i} ({kind})"
            lines.append(
                f"{name:<23}{str((None, lyr.output_size)):<20}{lyr.parameter_count:>7}"
                f"    activation={lyr.activation.value}"
            )
            total += lyr.parameter_count
        lines.append("==================================================")
        lines.append(f"Total params: {total}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        sizes = " -> ".join(str(s) for s in [self.input_size] + [lyr.output_size for lyr in self._layers])
        state = "complete" if self.output_created else "incomplete"
        return f"NeuralNetwork({sizes}, {state})"


__all__ = ["NeuralNetwork"]
