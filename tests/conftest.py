import logging

import numpy as np
import pytest

from feedforward import Config, NeuralNetwork

HIDDEN_WEIGHTS = np.array([[-4, -3, -2], [-1, 0, 1], [2, 3, 4]]) / 9.0
OUTPUT_WEIGHTS = np.array([[-4, -3], [-2, -1], [1, 2], [3, 4]]) / 9.0


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    yield
    logging.getLogger("feedforward").setLevel(logging.NOTSET)


@pytest.fixture
def seeded_config():
    return Config(seed=1234)


@pytest.fixture
def pinned_network():
    """input(2) -> hidden(3, sigmoid) -> output(2, sigmoid) with fixed weights."""
    net = NeuralNetwork().add_input(2).add_hidden_layer(3, "sigmoid").add_output_layer(2, "sigmoid")
    hidden, output = net.layers
    hidden.update_weights(HIDDEN_WEIGHTS)
    output.update_weights(OUTPUT_WEIGHTS)
    return net
