# ai/neural_network.py - Feed-forward perceptron
"""
Neural Net Wars Brain
Small feed-forward network with tanh neurons and random, untrained weights
"""

import numpy as np
from typing import List, Optional, Sequence


class TopologyError(ValueError):
    """Raised when a network shape cannot be built"""


class Neuron:
    """Single tanh neuron with a fixed weight vector and bias"""

    def __init__(self, weights, bias: float):
        self.weights = np.array(weights, dtype=float)
        self.weights.setflags(write=False)
        self.bias = float(bias)

    @classmethod
    def random(cls, input_width: int, rng: np.random.Generator) -> "Neuron":
        """Create a neuron with uniform random weights and bias in [-1, 1]"""
        weights = rng.uniform(-1.0, 1.0, size=input_width)
        bias = rng.uniform(-1.0, 1.0)
        return cls(weights, bias)

    @property
    def input_width(self) -> int:
        return self.weights.shape[0]

    def activate(self, inputs) -> float:
        """Return tanh(bias + inputs . weights)

        Args:
            inputs: Sequence of length input_width

        Raises:
            ValueError: if the input length does not match the weights
        """
        inputs = np.asarray(inputs, dtype=float)
        if inputs.shape != self.weights.shape:
            raise ValueError(
                f"Neuron expects {self.input_width} inputs, got {inputs.shape[0] if inputs.ndim else 0}"
            )
        return float(np.tanh(self.bias + np.dot(inputs, self.weights)))


class Layer:
    """Ordered group of neurons sharing the same input width"""

    def __init__(self, neurons: Sequence[Neuron]):
        if not neurons:
            raise TopologyError("A layer needs at least one neuron")

        widths = {neuron.input_width for neuron in neurons}
        if len(widths) != 1:
            raise TopologyError(f"Neurons in a layer must share one input width, got {sorted(widths)}")

        self.neurons = tuple(neurons)
        self.input_width = widths.pop()

    def __len__(self):
        return len(self.neurons)

    def activate(self, inputs) -> np.ndarray:
        """Evaluate every neuron on the same inputs"""
        return np.array([neuron.activate(inputs) for neuron in self.neurons])


class NeuralNetwork:
    """Feed-forward network built from a topology like (4, 6, 2)"""

    def __init__(self, topology: Sequence[int], rng: Optional[np.random.Generator] = None):
        """Build a randomly initialised network

        Args:
            topology: Layer widths, input width first
            rng: Random source for weights (fresh unseeded one if omitted)
        """
        topology = self._validate_topology(topology)
        rng = rng if rng is not None else np.random.default_rng()

        layers = []
        for input_width, neuron_count in zip(topology[:-1], topology[1:]):
            layers.append(Layer([Neuron.random(input_width, rng) for _ in range(neuron_count)]))

        self.layers = self._validate_layers(layers)

    @classmethod
    def from_layers(cls, layers: Sequence[Layer]) -> "NeuralNetwork":
        """Build a network from explicit layers, checking they chain together"""
        network = cls.__new__(cls)
        network.layers = cls._validate_layers(list(layers))
        return network

    @staticmethod
    def _validate_topology(topology) -> List[int]:
        topology = list(topology)
        if len(topology) < 2:
            raise TopologyError(f"Topology needs at least 2 entries, got {topology}")

        for width in topology:
            if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
                raise TopologyError(f"Layer widths must be integers, got {width!r}")
            if width <= 0:
                raise TopologyError(f"Layer widths must be positive, got {width}")

        return [int(width) for width in topology]

    @staticmethod
    def _validate_layers(layers: List[Layer]) -> List[Layer]:
        if not layers:
            raise TopologyError("A network needs at least one layer")

        for index in range(1, len(layers)):
            expected = len(layers[index - 1])
            if layers[index].input_width != expected:
                raise TopologyError(
                    f"Layer {index} takes {layers[index].input_width} inputs "
                    f"but layer {index - 1} produces {expected}"
                )
        return layers

    @property
    def topology(self) -> tuple:
        return (self.layers[0].input_width,) + tuple(len(layer) for layer in self.layers)

    def parameter_count(self) -> int:
        """Total number of weights and biases"""
        return sum(len(layer) * (layer.input_width + 1) for layer in self.layers)

    def feed_forward(self, inputs) -> np.ndarray:
        """Run one forward pass

        Args:
            inputs: Vector with topology[0] values

        Returns:
            Array with topology[-1] values, each in (-1, 1)
        """
        values = np.asarray(inputs, dtype=float)
        for layer in self.layers:
            values = layer.activate(values)
        return values
