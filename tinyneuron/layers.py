"""Data structures that make up a feed-forward network."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Neuron:
    """A single unit: its activation, bias, error term and outgoing weights.

    ``weight`` holds one entry per neuron of the next layer; neurons of the
    output layer have no outgoing weights and keep it as ``None``.
    """

    val: float = 0.0
    bias: float = 0.0
    deltas: float = 0.0
    weight: list[float] | None = None


@dataclass
class Layer:
    """An ordered group of neurons."""

    neurons: list[Neuron] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neurons)

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self.neurons)

    def __getitem__(self, index: int) -> Neuron:
        return self.neurons[index]

    def values(self) -> list[float]:
        """Return the activation of every neuron, in order."""
        return [neuron.val for neuron in self.neurons]


@dataclass
class NeuralNetwork:
    """A stack of layers, input layer first."""

    layers: list[Layer] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self.layers)

    def __getitem__(self, index: int) -> Layer:
        return self.layers[index]

    def output_layer(self) -> Layer:
        """Return the last layer of the network."""
        if not self.layers:
            raise ValueError("network has no layers")
        return self.layers[-1]