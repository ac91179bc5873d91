"""Building, evaluating and training a fully connected feed-forward network."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from tinyneuron.activation import sigmoid, sigmoid_derivative
from tinyneuron.layers import Layer, NeuralNetwork, Neuron

RANDOM_THRESHOLD = 1000
LEARNING_RATE = 0.005


def assign_random_value(threshold: int, rng: random.Random | None = None) -> float:
    """Return a random value in 0..1 with a resolution of ``1 / threshold``."""
    if threshold <= 0:
        raise ValueError("threshold must be a positive integer")
    source = rng if rng is not None else random
    return source.randrange(threshold + 1) / threshold


def feed_forward_network(
    layer_sizes: Sequence[int], rng: random.Random | None = None
) -> NeuralNetwork:
    """Build a network with random biases and weights in 0..1.

    Every neuron gets a bias; every neuron outside the output layer gets one
    weight per neuron of the following layer.
    """
    sizes = list(layer_sizes)
    if not sizes:
        raise ValueError("at least one layer size must be given")
    if any(size < 0 for size in sizes):
        raise ValueError("layer sizes must not be negative")

    layers = []
    for index, size in enumerate(sizes):
        next_size = sizes[index + 1] if index + 1 < len(sizes) else None
        neurons = []
        for _ in range(size):
            bias = assign_random_value(RANDOM_THRESHOLD, rng)
            weights = (
                [assign_random_value(RANDOM_THRESHOLD, rng) for _ in range(next_size)]
                if next_size is not None
                else None
            )
            neurons.append(Neuron(val=0.0, bias=bias, weight=weights))
        layers.append(Layer(neurons))
    return NeuralNetwork(layers)


def _check_network(network: NeuralNetwork) -> None:
    if network is None or not network.layers:
        raise ValueError("network is empty")


def forward_pass(network: NeuralNetwork, inputs: Iterable[float]) -> NeuralNetwork:
    """Feed ``inputs`` through the network, updating every neuron's value.

    Each neuron of a following layer takes the sigmoid of the weighted sum of
    the previous layer's values plus its own bias. Returns the same network.
    """
    _check_network(network)
    values = list(inputs)
    input_layer = network[0]
    if len(values) < len(input_layer):
        raise ValueError(
            f"expected {len(input_layer)} input values, got {len(values)}"
        )
    for neuron, value in zip(input_layer, values):
        neuron.val = float(value)

    for current, following in zip(network.layers, network.layers[1:]):
        for j, target in enumerate(following):
            total = sum(n.val * n.weight[j] for n in current)
            target.val = sigmoid(total + target.bias)
    return network


def back_propagation(
    network: NeuralNetwork,
    expected: Sequence[float],
    predicted: Layer | Iterable[float],
) -> None:
    """Compute error terms and adjust weights and biases by gradient descent."""
    _check_network(network)
    if expected is None:
        raise ValueError("expected output values are empty")
    if predicted is None:
        raise ValueError("predicted output values are empty")

    targets = [float(y) for y in expected]
    outputs = predicted.values() if isinstance(predicted, Layer) else list(predicted)
    output_layer = network.output_layer()
    if len(targets) != len(output_layer) or len(outputs) != len(output_layer):
        raise ValueError(
            f"output layer has {len(output_layer)} neurons, got "
            f"{len(targets)} expected and {len(outputs)} predicted values"
        )

    for neuron, a, y in zip(output_layer, outputs, targets):
        neuron.deltas = (a - y) * sigmoid_derivative(a)

    for current, following in reversed(list(zip(network.layers, network.layers[1:]))):
        for i, neuron in enumerate(current):
            error_sum = sum(nxt.deltas * neuron.weight[j] for j, nxt in enumerate(following))
            neuron.deltas = error_sum * sigmoid_derivative(neuron.val)

    for current, following in zip(network.layers, network.layers[1:]):
        for j, nxt in enumerate(following):
            for neuron in current:
                neuron.weight[j] -= LEARNING_RATE * neuron.val * nxt.deltas

    for layer in network.layers[1:]:
        for neuron in layer:
            neuron.bias -= LEARNING_RATE * neuron.deltas