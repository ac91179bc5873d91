"""Activation functions, loss functions and softmax."""

from __future__ import annotations

import math
from collections.abc import Iterable

from tinyneuron.layers import Layer

_CCE_EPSILON = 1e-8
_BCE_EPSILON = 1e-10


def sigmoid(x: float) -> float:
    """Logistic function, scaled to the range 0..1."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def sigmoid_derivative(x: float) -> float:
    """Derivative of the logistic function at ``x``."""
    s = sigmoid(x)
    return s * (1.0 - s)


def tan_h(x: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(x)


def tanh_derivative(x: float) -> float:
    """Derivative of the hyperbolic tangent at ``x``."""
    return 1.0 - tan_h(x) ** 2


def relu(x: float) -> float:
    """Rectified linear unit."""
    return x if x > 0 else 0.0


def _pair(expected: Layer | Iterable[float], predicted: Layer | Iterable[float]):
    if expected is None or predicted is None:
        raise ValueError("expected and predicted outputs must be given")
    exp_vals = expected.values() if isinstance(expected, Layer) else list(expected)
    pred_vals = predicted.values() if isinstance(predicted, Layer) else list(predicted)
    if len(exp_vals) != len(pred_vals):
        raise ValueError(
            f"size mismatch: {len(exp_vals)} expected values, "
            f"{len(pred_vals)} predicted values"
        )
    if not pred_vals:
        raise ValueError("outputs are empty")
    return exp_vals, pred_vals


def mse(expected: Layer | Iterable[float], predicted: Layer | Iterable[float]) -> float:
    """Mean squared error between two layers' values."""
    exp_vals, pred_vals = _pair(expected, predicted)
    return sum((y - p) ** 2 for y, p in zip(exp_vals, pred_vals)) / len(pred_vals)


def categorical_cross_entropy(
    expected: Layer | Iterable[float], predicted: Layer | Iterable[float]
) -> float:
    """Cross-entropy loss for multi-class targets."""
    exp_vals, pred_vals = _pair(expected, predicted)
    return sum(-y * math.log(max(p, _CCE_EPSILON)) for y, p in zip(exp_vals, pred_vals))


def binary_cross_entropy(
    expected: Layer | Iterable[float], predicted: Layer | Iterable[float]
) -> float:
    """Mean binary cross-entropy loss."""
    exp_vals, pred_vals = _pair(expected, predicted)
    loss = 0.0
    for y, p in zip(exp_vals, pred_vals):
        if p == 0:
            p = _BCE_EPSILON
        elif p == 1:
            p = 1 - _BCE_EPSILON
        loss += y * math.log(p) + (1 - y) * math.log(1 - p)
    return -loss / len(exp_vals)


def soft_max(layer: Layer) -> None:
    """Replace the layer's values with their softmax, in place."""
    if layer is None or not layer.neurons:
        raise ValueError("layer is empty")
    max_val = max(layer.values())
    exps = [math.exp(neuron.val - max_val) for neuron in layer]
    denominator = sum(exps)
    for neuron, e in zip(layer, exps):
        neuron.val = e / denominator