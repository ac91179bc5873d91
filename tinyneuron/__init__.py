"""A small feed-forward neural network with activations, losses, matrices and CSV dataset handling."""

__version__ = "0.1.0"