"""Command line entry point: load a dataset, split it and build a network."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from tinyneuron.dataset import load_dataset, train_test_split
from tinyneuron.network import feed_forward_network

HIDDEN_LAYERS = (4, 4)
OUTPUT_NEURONS = 3


def _format_row(values: Sequence[float], label: str) -> str:
    return " ".join(f"{value:f}" for value in values) + f" {label}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyneuron",
        description="Load a CSV dataset, split it and build a feed-forward network.",
    )
    parser.add_argument("path", nargs="?", default="iris.csv", help="CSV file to load")
    parser.add_argument("--test-size", type=float, default=0.2)
    parser.add_argument("--random-state", type=int, default=42)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    print("Neural Network Library, still work in progress")

    try:
        dataset = load_dataset(args.path)
        split = train_test_split(dataset, args.test_size, args.random_state)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(f"The uploaded file: {args.path}")
    print(f"Input feature: {dataset.input_features}")
    print(f"The count of samples: {dataset.samples}")
    for number, (row, label) in enumerate(zip(dataset.features, dataset.labels), 1):
        print(f"Sample {number}: {_format_row(row, label)}")

    print("The Train samples")
    for number, (row, label) in enumerate(zip(split.x_train, split.y_train), 1):
        print(f"Train samples: {number}  {_format_row(row, label)}")

    print("These are the Testing samples")
    for number, (row, label) in enumerate(zip(split.x_test, split.y_test), 1):
        print(f"Test samples: {number} {_format_row(row, label)}")

    print(f"The train samples: {split.train_samples}")
    print(f"The test samples: {split.test_samples}")
    print(f"The total samples: {split.samples}")

    sizes = [dataset.input_features, *HIDDEN_LAYERS, OUTPUT_NEURONS]
    network = feed_forward_network(sizes, random.Random(args.random_state))
    print(f"Number of layers present in Neural Network: {len(network)}")
    for index, layer in enumerate(network):
        print(f"Input present in Layer[{index}]: {len(layer)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())