"""Loading a CSV dataset and splitting it into train and test parts."""

from __future__ import annotations

import random
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike

_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)


@dataclass
class Dataset:
    """Feature rows and their labels, one label per row."""

    features: list[list[float]]
    labels: list[str]
    input_features: int
    output_labels: int = 1

    def __post_init__(self) -> None:
        if len(self.features) != len(self.labels):
            raise ValueError(
                f"{len(self.features)} feature rows but {len(self.labels)} labels"
            )

    @property
    def samples(self) -> int:
        return len(self.features)


@dataclass
class SplitDataset:
    """A dataset shuffled and divided into training and testing rows."""

    x_train: list[list[float]] = field(default_factory=list)
    y_train: list[str] = field(default_factory=list)
    x_test: list[list[float]] = field(default_factory=list)
    y_test: list[str] = field(default_factory=list)
    input_features: int = 0

    @property
    def train_samples(self) -> int:
        return len(self.x_train)

    @property
    def test_samples(self) -> int:
        return len(self.x_test)

    @property
    def samples(self) -> int:
        return self.train_samples + self.test_samples


def count_columns(line: str) -> int:
    """Return the number of comma-separated columns in ``line``."""
    return line.count(",") + 1


def _to_float(token: str) -> float:
    """Parse the leading number of ``token``; text without one gives 0.0."""
    try:
        return float(token)
    except ValueError:
        match = _NUMBER_PREFIX.match(token)
        return float(match.group().strip()) if match else 0.0


def load_dataset(path: str | PathLike[str]) -> Dataset:
    """Read a CSV file whose last column is the label and the rest are features.

    The number of columns is taken from the first line; every non-blank
    line, the first one included, is read as a sample.
    """
    with open(path, encoding="utf-8") as handle:
        lines = [line.rstrip("\r\n") for line in handle]
    lines = [line for line in lines if line.strip()]
    if not lines:
        raise ValueError(f"{path}: the file holds no data")

    input_features = count_columns(lines[0]) - 1
    features: list[list[float]] = []
    labels: list[str] = []
    for number, line in enumerate(lines, start=1):
        tokens = [token for token in line.split(",") if token]
        if len(tokens) <= input_features:
            raise ValueError(
                f"{path}: line {number} has {len(tokens)} columns, "
                f"expected {input_features + 1}"
            )
        features.append([_to_float(token) for token in tokens[:input_features]])
        labels.append(tokens[input_features])
    return Dataset(features, labels, input_features)


def shuffle_dataset(
    features: Sequence[Sequence[float]],
    labels: Sequence[str],
    test_size: float,
    random_state: int,
) -> SplitDataset:
    """Shuffle rows with a seeded generator and split off ``test_size`` of them."""
    if features is None or labels is None:
        raise ValueError("the given data is empty")
    if len(features) != len(labels):
        raise ValueError(
            f"{len(features)} feature rows but {len(labels)} labels"
        )
    if not 0.0 <= test_size <= 1.0:
        raise ValueError("test_size must lie between 0 and 1")

    total = len(features)
    test_samples = int(total * test_size)
    train_samples = total - test_samples

    indices = list(range(total))
    rng = random.Random(random_state)
    for i in range(total - 1, 0, -1):
        j = rng.randrange(i + 1)
        indices[i], indices[j] = indices[j], indices[i]

    train_idx = indices[:train_samples]
    test_idx = indices[train_samples:]
    width = len(features[0]) if features else 0
    return SplitDataset(
        x_train=[list(features[i]) for i in train_idx],
        y_train=[labels[i] for i in train_idx],
        x_test=[list(features[i]) for i in test_idx],
        y_test=[labels[i] for i in test_idx],
        input_features=width,
    )


def train_test_split(
    dataset: Dataset, test_size: float, random_state: int
) -> SplitDataset:
    """Split ``dataset`` into shuffled training and testing parts."""
    if dataset is None:
        raise ValueError("the provided dataset is empty")
    split = shuffle_dataset(dataset.features, dataset.labels, test_size, random_state)
    split.input_features = dataset.input_features
    return split