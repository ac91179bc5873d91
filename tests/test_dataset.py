import pytest

from tinyneuron.dataset import (
    Dataset,
    SplitDataset,
    count_columns,
    load_dataset,
    shuffle_dataset,
    train_test_split,
)

ROWS = [
    "5.1,3.5,1.4,0.2,setosa",
    "4.9,3.0,1.4,0.2,setosa",
    "7.0,3.2,4.7,1.4,versicolor",
    "6.4,3.2,4.5,1.5,versicolor",
    "6.3,3.3,6.0,2.5,virginica",
    "5.8,2.7,5.1,1.9,virginica",
    "5.0,3.6,1.4,0.2,setosa",
    "5.5,2.3,4.0,1.3,versicolor",
    "7.1,3.0,5.9,2.1,virginica",
    "4.6,3.1,1.5,0.2,setosa",
]


def _write(tmp_path, lines):
    path = tmp_path / "data.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_count_columns():
    assert count_columns("5.1,3.5,1.4,0.2,setosa") == 5
    assert count_columns("single") == 1
    assert count_columns("") == 1


def test_load_dataset_reads_features_and_labels(tmp_path):
    data = load_dataset(_write(tmp_path, ROWS))
    assert data.samples == len(ROWS)
    assert data.input_features == 4
    assert data.output_labels == 1
    assert data.features[0] == [5.1, 3.5, 1.4, 0.2]
    assert data.labels[0] == "setosa"
    assert data.labels[2] == "versicolor"
    assert all(len(row) == data.input_features for row in data.features)


def test_load_dataset_treats_first_line_as_sample(tmp_path):
    data = load_dataset(_write(tmp_path, ["a,b,label", "1.5,2.5,x"]))
    assert data.samples == 2
    assert data.features[0] == [0.0, 0.0]
    assert data.labels[0] == "label"
    assert data.features[1] == [1.5, 2.5]


def test_load_dataset_handles_crlf(tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"1,2,yes\r\n3,4,no\r\n")
    data = load_dataset(path)
    assert data.labels == ["yes", "no"]
    assert data.features == [[1.0, 2.0], [3.0, 4.0]]


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "absent.csv")


def test_load_dataset_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_dataset(path)


def test_load_dataset_short_row(tmp_path):
    with pytest.raises(ValueError):
        load_dataset(_write(tmp_path, ["1,2,a", "3,b"]))


def test_dataset_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        Dataset([[1.0]], ["a", "b"], 1)


def _rows(split: SplitDataset):
    pairs = list(zip(split.x_train, split.y_train)) + list(zip(split.x_test, split.y_test))
    return sorted((tuple(x), y) for x, y in pairs)


def test_train_test_split_is_a_permutation(tmp_path):
    data = load_dataset(_write(tmp_path, ROWS))
    split = train_test_split(data, 0.2, 42)
    assert split.samples == data.samples
    assert split.train_samples + split.test_samples == data.samples
    assert split.input_features == data.input_features
    assert _rows(split) == sorted(
        (tuple(x), y) for x, y in zip(data.features, data.labels)
    )


def test_split_is_deterministic_for_a_seed(tmp_path):
    data = load_dataset(_write(tmp_path, ROWS))
    first = train_test_split(data, 0.3, 7)
    second = train_test_split(data, 0.3, 7)
    assert first == second


def test_split_sizes_at_the_extremes(tmp_path):
    data = load_dataset(_write(tmp_path, ROWS))
    none_held_out = train_test_split(data, 0.0, 1)
    assert none_held_out.test_samples == 0
    assert none_held_out.train_samples == data.samples
    all_held_out = train_test_split(data, 1.0, 1)
    assert all_held_out.train_samples == 0
    assert all_held_out.test_samples == data.samples


def test_shuffle_dataset_half_split():
    features = [[1.0], [2.0], [3.0], [4.0]]
    labels = ["a", "b", "c", "d"]
    split = shuffle_dataset(features, labels, 0.5, 3)
    assert split.test_samples == 2
    pairs = dict(zip(labels, (f[0] for f in features)))
    for x, y in zip(split.x_train + split.x_test, split.y_train + split.y_test):
        assert pairs[y] == x[0]


def test_shuffle_dataset_does_not_alias_input():
    features = [[1.0, 2.0], [3.0, 4.0]]
    split = shuffle_dataset(features, ["a", "b"], 0.0, 0)
    split.x_train[0][0] = 99.0
    assert features == [[1.0, 2.0], [3.0, 4.0]]


@pytest.mark.parametrize("size", [-0.1, 1.5])
def test_shuffle_dataset_rejects_bad_test_size(size):
    with pytest.raises(ValueError):
        shuffle_dataset([[1.0]], ["a"], size, 0)


def test_shuffle_dataset_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        shuffle_dataset([[1.0], [2.0]], ["a"], 0.5, 0)


def test_train_test_split_rejects_none():
    with pytest.raises(ValueError):
        train_test_split(None, 0.2, 42)