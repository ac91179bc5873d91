# tinyneuron

A small, dependency-free neural network toolkit. It provides:

- `tinyneuron.layers`: the data structures `Neuron`, `Layer` and
  `NeuralNetwork`;
- `tinyneuron.network`: building a fully connected feed-forward network of
  sigmoid neurons with random weights and biases (`feed_forward_network`),
  a forward pass (`forward_pass`) and a single gradient-descent update
  (`back_propagation`, learning rate 0.005);
- `tinyneuron.activation`: activation functions (`sigmoid`,
  `sigmoid_derivative`, `tan_h`, `tanh_derivative`, `relu`, `soft_max`)
  and loss functions (`mse`, `binary_cross_entropy`,
  `categorical_cross_entropy`);
- `tinyneuron.matrix`: a small dense `Matrix` with `multiply`, `add` and
  `transpose`;
- `tinyneuron.dataset`: loading a CSV file (numeric feature columns
  followed by a label column) into a `Dataset`, and a seeded, shuffled
  train/test split into a `SplitDataset`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
tinyneuron [PATH] [--test-size FRACTION] [--random-state SEED]
```

The command reads `PATH` (default `iris.csv` in the current directory),
prints every sample, shuffles and splits the data with the given seed
(default 42) so that `--test-size` of it (default 0.2) becomes test
samples, prints the training and test rows and their counts, and builds a
network with layers of sizes *features*, 4, 4 and 3, printing the size of
each layer. It exits with status 1 and a message on standard error if the
file cannot be read or its contents are malformed.

## Library use

Build a network and run a forward pass:

```python
import random

from tinyneuron.network import feed_forward_network, forward_pass

network = feed_forward_network([4, 4, 4, 3], random.Random(42))
forward_pass(network, [5.1, 3.5, 1.4, 0.2])
print(network.output_layer().values())
```

Adjust the weights towards a target with one back-propagation step:

```python
from tinyneuron.network import back_propagation

back_propagation(network, [1, 0, 0], network.output_layer())
```

Load a dataset and split it:

```python
from tinyneuron.dataset import load_dataset, train_test_split

dataset = load_dataset("iris.csv")
split = train_test_split(dataset, 0.2, 42)
print(split.train_samples, split.test_samples)
```

Activation functions take plain numbers; the loss functions take either
two `Layer` objects or two sequences of numbers of the same length:

```python
from tinyneuron.activation import mse, relu, sigmoid, tan_h

sigmoid(0.0)              # 0.5
relu(-3.0)                # 0.0
tan_h(0.0)                # 0.0
mse([1.0, 0.0], [0.5, 0.5])  # 0.25
```

`soft_max` replaces the values of a `Layer` with their softmax in place.

Matrices support `a @ b` and `a + b`; mismatched dimensions raise
`ValueError`:

```python
from tinyneuron.matrix import Matrix, transpose

a = Matrix([[1, 2], [3, 4]])
print((a @ transpose(a)).data)
```

## What it does not do

There is no training loop: the package offers a single
`back_propagation` step, but nothing that runs it over a dataset for a
number of epochs, and the command does not train the network it builds.
Labels are kept as the text of the last CSV column; they are not turned
into one-hot target vectors. Networks cannot be saved or loaded.