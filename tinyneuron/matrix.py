"""Small dense matrix type with multiplication, addition and transpose."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Matrix:
    """A rectangular matrix stored as a list of rows."""

    data: list[list[float]]

    def __post_init__(self) -> None:
        self.data = [[float(x) for x in row] for row in self.data]
        widths = {len(row) for row in self.data}
        if len(widths) > 1:
            raise ValueError("all rows must have the same length")

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a rows x cols matrix filled with zeros."""
        return cls([[0.0] * cols for _ in range(rows)])

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def cols(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __matmul__(self, other: Matrix) -> Matrix:
        return multiply(self, other)

    def __add__(self, other: Matrix) -> Matrix:
        return add(self, other)

    def __iter__(self) -> Iterable[list[float]]:
        return iter(self.data)


def multiply(mat1: Matrix, mat2: Matrix) -> Matrix:
    """Return the matrix product ``mat1 @ mat2``."""
    if mat1.cols != mat2.rows:
        raise ValueError(
            "columns of the first matrix must equal rows of the second matrix"
        )
    columns = list(zip(*mat2.data)) if mat2.data else []
    if not columns:
        return Matrix([[] for _ in mat1.data])
    return Matrix(
        [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in mat1.data]
    )


def add(mat1: Matrix, mat2: Matrix) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if mat1.shape != mat2.shape:
        raise ValueError("both matrices must have the same dimensions for addition")
    return Matrix(
        [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(mat1.data, mat2.data)]
    )


def transpose(mat: Matrix) -> Matrix:
    """Return the transpose of a non-empty matrix."""
    if not mat.rows or not mat.cols:
        raise ValueError("the number of rows or columns of the matrix is zero")
    return Matrix([list(col) for col in zip(*mat.data)])