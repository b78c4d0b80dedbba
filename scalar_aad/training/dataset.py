"""
Dataset loading for the training example.

Features file: one sample per line, two whitespace-separated numbers.
Targets file:  one number per line (labels, normally -1 / +1).
"""

from __future__ import annotations
import warnings
import numpy as np
from pathlib import Path
from typing import List, Tuple, Union

from ..aad.core.node import Node, create

PathLike = Union[str, Path]


class DatasetError(ValueError):
    """A dataset file could not be read as the expected numeric columns."""

    def __init__(self, path: PathLike, reason: str):
        self.path = Path(path)
        super().__init__(f"Unable to read dataset file {self.path}: {reason}")


def _load_columns(path: PathLike, n_cols: int) -> np.ndarray:
    path = Path(path)
    if not path.is_file():
        raise DatasetError(path, "no such file")
    try:
        with warnings.catch_warnings():
            # numpy warns on empty input; reported below as a DatasetError
            warnings.simplefilter("ignore", UserWarning)
            data = np.loadtxt(path, dtype=np.float64, ndmin=2)
    except (OSError, ValueError) as e:
        raise DatasetError(path, str(e)) from e
    if data.size == 0:
        raise DatasetError(path, "file is empty")
    if data.shape[1] != n_cols:
        raise DatasetError(path, f"expected {n_cols} column(s), got {data.shape[1]}")
    return data


def load_features(path: PathLike) -> List[List[Node]]:
    """Read the two-column features file as rows of leaf Nodes."""
    data = _load_columns(path, 2)
    return [[create(x1), create(x2)] for x1, x2 in data]


def load_targets(path: PathLike) -> List[Node]:
    """Read the one-column targets file as leaf Nodes."""
    data = _load_columns(path, 1)
    return [create(y) for y in data[:, 0]]


def load_dataset(x_path: PathLike, y_path: PathLike) -> Tuple[List[List[Node]], List[Node]]:
    """Read features and targets and check they have the same number of rows."""
    X = load_features(x_path)
    y = load_targets(y_path)
    if len(X) != len(y):
        raise DatasetError(y_path, f"{len(y)} targets for {len(X)} feature rows")
    return X, y
