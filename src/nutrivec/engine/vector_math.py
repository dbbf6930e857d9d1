"""Vector primitives used by the match engine.

Vectors are accepted as any sequence of floats and handled internally as
float64 numpy arrays. Zero-magnitude vectors have a cosine similarity of
0.0 with everything, which keeps scoring free of NaN.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from nutrivec.engine.models import DimensionMismatchError

VectorLike = Union[Sequence[float], np.ndarray]


def as_vector(values: VectorLike) -> np.ndarray:
    """Convert a sequence of floats to a 1-D float64 array."""
    return np.asarray(values, dtype=np.float64).reshape(-1)


def check_dimensions(a: np.ndarray, b: np.ndarray) -> None:
    """Raise DimensionMismatchError unless both vectors have equal length."""
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(a.shape[0], b.shape[0])


def add(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Element-wise sum of two equal-length vectors.

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    va = as_vector(a)
    vb = as_vector(b)
    check_dimensions(va, vb)
    return va + vb


def scale(v: VectorLike, factor: float) -> np.ndarray:
    """Multiply every component of a vector by a scalar."""
    return as_vector(v) * factor


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """Cosine similarity in [-1, 1].

    Returns 0.0 if either vector has zero magnitude.

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    va = as_vector(a)
    vb = as_vector(b)
    check_dimensions(va, vb)

    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))
