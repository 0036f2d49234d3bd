"""
Small numerical helpers used by the lattice geometry.

This module provides the thin collaborators the core relies on:
- Fixed-tolerance floating point tests (zero, positive)
- Basis-matrix inversion that fails explicitly on singular input
- Round-half-away-from-zero conversion to integers
- Uniform random selection from a sequence with an injectable generator
"""

import numpy as np
from typing import Optional, Sequence, TypeVar

from .constants import DEFAULT_TOLERANCE

T = TypeVar('T')


def is_zero(value: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if |value| does not exceed the tolerance."""
    return abs(value) <= tol


def is_positive(value: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if value is strictly greater than the tolerance."""
    return value > tol


def invert_matrix(matrix: np.ndarray, tol: float = DEFAULT_TOLERANCE) -> np.ndarray:
    """
    Invert a small square matrix.

    Parameters
    ----------
    matrix : np.ndarray, shape (n, n)
        Matrix to invert
    tol : float, optional
        Determinants with magnitude at or below this value are
        treated as singular

    Returns
    -------
    inverse : np.ndarray, shape (n, n)

    Raises
    ------
    ValueError
        If the matrix is not square or is singular
    """
    matrix = np.asarray(matrix, dtype=float)

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {matrix.shape}")

    if is_zero(np.linalg.det(matrix), tol):
        raise ValueError("Degenerate basis vectors: matrix is singular")

    return np.linalg.inv(matrix)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, resolving ties away from zero.

    Examples
    --------
    >>> round_half_away(2.5), round_half_away(-2.5), round_half_away(-1.24)
    (3, -3, -1)
    """
    # magnitude - whole is exact; adding 0.5 first is not
    magnitude = abs(float(value))
    whole = np.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1.0

    rounded = int(whole)
    return rounded if value >= 0.0 else -rounded


def select_one(items: Sequence[T], rng: Optional[np.random.Generator] = None) -> T:
    """
    Select one element uniformly at random.

    Parameters
    ----------
    items : Sequence
        Non-empty sequence to choose from
    rng : np.random.Generator, optional
        Source of randomness. A fresh default generator is used if None;
        pass a seeded generator for reproducible selections.

    Raises
    ------
    ValueError
        If items is empty
    """
    if len(items) == 0:
        raise ValueError("Cannot select from an empty sequence")

    if rng is None:
        rng = np.random.default_rng()

    return items[int(rng.integers(len(items)))]
