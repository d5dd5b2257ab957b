"""
Dominant eigenpair of the adjacency matrix (eigenvector centrality).

The dense solve is delegated to numpy.linalg: eigh for symmetric
(undirected) matrices, eig for general (directed) ones. Selection and sign
conventions are applied afterwards so results do not depend on the order or
sign LAPACK happens to return.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from .errors import NumericInstabilityError

DEFAULT_TIE_TOLERANCE = 1e-9
DEFAULT_IMAG_TOLERANCE = 1e-4


def _select_dominant(real_parts: np.ndarray, tolerance: float) -> int:
    """Index of the largest real part; near-ties go to the smallest index."""
    top = real_parts.max()
    candidates = np.flatnonzero(real_parts >= top - tolerance)
    return int(candidates[0])


def normalize_sign(vector: np.ndarray) -> np.ndarray:
    """Negate the vector if it has more negative than positive entries.

    Counting signs rather than summing values keeps tiny round-off entries of
    the opposite sign from flipping the decision.
    """
    if np.count_nonzero(vector < 0) > np.count_nonzero(vector > 0):
        vector = -vector
    # Adding 0.0 turns -0.0 into 0.0
    return vector + 0.0


def dominant_eigenpair(
    adjacency: np.ndarray,
    directed: bool,
    tie_tolerance: float = DEFAULT_TIE_TOLERANCE,
    imag_tolerance: float = DEFAULT_IMAG_TOLERANCE,
    logger: Optional[logging.Logger] = None,
) -> Tuple[float, np.ndarray]:
    """Compute the eigenvalue with the largest real part and its eigenvector.

    The returned eigenvector has unit 2-norm and majority-nonnegative sign.
    For directed graphs the eigenvector's real part is taken and renormalised.

    Args:
        adjacency: N x N self-loop-free adjacency matrix
        directed: Whether the matrix may be asymmetric
        tie_tolerance: Eigenvalues within this distance (scaled by N) of the
            maximum count as tied
        imag_tolerance: Largest imaginary part, relative to max(1, |value|),
            accepted on the selected eigenvalue; smaller parts are solver noise
            around a repeated real eigenvalue and are dropped
        logger: Logger instance (optional)

    Returns:
        Tuple of (max_eigenvalue, eigen_centralities)

    Raises:
        NumericInstabilityError: If the solver fails, returns non-finite
            values, or the dominant eigenvalue is not real
    """
    n = adjacency.shape[0]
    if n == 0:
        return 0.0, np.zeros(0)

    matrix = np.asarray(adjacency, dtype=float)
    scale = max(1, n)

    if logger:
        solver = "eig" if directed else "eigh"
        logger.info(f"Solving dense eigenproblem ({solver}, {n}x{n})")

    try:
        if directed:
            values, vectors = np.linalg.eig(matrix)
        else:
            values, vectors = np.linalg.eigh(matrix)
    except np.linalg.LinAlgError as e:
        raise NumericInstabilityError(f"Eigendecomposition failed: {e}", n, directed) from e

    if not (np.all(np.isfinite(values)) and np.all(np.isfinite(vectors))):
        raise NumericInstabilityError("Eigendecomposition returned non-finite values", n, directed)

    index = _select_dominant(np.real(values), tie_tolerance * scale)
    value = values[index]
    if abs(np.imag(value)) > imag_tolerance * max(1.0, abs(value)):
        raise NumericInstabilityError(
            f"Dominant eigenvalue {value} is not real", n, directed
        )

    vector = np.real(vectors[:, index])
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise NumericInstabilityError("Dominant eigenvector has no real component", n, directed)
    vector = vector / norm

    return float(np.real(value)), normalize_sign(vector)
