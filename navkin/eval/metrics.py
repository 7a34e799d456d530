"""
Agreement metrics for body kinematics.

This module compares kinematics computed for the same motion, for example by
estimators working in different reference frames, and summarizes the
differences.
"""

from typing import Dict, Optional, Union

import numpy as np


def compute_kinematics_differences(
    reference: np.ndarray, other: np.ndarray
) -> np.ndarray:
    """
    Compute component differences between two kinematics series.

    Args:
        reference: Reference series, shape (N, 3) or (3,)
        other: Compared series, same shape

    Returns:
        differences: other - reference, same shape

    Raises:
        ValueError: If inputs have incompatible shapes
    """
    reference = np.asarray(reference, dtype=float)
    other = np.asarray(other, dtype=float)

    if reference.shape != other.shape:
        raise ValueError(
            f"Shape mismatch: reference {reference.shape} vs other {other.shape}"
        )

    return other - reference


def compute_norm_differences(reference: np.ndarray, other: np.ndarray) -> np.ndarray:
    """
    Difference of vector magnitudes, |other| - |reference|, per sample.

    Magnitudes do not depend on the resolving axes, so this compares
    kinematics between frames even when body axes differ slightly.
    """
    reference = np.atleast_2d(np.asarray(reference, dtype=float))
    other = np.atleast_2d(np.asarray(other, dtype=float))
    if reference.shape != other.shape:
        raise ValueError(
            f"Shape mismatch: reference {reference.shape} vs other {other.shape}"
        )
    return np.linalg.norm(other, axis=1) - np.linalg.norm(reference, axis=1)


def compute_rmse(errors: np.ndarray, axis: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Compute Root Mean Square Error (RMSE).

    Args:
        errors: Error vectors, shape (N, d) or (N,)
        axis: None for a scalar over all entries, 0 per dimension, 1 per sample

    Returns:
        rmse: RMSE value(s)
    """
    errors = np.asarray(errors, dtype=float)
    if axis is None:
        return float(np.sqrt(np.mean(errors**2)))
    return np.sqrt(np.mean(errors**2, axis=axis))


def compute_error_stats(errors: np.ndarray) -> Dict[str, float]:
    """
    Compute magnitude statistics of a difference series.

    Args:
        errors: Difference vectors, shape (N, d), or scalars, shape (N,)

    Returns:
        stats: Dictionary with keys 'mean', 'median', 'std', 'rmse',
               'p95' and 'max' of the difference magnitudes
    """
    errors = np.asarray(errors, dtype=float)
    magnitudes = np.linalg.norm(errors, axis=1) if errors.ndim > 1 else np.abs(errors)

    return {
        "mean": float(np.mean(magnitudes)),
        "median": float(np.median(magnitudes)),
        "std": float(np.std(magnitudes)),
        "rmse": float(np.sqrt(np.mean(magnitudes**2))),
        "p95": float(np.percentile(magnitudes, 95)),
        "max": float(np.max(magnitudes)),
    }
