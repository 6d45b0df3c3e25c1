"""Lineshape primitives used to render peaks onto a sampled axis."""

from __future__ import annotations

import numpy as np


def _as_output(values: np.ndarray, x) -> float | np.ndarray:
    if np.ndim(x) == 0:
        return float(values)
    return values


def lorentzian(x, center: float, fwhm: float, amplitude: float) -> float | np.ndarray:
    """Lorentzian profile with height ``amplitude`` at ``center``.

    ``x`` may be a scalar or an array; the return type follows it. A
    non-positive ``fwhm`` yields zero everywhere.
    """

    x_arr = np.asarray(x, dtype=float)
    gamma = fwhm / 2.0
    if gamma <= 0:
        return _as_output(np.zeros_like(x_arr), x)
    gamma_sq = gamma**2
    values = amplitude * (gamma_sq / ((x_arr - center) ** 2 + gamma_sq))
    return _as_output(values, x)


def gaussian(x, center: float, width: float, amplitude: float) -> float | np.ndarray:
    """Gaussian profile; ``width`` is the standard deviation."""

    x_arr = np.asarray(x, dtype=float)
    if width <= 0:
        return _as_output(np.zeros_like(x_arr), x)
    values = amplitude * np.exp(-((x_arr - center) ** 2) / (2.0 * width**2))
    return _as_output(values, x)


__all__ = ["lorentzian", "gaussian"]
