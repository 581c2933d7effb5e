"""Backend dispatch for numpy/torch compatibility.

Color math in this package is written once against these helpers so it runs
on Python floats, numpy arrays, or torch tensors. Torch is imported lazily and
is never required: plain floats and numpy arrays go through numpy.
"""

import numpy as np
from typing import Any

Array = Any  # float, numpy.ndarray or torch.Tensor

_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


def asarray(x: Array) -> Array:
    """Pass tensors through; coerce everything else to a float64 numpy array."""
    if is_torch(x):
        return x
    return np.asarray(x, dtype=np.float64)


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def atan2(y: Array, x: Array) -> Array:
    if is_torch(y):
        return _get_torch().atan2(y, x)
    return np.arctan2(y, x)


def hypot(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().hypot(x, y)
    return np.hypot(x, y)


def abs(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().abs(x)
    return np.abs(x)


def sign(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sign(x)
    return np.sign(x)


def cbrt(x: Array) -> Array:
    """Cube root (sign-preserving)."""
    if is_torch(x):
        torch = _get_torch()
        return torch.sign(x) * torch.abs(x).pow(1 / 3)
    return np.cbrt(x)


def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def clip(x: Array, lo: float, hi: float) -> Array:
    if is_torch(x):
        return _get_torch().clamp(x, lo, hi)
    return np.clip(x, lo, hi)


def zeros_like(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().zeros_like(x)
    return np.zeros_like(x)


def full_like(x: Array, value: float) -> Array:
    if is_torch(x):
        return _get_torch().full_like(x, value)
    return np.full_like(x, value)


def all_of(*conds: Array) -> Array:
    """Element-wise logical AND of boolean arrays."""
    result = conds[0]
    for cond in conds[1:]:
        result = result & cond
    return result
