"""Numerical utilities shared by the distance functions."""

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from spikesync.validation import InvalidInputError


def trapezoid_integral(t: ArrayLike, s: ArrayLike) -> float:
    """Integrate the sampled function s(t) with the trapezoidal rule.

    Args:
        t: non-decreasing sample times. Repeated times are allowed, and they can be used
            to represent a discontinuity of the function.
        s: values of the function at the sample times.

    Returns:
        The approximated integral of s over [t[0], t[-1]].

    Raises:
        InvalidInputError if t and s have different lengths, if there are less than 2 samples,
        or if t is decreasing.
    """
    t = np.asarray(t, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    if t.ndim != 1 or s.ndim != 1:
        raise InvalidInputError("t and s must be one-dimensional")
    if len(t) != len(s):
        raise InvalidInputError(f"t and s must have the same length, not {len(t)} and {len(s)}")
    if len(t) < 2:
        raise InvalidInputError(f"At least 2 samples are needed, not {len(t)}")
    dt = np.diff(t)
    if np.any(dt < 0):
        raise InvalidInputError("t must be non-decreasing")
    return 0.5 * float(np.sum((s[1:] + s[:-1]) * dt))


def minimum_delta_t(t: float, y: Sequence[float], i: int = 0) -> float:
    """Return the minimum distance between the time t and the spikes in y.

    The distance from t is unimodal along a sorted train, so the search starts from the index i
    and it moves to the left and to the right, stopping in each direction as soon as the
    distance increases. The search is fast when i is the index of a spike close to t.

    Args:
        t: time point.
        y: sorted spike times.
        i: index of y where the search starts.

    Returns:
        The minimum distance, or inf if y is empty.
    """
    if len(y) == 0:
        return math.inf
    dleft = dright = math.inf
    for j in range(i, -1, -1):
        z = abs(t - y[j])
        if z > dleft:
            break
        dleft = z
    for j in range(i + 1, len(y)):
        z = abs(t - y[j])
        if z > dright:
            break
        dright = z
    return min(dleft, dright)


def last_index_before(x: float, y: Sequence[float], start: int = -1) -> int:
    """Return the index of the last element of the sorted sequence y strictly lower than x.

    The search advances from ``start``, so calling the function with increasing values of x
    and passing back the previous result visits each element of y only once.

    Args:
        x: value to be compared.
        y: sorted sequence.
        start: index where the search starts, -1 to start before the first element.

    Returns:
        The found index, or ``start`` if no element after it is lower than x.
    """
    j = start
    while j + 1 < len(y) and y[j + 1] < x:
        j += 1
    return j
