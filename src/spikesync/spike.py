"""SPIKE distance between spike trains.

Implementation of the SPIKE distance profile S(t), equation (19) of
Kreuz et al. (2013), Monitoring spike train synchrony, https://doi.org/10.1152/jn.00873.2012
"""

import logging
from collections.abc import Sequence
from enum import IntEnum
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd

from spikesync.constants import POST, PRE, SIDE, TIME, VALUE
from spikesync.numerics import minimum_delta_t, trapezoid_integral
from spikesync.types import SpikeTrainLike
from spikesync.validation import check_bounds, check_train

L = logging.getLogger(__name__)


class Origin(IntEnum):
    """Spike trains containing a breakpoint."""

    FIRST = 1
    SECOND = 2
    BOTH = 3


class SpikeProfile(NamedTuple):
    """SPIKE distance profile.

    Each breakpoint appears twice in ``t``: the first value in ``s`` is the limit of S(t)
    immediately before the breakpoint, and the second value is the value exactly on it.
    The first and the last breakpoints are the auxiliary spikes, where S(t) is 0.
    """

    t: np.ndarray
    s: np.ndarray

    @property
    def breakpoints(self) -> np.ndarray:
        """Return the unique times of the breakpoints."""
        return self.t[::2]

    def integral(self) -> float:
        """Return the integral of the profile."""
        return trapezoid_integral(self.t, self.s)

    def average(self) -> float:
        """Return the time average of the profile, i.e. the SPIKE distance."""
        return self.integral() / float(self.t[-1] - self.t[0])

    def to_dataframe(self) -> pd.DataFrame:
        """Return a DataFrame with columns: time, side, value.

        The side is ``pre`` for the values immediately before each breakpoint,
        and ``post`` for the values exactly on it.
        """
        sides = pd.Categorical([PRE, POST] * (len(self.t) // 2), categories=[PRE, POST])
        return pd.DataFrame({TIME: self.t, SIDE: sides, VALUE: self.s})


def _extend_train(train: np.ndarray, t0: float, tf: float) -> list[float]:
    """Return a new list with the auxiliary spikes at t0 and tf, if not already present."""
    head = [] if len(train) > 0 and train[0] == t0 else [t0]
    tail = [] if len(train) > 0 and train[-1] == tf else [tf]
    return head + train.tolist() + tail


def merge_trains(
    first: Sequence[float], second: Sequence[float]
) -> tuple[list[float], list[Origin]]:
    """Merge two sorted spike trains.

    Args:
        first: first sorted spike train.
        second: second sorted spike train.

    Returns:
        tuple (tvec, origins), where tvec contains all the sorted spike times without duplicates,
        and origins contains the train of each spike, Origin.BOTH if shared by both the trains.
    """
    tvec = []
    origins = []
    i1 = i2 = 0
    while i1 < len(first) and i2 < len(second):
        v1, v2 = first[i1], second[i2]
        if v1 == v2:
            tvec.append(v1)
            origins.append(Origin.BOTH)
            i1 += 1
            i2 += 1
        elif v1 < v2:
            tvec.append(v1)
            origins.append(Origin.FIRST)
            i1 += 1
        else:
            tvec.append(v2)
            origins.append(Origin.SECOND)
            i2 += 1
    for v1 in first[i1:]:
        tvec.append(v1)
        origins.append(Origin.FIRST)
    for v2 in second[i2:]:
        tvec.append(v2)
        origins.append(Origin.SECOND)
    return tvec, origins


def _local_dissimilarity(
    t: float, y1: Sequence[float], y2: Sequence[float], i1: int, i2: int
) -> float:
    """Return S(t), given the indices i1 and i2 of the previous spikes in each train.

    Whether S is calculated immediately before or exactly on a spike depends on the indices.
    """
    t_p1, t_f1 = y1[i1], y1[i1 + 1]
    t_p2, t_f2 = y2[i2], y2[i2 + 1]
    isi1 = t_f1 - t_p1
    isi2 = t_f2 - t_p2
    x_p1, x_f1 = t - t_p1, t_f1 - t
    x_p2, x_f2 = t - t_p2, t_f2 - t
    dt_p1 = minimum_delta_t(t_p1, y2, i2)
    dt_f1 = minimum_delta_t(t_f1, y2, i2)
    dt_p2 = minimum_delta_t(t_p2, y1, i1)
    dt_f2 = minimum_delta_t(t_f2, y1, i1)
    s1 = (dt_p1 * x_f1 + dt_f1 * x_p1) / isi1
    s2 = (dt_p2 * x_f2 + dt_f2 * x_p2) / isi2
    return 2 * (s1 * isi2 + s2 * isi1) / (isi1 + isi2) ** 2


def spike_distance_profile(
    y1: SpikeTrainLike,
    y2: SpikeTrainLike,
    t0: Optional[float] = None,
    tf: Optional[float] = None,
) -> SpikeProfile:
    """Calculate the SPIKE distance profile S(t) of two spike trains.

    Auxiliary spikes are added to both the trains at t0 and tf, unless the trains already
    start or end there. The given trains are never modified.

    Args:
        y1: first spike train, strictly increasing.
        y2: second spike train, strictly increasing. It can be empty only if y1 is not empty.
        t0: start time, by default one unit before the first spike of both the trains.
        tf: end time, by default one unit after the last spike of both the trains.

    Returns:
        The SpikeProfile, that can be unpacked as ``t, s``.

    Raises:
        InvalidInputError if any train is not strictly increasing, if both the trains are empty,
        or if some spike is outside the interval [t0, tf].
    """
    y1 = check_train(y1, name="y1", strictly_increasing=True)
    y2 = check_train(y2, name="y2", strictly_increasing=True)
    t0, tf = check_bounds(y1, y2, t0=t0, tf=tf)
    x1 = _extend_train(y1, t0, tf)
    x2 = _extend_train(y2, t0, tf)
    tvec, origins = merge_trains(x1, x2)
    # values of S immediately before and exactly on each breakpoint
    s_pre = np.zeros(len(tvec))
    s_post = np.zeros(len(tvec))
    i1 = i2 = 0
    for k in range(1, len(tvec) - 1):
        t = tvec[k]
        s_pre[k] = _local_dissimilarity(t, x1, x2, i1, i2)
        if origins[k] != Origin.SECOND:
            i1 += 1
        if origins[k] != Origin.FIRST:
            i2 += 1
        s_post[k] = _local_dissimilarity(t, x1, x2, i1, i2)
    t = np.repeat(tvec, 2)
    s = np.empty(len(t))
    s[0::2] = s_pre
    s[1::2] = s_post
    t.flags.writeable = False
    s.flags.writeable = False
    L.debug("SPIKE profile calculated in [%s, %s] with %s breakpoints", t0, tf, len(tvec))
    return SpikeProfile(t=t, s=s)


def spike_distance(
    y1: SpikeTrainLike,
    y2: SpikeTrainLike,
    t0: Optional[float] = None,
    tf: Optional[float] = None,
) -> float:
    """Calculate the SPIKE distance, i.e. the time average of the SPIKE distance profile.

    See :func:`spike_distance_profile` for the description of the parameters.
    """
    return spike_distance_profile(y1, y2, t0=t0, tf=tf).average()
