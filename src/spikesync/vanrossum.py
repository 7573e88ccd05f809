"""Van Rossum distance between spike trains.

References:

- van Rossum (2001), A novel spike distance, https://doi.org/10.1162/089976601300014321
- Houghton & Kreuz (2012), On the efficient calculation of van Rossum distances,
  https://doi.org/10.3109/0954898X.2012.673048

The distances are normalized to be twice the squared distance of the original paper,
so that two trains differing only by one extra spike have distance exactly 1.
"""

import logging
import math

import numpy as np
from numpy.typing import ArrayLike

from spikesync.numerics import last_index_before
from spikesync.types import SpikeTrainLike
from spikesync.validation import check_timescale, check_train

L = logging.getLogger(__name__)


def _kernel_sum(a: np.ndarray, b: np.ndarray, tau: float) -> float:
    """Return the sum of exp(-|a_i - b_j| / tau) over all the pairs (i, j)."""
    return float(np.exp(-np.abs(np.subtract.outer(a, b)) / tau).sum())


def _sqrt(d2: float) -> float:
    # negative values can be caused only by round-off errors
    return math.sqrt(max(d2, 0.0))


def van_rossum_distance(u: SpikeTrainLike, v: SpikeTrainLike, tau: float) -> float:
    """Calculate the van Rossum distance between the spike trains u and v.

    The exact analytic expression is used, i.e. equation (5) of Houghton & Kreuz (2012),
    with complexity O(n*m). The spike trains don't need to be sorted, and they can be empty.

    Args:
        u: first spike train.
        v: second spike train.
        tau: timescale of the exponential kernel.

    Returns:
        The distance between u and v.
    """
    tau = check_timescale(tau)
    u = check_train(u, name="u")
    v = check_train(v, name="v")
    d2 = _kernel_sum(u, u, tau) + _kernel_sum(v, v, tau) - 2 * _kernel_sum(u, v, tau)
    L.debug("Van Rossum distance with %s and %s spikes, tau=%s: d2=%s", len(u), len(v), tau, d2)
    return _sqrt(d2)


def markage_vector(train: ArrayLike, tau: float) -> np.ndarray:
    """Return the markage vector of a sorted spike train, equation (6) of Houghton & Kreuz.

    Each element is the sum of exp(-(train[i] - train[j]) / tau) over all the previous spikes j.
    """
    train = np.asarray(train, dtype=np.float64).tolist()
    m = np.zeros(len(train))
    for i in range(1, len(train)):
        m[i] = (m[i - 1] + 1.0) * math.exp(-(train[i] - train[i - 1]) / tau)
    return m


def cross_term(u: ArrayLike, v: ArrayLike, mv: ArrayLike, tau: float) -> float:
    """Return the sum of exp(-(u_i - v_j) / tau) over the pairs with u_i > v_j.

    It's calculated in linear time with equation (12) of Houghton & Kreuz,
    using the markage vector mv of the train v. Both u and v must be sorted.
    """
    v = np.asarray(v, dtype=np.float64).tolist()
    mv = np.asarray(mv, dtype=np.float64).tolist()
    terms = []
    j = -1
    for x in np.asarray(u, dtype=np.float64).tolist():
        j = last_index_before(x, v, start=j)
        if j < 0:
            # no spike of v before x
            continue
        terms.append(math.exp(-(x - v[j]) / tau) * (1.0 + mv[j]))
    return math.fsum(terms)


def van_rossum_distance_fast(u: SpikeTrainLike, v: SpikeTrainLike, tau: float) -> float:
    """Calculate the van Rossum distance between the sorted spike trains u and v.

    The fast algorithm of Houghton & Kreuz (2012), equation (9), is used, with complexity O(n+m).
    The pairs of coincident spikes are excluded from the cross terms, so they are subtracted
    separately, and the result is equal to the one of :func:`van_rossum_distance`.

    Args:
        u: first spike train, strictly increasing.
        v: second spike train, strictly increasing.
        tau: timescale of the exponential kernel.

    Returns:
        The distance between u and v.

    Raises:
        InvalidInputError if any train is not strictly increasing, or tau is not positive.
    """
    tau = check_timescale(tau)
    u = check_train(u, name="u", strictly_increasing=True)
    v = check_train(v, name="v", strictly_increasing=True)
    mu, mv = markage_vector(u, tau), markage_vector(v, tau)
    au, av = math.fsum(mu), math.fsum(mv)
    buv, bvu = cross_term(u, v, mv, tau), cross_term(v, u, mu, tau)
    coincident = len(np.intersect1d(u, v, assume_unique=True))
    d2 = len(u) + len(v) - 2 * coincident + 2 * (au + av - buv - bvu)
    L.debug("Van Rossum distance with %s and %s spikes, tau=%s: d2=%s", len(u), len(v), tau, d2)
    return _sqrt(d2)
