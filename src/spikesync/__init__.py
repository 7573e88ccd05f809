"""SpikeSync: distances between spike trains."""

from spikesync.numerics import trapezoid_integral
from spikesync.spike import SpikeProfile, spike_distance, spike_distance_profile
from spikesync.validation import InvalidInputError
from spikesync.vanrossum import van_rossum_distance, van_rossum_distance_fast
from spikesync.version import __version__

__all__ = [
    "__version__",
    "InvalidInputError",
    "SpikeProfile",
    "spike_distance",
    "spike_distance_profile",
    "trapezoid_integral",
    "van_rossum_distance",
    "van_rossum_distance_fast",
]
