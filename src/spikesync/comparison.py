"""Comparison of two spike trains."""

import logging
from pathlib import Path
from typing import NamedTuple, Optional

from spikesync.config.comparison import init_comparison_configuration
from spikesync.config.comparison_model import MethodEnum, MetricConfig, SpikeConfig
from spikesync.spike import SpikeProfile, spike_distance_profile
from spikesync.types import SpikeTrainLike, StrOrPath
from spikesync.utils import load_spike_train, load_yaml, setup_logging, timed
from spikesync.vanrossum import van_rossum_distance, van_rossum_distance_fast

L = logging.getLogger(__name__)


class ComparisonResult(NamedTuple):
    """Result of the comparison of two spike trains."""

    metric: str
    distance: float
    profile: Optional[SpikeProfile] = None


def compare_trains(
    first: SpikeTrainLike, second: SpikeTrainLike, metric: MetricConfig
) -> ComparisonResult:
    """Calculate the distance between two spike trains.

    Args:
        first: first spike train.
        second: second spike train.
        metric: configuration of the distance to be calculated.

    Returns:
        the ComparisonResult, containing also the profile when the SPIKE distance is calculated.
    """
    if isinstance(metric, SpikeConfig):
        profile = spike_distance_profile(first, second, t0=metric.t0, tf=metric.tf)
        return ComparisonResult(metric=metric.type, distance=profile.average(), profile=profile)
    func = van_rossum_distance_fast if metric.method == MethodEnum.fast else van_rossum_distance
    distance = func(first, second, metric.tau)
    return ComparisonResult(metric=metric.type, distance=distance)


def dump_profile(path: StrOrPath, profile: SpikeProfile) -> None:
    """Write the SPIKE profile to a CSV file."""
    L.info("Writing %s", path)
    profile.to_dataframe().to_csv(path, index=False)


def run_from_file(
    comparison_config_file: StrOrPath,
    loglevel: Optional[int] = None,
) -> ComparisonResult:
    """Compare the spike trains specified in the configuration file.

    Args:
        comparison_config_file: path to the comparison configuration file.
        loglevel: if specified, used to set up logging.

    Returns:
        the ComparisonResult.
    """
    if loglevel is not None:
        setup_logging(loglevel=loglevel, force=True)
    L.info("Comparison configuration: %s", comparison_config_file)
    comparison_config_file = Path(comparison_config_file)
    config = init_comparison_configuration(
        load_yaml(comparison_config_file), base_path=comparison_config_file.parent
    )
    first = load_spike_train(config.trains.first)
    second = load_spike_train(config.trains.second)
    with timed(L.info, "Calculating the %s distance", config.metric.type):
        result = compare_trains(first, second, metric=config.metric)
    if config.output is not None:
        dump_profile(config.output, result.profile)
    return result
