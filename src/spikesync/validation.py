"""Validation utilities."""

import importlib.resources
import logging
import math
from typing import Optional

import jsonschema
import numpy as np
import yaml

from spikesync.constants import BOUNDARY_OFFSET
from spikesync.types import SpikeTrainLike

L = logging.getLogger(__name__)


class ValidationError(Exception):
    """Validation error."""


class InvalidInputError(ValueError):
    """Invalid input passed to a distance function."""


def read_schema(schema_name: str) -> dict:
    """Load a schema and return the result as a dictionary."""
    traversable = importlib.resources.files(__package__) / "schemas" / f"{schema_name}.yaml"
    with traversable.open(encoding="utf-8") as stream:
        return yaml.safe_load(stream)


def validate_config(config: dict, schema: dict) -> None:
    """Raise an exception if the configuration is not valid.

    Args:
        config: configuration to be validated.
        schema: json schema.

    Raises:
        ValidationError if the validation failed.
    """
    if config is None:
        L.error("The configuration cannot be empty.")
        raise ValidationError("Empty configuration")
    cls = jsonschema.validators.validator_for(schema)
    cls.check_schema(schema)
    validator = cls(schema)
    errors = list(validator.iter_errors(config))
    if errors:
        # Log an error message for each error.
        msg = []
        for n, e in enumerate(errors, 1):
            path = ".".join(str(elem) for elem in ["root"] + list(e.absolute_path))
            msg.append(f"{n}: Failed validating {path}: {e.message}")
        msg = "\n".join(msg)
        L.error("Invalid configuration:\n%s", msg)
        raise ValidationError("Invalid configuration")


def check_train(
    train: SpikeTrainLike, name: str = "train", strictly_increasing: bool = False
) -> np.ndarray:
    """Return a new 1-D float64 array with the spike times of the given train.

    Args:
        train: spike times, as any 1-D array-like object.
        name: name of the train, used in the error messages.
        strictly_increasing: if True, the spike times must be sorted and unique.

    Returns:
        A copy of the spike times, so that the original object is never modified.

    Raises:
        InvalidInputError if the train cannot be used as a spike train.
    """
    msg = f"The spike train {name} must contain only real numbers"
    try:
        result = np.array(train)
    except ValueError as ex:
        raise InvalidInputError(msg) from ex
    if result.dtype.kind in "US":
        # strings are never converted to numbers
        raise InvalidInputError(f"{msg}, not strings")
    try:
        result = result.astype(np.float64, copy=False)
    except (TypeError, ValueError) as ex:
        raise InvalidInputError(msg) from ex
    if result.ndim != 1:
        raise InvalidInputError(
            f"The spike train {name} must be one-dimensional, not {result.ndim}-dimensional"
        )
    if not np.all(np.isfinite(result)):
        raise InvalidInputError(f"The spike train {name} must contain only finite values")
    if strictly_increasing and len(result) > 1:
        invalid = np.flatnonzero(np.diff(result) <= 0)
        if len(invalid) > 0:
            i = invalid[0]
            raise InvalidInputError(
                f"The spike train {name} must be strictly increasing, "
                f"found {float(result[i])!r} at index {i} followed by {float(result[i + 1])!r}"
            )
    return result


def check_timescale(tau: float) -> float:
    """Return the timescale as a float, or raise InvalidInputError if it's not positive."""
    try:
        tau = float(tau)
    except (TypeError, ValueError) as ex:
        raise InvalidInputError(f"The timescale must be a real number, not {tau!r}") from ex
    if not math.isfinite(tau) or tau <= 0:
        raise InvalidInputError(f"The timescale must be positive and finite, not {tau!r}")
    return tau


def check_bounds(
    first: np.ndarray, second: np.ndarray, t0: Optional[float], tf: Optional[float]
) -> tuple[float, float]:
    """Return the bounds of the interval containing the spikes of both the trains.

    Args:
        first: first spike train, already validated.
        second: second spike train, already validated.
        t0: start of the interval, or None to use one unit before the first spike.
        tf: end of the interval, or None to use one unit after the last spike.

    Raises:
        InvalidInputError if both trains are empty, or the bounds are not valid.
    """
    non_empty = [train for train in (first, second) if len(train) > 0]
    if not non_empty:
        raise InvalidInputError("At least one of the spike trains must contain some spike")
    if t0 is None:
        t0 = min(train[0] for train in non_empty) - BOUNDARY_OFFSET
    if tf is None:
        tf = max(train[-1] for train in non_empty) + BOUNDARY_OFFSET
    t0, tf = float(t0), float(tf)
    if not (math.isfinite(t0) and math.isfinite(tf)):
        raise InvalidInputError(f"The bounds must be finite, not t0={t0!r} and tf={tf!r}")
    if t0 >= tf:
        raise InvalidInputError(f"t0 must be lower than tf, not t0={t0!r} and tf={tf!r}")
    for train in non_empty:
        if train[0] < t0 or train[-1] > tf:
            raise InvalidInputError(
                f"All the spikes must be in the interval [{t0!r}, {tf!r}], "
                f"found spikes in [{float(train[0])!r}, {float(train[-1])!r}]"
            )
    return t0, tf
