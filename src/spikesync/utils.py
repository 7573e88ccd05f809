"""Common utilities."""

import logging
import os.path
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Optional, Union

import numpy as np
import pandas as pd
import yaml

from spikesync.constants import DTYPES, TIMES, TIMESTAMPS
from spikesync.types import StrOrPath
from spikesync.validation import InvalidInputError

L = logging.getLogger(__name__)


@contextmanager
def timed(log: Callable, msg, *args) -> Iterator[None]:
    """Context manager to log the execution time using the specified logger function."""
    log(f"{msg}...", *args)
    start_time = time.monotonic()
    status = "failed"
    try:
        yield
        status = "done"
    finally:
        elapsed = time.monotonic() - start_time
        log(f"{msg} [{status} in {elapsed:.2f} seconds]", *args)


def setup_logging(loglevel: Union[int, str], logformat: Optional[str] = None, **logparams) -> None:
    """Setup logging."""
    logformat = logformat or "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(format=logformat, level=loglevel, **logparams)


def load_yaml(filepath: StrOrPath) -> Any:
    """Load from YAML file."""
    with open(filepath, encoding="utf-8") as f:
        # Any conversion when loading back the values can be done later,
        # so that the loaded object can be validated using jsonschema.
        return yaml.load(f, Loader=yaml.SafeLoader)


def resolve_path(*paths: StrOrPath, symlinks: bool = False) -> Path:
    """Make the path absolute and return a new path object.

    It may be different from calling Path.resolve(), because Path.resolve() always resolve symlinks.
    It may be different from calling Path.absolute(), because Path.absolute() doesn't remove the
    relative paths. For example, Path('/tmp/..').absolute() == PosixPath('/tmp/..').
    """
    if symlinks:
        # resolve any symlinks
        return Path(*paths).resolve()
    # does not resolve symbolic links
    return Path(os.path.abspath(Path(*paths)))


def ensure_dtypes(
    df: pd.DataFrame, desired_dtypes: Optional[dict[str, Any]] = None
) -> pd.DataFrame:
    """Return a DataFrame with the columns cast to the desired types.

    Args:
        df: original Pandas DataFrame.
        desired_dtypes: dict of names and desired dtypes. If None, the predefined dtypes are used.
            If the dict contains names not present in the columns, they are ignored.

    Returns:
        A new DataFrame with the desired dtypes, or the same DataFrame if the columns are unchanged.
    """
    if desired_dtypes is None:
        desired_dtypes = DTYPES
    if dtypes := {
        k: desired_dtypes[k]
        for k in df.columns
        if k in desired_dtypes and desired_dtypes[k] != df.dtypes.at[k]
    }:
        df = df.astype(dtypes)
    return df


def load_spike_train(path: StrOrPath, sep: str = ",") -> np.ndarray:
    """Load a spike train from a CSV file.

    The file must have a header containing the column ``times`` (or ``timestamps``).
    Any other column is ignored, and the spike times are returned in the same order of the file.
    """
    valid_columns = {TIMES, TIMESTAMPS}
    try:
        df = pd.read_csv(path, sep=sep, usecols=lambda x: x in valid_columns)
    except pd.errors.EmptyDataError as ex:
        raise InvalidInputError(f"Empty spike train file: {path}") from ex
    if TIMES not in df.columns:
        if TIMESTAMPS not in df.columns:
            raise InvalidInputError(f"Missing column {TIMES!r} in the spike train file: {path}")
        df = df.rename(columns={TIMESTAMPS: TIMES})
    try:
        df = ensure_dtypes(df[[TIMES]])
    except ValueError as ex:
        raise InvalidInputError(f"Invalid spike times in the spike train file: {path}") from ex
    L.info("Loaded %s spikes from %s", len(df), path)
    return df[TIMES].to_numpy()

