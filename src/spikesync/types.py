"""Common types."""

from os import PathLike
from typing import Union

from numpy.typing import ArrayLike

StrOrPath = Union[str, PathLike]
SpikeTrainLike = ArrayLike
