"""Comparison Configuration Models."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel as PydanticBaseModel
from pydantic import Field
from pydantic.functional_validators import model_validator

from spikesync.constants import CONFIG_VERSION


class BaseModel(PydanticBaseModel):
    """Custom BaseModel."""

    model_config = {
        "extra": "forbid",
        "allow_inf_nan": False,
        "validate_assignment": True,
    }


class MethodEnum(str, Enum):
    """Van Rossum algorithm Enumeration."""

    direct = "direct"
    fast = "fast"


class TrainsConfig(BaseModel):
    """TrainsConfig Model."""

    first: Path
    second: Path


class VanRossumConfig(BaseModel):
    """VanRossumConfig Model."""

    type: Literal["van_rossum"] = "van_rossum"
    tau: float
    method: MethodEnum = MethodEnum.fast


class SpikeConfig(BaseModel):
    """SpikeConfig Model."""

    type: Literal["spike"] = "spike"
    t0: Optional[float] = None
    tf: Optional[float] = None


MetricConfig = Annotated[Union[VanRossumConfig, SpikeConfig], Field(discriminator="type")]


class ComparisonConfig(BaseModel):
    """ComparisonConfig Model."""

    version: int
    trains: TrainsConfig
    metric: MetricConfig
    output: Optional[Path] = None

    @model_validator(mode="after")
    def validate_values(self):
        """Validate the values after loading them."""
        if self.version != CONFIG_VERSION:
            raise ValueError(f"Only version {CONFIG_VERSION} is supported")
        if self.output is not None and self.metric.type != "spike":
            raise ValueError("output can be specified only with the spike metric")
        return self
