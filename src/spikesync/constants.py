"""Common constants."""

import numpy as np

# columns names
TIMES = "times"
TIMESTAMPS = "timestamps"
TIME = "time"
SIDE = "side"
VALUE = "value"

# values of the side column of a SPIKE profile
PRE = "pre"
POST = "post"

DTYPES = {
    TIMES: np.float64,
    TIME: np.float64,
    VALUE: np.float64,
}

# distance between the outermost spike and the default auxiliary spikes of the SPIKE profile
BOUNDARY_OFFSET = 1.0

CONFIG_VERSION = 1
