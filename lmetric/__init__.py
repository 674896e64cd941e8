# noqa
"""Generalized L_p distance metrics implemented in NumPy"""

from . import metrics
from . import utils

from .metrics import (
    LMetric,
    ManhattanDistance,
    SquaredEuclideanDistance,
    EuclideanDistance,
    MetricInitializer,
)
