"""
Utilities module.

The ``lmetric.utils`` module contains functional shortcuts for the common
distance metrics and helpers for generating and checking test data.
"""

from . import testing
from .distance_metrics import *
