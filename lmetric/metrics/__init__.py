"""
Generalized `L_p` distance metrics.

This module implements the `L_p` metric for arbitrary positive integer `p`,
optionally without the final `p`-th root, together with the Manhattan,
squared Euclidean and Euclidean presets commonly used by nearest-neighbor and
clustering algorithms.
"""

from .lmetric import *
