"""Shared type aliases and constants used across the package."""
from __future__ import annotations

import math
from typing import TypeAlias

NodeId: TypeAlias = int  # non-negative, unique per graph instance
Cost: TypeAlias = float

# Cost reported for a missing edge.  Path search relaxes against this
# without special-casing absence.
INFINITE_COST: Cost = math.inf
