"""
Configuration constants for graphkit.

All tunable defaults and text-format markers are defined here.
Environment overrides are read once at import time (a local .env file is
honoured) - never mutate these at runtime.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Edge Configuration
# =============================================================================

# Weight given to an edge when the text or caller omits one
DEFAULT_EDGE_WEIGHT = 1.0

# =============================================================================
# Text Format Configuration
# =============================================================================

# First-line markers that declare graph direction (compared upper-cased)
DIRECTED_MARKERS = {"DIRECTED"}
UNDIRECTED_MARKERS = {"NON-DIRECTED", "NON_DIRECTED", "UNDIRECTED"}

# Marker lines written by Graph.to_text()
DIRECTED_LABEL = "Directed"
UNDIRECTED_LABEL = "Non-Directed"

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Spanning tree algorithm used when the caller does not name one (kruskal, prim)
DEFAULT_MST_ALGORITHM = os.environ.get("GRAPHKIT_MST_ALGORITHM", "kruskal")

# Traversal clocks start here so a stamp of 0 never appears
CLOCK_START = 1

# =============================================================================
# Generator Configuration
# =============================================================================

# Uniform weight range for generated grid graphs: [low, high)
GRID_WEIGHT_LOW = 1.0
GRID_WEIGHT_HIGH = 2.0

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHKIT_LOG_LEVEL", "WARNING")


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler at LOG_LEVEL (or the given level)."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
