"""
config.py — Configuration Constants
====================================
Every tunable the host layer reads lives here.  Values that differ
between machines can be overridden through environment variables.
"""

import os

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
# DEBUG, INFO, WARNING, ERROR
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
HOST   = os.environ.get("TRACE_HOST", "0.0.0.0")
PORT   = int(os.environ.get("TRACE_PORT", "5000"))
DEBUG  = os.environ.get("TRACE_DEBUG", "0") == "1"

# Flask session signing key.  Falls back to a random key per process.
SECRET_KEY = os.environ.get("TRACE_SECRET_KEY")

# ---------------------------------------------------------------------------
# Layout (nodes from builders are placed on a circle)
# ---------------------------------------------------------------------------
LAYOUT_CENTER_X = 300.0
LAYOUT_CENTER_Y = 250.0
LAYOUT_RADIUS   = 200.0

# ---------------------------------------------------------------------------
# Random graph defaults
# ---------------------------------------------------------------------------
DEFAULT_NODE_COUNT       = 8
DEFAULT_EDGE_PROBABILITY = 0.3
DEFAULT_WEIGHT_RANGE     = (1, 10)     # inclusive

# ---------------------------------------------------------------------------
# A*
# ---------------------------------------------------------------------------
DEFAULT_HEURISTIC = "euclidean"
