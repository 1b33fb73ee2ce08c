"""
Configuration constants for wavegraph.

Container defaults, sentinel weights and the environment variables read by
the command line and MCP front ends live here.
"""

from pathlib import Path

# =============================================================================
# Graph Configuration
# =============================================================================

# "No edge" marker in the adjacency matrix of a weighted graph
NO_EDGE_WEIGHTED = 2**31 - 1

# "No edge" marker in the adjacency matrix of an unweighted graph
NO_EDGE_UNWEIGHTED = 0

# Weight stored for every edge of an unweighted graph
UNWEIGHTED_EDGE = 1

# =============================================================================
# Container Configuration
# =============================================================================

# Keys are treated as unsigned 64-bit integers
KEY_MASK = (1 << 64) - 1

# Bucket count allocated on the first insert into an empty map
INITIAL_BUCKET_COUNT = 16

# Bucket count multiplier applied when the load factor is reached
BUCKET_GROWTH_FACTOR = 2

# size / bucket_count at which the map grows
DEFAULT_MAX_LOAD_FACTOR = 1.0

# =============================================================================
# Front-end Configuration
# =============================================================================

# Edge-list file read when none is given
DEFAULT_GRAPH_FILE = Path("Panas.in")

# Environment variable naming the edge-list file
GRAPH_FILE_ENV = "WAVEGRAPH_FILE"

# Environment variable holding the log level name (DEBUG, INFO, ...)
LOG_LEVEL_ENV = "WAVEGRAPH_LOG_LEVEL"
