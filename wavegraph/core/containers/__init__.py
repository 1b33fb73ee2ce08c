"""
Containers: the building blocks every graph structure is indexed with.

Components:
    - HashMap: chained hash table keyed by unsigned 64-bit integers
    - VertexSequence: growable vertex list with clone/reverse
"""

from wavegraph.core.containers.hashmap import HashMap
from wavegraph.core.containers.sequence import VertexSequence

__all__ = [
    "HashMap",
    "VertexSequence",
]
