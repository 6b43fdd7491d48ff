"""
This module provides:
    • cluster_indices_radius()
    • cluster_objects_radius()
"""

from typing import List, Callable, Any, Tuple
import math
from collections import deque


# -------------------------------------------------------------------------
#  BASIC RADIUS CLUSTERING (point-based)
# -------------------------------------------------------------------------

def cluster_indices_radius(points: List[Tuple[float, float]], radius: float) -> List[List[int]]:
    """
    Groups point indices whose points chain together within a given
    Euclidean radius. Clusters and their members keep input order.
    """
    used = set()
    clusters = []

    for i in range(len(points)):
        if i in used:
            continue

        q = deque([i])
        cluster = []

        while q:
            idx = q.popleft()
            if idx in used:
                continue

            used.add(idx)
            cluster.append(idx)

            for j, other in enumerate(points):
                if j in used:
                    continue
                if math.dist(points[idx], other) <= radius:
                    q.append(j)

        clusters.append(sorted(cluster))

    return clusters


# -------------------------------------------------------------------------
#  OBJECT-BASED RADIUS CLUSTERING (e.g., ShapeMatch)
# -------------------------------------------------------------------------

def cluster_objects_radius(objects: List[Any], radius: float, key: Callable[[Any], Tuple[float, float]]):
    """
    Generic object clustering using a coordinate extractor 'key'.
    Objects sharing identical coordinates stay distinct members.
    """
    coords = [key(o) for o in objects]
    return [
        [objects[i] for i in cluster]
        for cluster in cluster_indices_radius(coords, radius)
    ]
