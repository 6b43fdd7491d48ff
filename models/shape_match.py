from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np


TRIANGLE = "triangle"
RECTANGLE = "rectangle"
PENTAGON = "pentagon"
CIRCLE = "circle"
ELLIPSE = "ellipse"

SHAPE_LABELS = (TRIANGLE, RECTANGLE, PENTAGON, CIRCLE, ELLIPSE)


@dataclass(eq=False)
class ShapeMatch:
    """
    One classified contour.

    `polygon` is the outline to report: the approximated polygon for
    triangles, rectangles and pentagons, the original contour for
    circles and ellipses.

    `mask_index` / `contour_index` record where the match came from, so
    results produced out of order can be merged back stably.

    Unpacks as (label, polygon):
        label, polygon = match
    """

    label: str
    polygon: np.ndarray
    mask_index: int = 0
    contour_index: int = 0

    def __iter__(self):
        yield self.label
        yield self.polygon

    # -------------------------------------------------------------
    #   Derived geometry
    # -------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self.polygon)

    @property
    def area(self) -> float:
        return abs(cv2.contourArea(self.polygon))

    @property
    def centroid(self) -> Tuple[float, float]:
        """
        Centre of mass from image moments; the vertex mean when the
        polygon encloses no area.
        """
        m = cv2.moments(self.polygon)
        if m["m00"] == 0:
            pts = np.asarray(self.polygon, dtype=np.float64).reshape(-1, 2)
            cx, cy = pts.mean(axis=0)
            return float(cx), float(cy)
        return m["m10"] / m["m00"], m["m01"] / m["m00"]

    def sort_key(self) -> Tuple[int, int]:
        return self.mask_index, self.contour_index
