from __future__ import annotations

import copy
from typing import Tuple

from pggeom.components import GeometryType
from pggeom.geometry.composed import ComposedGeom
from pggeom.geometry.composed import PointComposedGeom


class LineString(PointComposedGeom):
    kind = GeometryType.linestring

    def reverse(self) -> LineString:
        """Return a new line string with points in reverse order."""
        points = copy.deepcopy(self.members)
        return type(self)(reversed(points), srid=self.srid)

    def concat(self, other: LineString) -> LineString:
        """Join two line strings into a new one.

        If `other` starts where this line string ends, the shared point is
        written only once.
        """
        points = list(self.members)
        others = list(other.members)
        if points and others and points[-1] == others[0]:
            others = others[1:]
        return LineString(copy.deepcopy(points + others), srid=self.srid)


class LinearRing(LineString):
    """Closed line string used as a `Polygon` ring.

    Rings have no WKT type name of their own, they are parsed and written
    only as polygon members.
    """


class MultiLineString(ComposedGeom):
    kind = GeometryType.multilinestring
    member_type = LineString

    @property
    def lines(self) -> Tuple[LineString, ...]:
        return self.members

    def num_lines(self) -> int:
        return len(self.members)

    def get_line(self, index: int) -> LineString:
        return self.get_sub_geometry(index)
