from typing import Tuple

from pggeom.components import GeometryType
from pggeom.geometry.composed import ComposedGeom
from pggeom.geometry.linestring import LinearRing


class Polygon(ComposedGeom):
    """Polygon made of rings, first ring is the shell, others are holes."""

    kind = GeometryType.polygon
    member_type = LinearRing

    @property
    def rings(self) -> Tuple[LinearRing, ...]:
        return self.members

    def num_rings(self) -> int:
        return len(self.members)

    def get_ring(self, index: int) -> LinearRing:
        return self.get_sub_geometry(index)


class MultiPolygon(ComposedGeom):
    kind = GeometryType.multipolygon
    member_type = Polygon

    @property
    def polygons(self) -> Tuple[Polygon, ...]:
        return self.members

    def num_polygons(self) -> int:
        return len(self.members)

    def get_polygon(self, index: int) -> Polygon:
        return self.get_sub_geometry(index)
