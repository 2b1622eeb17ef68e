from typing import Tuple

from pggeom.components import Geometry
from pggeom.components import GeometryType
from pggeom.geometry.composed import ComposedGeom


class GeometryCollection(ComposedGeom):
    """Collection of geometries of any type.

    Members are written in their outer form, with type names, for example
    `GEOMETRYCOLLECTION(POINT(1 2),LINESTRING(0 0,1 1))`.
    """

    kind = GeometryType.geometrycollection
    member_type = Geometry

    @property
    def geometries(self) -> Tuple[Geometry, ...]:
        return self.members

    def inner_wkt(self) -> str:
        return ','.join(geom.wkt() for geom in self.members)
