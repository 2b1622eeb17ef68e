from pggeom.components import GeometryType
from pggeom.geometry.composed import PointComposedGeom


class MultiPoint(PointComposedGeom):
    kind = GeometryType.multipoint
