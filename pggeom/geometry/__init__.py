from pggeom.geometry.point import Point
from pggeom.geometry.composed import ComposedGeom
from pggeom.geometry.composed import PointComposedGeom
from pggeom.geometry.multipoint import MultiPoint
from pggeom.geometry.linestring import LineString
from pggeom.geometry.linestring import LinearRing
from pggeom.geometry.linestring import MultiLineString
from pggeom.geometry.polygon import Polygon
from pggeom.geometry.polygon import MultiPolygon
from pggeom.geometry.collection import GeometryCollection
from pggeom.geometry.parse import geometry_from_wkt

# Register member strategies of composed geometries.
import pggeom.geometry.load  # noqa

__all__ = [
    'Point',
    'ComposedGeom',
    'PointComposedGeom',
    'MultiPoint',
    'LineString',
    'LinearRing',
    'MultiLineString',
    'Polygon',
    'MultiPolygon',
    'GeometryCollection',
    'geometry_from_wkt',
]
