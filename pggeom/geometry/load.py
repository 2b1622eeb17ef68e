from pggeom import commands
from pggeom.geometry.collection import GeometryCollection
from pggeom.geometry.composed import PointComposedGeom
from pggeom.geometry.linestring import LineString
from pggeom.geometry.linestring import LinearRing
from pggeom.geometry.linestring import MultiLineString
from pggeom.geometry.parse import geometry_from_wkt
from pggeom.geometry.point import Point
from pggeom.geometry.polygon import MultiPolygon
from pggeom.geometry.polygon import Polygon


@commands.create_member.register(PointComposedGeom, str, bool)
def create_member(geom: PointComposedGeom, token: str, have_measure: bool) -> Point:
    return Point.from_wkt(token, have_measure)


@commands.create_member.register(MultiLineString, str, bool)
def create_member(geom: MultiLineString, token: str, have_measure: bool) -> LineString:
    return LineString.from_wkt(token, have_measure)


@commands.create_member.register(Polygon, str, bool)
def create_member(geom: Polygon, token: str, have_measure: bool) -> LinearRing:
    return LinearRing.from_wkt(token, have_measure)


@commands.create_member.register(MultiPolygon, str, bool)
def create_member(geom: MultiPolygon, token: str, have_measure: bool) -> Polygon:
    return Polygon.from_wkt(token, have_measure)


@commands.create_member.register(GeometryCollection, str, bool)
def create_member(geom: GeometryCollection, token: str, have_measure: bool):
    return geometry_from_wkt(token, have_measure)
