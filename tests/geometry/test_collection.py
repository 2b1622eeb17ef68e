import pytest

from pggeom.exceptions import MalformedInput
from pggeom.exceptions import UnknownGeometryType
from pggeom.geometry import GeometryCollection
from pggeom.geometry import LineString
from pggeom.geometry import MultiPoint
from pggeom.geometry import Point


def test_nested():
    geom = GeometryCollection.from_wkt(
        'GEOMETRYCOLLECTION(MULTIPOINT(1 2,3 4),LINESTRING(0 0,1 1))'
    )
    assert geom.num_geoms() == 2
    assert [type(g) for g in geom.geometries] == [MultiPoint, LineString]
    assert geom.num_points() == 4
    assert geom.get_point(2) == Point(0, 0)
    assert geom.wkt() == 'GEOMETRYCOLLECTION(MULTIPOINT(1 2,3 4),LINESTRING(0 0,1 1))'


def test_measure():
    geom = GeometryCollection.from_wkt('GEOMETRYCOLLECTIONM(POINT(1 2 3),LINESTRING(0 0 1,1 1 2))')
    assert geom.has_measure is True
    assert geom.get_first_point() == Point(1, 2, m=3)
    assert geom.check_consistency() is True


def test_legacy_empty():
    geom = GeometryCollection.from_wkt('GEOMETRYCOLLECTION(EMPTY)')
    assert geom.is_empty() is True
    assert geom.wkt() == 'GEOMETRYCOLLECTION EMPTY'


def test_unknown_member_type():
    with pytest.raises(UnknownGeometryType):
        GeometryCollection.from_wkt('GEOMETRYCOLLECTION(CIRCLE(1 2))')


def test_malformed_member_propagates():
    with pytest.raises(MalformedInput):
        GeometryCollection.from_wkt('GEOMETRYCOLLECTION(POINT(1 2),LINESTRING(0 0,x 1))')
