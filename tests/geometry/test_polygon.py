from pggeom.geometry import LinearRing
from pggeom.geometry import MultiPolygon
from pggeom.geometry import Point
from pggeom.geometry import Polygon


def test_polygon_with_hole():
    geom = Polygon.from_wkt('POLYGON((0 0,4 0,4 4,0 4,0 0),(1 1,2 1,2 2,1 1))')
    assert geom.num_rings() == 2
    assert isinstance(geom.get_ring(0), LinearRing)
    assert geom.rings == tuple(geom)
    assert geom.num_points() == 9
    assert geom.get_point(5) == Point(1, 1)
    assert geom.get_last_point() == Point(1, 1)
    assert geom.wkt() == 'POLYGON((0 0,4 0,4 4,0 4,0 0),(1 1,2 1,2 2,1 1))'


def test_polygon_3d():
    geom = Polygon.from_wkt('POLYGON((0 0 1,1 0 1,1 1 1,0 0 1))')
    assert geom.dimension == 3
    assert geom.has_measure is False
    assert geom.check_consistency() is True


def test_multipolygon():
    geom = MultiPolygon.from_wkt('MULTIPOLYGON(((0 0,1 0,1 1,0 0)),((5 5,6 5,6 6,5 5)))')
    assert geom.num_polygons() == 2
    assert geom.polygons == tuple(geom)
    assert geom.get_polygon(1) == Polygon.from_wkt('POLYGON((5 5,6 5,6 6,5 5))')
    assert geom.num_points() == 8
    assert geom.get_point(4) == Point(5, 5)


def test_multipolygon_measure():
    geom = MultiPolygon.from_wkt('MULTIPOLYGONM(((0 0 1,1 0 1,1 1 1,0 0 1)))')
    assert geom.dimension == 2
    assert geom.has_measure is True
    assert geom.get_polygon(0).get_ring(0).get_point(0) == Point(0, 0, m=1)
    assert geom.wkt() == 'MULTIPOLYGONM(((0 0 1,1 0 1,1 1 1,0 0 1)))'
