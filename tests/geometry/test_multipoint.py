import pytest

from pggeom.exceptions import MalformedInput
from pggeom.geometry import MultiPoint
from pggeom.geometry import Point


def test_parse():
    geom = MultiPoint.from_wkt('MULTIPOINT(1 2,3 4)')
    assert geom.members == (Point(1, 2), Point(3, 4))
    assert geom.num_geoms() == 2
    assert geom.num_points() == 2
    assert geom.dimension == 2
    assert geom.has_measure is False
    assert geom.medium_wkt() == '(1 2,3 4)'
    assert geom.inner_wkt() == '1 2,3 4'
    assert geom.wkt() == 'MULTIPOINT(1 2,3 4)'


@pytest.mark.parametrize('wkt', [
    '(1 2,3 4)',
    'MULTIPOINT (1 2, 3 4)',
    'MULTIPOINT((1 2),(3 4))',
    'MULTIPOINT ((1 2), (3 4))',
])
def test_parse_variants(wkt):
    assert MultiPoint.from_wkt(wkt) == MultiPoint([Point(1, 2), Point(3, 4)])


def test_parse_measure():
    geom = MultiPoint.from_wkt('MULTIPOINTM(1 2 3,4 5 6)')
    assert geom.dimension == 2
    assert geom.has_measure is True
    assert geom.get_point(1) == Point(4, 5, m=6)
    assert geom.wkt() == 'MULTIPOINTM(1 2 3,4 5 6)'


def test_parse_3d_measure():
    geom = MultiPoint.from_wkt('MULTIPOINT(1 2 3 4,5 6 7 8)')
    assert geom.dimension == 3
    assert geom.has_measure is True
    assert geom.wkt() == 'MULTIPOINT(1 2 3 4,5 6 7 8)'


def test_parse_srid():
    geom = MultiPoint.from_wkt('SRID=4326;MULTIPOINT(1 2,3 4)')
    assert geom.srid == 4326
    assert [p.srid for p in geom.points] == [4326, 4326]
    assert geom.check_consistency() is True
    assert geom.ewkt() == 'SRID=4326;MULTIPOINT(1 2,3 4)'
    assert str(geom) == 'SRID=4326;MULTIPOINT(1 2,3 4)'


def test_parse_unknown_srid():
    geom = MultiPoint.from_wkt('SRID=-1;MULTIPOINT(1 2)')
    assert geom.srid == 0
    assert geom.ewkt() == 'MULTIPOINT(1 2)'


def test_parse_floats():
    geom = MultiPoint.from_wkt('MULTIPOINT(1.5 -2.25,0.1 3)')
    assert geom.wkt() == 'MULTIPOINT(1.5 -2.25,0.1 3)'


@pytest.mark.parametrize('wkt', [
    'LINESTRING 1 2,3 4)',
    'LINESTRING(1 2,3 4)',
    'MULTIPOINT(1 2,a b)',
    'MULTIPOINT()',
    'MULTIPOINT(1 2,)',
    'MULTIPOINT(1 2',
    '(1 2),(3 4)',
    'MULTIPOINT',
])
def test_parse_malformed(wkt):
    with pytest.raises(MalformedInput):
        MultiPoint.from_wkt(wkt)


def test_repr():
    geom = MultiPoint.from_wkt('SRID=3346;MULTIPOINT(1 2)')
    assert repr(geom) == "<MultiPoint 'SRID=3346;MULTIPOINT(1 2)'>"
