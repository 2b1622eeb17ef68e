import pytest

from pggeom import commands
from pggeom.dispatcher import command
from pggeom.geometry import LinearRing
from pggeom.geometry import LineString
from pggeom.geometry import MultiLineString
from pggeom.geometry import Point
from pggeom.geometry import Polygon


def test_signatures():
    signatures = [sig for sig, func in commands.create_member.signatures()]
    assert sorted(signatures) == [
        'GeometryCollection, str, bool',
        'MultiLineString, str, bool',
        'MultiPolygon, str, bool',
        'PointComposedGeom, str, bool',
        'Polygon, str, bool',
    ]


def test_getitem():
    func = commands.create_member[MultiLineString, str, bool]
    line = func(MultiLineString(), '(0 0,1 1)', False)
    assert line == LineString([Point(0, 0), Point(1, 1)])


def test_getitem_missing():
    with pytest.raises(NotImplementedError, match='create_member'):
        commands.create_member[Point, str, bool]


def test_call_missing():
    with pytest.raises(NotImplementedError):
        commands.create_member(Point(1, 2), '1 2', False)


def test_create_ring():
    ring = commands.create_member(Polygon(), '(0 0,1 0,1 1,0 0)', False)
    assert type(ring) is LinearRing
    assert ring.num_points() == 4


def test_command_defined_twice():
    with pytest.raises(Exception, match='already defined'):
        @command()
        def create_member():
            pass


def test_register_by_annotations():
    @command('describe_geometry')
    def describe():
        """Describe a geometry."""

    @describe.register()
    def describe_point(geom: Point):
        return 'point'

    @describe.register()
    def describe_line(geom: LineString):
        return 'line'

    assert describe(Point(1, 2)) == 'point'
    assert describe(LinearRing()) == 'line'
