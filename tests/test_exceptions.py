import pytest

from pggeom.exceptions import BaseError
from pggeom.exceptions import EmptyGeometry
from pggeom.exceptions import IndexOutOfRange
from pggeom.exceptions import InvalidSRID
from pggeom.exceptions import MalformedInput
from pggeom.exceptions import UserError
from pggeom.exceptions import error_response
from pggeom.geometry import MultiPoint
from pggeom.geometry import Point


class Error(BaseError):
    template = "Error."
    context = {
        'coords': 'this.coordinates()',
    }


def test_str_without_this():
    error = Error()
    assert str(error) == "Error.\n"
    assert error_response(error) == {
        'type': 'system',
        'code': 'Error',
        'template': 'Error.',
        'message': 'Error.',
        'context': {},
    }


def test_str_with_this():
    error = Error(Point(1, 2, srid=3346))
    assert str(error) == (
        "Error.\n"
        "  Context:\n"
        "    component: pggeom.geometry.point.Point\n"
        "    geometry: POINT\n"
        "    srid: 3346\n"
        "    coords: (1.0, 2.0)\n"
    )
    assert error_response(error) == {
        'type': 'geometry',
        'code': 'Error',
        'template': 'Error.',
        'message': 'Error.',
        'context': {
            'component': 'pggeom.geometry.point.Point',
            'geometry': 'POINT',
            'srid': 3346,
            'coords': (1.0, 2.0),
        },
    }


def test_str_with_composed_this():
    error = Error(MultiPoint())
    # Composed geometries have no `coordinates()`, unknown paths are skipped.
    assert error.context == {
        'component': 'pggeom.geometry.multipoint.MultiPoint',
        'geometry': 'MULTIPOINT',
        'srid': 0,
    }


def test_str_optional():
    error = Error(foo=42)
    assert str(error) == "Error.\n  Context:\n    foo: 42\n"


def test_context_sorting():
    error = Error(
        bar=1,
        srid=1,
        foo=1,
        geometry=1,
        component=1,
    )
    assert str(error) == (
        "Error.\n"
        "  Context:\n"
        "    component: 1\n"
        "    geometry: 1\n"
        "    srid: 1\n"
        "    bar: 1\n"
        "    foo: 1\n"
    )


def test_missing_var_in_template():
    class Error(BaseError):
        template = "Error: {message}."

    error = Error()
    assert str(error) == "Error: [UNKNOWN].\n"
    assert error_response(error) == {
        'type': 'system',
        'code': 'Error',
        'template': 'Error: {message}.',
        'message': 'Error: [UNKNOWN].',
        'context': {},
    }


@pytest.mark.parametrize('error, message', [
    (
        MalformedInput(text='POINT(1)', expected='POINT'),
        "Error parsing a POINT out of 'POINT(1)'.",
    ),
    (
        InvalidSRID(text='SRID=x;POINT(1 2)', srid='x'),
        "Invalid SRID 'x' in 'SRID=x;POINT(1 2)'.",
    ),
    (
        IndexOutOfRange(Point(1, 2), index=3, size=1),
        "Point index 3 is out of range, geometry has 1 points.",
    ),
    (
        EmptyGeometry(MultiPoint(), index=0, size=0),
        "Empty geometry has no points.",
    ),
])
def test_error_messages(error, message):
    assert isinstance(error, UserError)
    assert error.message == message


def test_builtin_bases():
    assert issubclass(MalformedInput, ValueError)
    assert issubclass(InvalidSRID, ValueError)
    assert issubclass(IndexOutOfRange, IndexError)
    assert issubclass(EmptyGeometry, IndexError)
