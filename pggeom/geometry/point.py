from __future__ import annotations

from typing import Iterator
from typing import Optional
from typing import Tuple

from pggeom.components import Geometry
from pggeom.components import GeometryType
from pggeom.components import UNKNOWN_SRID
from pggeom.components import split_dimension_tag
from pggeom.exceptions import IndexOutOfRange
from pggeom.exceptions import MalformedInput
from pggeom.utils.tokenizer import has_outer_delimiters
from pggeom.utils.tokenizer import strip_outer_delimiters


def format_number(value: float) -> str:
    # Integral values are written without fraction, the way PostGIS does.
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Point(Geometry):
    kind = GeometryType.point

    def __init__(
        self,
        x: float,
        y: float,
        z: Optional[float] = None,
        m: Optional[float] = None,
        *,
        srid: int = UNKNOWN_SRID,
    ):
        super().__init__(srid=srid)
        self._x = float(x)
        self._y = float(y)
        self._z = None if z is None else float(z)
        self._m = None if m is None else float(m)
        self.dimension = 2 if z is None else 3
        self.has_measure = m is not None

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> Optional[float]:
        return self._z

    @property
    def m(self) -> Optional[float]:
        return self._m

    @classmethod
    def _from_wkt(cls, value: str, have_measure: bool) -> Point:
        text = value
        type_string = cls.kind.type_string
        if value.startswith(type_string):
            value, measure = split_dimension_tag(value[len(type_string):])
            have_measure = have_measure or measure
        value = value.strip()

        if '(' in value or ')' in value:
            if not has_outer_delimiters(value):
                raise MalformedInput(text=text, expected=type_string)
            value = strip_outer_delimiters(value).strip()

        try:
            coords = [float(v) for v in value.split()]
        except ValueError:
            raise MalformedInput(text=text, expected=type_string)

        if len(coords) == 4:
            x, y, z, m = coords
        elif len(coords) == 3 and have_measure:
            x, y, m = coords
            z = None
        elif len(coords) == 3:
            x, y, z = coords
            m = None
        elif len(coords) == 2 and not have_measure:
            x, y = coords
            z = m = None
        else:
            raise MalformedInput(text=text, expected=type_string)
        return cls(x, y, z, m)

    def coordinates(self) -> Tuple[float, ...]:
        coords = (self.x, self.y)
        if self.z is not None:
            coords += (self.z,)
        if self.m is not None:
            coords += (self.m,)
        return coords

    def is_empty(self) -> bool:
        return False

    def num_points(self) -> int:
        return 1

    def get_point(self, n: int) -> Point:
        if n != 0:
            raise IndexOutOfRange(self, index=n, size=1)
        return self

    def get_first_point(self) -> Point:
        return self

    def get_last_point(self) -> Point:
        return self

    def iter_points(self) -> Iterator[Point]:
        yield self

    def medium_wkt(self) -> str:
        return '(' + self.inner_wkt() + ')'

    def inner_wkt(self) -> str:
        return ' '.join(format_number(c) for c in self.coordinates())

    def _equals(self, other: Point) -> bool:
        return self.coordinates() == other.coordinates()

    def _hash_key(self) -> Tuple[float, ...]:
        return self.coordinates()
