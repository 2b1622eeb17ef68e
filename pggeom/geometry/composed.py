from __future__ import annotations

import logging
from typing import Iterable
from typing import Iterator
from typing import Optional
from typing import Tuple
from typing import Type

from pggeom import commands
from pggeom.components import Geometry
from pggeom.components import split_dimension_tag
from pggeom.exceptions import EmptyGeometry
from pggeom.exceptions import IndexOutOfRange
from pggeom.exceptions import MalformedInput
from pggeom.exceptions import MemberIndexOutOfRange
from pggeom.geometry.point import Point
from pggeom.utils.tokenizer import has_outer_delimiters
from pggeom.utils.tokenizer import split_top_level
from pggeom.utils.tokenizer import strip_outer_delimiters

log = logging.getLogger(__name__)

# `(EMPTY)` was written by PostGIS 0.x for empty geometry collections, it is
# not OpenGIS compliant, but still accepted when parsing.
EMPTY_SPELLINGS = frozenset({
    'EMPTY',
    '(EMPTY)',
})


class ComposedGeom(Geometry):
    """Geometry composed of other geometries.

    All geometries except `Point` are composed. Members are kept in an
    immutable tuple, an empty geometry has no members and dimension 0.

    Members are created from WKT tokens by `commands.create_member`, which
    each concrete type registers for itself, and must be instances of
    `member_type`.
    """

    member_type: Type[Geometry] = Geometry
    members: Tuple[Geometry, ...] = ()

    def __init__(
        self,
        members: Iterable[Geometry] = (),
        *,
        srid: Optional[int] = None,
    ):
        super().__init__()
        self.members = tuple(members)
        for member in self.members:
            if not isinstance(member, self.member_type):
                raise TypeError(
                    f"{type(self).__name__} members must be "
                    f"{self.member_type.__name__}, got {type(member).__name__}."
                )
        self._adopt_first_member()
        if self.members:
            self.srid = self.members[0].srid
        if srid is not None:
            self.set_srid(srid)

    def _adopt_first_member(self) -> None:
        if self.members:
            first = self.members[0]
            self.dimension = first.dimension
            # Measure flag is taken from the member, because `M` suffix is
            # only written for 2D geometries.
            self.has_measure = first.has_measure
        else:
            self.dimension = 0
            self.has_measure = False

    @classmethod
    def _from_wkt(cls, value: str, have_measure: bool) -> ComposedGeom:
        geom = cls()
        geom.parse_wkt(value, have_measure)
        return geom

    def parse_wkt(self, value: str, have_measure: bool = False) -> None:
        """Populate members from WKT without SRID prefix.

        Accepts both the outer form, `MULTIPOINT(1 2,3 4)`, and the bare
        form, `(1 2,3 4)`, used for members of other geometries.
        """
        text = value
        have_measure = bool(have_measure)
        type_string = self.type_string
        if value.startswith(type_string):
            value, measure = split_dimension_tag(value[len(type_string):])
            have_measure = have_measure or measure
        elif value not in EMPTY_SPELLINGS and not value.startswith('('):
            raise MalformedInput(self, text=text, expected=type_string)
        value = value.strip()

        if value in EMPTY_SPELLINGS:
            self.members = ()
            self._adopt_first_member()
            self._hash = None
            return

        if not has_outer_delimiters(value):
            raise MalformedInput(self, text=text, expected=type_string)
        tokens = split_top_level(strip_outer_delimiters(value), ',')

        self.members = tuple(
            commands.create_member(self, token.strip(), have_measure)
            for token in tokens
        )
        self._adopt_first_member()
        self._hash = None
        log.debug(
            "Parsed %s with %d members.",
            type_string,
            len(self.members),
        )

    def num_geoms(self) -> int:
        return len(self.members)

    def get_sub_geometry(self, index: int) -> Geometry:
        """Return member at `index`, negative indexes are not allowed."""
        if not 0 <= index < len(self.members):
            raise MemberIndexOutOfRange(self, index=index, size=len(self.members))
        return self.members[index]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.members)

    def is_empty(self) -> bool:
        return not self.members

    def num_points(self) -> int:
        return sum(member.num_points() for member in self.members)

    def get_point(self, n: int) -> Point:
        if n < 0:
            raise IndexOutOfRange(self, index=n, size=self.num_points())
        if not self.members:
            raise EmptyGeometry(self, index=n, size=0)
        index = n
        for member in self.members:
            count = member.num_points()
            if index < count:
                return member.get_point(index)
            index -= count
        raise IndexOutOfRange(self, index=n, size=self.num_points())

    def get_first_point(self) -> Point:
        if not self.members:
            raise EmptyGeometry(self, index=0, size=0)
        return self.members[0].get_first_point()

    def get_last_point(self) -> Point:
        if not self.members:
            raise EmptyGeometry(self, index=-1, size=0)
        return self.members[-1].get_last_point()

    def iter_points(self) -> Iterator[Point]:
        for member in self.members:
            yield from member.iter_points()

    def check_consistency(self) -> bool:
        if not self.members:
            # Empty geometry has no dimension, so the base 2D or 3D check
            # does not apply to it.
            return self.dimension == 0
        if not super().check_consistency():
            return False
        return all(
            member.check_consistency() and
            member.dimension == self.dimension and
            member.has_measure == self.has_measure and
            member.srid == self.srid
            for member in self.members
        )

    def set_srid(self, srid: int) -> None:
        super().set_srid(srid)
        for member in self.members:
            member.set_srid(srid)

    def medium_wkt(self) -> str:
        if not self.members:
            return ' EMPTY'
        return '(' + self.inner_wkt() + ')'

    def inner_wkt(self) -> str:
        return ','.join(member.medium_wkt() for member in self.members)

    def _equals(self, other: ComposedGeom) -> bool:
        if len(self.members) != len(other.members):
            return False
        return all(a == b for a, b in zip(self.members, other.members))

    def _hash_key(self) -> Tuple[Geometry, ...]:
        return self.members


class PointComposedGeom(ComposedGeom):
    """Composed geometry made of points only.

    Points are written as bare coordinates, `(1 2,3 4)`, not as
    `((1 2),(3 4))`.
    """

    member_type = Point

    @property
    def points(self) -> Tuple[Point, ...]:
        return self.members

    def inner_wkt(self) -> str:
        return ','.join(point.inner_wkt() for point in self.members)
