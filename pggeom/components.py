from __future__ import annotations

import enum
import logging
from typing import Any
from typing import Dict
from typing import Iterator
from typing import Optional
from typing import Tuple
from typing import TYPE_CHECKING

from pggeom import commands
from pggeom.exceptions import InvalidSRID
from pggeom.exceptions import MalformedInput

if TYPE_CHECKING:
    from pggeom.geometry.point import Point


log = logging.getLogger(__name__)

# SRID of geometries without a spatial reference.
UNKNOWN_SRID = 0


class GeometryType(enum.IntEnum):
    # Values match OGC WKB geometry type codes.
    point = 1
    linestring = 2
    polygon = 3
    multipoint = 4
    multilinestring = 5
    multipolygon = 6
    geometrycollection = 7

    @property
    def type_string(self) -> str:
        return self.name.upper()


def parse_srid(srid: int) -> int:
    # PostGIS uses -1 and 0 for unknown SRID, both end up as UNKNOWN_SRID.
    if srid < 0:
        return UNKNOWN_SRID
    return srid


def split_srid(value: str) -> Tuple[int, str]:
    """Split `SRID=<n>;` prefix from an extended WKT string.

        >>> split_srid('SRID=4326;POINT(1 2)')
        (4326, 'POINT(1 2)')

    """
    if not value.startswith('SRID='):
        return UNKNOWN_SRID, value
    srid, sep, rest = value[len('SRID='):].partition(';')
    if not sep:
        raise MalformedInput(text=value, expected='SRID=<srid>;<geometry>')
    try:
        srid = int(srid)
    except ValueError:
        raise InvalidSRID(text=value, srid=srid)
    log.debug("Found SRID %d in extended WKT.", srid)
    return parse_srid(srid), rest.strip()


def split_dimension_tag(value: str) -> Tuple[str, bool]:
    """Split dimension tag following a WKT type name.

    Returns remaining text and a flag telling if measure tag was found.
    PostGIS writes measure right after the type name (`POINTM(1 2 3)`), while
    ISO WKT separates tags with a space (`POINT ZM (1 2 3 4)`), both are
    accepted.
    """
    if value.startswith('M'):
        return value[1:].strip(), True
    value = value.strip()
    tag, sep, rest = value.partition(' ')
    if '(' in tag:
        tag, sep, rest = value.partition('(')
        rest = sep + rest
    tag = tag.strip()
    if tag in ('Z', 'M', 'ZM'):
        return rest.strip(), 'M' in tag
    return value, False


class Geometry:
    """Base class of all geometries.

    Geometries are compared by value: kind, dimension, measure flag and
    coordinates. SRID is not part of equality, so the same shape tagged with
    different spatial references compares equal.

    Hash is computed once and cached. Point coordinates are read-only and
    members of composed geometries are only replaced by `parse_wkt`, which
    resets the cache, as does `set_srid`.
    """

    kind: GeometryType = None
    # Number of spatial axes, measure not included. 0 for empty geometries.
    dimension: int = 0
    has_measure: bool = False
    srid: int = UNKNOWN_SRID

    _hash: Optional[int] = None

    def __init__(self, *, srid: int = UNKNOWN_SRID):
        self.srid = parse_srid(srid)
        self._hash = None

    @classmethod
    def from_wkt(cls, value: str, have_measure: bool = False) -> Geometry:
        """Parse WKT, optionally prefixed with `SRID=<n>;`."""
        srid, value = split_srid(value.strip())
        geom = cls._from_wkt(value, have_measure)
        if srid != UNKNOWN_SRID:
            geom.set_srid(srid)
        return geom

    @classmethod
    def _from_wkt(cls, value: str, have_measure: bool) -> Geometry:
        raise NotImplementedError

    @property
    def type_string(self) -> str:
        return self.kind.type_string

    def set_srid(self, srid: int) -> None:
        self.srid = parse_srid(srid)
        self._hash = None

    def check_consistency(self) -> bool:
        return self.dimension in (2, 3)

    def is_empty(self) -> bool:
        raise NotImplementedError

    def num_points(self) -> int:
        raise NotImplementedError

    def get_point(self, n: int) -> Point:
        raise NotImplementedError

    def get_first_point(self) -> Point:
        raise NotImplementedError

    def get_last_point(self) -> Point:
        raise NotImplementedError

    def iter_points(self) -> Iterator[Point]:
        """Iterate over all points of the geometry, depth first."""
        raise NotImplementedError

    def wkt(self) -> str:
        # 3D geometries with measure are recognized by number of coordinates.
        measure = 'M' if self.has_measure and self.dimension < 3 else ''
        return self.type_string + measure + self.medium_wkt()

    def ewkt(self) -> str:
        if self.srid == UNKNOWN_SRID:
            return self.wkt()
        return f'SRID={self.srid};{self.wkt()}'

    def medium_wkt(self) -> str:
        raise NotImplementedError

    def inner_wkt(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.ewkt()

    def __repr__(self):
        return f'<{type(self).__name__} {self.ewkt()!r}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return (
            type(self) is type(other) and
            self.kind == other.kind and
            self.dimension == other.dimension and
            self.has_measure == other.has_measure and
            self._equals(other)
        )

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((
                type(self).__name__,
                self.kind,
                self.dimension,
                self.has_measure,
                self._hash_key(),
            ))
        return self._hash

    def _equals(self, other: Geometry) -> bool:
        raise NotImplementedError

    def _hash_key(self) -> Any:
        raise NotImplementedError


@commands.get_error_context.register(object)
def get_error_context(this: object) -> Dict[str, str]:
    return {}


@commands.get_error_context.register(Geometry)
def get_error_context(this: Geometry) -> Dict[str, str]:
    return {
        'geometry': 'this.type_string',
        'srid': 'this.srid',
    }
