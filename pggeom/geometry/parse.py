import logging
from typing import Dict
from typing import Type

from pggeom.components import Geometry
from pggeom.components import UNKNOWN_SRID
from pggeom.components import split_srid
from pggeom.exceptions import UnknownGeometryType
from pggeom.geometry.collection import GeometryCollection
from pggeom.geometry.linestring import LineString
from pggeom.geometry.linestring import MultiLineString
from pggeom.geometry.multipoint import MultiPoint
from pggeom.geometry.point import Point
from pggeom.geometry.polygon import MultiPolygon
from pggeom.geometry.polygon import Polygon

log = logging.getLogger(__name__)

GEOMETRY_TYPES: Dict[str, Type[Geometry]] = {
    cls.kind.type_string: cls
    for cls in (
        Point,
        LineString,
        Polygon,
        MultiPoint,
        MultiLineString,
        MultiPolygon,
        GeometryCollection,
    )
}


def get_geometry_type(value: str) -> Type[Geometry]:
    """Find geometry class by the type name WKT starts with."""
    # Longest names first, so that a type name, which is a prefix of another
    # type name, does not shadow it.
    for type_string in sorted(GEOMETRY_TYPES, key=len, reverse=True):
        if value.startswith(type_string):
            return GEOMETRY_TYPES[type_string]
    raise UnknownGeometryType(text=value)


def geometry_from_wkt(value: str, have_measure: bool = False) -> Geometry:
    """Parse extended WKT of any geometry type.

        >>> geometry_from_wkt('SRID=4326;MULTIPOINT(1 2,3 4)')
        <MultiPoint 'SRID=4326;MULTIPOINT(1 2,3 4)'>

    """
    srid, value = split_srid(value.strip())
    cls = get_geometry_type(value)
    log.debug("Parsing %s geometry.", cls.kind.type_string)
    geom = cls._from_wkt(value, have_measure)
    if srid != UNKNOWN_SRID:
        geom.set_srid(srid)
    return geom
