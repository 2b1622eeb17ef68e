"""Conversion between pggeom geometries and Shapely geometries.

Geometries are passed through WKT, so SRID, which Shapely does not keep, has
to be given explicitly when converting back.
"""

import shapely.wkt
from shapely.geometry.base import BaseGeometry

from pggeom.components import Geometry
from pggeom.components import UNKNOWN_SRID
from pggeom.geometry import geometry_from_wkt


def to_shape(geom: Geometry) -> BaseGeometry:
    return shapely.wkt.loads(geom.wkt())


def from_shape(shape: BaseGeometry, srid: int = UNKNOWN_SRID) -> Geometry:
    geom = geometry_from_wkt(shape.wkt)
    if srid != UNKNOWN_SRID:
        geom.set_srid(srid)
    return geom
