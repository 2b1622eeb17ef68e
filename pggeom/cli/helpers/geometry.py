import logging
import sys
from typing import Iterable
from typing import Iterator
from typing import Optional

from pggeom.components import Geometry
from pggeom.components import UNKNOWN_SRID
from pggeom.core.config import RawConfig
from pggeom.exceptions import InconsistentGeometry
from pggeom.geometry import geometry_from_wkt

log = logging.getLogger(__name__)


def read_values(values: Iterable[str]) -> Iterator[str]:
    """Yield given values, `-` is replaced with lines read from STDIN."""
    for value in values:
        if value == '-':
            for line in sys.stdin:
                line = line.strip()
                if line:
                    yield line
        else:
            yield value


def load_geometry(
    rc: RawConfig,
    value: str,
    *,
    srid: Optional[int] = None,
    check: Optional[bool] = None,
) -> Geometry:
    geom = geometry_from_wkt(value)

    if srid is not None:
        geom.set_srid(srid)
    elif geom.srid == UNKNOWN_SRID:
        default = rc.get('srid')
        if default:
            log.debug("Using default SRID %d.", default)
            geom.set_srid(default)

    if check is None:
        check = rc.get('check')
    if check and not geom.check_consistency():
        raise InconsistentGeometry(geom)

    return geom
