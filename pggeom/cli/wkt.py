from typing import List
from typing import Optional

from typer import Argument
from typer import Context as TyperContext
from typer import Exit
from typer import Option
from typer import echo

from pggeom.cli.helpers.errors import cli_error
from pggeom.cli.helpers.geometry import load_geometry
from pggeom.cli.helpers.geometry import read_values
from pggeom.exceptions import UserError


def parse(
    ctx: TyperContext,
    values: List[str] = Argument(..., help=(
        "WKT or extended WKT values, `-` reads values from STDIN, one per "
        "line"
    )),
    srid: Optional[int] = Option(None, '--srid', help=(
        "Set SRID of all parsed geometries"
    )),
):
    """Parse geometries and print them in normalized form"""
    rc = ctx.obj
    try:
        extended = rc.get('wkt', 'extended')
    except UserError as e:
        cli_error(e.message)
    for value in read_values(values):
        try:
            geom = load_geometry(rc, value, srid=srid)
        except UserError as e:
            cli_error(e.message)
        echo(geom.ewkt() if extended else geom.wkt())


def check(
    ctx: TyperContext,
    values: List[str] = Argument(..., help=(
        "WKT or extended WKT values, `-` reads values from STDIN, one per "
        "line"
    )),
):
    """Check if geometries are well formed and consistent"""
    rc = ctx.obj
    errors = 0
    for value in read_values(values):
        try:
            load_geometry(rc, value, check=True)
        except UserError as e:
            errors += 1
            echo(f"{value}: {e.message}", err=True)
        else:
            echo("OK")
    if errors:
        raise Exit(code=1)


def points(
    ctx: TyperContext,
    value: str = Argument(..., help="WKT or extended WKT value"),
    index: Optional[int] = Option(None, '--index', '-i', help=(
        "Print only a point with given index, negative index is an error"
    )),
):
    """Print points of a geometry"""
    rc = ctx.obj
    try:
        geom = load_geometry(rc, value)
        if index is None:
            found = list(geom.iter_points())
        else:
            found = [geom.get_point(index)]
    except UserError as e:
        cli_error(e.message)
    for point in found:
        echo(point.wkt())
