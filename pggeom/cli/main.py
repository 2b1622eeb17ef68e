from __future__ import annotations

import logging
import pathlib
from typing import List
from typing import Optional

from typer import Context as TyperContext
from typer import Option
from typer import Typer
from typer import echo

import pggeom
from pggeom.cli import config
from pggeom.cli import wkt
from pggeom.cli.helpers.typer import add
from pggeom.core.config import CliArgs
from pggeom.core.config import read_config

log = logging.getLogger(__name__)

app = Typer()

add(app, 'config', config.config, short_help="Show current configuration values")
add(app, 'parse', wkt.parse, short_help="Parse and normalize geometries")
add(app, 'check', wkt.check, short_help="Check geometry consistency")
add(app, 'points', wkt.points, short_help="Print points of a geometry")


@app.callback(invoke_without_command=True)
def main(
    ctx: TyperContext,
    option: Optional[List[str]] = Option(None, '-o', '--option', help=(
        "Set configuration option, example: `-o option.name=value`."
    )),
    env_file: Optional[pathlib.Path] = Option(None, '--env-file', help=(
        "Load configuration from a given .env file."
    )),
    version: bool = Option(False, help="Show version number."),
    log_file: Optional[pathlib.Path] = Option(None, '--log-file', help=(
        "Write log messages to a specified file, if not given, writes logs to "
        "STDERR."
    )),
    log_level: Optional[str] = Option('warning', '--log-level', help=(
        "Log level. Possible levels: fatal, error, warning, info, debug. "
        "Default: warning."
    )),
):
    logging.basicConfig(
        level=logging.getLevelName(log_level.upper()),
        format='%(asctime)s %(levelname)s: %(message)s',
        filename=log_file,
    )

    log.debug("log file set to: %s", log_file or 'STDERR')
    log.debug("log level set to: %s", log_level)

    if ctx.obj is None:
        ctx.obj = read_config(args=option, envfile=env_file)
    elif option:
        ctx.obj = ctx.obj.fork([CliArgs('cliargs', option)])
    if version:
        echo(pggeom.__version__)
