import sys
from typing import List
from typing import Optional

from typer import Argument
from typer import Context as TyperContext

from pggeom.core.config import KeyFormat


def config(
    ctx: TyperContext,
    name: Optional[List[str]] = Argument(None),
    fmt: KeyFormat = KeyFormat.cfg,
):
    """Show current configuration values"""
    rc = ctx.obj
    rc.dump(*(name or []), fmt=fmt, file=sys.stdout)
