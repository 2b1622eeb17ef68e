from __future__ import annotations

from pggeom.dispatcher import command


@command()
def create_member():
    """Create a single member geometry of a composed geometry.

    Called for each top level token of a parsed WKT body, with the parent
    geometry being populated, the token text and the measure flag:

        create_member(geom, token, have_measure) -> Geometry

    Each concrete composed geometry type registers its own implementation.
    """


@command()
def get_error_context():
    """Return error context schema for a component.

    Returned dict maps context names to dotted attribute paths resolved
    against the component passed as the first positional error argument.
    """
