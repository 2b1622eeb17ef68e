from typer import Exit
from typer import echo


def cli_error(
    message: str
):
    echo(message, err=True)
    raise Exit(code=1)
