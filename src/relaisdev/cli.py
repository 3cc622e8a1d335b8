import sys
import typer
import pydantic
from typing import Optional
from structlog import get_logger

from .common import Level, level_to_logging
from .config import load_config
from .text import fill as fill_text, wrap as wrap_text

app = typer.Typer()
log = get_logger()


def _read_text(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    try:
        with open(path) as f:
            return f.read()
    except OSError as e:
        typer.secho(f"Can't read {path}: {e.strerror}", fg=typer.colors.RED)
        raise typer.Exit(1)


def _width(ctx: typer.Context, width: Optional[int]) -> int:
    if width is None:
        return ctx.obj.wrap_width
    if width < 1:
        typer.secho("Width must be at least 1", fg=typer.colors.RED)
        raise typer.Exit(1)
    return width


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, envvar="relaisdev_log_level"),
    log_format: str = typer.Option(None, envvar="relaisdev_log_format"),
) -> None:
    overrides = {}
    if log_level:
        overrides["log_level"] = log_level
    if log_format:
        overrides["log_format"] = log_format
    try:
        ctx.obj = load_config(**overrides)
    except pydantic.ValidationError as e:
        for error in e.errors():
            typer.secho(
                f"Bad config {'.'.join(map(str, error['loc']))}: {error['msg']}",
                fg=typer.colors.RED,
            )
        raise typer.Exit(1)


@app.command()
def fill(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None),
    width: Optional[int] = typer.Option(None),
) -> None:
    width = _width(ctx, width)
    text = _read_text(path)
    log.debug("fill", path=path, width=width, chars=len(text))
    typer.echo(fill_text(text, width), nl=False)


@app.command()
def wrap(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None),
    width: Optional[int] = typer.Option(None),
    number: bool = typer.Option(False, help="Prefix each line with its number."),
) -> None:
    width = _width(ctx, width)
    text = _read_text(path)
    lines = wrap_text(text, width)
    log.debug("wrap", path=path, width=width, lines=len(lines))
    for n, line in enumerate(lines, 1):
        typer.echo(f"{n:>4} {line}" if number else line)


@app.command()
def levels() -> None:
    for lvl in Level:
        typer.echo(f"{lvl.value} {lvl.name:<5} logging={level_to_logging(lvl)}")


if __name__ == "__main__":
    app()
