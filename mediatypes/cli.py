"""mediatypes command line.

Allows entrypoint via ``python -m mediatypes`` as well.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from mediatypes import __version__
from mediatypes.models import MediaType
from mediatypes.services import get_extensions, get_settings
from mediatypes.utils.console import configure_logging
from mediatypes.utils.validation import InvalidMediaTypeError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Parse, probe and look up Internet media types.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _describe(media_type: MediaType) -> None:
    """Print the components and classification of a media type."""
    parameters = "; ".join(str(p) for p in media_type.parameters) or "-"
    rows = [
        ("media type", str(media_type)),
        ("type", media_type.type),
        ("subtype", media_type.subtype),
        ("tree", media_type.tree or "-"),
        ("suffix", media_type.suffix or "-"),
        ("parameters", parameters),
        ("experimental", _yes_no(media_type.is_experimental())),
        ("vendor", _yes_no(media_type.is_vendor())),
        ("unregistered", _yes_no(media_type.is_unregistered())),
    ]
    for label, value in rows:
        typer.echo(f"{label + ':':<14}{value}")


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log at DEBUG level."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Parse, probe and look up Internet media types."""
    settings = get_settings()
    configure_logging(
        "DEBUG" if verbose else settings.log_level,
        use_colors=settings.log_colors,
    )


@app.command("parse")
def parse_command(
    mime: Annotated[str, typer.Argument(help="Media type, e.g. 'text/plain; charset=utf-8'.")],
) -> None:
    """Parse a media type string and show its components."""
    try:
        media_type = MediaType.from_mime(mime)
    except ValueError as e:
        raise _fail(f"Invalid media type: {e}") from e
    _describe(media_type)


@app.command("file")
def file_command(
    path: Annotated[Path, typer.Argument(help="File whose content is probed.")],
) -> None:
    """Determine the media type of a file from its content."""
    settings = get_settings()
    try:
        media_type = MediaType.from_file(path, magic_file=settings.magic_file)
    except InvalidMediaTypeError as e:
        raise _fail(f"Invalid media type: {e}") from e

    if media_type is None:
        raise _fail(f"No media type could be determined for {path}")
    _describe(media_type)


@app.command("lookup")
def lookup_command(
    path: Annotated[str, typer.Argument(help="File name or path, only the extension is used.")],
) -> None:
    """Look up the media type of a file name by its extension."""
    try:
        media_type = get_extensions().get_media_type(path)
    except (FileNotFoundError, ValueError) as e:
        raise _fail(str(e)) from e
    _describe(media_type)


@app.command("extensions")
def extensions_command(
    mime: Annotated[str, typer.Argument(help="Media type, e.g. 'image/jpeg'.")],
) -> None:
    """List the file extensions mapped to a media type."""
    try:
        extensions = get_extensions().matches_extension(mime)
    except FileNotFoundError as e:
        raise _fail(str(e)) from e

    if not extensions:
        raise _fail(f"No extension is mapped to {mime}")
    logger.debug("%d extension(s) mapped to %s", len(extensions), mime)
    for extension in extensions:
        typer.echo(extension)
