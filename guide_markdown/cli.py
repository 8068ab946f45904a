"""
Renders a guide written in markdown into a numbered HTML page with a chapters index.
The page is printed to stdout unless an output file is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .document import render_document
from .exceptions import DocumentError, ReadFileError
from .filesystem import (
    check_file_size,
    get_max_file_size,
    read_document,
    resolve_guide_path,
    write_output,
)
from .layout import render_page

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the page to this file instead of stdout",
)
@click.option(
    "--layout",
    "layout_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Layout template using $title, $header, $index and $body",
)
@click.option("--site-title", help="Site name appended to the page title")
@click.option("--index-heading", help="Heading of the chapters index")
@click.option("-v", "--verbose", is_flag=True, help="Log rendering details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    layout_path: str | None = None,
    site_title: str | None = None,
    index_heading: str | None = None,
    verbose: bool = False,
):
    """
    Entry point for rendering a guide to HTML.

    Args:
        filepath: Path to the guide to render.
        output: Destination file for the page; stdout when omitted.
        layout_path: Optional layout template replacing the built-in one.
        site_title: Override for the site name in the page title.
        index_heading: Override for the chapters index heading.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If the guide path or configuration is invalid.
        click.ClickException: If the guide cannot be read, exceeds limits, or
            the page cannot be written.

    Examples:
        guide-markdown source/getting_started.md -o output/getting_started.html
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    base_dir = Path.cwd().resolve()
    try:
        filepath = resolve_guide_path(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    try:
        config = build_config(
            filepath.parent,
            site_title=site_title,
            index_heading=index_heading,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        check_file_size(filepath, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        text = read_document(filepath)
        layout = read_document(Path(layout_path)) if layout_path else None
    except ReadFileError as error:
        raise click.ClickException(str(error)) from error

    try:
        page = render_document(text, config)
    except DocumentError as error:
        raise click.ClickException(f"{filepath}: {error}") from error

    try:
        html = render_page(page, layout)
    except (KeyError, ValueError) as error:
        raise click.ClickException(f"Invalid layout {layout_path}: {error}") from error

    if output is None:
        click.echo(html, nl=False)
        return

    try:
        write_output(Path(output), html)
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
