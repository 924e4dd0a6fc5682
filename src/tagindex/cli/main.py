"""Main Typer application for tagindex."""

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tagindex.exceptions import TagIndexError
from tagindex.generators.tags import TagPage, collect_tags
from tagindex.logging_setup import configure_logging
from tagindex.site.site import Site

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(
    name="tagindex",
    help="Inspect the tag index pages a blog build generates",
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _build_site(site_root: Path) -> Site:
    try:
        site = Site.from_source(site_root)
        site.process()
    except TagIndexError as e:
        console.print(Text(str(e), style="red"))
        raise typer.Exit(1) from e
    return site


@app.command(name="pages")
def list_pages(
    site_root: Annotated[Path, typer.Argument(help="Site source directory containing _config.yml and _posts/")],
    keys: Annotated[
        list[str] | None,
        typer.Option("--key", "-k", help="Also show the resolved value of this page attribute (repeatable)"),
    ] = None,
    unique: Annotated[
        bool,
        typer.Option("--unique", help="Show one row per output path with the number of pages bound to it"),
    ] = False,
) -> None:
    """Show the tag pages a build would generate.

    Examples:
        tagindex pages my-blog/
        tagindex pages my-blog/ --key title --key description
        tagindex pages my-blog/ --unique
    """
    site = _build_site(site_root)
    keys = keys or []
    tag_pages = [page for page in site.pages if isinstance(page, TagPage)]

    table = Table(title="Tag Pages")
    table.add_column("Output path", style="cyan")
    table.add_column("Tag")
    table.add_column("Layout")
    for key in keys:
        table.add_column(key)
    if unique:
        table.add_column("Pages", justify="right")

    rows: list[tuple[TagPage, int]]
    if unique:
        counts = Counter(page.relative_path for page in tag_pages)
        first: dict[str, TagPage] = {}
        for page in tag_pages:
            first.setdefault(page.relative_path, page)
        rows = [(page, counts[path]) for path, page in first.items()]
    else:
        rows = [(page, 1) for page in tag_pages]

    for page, count in rows:
        values = [_display(page.data.get(key)) for key in keys]
        cells = [page.relative_path, page.tag, _display(page.layout), *values]
        if unique:
            cells.append(str(count))
        table.add_row(*(Text(cell) for cell in cells))

    console.print(table)
    console.print(f"{len(tag_pages)} tag pages from {len(site.posts)} posts", highlight=False)


@app.command(name="tags")
def list_tags(
    site_root: Annotated[Path, typer.Argument(help="Site source directory containing _config.yml and _posts/")],
) -> None:
    """Show every tag used by the site's posts, most frequent first."""
    site = _build_site(site_root)
    counts = Counter(collect_tags(site.posts))

    table = Table(title="Tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Occurrences", justify="right")
    for tag, count in counts.most_common():
        table.add_row(Text(tag), str(count))

    console.print(table)
    console.print(f"{sum(counts.values())} occurrences of {len(counts)} tags", highlight=False)


def _display(value: object) -> str:
    return "" if value is None else str(value)
