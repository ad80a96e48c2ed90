import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from bookindex import index as book
from bookindex.index_cache import FORMATS, dump_index, load_index
from bookindex.xlsx import write_workbook

try:
    __version__ = version("bookindex")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

MARKDOWN_SUFFIXES = (".md", ".markdown")


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="BOOKINDEX_LOG_FILE",
)
@click.version_option(__version__, prog_name="bookindex")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load(index_file: str) -> book.BookIndex:
    """Load an index file or a Markdown index, reporting bad content."""

    path = Path(index_file)
    try:
        if path.suffix.lower() in MARKDOWN_SUFFIXES:
            return book.parse_markdown(path.read_text(encoding="utf-8"))
        return load_index(path)
    except ValueError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc


def _write(content: str, output_path: Optional[str]) -> None:
    """Write ``content`` to ``output_path`` or echo it."""

    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
    else:
        click.echo(content, nl=False)


@cli.command()
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write the Markdown to FILE instead of the console.",
)
@click.option(
    "--no-remote", is_flag=True, help="Leave out the hosted copy links."
)
def render(
    index_file: str, output_path: Optional[str] = None, no_remote: bool = False
) -> None:
    """Render an index file into a Markdown table of contents."""

    index = _load(index_file)
    _write(book.render_markdown(index, remote=not no_remote), output_path)


@cli.command()
@click.argument("readme", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="yaml",
    help="Output format.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write the index file to FILE instead of the console.",
)
def parse(
    readme: str,
    output_format: str = "yaml",
    output_path: Optional[str] = None,
) -> None:
    """Read a Markdown index into an index file."""

    text = Path(readme).read_text(encoding="utf-8")
    try:
        index = book.parse_markdown(text)
    except ValueError as exc:
        raise click.ClickException(f"{readme}: {exc}") from exc
    _write(dump_index(index, output_format), output_path)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def validate(path: str) -> None:
    """Check numbering, titles and TOC structure of PATH.

    PATH is either an index file or a Markdown document. The command exits
    with status 1 when issues are found.
    """

    file_path = Path(path)
    if file_path.suffix.lower() in MARKDOWN_SUFFIXES:
        issues = book.validate_markdown(file_path.read_text(encoding="utf-8"))
    else:
        issues = book.validate_index(_load(path))

    for issue in issues:
        click.echo(str(issue))

    if issues:
        click.echo(f"{len(issues)} issue(s) found", err=True)
        sys.exit(1)
    click.echo("OK")


@cli.command("check-links")
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--root",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Repository root for relative links (defaults to the current dir).",
)
@click.option(
    "--timeout",
    type=float,
    default=10,
    show_default=True,
    help="Timeout in seconds for each HTTP request.",
)
@click.option("--local-only", is_flag=True, help="Skip remote URLs.")
def check_links(
    index_file: str,
    root: Optional[str] = None,
    timeout: float = 10,
    local_only: bool = False,
) -> None:
    """Check that every chapter link resolves to existing content."""

    index = _load(index_file)
    root_path = Path(root) if root else Path(".")

    results = book.check_links(
        index,
        root=root_path,
        timeout=timeout,
        include_remote=not local_only,
    )

    broken = 0
    for result in results:
        status = result.status if result.status is not None else "-"
        mark = "ok" if result.ok else "BROKEN"
        click.echo(f"{mark:6} {result.number:>3} {status:>4} {result.target}")
        if not result.ok:
            broken += 1

    if broken:
        click.echo(f"{broken} broken link(s)", err=True)
        sys.exit(1)


@cli.command()
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx"]),
    default="json",
    help="Output format.",
)
def convert(
    index_file: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Convert an index file or Markdown index to another format.

    Args:
        index_file: Index file or Markdown document to convert.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is derived from the
            input file name.
        output_format: Format of the converted data.
    """

    index = _load(index_file)

    # When the user passes a directory, name the file after the input and
    # the chosen format.
    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            stem = Path(index_file).stem
            final_path = final_path / f"{stem}.{output_format}"

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")
        write_workbook(index, final_path)
        return

    content = dump_index(index, output_format)
    _write(content, str(final_path) if final_path else None)


@cli.command()
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("number", type=int)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, dir_okay=True),
    envvar="BOOKINDEX_CACHE",
    default=None,
    help="Directory for downloaded chapters.",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Repository root holding local chapter files.",
)
def fetch(
    index_file: str,
    number: int,
    cache_dir: Optional[str] = None,
    root: Optional[str] = None,
) -> None:
    """Print the full text of chapter NUMBER."""

    index = _load(index_file)
    try:
        chapter = index.chapter(number)
    except KeyError:
        raise click.ClickException(
            f"no chapter {number} in {index_file}"
        ) from None

    try:
        text = book.fetch_chapter(
            chapter,
            cache_dir=Path(cache_dir) if cache_dir else None,
            root=Path(root) if root else None,
        )
    except (ValueError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(text)
