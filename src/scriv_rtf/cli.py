"""Command-line interface for Scriv RTF."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from scriv_rtf import __version__
from scriv_rtf.config import get_settings
from scriv_rtf.formats import ConversionError, TEXT_EXTENSIONS, get_handler
from scriv_rtf.formats.rtf_handler import RTFHandler
from scriv_rtf.formatting.parser import MarkdownParser

app = typer.Typer(
    name="scriv-rtf",
    help="Convert Scrivener RTF documents to and from **bold** / *italic* text.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Scriv RTF v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send library log records to stderr through rich."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def generate_output_path(
    input_path: Path, suffix: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate output path by swapping the file extension."""
    output_name = f"{input_path.stem}{suffix}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def convert_file(input_path: Path, output_path: Path, verbose: bool) -> bool:
    """Convert a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    try:
        reader = get_handler(input_path.suffix)()
        writer = get_handler(output_path.suffix)()
    except ValueError as e:
        console.print(f"[yellow]Skipping:[/yellow] {input_path.name} ({e})")
        return False

    if verbose:
        console.print(f"[blue]Converting:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        text = reader.read(input_path)
        writer.write(text, output_path)
    except ConversionError as e:
        console.print(f"[red]Error converting {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    console.print(f"[green]Success:[/green] {output_path}")
    return True


def convert_folder(
    folder_path: Path,
    extensions: tuple[str, ...],
    suffix: str,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Convert all matching files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in extensions:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))
    files.sort()

    if not files:
        console.print(
            f"[yellow]No matching files found in {folder_path}[/yellow]\n"
            f"Looked for: {', '.join(extensions)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to convert[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Converting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Converting {file_path.name}...")
            output_path = generate_output_path(file_path, suffix)
            if convert_file(file_path, output_path, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


def run_conversion(
    path: Path,
    output: Optional[Path],
    extensions: tuple[str, ...],
    suffix: str,
    verbose: bool,
) -> None:
    """Convert a file or folder and exit with the matching status."""
    if path.is_file():
        output_path = output or generate_output_path(path, suffix)
        success = convert_file(path, output_path, verbose)
        raise typer.Exit(0 if success else 1)

    if output is not None:
        console.print(
            "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
            "Files will be saved alongside originals."
        )

    success, fail = convert_folder(path, extensions, suffix, verbose)
    console.print(f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed")
    raise typer.Exit(0 if fail == 0 else 1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output and debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Convert between Scrivener RTF and annotated text.

    Examples:

        scriv-rtf to-text Project.scriv/Files/Data

        scriv-rtf to-text content.rtf -o chapter.txt

        scriv-rtf to-rtf chapter.txt -o content.rtf

        scriv-rtf stats content.rtf
    """
    ctx.obj = {"verbose": verbose}
    setup_logging(verbose)


@app.command("to-text")
def to_text(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="RTF file or folder of RTF files",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
) -> None:
    """Decode RTF into annotated text files."""
    verbose = ctx.obj["verbose"]
    suffix = get_settings().text_suffix
    run_conversion(path, output, RTFHandler().supported_extensions, suffix, verbose)


@app.command("to-rtf")
def to_rtf(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="Annotated text file or folder of .txt/.md files",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
) -> None:
    """Encode annotated text files as RTF."""
    verbose = ctx.obj["verbose"]
    run_conversion(path, output, TEXT_EXTENSIONS, ".rtf", verbose)


@app.command()
def stats(
    path: Path = typer.Argument(
        ...,
        help="RTF or annotated text file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Show paragraph, word and character counts for a document."""
    try:
        text = get_handler(path.suffix)().read(path)
    except (ValueError, ConversionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    doc = MarkdownParser().parse(text)
    runs = [run for block in doc.merged().blocks for run in block.runs]
    bold_runs = sum(1 for run in runs if run.bold)
    italic_runs = sum(1 for run in runs if run.italic)

    table = Table(title=path.name)
    table.add_column("Measure")
    table.add_column("Count", justify="right")
    table.add_row("Paragraphs", str(len(doc.blocks)))
    table.add_row("Words", str(doc.word_count))
    table.add_row("Characters", str(doc.character_count))
    table.add_row("Bold runs", str(bold_runs))
    table.add_row("Italic runs", str(italic_runs))
    console.print(table)


if __name__ == "__main__":
    app()
