"""CLI entry point for CV Site."""

from enum import Enum
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> cv_site/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markdown import Markdown  # noqa: E402
from rich.panel import Panel  # noqa: E402

from cv_site.config import get_settings, setup_logging  # noqa: E402
from cv_site.models.generator import GenerationProgress, get_profile_option  # noqa: E402
from cv_site.output.markdown import format_cv, save_markdown  # noqa: E402
from cv_site.routing import extract_locale, reroute  # noqa: E402
from cv_site.stores.cv_data import CVDataStore, get_cv_store  # noqa: E402
from cv_site.stores.generator import GeneratorStore  # noqa: E402

app = typer.Typer(
    name="cv-site",
    help="CV Site - personal CV and AI CV generator",
    add_completion=False,
)
console = Console()


class ExportFormat(str, Enum):
    MARKDOWN = "md"
    PDF = "pdf"


class PDFStyle(str, Enum):
    PLAIN = "plain"
    MODERN = "modern"


def load_store(content: Path | None) -> CVDataStore:
    """Load the CV store, reporting content errors and exiting."""
    try:
        if content is not None:
            return CVDataStore.from_file(content)
        return get_cv_store()
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid CV content\n{e}")
        raise typer.Exit(1) from e


@app.callback()
def main(
    ctx: typer.Context,
    content: Annotated[
        Path | None,
        typer.Option("--content", "-c", help="JSON file with CV content"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """CV Site command line."""
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = {"content": content}


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the CV to the terminal."""
    store = load_store(ctx.obj["content"])
    console.print(
        Panel(Markdown(format_cv(store.data)), title=store.site_title, border_style="blue")
    )


@app.command()
def export(
    ctx: typer.Context,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file path")
    ] = None,
    fmt: Annotated[
        ExportFormat, typer.Option("--format", "-f", help="Output format")
    ] = ExportFormat.MARKDOWN,
    style: Annotated[PDFStyle, typer.Option("--style", help="PDF style")] = PDFStyle.PLAIN,
) -> None:
    """Export the CV as Markdown or PDF."""
    store = load_store(ctx.obj["content"])
    output = output or Path(f"cv.{fmt.value}")

    if fmt == ExportFormat.PDF:
        from cv_site.output.pdf import generate_cv_pdf

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(generate_cv_pdf(store.data, style.value))
    else:
        save_markdown(format_cv(store.data), output)

    console.print(f"[green]CV saved to:[/green] {output}")


def _parse_source(raw: str) -> tuple[str, str]:
    source_type, sep, value = raw.partition("=")
    if not sep or not source_type.strip() or not value.strip():
        raise typer.BadParameter(f"Expected TYPE=VALUE, got '{raw}'", param_hint="--source")
    source_type = source_type.strip().lower()
    if get_profile_option(source_type) is None:
        raise typer.BadParameter(f"Unknown source type '{source_type}'", param_hint="--source")
    return source_type, value.strip()


@app.command()
def simulate(
    source: Annotated[
        list[str] | None,
        typer.Option("--source", "-s", help="Profile source as TYPE=VALUE (repeatable)"),
    ] = None,
    summary: Annotated[
        str | None, typer.Option("--summary", help="Manual professional summary")
    ] = None,
    job_text: Annotated[
        str | None, typer.Option("--job-text", help="Target job description")
    ] = None,
    job_url: Annotated[str | None, typer.Option("--job-url", help="Target job URL")] = None,
    example: Annotated[
        bool, typer.Option("--example", help="Use the built-in example data")
    ] = False,
    time_scale: Annotated[
        float | None,
        typer.Option("--time-scale", min=0.0, help="Delay multiplier (0 runs instantly)"),
    ] = None,
) -> None:
    """Run the AI CV generator wizard and its simulated generation."""
    if job_text and job_url:
        raise typer.BadParameter("Use either --job-text or --job-url, not both")

    settings = get_settings()
    store = GeneratorStore(
        time_scale=settings.simulation_time_scale if time_scale is None else time_scale
    )

    if example:
        store.fill_example_data()
    else:
        store.clear_all_data()
        parsed = [_parse_source(raw) for raw in source or []]
        if parsed:
            store.remove_profile_source(store.state.profile_sources[0].id)
        for source_type, value in parsed:
            added = store.add_profile_source()
            allowed = {option.type for option in store.available_profile_options(added.id)}
            if source_type not in allowed:
                console.print(f"[red]Error:[/red] Only one {source_type} source is allowed")
                raise typer.Exit(1)
            store.update_profile_source(added.id, new_type=source_type, new_value=value)
        if summary:
            store.update_manual_summary(summary)
        if job_url:
            store.update_job_input_type("url")
            store.update_job_target_value(job_url)
        elif job_text:
            store.update_job_target_value(job_text)

    console.print(
        Panel.fit("[bold blue]CV Site[/bold blue] - AI CV Generator", border_style="blue")
    )

    # Walk the wizard: every step must pass before generation can start
    while not store.is_last_step:
        store.next_step()
        if store.state.error_message:
            console.print(f"[red]Error:[/red] {store.state.error_message}")
            raise typer.Exit(1)

    current_text = ""

    def on_progress(update: GenerationProgress) -> None:
        nonlocal current_text
        if update.done:
            console.print(f"\n[bold green]{update.text}[/bold green]")
        elif update.text == current_text:
            console.print(
                f"  [green]OK[/green] {update.text:<52} [dim][{update.percent:>3.0f}%][/dim]"
            )
        else:
            current_text = update.text

    console.print()
    if not store.start_generation(on_progress=on_progress):
        console.print(f"[red]Error:[/red] {store.state.error_message}")
        raise typer.Exit(1)


@app.command(name="reroute")
def reroute_command(
    url: Annotated[str, typer.Argument(help="Request URL or path")],
) -> None:
    """Show how a request URL is routed (locale prefix stripped)."""
    console.print(f"[bold]Path:[/bold] {reroute(url)}")
    console.print(f"[bold]Locale:[/bold] {extract_locale(url)}")


@app.command()
def version() -> None:
    """Show version information."""
    from cv_site import __version__

    console.print(f"CV Site v{__version__}")


if __name__ == "__main__":
    app()
