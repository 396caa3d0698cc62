"""CLI entrypoints for tasktime."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from tasktime.config import load_settings
from tasktime.errors import ConfigError, OutlineReadError
from tasktime.host.outline import VisibleRange, scan_outline
from tasktime.logging import build_context, configure_logging, get_logger
from tasktime.models.annotation import AnnotationSet
from tasktime.pipeline import build_annotations
from tasktime.render.console import render_text
from tasktime.utils.durations import format_duration

app = typer.Typer(add_completion=False, help="Annotate timestamped outlines with task durations")
logger = get_logger(__name__)


def _read_outline(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OutlineReadError(path, str(exc)) from exc


def _parse_range(raw: str) -> VisibleRange:
    start, sep, end = raw.partition(":")
    if not sep or not start.isdecimal() or not end.isdecimal():
        raise typer.BadParameter(f"Expected START:END offsets, got {raw!r}")
    try:
        return int(start), int(end)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected START:END offsets, got {raw!r}") from exc


def _annotate_file(
    path: Path,
    ranges: list[str] | None,
    env_file: Path | None,
) -> tuple[str, AnnotationSet]:
    try:
        settings = load_settings(env_file)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--env-file") from exc
    configure_logging(settings.log_level)

    try:
        text = _read_outline(path)
    except OutlineReadError as exc:
        raise typer.BadParameter(str(exc)) from exc

    visible = [_parse_range(r) for r in ranges] if ranges else None
    with build_context(trigger="cli", ranges=None if visible is None else len(visible)):
        logger.info("Annotating %s", path)
        descriptors = scan_outline(text, visible, indent_width=settings.indent_width)
        result = build_annotations(descriptors, settings=settings)
    return text, result


@app.command()
def annotate(
    path: Path = typer.Argument(..., help="Outline file (UTF-8 text with bullet lines)"),
    as_json: bool = typer.Option(False, "--json", help="Print annotation instructions as JSON"),
    visible_range: list[str] | None = typer.Option(
        None,
        "--range",
        help="Visible range as START:END character offsets; repeatable",
    ),
    show_total: bool = typer.Option(False, "--total", help="Print the top-level total after the outline"),
    env_file: Path | None = typer.Option(None, "--env-file", help="Dotenv file with TASKTIME_ settings"),
) -> None:
    """Print the outline with time ranges highlighted and durations appended."""

    text, result = _annotate_file(path, visible_range, env_file)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    console = Console()
    console.print(render_text(text, result.annotations), end="", soft_wrap=True, highlight=False)
    if not text.endswith("\n"):
        console.print()
    if show_total:
        console.print(f"Total: {format_duration(result.total)}", highlight=False)


@app.command()
def total(
    path: Path = typer.Argument(..., help="Outline file (UTF-8 text with bullet lines)"),
    env_file: Path | None = typer.Option(None, "--env-file", help="Dotenv file with TASKTIME_ settings"),
) -> None:
    """Print the summed duration of the top-level tasks."""

    _, result = _annotate_file(path, None, env_file)
    typer.echo(format_duration(result.total))


if __name__ == "__main__":
    app()
