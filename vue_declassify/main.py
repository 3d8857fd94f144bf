"""Command line interface for vue-declassify.

This module provides a command-line interface for converting class-style Vue
components in TypeScript files into ``Vue.extend({...})`` options objects.
"""

import importlib
import os
import sys
from collections.abc import Callable
from typing import Any, TypeVar, cast

import typer
from loguru import logger

from vue_declassify.batch import UnitStatus, declassify_files
from vue_declassify.transformer import TransformOptions
from vue_declassify.transformer.constants import FACTORY_CALLEE, INDENT_SIZE
from vue_declassify.transformer.interfaces import Extractor

F = TypeVar("F", bound=Callable[..., Any])


def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="vue-declassify",
    help="Convert class-style Vue components into Vue.extend() options objects.",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Convert class-style Vue components into Vue.extend() options objects."""


def _load_extractor(import_path: str) -> Extractor:
    """Load an extractor from a ``module:attribute`` path.

    Modules are looked up from the current directory first.

    Args:
        import_path: Import path of the extractor callable

    Returns:
        The extractor
    """
    module_name, _, attr = import_path.partition(":")
    if not module_name or not attr:
        raise typer.BadParameter(
            f"Expected 'module:attribute', got '{import_path}'",
            param_hint="--extractor",
        )

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(
            f"Cannot import extractor module '{module_name}': {e}",
            param_hint="--extractor",
        ) from e
    try:
        extractor = getattr(module, attr)
    except AttributeError as e:
        raise typer.BadParameter(
            f"Module '{module_name}' has no attribute '{attr}'",
            param_hint="--extractor",
        ) from e
    if not callable(extractor):
        raise typer.BadParameter(
            f"'{import_path}' is not callable", param_hint="--extractor"
        )
    return cast(Extractor, extractor)


@typed_command(app.command("convert"))
def convert(
    files: list[str] = typer.Argument(..., help="TypeScript files to convert"),
    extractor: str = typer.Option(
        ...,
        "--extractor",
        "-e",
        help="Extractor as module:attribute, importable from the current directory",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print converted code instead of writing it"
    ),
    factory: str = typer.Option(
        FACTORY_CALLEE, "--factory", help="Call wrapping the options object"
    ),
    indent: int = typer.Option(INDENT_SIZE, "--indent", help="Spaces per indent"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Convert class components in place.

    Each file is converted independently; failures are reported and the
    remaining files are still processed.

    Example: vue-declassify convert src/components/*.ts -e my_tools.extract:extract
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")

    extract = _load_extractor(extractor)
    options = TransformOptions(factory=factory, indent_size=indent)
    reports = declassify_files(files, extract, options, write=not dry_run)

    for report in reports:
        if dry_run and report.output is not None:
            typer.echo(f"// {report.path}")
            typer.echo(report.output, nl=False)

    failed = [r for r in reports if r.status == UnitStatus.FAILED]
    converted = [r for r in reports if r.status == UnitStatus.CONVERTED]
    logger.info(
        f"{len(converted)} converted, {len(reports) - len(converted) - len(failed)} "
        f"skipped, {len(failed)} failed"
    )
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
