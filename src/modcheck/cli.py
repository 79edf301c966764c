from __future__ import annotations

import logging
import pathlib
from typing import List, Optional

import click
import typer
import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, ModcheckConfig
from .engine.base import CheckDigit, is_blank
from .engine.errors import CheckDigitError, MISSING_CODE
from .engine.pure import PureSystem
from .registry import Registry, UnknownAlgorithmError

console = Console()
LIBRARY_HANDLER = "modcheck-cli"
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="modcheck — check digit calculator and validator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"modcheck {__version__}")
        raise typer.Exit()


def configure_logging(cfg: ModcheckConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level)
    renderer = structlog.processors.JSONRenderer() if cfg.logging.json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    # library modules log through the standard library; render them the same way
    handler = logging.StreamHandler()
    handler.set_name(LIBRARY_HANDLER)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=[structlog.stdlib.add_log_level],
        )
    )
    library = logging.getLogger("modcheck")
    for old in [h for h in library.handlers if h.get_name() == LIBRARY_HANDLER]:
        library.removeHandler(old)
    library.addHandler(handler)
    library.setLevel(level)


def _registry() -> Registry:
    return click.get_current_context().obj["registry"]


def _lookup(name: str) -> CheckDigit:
    try:
        return _registry().get(name)
    except UnknownAlgorithmError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .modcheck.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    try:
        cfg = load_config(config) if config else ModcheckConfig()
        registry = Registry.from_config(cfg)
    except (ValidationError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg, "registry": registry}
    if verbose:
        log.info("verbose_enabled", algorithms=len(registry))


@app.command("list")
def list_algorithms():
    """Show every known algorithm."""
    table = Table(title="Check digit algorithms")
    table.add_column("Name")
    table.add_column("Modulus", justify="right")
    table.add_column("Radix", justify="right")
    table.add_column("Check digits", justify="right")
    for algorithm in _registry():
        table.add_row(
            algorithm.name,
            str(algorithm.modulus),
            str(algorithm.radix),
            str(algorithm.check_digit_length),
        )
    console.print(table)


@app.command()
def calculate(
    algorithm: str = typer.Argument(..., help="Algorithm name, see `modcheck list`"),
    payload: str = typer.Argument(..., help="Code without its check digit"),
):
    """Compute the check digit for PAYLOAD."""
    algo = _lookup(algorithm)
    try:
        check = algo.calculate(payload)
        code = algo.with_check_digit(payload)
    except CheckDigitError as e:
        log.debug("calculate_failed", algorithm=algo.name, payload=payload, error=str(e))
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    log.debug("calculated", algorithm=algo.name, payload=payload, check=check)
    console.print(f"Check digit: {escape(check)}", highlight=False)
    console.print(f"Code: {escape(code)}", highlight=False)


def _rejection(algo: CheckDigit, code: str) -> Optional[str]:
    """None if `code` is valid, otherwise the reason."""
    if is_blank(code):
        return MISSING_CODE
    try:
        return None if algo.verify(code) else "check digit mismatch"
    except CheckDigitError as e:
        return str(e)


@app.command()
def validate(
    algorithm: str = typer.Argument(..., help="Algorithm name, see `modcheck list`"),
    codes: List[str] = typer.Argument(..., help="One or more complete codes"),
):
    """Check one or more complete codes; exits with 1 if any is invalid."""
    algo = _lookup(algorithm)
    failures = 0
    for code in codes:
        reason = _rejection(algo, code)
        if reason is None:
            console.print(f"[green]valid[/green]   {escape(code)}", highlight=False)
        else:
            failures += 1
            console.print(f"[red]invalid[/red] {escape(code)} ({escape(reason)})", highlight=False)
    log.debug("validated", algorithm=algo.name, codes=len(codes), failures=failures)
    if failures:
        raise typer.Exit(code=1)


@app.command()
def weights(
    algorithm: str = typer.Argument(..., help="A pure ISO/IEC 7064 algorithm"),
    count: int = typer.Option(15, "--count", "-n", min=1, help="Number of weights"),
):
    """Print the polynomial weights R^(k-1) mod M, right position 1 first."""
    algo = _lookup(algorithm)
    if not isinstance(algo, PureSystem):
        console.print(f"[red]{escape(algo.name)} is not a pure ISO/IEC 7064 system[/red]")
        raise typer.Exit(code=1)
    console.print(", ".join(str(w) for w in algo.weights(count)), highlight=False)
