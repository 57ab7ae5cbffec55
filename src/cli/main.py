"""CLI principal (Typer).

Por qué Typer:
- Comandos y opciones tipados sin boilerplate de argparse.
- La CLI solo elige reportes y presenta resultados; el flujo vive en
  `core.services.reports`.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import HttpxJsonFetcher
from cli import doctor
from cli.ui_components import render_result
from core.config import AppSettings
from core.domain.models import ReportResult
from core.log_config import configure_logging, get_logger
from core.services.reports import (
    ReportDefinition,
    breeds_report,
    default_reports,
    multiple_facts_report,
    run_reports,
    single_fact_report,
)

app = typer.Typer(no_args_is_help=True, help="Async CatFacts API lab: fetch facts and breeds.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _settings(
    *,
    base_url: Optional[str] = None,
    limit: Optional[int] = None,
    sequential: Optional[bool] = None,
    verbose: bool = False,
) -> AppSettings:
    update: dict[str, object] = {}
    if base_url:
        update["base_url"] = base_url
    if limit is not None:
        update["facts_limit"] = limit
    if sequential is not None:
        update["sequential"] = sequential
    if verbose:
        update["log_level"] = "DEBUG"
    # Los kwargs tienen prioridad sobre env vars y pasan por la misma validación.
    return AppSettings(**update)


def _execute(reports: list[ReportDefinition], settings: AppSettings) -> None:
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Base URL set up for CatFacts API", base_url=settings.base_url)

    def on_result(result: ReportResult) -> None:
        render_result(result, out=_console, err=_err_console)

    # Un fetcher por reporte: cada uno es dueño de su ciclo request/response.
    jobs = [(report, HttpxJsonFetcher()) for report in reports]
    results = asyncio.run(
        run_reports(
            jobs,
            base_url=settings.base_url,
            on_result=on_result,
            sequential=settings.sequential,
        )
    )
    if not all(r.ok for r in results):
        raise typer.Exit(code=1)


_BASE_URL_OPTION = typer.Option(None, "--base-url", help="Override CATFACTS_BASE_URL.")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Debug logs on stderr.")


@app.command(name="run")
def run_all(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, max=500, help="Facts for the multi-fact report."),
    sequential: Optional[bool] = typer.Option(
        None,
        "--sequential/--concurrent",
        help="Run reports one after another (default: concurrent, unordered output).",
    ),
    base_url: Optional[str] = _BASE_URL_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Run the three reports: single fact, multiple facts, breeds."""

    settings = _settings(base_url=base_url, limit=limit, sequential=sequential, verbose=verbose)
    _execute(default_reports(settings.facts_limit), settings)


@app.command()
def fact(base_url: Optional[str] = _BASE_URL_OPTION, verbose: bool = _VERBOSE_OPTION) -> None:
    """Print one random cat fact."""

    settings = _settings(base_url=base_url, verbose=verbose)
    _execute([single_fact_report()], settings)


@app.command()
def facts(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, max=500, help="How many facts to fetch."),
    base_url: Optional[str] = _BASE_URL_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print a numbered list of random cat facts."""

    settings = _settings(base_url=base_url, limit=limit, verbose=verbose)
    _execute([multiple_facts_report(settings.facts_limit)], settings)


@app.command()
def breeds(base_url: Optional[str] = _BASE_URL_OPTION, verbose: bool = _VERBOSE_OPTION) -> None:
    """Print the numbered list of cat breeds."""

    settings = _settings(base_url=base_url, verbose=verbose)
    _execute([breeds_report()], settings)


def run() -> None:
    app()
