"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import HttpxJsonFetcher
from cli.ui_components import build_config_table
from core.config import AppSettings
from core.errors import CatFactsError
from core.log_config import configure_logging
from core.services.request_builder import build_url

app = typer.Typer(no_args_is_help=False, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        url = build_url(settings.base_url, "/fact")
        payload = await HttpxJsonFetcher().fetch_json(url)
    except CatFactsError as exc:
        return False, exc.describe()
    if not isinstance(payload, dict) or "fact" not in payload:
        return False, "JSON without a 'fact' field"
    return True, f"GET {url}"


@app.callback(invoke_without_command=True)
def run() -> None:
    """Show the effective configuration and check the API is reachable."""

    settings = AppSettings()
    configure_logging(settings.log_level, settings.log_format)
    table = build_config_table(settings)

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] set CATFACTS_BASE_URL (env or .env) if the API lives elsewhere."
        )
        raise typer.Exit(code=1)
