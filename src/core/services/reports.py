"""Orquestación de reportes.

Por qué aquí:
- Un reporte une un endpoint con una proyección que convierte el JSON
  parseado en líneas para la consola.
- Mantiene los side-effects (imprimir) fuera del Core: cada reporte termina
  en un `ReportResult` que se entrega al hook de completado del caller
  (el renderer de la CLI, o un test).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from pydantic import BaseModel, ValidationError

from core.domain.models import (
    BreedCollection,
    EndpointDescriptor,
    FactCollection,
    FactRecord,
    ReportResult,
)
from core.errors import CatFactsError, DecodeError
from core.interfaces.fetcher import JsonFetcher
from core.log_config import get_logger
from core.services.request_builder import build_endpoint_url

logger = get_logger(__name__)

Projection = Callable[[Any], list[str]]


@dataclass(frozen=True)
class ReportDefinition:
    """Endpoint + proyección de un reporte de consola."""

    name: str
    label: str
    endpoint: EndpointDescriptor
    project: Projection


ReportJob = tuple[ReportDefinition, JsonFetcher]


def _parse(model: type[BaseModel], payload: Any) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        where = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise DecodeError(f"unexpected response shape for {model.__name__} at {where}: {first.get('msg', exc)}") from exc


def numbered(items: Sequence[str]) -> list[str]:
    """Líneas numeradas desde 1, en el orden recibido."""

    return [f"{index}. {item}" for index, item in enumerate(items, start=1)]


def project_single_fact(payload: Any) -> list[str]:
    record = _parse(FactRecord, payload)
    return ["Random Cat Fact:", record.fact]


def project_fact_list(limit: int) -> Projection:
    # El encabezado usa el `limit` pedido, no la cantidad recibida.
    def project(payload: Any) -> list[str]:
        collection = _parse(FactCollection, payload)
        return ["", f"{limit} Random Cat Facts:", *numbered([r.fact for r in collection.data])]

    return project


def project_breed_list(payload: Any) -> list[str]:
    collection = _parse(BreedCollection, payload)
    return ["", "List of Cat Breeds:", *numbered([r.breed for r in collection.data])]


def single_fact_report() -> ReportDefinition:
    return ReportDefinition(
        name="fact",
        label="random cat fact",
        endpoint=EndpointDescriptor(path="/fact"),
        project=project_single_fact,
    )


def multiple_facts_report(limit: int = 3) -> ReportDefinition:
    return ReportDefinition(
        name="facts",
        label="multiple cat facts",
        endpoint=EndpointDescriptor(path="/facts", query={"limit": limit}),
        project=project_fact_list(limit),
    )


def breeds_report() -> ReportDefinition:
    return ReportDefinition(
        name="breeds",
        label="cat breeds",
        endpoint=EndpointDescriptor(path="/breeds"),
        project=project_breed_list,
    )


def default_reports(limit: int = 3) -> list[ReportDefinition]:
    """Los tres reportes en el orden del entrypoint: fact, facts, breeds."""

    return [single_fact_report(), multiple_facts_report(limit), breeds_report()]


async def run_report(
    report: ReportDefinition,
    *,
    base_url: str,
    fetcher: JsonFetcher,
) -> ReportResult:
    """Hace el fetch y la proyección de un reporte.

    Nunca lanza `CatFactsError`: los fallos quedan en `ReportResult.error`,
    así un reporte no arrastra a los demás.
    """

    log = logger.bind(report=report.name)
    try:
        url = build_endpoint_url(base_url, report.endpoint)
        payload = await fetcher.fetch_json(url)
        lines = report.project(payload)
    except CatFactsError as exc:
        log.warning("report_failed", kind=exc.kind, error=str(exc))
        return ReportResult(report=report.name, label=report.label, error=exc)

    log.info("report_completed", lines=len(lines))
    return ReportResult(report=report.name, label=report.label, lines=lines)


async def run_reports(
    jobs: Sequence[ReportJob],
    *,
    base_url: str,
    on_result: Callable[[ReportResult], None] | None = None,
    sequential: bool = False,
) -> list[ReportResult]:
    """Ejecuta varios reportes y devuelve los resultados en orden de completado.

    Modo concurrente: una task por reporte, creadas en orden de fuente;
    `on_result` se llama a medida que cada una termina, así que el orden de
    salida no es determinista.
    Modo secuencial: cada reporte espera al anterior.
    En ambos modos solo retorna cuando terminaron todos.
    """

    results: list[ReportResult] = []

    def complete(result: ReportResult) -> None:
        results.append(result)
        if on_result:
            on_result(result)

    if sequential:
        for report, fetcher in jobs:
            complete(await run_report(report, base_url=base_url, fetcher=fetcher))
        return results

    tasks = [
        asyncio.create_task(run_report(report, base_url=base_url, fetcher=fetcher), name=f"report:{report.name}")
        for report, fetcher in jobs
    ]
    for next_done in asyncio.as_completed(tasks):
        complete(await next_done)
    return results
