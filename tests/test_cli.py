"""CLI tests with `typer.testing.CliRunner` and stubbed transports."""

from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

import cli.doctor as cli_doctor
import cli.main as cli_main
from adapters.http_client import HttpxJsonFetcher
from conftest import BASE_URL, breeds_payload, fact_payload, facts_payload

runner = CliRunner()


def _install_transport(monkeypatch: pytest.MonkeyPatch, module, handler) -> list[str]:
    requested: list[str] = []

    def recording(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return handler(request)

    transport = httpx.MockTransport(recording)
    monkeypatch.setattr(module, "HttpxJsonFetcher", lambda: HttpxJsonFetcher(transport=transport))
    return requested


def _catfacts(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/fact":
        return httpx.Response(200, json=fact_payload("Cats have five toes on their front paws."))
    if request.url.path == "/facts":
        limit = int(request.url.params["limit"])
        return httpx.Response(200, json=facts_payload(*[f"fact {i}" for i in range(1, limit + 1)]))
    if request.url.path == "/breeds":
        return httpx.Response(200, json=breeds_payload("Abyssinian", "Bengal"))
    return httpx.Response(404)


def test_run_sequential_prints_all_reports(monkeypatch: pytest.MonkeyPatch) -> None:
    requested = _install_transport(monkeypatch, cli_main, _catfacts)

    result = runner.invoke(cli_main.app, ["run", "--sequential", "--base-url", BASE_URL])

    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "Random Cat Fact:\n"
        "Cats have five toes on their front paws.\n"
        "\n"
        "3 Random Cat Facts:\n"
        "1. fact 1\n"
        "2. fact 2\n"
        "3. fact 3\n"
        "\n"
        "List of Cat Breeds:\n"
        "1. Abyssinian\n"
        "2. Bengal\n"
    )
    assert requested == [f"{BASE_URL}/fact", f"{BASE_URL}/facts?limit=3", f"{BASE_URL}/breeds"]


def test_run_concurrent_prints_every_block(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_transport(monkeypatch, cli_main, _catfacts)

    result = runner.invoke(cli_main.app, ["run", "--limit", "2", "--base-url", BASE_URL])

    assert result.exit_code == 0, result.output
    assert "Random Cat Fact:\nCats have five toes on their front paws.\n" in result.stdout
    assert "\n2 Random Cat Facts:\n1. fact 1\n2. fact 2\n" in result.stdout
    assert "\nList of Cat Breeds:\n1. Abyssinian\n2. Bengal\n" in result.stdout


def test_failing_report_exits_nonzero_after_others_print(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/breeds":
            return httpx.Response(500)
        return _catfacts(request)

    _install_transport(monkeypatch, cli_main, handler)

    result = runner.invoke(cli_main.app, ["run", "--sequential", "--base-url", BASE_URL])

    assert result.exit_code == 1
    assert "3 Random Cat Facts:\n1. fact 1\n2. fact 2\n3. fact 3\n" in result.stdout
    assert "List of Cat Breeds:" not in result.stdout
    assert "Error fetching cat breeds:" in result.output
    assert f"HttpStatusError: HTTP 500 from {BASE_URL}/breeds" in result.output


def test_facts_command_uses_env_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATFACTS_BASE_URL", BASE_URL)
    monkeypatch.setenv("CATFACTS_FACTS_LIMIT", "2")
    requested = _install_transport(monkeypatch, cli_main, _catfacts)

    result = runner.invoke(cli_main.app, ["facts"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "\n2 Random Cat Facts:\n1. fact 1\n2. fact 2\n"
    assert requested == [f"{BASE_URL}/facts?limit=2"]


def test_fact_and_breeds_commands(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_transport(monkeypatch, cli_main, _catfacts)

    fact_result = runner.invoke(cli_main.app, ["fact", "--base-url", BASE_URL])
    breeds_result = runner.invoke(cli_main.app, ["breeds", "--base-url", BASE_URL])

    assert fact_result.stdout == "Random Cat Fact:\nCats have five toes on their front paws.\n"
    assert breeds_result.stdout == "\nList of Cat Breeds:\n1. Abyssinian\n2. Bengal\n"


def test_network_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _install_transport(monkeypatch, cli_main, handler)

    result = runner.invoke(cli_main.app, ["fact", "--base-url", BASE_URL])

    assert result.exit_code == 1
    assert "Error fetching random cat fact:" in result.output
    assert "NetworkError: request to" in result.output
    assert "Random Cat Fact:" not in result.stdout


def test_limit_out_of_range_is_rejected() -> None:
    result = runner.invoke(cli_main.app, ["facts", "--limit", "0"])

    assert result.exit_code == 2


def test_doctor_reports_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATFACTS_BASE_URL", BASE_URL)
    _install_transport(monkeypatch, cli_doctor, _catfacts)

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 0, result.output
    assert "API connectivity" in result.stdout
    assert "FAIL" not in result.stdout
    assert "http_get" not in result.stdout
    assert "http_response" not in result.stdout


def test_doctor_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATFACTS_BASE_URL", BASE_URL)
    _install_transport(monkeypatch, cli_doctor, lambda request: httpx.Response(502))

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 1
    assert "FAIL" in result.stdout
    assert "CATFACTS_BASE_URL" in result.stdout
