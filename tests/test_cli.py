from __future__ import annotations

import pytest

import summary_gateway.cli.summarize as cli_mod
from summary_gateway.common.errors import ProviderAPIError
from summary_gateway.common.schema import Generation, GenerationConfig
from summary_gateway.gateway import SummarizationGateway


class _FakeClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.prompts: list[str] = []

    def generate_content(self, model: str, prompt: str, config: GenerationConfig) -> Generation:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return Generation(text="Engineer visit booked.", model=model, latency_ms=3)


def _patch(monkeypatch: pytest.MonkeyPatch, client: _FakeClient) -> None:
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.setattr(cli_mod, "setup_logging", lambda: None)
    monkeypatch.setattr(
        cli_mod,
        "SummarizationGateway",
        lambda: SummarizationGateway(client_factory=lambda api_key: client, candidates=("m",)),
    )


def test_cli_prints_summary(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _patch(monkeypatch, _FakeClient())
    assert cli_mod.main(["--text", "Engineer will visit on Monday"]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "Engineer visit booked."


def test_cli_reads_file(monkeypatch: pytest.MonkeyPatch, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:  # noqa: ANN001
    client = _FakeClient()
    _patch(monkeypatch, client)
    path = tmp_path / "note.txt"
    path.write_text("FSI0252801 engineer visit", encoding="utf-8")
    assert cli_mod.main(["--file", str(path)]) == 0
    assert client.prompts[0].endswith("FSI0252801 engineer visit")


def test_cli_reports_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _patch(monkeypatch, _FakeClient(ProviderAPIError("API key not valid", 400)))
    assert cli_mod.main(["--text", "hello"]) == 1
    assert "Invalid API key" in capsys.readouterr().err
