from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from pubtimeline import cli
from pubtimeline.services.documents import SoupDocument

runner = CliRunner()


def test_config_json_flag(tmp_path, monkeypatch):
    data_dir = tmp_path / "pubtimeline-data"
    monkeypatch.setenv("PUBTIMELINE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("PUBTIMELINE_LOG_LEVEL", "DEBUG")

    result = runner.invoke(cli.app, ["config", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert Path(payload["data_dir"]) == data_dir
    assert payload["log_level"] == "DEBUG"


def test_harvest_writes_records_and_failures(tmp_path, monkeypatch, current_page, unknown_page):
    monkeypatch.setenv("PUBTIMELINE_DATA_DIR", str(tmp_path / "data"))
    pages = {"https://example.org/current": current_page, "https://example.org/unknown": unknown_page}

    class _StubLoader:
        def __init__(self, client, settings) -> None:
            pass

        async def load(self, url: str) -> SoupDocument | None:
            markup = pages.get(url)
            return SoupDocument(markup, url=url) if markup is not None else None

    monkeypatch.setattr(cli, "HttpPageLoader", _StubLoader)
    links_file = tmp_path / "links.txt"
    links_file.write_text("https://example.org/current\r\nhttps://example.org/unknown\r\n", encoding="utf-8")
    output_dir = tmp_path / "out"

    result = runner.invoke(cli.app, ["harvest", str(links_file), "--output-dir", str(output_dir)])

    assert result.exit_code == 0
    assert "1/2 successful." in result.stdout
    assert "1/2 failed." in result.stdout
    records = json.loads((output_dir / "data.json").read_text(encoding="utf-8"))
    assert [record["title"] for record in records] == ["Current layout article"]
    assert (output_dir / "errors.txt").read_text(encoding="utf-8") == "https://example.org/unknown"


def test_features_writes_csv(tmp_path, monkeypatch, sample_record):
    monkeypatch.setenv("PUBTIMELINE_DATA_DIR", str(tmp_path / "data"))
    records_file = tmp_path / "data.json"
    records_file.write_text(json.dumps([sample_record.model_dump()]), encoding="utf-8")
    destination = tmp_path / "features.csv"

    result = runner.invoke(cli.app, ["features", str(records_file), "--output", str(destination)])

    assert result.exit_code == 0
    lines = destination.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[1].endswith(";14;36;10")
    assert lines[1].startswith("Sample Study;https://doi.org/10.1038/s41586-020-2000-1;January;2020")


def test_features_rejects_malformed_records(tmp_path, monkeypatch):
    monkeypatch.setenv("PUBTIMELINE_DATA_DIR", str(tmp_path / "data"))
    records_file = tmp_path / "data.json"
    records_file.write_text('{"not": "a list"}', encoding="utf-8")

    result = runner.invoke(cli.app, ["features", str(records_file)])

    assert result.exit_code == 1
    assert "Could not read records" in result.stdout
