import json
import os

from cli.main import main


def test_generate_then_list(log_path, capsys):
    assert main(["--log-file", str(log_path), "generate-test-data", "--count", "3"]) == 0
    capsys.readouterr()

    assert main(["--log-file", str(log_path), "list"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 3


def test_delete_reports_count(log_path, store, capsys):
    store.append([
        {"timestamp": "t1", "originalMessage": "a", "parsedData": {}},
        {"timestamp": "t1", "originalMessage": "b", "parsedData": {}},
    ])

    assert main(["--log-file", str(log_path), "delete", "t1"]) == 0
    assert "Deleted 2 record(s)" in capsys.readouterr().out
    assert store.list_records() == []


def test_list_corrupt_file_exits_nonzero(log_path, capsys):
    log_path.write_text("nope", encoding="utf-8")
    assert main(["--log-file", str(log_path), "list"]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_list_non_utf8_file_exits_nonzero(log_path, capsys):
    log_path.write_bytes(b"\xff\xfe garbage")
    assert main(["--log-file", str(log_path), "list"]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


class _RecordingRun:
    def __init__(self):
        self.calls = []

    def __call__(self, app, **kwargs):
        self.calls.append((app, kwargs))


def test_serve_runs_app_bound_to_log_file(log_path, monkeypatch, capsys):
    from fastapi import FastAPI

    run = _RecordingRun()
    monkeypatch.setattr("uvicorn.run", run)

    assert main(["--log-file", str(log_path), "serve", "--host", "0.0.0.0", "--port", "9000"]) == 0

    app, kwargs = run.calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs == {"host": "0.0.0.0", "port": 9000}


def test_serve_reload_uses_import_string(log_path, monkeypatch):
    run = _RecordingRun()
    monkeypatch.setattr("uvicorn.run", run)
    monkeypatch.setenv("CLINIC_RELAY_LOG_FILE", "unused.json")

    assert main(["--log-file", str(log_path), "serve", "--port", "9001", "--reload"]) == 0

    app, kwargs = run.calls[0]
    assert app == "runtime.api.server:app"
    assert kwargs["reload"] is True
    assert kwargs["port"] == 9001
    assert os.environ["CLINIC_RELAY_LOG_FILE"] == str(log_path)
