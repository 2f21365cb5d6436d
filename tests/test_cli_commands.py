from __future__ import annotations

import json
from datetime import datetime, timedelta

from PIL import Image

from countdown_app.cli import build_parser
from countdown_app.cli import main as cli_main
from countdown_core.config import CONFIG_ENV
from countdown_core.logging_setup import configure_logging


def _run(argv: list[str], capsys) -> tuple[int, dict]:
    args = build_parser().parse_args(argv)
    rc = int(args.func(args))
    return rc, json.loads(capsys.readouterr().out)


def test_render_writes_artifact(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "config.json"))
    target = (datetime.now().astimezone() + timedelta(days=3)).isoformat()

    rc, out = _run(["render", target, "--name", "sale", "--frames", "4", "--out-dir", str(tmp_path)], capsys)

    assert rc == 0
    assert out["success"] is True
    assert out["frames"] == 4
    assert out["passed"] is False
    assert out["bytes"] > 0
    with Image.open(tmp_path / "sale.gif") as im:
        assert im.n_frames == 4


def test_render_rejects_bad_timestamp(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "config.json"))
    rc, out = _run(["render", "not-a-date", "--out-dir", str(tmp_path)], capsys)
    assert rc == 2
    assert out["success"] is False
    assert not list(tmp_path.glob("*.gif"))


def test_breakdown_counts_down(capsys) -> None:
    target = (datetime.now().astimezone() + timedelta(hours=5, seconds=30)).isoformat()
    rc, out = _run(["breakdown", target, "--frames", "3"], capsys)
    assert rc == 0
    assert out["passed"] is False
    totals = [f["hours"] * 3600 + f["minutes"] * 60 + f["seconds"] for f in out["frames"]]
    assert totals[0] - totals[1] == 1
    assert totals[1] - totals[2] == 1


def test_breakdown_passed(capsys) -> None:
    rc, out = _run(["breakdown", "2000-01-01T00:00:00Z"], capsys)
    assert rc == 0
    assert out == {"passed": True, "message": "Date has passed!", "frames": []}


def test_config_init_and_show(tmp_path, monkeypatch, capsys) -> None:
    path = tmp_path / "settings" / "config.json"
    monkeypatch.setenv(CONFIG_ENV, str(path))

    rc, out = _run(["config", "init"], capsys)
    assert rc == 0
    assert path.exists()

    rc, out = _run(["config", "init"], capsys)
    assert rc == 1
    assert out["success"] is False

    rc, out = _run(["config", "show"], capsys)
    assert rc == 0
    assert out["path"] == str(path)
    assert out["config"]["render"]["width"] == 200


def test_log_file_flag_records_render_events(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "config.json"))
    log_file = tmp_path / "logs" / "render.jsonl"
    target = (datetime.now().astimezone() + timedelta(hours=5)).isoformat()
    try:
        rc = cli_main(["--log-file", str(log_file), "render", target, "--frames", "2", "--out-dir", str(tmp_path)])
    finally:
        configure_logging()

    assert rc == 0
    assert json.loads(capsys.readouterr().out)["frames"] == 2
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    start = next(e for e in events if e.get("event") == "render_start")
    assert (start["artifact"], start["frames"]) == ("default", 2)
    assert any(e.get("event") == "artifact_written" for e in events)
