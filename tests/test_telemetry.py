from __future__ import annotations

import json
from pathlib import Path

from pexeso.services.telemetry import TelemetryService


def _lines(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_engine_events_are_appended_as_jsonl(tmp_path: Path) -> None:
    path = tmp_path / "userdata" / "telemetry.jsonl"
    telemetry = TelemetryService(path)
    telemetry.log("boot", {"ok": True})
    telemetry.log_events([{"type": "PAIR_MATCHED", "first": 0, "second": 1}])

    recs = _lines(path)
    assert [r["type"] for r in recs] == ["boot", "pair_matched"]
    assert recs[1]["payload"] == {"first": 0, "second": 1}
    assert "ts" in recs[0]


def test_disabled_telemetry_writes_nothing(tmp_path: Path) -> None:
    path = tmp_path / "telemetry.jsonl"
    TelemetryService(path, enabled=False).log("boot", {"ok": True})
    assert not path.exists()


def test_unwritable_path_disables_telemetry(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "userdata"
    blocker.write_text("not a directory", encoding="utf-8")
    telemetry = TelemetryService(blocker / "telemetry.jsonl")

    telemetry.log("boot", {"ok": True})
    telemetry.log_events([{"type": "CARD_REVEALED", "index": 0, "value": 3}])

    assert telemetry.enabled is False
    assert "telemetry disabled" in capsys.readouterr().err
    assert blocker.read_text(encoding="utf-8") == "not a directory"
