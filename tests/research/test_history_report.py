import json
from pathlib import Path

from tools.research import history_report as hr
from trade_history.analytics.aggregator import aggregate
from trade_history.config.settings import Settings
from trade_history.loader import load_trades

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def _settings():
    return Settings(LOG_TO_FILE=False)


def test_main_writes_json_and_markdown(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(hr, "get_settings", _settings)
    out_json = tmp_path / "report.json"
    out_md = tmp_path / "report.md"
    rc = hr.main(["--csv", str(FIXTURES / "Trades.csv"), "--out-json", str(out_json), "--out-md", str(out_md)])
    assert rc == 0

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["success"] is True
    assert data["tradeCount"] == 33
    assert data["years"] == [2023, 2024]
    assert abs(data["historicalAvgTradesPerMonth"] - 5.5) < 1e-9

    md = out_md.read_text(encoding="utf-8")
    assert "Historical Performance Calibration" in md
    assert "Suggested targets" in md

    printed = capsys.readouterr().out
    assert "Trades=33 wins=23 losses=10" in printed


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(hr, "get_settings", _settings)
    assert hr.main(["--csv", str(tmp_path / "missing.csv")]) == 1


def test_main_bad_header(tmp_path, monkeypatch):
    monkeypatch.setattr(hr, "get_settings", _settings)
    p = tmp_path / "t.csv"
    p.write_text("WHEN,AMOUNT\n2024-01-01,5\n", encoding="utf-8")
    assert hr.main(["--csv", str(p)]) == 1


def test_generate_markdown_sections():
    res = aggregate(load_trades(FIXTURES / "Trades.csv", Settings()), Settings())
    md = hr.generate_markdown(res, "Trades.csv", decimals=3)
    assert "- **Trades**: 33" in md
    assert "- **Win rate**: 0.697" in md
    assert "- **Years**: 2023, 2024" in md
    assert "|ROI per winning op|0.174|" in md
    assert "|Loss per failed op|0.149|" in md
