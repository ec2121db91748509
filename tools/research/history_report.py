from __future__ import annotations
import argparse
import json
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from trade_history.analytics.aggregator import AggregationResult, aggregate
from trade_history.config.settings import get_settings
from trade_history.loader import load_trades
from trade_history.utils.exceptions import HistoryError
from trade_history.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def generate_markdown(result: AggregationResult, source: str = "", decimals: int = 4) -> str:
    lines = []
    now = datetime.now(timezone.utc)
    lines.append(f"# Historical Performance Calibration - {now.isoformat()}\n")
    if source:
        lines.append(f"Source: `{source}`\n")
    def add_kv(k, v):
        lines.append(f"- **{k}**: {v}")
    add_kv("Trades", result.trade_count)
    add_kv("Wins", result.winning_trades)
    add_kv("Losses", result.losing_trades)
    add_kv("Win rate", f"{result.historical_win_rate:.{decimals}f}")
    add_kv("Avg investment per op", f"{result.historical_avg_investment_per_op:.2f}")
    add_kv("Months with trades", result.months_with_trades)
    add_kv("Avg trades per month", f"{result.historical_avg_trades_per_month:.{decimals}f}")
    add_kv("Years", ", ".join(str(y) for y in result.years) or "none")

    lines.append("\n## Suggested targets\n")
    lines.append("|target|fraction of avg investment|")
    lines.append("|---|---:|")
    lines.append(f"|ROI per winning op|{result.suggested_roi_target_percent:.{decimals}f}|")
    lines.append(f"|Loss per failed op|{result.suggested_loss_per_failed_op_percent:.{decimals}f}|")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    p = argparse.ArgumentParser(description="Calibrate risk/target parameters from a trade log CSV")
    p.add_argument("--csv", default=settings.TRADES_CSV_PATH, help="trade log with a header row")
    p.add_argument("--out-json", default=None)
    p.add_argument("--out-md", default=None)
    p.add_argument("--log-level", default=None)
    args = p.parse_args(argv)

    if args.log_level:
        settings = replace(settings, LOG_LEVEL=args.log_level.upper())
    setup_logging(settings)

    try:
        trades = load_trades(args.csv, settings)
    except OSError as e:
        logger.error("cannot open trade log %s: %s", args.csv, e)
        return 1
    except HistoryError as e:
        logger.error("cannot load trade log: %s", e)
        return 1

    result = aggregate(trades, settings)

    if args.out_json:
        out = {"generated_at": datetime.now(timezone.utc).isoformat(), "source": str(args.csv)}
        out.update(result.to_dict())
        Path(args.out_json).write_text(json.dumps(out, indent=2), encoding="utf-8")
    if args.out_md:
        md = generate_markdown(result, str(args.csv), settings.REPORT_DECIMALS)
        Path(args.out_md).write_text(md, encoding="utf-8")
    # print summary
    print(
        f"Trades={result.trade_count} wins={result.winning_trades} losses={result.losing_trades} "
        f"winrate={result.historical_win_rate:.3f} avg_invest={result.historical_avg_investment_per_op:.2f} "
        f"trades/month={result.historical_avg_trades_per_month:.2f} "
        f"roi_target={result.suggested_roi_target_percent:.4f} loss_per_failed={result.suggested_loss_per_failed_op_percent:.4f}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
