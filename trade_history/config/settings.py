import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from trade_history.utils.helpers import parse_bool, parse_int, parse_list


DEFAULT_CURRENCY_SYMBOLS: Tuple[str, ...] = ("€", "$")

DEFAULT_DATE_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


@dataclass
class Settings:
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_PATH: str = "logs/history.log"
    LOG_TO_FILE: bool = True

    # Input file
    TRADES_CSV_PATH: str = "data/Trades.csv"
    CSV_DELIMITER: str = ","
    CSV_ENCODING: str = "utf-8-sig"

    # Column names of the trade log
    DATE_IN_COLUMN: str = "DATE IN"
    INVESTMENT_COLUMN: str = "INVESTMENT (EURO)"
    RESULT_COLUMN: str = "RESULT"

    # Lenient field parsing
    CURRENCY_SYMBOLS: Tuple[str, ...] = DEFAULT_CURRENCY_SYMBOLS
    DATE_FORMATS: Tuple[str, ...] = DEFAULT_DATE_FORMATS

    # Report
    REPORT_DECIMALS: int = 4


_settings: Optional[Settings] = None


def _load_from_env(settings: Settings) -> None:
    env = os.environ
    # Helper to set if env exists
    def set_if(name: str, cast):
        if name in env and env[name] != "":
            setattr(settings, name, cast(env[name]))

    set_if("LOG_LEVEL", lambda v: str(v).upper())
    set_if("LOG_PATH", str)
    set_if("LOG_TO_FILE", lambda v: parse_bool(v, settings.LOG_TO_FILE))

    set_if("TRADES_CSV_PATH", str)
    set_if("CSV_DELIMITER", str)
    set_if("CSV_ENCODING", str)

    set_if("DATE_IN_COLUMN", str)
    set_if("INVESTMENT_COLUMN", str)
    set_if("RESULT_COLUMN", str)

    set_if("CURRENCY_SYMBOLS", lambda v: tuple(parse_list(v, ",", list(settings.CURRENCY_SYMBOLS))))
    set_if("DATE_FORMATS", lambda v: tuple(parse_list(v, ";", list(settings.DATE_FORMATS))))

    set_if("REPORT_DECIMALS", lambda v: parse_int(v, settings.REPORT_DECIMALS))


def load_settings() -> Settings:
    """Build a fresh Settings from defaults, .env and the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings()
    _load_from_env(settings)
    return settings


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
