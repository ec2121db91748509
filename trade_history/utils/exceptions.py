class HistoryError(Exception):
    """Base exception for trade-history failures."""


class ValidationError(HistoryError):
    """Raised when input does not satisfy the expected record contract."""


class DataSourceError(HistoryError):
    """Raised when a trade file cannot be decoded or parsed."""
