"""Custom exceptions for RangeChart."""


class RangeChartError(Exception):
    """Base exception for all RangeChart errors."""

    pass


class ConfigurationError(RangeChartError):
    """Raised when configuration is invalid."""

    pass


class ColumnNotFoundError(RangeChartError):
    """Raised when a column id does not exist in the column model."""

    def __init__(self, col_id: str):
        super().__init__(f"Column not found: {col_id!r}")
        self.col_id = col_id


class ChartDataError(RangeChartError):
    """Raised when a caller asks for an extraction with errors to be treated as fatal."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors) or "Chart data extraction failed")
        self.errors = list(errors)
