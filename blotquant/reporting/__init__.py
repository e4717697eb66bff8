"""Export helpers for normalized band results."""

from blotquant.reporting.export import (
    CSV_COLUMNS,
    ExportRow,
    format_number,
    round_half_up,
    to_chart_data,
    to_csv,
    to_export_rows,
    to_frame,
)

__all__ = [
    "CSV_COLUMNS",
    "ExportRow",
    "format_number",
    "round_half_up",
    "to_chart_data",
    "to_csv",
    "to_export_rows",
    "to_frame",
]
