from .text_report import format_column_report, format_row_report, render_report

__all__ = ["format_row_report", "format_column_report", "render_report"]
