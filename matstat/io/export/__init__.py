from .csv_export import ExportResult, export_stats_to_csv

__all__ = ["ExportResult", "export_stats_to_csv"]
