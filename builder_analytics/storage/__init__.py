from builder_analytics.storage.report_writer import save_report

__all__ = ["save_report"]
