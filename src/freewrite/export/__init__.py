"""Export entries to standalone text or markdown files."""

from .exporter import EntryExporter, ExportFormat

__all__ = ["EntryExporter", "ExportFormat"]
