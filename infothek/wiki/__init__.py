"""
Wiki page generation: formatters, content creators, writer and exporter.
"""
from infothek.wiki.exporter import WikiExporter
from infothek.wiki.writer import write_to_file

__all__ = ["WikiExporter", "write_to_file"]
