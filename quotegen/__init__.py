"""Sales quotation generator backed by Google Docs, Drive and Sheets."""

__version__ = "1.0.0"
