"""Self-contained text transformers: encoders, hashes, URL and UUID tools, SQL/XML formatters."""

__version__ = "0.23.0"