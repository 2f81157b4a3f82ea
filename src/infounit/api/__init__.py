"""
Encoding adapters for information quantities.

This package contains the binary, text, JSON, YAML and polars adapters that
sit on top of the infounit core.
"""

from infounit.api import codecs, frames, structured

__all__ = ["codecs", "structured", "frames"]
