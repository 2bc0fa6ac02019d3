"""Incremental Markdown table extraction and repair for streamed analysis reports."""
