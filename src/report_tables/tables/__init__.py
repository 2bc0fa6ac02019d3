"""Markdown table detection, repair, extraction, and analysis.

Submodules:
  patterns      -- compiled regex patterns
  classifiers   -- line and cell classification helpers
  schema        -- pydantic models (Document, TableRegion, TableCellGrid, ...)
  scanner       -- text to Document line split
  detection     -- table region detection with title heuristics
  repair        -- prose fixes and separator-row synthesis
  substitution  -- table-to-marker replacement producing the carrier document
  analysis      -- structural diagnostics for the debug view
  grid          -- header/row grid building for the table renderer
  formatting    -- markdown and diagnostics rendering
  pipeline      -- main run() entry point
"""
