"""
MZ Tape Command-Line Interface
==============================

This package provides the command-line tool for the mztape package:

- **mzfview**: Sharp MZ tape file viewer and BASIC lister

The tool is a Click-based CLI application with help and error reporting.

Copyright (c) 2026 mztape Contributors
"""

__all__ = ["mzfview"]
