"""
Hack SDK Command-Line Interface
===============================

This package provides command-line tools for the Hack SDK:

- **hackasm**: Hack assembler

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["hackasm"]
