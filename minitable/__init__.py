"""Shell token model, pipeline command-table parser, table view and string, printf and line-reading utilities."""

__version__ = "0.1.0"