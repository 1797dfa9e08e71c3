"""Command-line interface for PODSMITH.

This package contains:
- app: Root Typer app with --version and --config
- spec: The `spec` command group (create, lint, cat)

The console script entry point is `podsmith.cli.app:app`.
"""
