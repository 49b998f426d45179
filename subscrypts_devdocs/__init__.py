"""Context-aware developer documentation sidebar for the Subscrypts SDK demo.

This package resolves the current route to a documentation bundle, keeps the
sidebar's open flag and expanded sections in persisted storage, and renders
the sidebar as HTML. The ``devdocs`` console script drives all of it.

Exports
-------
- ``app``: Cyclopts application holding the subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from subscrypts_devdocs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
