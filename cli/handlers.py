"""CLI handlers facade.

Thin wrapper that re-exports concrete handler implementations from
cli.core_handlers so the entry point only depends on cli.handlers.
"""
from __future__ import annotations
from .core_handlers import handle_diff, handle_help, handle_show
__all__ = ['handle_help', 'handle_show', 'handle_diff']
