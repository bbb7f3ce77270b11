"""CLI package namespace.

Keep package import side-effect free so submodules can be imported independently
of the argument parser.
"""

__all__ = []
