"""Render provider schema definitions as Markdown reference documentation."""

__version__ = "0.1.0"
__all__ = ["ctytype", "schema", "descriptions", "tmplfuncs", "render"]