"""
Rendering module - document exports.
"""
from .markdown import MARKDOWN_MEDIA_TYPE, export_filename, render_markdown

__all__ = ["MARKDOWN_MEDIA_TYPE", "export_filename", "render_markdown"]
