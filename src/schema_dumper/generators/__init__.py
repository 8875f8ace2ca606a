"""Output document generators."""

from .markdown import MarkdownGenerator, make_link, slugify

__all__ = ["MarkdownGenerator", "make_link", "slugify"]
