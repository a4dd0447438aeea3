from .markdown_generator import MarkdownGenerator

__all__ = ["MarkdownGenerator"]
