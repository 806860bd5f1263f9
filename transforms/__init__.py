"""
Text transforms for document values.

All transforms follow signature: (value: Optional[str]) -> Optional[str]
"""

from .html_text import html_to_text, sanitize_html

__all__ = [
    'html_to_text',
    'sanitize_html',
]
