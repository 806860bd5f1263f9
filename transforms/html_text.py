"""
HTML to plain text conversion.

Markup is first reduced to a relaxed allow-list of formatting tags, then the
text nodes are linearized in document order with exactly one space between
chunks that came from different nodes, so '<p>Hello</p><p>World</p>' reads
'Hello World' rather than 'HelloWorld'.
"""

import logging
from typing import List, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

logger = logging.getLogger("content-preprocessor")

NBSP = '\u00a0'

# Elements removed together with everything inside them
DROPPED_TAGS = [
    'script', 'style', 'noscript', 'template',
    'iframe', 'frame', 'frameset', 'object', 'embed', 'applet',
    'svg', 'math', 'canvas',
    'button', 'select', 'textarea', 'input',
    'head',
]

ALLOWED_TAGS = {
    'a', 'b', 'blockquote', 'br', 'caption', 'cite', 'code', 'col', 'colgroup',
    'dd', 'div', 'dl', 'dt', 'em', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'i', 'img', 'li', 'ol', 'p', 'pre', 'q', 'small', 'span', 'strike', 'strong',
    'sub', 'sup', 'table', 'tbody', 'td', 'tfoot', 'th', 'thead', 'tr', 'u', 'ul',
}

ALLOWED_ATTRIBUTES = {
    'a': {'href', 'title'},
    'blockquote': {'cite'},
    'col': {'span', 'width'},
    'colgroup': {'span', 'width'},
    'img': {'align', 'alt', 'height', 'src', 'title', 'width'},
    'ol': {'start', 'type'},
    'q': {'cite'},
    'table': {'summary', 'width'},
    'td': {'abbr', 'axis', 'colspan', 'rowspan', 'width'},
    'th': {'abbr', 'axis', 'colspan', 'rowspan', 'scope', 'width'},
    'ul': {'type'},
}

ALLOWED_PROTOCOLS = {
    ('a', 'href'): {'ftp', 'http', 'https', 'mailto'},
    ('blockquote', 'cite'): {'http', 'https'},
    ('q', 'cite'): {'http', 'https'},
    ('img', 'src'): {'http', 'https'},
}


def _protocol_allowed(tag_name: str, attribute: str, value) -> bool:
    protocols = ALLOWED_PROTOCOLS.get((tag_name, attribute))
    if protocols is None:
        return True
    if not isinstance(value, str):
        return False
    try:
        scheme = urlsplit(value.strip()).scheme
    except ValueError:
        # unparseable URL, e.g. an unterminated IPv6 host
        return False
    return scheme.lower() in protocols


def _clean_attributes(tag: Tag) -> None:
    allowed = ALLOWED_ATTRIBUTES.get(tag.name, set())
    for attribute in list(tag.attrs):
        if attribute not in allowed or not _protocol_allowed(tag.name, attribute, tag.attrs[attribute]):
            del tag.attrs[attribute]


def _sanitize(raw_html: str) -> BeautifulSoup:
    """Parse markup and reduce it to the allow-list in place."""
    soup = BeautifulSoup(raw_html, 'html.parser')

    # comments, doctype, CDATA, processing instructions and declarations
    for node in list(soup.descendants):
        if isinstance(node, PreformattedString):
            node.extract()

    for tag in soup.find_all(DROPPED_TAGS):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name in ALLOWED_TAGS:
            _clean_attributes(tag)
        else:
            tag.unwrap()

    return soup


def sanitize_html(raw_html: Optional[str]) -> Optional[str]:
    """
    Reduce markup to a safe subset of formatting tags.

    Scripting and embedded content are removed with their content, other
    unknown elements are unwrapped so their text survives, and attributes
    outside the allow-list (or links with unsafe protocols) are dropped.

    Args:
        raw_html: Untrusted markup

    Returns:
        Sanitized markup, or the input itself when it is None or blank
    """
    if raw_html is None or not raw_html.strip():
        return raw_html
    return str(_sanitize(raw_html))


def _collect_text(root: Tag) -> str:
    """Join text nodes of a tree in document order, one space between chunks."""
    chunks: List[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            stack.extend(reversed(node.contents))
        elif isinstance(node, NavigableString):
            text = ' '.join(str(node).replace(NBSP, ' ').split())
            if text:
                chunks.append(text)
    return ' '.join(chunks)


def html_to_text(raw_html: Optional[str]) -> Optional[str]:
    """
    Convert HTML to single-spaced plain text.

    None and whitespace-only values are returned unchanged, so callers can
    tell "nothing to process" apart from "processed to nothing". Malformed
    markup never raises; the parser recovers what it can.

    Args:
        raw_html: HTML or plain text

    Returns:
        Text without markup, leading/trailing or repeated whitespace

    Example:
        >>> html_to_text('<p>Hello</p><p>World</p>')
        'Hello World'
    """
    if raw_html is None or not raw_html.strip():
        return raw_html

    soup = _sanitize(raw_html)
    text = _collect_text(soup)
    logger.debug(f"Converted HTML to text | input_length={len(raw_html)} output_length={len(text)}")
    return text
