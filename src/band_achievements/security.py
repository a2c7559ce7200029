import html
import re

MISSING_CARD_FILENAME = "missing-card.png"
IMAGE_EXTENSION = ".png"

_SEPARATOR_RE = re.compile(r"[/\\]")
_UNSAFE_RE = re.compile(r"[^a-z0-9_\- ]+")
_WHITESPACE_RE = re.compile(r"\s+")


def escape_html(value: object) -> str:
    """Escape text for interpolation into HTML markup or attributes."""
    return html.escape(str(value), quote=True)


def card_filename(label: str) -> str:
    """Map a card label to its image asset filename.

    - Lower-case, then turn path separators into underscores.
    - Drop every character outside ``[a-z0-9_\\- ]``.
    - Trim and collapse whitespace runs into a single underscore.
    - Empty labels map to the missing-card sentinel.
    """
    if not label:
        return MISSING_CARD_FILENAME
    name = _SEPARATOR_RE.sub("_", label.lower())
    name = _UNSAFE_RE.sub("", name).strip()
    name = _WHITESPACE_RE.sub("_", name)
    return name + IMAGE_EXTENSION


_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~:$])")


def escape_markdown(value: object) -> str:
    """Backslash-escape Markdown syntax so widget labels show text literally."""
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", str(value))
