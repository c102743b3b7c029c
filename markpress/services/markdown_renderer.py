import asyncio
import logging

import markdown
from pygments.formatters import HtmlFormatter

from markpress.exceptions import RenderError

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = "codehilite"

EXTENSIONS = ["extra", "codehilite", "sane_lists"]
EXTENSION_CONFIGS = {
    "codehilite": {"css_class": HIGHLIGHT_CSS_CLASS, "guess_lang": False},
}


def _convert(text: str) -> str:
    # A fresh instance per call; Markdown objects carry state between conversions.
    md = markdown.Markdown(extensions=EXTENSIONS, extension_configs=EXTENSION_CONFIGS)
    return md.convert(text)


async def render_to_html(markdown_text: str) -> str:
    """Convert a post body to HTML, highlighting fenced code blocks with Pygments."""
    if not markdown_text:
        return ""
    try:
        return await asyncio.to_thread(_convert, markdown_text)
    except Exception as e:
        logger.error(f"Failed to render markdown: {e}")
        raise RenderError(f"Failed to render markdown: {e}") from e


def highlight_css(style: str = "monokai") -> str:
    """Stylesheet for the token classes emitted inside highlighted code blocks."""
    return HtmlFormatter(style=style).get_style_defs(f".{HIGHLIGHT_CSS_CLASS}")
