import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from markpress.schemas.pages import PageProps
from markpress.services.feed_service import parse_post_date

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def format_date(value: str) -> str:
    """'2021-06-01' -> 'June 1, 2021'. Unparseable values pass through."""
    parsed = parse_post_date(value)
    if parsed is None:
        return value or ""
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = format_date
    return env


def render_page(env: Environment, template_name: str, props: PageProps) -> str:
    logger.debug(f"Rendering {template_name} for {props.page_title!r}")
    return env.get_template(template_name).render(props=props, site=props.site)
