import asyncio
import logging
import shutil
from pathlib import Path
from typing import List

from jinja2 import Environment
from pydantic import BaseModel

from markpress.schemas.pages import PostProps
from markpress.services.feed_service import build_feed
from markpress.services.markdown_renderer import highlight_css
from markpress.services.page_assembler import PageAssembler
from markpress.views import render_page

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    output_dir: Path
    files: List[Path] = []
    post_slugs: List[str] = []


class SiteBuilder:
    """Resolves every route once and writes the static site to disk."""

    def __init__(self, assembler: PageAssembler, env: Environment):
        self.assembler = assembler
        self.env = env

    async def build(self, output_dir: Path, clean: bool = False) -> BuildReport:
        output_dir = Path(output_dir)
        if clean and output_dir.exists():
            logger.info(f"Removing previous build in {output_dir}")
            shutil.rmtree(output_dir)

        report = BuildReport(output_dir=output_dir)
        site = self.assembler.site

        home = self.assembler.home_props()
        self._write(report, "index.html", render_page(self.env, "home.html", home))

        index = self.assembler.blog_index_props()
        self._write(
            report, "blog/index.html", render_page(self.env, "blog_index.html", index)
        )

        paths = self.assembler.static_paths()
        logger.info(f"Rendering {len(paths)} posts")
        # Any failure propagates and aborts the whole build.
        posts: List[PostProps] = await asyncio.gather(
            *(self.assembler.post_props(path.slug) for path in paths)
        )
        for props in posts:
            self._write(
                report,
                f"blog/{props.post.slug}/index.html",
                render_page(self.env, "post.html", props),
            )
            report.post_slugs.append(props.post.slug)

        feed_posts = ([index.hero_post] if index.hero_post else []) + index.more_posts
        self._write(report, "feed.xml", build_feed(feed_posts, site))
        self._write(report, "assets/highlight.css", highlight_css(site.highlight_style))

        logger.info(f"Wrote {len(report.files)} files to {output_dir}")
        return report

    @staticmethod
    def _write(report: BuildReport, relative: str, body) -> None:
        target = report.output_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(body, bytes):
            target.write_bytes(body)
        else:
            target.write_text(body, encoding="utf-8")
        logger.debug(f"Wrote {target}")
        report.files.append(target)
