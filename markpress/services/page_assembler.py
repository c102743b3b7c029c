import logging
from typing import Awaitable, Callable, List

from markpress.schemas.pages import BlogIndexProps, HomeProps, PostProps, StaticPath
from markpress.schemas.post import INDEX_FIELDS, POST_PAGE_FIELDS, PostField
from markpress.services.markdown_renderer import render_to_html
from markpress.services.posts_service import PostsService
from markpress.settings import SiteConfig

logger = logging.getLogger(__name__)

Renderer = Callable[[str], Awaitable[str]]


class PageAssembler:
    """Builds the prop bundle for each route of the site."""

    def __init__(
        self,
        posts_service: PostsService,
        site: SiteConfig,
        renderer: Renderer = render_to_html,
    ):
        self.posts_service = posts_service
        self.site = site
        self.renderer = renderer

    def home_props(self) -> HomeProps:
        return HomeProps(site=self.site)

    def blog_index_props(self) -> BlogIndexProps:
        posts = self.posts_service.get_all_posts(INDEX_FIELDS)
        hero_post = posts[0] if posts else None
        return BlogIndexProps(site=self.site, hero_post=hero_post, more_posts=posts[1:])

    async def post_props(self, slug: str) -> PostProps:
        post = self.posts_service.get_post_by_slug(slug, POST_PAGE_FIELDS)
        content = await self.renderer(post.content or "")
        logger.debug(f"Rendered {slug} ({len(content)} chars of HTML)")
        return PostProps(
            page_title=post.title,
            site=self.site,
            post=post.with_content(content),
        )

    def static_paths(self) -> List[StaticPath]:
        """Every post page to prebuild. Slugs outside this list get no page."""
        return [
            StaticPath(slug=post.slug)
            for post in self.posts_service.get_all_posts([PostField.SLUG])
        ]
