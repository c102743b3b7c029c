from typing import Optional

from markpress.repos.posts_repo import FilePostsRepo
from markpress.services.content_parser import ContentParser
from markpress.services.page_assembler import PageAssembler
from markpress.services.posts_service import PostsService
from markpress.services.site_builder import SiteBuilder
from markpress.settings import Settings, SiteConfig, settings
from markpress.views import create_environment


def get_posts_repo(app_settings: Settings = settings) -> FilePostsRepo:
    return FilePostsRepo(app_settings.content_path)


def get_posts_service(app_settings: Settings = settings) -> PostsService:
    return PostsService(repo=get_posts_repo(app_settings), parser=ContentParser())


def get_page_assembler(
    app_settings: Settings = settings, site: Optional[SiteConfig] = None
) -> PageAssembler:
    return PageAssembler(
        posts_service=get_posts_service(app_settings),
        site=site or app_settings.site_config(),
    )


def get_site_builder(
    app_settings: Settings = settings, site: Optional[SiteConfig] = None
) -> SiteBuilder:
    return SiteBuilder(
        assembler=get_page_assembler(app_settings, site),
        env=create_environment(),
    )
