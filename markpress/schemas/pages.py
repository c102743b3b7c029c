from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from markpress.schemas.post import PartialPost
from markpress.settings import SiteConfig


class PageProps(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_title: str
    site: SiteConfig


class HomeProps(PageProps):
    page_title: str = "Home"


class BlogIndexProps(PageProps):
    page_title: str = "Blog"
    hero_post: Optional[PartialPost] = None
    more_posts: List[PartialPost] = []


class PostProps(PageProps):
    post: PartialPost


class StaticPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
