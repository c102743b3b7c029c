import datetime
import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from markpress.exceptions import MalformedContentError, PostNotFoundError
from markpress.repos.posts_repo import FilePostsRepo
from markpress.schemas.post import FieldSpec, PartialPost, Post, normalize_fields
from markpress.services.content_parser import ContentParser

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo: FilePostsRepo, parser: Optional[ContentParser] = None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def get_post_by_slug(self, slug: str, fields: Iterable[FieldSpec]) -> PartialPost:
        """Load one post and return only the requested fields."""
        wanted = normalize_fields(fields)
        return self.load_post(slug).select(wanted)

    def get_all_posts(self, fields: Iterable[FieldSpec]) -> List[PartialPost]:
        """Load every post, newest first. Posts sharing a date keep filename order."""
        wanted = normalize_fields(fields)
        posts = [self.load_post(slug) for slug in self.repo.list_slugs()]
        posts.sort(key=lambda post: post.date, reverse=True)
        return [post.select(wanted) for post in posts]

    def list_slugs(self) -> List[str]:
        return self.repo.list_slugs()

    def load_post(self, slug: str) -> Post:
        try:
            raw = self.repo.read_post(slug)
        except PostNotFoundError:
            logger.error(f"No post file found for slug {slug!r}")
            raise
        except (UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to read post {slug}: {e}")
            raise MalformedContentError(slug, f"unreadable file: {e}") from e
        metadata, content = self.parser.parse(slug, raw)
        return build_post(
            slug, metadata, content, default_path=self.repo.relative_path(slug)
        )


def build_post(slug: str, metadata: dict, content: str, *, default_path: str) -> Post:
    """Validate front matter into a Post, deriving path and ogImage when absent."""
    cover_image = metadata.get("coverImage")
    post_data = {
        "slug": slug,
        "title": _scalar_to_str(metadata.get("title")),
        "description": _scalar_to_str(metadata.get("description")),
        "date": metadata.get("date"),
        "author": metadata.get("author"),
        "coverImage": cover_image,
        "path": metadata.get("path") or default_path,
        "ogImage": _normalize_og_image(metadata.get("ogImage"), cover_image),
        "content": content,
    }
    try:
        return Post(**post_data)
    except ValidationError as e:
        logger.warning(f"Failed to validate post {slug}: {e}")
        raise MalformedContentError(slug, _describe_errors(e)) from e


def _scalar_to_str(value):
    # YAML turns `title: 2021` or `title: Yes` into int or bool
    if isinstance(value, (bool, int, float, datetime.date)):
        return str(value)
    return value


def _normalize_og_image(value, cover_image):
    if isinstance(value, dict) and value.get("url"):
        return {"url": value["url"]}
    if isinstance(value, str) and value:
        return {"url": value}
    if cover_image is None:
        return None
    return {"url": cover_image}


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
