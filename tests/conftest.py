import textwrap
from pathlib import Path

import pytest

from markpress.repos.posts_repo import FilePostsRepo
from markpress.services.posts_service import PostsService
from markpress.settings import SiteConfig


def post_text(
    title: str = "A Post",
    date: str = "2021-01-01",
    body: str = "Body text.",
    description: str = "About this post",
    extra: str = "",
) -> str:
    """Markdown file with a complete front matter block."""
    lines = [
        "---",
        f"title: {title}",
        f"description: {description}",
        f"date: {date}",
        "author:",
        "  name: Jane Doe",
        "  picture: /assets/authors/jane.png",
        "coverImage: /assets/blog/cover.jpg",
    ]
    if extra:
        lines.extend(textwrap.dedent(extra).strip().splitlines())
    lines.append("---")
    lines.append(body)
    return "\n".join(lines) + "\n"


def write_post(content_dir: Path, slug: str, text: str) -> Path:
    path = content_dir / f"{slug}.md"
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


class FakeRenderer:
    """Async markdown renderer stand-in that records what it was asked to render."""

    def __init__(self, prefix: str = "<p>rendered</p>"):
        self.prefix = prefix
        self.calls = []

    async def __call__(self, markdown_text: str) -> str:
        self.calls.append(markdown_text)
        return f"{self.prefix}{markdown_text}"


@pytest.fixture
def content_dir(tmp_path) -> Path:
    path = tmp_path / "_posts"
    path.mkdir()
    return path


@pytest.fixture
def posts_service(content_dir) -> PostsService:
    return PostsService(repo=FilePostsRepo(content_dir))


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        site_name="Test Blog",
        site_title="Notes & Tips",
        site_description="A blog used in tests",
        base_url="https://blog.example.com",
        github_url="https://github.com/example",
        twitter_url="https://twitter.com/example",
        twitter_handle="@example",
        source_repo_url="https://github.com/example/blog",
        card_image="/assets/card-image.png",
        highlight_style="default",
    )
