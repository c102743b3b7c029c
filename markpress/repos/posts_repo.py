import logging
from pathlib import Path
from typing import List

from markpress.exceptions import PostNotFoundError

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilePostsRepo:
    """Read-only access to the directory of markdown posts."""

    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory {self.content_dir} does not exist")
            return []
        return sorted(
            path
            for path in self.content_dir.iterdir()
            if path.is_file() and self._is_valid(path)
        )

    def list_slugs(self) -> List[str]:
        return [path.stem for path in self.list_post_files()]

    def get_post_file(self, slug: str) -> Path:
        if not self._is_valid_slug(slug):
            raise PostNotFoundError(slug)
        path = self.content_dir / f"{slug}{POST_SUFFIX}"
        if not path.is_file():
            raise PostNotFoundError(slug)
        return path

    def read_post(self, slug: str) -> str:
        return self.get_post_file(slug).read_text(encoding="utf-8")

    def relative_path(self, slug: str) -> str:
        """Path of the source file as seen from the repository root."""
        return f"{self.content_dir.name}/{slug}{POST_SUFFIX}"

    @staticmethod
    def _is_valid(path: Path) -> bool:
        return path.suffix == POST_SUFFIX and not path.name.startswith(".")

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        return bool(slug) and "/" not in slug and "\\" not in slug and not slug.startswith(".")
