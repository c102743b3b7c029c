import logging
from typing import Tuple

import frontmatter
import yaml

from markpress.exceptions import MalformedContentError

logger = logging.getLogger(__name__)


class ContentParser:
    def parse(self, slug: str, raw: str) -> Tuple[dict, str]:
        """Split a post file into its front matter metadata and markdown body."""
        try:
            parsed = frontmatter.loads(raw)
        except (yaml.YAMLError, TypeError) as e:
            logger.error(f"Failed to parse front matter for {slug}: {e}")
            raise MalformedContentError(slug, f"invalid front matter: {e}") from e

        metadata = parsed.metadata or {}
        return dict(metadata), parsed.content
