from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class SiteConfig(BaseModel):
    """Site-wide constants handed to the page assembler and the templates."""

    model_config = ConfigDict(frozen=True)

    site_name: str
    site_title: str
    site_description: str
    base_url: str
    github_url: str
    twitter_url: str
    twitter_handle: str
    source_repo_url: str
    card_image: str
    highlight_style: str = "monokai"

    def post_url(self, slug: str) -> str:
        return f"{self.base_url.rstrip('/')}/blog/{slug}"

    def source_url(self, path: str) -> str:
        return f"{self.source_repo_url.rstrip('/')}/{path.lstrip('/')}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "_posts"
    OUTPUT_DIR: str = "out"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Site
    SITE_NAME: str = "Markpress"
    SITE_TITLE: str = "Notes for Full-Stack Developers"
    SITE_DESCRIPTION: str = (
        "Tutorials and tips for full-stack developers to build apps with "
        "TypeScript / JavaScript, React, React Native and more."
    )
    BASE_URL: str = "http://localhost:3000"
    GITHUB_URL: str = "https://github.com/"
    TWITTER_URL: str = "https://twitter.com/"
    TWITTER_HANDLE: str = ""
    SOURCE_REPO_URL: str = "https://github.com/"
    CARD_IMAGE: str = "/assets/card-image.png"

    # Pygments style used for highlighted code blocks
    HIGHLIGHT_STYLE: str = "monokai"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    def site_config(self) -> SiteConfig:
        return SiteConfig(
            site_name=self.SITE_NAME,
            site_title=self.SITE_TITLE,
            site_description=self.SITE_DESCRIPTION,
            base_url=self.BASE_URL,
            github_url=self.GITHUB_URL,
            twitter_url=self.TWITTER_URL,
            twitter_handle=self.TWITTER_HANDLE,
            source_repo_url=self.SOURCE_REPO_URL,
            card_image=self.CARD_IMAGE,
            highlight_style=self.HIGHLIGHT_STYLE,
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
