"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docmark.document_models import SlideTitles


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DOCMARK_", extra="ignore")

    app_name: str = Field(default="Docmark API", description="Human readable application name.")
    app_version: str = Field(default="0.1.0", description="Version reported by the health endpoint.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )
    slide_untitled_template: str = Field(
        default="Slide {index}",
        description="Title for outline slides without one; {index} is the 1-based slide number.",
    )
    slide_overview_title: str = Field(
        default="Overview",
        description="Title of the slide opened by bullets that precede the first Markdown heading.",
    )
    upload_fallback_encoding: str = Field(
        default="gb18030",
        description="Encoding tried when an uploaded file is not valid UTF-8.",
    )
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, description="Largest accepted upload.")
    remote_fetch_timeout: float = Field(default=15.0, description="Timeout in seconds for remote fetches.")
    remote_fetch_max_bytes: int = Field(
        default=2 * 1024 * 1024,
        description="Largest remote document that will be downloaded.",
    )
    docx_orientation: Literal["portrait", "landscape"] = Field(
        default="portrait",
        description="Default page orientation of exported DOCX files.",
    )
    docx_margin_twips: int = Field(
        default=1440,
        description="Default page margin of exported DOCX files in twips (1440 = 1 inch).",
    )

    def slide_titles(self) -> SlideTitles:
        return SlideTitles(untitled=self.slide_untitled_template, overview=self.slide_overview_title)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
