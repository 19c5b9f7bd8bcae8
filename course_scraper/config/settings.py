"""Configuration settings for Course Scraper.

All configuration is centralized here using Pydantic Settings for validation
and environment variable support.

Environment Variables:
    BROWSER_HEADLESS: Run browser in headless mode (true/false)
    BROWSER_TIMEOUT: Navigation timeout in milliseconds
    BROWSER_MUTATION_TIMEOUT: Wait for script-injected content in milliseconds
    BROWSER_STEALTH: Apply playwright-stealth to new pages (true/false)
    VALIDATOR_TIMEOUT: URL existence probe timeout in seconds
    SCRAPER_CALL_TIMEOUT: Optional budget for a whole scrape call in seconds
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)


class BrowserSettings(BaseSettings):
    """Browser automation settings."""

    headless: bool = Field(default=True)
    timeout: int = Field(default=60000, ge=5000, le=180000)
    mutation_timeout: int = Field(default=10000, ge=500, le=60000)
    click_timeout: int = Field(default=5000, ge=500, le=60000)
    wait_until: str = Field(default="load")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    viewport_width: int = Field(default=1920, ge=800)
    viewport_height: int = Field(default=1080, ge=600)
    stealth: bool = Field(default=True)

    class Config:
        env_prefix = "BROWSER_"


class ValidatorSettings(BaseSettings):
    """URL existence probe settings."""

    timeout: float = Field(default=15.0, ge=1.0, le=120.0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    class Config:
        env_prefix = "VALIDATOR_"


class ScraperSettings(BaseSettings):
    """Scraper behavior settings."""

    call_timeout: Optional[float] = Field(default=None, ge=1.0)

    class Config:
        env_prefix = "SCRAPER_"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    class Config:
        env_prefix = "LOG_"


class Settings(BaseSettings):
    """Main settings container combining all configuration."""

    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    validator: ValidatorSettings = Field(default_factory=ValidatorSettings)
    scraper: ScraperSettings = Field(default_factory=ScraperSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance
settings = Settings()


# Convenience accessors
def get_browser_settings() -> BrowserSettings:
    """Get browser settings."""
    return settings.browser


def get_validator_settings() -> ValidatorSettings:
    """Get URL validator settings."""
    return settings.validator


def get_scraper_settings() -> ScraperSettings:
    """Get scraper settings."""
    return settings.scraper
