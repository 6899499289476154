"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        cli_log_level: Logging level for console commands. Kept above INFO
            so expected failures print only the presenter lines on stderr.
        default_locale: Locale used when a request does not ask for one.
        fallback_locale: Locale consulted when a key is missing.
        lang_path: Directory holding the ``<locale>.json`` catalogs.
        templates_path: Directory holding the Jinja2 error templates.
        default_http_transport: Presenter used when the Accept header
            expresses no preference (``http_json`` or ``http_html``).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for write endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Exception Boundary"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    cli_log_level: str = "WARNING"

    default_locale: str = "en"
    fallback_locale: str = "en"
    lang_path: Path = PACKAGE_ROOT / "shared" / "i18n" / "lang"
    templates_path: Path = PACKAGE_ROOT / "templates"
    default_http_transport: str = "http_json"

    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"


settings = Settings()
