"""
Configuration management using Pydantic Settings.

Automatically loads the marker tables from resources/markers.yaml and runtime
settings from environment variables. Provides type-safe access to:
- Period header, section numeral, subsection and bullet glyph tables
- Highlight markers and featured-title keywords
- Caption pairing policy and share-link base URL
"""

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from news_trends_text.validators import validate_caption_pairing

# Bundled with the package as package data
RESOURCES_DIR = Path(__file__).parent / 'resources'


class PeriodHeaderConfig(BaseModel):
    """Pieces of the period header line: ``♧ 2.3 月 News & Trends ♧``."""

    glyph: str = Field(..., min_length=1, description="Glyph opening and closing the header")
    weekdays: str = Field(
        ...,
        min_length=1,
        description="Day-of-week ideographs, one character each",
        examples=["月火水木金土日"]
    )
    phrase: str = Field(..., min_length=1, description="Literal phrase inside the header")


def _find_config_file(filename: str) -> Path:
    """
    Locate a bundled resource file, falling back to config/ in the working directory.

    Raises:
        FileNotFoundError: If neither location holds the file
    """
    config_path = RESOURCES_DIR / filename

    if not config_path.exists():
        # Try alternative: relative to current working directory
        config_path = Path('config') / filename

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found at {config_path}. "
            f"Ensure {filename} is installed with the package under {RESOURCES_DIR}."
        )

    return config_path


class MarkerConfig(BaseSettings):
    """
    Marker tables automatically loaded from the bundled resources/markers.yaml.

    Every glyph set the parser recognizes lives here, so supporting a new
    bulletin variant is a data change rather than a code change.

    Attributes:
        period_header: Header glyph, weekday alphabet and phrase
        period_fallback_title: Title template for periods without a label
        section_numerals: Ordered numeral glyphs opening a section
        section_fallback_title: Title template for sections without a caption
        subsection_glyphs: Glyphs opening a subsection (besides ``<digits>.``)
        highlight_markers: Substrings marking a news line as highlighted
        bullet_glyphs: Leading bullets stripped from news lines
        featured_title_keywords: Keywords marking a subsection as featured

    Example:
        >>> config = MarkerConfig()
        >>> config.section_numerals[0]
        'Ⅰ'
        >>> config.is_highlight_marker('급등')
        True
    """

    period_header: PeriodHeaderConfig
    period_fallback_title: str = Field(
        default="Week {ordinal}",
        description="Fallback period title, formatted with the 1-based ordinal"
    )
    section_numerals: List[str] = Field(
        ...,
        min_length=1,
        description="Section numeral glyphs in order"
    )
    section_fallback_title: str = Field(
        default="Section {ordinal}",
        description="Fallback section title, formatted with the 1-based ordinal"
    )
    subsection_glyphs: List[str] = Field(default_factory=list)
    highlight_markers: List[str] = Field(default_factory=list)
    bullet_glyphs: List[str] = Field(default_factory=list)
    featured_title_keywords: List[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load marker tables from YAML if no values were provided.

        The file is the bundled resources/markers.yaml unless
        AppConfig.markers_file names another one.
        """
        # If data already has values (e.g., from tests), don't override
        if data:
            return data

        override = get_app_config().markers_file
        config_path = Path(override) if override else _find_config_file('markers.yaml')

        if not config_path.exists():
            raise FileNotFoundError(f"Marker table not found at {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        return yaml_data

    @field_validator('section_numerals', 'subsection_glyphs', 'bullet_glyphs')
    @classmethod
    def reject_empty_glyphs(cls, v: List[str]) -> List[str]:
        """An empty glyph would match everywhere."""
        if any(not glyph for glyph in v):
            raise ValueError(f"Glyph tables must not contain empty entries, got: {v}")
        return v

    @field_validator('period_fallback_title', 'section_fallback_title')
    @classmethod
    def require_ordinal_placeholder(cls, v: str) -> str:
        if '{ordinal}' not in v:
            raise ValueError(f"Fallback title must contain '{{ordinal}}', got: '{v}'")
        return v

    def is_highlight_marker(self, marker: Optional[str]) -> bool:
        """
        Check if a string is one of the configured highlight markers.

        Example:
            >>> MarkerConfig().is_highlight_marker('📍')
            True
        """
        if marker is None:
            return False
        return marker in self.highlight_markers

    def is_featured_title(self, title: str) -> bool:
        """
        Check if a subsection title carries a featured keyword (case-insensitive).

        Example:
            >>> MarkerConfig().is_featured_title("▶ sizzling stocks")
            True
        """
        folded = title.casefold()
        return any(keyword.casefold() in folded for keyword in self.featured_title_keywords)

    def fallback_period_title(self, ordinal: int) -> str:
        return self.period_fallback_title.format(ordinal=ordinal)

    def fallback_section_title(self, ordinal: int) -> str:
        return self.section_fallback_title.format(ordinal=ordinal)


# Singleton pattern - loaded once, cached forever
_config: Optional[MarkerConfig] = None


def get_config() -> MarkerConfig:
    """
    Get global marker config instance (lazy-loaded singleton).

    Returns:
        Singleton MarkerConfig instance

    Example:
        >>> config = get_config()
        >>> config is get_config()
        True
    """
    global _config
    if _config is None:
        _config = MarkerConfig()
    return _config


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        CAPTION_PAIRING: "positional" (default) or "anchored"
        MARKERS_FILE: Path to an alternative marker table
        SHARE_BASE_URL: Base URL for share links
        LOG_LEVEL: Logging level for the command line entry point

    Example:
        >>> config = get_app_config()
        >>> config.caption_pairing
        'positional'
    """

    caption_pairing: str = Field(
        default="positional",
        description="How captions are attached to delimiter-split blocks"
    )

    markers_file: Optional[str] = Field(
        default=None,
        description="Optional path overriding the bundled markers.yaml"
    )

    share_base_url: str = Field(
        default="http://localhost:3000/",
        description="Base URL that share links point at"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command line entry point"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    _validate_caption_pairing = field_validator('caption_pairing')(validate_caption_pairing)


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_config() -> None:
    """Drop cached configuration so the next access reloads it."""
    global _config, _app_config
    _config = None
    _app_config = None

