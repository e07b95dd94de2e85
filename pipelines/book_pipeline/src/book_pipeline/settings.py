"""
Configuration settings for the book pipeline.

Environment variables:
    FOURWORD_WORD_MINIMUM         Minimum total word count of the book
    FOURWORD_SEED                 Random seed (omit for a different book every run)
    FOURWORD_ID_BITS              Width of section ids in bits
    FOURWORD_ID_MAX_ATTEMPTS      Redraws allowed before the id space counts as exhausted
    FOURWORD_FIGURE_SPREAD        Standard deviation of list-of-figures numbers
    FOURWORD_FIGURES_MIN          Fewest figures in a list (inclusive)
    FOURWORD_FIGURES_MAX          Most figures in a list (exclusive)
    FOURWORD_FOOTNOTE_ODDS        One figure in this many gets a footnote marker
    FOURWORD_AFTERWORD_META_ODDS  One afterword in this many is the narrator's message
    FOURWORD_LUCKY_MIN            Fewest lucky section numbers (inclusive)
    FOURWORD_LUCKY_MAX            Most lucky section numbers (exclusive)
    FOURWORD_LOG_LEVEL            Logging level for the CLI
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Book pipeline settings."""

    model_config = SettingsConfigDict(
        env_prefix="FOURWORD_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    word_minimum: int = Field(default=50_000, ge=0)
    seed: int | None = None

    # Section ids
    id_bits: int = Field(default=16, ge=1, le=63)
    id_max_attempts: int = Field(default=4096, ge=1)

    # List of figures
    figure_spread: float = Field(default=3.0, gt=0)
    figures_min: int = Field(default=5, ge=0)
    figures_max: int = Field(default=30, ge=1)
    footnote_odds: int = Field(default=10, ge=1)

    # Afterword
    afterword_meta_odds: int = Field(default=10_000_000, ge=1)
    lucky_min: int = Field(default=3, ge=1)
    lucky_max: int = Field(default=16, ge=2)

    log_level: str = "WARNING"

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if self.figures_min >= self.figures_max:
            raise ValueError("figures_min must be below figures_max")
        if self.lucky_min >= self.lucky_max:
            raise ValueError("lucky_min must be below lucky_max")
        return self


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
