"""Configuration management for the case consensus engine.

This module handles loading engine settings from environment variables and an
optional ``.env`` file, and defines the per-category frequency thresholds a
caller may pass to :func:`case_consensus.aggregate_cases`.
"""

from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_THRESHOLD = 1.0


class EngineSettings(BaseSettings):
    """Settings for the aggregation engine."""

    model_config = SettingsConfigDict(
        env_prefix="CASE_CONSENSUS_",  # Will look for CASE_CONSENSUS_LOG_LEVEL etc.
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum log level")

    # Ranking caps
    top_precedents: int = Field(default=10, ge=1, description="Precedents kept in the ranking")
    legal_implications_cap: int = Field(default=5, ge=0)
    practical_implications_cap: int = Field(default=5, ge=0)
    further_inquiry_cap: int = Field(default=3, ge=0)
    dissenting_opinions_cap: int = Field(default=3, ge=0)
    keyword_limit: int = Field(default=3, ge=1, description="Aggregated keywords returned")

    # Source file URLs equal to one of these are never aggregated
    source_url_sentinels: List[str] = Field(
        default_factory=lambda: ["not visible", "No available download link"]
    )


class ThresholdOptions(BaseModel):
    """Per-category cumulative-weight cutoffs.

    Every field defaults to 1.0. Zero or missing values also fall back to 1.0,
    so callers can pass partially populated option dicts. Field aliases keep
    the camelCase option names used by upstream tooling.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    issues: float = Field(DEFAULT_THRESHOLD, alias="issueFrequencyThreshold")
    statutes: float = Field(DEFAULT_THRESHOLD, alias="statuteFrequencyThreshold")
    arguments: float = Field(DEFAULT_THRESHOLD, alias="argumentsFrequencyThreshold")
    evidence: float = Field(DEFAULT_THRESHOLD, alias="evidenceFrequencyThreshold")
    plaintiffs: float = Field(DEFAULT_THRESHOLD, alias="plaintiffsFrequencyThreshold")
    defendants: float = Field(DEFAULT_THRESHOLD, alias="defendentsFrequencyThreshold")
    court_reasoning: float = Field(DEFAULT_THRESHOLD, alias="courtReasoningFrequencyThreshold")
    final_orders: float = Field(DEFAULT_THRESHOLD, alias="finalOrderFrequencyThreshold")
    case_urls: float = Field(DEFAULT_THRESHOLD, alias="caseUrlFrequencyThreshold")
    source_file_urls: float = Field(DEFAULT_THRESHOLD, alias="sourceFileFrequencyThreshold")

    @field_validator("*", mode="before")
    @classmethod
    def default_falsy_to_one(cls, v: Optional[float]) -> float:
        """Zero and ``None`` mean "not configured"."""
        if not v:
            return DEFAULT_THRESHOLD
        return v


def load_config() -> EngineSettings:
    """Load engine settings with proper fallbacks.

    Priority:
    1. Environment variables
    2. .env file
    3. Default values

    Returns:
        EngineSettings: Loaded settings
    """
    try:
        settings = EngineSettings()
        if not settings.source_url_sentinels:
            logger.warning(
                "No source URL sentinels configured; placeholder download links "
                "will be aggregated as ordinary URLs"
            )
        return settings
    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise
