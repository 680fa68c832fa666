"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subalign.exceptions import ConfigurationError
from subalign.models.partition import SEGMENTATION_PRESETS, SegmentationMode, SegmenterConfig

_ENV_FILES = (".env", "../.env")

DEFAULT_MIN_CUE_GAP_S = 1.0 / 12.0
DEFAULT_VTT_HEADER = "Auto-generated by SubAlign (forced alignment against ASR word timestamps)"


class SegmenterSettings(BaseSettings):
    """Segmenter (audio partitioning) configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SEGMENTER_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mode: SegmentationMode = SegmentationMode.NORMAL
    # Explicit overrides win over the mode preset.
    max_segment_s: float | None = None
    min_segment_s: float | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _validate_mode(cls, value: object) -> object:
        if isinstance(value, SegmentationMode):
            return value
        try:
            return SegmentationMode(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(m.value for m in SegmentationMode)
            raise ConfigurationError(f"SEGMENTER_MODE must be one of: {allowed}") from exc

    @model_validator(mode="after")
    def _validate_limits(self) -> "SegmenterSettings":
        if self.max_segment_s is not None and float(self.max_segment_s) <= 0:
            raise ConfigurationError("SEGMENTER_MAX_SEGMENT_S must be > 0")
        if self.min_segment_s is not None and float(self.min_segment_s) < 0:
            raise ConfigurationError("SEGMENTER_MIN_SEGMENT_S must be >= 0")
        return self

    def with_overrides(
        self,
        *,
        mode: SegmentationMode | str | None = None,
        max_segment_s: float | None = None,
        min_segment_s: float | None = None,
    ) -> "SegmenterSettings":
        """Return a re-validated copy with the given non-None values applied."""
        updates = {
            "mode": mode,
            "max_segment_s": max_segment_s,
            "min_segment_s": min_segment_s,
        }
        values = self.model_dump()
        values.update({key: value for key, value in updates.items() if value is not None})
        return SegmenterSettings(**values)

    def to_config(self) -> SegmenterConfig:
        preset = SEGMENTATION_PRESETS[self.mode]
        max_s = preset.max_segment_s if self.max_segment_s is None else float(self.max_segment_s)
        min_s = preset.min_segment_s if self.min_segment_s is None else float(self.min_segment_s)
        if min_s > max_s:
            raise ConfigurationError(
                f"min_segment_s ({min_s}) must not exceed max_segment_s ({max_s})"
            )
        return SegmenterConfig(max_segment_s=max_s, min_segment_s=min_s)


class AlignerSettings(BaseSettings):
    """Transcript alignment and subtitle emission configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ALIGNER_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_cue_gap_s: float = Field(
        default=DEFAULT_MIN_CUE_GAP_S,
        ge=0,
        description="Minimum perceptible gap between consecutive subtitle cues.",
    )
    vtt_header: str = DEFAULT_VTT_HEADER


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    console: bool = True
    file: str | None = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=5, ge=0)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    log_dir: str = "./logs"

    segmenter: SegmenterSettings = SegmenterSettings()
    aligner: AlignerSettings = AlignerSettings()

    # Logging
    logging: LoggingSettings = LoggingSettings()

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir).expanduser().resolve()
