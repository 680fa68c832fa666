from __future__ import annotations

import pytest

from subalign.config import DEFAULT_MIN_CUE_GAP_S, AlignerSettings, SegmenterSettings
from subalign.exceptions import ConfigurationError
from subalign.models.partition import SegmentationMode, SegmenterConfig


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (SegmentationMode.SHORT, SegmenterConfig(max_segment_s=60.0, min_segment_s=15.0)),
        (SegmentationMode.NORMAL, SegmenterConfig(max_segment_s=180.0, min_segment_s=30.0)),
        (SegmentationMode.LONG, SegmenterConfig(max_segment_s=480.0, min_segment_s=120.0)),
    ],
)
def test_segmenter_settings_mode_presets(mode: SegmentationMode, expected: SegmenterConfig) -> None:
    assert SegmenterSettings(mode=mode).to_config() == expected


def test_segmenter_settings_overrides_win_over_preset() -> None:
    config = SegmenterSettings(mode=SegmentationMode.SHORT, max_segment_s=90.0).to_config()
    assert config == SegmenterConfig(max_segment_s=90.0, min_segment_s=15.0)


def test_segmenter_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SEGMENTER_MODE", "long")
    monkeypatch.setenv("SEGMENTER_MIN_SEGMENT_S", "60")
    config = SegmenterSettings().to_config()
    assert config == SegmenterConfig(max_segment_s=480.0, min_segment_s=60.0)


def test_segmenter_settings_rejects_min_above_max() -> None:
    with pytest.raises(ConfigurationError):
        SegmenterSettings(max_segment_s=20.0, min_segment_s=30.0).to_config()


def test_segmenter_settings_rejects_non_positive_max() -> None:
    with pytest.raises(ConfigurationError):
        SegmenterSettings(max_segment_s=0.0)


def test_aligner_settings_defaults() -> None:
    settings = AlignerSettings()
    assert settings.min_cue_gap_s == pytest.approx(DEFAULT_MIN_CUE_GAP_S)
    assert settings.vtt_header


def test_settings_log_path_is_absolute(settings) -> None:
    assert settings.log_path.is_absolute()
    assert settings.log_path.name == "logs"


def test_segmenter_settings_rejects_unknown_mode() -> None:
    with pytest.raises(ConfigurationError, match="SEGMENTER_MODE"):
        SegmenterSettings(mode="huge")


def test_segmenter_settings_mode_is_case_insensitive() -> None:
    assert SegmenterSettings(mode="LONG").mode is SegmentationMode.LONG


def test_segmenter_settings_with_overrides_applies_given_values() -> None:
    base = SegmenterSettings(mode=SegmentationMode.NORMAL)
    updated = base.with_overrides(mode="short", min_segment_s=10.0)
    assert updated.to_config() == SegmenterConfig(max_segment_s=60.0, min_segment_s=10.0)
    assert base.mode is SegmentationMode.NORMAL


def test_segmenter_settings_with_overrides_revalidates_limits() -> None:
    with pytest.raises(ConfigurationError, match="MAX_SEGMENT_S"):
        SegmenterSettings().with_overrides(max_segment_s=-5.0)
    with pytest.raises(ConfigurationError, match="MIN_SEGMENT_S"):
        SegmenterSettings().with_overrides(min_segment_s=-1.0)
