import logging
from pathlib import Path

import pytest

from pybreakout.config_loader import (
    ConfigProfile,
    default_model_version,
    default_prediction_year,
    resolve_config,
)


def test_profile_build_applies_weight_and_section_overrides():
    profile = ConfigProfile(
        version="tuned",
        weights={"hardHitRate": 0.16, "barrelRate": 0.12},
        overrides={
            "age_curve": {"steps": [[23, 1.20], [26, 1.30], [28, 1.00], [30, 0.85]]},
            "cohort": {"star_woba": 0.360},
        },
    )

    config = profile.build()

    assert config.version == "tuned"
    assert config.weights["hardHitRate"] == pytest.approx(0.16)
    assert config.weights["barrelRate"] == pytest.approx(0.12)
    assert config.weight_total == pytest.approx(1.0)
    assert config.age_curve.steps == ((23, 1.20), (26, 1.30), (28, 1.00), (30, 0.85))
    assert config.cohort.star_woba == pytest.approx(0.360)
    # untouched sections keep their defaults
    assert config.sample_curve.floor == pytest.approx(0.60)


def test_profile_default_version_label():
    assert ConfigProfile().build().version == "v5.4+profile"


def test_profile_rejects_unbalanced_weights():
    with pytest.raises(ValueError):
        ConfigProfile(weights={"hardHitRate": 0.30}).build()


def test_profile_rejects_unknown_section_and_setting():
    with pytest.raises(ValueError, match="section"):
        ConfigProfile(overrides={"presentation": {"color": "red"}}).build()
    with pytest.raises(ValueError, match="elite"):
        ConfigProfile(overrides={"elite": {"mega_bonus": 2.0}}).build()


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "profile.json"
    ConfigProfile(version="saved", weights={"batSpeed": 0.10, "xwobaLevel": 0.02}).save(path)

    loaded = ConfigProfile.load(path)

    assert loaded.version == "saved"
    assert loaded.weights == {"batSpeed": 0.10, "xwobaLevel": 0.02}
    assert resolve_config(profile=path).version == "saved"


def test_default_prediction_year_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PYBREAKOUT_DEFAULT_YEAR", raising=False)
    assert default_prediction_year() == 2026

    monkeypatch.setenv("PYBREAKOUT_DEFAULT_YEAR", "2025")
    assert default_prediction_year() == 2025


def test_invalid_year_env_falls_back(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    monkeypatch.setenv("PYBREAKOUT_DEFAULT_YEAR", "next year")

    with caplog.at_level(logging.WARNING):
        assert default_prediction_year() == 2026
    assert "PYBREAKOUT_DEFAULT_YEAR" in caplog.text


def test_unknown_env_model_falls_back(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    monkeypatch.setenv("PYBREAKOUT_MODEL", "v0")

    assert default_model_version() == "v0"
    with caplog.at_level(logging.WARNING):
        assert resolve_config().version == "v5.4"
    assert "PYBREAKOUT_MODEL" in caplog.text


def test_explicit_unknown_model_raises(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PYBREAKOUT_MODEL", raising=False)

    with pytest.raises(KeyError):
        resolve_config("v0")
