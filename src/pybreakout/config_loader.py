"""Persist and load scoring override profiles."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from pybreakout.config import DEFAULT_MODEL_VERSION, ScoringConfig, get_config


logger = logging.getLogger(__name__)

_MODEL_ENV = "PYBREAKOUT_MODEL"
_YEAR_ENV = "PYBREAKOUT_DEFAULT_YEAR"
_YEAR_DEFAULT = 2026

# Sections of ScoringConfig that a profile may override field by field.
_SECTIONS = ("cohort", "age_curve", "sample_curve", "elite", "advisory")


def _tupled(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_tupled(item) for item in value)
    return value


@dataclass
class ConfigProfile:
    base_version: str = DEFAULT_MODEL_VERSION
    version: Optional[str] = None
    weights: Dict[str, float] = field(default_factory=dict)
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "ConfigProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            base_version=data.get("base_version", DEFAULT_MODEL_VERSION),
            version=data.get("version"),
            weights=data.get("weights", {}),
            overrides=data.get("overrides", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "base_version": self.base_version,
            "version": self.version,
            "weights": self.weights,
            "overrides": self.overrides,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def build(self) -> ScoringConfig:
        """Apply the overrides on top of the base model; weights must still sum to 1."""

        base = get_config(self.base_version)
        changes: Dict[str, Any] = {"version": self.version or f"{base.version}+profile"}
        if self.weights:
            changes["weights"] = {**base.weights, **self.weights}
        for section, values in self.overrides.items():
            if section not in _SECTIONS:
                raise ValueError(f"Unknown config section {section!r}")
            current = getattr(base, section)
            allowed = {f.name for f in fields(current)}
            unknown = sorted(set(values) - allowed)
            if unknown:
                raise ValueError(f"Unknown {section} settings: {', '.join(unknown)}")
            changes[section] = replace(current, **{k: _tupled(v) for k, v in values.items()})
        return replace(base, **changes)


def default_model_version() -> str:
    return os.getenv(_MODEL_ENV) or DEFAULT_MODEL_VERSION


def default_prediction_year() -> int:
    raw = os.getenv(_YEAR_ENV)
    if raw is None:
        return _YEAR_DEFAULT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", _YEAR_ENV, raw, _YEAR_DEFAULT)
        return _YEAR_DEFAULT


def resolve_config(version: Optional[str] = None, profile: Optional[Path] = None) -> ScoringConfig:
    """Pick the model from an explicit version, a profile file, or the environment."""

    if profile is not None:
        loaded = ConfigProfile.load(profile)
        if version:
            loaded.base_version = version
        return loaded.build()
    requested = version or default_model_version()
    try:
        return get_config(requested)
    except KeyError:
        if version:
            raise
        logger.warning("Unknown model %s in %s; using %s", requested, _MODEL_ENV, DEFAULT_MODEL_VERSION)
        return get_config(DEFAULT_MODEL_VERSION)
