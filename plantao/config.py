"""Configuration loading (JSON or YAML)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .holidays import custom_holiday
from .models import Holiday


@dataclass
class PlantaoConfig:
    # Fixed shuffle seed; None draws a fresh order on every generation
    seed: Optional[int] = None
    avoid_consecutive_weekends: bool = True
    bridge_holidays: bool = True
    db_url: str = "sqlite:///plantao.db"
    # Custom holidays added to whatever national list the caller supplies
    holidays: List[Dict[str, Any]] = field(default_factory=list)

    def custom_holidays(self) -> List[Holiday]:
        """Config holidays as models; a missing name or a bad date raises ValueError."""
        out = []
        for entry in self.holidays:
            if not isinstance(entry, dict):
                raise ValueError(f"Holiday entry must be a mapping, got {entry!r}")
            holiday = custom_holiday(str(entry.get("name") or ""), str(entry.get("date") or ""))
            if entry.get("type"):
                holiday.type = str(entry["type"])
            out.append(holiday)
        return out


def load_config(path: str | Path | None = None) -> PlantaoConfig:
    if path is None:
        return PlantaoConfig()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        raw = yaml.safe_load(text) or {}
    else:
        raw = json.loads(text or "{}")
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(PlantaoConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    cfg = PlantaoConfig(**raw)
    if cfg.seed is not None:
        cfg.seed = int(cfg.seed)
    if not isinstance(cfg.holidays, list):
        raise ValueError("Config key 'holidays' must be a list of {date, name} entries")
    cfg.custom_holidays()
    return cfg
