"""Application configuration — loaded from config.json at project root."""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    table_edition: int = 2025
    table_file: str = ""  # custom need table JSON; overrides table_edition
    job_expense_rate: Decimal = Decimal("0.05")
    additional_pension_cap_rate: Decimal = Decimal("0.04")
    currency: str = "EUR"
    user_name: str = ""


_DEFAULTS = AppConfig()
_cached: Optional[AppConfig] = None
_path_override: Optional[Path] = None


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: current working directory
    return Path.cwd()


def _config_path() -> Path:
    if _path_override is not None:
        return _path_override
    return _find_project_root() / "config.json"


def set_config_path(path: Optional[str]) -> None:
    """Point the config at another file (None restores the default). Clears the cache."""
    global _cached, _path_override
    _path_override = Path(path) if path else None
    _cached = None


def get_config() -> AppConfig:
    global _cached
    if _cached is not None:
        return _cached
    path = _config_path()
    if not path.exists():
        _cached = AppConfig()
        return _cached
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        _cached = AppConfig(
            table_edition=int(data.get("table_edition", _DEFAULTS.table_edition)),
            table_file=data.get("table_file", _DEFAULTS.table_file) or "",
            job_expense_rate=Decimal(str(data.get("job_expense_rate", 0.05))),
            additional_pension_cap_rate=Decimal(str(data.get("additional_pension_cap_rate", 0.04))),
            currency=data.get("currency", _DEFAULTS.currency),
            user_name=data.get("user_name", ""),
        )
    except Exception as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        _cached = AppConfig()
    return _cached


def save_config(cfg: AppConfig) -> None:
    global _cached
    _cached = cfg
    data = {
        "table_edition": cfg.table_edition,
        "table_file": cfg.table_file,
        "job_expense_rate": float(cfg.job_expense_rate),
        "additional_pension_cap_rate": float(cfg.additional_pension_cap_rate),
        "currency": cfg.currency,
        "user_name": cfg.user_name,
    }
    _config_path().write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
