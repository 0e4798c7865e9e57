# src/wareki/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_NORTH_COURT = "WAREKI_NORTH_COURT"
ENV_LIMIT_DAYS = "WAREKI_LIMIT_DAYS"


def _env_truthy(name: str) -> bool:
    v = os.environ.get(name, "")
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    v = os.environ.get(name, "").strip()
    if not v:
        return default
    try:
        return int(v)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer (got {v!r})") from e


@dataclass(frozen=True)
class WarekiConfig:
    """
    Calendar-level configuration.

    north_court:
        南北朝期 (1331..1392) の元号を北朝側で返すか。デフォルトは南朝。
        それ以外の年には影響しない。
    """
    north_court: bool = False


@dataclass(frozen=True)
class ApiConfig:
    """
    /range 系エンドポイントの日数上限。
    """
    limit_days: int = 370
    max_limit_days: int = 2000


@dataclass(frozen=True)
class AppConfig:
    wareki: WarekiConfig = field(default_factory=WarekiConfig)
    api: ApiConfig = field(default_factory=ApiConfig)


def load_config() -> AppConfig:
    """
    環境変数から設定を作る。
      WAREKI_NORTH_COURT=1  -> 北朝の元号
      WAREKI_LIMIT_DAYS=N   -> range の既定上限
    """
    api = ApiConfig()
    limit = _env_int(ENV_LIMIT_DAYS, api.limit_days)
    if not (1 <= limit <= api.max_limit_days):
        raise ValueError(f"{ENV_LIMIT_DAYS} must be in 1..{api.max_limit_days} (got {limit})")
    return AppConfig(
        wareki=WarekiConfig(north_court=_env_truthy(ENV_NORTH_COURT)),
        api=ApiConfig(limit_days=limit, max_limit_days=api.max_limit_days),
    )
