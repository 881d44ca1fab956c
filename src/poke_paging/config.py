"""設定ファイル読み込み（YAML + pydantic）"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, ConfigErrorCodes
from .models import DEFAULT_BASE_URL, PagingConfig, SourceConfig


class ApiSection(BaseModel):
    """リモート API 設定。"""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = "poke-paging/0.1.0"


class PagingSection(BaseModel):
    """ページング定数。"""

    initial_load_size_hint: int = Field(default=20, ge=1)
    page_size: int = Field(default=20, ge=1)
    prefetch_distance: int = Field(default=10, ge=0)


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class AppConfig(BaseModel):
    """アプリケーション設定全体。"""

    api: ApiSection = Field(default_factory=ApiSection)
    paging: PagingSection = Field(default_factory=PagingSection)
    log: LogSection = Field(default_factory=LogSection)

    def source_config(self) -> SourceConfig:
        return SourceConfig(
            base_url=self.api.base_url,
            timeout_seconds=self.api.timeout_seconds,
            user_agent=self.api.user_agent,
        )

    def paging_config(self) -> PagingConfig:
        return PagingConfig(
            initial_load_size_hint=self.paging.initial_load_size_hint,
            page_size=self.paging.page_size,
            prefetch_distance=self.paging.prefetch_distance,
        )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """base と override をディープマージして新しい辞書を返す。override の値が優先される。"""
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load(base_path: Path, env_path: Path | None = None) -> AppConfig:
    """設定ファイルを読み込んで AppConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースにマージ。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = deep_merge(data, _read_yaml(env_path))
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
