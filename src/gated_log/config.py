"""gated_log の設定値を環境変数から読み込む Settings を提供する。

Note:
    - 環境変数は GATED_LOG_ プレフィックスで指定する（例: GATED_LOG_MAX_ENTRIES）
    - log_level は configure_logging() で gated_log 配下のロガーへ反映する
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "gated_log"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GATED_LOG_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    max_entries: int | None = Field(
        None, ge=1, description="Maximum number of lines kept by DataBase (None = unbounded)"
    )
    log_level: str = Field("INFO", description="Level applied to the gated_log logger")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """設定の log_level を gated_log ロガーへ適用する。

    Args:
        settings: 設定（未指定時は get_settings() の値）

    Returns:
        logging.Logger: レベル設定済みの gated_log ロガー

    Raises:
        ValueError: log_level が logging の既知レベル名でない場合

    Note:
        - ハンドラは追加しない。出力先の構成は呼び出し側に委ねる
    """
    settings = settings or get_settings()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.log_level.upper())
    return package_logger
