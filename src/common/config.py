"""環境変数ベースの設定管理。"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parents[1] / "cmu" / "data"


class Settings(BaseSettings):
    """アプリケーション全体の設定。"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # None: pronunciations come from the cmudict distribution
    cmu_dict_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("CMU_DICT_PATH", "CMUDICT_PATH"),
    )
    cmu_phones_path: Path = Field(
        default=DATA_DIR / "cmuphones.txt",
        validation_alias=AliasChoices("CMU_PHONES_PATH", "CMUPHONES_PATH"),
    )
    cache_phone_maps: bool = Field(
        default=True,
        validation_alias=AliasChoices("CMU_CACHE_PHONE_MAPS", "CACHE_PHONE_MAPS"),
    )
    max_text_chars: int = Field(
        default=256,
        validation_alias=AliasChoices("TRANSLITERATE_MAX_CHARS", "MAX_TEXT_CHARS"),
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("LOG_LEVEL", "KANA_LOG_LEVEL"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定をシングルトンで取得する。"""

    return Settings()
