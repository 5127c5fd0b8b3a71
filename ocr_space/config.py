"""
Конфигурация клиента OCR.space.

Значения читаются из переменных окружения с префиксом OCR_SPACE_
или из .env файла. Все поля имеют значения по умолчанию, поэтому
импорт пакета не требует наличия .env.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "https://api.ocr.space/parse/image"


class Settings(BaseSettings):
    """
    Настройки клиента OCR.space.

    Attributes:
        api_key: API ключ сервиса (передаётся в заголовке apikey)
        url: адрес эндпоинта распознавания
        timeout_seconds: таймаут HTTP транспорта; None означает без таймаута
    """

    model_config = SettingsConfigDict(
        env_prefix="OCR_SPACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Авторизация ---
    api_key: str = ""

    # --- Эндпоинт ---
    url: str = Field(default=DEFAULT_URL, min_length=1)

    # --- Транспорт ---
    # Клиент сам таймаут не навязывает, только если он задан здесь
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Возвращает настройки, прочитанные из окружения (кэшируются)."""
    return Settings()
