"""
Клиент OCR.space, удалённого сервиса распознавания текста.

Принимает файл по ссылке, base64 строкой или с локального диска,
отправляет его в сервис по HTTP и возвращает типизированный результат
с методом just_text() для получения текста.
"""

from ocr_space.client import AsyncOCRSpaceClient, OCRSpaceClient
from ocr_space.config import DEFAULT_URL, Settings, get_settings
from ocr_space.exceptions import ConfigurationError, DecodeError, OCRSpaceError, TransportError
from ocr_space.schemas import (
    FileType,
    Language,
    LocalFile,
    OCREngine,
    OCRParams,
    OCRText,
    ParsedResult,
    TextOverlay,
)

__all__ = [
    "OCRSpaceClient",
    "AsyncOCRSpaceClient",
    "DEFAULT_URL",
    "Settings",
    "get_settings",
    "OCRSpaceError",
    "TransportError",
    "DecodeError",
    "ConfigurationError",
    "OCRParams",
    "Language",
    "FileType",
    "OCREngine",
    "LocalFile",
    "OCRText",
    "ParsedResult",
    "TextOverlay",
]
