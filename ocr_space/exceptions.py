"""
Исключения клиента OCR.space.

Два класса ошибок на границе клиента:
    - TransportError: сервис недоступен (DNS, соединение, TLS, таймаут, чтение тела)
    - DecodeError: сервис ответил, но тело не разбирается как OCRText

Ошибка обработки, о которой сообщил сам сервис, исключением не является:
она возвращается в полях OCRText.

ConfigurationError (некорректный адрес эндпоинта) выбрасывается при создании
клиента, до любого запроса.
"""

from typing import Optional


class OCRSpaceError(Exception):
    """Базовое исключение клиента."""


class TransportError(OCRSpaceError):
    """Запрос не дошёл до сервиса или ответ не удалось получить."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class DecodeError(OCRSpaceError):
    """
    Тело ответа не является JSON объектом ожидаемой схемы.

    Attributes:
        status_code: HTTP статус ответа
        body: начало тела ответа (для диагностики)
    """

    BODY_EXCERPT_LIMIT = 500

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body[: self.BODY_EXCERPT_LIMIT]


class ConfigurationError(OCRSpaceError, ValueError):
    """Неверная конфигурация клиента (например, некорректный адрес эндпоинта)."""
