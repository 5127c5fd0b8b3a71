"""
Сервисы клиента OCR.space.

Модули:
    - payload: построение формы / multipart и заголовков запроса
    - decoder: разбор JSON ответа в OCRText
"""

from ocr_space.services.decoder import decode_response
from ocr_space.services.payload import (
    auth_headers,
    build_base64_form,
    build_multipart,
    build_url_form,
    read_local_file,
)

__all__ = [
    "decode_response",
    "auth_headers",
    "build_url_form",
    "build_base64_form",
    "build_multipart",
    "read_local_file",
]
