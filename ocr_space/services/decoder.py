"""
Разбор ответа OCR.space в OCRText.

HTTP статус не интерпретируется: решает тело. Всё, что не является
JSON объектом схемы OCRText, превращается в DecodeError.
"""

import logging

import httpx
from pydantic import ValidationError

from ocr_space.exceptions import DecodeError
from ocr_space.schemas import OCRText

logger = logging.getLogger(__name__)


def decode_response(response: httpx.Response) -> OCRText:
    """
    Декодирует тело ответа.

    Args:
        response: прочитанный ответ httpx

    Returns:
        OCRText: результат распознавания (в том числе с ошибкой сервиса)

    Raises:
        DecodeError: тело не JSON, не объект или не соответствует схеме
    """
    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Ответ не является JSON: статус {response.status_code}")
        raise DecodeError(
            f"Ответ OCR.space не является JSON: {e}",
            status_code=response.status_code,
            body=response.text,
        ) from e

    # Сервис может ответить JSON строкой, например при неверном ключе
    if not isinstance(payload, dict):
        logger.error(f"Ответ не является JSON объектом: статус {response.status_code}")
        raise DecodeError(
            f"Ожидался JSON объект, получен {type(payload).__name__}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        result = OCRText.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Ответ не соответствует схеме: {e.error_count()} ошибок")
        raise DecodeError(
            f"Ответ OCR.space не соответствует схеме: {e}",
            status_code=response.status_code,
            body=response.text,
        ) from e

    if result.is_errored_on_processing:
        logger.warning(
            f"Сервис сообщил об ошибке обработки: код {result.ocr_exit_code}, "
            f"{' '.join(result.error_message)}"
        )
    else:
        logger.info(
            f"OCR завершён: {len(result.parsed_results)} страниц, "
            f"код {result.ocr_exit_code}, {result.processing_time_in_milliseconds}ms"
        )

    return result
