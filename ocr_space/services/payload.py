"""
Построение тела запроса к OCR.space.

Три формы отправки:
    - url: application/x-www-form-urlencoded, поле "url"
    - base64: application/x-www-form-urlencoded, поле "base64Image"
    - локальный файл: multipart/form-data, часть "file" + поля параметров

API ключ во всех трёх случаях передаётся заголовком apikey,
а не полем формы: так авторизация не зависит от кодирования тела.
"""

import logging
from os import PathLike
from typing import Union

from ocr_space.schemas import LocalFile, OCRParams

logger = logging.getLogger(__name__)

API_KEY_HEADER = "apikey"
FILE_FIELD = "file"


def auth_headers(api_key: str) -> dict[str, str]:
    """Заголовки авторизации запроса."""
    return {API_KEY_HEADER: api_key}


def build_url_form(file_url: str, params: OCRParams) -> dict[str, str]:
    """
    Поля формы для распознавания файла по ссылке.

    Args:
        file_url: публично доступный URL изображения или документа
        params: параметры распознавания

    Returns:
        dict: поля application/x-www-form-urlencoded
    """
    return {"url": file_url, **params.to_form()}


def build_base64_form(base64_image: str, params: OCRParams) -> dict[str, str]:
    """
    Поля формы для распознавания base64 содержимого.

    Строка передаётся как есть: формат (data URI), тип и размер
    проверяет сервис.
    """
    return {"base64Image": base64_image, **params.to_form()}


def build_multipart(local_file: LocalFile, params: OCRParams) -> tuple[dict, dict[str, str]]:
    """
    Части multipart/form-data для загрузки локального файла.

    Args:
        local_file: имя и содержимое файла
        params: параметры распознавания

    Returns:
        tuple: (files, data) в формате httpx
    """
    files = {FILE_FIELD: (local_file.name, local_file.content)}
    return files, params.to_form()


def read_local_file(path: Union[str, PathLike]) -> LocalFile:
    """
    Читает локальный файл до отправки запроса.

    Raises:
        OSError: файл не существует или не читается; сеть не затрагивается
    """
    try:
        local_file = LocalFile.from_path(path)
    except OSError as e:
        logger.error(f"Не удалось прочитать файл {path}: {e}")
        raise

    logger.info(f"Файл прочитан: {local_file.name}, {len(local_file.content)} байт")
    return local_file
