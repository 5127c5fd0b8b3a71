"""
Клиенты OCR.space: синхронный и асинхронный.

Каждый вызов: один POST запрос и один ответ, без повторов и кэша.
Клиент не хранит изменяемого состояния между вызовами, поэтому один
экземпляр можно использовать из нескольких потоков, если это допускает
транспорт (httpx.Client допускает).

Пример:
    with OCRSpaceClient(api_key="...") as client:
        result = client.parse_from_url("https://example.com/scan.png")
        print(result.just_text())
"""

import asyncio
import logging
from os import PathLike
from typing import Optional, Union

import httpx

from ocr_space.config import DEFAULT_URL, Settings, get_settings
from ocr_space.exceptions import ConfigurationError, TransportError
from ocr_space.schemas import LocalFile, OCRParams, OCRText
from ocr_space.services.decoder import decode_response
from ocr_space.services.payload import (
    auth_headers,
    build_base64_form,
    build_multipart,
    build_url_form,
    read_local_file,
)

logger = logging.getLogger(__name__)


def _validate_url(url: str) -> str:
    """
    Проверяет адрес эндпоинта при создании клиента.

    Raises:
        ConfigurationError: адрес не разбирается или схема не http/https
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Некорректный адрес эндпоинта {url!r}: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(f"Адрес эндпоинта должен быть http(s) URL: {url!r}")
    return url


class _BaseClient:
    """
    Общая конфигурация клиентов: ключ, адрес, параметры по умолчанию.

    После создания не меняется.
    """

    def __init__(
        self,
        api_key: str,
        url: Optional[str] = None,
        params: Optional[OCRParams] = None,
    ) -> None:
        self._api_key = api_key
        self._url = _validate_url(url or DEFAULT_URL)
        self._params = params or OCRParams()

    @property
    def url(self) -> str:
        return self._url

    @property
    def params(self) -> OCRParams:
        return self._params

    def _resolve_params(self, params: Optional[OCRParams]) -> OCRParams:
        return params if params is not None else self._params

    def _transport_error(self, error: httpx.RequestError) -> TransportError:
        logger.error(f"OCR.space недоступен ({type(error).__name__}): {error}")
        return TransportError(f"Ошибка запроса к {self._url}: {error}", url=self._url)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self._url!r})"


class OCRSpaceClient(_BaseClient):
    """
    Синхронный клиент OCR.space.

    Таймауты, прокси и пул соединений настраиваются на переданном
    httpx.Client. Если транспорт не передан, клиент создаёт свой
    (без таймаута, если не указан timeout) и закрывает его в close().
    Переданный снаружи транспорт клиент не закрывает.

    Args:
        api_key: API ключ; формат не проверяется, неверный ключ
            проявится ответом сервиса
        url: адрес эндпоинта (по умолчанию https://api.ocr.space/parse/image)
        http_client: транспорт httpx.Client
        params: параметры распознавания для вызовов без своих параметров
        timeout: таймаут в секундах для собственного транспорта

    Raises:
        ConfigurationError: url не является корректным http(s) адресом
    """

    def __init__(
        self,
        api_key: str,
        url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        params: Optional[OCRParams] = None,
        timeout: Optional[float] = None,
    ) -> None:
        super().__init__(api_key, url=url, params=params)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "OCRSpaceClient":
        """Создаёт клиент из Settings (по умолчанию из окружения)."""
        settings = settings or get_settings()
        kwargs.setdefault("timeout", settings.timeout_seconds)
        return cls(api_key=settings.api_key, url=settings.url, **kwargs)

    def parse_from_url(self, file_url: str, params: Optional[OCRParams] = None) -> OCRText:
        """
        Распознаёт файл, доступный по ссылке.

        Args:
            file_url: URL изображения или документа
            params: параметры распознавания

        Returns:
            OCRText: ответ сервиса (ошибку сервиса проверять по
                is_errored_on_processing)

        Raises:
            TransportError: сервис недоступен
            DecodeError: ответ не разбирается
        """
        form = build_url_form(file_url, self._resolve_params(params))
        return self._send("url", data=form)

    def parse_from_base64(self, base64_image: str, params: Optional[OCRParams] = None) -> OCRText:
        """
        Распознаёт base64 содержимое (например data:image/png;base64,...).

        Raises:
            TransportError: сервис недоступен
            DecodeError: ответ не разбирается
        """
        form = build_base64_form(base64_image, self._resolve_params(params))
        return self._send("base64", data=form)

    def parse_from_local(
        self,
        path: Union[str, PathLike],
        params: Optional[OCRParams] = None,
    ) -> OCRText:
        """
        Распознаёт локальный файл.

        Файл читается целиком до отправки запроса.

        Raises:
            OSError: файл не существует или не читается (до запроса в сеть)
            TransportError: сервис недоступен
            DecodeError: ответ не разбирается
        """
        return self.parse_from_file(read_local_file(path), params)

    def parse_from_file(self, local_file: LocalFile, params: Optional[OCRParams] = None) -> OCRText:
        """Распознаёт уже прочитанный файл (multipart/form-data)."""
        files, data = build_multipart(local_file, self._resolve_params(params))
        return self._send(f"file {local_file.name}", files=files, data=data)

    def _send(self, source: str, **request_kwargs) -> OCRText:
        logger.info(f"Запрос к OCR.space: {source} -> {self._url}")
        try:
            response = self._http_client.post(
                self._url,
                headers=auth_headers(self._api_key),
                **request_kwargs,
            )
        except httpx.RequestError as e:
            raise self._transport_error(e) from e

        return decode_response(response)

    def close(self) -> None:
        """Закрывает собственный транспорт клиента."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "OCRSpaceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncOCRSpaceClient(_BaseClient):
    """
    Асинхронный клиент OCR.space поверх httpx.AsyncClient.

    Контракт тот же, что у OCRSpaceClient; локальный файл читается
    в отдельном потоке до отправки запроса.
    """

    def __init__(
        self,
        api_key: str,
        url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        params: Optional[OCRParams] = None,
        timeout: Optional[float] = None,
    ) -> None:
        super().__init__(api_key, url=url, params=params)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "AsyncOCRSpaceClient":
        settings = settings or get_settings()
        kwargs.setdefault("timeout", settings.timeout_seconds)
        return cls(api_key=settings.api_key, url=settings.url, **kwargs)

    async def parse_from_url(self, file_url: str, params: Optional[OCRParams] = None) -> OCRText:
        form = build_url_form(file_url, self._resolve_params(params))
        return await self._send("url", data=form)

    async def parse_from_base64(
        self,
        base64_image: str,
        params: Optional[OCRParams] = None,
    ) -> OCRText:
        form = build_base64_form(base64_image, self._resolve_params(params))
        return await self._send("base64", data=form)

    async def parse_from_local(
        self,
        path: Union[str, PathLike],
        params: Optional[OCRParams] = None,
    ) -> OCRText:
        local_file = await asyncio.to_thread(read_local_file, path)
        return await self.parse_from_file(local_file, params)

    async def parse_from_file(
        self,
        local_file: LocalFile,
        params: Optional[OCRParams] = None,
    ) -> OCRText:
        files, data = build_multipart(local_file, self._resolve_params(params))
        return await self._send(f"file {local_file.name}", files=files, data=data)

    async def _send(self, source: str, **request_kwargs) -> OCRText:
        logger.info(f"Запрос к OCR.space: {source} -> {self._url}")
        try:
            response = await self._http_client.post(
                self._url,
                headers=auth_headers(self._api_key),
                **request_kwargs,
            )
        except httpx.RequestError as e:
            raise self._transport_error(e) from e

        return decode_response(response)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "AsyncOCRSpaceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
