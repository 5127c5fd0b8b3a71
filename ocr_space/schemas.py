"""
Схемы данных клиента OCR.space.

Включает:
    - Перечисления языков, типов файлов и версий движка
    - Pydantic модель параметров распознавания (OCRParams)
    - Dataclass локального файла для multipart загрузки
    - Pydantic модели ответа сервиса (OCRText и вложенные)
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Перечисления
# =============================================================================


class Language(str, Enum):
    """Языки распознавания (трёхбуквенные коды OCR.space)."""

    ARABIC = "ara"
    BULGARIAN = "bul"
    CHINESE_SIMPLIFIED = "chs"
    CHINESE_TRADITIONAL = "cht"
    CROATIAN = "hrv"
    CZECH = "cze"
    DANISH = "dan"
    DUTCH = "dut"
    ENGLISH = "eng"
    FINNISH = "fin"
    FRENCH = "fre"
    GERMAN = "ger"
    GREEK = "gre"
    HUNGARIAN = "hun"
    KOREAN = "kor"
    ITALIAN = "ita"
    JAPANESE = "jpn"
    POLISH = "pol"
    PORTUGUESE = "por"
    RUSSIAN = "rus"
    SLOVENIAN = "slv"
    SPANISH = "spa"
    SWEDISH = "swe"
    TURKISH = "tur"


class FileType(str, Enum):
    """Явное указание типа файла вместо автоопределения по content-type."""

    PDF = "PDF"
    GIF = "GIF"
    PNG = "PNG"
    JPG = "JPG"
    TIF = "TIF"
    BMP = "BMP"


class OCREngine(IntEnum):
    """Версия движка распознавания."""

    V1 = 1
    V2 = 2


# =============================================================================
# Параметры распознавания
# =============================================================================


class OCRParams(BaseModel):
    """
    Параметры распознавания, передаваемые с каждым запросом.

    Правила сериализации (см. to_form):
        - булевы флаги передаются всегда, явно "true"/"false",
          т.к. дефолты сервиса отличаются между эндпоинтами
        - language, filetype, OCREngine не передаются, если не заданы,
          тогда сервис применяет свои значения по умолчанию

    Attributes:
        language: язык распознавания (по умолчанию у сервиса eng)
        is_overlay_required: вернуть координаты слов (TextOverlay)
        filetype: тип файла вместо автоопределения
        detect_orientation: автоповорот изображения, заполняет TextOrientation
        is_create_searchable_pdf: сгенерировать searchable PDF
            (сервис сам включает isOverlayRequired)
        is_searchable_pdf_hide_text_layer: скрыть текстовый слой в PDF
        scale: внутреннее увеличение разрешения (полезно для сканов)
        is_table: возвращать текст построчно (таблицы, чеки, счета)
        ocr_engine: версия движка, 1 или 2 (по умолчанию у сервиса 1)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: Optional[Language] = Field(default=None, alias="language")
    is_overlay_required: bool = Field(default=False, alias="isOverlayRequired")
    filetype: Optional[FileType] = Field(default=None, alias="filetype")
    detect_orientation: bool = Field(default=False, alias="detectOrientation")
    is_create_searchable_pdf: bool = Field(default=False, alias="isCreateSearchablePdf")
    is_searchable_pdf_hide_text_layer: bool = Field(
        default=False,
        alias="isSearchablePdfHideTextLayer",
    )
    scale: bool = Field(default=False, alias="scale")
    is_table: bool = Field(default=False, alias="isTable")
    ocr_engine: Optional[OCREngine] = Field(default=None, alias="OCREngine")

    def to_form(self) -> dict[str, str]:
        """
        Сериализует параметры в поля формы.

        Returns:
            dict: {ключ сервиса: строковое значение}
        """
        fields = self.model_dump(mode="json", by_alias=True, exclude_none=True)

        form = {}
        for key, value in fields.items():
            if isinstance(value, bool):
                form[key] = "true" if value else "false"
            else:
                form[key] = str(value)
        return form


# =============================================================================
# Локальный файл
# =============================================================================


@dataclass(frozen=True)
class LocalFile:
    """
    Локальный файл для загрузки через multipart/form-data.

    Attributes:
        name: имя файла (без пути), уходит в filename части "file"
        content: содержимое файла целиком
    """

    name: str
    content: bytes

    @classmethod
    def from_path(cls, path: Union[str, PathLike]) -> "LocalFile":
        """
        Читает файл целиком в память.

        Стриминга нет: размер файла ограничен доступной памятью.

        Raises:
            OSError: файл не существует или не читается
        """
        file_path = Path(path)
        return cls(name=file_path.name, content=file_path.read_bytes())


# =============================================================================
# Ответ сервиса
# =============================================================================


class _WireModel(BaseModel):
    """
    База для моделей ответа.

    Неизвестные поля игнорируются, отсутствующие и null
    получают значение по умолчанию.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null вместо объекта (в том числе элемент массива) даёт пустую модель
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Word(_WireModel):
    """
    Слово с координатами bounding box (пиксели).

    Attributes:
        word_text: текст слова
        left: X координата левого края
        top: Y координата верхнего края
        height: высота bounding box
        width: ширина bounding box
    """

    word_text: str = Field(default="", alias="WordText")
    left: float = Field(default=0.0, alias="Left")
    top: float = Field(default=0.0, alias="Top")
    height: float = Field(default=0.0, alias="Height")
    width: float = Field(default=0.0, alias="Width")


class Line(_WireModel):
    """Строка текста: слова и её вертикальные границы."""

    words: list[Word] = Field(default_factory=list, alias="Words")
    max_height: float = Field(default=0.0, alias="MaxHeight")
    min_top: float = Field(default=0.0, alias="MinTop")


class TextOverlay(_WireModel):
    """Координаты строк и слов страницы (если запрошены isOverlayRequired)."""

    lines: list[Line] = Field(default_factory=list, alias="Lines")
    has_overlay: bool = Field(default=False, alias="HasOverlay")
    message: str = Field(default="", alias="Message")


class ParsedResult(_WireModel):
    """
    Результат распознавания одной страницы.

    Attributes:
        text_overlay: координаты слов/строк
        text_orientation: угол поворота, например "0" или "270"
        file_parse_exit_code: код завершения для страницы (1 означает успех)
        parsed_text: распознанный текст
        error_message: ошибка для этой страницы
        error_details: подробности ошибки
    """

    text_overlay: TextOverlay = Field(default_factory=TextOverlay, alias="TextOverlay")
    text_orientation: str = Field(default="", alias="TextOrientation")
    file_parse_exit_code: int = Field(default=0, alias="FileParseExitCode")
    parsed_text: str = Field(default="", alias="ParsedText")
    error_message: str = Field(default="", alias="ErrorMessage")
    error_details: str = Field(default="", alias="ErrorDetails")

    @field_validator("text_orientation", mode="before")
    @classmethod
    def _orientation_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class OCRText(_WireModel):
    """
    Ответ сервиса OCR.space.

    Ошибка обработки на стороне сервиса не является исключением:
    она приходит в is_errored_on_processing / error_message
    и проверяется вызывающим кодом.

    Attributes:
        parsed_results: результаты по страницам, в порядке страниц
        ocr_exit_code: общий код завершения
        is_errored_on_processing: сервис сообщил об ошибке обработки
        error_message: строки сообщения об ошибке
        error_details: подробности ошибки
        processing_time_in_milliseconds: время обработки, строкой как в ответе
        searchable_pdf_url: ссылка на сгенерированный searchable PDF
    """

    parsed_results: list[ParsedResult] = Field(default_factory=list, alias="ParsedResults")
    ocr_exit_code: int = Field(default=0, alias="OCRExitCode")
    is_errored_on_processing: bool = Field(default=False, alias="IsErroredOnProcessing")
    error_message: list[str] = Field(default_factory=list, alias="ErrorMessage")
    error_details: str = Field(default="", alias="ErrorDetails")
    processing_time_in_milliseconds: str = Field(default="", alias="ProcessingTimeInMilliseconds")
    searchable_pdf_url: str = Field(default="", alias="SearchablePDFURL")

    @field_validator("error_message", mode="before")
    @classmethod
    def _single_message_as_list(cls, value: Any) -> Any:
        # Сервис иногда присылает одну строку вместо массива
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return ["" if line is None else line for line in value]
        return value

    @field_validator("processing_time_in_milliseconds", mode="before")
    @classmethod
    def _processing_time_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def just_text(self) -> str:
        """
        Возвращает весь текст одной строкой.

        Если сервис сообщил об ошибке, возвращаются склеенные строки error_message,
        даже при наличии частично распознанного текста. Иначе возвращается склеенный
        parsed_text всех страниц. Разделители не добавляются, пробелы
        не обрезаются; координаты и ошибки страниц отбрасываются.

        Returns:
            str: текст или сообщение об ошибке
        """
        if self.is_errored_on_processing:
            return "".join(self.error_message)
        return "".join(page.parsed_text for page in self.parsed_results)
