"""
Study Session Contracts - JSON Schema Validation

Записи сессий приходят из хранилища и из тела запроса рекомендаций как
обычный JSON. До сборки pydantic-моделей они сверяются с формальными
схемами Draft 2020-12, которые устанавливаются вместе с пакетом.

Схемы (studystats/core/contracts/schema/):
- study_session.json           : строка таблицы study_sessions
- recommendation_request.json  : {"sessions": [...]} для AI-рекомендаций
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

STUDY_SESSION_SCHEMA = "study_session"
RECOMMENDATION_REQUEST_SCHEMA = "recommendation_request"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-валидация файлов схем из одного каталога.

    Каждая схема читается с диска один раз; повторные запросы отдают
    тот же dict.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена схем каталога (без расширения), по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла {schema_name}.json нет в каталоге
            ValueError: Файл не проходит meta-валидацию Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


def _path_sort_key(error: jsonschema.ValidationError) -> list[tuple[int, int, str]]:
    # Индексы массивов сравниваются как числа: sessions.2 раньше sessions.10
    return [
        (0, part, "") if isinstance(part, int) else (1, 0, str(part))
        for part in error.absolute_path
    ]


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка JSON-данных против одной схемы пакета."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Все нарушения в виде "путь: сообщение", упорядоченные по пути.

        Корень документа обозначается "$", элементы массива - индексами:
        "$.sessions.1.mood_score: 12 is greater than the maximum of 10".
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=_path_sort_key):
            path = ".".join(["$", *(str(part) for part in error.absolute_path)])
            messages.append(f"{path}: {error.message}")
        return messages


class StudySessionValidator(ContractValidator):
    """Строка таблицы study_sessions."""

    def __init__(self):
        super().__init__(STUDY_SESSION_SCHEMA)


class RecommendationRequestValidator(ContractValidator):
    """Тело запроса рекомендаций."""

    def __init__(self):
        super().__init__(RECOMMENDATION_REQUEST_SCHEMA)


@lru_cache(maxsize=None)
def _study_session_validator() -> StudySessionValidator:
    return StudySessionValidator()


@lru_cache(maxsize=None)
def _recommendation_request_validator() -> RecommendationRequestValidator:
    return RecommendationRequestValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_study_session(data: Dict[str, Any]) -> None:
    """
    Проверка одной записи сессии.

    Raises:
        jsonschema.ValidationError: Если запись не соответствует схеме
    """
    _study_session_validator().validate(data)


def validate_recommendation_request(data: Dict[str, Any]) -> None:
    """
    Проверка тела запроса рекомендаций (включая каждую сессию в нём).

    Raises:
        jsonschema.ValidationError: Если тело не соответствует схеме
    """
    _recommendation_request_validator().validate(data)


def recommendation_request_errors(data: Dict[str, Any]) -> list[str]:
    """Все нарушения тела запроса; пустой список для валидного тела."""
    return _recommendation_request_validator().error_messages(data)
