"""
Unit Table Contract — JSON Schema валидация таблицы реестра

Таблица единиц — декларативные данные (symbol, dimensions, base_factor,
offset), из которых строится UnitRegistry. Перед построением реестра
таблица проверяется против формального контракта schema/unit_table.json
(Draft 2020-12). Семантические правила, которые схема выразить не может
(уникальность символов, offset только для чистой температуры), проверяет
сам реестр.

Схемы (каталог schema/ рядом с модулем, устанавливается как package data):
- unit_table.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов.

    Каждая схема при первой загрузке проходит meta-validation.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения ('unit_table')

        Raises:
            FileNotFoundError: Если файла схемы нет
            json.JSONDecodeError: Если файл не является JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("Loaded contract schema %s", path.name)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def default_loader() -> SchemaLoader:
    """Загрузчик схем пакета, создаётся при первом обращении."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def format_error(error: ValidationError) -> str:
    """
    Ошибка валидации с путём до поля, например 'units/3/base_factor: ...'.
    """
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


class ContractValidator:
    """Валидация данных против одной JSON Schema контракта."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Первое (наиболее релевантное) нарушение контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_report(self, data: Any) -> List[str]:
        """Все нарушения контракта, отсортированные по пути до поля."""
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [format_error(error) for error in errors]


class UnitTableValidator(ContractValidator):
    """Валидатор таблицы реестра единиц (unit_table.json)."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("unit_table", loader)


def validate_unit_table(data: Any) -> None:
    """
    Проверка таблицы единиц против контракта.

    Raises:
        ValidationError: Если таблица не соответствует схеме
    """
    validator = UnitTableValidator()
    try:
        validator.validate(data)
    except ValidationError as e:
        logger.debug("Unit table rejected: %s", format_error(e))
        raise
