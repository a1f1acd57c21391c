"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора отчёта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов, enum
- Интеграция с Pydantic моделью CalculationReport
"""

import copy
import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.calculator.demo import build_report
from src.core.contracts import (
    CalculationReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_report,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_report():
    """Валидный calculation_report для тестирования."""
    return {
        "title": "Enhanced Calculator Application",
        "sections": [
            {
                "title": "Basic Operations",
                "lines": [
                    {"expression": "5 + 3", "result": "8"},
                    {"expression": "15 / 3", "result": "5"},
                ],
            }
        ],
        "errors": [
            {
                "expression": "√(-4)",
                "kind": "invalid_argument",
                "message": "Cannot calculate square root of negative number",
            }
        ],
        "completed": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("calculation_report")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("calculation_report") is loader.load_schema("calculation_report")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path: Path) -> None:
        (tmp_path / "positive.json").write_text(
            json.dumps({"type": "number", "exclusiveMinimum": 0}), encoding="utf-8"
        )
        validator = ContractValidator("positive", loader=SchemaLoader(tmp_path))
        validator.validate(1)
        with pytest.raises(ValidationError):
            validator.validate(0)


# =============================================================================
# CALCULATION REPORT CONTRACT
# =============================================================================


class TestCalculationReportContract:
    """Тесты calculation_report контракта"""

    def test_valid_report(self, valid_report) -> None:
        validate_calculation_report(valid_report)
        CalculationReportValidator().validate(valid_report)

    @pytest.mark.parametrize("field", ["title", "sections", "errors", "completed"])
    def test_missing_required_field(self, valid_report, field: str) -> None:
        data = copy.deepcopy(valid_report)
        del data[field]
        with pytest.raises(ValidationError):
            validate_calculation_report(data)

    def test_unknown_error_kind(self, valid_report) -> None:
        data = copy.deepcopy(valid_report)
        data["errors"][0]["kind"] = "overflow"
        with pytest.raises(ValidationError):
            validate_calculation_report(data)

    def test_additional_property_rejected(self, valid_report) -> None:
        data = copy.deepcopy(valid_report)
        data["sections"][0]["lines"][0]["extra"] = 1
        with pytest.raises(ValidationError):
            validate_calculation_report(data)

    def test_wrong_type(self, valid_report) -> None:
        data = copy.deepcopy(valid_report)
        data["completed"] = "yes"
        with pytest.raises(ValidationError, match="is not of type 'boolean'"):
            CalculationReportValidator().validate(data)

    def test_pydantic_report_matches_contract(self) -> None:
        """Отчёт из build_report проходит валидацию схемой"""
        validate_calculation_report(build_report().to_contract())
