"""
Summary — Модели результатов вычислений

Immutable Pydantic модели:
- StatisticsSummary: сводка описательной статистики последовательности
- CalculationReport: машиночитаемый отчёт демонстрационного прогона,
  соответствует схеме calculation_report.json
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки, зафиксированной в отчёте"""

    INVALID_ARGUMENT = "invalid_argument"
    DIVISION_BY_ZERO = "division_by_zero"


# =============================================================================
# STATISTICS SUMMARY
# =============================================================================


class StatisticsSummary(BaseModel):
    """
    Сводка описательной статистики.

    Immutable модель (frozen=True). Строится только из непустой
    последовательности, поэтому count >= 1 и minimum <= median <= maximum.
    """

    count: int = Field(..., ge=1, description="Количество элементов")
    average: float = Field(..., description="Среднее арифметическое")
    median: float = Field(..., description="Медиана")
    maximum: float = Field(..., description="Максимальный элемент")
    minimum: float = Field(..., description="Минимальный элемент")

    model_config = {"frozen": True}


# =============================================================================
# CALCULATION REPORT
# =============================================================================


class ReportLine(BaseModel):
    """Одна строка результата: выражение и его значение."""

    expression: str = Field(..., min_length=1, description="Выражение, например '5 + 3'")
    result: str = Field(..., description="Отформатированный результат")

    model_config = {"frozen": True}


class ReportSection(BaseModel):
    """Именованная группа строк (Basic Operations, Statistics, ...)."""

    title: str = Field(..., min_length=1)
    lines: tuple[ReportLine, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


class ReportError(BaseModel):
    """Ошибка, перехваченная при демонстрационном вызове."""

    expression: str = Field(..., min_length=1)
    kind: ErrorKind
    message: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class CalculationReport(BaseModel):
    """
    Отчёт демонстрационного прогона.

    Содержит секции с результатами и перехваченные ошибки.
    completed=True означает, что прогон дошёл до конца несмотря на ошибки.
    """

    title: str = Field(..., min_length=1)
    sections: tuple[ReportSection, ...] = Field(default_factory=tuple)
    errors: tuple[ReportError, ...] = Field(default_factory=tuple)
    completed: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_sections(self) -> "CalculationReport":
        """Заголовки секций уникальны."""
        titles = [section.title for section in self.sections]
        if len(titles) != len(set(titles)):
            raise ValueError(f"Duplicate section titles in report: {titles}")
        return self

    def to_contract(self) -> dict:
        """Представление для JSON-контракта (enum → строковое значение)."""
        return self.model_dump(mode="json")
