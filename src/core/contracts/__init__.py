"""
Contract Validation Module

Модуль для валидации JSON контрактов численной библиотеки.
"""

from .validators import (
    CalculationReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationReportValidator",
    # Functions
    "validate_calculation_report",
]
