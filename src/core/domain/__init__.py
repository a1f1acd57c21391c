"""
Domain models and value objects.

Contains unit conversions and immutable result models.
"""

from src.core.domain.summary import (
    CalculationReport,
    ErrorKind,
    ReportError,
    ReportLine,
    ReportSection,
    StatisticsSummary,
)
from src.core.domain.units import (
    FAHRENHEIT_OFFSET,
    KM_PER_MILE,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    kilometers_to_miles,
    miles_to_kilometers,
)

__all__ = [
    # Units module
    "KM_PER_MILE",
    "FAHRENHEIT_OFFSET",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "miles_to_kilometers",
    "kilometers_to_miles",
    # Summary models
    "StatisticsSummary",
    "CalculationReport",
    "ReportSection",
    "ReportLine",
    "ReportError",
    "ErrorKind",
]
