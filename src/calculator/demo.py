"""Demo — консольная демонстрация Calculator.

Вызывает каждую группу операций с фиксированными аргументами и печатает
результаты строками вида "5 + 3 = 8". Секция Error Handling вызывает
divide(10, 0) и square_root(-4), перехватывает ошибки, печатает их
сообщения и продолжает работу.

Режим --json печатает тот же прогон как CalculationReport, провалидированный
против схемы calculation_report.json.
"""

import argparse
import json
import logging
import math
import sys
from collections.abc import Callable, Sequence

from src.calculator.service import Calculator
from src.core.contracts import validate_calculation_report
from src.core.domain.summary import (
    CalculationReport,
    ErrorKind,
    ReportError,
    ReportLine,
    ReportSection,
)
from src.core.math.errors import DivisionByZero, InvalidArgument

logger = logging.getLogger(__name__)

TITLE = "Enhanced Calculator Application"

SAMPLE_NUMBERS: tuple[float, ...] = (10, 20, 30, 40, 50)


# =============================================================================
# FORMATTING
# =============================================================================


def format_number(value: float | int) -> str:
    """Число без хвоста '.0' для целых float (256.0 → '256')."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_sequence(values: Sequence[float | int]) -> str:
    return "[" + ", ".join(format_number(v) for v in values) + "]"


def _line(expression: str, result: str) -> ReportLine:
    return ReportLine(expression=expression, result=result)


# =============================================================================
# REPORT
# =============================================================================


def _attempt(expression: str, call: Callable[[], float]) -> ReportError | None:
    """Вызов, который должен завершиться ошибкой библиотеки."""
    try:
        value = call()
    except DivisionByZero as e:
        logger.debug("%s raised DivisionByZero: %s", expression, e)
        return ReportError(expression=expression, kind=ErrorKind.DIVISION_BY_ZERO, message=str(e))
    except InvalidArgument as e:
        logger.debug("%s raised InvalidArgument: %s", expression, e)
        return ReportError(expression=expression, kind=ErrorKind.INVALID_ARGUMENT, message=str(e))

    logger.warning("%s unexpectedly succeeded with %s", expression, value)
    return None


def build_report(calculator: Calculator | None = None) -> CalculationReport:
    """
    Демонстрационный прогон всех групп операций.

    Args:
        calculator: Экземпляр сервиса (по умолчанию новый Calculator)

    Returns:
        CalculationReport с секциями результатов и перехваченными ошибками
    """
    calc = calculator or Calculator()

    basic = ReportSection(
        title="Basic Operations",
        lines=(
            _line("5 + 3", format_number(calc.add(5, 3))),
            _line("10 - 4", format_number(calc.subtract(10, 4))),
            _line("6 * 7", format_number(calc.multiply(6, 7))),
            _line("15 / 3", format_number(calc.divide(15, 3))),
        ),
    )
    logger.debug("Basic operations computed")

    advanced = ReportSection(
        title="Advanced Math",
        lines=(
            _line("2^8", format_number(calc.power(2, 8))),
            _line("√25", format_number(calc.square_root(25))),
            _line("5!", format_number(calc.factorial(5))),
        ),
    )

    number_theory = ReportSection(
        title="Number Theory",
        lines=(
            _line("GCD(48, 18)", format_number(calc.greatest_common_divisor(48, 18))),
            _line("LCM(12, 8)", format_number(calc.least_common_multiple(12, 8))),
            _line("Is 17 prime?", str(calc.is_prime(17))),
            _line("Is 15 even?", str(calc.is_even(15))),
        ),
    )

    fibonacci = ReportSection(
        title="Fibonacci Sequence (first 8)",
        lines=(_line("F(0..7)", format_sequence(calc.fibonacci_sequence(8))),),
    )

    summary = calc.summarize(SAMPLE_NUMBERS)
    statistics = ReportSection(
        title="Statistics",
        lines=(
            _line("Numbers", format_sequence(SAMPLE_NUMBERS)),
            _line("Average", f"{summary.average:.2f}"),
            _line("Median", format_number(summary.median)),
            _line("Max", format_number(summary.maximum)),
            _line("Min", format_number(summary.minimum)),
        ),
    )
    logger.debug("Statistics summary: %s", summary)

    finance = ReportSection(
        title="Percentage",
        lines=(
            _line("25 out of 100", f"{format_number(calc.percentage(25, 100))}%"),
            _line(
                "1000 at 5% compounded 4x for 2 years",
                f"{calc.calculate_compound_interest(1000, 0.05, 4, 2):.2f}",
            ),
        ),
    )

    conversions = ReportSection(
        title="Conversions",
        lines=(
            _line("100°C in °F", format_number(calc.celsius_to_fahrenheit(100))),
            _line("98.6°F in °C", f"{calc.fahrenheit_to_celsius(98.6):.2f}"),
            _line("10 mi in km", f"{calc.miles_to_kilometers(10):.4f}"),
            _line("10 km in mi", f"{calc.kilometers_to_miles(10):.4f}"),
        ),
    )

    errors = [
        _attempt("10 / 0", lambda: calc.divide(10, 0)),
        _attempt("√(-4)", lambda: calc.square_root(-4)),
    ]

    return CalculationReport(
        title=TITLE,
        sections=(basic, advanced, number_theory, fibonacci, statistics, finance, conversions),
        errors=tuple(error for error in errors if error is not None),
        completed=True,
    )


# =============================================================================
# RENDERING
# =============================================================================


def _render_line(section: ReportSection, line: ReportLine) -> str:
    if line.expression.endswith("?"):
        return f"{line.expression} {line.result}"
    if section.title.startswith("Fibonacci"):
        return line.result
    if section.title in ("Statistics", "Conversions"):
        return f"{line.expression}: {line.result}"
    return f"{line.expression} = {line.result}"


def render_text(report: CalculationReport) -> list[str]:
    """Текстовое представление отчёта, строка за строкой."""
    lines = [report.title, "=" * len(report.title)]

    for index, section in enumerate(report.sections):
        header = f"=== {section.title} ==="
        lines.append(header if index == 0 else f"\n{header}")
        lines.extend(_render_line(section, line) for line in section.lines)

    lines.append("\n=== Error Handling ===")
    lines.extend(f"Error: {error.message}" for error in report.errors)

    if report.completed:
        lines.append("\nApplication completed successfully!")

    return lines


# =============================================================================
# ENTRY POINT
# =============================================================================


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="calc-demo",
        description="Run every calculator operation with sample arguments and print the results.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the run as a JSON report validated against calculation_report.json.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    report = build_report()

    if args.json:
        payload = report.to_contract()
        validate_calculation_report(payload)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for line in render_text(report):
            print(line)

    logger.info("Demo finished: %d sections, %d errors", len(report.sections), len(report.errors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
