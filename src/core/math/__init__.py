"""
Core math modules

Численные примитивы: арифметика, теория чисел, статистика, финансы.
"""

# Errors
from src.core.math.errors import DivisionByZero, InvalidArgument

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    INT32_MAX,
    INT32_MIN,
    is_int32,
    is_valid_float,
    wrap_int32,
)

# Arithmetic
from src.core.math.arithmetic import add, divide, is_even, multiply, subtract

# Powers
from src.core.math.powers import factorial, power, square_root

# Number Theory
from src.core.math.number_theory import (
    fibonacci_sequence,
    greatest_common_divisor,
    is_prime,
    least_common_multiple,
)

# Descriptive Statistics
from src.core.math.descriptive_stats import (
    average,
    maximum,
    median,
    minimum,
    summarize,
)

# Compounding
from src.core.math.compounding import (
    calculate_compound_interest,
    compound_interest_schedule,
    percentage,
)

__all__ = [
    # Errors
    "InvalidArgument",
    "DivisionByZero",
    # Numerical Safeguards
    "INT32_MIN",
    "INT32_MAX",
    "wrap_int32",
    "is_int32",
    "is_valid_float",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "is_even",
    # Powers
    "factorial",
    "power",
    "square_root",
    # Number Theory
    "greatest_common_divisor",
    "least_common_multiple",
    "is_prime",
    "fibonacci_sequence",
    # Descriptive Statistics
    "average",
    "median",
    "maximum",
    "minimum",
    "summarize",
    # Compounding
    "percentage",
    "calculate_compound_interest",
    "compound_interest_schedule",
]
