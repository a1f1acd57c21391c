"""Calculator — stateless сервис и демонстрационный вход.

- Calculator: фасад над src.core.math и src.core.domain
- demo: консольная демонстрация (calc-demo)
"""

from .service import Calculator

__all__ = [
    "Calculator",
]
