"""ISBN 로깅 모듈"""

from .logger import IsbnLogger
from .formatters import ConsoleFormatter, JsonFormatter

__all__ = [
    "IsbnLogger",
    "ConsoleFormatter",
    "JsonFormatter",
]
