"""ISO 2108 ISBN 값 객체 라이브러리"""

from .base import Isbn, Version
from .comparator import IsbnComparator
from .core import can_convert, comparator, convert, parse
from .errors import (
    IsbnChecksumError,
    IsbnConsistencyError,
    IsbnError,
    IsbnFormatError,
)
from .isbn10 import Isbn10
from .isbn13 import Isbn13
from .utils import clean_isbn, is_isbn
from .validation import (
    Isbn10Field,
    Isbn13Field,
    IsbnField,
    is_valid_isbn,
    is_valid_isbn10,
    is_valid_isbn13,
)

__all__ = [
    "Isbn",
    "Isbn10",
    "Isbn13",
    "Version",
    "IsbnComparator",
    "parse",
    "can_convert",
    "convert",
    "comparator",
    "IsbnError",
    "IsbnFormatError",
    "IsbnChecksumError",
    "IsbnConsistencyError",
    "clean_isbn",
    "is_isbn",
    "is_valid_isbn",
    "is_valid_isbn10",
    "is_valid_isbn13",
    "Isbn10Field",
    "Isbn13Field",
    "IsbnField",
]
