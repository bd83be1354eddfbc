"""ISBN-10 (구 규격)

9자리 숫자 + 체크 문자(숫자 또는 X)로 이루어진 10자리 식별자.
체크 문자는 ISO 2108 부속서의 가중 모듈러 11 알고리즘으로 계산한다.

사용 예:
    isbn10 = Isbn10("0-306-40615-2")
    isbn10.value          # "0306406152"
    isbn10.to_isbn13()    # Isbn13(value='9780306406157')
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from isbn_logging import IsbnLogger

from .base import Isbn, Version
from .errors import IsbnChecksumError, IsbnError, IsbnFormatError
from .utils import clean_isbn

if TYPE_CHECKING:
    from .isbn13 import Isbn13

logger = IsbnLogger("isbn10")

ISBN10_PATTERN = re.compile(r"[0-9]{9}[0-9X]")


def compute_check_digit(nine_digits: str) -> str:
    """
    ISBN-10 체크 문자 계산

    Args:
        nine_digits: 앞 9자리 숫자

    Returns:
        "0"~"9" 또는 "X"
    """
    total = sum((10 - i) * int(digit) for i, digit in enumerate(nine_digits[:9]))
    check = (11 - total % 11) % 11
    return "X" if check == 10 else str(check)


@dataclass(frozen=True)
class Isbn10(Isbn):
    """ISBN-10 값 객체

    하이픈/공백은 제거되고 대문자로 정규화된 뒤 검증된다.

    Raises:
        IsbnFormatError: 9자리 숫자 + 숫자/X 형식이 아닌 경우
        IsbnChecksumError: 체크 문자가 일치하지 않는 경우
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value
        if not isinstance(raw, str):
            error = IsbnFormatError(f"ISBN-10 must be a string, got {type(raw).__name__}", raw)
            logger.parse_rejected(raw, "format", str(error))
            raise error

        cleaned = clean_isbn(raw).upper()
        if not ISBN10_PATTERN.fullmatch(cleaned):
            error = IsbnFormatError(f"Invalid ISBN-10 format: {raw!r}", raw)
            logger.parse_rejected(raw, "format", str(error))
            raise error

        if compute_check_digit(cleaned[:9]) != cleaned[9]:
            error = IsbnChecksumError(f"Invalid ISBN-10 check digit: {raw!r}", raw)
            logger.parse_rejected(raw, "checksum", str(error))
            raise error

        # frozen dataclass 이므로 object.__setattr__ 로 정규형 저장
        object.__setattr__(self, "value", cleaned)
        logger.parse_complete(raw, cleaned, Version.ISBN_10.value)

    @property
    def version(self) -> Version:
        return Version.ISBN_10

    def can_convert_to(self, target: Version) -> bool:
        """ISBN-13으로만 변환 가능 (유효한 ISBN-10은 항상 가능)"""
        return target is Version.ISBN_13

    def to_isbn13(self) -> "Isbn13":
        """978 접두어를 붙이고 체크 디지트를 다시 계산해 ISBN-13 생성"""
        from .isbn13 import Isbn13, compute_check_digit as compute_isbn13_check_digit

        raw = "978" + self.value[:9]
        isbn13 = Isbn13(raw + compute_isbn13_check_digit(raw))
        logger.convert_complete(self.value, isbn13.value, Version.ISBN_13.value)
        return isbn13

    def to_isbn10(self) -> "Isbn10":
        return self

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """유효한 ISBN-10 문자열인지 여부 (예외를 던지지 않음)"""
        try:
            cls(raw)
        except IsbnError:
            return False
        return True
