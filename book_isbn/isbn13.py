"""ISBN-13 (현행 규격)

978 또는 979로 시작하는 13자리 숫자. 마지막 자리는 1/3 교대 가중치의
모듈러 10 체크 디지트다.

979 접두어는 ISBN-10 번호 공간이 소진된 뒤 도입되었으므로
ISBN-10으로 변환할 수 없다. 이 경우 to_isbn10()은 예외 대신 None을 반환한다.
"""

import re
from dataclasses import dataclass

from isbn_logging import IsbnLogger

from .base import Isbn, Version
from .errors import IsbnChecksumError, IsbnError, IsbnFormatError
from .isbn10 import Isbn10, compute_check_digit as compute_isbn10_check_digit
from .utils import clean_isbn

logger = IsbnLogger("isbn13")

ISBN13_PATTERN = re.compile(r"97[89][0-9]{10}")

# ISBN-10과 대응 관계가 있는 유일한 접두어
CONVERTIBLE_PREFIX = "978"


def compute_check_digit(twelve_digits: str) -> str:
    """
    ISBN-13 체크 디지트 계산

    Args:
        twelve_digits: 앞 12자리 숫자

    Returns:
        "0"~"9"
    """
    total = sum(
        int(digit) * (1 if i % 2 == 0 else 3)
        for i, digit in enumerate(twelve_digits[:12])
    )
    return str((10 - total % 10) % 10)


@dataclass(frozen=True)
class Isbn13(Isbn):
    """ISBN-13 값 객체

    Raises:
        IsbnFormatError: 978/979로 시작하는 13자리 숫자가 아닌 경우
        IsbnChecksumError: 체크 디지트가 일치하지 않는 경우
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value
        if not isinstance(raw, str):
            error = IsbnFormatError(f"ISBN-13 must be a string, got {type(raw).__name__}", raw)
            logger.parse_rejected(raw, "format", str(error))
            raise error

        cleaned = clean_isbn(raw)
        if not ISBN13_PATTERN.fullmatch(cleaned):
            error = IsbnFormatError(f"Invalid ISBN-13 format: {raw!r}", raw)
            logger.parse_rejected(raw, "format", str(error))
            raise error

        if compute_check_digit(cleaned[:12]) != cleaned[12]:
            error = IsbnChecksumError(f"Invalid ISBN-13 check digit: {raw!r}", raw)
            logger.parse_rejected(raw, "checksum", str(error))
            raise error

        object.__setattr__(self, "value", cleaned)
        logger.parse_complete(raw, cleaned, Version.ISBN_13.value)

    @property
    def version(self) -> Version:
        return Version.ISBN_13

    @property
    def prefix(self) -> str:
        """GS1 접두어 (978 또는 979)"""
        return self.value[:3]

    def can_convert_to(self, target: Version) -> bool:
        """978 접두어인 경우에만 ISBN-10으로 변환 가능"""
        return target is Version.ISBN_10 and self.prefix == CONVERTIBLE_PREFIX

    def to_isbn13(self) -> "Isbn13":
        return self

    def to_isbn10(self) -> Isbn10 | None:
        """접두어와 체크 디지트를 떼어낸 가운데 9자리로 ISBN-10 생성"""
        if not self.can_convert_to(Version.ISBN_10):
            logger.convert_unavailable(self.value, Version.ISBN_10.value)
            return None

        raw = self.value[3:12]
        isbn10 = Isbn10(raw + compute_isbn10_check_digit(raw))
        logger.convert_complete(self.value, isbn10.value, Version.ISBN_10.value)
        return isbn10

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """유효한 ISBN-13 문자열인지 여부 (예외를 던지지 않음)"""
        try:
            cls(raw)
        except IsbnError:
            return False
        return True
