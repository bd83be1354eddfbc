"""ISBN 파싱/변환 진입점

사용 예:
    isbn = parse("978-0-306-40615-7")
    isbn.version                           # Version.ISBN_13
    convert(isbn, Version.ISBN_10)         # Isbn10(value='0306406152')
    sorted(isbns, key=comparator().key)
"""

from isbn_logging import IsbnLogger

from .base import Isbn, Version
from .comparator import IsbnComparator
from .errors import IsbnFormatError
from .isbn10 import Isbn10
from .isbn13 import CONVERTIBLE_PREFIX, Isbn13
from .utils import clean_isbn

logger = IsbnLogger("parse")


def parse(raw: str | None) -> Isbn:
    """
    ISBN 문자열을 길이에 맞는 Isbn10 또는 Isbn13으로 변환

    하이픈과 공백은 무시한다.

    Args:
        raw: ISBN 문자열 (예: "978-0-306-40615-7")

    Returns:
        Isbn10 또는 Isbn13

    Raises:
        IsbnFormatError: None이거나 정리된 길이가 10/13이 아닌 경우, 또는 형식 오류
        IsbnChecksumError: 체크 디지트 불일치
    """
    if raw is None:
        logger.parse_rejected(raw, "format", "ISBN string must not be None")
        raise IsbnFormatError("ISBN string must not be None", raw)
    if not isinstance(raw, str):
        message = f"ISBN must be a string, got {type(raw).__name__}"
        logger.parse_rejected(raw, "format", message)
        raise IsbnFormatError(message, raw)

    cleaned = clean_isbn(raw)
    if len(cleaned) == 10:
        return Isbn10(cleaned)
    if len(cleaned) == 13:
        return Isbn13(cleaned)

    message = f"ISBN must be 10 or 13 digits long: {raw!r}"
    logger.parse_rejected(raw, "format", message)
    raise IsbnFormatError(message, raw)


def can_convert(isbn: Isbn, target: Version) -> bool:
    """isbn을 다른 버전인 target으로 변환할 수 있는지 여부"""
    if target is Version.ISBN_10:
        return isinstance(isbn, Isbn13) and isbn.value.startswith(CONVERTIBLE_PREFIX)
    if target is Version.ISBN_13:
        return isinstance(isbn, Isbn10)
    return False


def convert(isbn: Isbn, target: Version) -> Isbn | None:
    """
    target 버전으로 변환 (변환 불가하면 None)

    변환 불가는 오류가 아니라 도메인 규칙상 예상되는 결과다.
    """
    if not can_convert(isbn, target):
        logger.convert_unavailable(str(isbn), target.value)
        return None
    if target is Version.ISBN_10:
        return isbn.to_isbn10()
    return isbn.to_isbn13()


def comparator() -> IsbnComparator:
    """13자리 정규형 기준 비교기 (싱글톤)"""
    return IsbnComparator.INSTANCE
