"""선언적 검증 프레임워크 연동

- 불리언 검증 함수: 예외 없이 True/False 반환
- pydantic 필드 타입: 문자열 또는 인스턴스를 받아 검증 후 값 객체로 변환하고,
  직렬화 시 정규 문자열로 되돌린다

사용 예:
    class Book(BaseModel):
        isbn: Isbn13Field
        legacy_isbn: Isbn10Field | None = None

    Book(isbn="978-0-306-40615-7").isbn          # Isbn13(value='9780306406157')
    Book(isbn="978-0-306-40615-7").model_dump()  # {"isbn": "9780306406157", ...}
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from .base import Isbn
from .core import parse
from .errors import IsbnError
from .isbn10 import Isbn10
from .isbn13 import Isbn13


def is_valid_isbn10(raw: Any) -> bool:
    """유효한 ISBN-10 문자열인지 여부"""
    return Isbn10.is_valid(raw)


def is_valid_isbn13(raw: Any) -> bool:
    """유효한 ISBN-13 문자열인지 여부"""
    return Isbn13.is_valid(raw)


def is_valid_isbn(raw: Any) -> bool:
    """ISBN-10 또는 ISBN-13으로 파싱 가능한지 여부"""
    try:
        parse(raw)
    except IsbnError:
        return False
    return True


def _to_isbn10(value: Any) -> Isbn10:
    if isinstance(value, Isbn10):
        return value
    return Isbn10(value)


def _to_isbn13(value: Any) -> Isbn13:
    if isinstance(value, Isbn13):
        return value
    return Isbn13(value)


def _to_isbn(value: Any) -> Isbn:
    if isinstance(value, (Isbn10, Isbn13)):
        return value
    return parse(value)


def _to_str(isbn: Isbn) -> str:
    return isbn.value


_serialize = PlainSerializer(_to_str, return_type=str)

Isbn10Field = Annotated[Isbn10, PlainValidator(_to_isbn10), _serialize]
Isbn13Field = Annotated[Isbn13, PlainValidator(_to_isbn13), _serialize]
IsbnField = Annotated[Isbn, PlainValidator(_to_isbn), _serialize]
