"""ISBN 정렬 비교기

ISBN-10은 ISBN-13으로 승격한 뒤, 13자리 정규 문자열을 사전순으로 비교한다.
길이가 같은 숫자 문자열이므로 사전순과 수치 순서가 일치한다.

- 978 접두어 값은 (원래 ISBN-13이든 승격된 ISBN-10이든) 979 접두어 값보다 앞선다
- ISBN-10은 대응되는 ISBN-13과 같은 위치에 놓인다
"""

from isbn_logging import IsbnLogger

from .base import Isbn
from .errors import IsbnConsistencyError
from .isbn10 import Isbn10
from .isbn13 import Isbn13

logger = IsbnLogger("comparator")


class IsbnComparator:
    """13자리 정규형 기준 ISBN 비교기 (상태 없음)

    직접 만들지 말고 IsbnComparator.INSTANCE 또는 comparator()를 사용한다.

    Usage:
        sorted(isbns, key=comparator().key)
        sorted(isbns, key=functools.cmp_to_key(comparator()))
    """

    INSTANCE: "IsbnComparator"

    __slots__ = ()

    def __call__(self, a: Isbn, b: Isbn) -> int:
        return self.compare(a, b)

    def compare(self, a: Isbn, b: Isbn) -> int:
        """a < b 이면 음수, 같으면 0, a > b 이면 양수"""
        a_value = self.key(a)
        b_value = self.key(b)
        return (a_value > b_value) - (a_value < b_value)

    def key(self, isbn: Isbn) -> str:
        """정렬 키: 13자리 정규 문자열"""
        if isinstance(isbn, Isbn13):
            return isbn.value
        if isinstance(isbn, Isbn10):
            promoted = isbn.to_isbn13()
            if promoted is None:
                message = f"Isbn10 could not be converted to Isbn13: {isbn.value}"
                logger.invariant_violation(message, {"value": isbn.value})
                raise IsbnConsistencyError(message)
            return promoted.value
        raise TypeError(f"Unknown Isbn subtype: {type(isbn).__name__}")

    def __reduce__(self):
        # 싱글톤 유지 (pickle 후에도 INSTANCE)
        return (_instance, ())

    def __repr__(self) -> str:
        return "IsbnComparator.INSTANCE"


def _instance() -> IsbnComparator:
    return IsbnComparator.INSTANCE


IsbnComparator.INSTANCE = IsbnComparator()
