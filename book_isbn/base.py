"""ISBN 공통 계약

ISO 2108 도서 번호의 두 가지 형태(ISBN-10, ISBN-13)가 공유하는
추상 기본 클래스와 버전 태그를 정의한다.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .isbn10 import Isbn10
    from .isbn13 import Isbn13


class Version(Enum):
    """ISBN 버전 태그"""

    ISBN_10 = "ISBN_10"
    ISBN_13 = "ISBN_13"


class Isbn(ABC):
    """ISBN 값 객체 기본 클래스

    구현체는 Isbn10, Isbn13 두 가지뿐이다. 생성된 인스턴스는 항상 유효하며
    (형식/체크 디지트 검증은 생성자에서 한 번만 수행), 이후 변경되지 않는다.

    서브클래스는 정규화된 문자열 ``value`` 필드를 가진다.
    동등성(==)은 같은 형태 안에서의 값 비교이고, 대소 비교는 13자리 정규형
    기준이다. 따라서 Isbn10("0306406152")와 Isbn13("9780306406157")은
    같지 않지만(!=) 정렬 순서상으로는 동일한 위치에 놓인다.
    """

    value: str

    @property
    @abstractmethod
    def version(self) -> Version:
        """ISBN 버전"""

    @abstractmethod
    def can_convert_to(self, target: Version) -> bool:
        """target 버전으로 변환 가능한지 여부"""

    @abstractmethod
    def to_isbn13(self) -> "Isbn13 | None":
        """ISBN-13으로 변환 (불가능하면 None)"""

    @abstractmethod
    def to_isbn10(self) -> "Isbn10 | None":
        """ISBN-10으로 변환 (불가능하면 None)"""

    def __str__(self) -> str:
        return self.value

    # === 정렬 (13자리 정규형 기준) ===

    def _compare(self, other: object) -> int | None:
        if not isinstance(other, Isbn):
            return None
        from .comparator import IsbnComparator

        return IsbnComparator.INSTANCE.compare(self, other)

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0
