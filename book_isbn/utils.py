"""ISBN 입력 정리 유틸리티"""

import re

_SEPARATORS = re.compile(r"[- ]")
_ISBN_SHAPE = re.compile(r"[0-9]{9}[0-9Xx]|[0-9]{13}")


def clean_isbn(isbn: str) -> str:
    """ISBN에서 하이픈/공백 제거"""
    return _SEPARATORS.sub("", isbn)


def is_isbn(query: str) -> bool:
    """ISBN-10 또는 ISBN-13 형식인지 확인 (체크 디지트는 검사하지 않음)

    Args:
        query: 검색어

    Returns:
        True if ISBN 형식 (9자리 숫자 + 숫자/X, 또는 13자리 숫자)
    """
    if not isinstance(query, str):
        return False
    return bool(_ISBN_SHAPE.fullmatch(clean_isbn(query)))
