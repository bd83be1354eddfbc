"""ISBN 예외 계층"""


class IsbnError(ValueError):
    """잘못된 ISBN 입력 (호출자가 입력을 고쳐야 하는 오류)"""

    def __init__(self, message: str, raw: object = None):
        super().__init__(message)
        self.raw = raw


class IsbnFormatError(IsbnError):
    """형식 오류: 길이, 허용되지 않는 문자, 체크 문자 알파벳, 978/979 접두어"""


class IsbnChecksumError(IsbnError):
    """체크 디지트 불일치"""


class IsbnConsistencyError(RuntimeError):
    """내부 불변식 위반. 사용자 입력 문제가 아니라 구현 결함을 뜻한다."""
