"""공통 테스트 fixtures"""

import logging

import pytest

from isbn_logging import IsbnLogger

# (ISBN-10, 대응 ISBN-13) 쌍
EQUIVALENT_PAIRS = [
    ("0306406152", "9780306406157"),
    ("0439023483", "9780439023481"),
    ("316148410X", "9783161484100"),
    ("3030516717", "9783030516710"),
    ("123456789X", "9781234567897"),
    ("2000000010", "9782000000013"),
]


@pytest.fixture
def equivalent_pairs():
    """ISBN-10 / ISBN-13 대응 쌍"""
    return list(EQUIVALENT_PAIRS)


@pytest.fixture
def isbn_log_records(caplog):
    """isbn 로거의 DEBUG 레코드 수집"""
    caplog.set_level(logging.DEBUG, logger="isbn")

    def _records(event: str | None = None) -> list[logging.LogRecord]:
        records = [r for r in caplog.records if r.name.startswith("isbn")]
        if event is None:
            return records
        return [r for r in records if getattr(r, "event", None) == event]

    return _records


@pytest.fixture
def reset_isbn_logger():
    """configure()로 설치한 핸들러를 테스트 후 정리"""
    yield IsbnLogger
    root = logging.getLogger("isbn")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
