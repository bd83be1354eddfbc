"""ISBN 라이브러리 전용 로거"""

import logging
import sys
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter

ROOT_LOGGER_NAME = "isbn"


class IsbnLogger:
    """
    ISBN 라이브러리 전용 로거

    - 콘솔: 사람이 읽기 쉬운 컬러 포맷
    - 파일: JSON Lines 포맷 (기계 분석용)

    라이브러리는 import 시점에 핸들러를 설치하지 않는다.
    출력이 필요하면 호스트 애플리케이션이 configure()를 호출한다.

    Usage:
        IsbnLogger.configure(level="DEBUG")
        logger = IsbnLogger("parse")
        logger.parse_complete("0-306-40615-2", "0306406152", "ISBN_10")
        logger.convert_unavailable("9791234567896", "ISBN_10")
    """

    _root_logger: logging.Logger | None = None
    _file_handler: logging.FileHandler | None = None
    _console_handler: logging.StreamHandler | None = None

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_file: str | Path | None = None,
        console: bool = True,
    ) -> None:
        """
        전역 로깅 설정

        Args:
            level: 로깅 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_file: JSON Lines 로그 파일 경로
            console: 콘솔 출력 여부
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        log_level = getattr(logging, level.upper())
        root.setLevel(log_level)

        # 기존 핸들러 정리
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        cls._console_handler = None
        cls._file_handler = None

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ConsoleFormatter())
            root.addHandler(console_handler)
            cls._console_handler = console_handler

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)
            cls._file_handler = file_handler

        cls._root_logger = root

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        """구조화된 로그 출력"""
        if not self.logger.isEnabledFor(level):
            return
        extra = {
            "component": self.name,
            "event": event,
            **kwargs,
        }
        self.logger.log(level, event, extra=extra)

    # === 파싱 로깅 ===

    def parse_complete(self, raw: str, value: str, version: str) -> None:
        """
        파싱/생성 성공 로깅

        Args:
            raw: 입력 원문
            value: 정규화된 ISBN 값
            version: ISBN_10 또는 ISBN_13
        """
        self._log(
            logging.DEBUG,
            "parse_complete",
            raw=raw,
            value=value,
            version=version,
        )

    def parse_rejected(self, raw: Any, reason: str, error: str) -> None:
        """
        입력 거부 로깅

        Args:
            raw: 입력 원문
            reason: 거부 사유 (format, checksum)
            error: 예외 메시지
        """
        self._log(
            logging.DEBUG,
            "parse_rejected",
            raw=raw if isinstance(raw, str) else repr(raw),
            reason=reason,
            error=error,
        )

    # === 변환 로깅 ===

    def convert_complete(self, source: str, value: str, target: str) -> None:
        """버전 변환 성공 로깅"""
        self._log(
            logging.DEBUG,
            "convert_complete",
            source=source,
            value=value,
            target=target,
        )

    def convert_unavailable(self, source: str, target: str) -> None:
        """변환 불가 로깅 (979 접두어 등, 정상 흐름)"""
        self._log(
            logging.DEBUG,
            "convert_unavailable",
            source=source,
            target=target,
        )

    # === 에러 로깅 ===

    def invariant_violation(self, error: str, context: dict[str, Any] | None = None) -> None:
        """내부 불변식 위반 로깅 (구현 결함)"""
        self._log(
            logging.ERROR,
            "invariant_violation",
            error=error,
            **(context or {}),
        )

    def debug(self, debug_msg: str, **kwargs: Any) -> None:
        """디버그 메시지 로깅"""
        self._log(logging.DEBUG, "debug", debug_msg=debug_msg, **kwargs)
