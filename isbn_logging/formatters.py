"""로그 포매터"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# LogRecord 기본 속성 (extra 필드 추출 시 제외)
_RECORD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class ConsoleFormatter(logging.Formatter):
    """
    콘솔용 사람이 읽기 쉬운 포맷

    출력 예시:
    2024-01-15 10:30:45 [DEBUG] [parse] 파싱 완료: "0-306-40615-2" → 0306406152 (ISBN_10)
    2024-01-15 10:30:45 [DEBUG] [convert] 변환 불가: 9791234567896 → ISBN_10
    """

    # ANSI 색상 코드
    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",   # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        level_color = self.COLORS.get(record.levelno, "")
        level_name = record.levelname

        component = getattr(record, "component", "")
        event = getattr(record, "event", "")

        prefix = f"{self.DIM}{timestamp}{self.RESET} [{level_color}{level_name}{self.RESET}]"
        if component:
            prefix += f" [{self.BOLD}{component}{self.RESET}]"

        message = self._format_event(record, event)

        return f"{prefix} {message}"

    def _format_event(self, record: logging.LogRecord, event: str) -> str:
        """이벤트 타입별 메시지 포맷팅"""

        if event == "parse_complete":
            raw = getattr(record, "raw", "")
            value = getattr(record, "value", "")
            version = getattr(record, "version", "")
            return f"파싱 완료: \"{raw}\" → {value} ({version})"

        elif event == "parse_rejected":
            raw = getattr(record, "raw", "")
            reason = getattr(record, "reason", "")
            error = getattr(record, "error", "")
            return f"파싱 거부 [{reason}]: \"{raw}\"\n  → {error}"

        elif event == "convert_complete":
            source = getattr(record, "source", "")
            value = getattr(record, "value", "")
            target = getattr(record, "target", "")
            return f"변환 완료: {source} → {value} ({target})"

        elif event == "convert_unavailable":
            source = getattr(record, "source", "")
            target = getattr(record, "target", "")
            return f"변환 불가: {source} → {target}"

        elif event == "invariant_violation":
            error = getattr(record, "error", "")
            return f"내부 불변식 위반: {error}"

        elif event == "debug":
            return getattr(record, "debug_msg", "")

        else:
            error = getattr(record, "error", "")
            if error:
                return f"{event}: {error}"
            return event or record.getMessage()


class JsonFormatter(logging.Formatter):
    """
    JSON Lines 포맷 (기계 분석용)

    출력 예시:
    {"ts":"2024-01-15T10:30:45.123+00:00","level":"DEBUG","component":"parse","event":"parse_complete",...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                # JSON 직렬화 가능한 값만 그대로 포함
                if isinstance(value, (str, int, float, bool, type(None), list, dict)):
                    log_entry[key] = value
                else:
                    log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False)
