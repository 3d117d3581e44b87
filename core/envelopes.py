"""
命令/响应信封

CommandEnvelope 每次派发新建，序列化后即丢弃；
ResponseEnvelope 由 Fusion 360 写入，解析时先校验 status 再信任其余字段。
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .errors import InvalidCommand, MalformedResponse

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def iso_timestamp() -> str:
    """UTC 毫秒精度，Z 结尾：2025-08-08T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class CommandEnvelope:
    command: str
    parameters: dict = field(default_factory=dict)
    timestamp: str = field(default_factory=iso_timestamp)

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "parameters": self.parameters,
            "timestamp": self.timestamp,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2, default=str)

    def encode(self) -> bytes:
        """UTF-8 字节；孤立代理字符等无法编码时抛 InvalidCommand"""
        try:
            return self.to_json().encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidCommand(
                f"Arguments for '{self.command}' cannot be encoded as UTF-8: {e.reason}"
            ) from e


@dataclass
class ResponseEnvelope:
    status: str
    result: Any = None
    message: Optional[str] = None
    traceback: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status == STATUS_ERROR

    @classmethod
    def parse(cls, text: str) -> "ResponseEnvelope":
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"invalid JSON ({e})", text) from e

        if not isinstance(data, dict):
            raise MalformedResponse("payload is not an object", text)

        status = data.get("status")
        if status not in (STATUS_SUCCESS, STATUS_ERROR):
            raise MalformedResponse(f"unexpected status {status!r}", text)

        for key in ("message", "traceback"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise MalformedResponse(f"'{key}' is not a string", text)

        return cls(
            status=status,
            result=data.get("result"),
            message=data.get("message"),
            traceback=data.get("traceback"),
        )
