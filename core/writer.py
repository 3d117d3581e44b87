"""
AtomicCommandWriter - 命令文件原子发布

先写唯一命名的临时文件，再 os.replace 覆盖固定命令路径，
Fusion 360 侧只会看到完整的旧内容或完整的新内容。
失败按 2**attempt * base 退避重试，耗尽后抛 WriteFailure。
载荷在任何文件 I/O 之前编码为 UTF-8，无法编码时抛 InvalidCommand（不重试）。
"""

import asyncio
import itertools
import os
import sys
import time
from datetime import datetime

from .envelopes import CommandEnvelope
from .errors import WriteFailure

_temp_seq = itertools.count(1)


def _log(msg: str):
    print(f"[FusionWriter] {datetime.now().isoformat()} - {msg}", file=sys.stderr)


class AtomicCommandWriter:

    def __init__(self, command_path: str, max_attempts: int = 3,
                 backoff_base: float = 0.1, sleep=asyncio.sleep):
        self.command_path = command_path
        self.max_attempts = max_attempts
        self.backoff_base = backoff_base
        self._sleep = sleep

    def _temp_path(self) -> str:
        return f"{self.command_path}.tmp.{time.time_ns()}.{os.getpid()}.{next(_temp_seq)}"

    def _write_once(self, payload: bytes):
        temp_path = self._temp_path()
        try:
            with open(temp_path, "wb") as f:
                f.write(payload)
            os.replace(temp_path, self.command_path)
        except Exception:
            # 任何失败都不留临时文件
            try:
                os.remove(temp_path)
            except OSError:
                pass
            raise

    async def publish(self, envelope: CommandEnvelope):
        payload = envelope.encode()
        last_error = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                self._write_once(payload)
                _log(f"command file written: {envelope.command}")
                return
            except OSError as e:
                last_error = e
                _log(f"write attempt {attempt} failed: {e}")
                if attempt < self.max_attempts:
                    await self._sleep((2 ** attempt) * self.backoff_base)
        raise WriteFailure(self.max_attempts, last_error)
