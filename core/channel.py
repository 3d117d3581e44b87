"""
ResponseChannel - 响应文件轮询

每次请求前清空响应文件，之后每 poll_interval 检查一次：
文件存在、大小非零、settle 延迟后大小未变且内容非空 → 返回内容。
文件暂时不存在/写到一半等瞬时错误视为"尚未就绪"，直到超时。

已知竞态：settle 延迟只是缓解手段，Fusion 360 分多次 flush 且间隔
超过 settle 延迟时仍可能读到半截内容（解析阶段会报 MalformedResponse）。
取消等待只会停止轮询，已发布的命令文件无法撤回。
"""

import asyncio
import os
import sys
import time
from datetime import datetime

from .errors import ResponseTimeout


def _log(msg: str):
    print(f"[FusionChannel] {datetime.now().isoformat()} - {msg}", file=sys.stderr)


class ResponseChannel:

    def __init__(self, response_path: str, poll_interval: float = 0.1,
                 settle_delay: float = 0.05, default_timeout: float = 60.0):
        self.response_path = response_path
        self.poll_interval = poll_interval
        self.settle_delay = settle_delay
        self.default_timeout = default_timeout

    def clear(self):
        """清空响应文件；失败只记录，不影响本次派发"""
        try:
            with open(self.response_path, "w", encoding="utf-8") as f:
                f.write("")
            _log("response file cleared")
        except OSError as e:
            _log(f"failed to clear response file: {e}")

    async def _try_read(self):
        try:
            size = os.stat(self.response_path).st_size
            if size <= 0:
                return None
            await asyncio.sleep(self.settle_delay)
            # settle 期间仍在增长说明写入未完成，下一轮再看
            if os.stat(self.response_path).st_size != size:
                return None
            with open(self.response_path, "r", encoding="utf-8") as f:
                content = f.read().strip()
        except (OSError, UnicodeDecodeError):
            return None
        return content or None

    async def await_update(self, timeout: float = None) -> str:
        if timeout is None:
            timeout = self.default_timeout
        _log(f"waiting for {os.path.basename(self.response_path)} to be updated...")
        deadline = time.monotonic() + timeout
        try:
            while time.monotonic() < deadline:
                content = await self._try_read()
                if content is not None:
                    _log("response file content read")
                    return content
                await asyncio.sleep(self.poll_interval)
        except asyncio.CancelledError:
            _log("wait cancelled; the published command may still be executed by Fusion 360")
            raise
        _log("timeout waiting for response file update")
        raise ResponseTimeout(timeout)
