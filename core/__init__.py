"""
core 包 - 文件通道命令桥核心

模块:
- numeric.py: 数值参数容错转换
- envelopes.py: 命令/响应信封
- writer.py: 命令文件原子发布（临时文件 + rename，退避重试）
- channel.py: 响应文件清空与轮询
- dispatcher.py: 派发编排、宏展开、串行化
- errors.py: 错误分类
"""

from .dispatcher import CommandDispatcher, DispatchResult
from .errors import (
    BridgeError,
    InvalidCommand,
    MacroDepthExceeded,
    MalformedResponse,
    RemoteExecutionError,
    ResponseTimeout,
    WriteFailure,
)

__all__ = [
    "CommandDispatcher", "DispatchResult",
    "BridgeError", "InvalidCommand", "MacroDepthExceeded", "MalformedResponse",
    "RemoteExecutionError", "ResponseTimeout", "WriteFailure",
]
