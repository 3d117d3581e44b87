"""
Fusion MCP 配置

命令/响应文件路径与通道时序常量。
ChannelConfig 是显式的通道上下文，测试可以在临时目录下各建一个。
"""

import os
from dataclasses import dataclass

SERVER_NAME = "fusion-mcp-server"
SERVER_VERSION = "0.7.80"

COMMAND_FILE_NAME = "fusion_command.txt"
RESPONSE_FILE_NAME = "fusion_response.txt"

RESPONSE_TIMEOUT = 60.0  # 秒
POLL_INTERVAL = 0.1
SETTLE_DELAY = 0.05

WRITE_MAX_ATTEMPTS = 3
WRITE_BACKOFF_BASE = 0.1  # 2**attempt * base

MAX_MACRO_DEPTH = 10
MACRO_TOOL_NAME = "execute_macro"


def default_channel_dir() -> str:
    return os.path.join(os.path.expanduser("~"), "Documents")


@dataclass(frozen=True)
class ChannelConfig:
    """命令通道：一对固定路径 + 时序参数，进程启动后不再变化"""
    command_path: str
    response_path: str
    response_timeout: float = RESPONSE_TIMEOUT
    poll_interval: float = POLL_INTERVAL
    settle_delay: float = SETTLE_DELAY
    write_max_attempts: int = WRITE_MAX_ATTEMPTS
    write_backoff_base: float = WRITE_BACKOFF_BASE
    max_macro_depth: int = MAX_MACRO_DEPTH

    @classmethod
    def in_directory(cls, directory: str, **overrides) -> "ChannelConfig":
        return cls(
            command_path=os.path.join(directory, COMMAND_FILE_NAME),
            response_path=os.path.join(directory, RESPONSE_FILE_NAME),
            **overrides,
        )

    @classmethod
    def default(cls) -> "ChannelConfig":
        """~/Documents/fusion_command.txt + fusion_response.txt"""
        return cls.in_directory(default_channel_dir())
