"""
命令通道错误分类

核心内部抛出 BridgeError 子类，CommandDispatcher 在边界处
统一转换为 DispatchResult（kind + 可读消息）。
"""

WRITE_FAILURE = "write_failure"
RESPONSE_TIMEOUT = "response_timeout"
MALFORMED_RESPONSE = "malformed_response"
REMOTE_ERROR = "remote_error"
MACRO_DEPTH_EXCEEDED = "macro_depth_exceeded"
INVALID_COMMAND = "invalid_command"


class BridgeError(Exception):
    kind = "bridge_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WriteFailure(BridgeError):
    """重试耗尽仍无法发布命令文件"""
    kind = WRITE_FAILURE

    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(
            f"Failed to write command file after {attempts} attempts: {last_error}"
        )
        self.attempts = attempts
        self.last_error = last_error


class ResponseTimeout(BridgeError):
    kind = RESPONSE_TIMEOUT

    def __init__(self, timeout: float):
        self.timeout_ms = int(round(timeout * 1000))
        super().__init__(f"Timeout waiting for Fusion 360 response ({self.timeout_ms}ms)")


class MalformedResponse(BridgeError):
    """响应内容不是合法的结构化数据，raw 保留原文供诊断"""
    kind = MALFORMED_RESPONSE

    def __init__(self, reason: str, raw: str):
        super().__init__(f"Received malformed response from Fusion 360: {reason}")
        self.reason = reason
        self.raw = raw


class RemoteExecutionError(BridgeError):
    """Fusion 360 侧明确报告失败，message/traceback 原样透传"""
    kind = REMOTE_ERROR

    def __init__(self, command: str, remote_message: str, traceback: str = None):
        super().__init__(
            f"Fusion 360 Error for '{command}': {remote_message}\n\n"
            f"Traceback:\n{traceback or 'N/A'}"
        )
        self.command = command
        self.remote_message = remote_message
        self.traceback = traceback


class MacroDepthExceeded(BridgeError):
    kind = MACRO_DEPTH_EXCEEDED


class InvalidCommand(BridgeError):
    kind = INVALID_COMMAND
