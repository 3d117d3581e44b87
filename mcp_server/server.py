"""
Fusion 360 MCP Server - 文件通道桥

list_tools 从 tools/registry 生成工具列表；
call_tool 经 CommandDispatcher 写命令文件、等待响应文件。
stdout 承载 MCP stdio 协议，日志一律写 stderr。
"""

import asyncio
import json
import signal
import sys
import traceback
from datetime import datetime

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import INTERNAL_ERROR, CallToolResult, TextContent, Tool

from ..config import SERVER_NAME, SERVER_VERSION, ChannelConfig
from ..core.dispatcher import CommandDispatcher, DispatchResult
from ..core.errors import MALFORMED_RESPONSE, REMOTE_ERROR
from ..tools.policies import normalize_tool_args
from ..tools.registry import ToolRegistry, get_registry


def _log(msg: str):
    print(f"[FusionMCP] {datetime.now().isoformat()} - {msg}", file=sys.stderr)


def format_success_text(name: str, result) -> str:
    text = f"Fusion 360 command '{name}' executed successfully."
    if result:
        if isinstance(result, (dict, list)):
            result_string = json.dumps(result, ensure_ascii=False, indent=2)
        else:
            result_string = str(result)
        text += f"\n\n**Result:**\n```\n{result_string}\n```"
    return text


def error_message(result: DispatchResult) -> str:
    # 远端错误与格式错误的消息本身已带上下文，其余统一加前缀
    if result.error_kind in (MALFORMED_RESPONSE, REMOTE_ERROR):
        return result.error
    return f"Failed to execute command '{result.name}': {result.error}"


def to_call_result(result: DispatchResult) -> CallToolResult:
    """DispatchResult -> CallToolResult；失败时 structuredContent 带 code 与 kind"""
    structured = result.to_dict()
    if result.success:
        text = format_success_text(result.name, result.result)
        return CallToolResult(content=[TextContent(type="text", text=text)], structuredContent=structured)

    message = error_message(result)
    structured.update({"code": INTERNAL_ERROR, "message": message})
    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        structuredContent=structured,
        isError=True,
    )


class FusionMCPServer:

    def __init__(self, config: ChannelConfig = None, registry: ToolRegistry = None):
        _log("initializing FusionMCPServer...")
        self.config = config or ChannelConfig.default()
        self.registry = registry or get_registry()
        self.dispatcher = CommandDispatcher(self.config, known_tools=self.registry.names())
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self.server.list_tools()(self.list_tools)
        # 参数先经 normalize_tool_args 强制转换，再由派发层校验
        self.server.call_tool(validate_input=False)(self.call_tool)
        _log(f"command file: {self.config.command_path}")
        _log(f"response file: {self.config.response_path}")

    async def list_tools(self) -> list[Tool]:
        tools = [Tool(**t.to_mcp()) for t in self.registry.get_all()]
        _log(f"returning {len(tools)} tools")
        return tools

    async def call_tool(self, name: str, arguments: dict) -> CallToolResult:
        _log(f"CallToolRequest received for tool: {name}")
        args = normalize_tool_args(self.registry, name, arguments or {})
        result = await self.dispatcher.dispatch(name, args)
        return to_call_result(result)

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            _log("server connected via stdio transport")
            await self.server.run(
                read_stream, write_stream, self.server.create_initialization_options()
            )


def _handle_sigterm(signum, frame):
    _log("received SIGTERM, shutting down...")
    sys.exit(0)


def main():
    _log("starting Fusion MCP Server...")
    signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        asyncio.run(FusionMCPServer().run())
    except KeyboardInterrupt:
        _log("received SIGINT, shutting down...")
    except Exception as e:
        # 未预期异常：退出进程
        _log(f"server failed: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
