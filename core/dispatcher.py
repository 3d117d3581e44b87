"""
CommandDispatcher - 命令派发编排

单次派发（leaf）：
    Idle -> ResponseCleared -> CommandWritten -> AwaitingResponse -> Succeeded | Failed

execute_macro：整棵宏树先做纯内存校验（结构、工具名、UTF-8 可编码、嵌套深度、自引用），
通过后按顺序逐步派发，第一个失败即中止后续步骤。
嵌套深度是递归的主要上限；宏标识取调用方给的 macro_id（缺省为步骤指纹），
子宏复用祖先链上的标识即判为自引用。

同一 dispatcher 内所有顶层派发经 asyncio.Lock 串行化：
命令/响应两个文件是共享通道，同一时刻只能有一个命令在途。
本层不做重试，超时/远端错误原样上报。
"""

import asyncio
import hashlib
import json
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

from ..config import MACRO_TOOL_NAME, ChannelConfig
from .channel import ResponseChannel
from .envelopes import CommandEnvelope, ResponseEnvelope
from .errors import (
    BridgeError,
    InvalidCommand,
    MacroDepthExceeded,
    MalformedResponse,
    RemoteExecutionError,
)
from .writer import AtomicCommandWriter

IDLE = "idle"
RESPONSE_CLEARED = "response_cleared"
COMMAND_WRITTEN = "command_written"
AWAITING_RESPONSE = "awaiting_response"
SUCCEEDED = "succeeded"
FAILED = "failed"


def _log(msg: str):
    print(f"[FusionDispatcher] {datetime.now().isoformat()} - {msg}", file=sys.stderr)


@dataclass
class DispatchResult:
    """派发结果：success=False 时 error_kind 取自 core.errors 的 kind 常量"""
    name: str
    success: bool
    result: Any = None
    error: str = ""
    error_kind: str = ""
    details: dict = field(default_factory=dict)
    steps: list = field(default_factory=list)  # 宏：已执行步骤的 DispatchResult

    @classmethod
    def ok(cls, name: str, result: Any, steps: list = None) -> "DispatchResult":
        return cls(name=name, success=True, result=result, steps=steps or [])

    @classmethod
    def fail(cls, name: str, error: BridgeError) -> "DispatchResult":
        return cls(
            name=name,
            success=False,
            error=error.message,
            error_kind=error.kind,
            details=_error_details(error),
        )

    def to_dict(self) -> dict:
        data = {
            "success": self.success,
            "result": self.result,
            "error": self.error or None,
        }
        if not self.success:
            data["kind"] = self.error_kind
        return data


def _error_details(error: BridgeError) -> dict:
    if isinstance(error, MalformedResponse):
        return {"raw": error.raw}
    if isinstance(error, RemoteExecutionError):
        return {"message": error.remote_message, "traceback": error.traceback}
    return {}


def _fingerprint(steps: list) -> str:
    raw = json.dumps(steps, sort_keys=True, default=str)
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()


def _macro_id(args: dict, steps: list) -> str:
    """调用方给出的 macro_id 优先，否则取步骤列表的 sha1 指纹"""
    macro_id = args.get("macro_id")
    if isinstance(macro_id, str) and macro_id:
        return macro_id
    return _fingerprint(steps)


class CommandDispatcher:

    def __init__(
        self,
        config: ChannelConfig,
        known_tools: Optional[Iterable[str]] = None,
        writer: AtomicCommandWriter = None,
        channel: ResponseChannel = None,
    ):
        self.config = config
        self.known_tools = set(known_tools) if known_tools is not None else None
        self.max_macro_depth = config.max_macro_depth
        self.writer = writer or AtomicCommandWriter(
            config.command_path,
            max_attempts=config.write_max_attempts,
            backoff_base=config.write_backoff_base,
        )
        self.channel = channel or ResponseChannel(
            config.response_path,
            poll_interval=config.poll_interval,
            settle_delay=config.settle_delay,
            default_timeout=config.response_timeout,
        )
        self.state = IDLE
        self._active_macros: set[str] = set()
        self._lock = asyncio.Lock()

    async def dispatch(self, name: str, args: dict = None) -> DispatchResult:
        args = args or {}
        async with self._lock:
            try:
                self._validate(name, args, depth=1, chain=frozenset())
            except BridgeError as e:
                _log(f"rejected '{name}': {e.message}")
                return DispatchResult.fail(name, e)
            result = await self._execute(name, args, depth=1)
        if result.success:
            _log(f"successfully executed '{name}'")
        else:
            _log(f"'{name}' failed ({result.error_kind}): {result.error.splitlines()[0] if result.error else ''}")
        return result

    # ========== 校验（无文件 I/O） ==========

    def _validate(self, name: str, args: dict, depth: int, chain: frozenset):
        if name != MACRO_TOOL_NAME:
            if self.known_tools is not None and name not in self.known_tools:
                raise InvalidCommand(f"Unknown tool: {name}")
            CommandEnvelope(command=name, parameters=args).encode()
            return

        if depth > self.max_macro_depth:
            raise MacroDepthExceeded(
                f"Macro nesting depth {depth} exceeds limit of {self.max_macro_depth}"
            )
        steps = self._expand_macro(args)
        macro_id = _macro_id(args, steps)
        if macro_id in chain:
            raise MacroDepthExceeded(f"Macro '{macro_id}' invokes itself recursively")
        for tool_name, arguments in steps:
            self._validate(tool_name, arguments, depth + 1, chain | {macro_id})

    @staticmethod
    def _expand_macro(args: dict) -> list:
        commands = args.get("commands") if isinstance(args, dict) else None
        if not isinstance(commands, list):
            raise InvalidCommand("execute_macro requires a 'commands' array")

        steps = []
        for index, item in enumerate(commands, start=1):
            if not isinstance(item, dict) or not isinstance(item.get("tool_name"), str) or not item["tool_name"]:
                raise InvalidCommand(f"Macro step {index} is missing 'tool_name'")
            arguments = item.get("arguments") or {}
            if not isinstance(arguments, dict):
                raise InvalidCommand(f"Macro step {index} has non-object 'arguments'")
            steps.append((item["tool_name"], arguments))
        return steps

    # ========== 执行 ==========

    async def _execute(self, name: str, args: dict, depth: int) -> DispatchResult:
        if name == MACRO_TOOL_NAME:
            return await self._run_macro(args, depth)
        try:
            result = await self._run_leaf(name, args)
        except BridgeError as e:
            self.state = FAILED
            return DispatchResult.fail(name, e)
        return DispatchResult.ok(name, result)

    async def _run_macro(self, args: dict, depth: int) -> DispatchResult:
        steps = self._expand_macro(args)
        macro_id = _macro_id(args, steps)
        self._active_macros.add(macro_id)
        _log(f"running macro with {len(steps)} steps (depth {depth})")
        completed = []
        try:
            for index, (tool_name, arguments) in enumerate(steps, start=1):
                step = await self._execute(tool_name, arguments, depth + 1)
                completed.append(step)
                if not step.success:
                    # 中止剩余步骤，失败即宏的失败
                    return DispatchResult(
                        name=MACRO_TOOL_NAME,
                        success=False,
                        error=f"Macro step {index} ('{tool_name}') failed: {step.error}",
                        error_kind=step.error_kind,
                        details={**step.details, "failed_step": index, "tool_name": tool_name},
                        steps=completed,
                    )
        finally:
            self._active_macros.discard(macro_id)

        return DispatchResult.ok(
            MACRO_TOOL_NAME,
            {
                "completed_steps": len(completed),
                "results": [{"tool_name": s.name, "result": s.result} for s in completed],
            },
            steps=completed,
        )

    async def _run_leaf(self, name: str, args: dict) -> Any:
        self.state = IDLE
        self.channel.clear()
        self.state = RESPONSE_CLEARED

        envelope = CommandEnvelope(command=name, parameters=args)
        _log(f"executing Fusion command: {name}")
        await self.writer.publish(envelope)
        self.state = COMMAND_WRITTEN

        _log(f"command '{name}' sent, waiting for response...")
        self.state = AWAITING_RESPONSE
        content = await self.channel.await_update()

        response = ResponseEnvelope.parse(content)
        if response.is_error:
            raise RemoteExecutionError(name, response.message or "Unknown error", response.traceback)

        self.state = SUCCEEDED
        return response.result
