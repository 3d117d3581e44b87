"""
Tool argument normalization policies.

按工具 schema 对数值参数做通用容错转换（number / integer / integer 数组），
默认值与上下限取自 schema。非数值参数原样透传，不做领域语义校验。
"""

import math

from ..config import MACRO_TOOL_NAME
from ..core.numeric import to_integer, to_number
from .registry import ToolRegistry


def _coerce(value, prop: dict):
    kind = prop.get("type")
    default = prop.get("default")
    lo = prop.get("minimum", -math.inf)
    hi = prop.get("maximum", math.inf)
    if kind == "integer":
        return to_integer(value, default, lo, hi)
    return to_number(value, default, lo, hi)


def normalize_tool_args(registry: ToolRegistry, tool_name: str, arguments: dict) -> dict:
    args = dict(arguments or {})

    if tool_name == MACRO_TOOL_NAME:
        commands = args.get("commands")
        if isinstance(commands, list):
            args["commands"] = [_normalize_step(registry, item) for item in commands]
        return args

    tool = registry.get(tool_name)
    if tool is None:
        return args

    for key, prop in tool.properties.items():
        if key not in args or not isinstance(prop, dict):
            continue
        kind = prop.get("type")
        if kind in ("number", "integer"):
            value = _coerce(args[key], prop)
            if value is None:
                # 无法转换且 schema 没有默认值，交给 Fusion 360 侧用自己的默认
                args.pop(key)
            else:
                args[key] = value
        elif kind == "array" and isinstance(args[key], list):
            items = prop.get("items") or {}
            if items.get("type") in ("number", "integer"):
                coerced = [_coerce(v, items) for v in args[key]]
                args[key] = [v for v in coerced if v is not None]

    return args


def _normalize_step(registry: ToolRegistry, item):
    if not isinstance(item, dict) or not isinstance(item.get("arguments"), dict):
        return item
    step = dict(item)
    step["arguments"] = normalize_tool_args(registry, step.get("tool_name"), step["arguments"])
    return step
