"""
工具层：统一入口

工具目录（静态 schema 数据）、注册表与参数规范化策略。
"""

from .policies import normalize_tool_args
from .registry import ToolDef, ToolRegistry, build_registry, get_registry

__all__ = ["ToolDef", "ToolRegistry", "build_registry", "get_registry", "normalize_tool_args"]
