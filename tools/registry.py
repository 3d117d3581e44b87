"""
Tool Registry - 工具注册表

单一来源定义所有 Fusion 360 工具。
MCP list_tools 与派发层的"合法命令名集合"都从这里取；
分组决定 list_tools 里的 readOnlyHint / destructiveHint 注解。
"""

import sys
from dataclasses import dataclass, field
from typing import Optional


def _log(msg: str):
    print(f"[ToolRegistry] {msg}", file=sys.stderr)


# ========== 工具分组定义 ==========

TOOL_GROUPS = {
    "macro": ["execute_macro"],
    "primitive": [
        "create_cube", "create_cylinder", "create_box", "create_sphere",
        "create_hemisphere", "create_cone", "create_polygon_prism",
        "create_torus", "create_half_torus", "create_pipe",
        "create_polygon_sweep",
    ],
    "pattern": [
        "copy_body_symmetric", "create_circular_pattern",
        "create_rectangular_pattern",
    ],
    "edge": ["add_fillet", "add_chamfer"],
    "boolean": ["combine_selection", "combine_selection_all", "combine_by_name"],
    "transform": ["move_by_name", "rotate_by_name", "hide_body", "show_body"],
    "selection": ["select_body", "select_bodies", "select_all_bodies"],
    "document": ["delete_all_features"],
    "query": [
        "debug_coordinate_info", "get_bounding_box", "get_body_center",
        "get_body_dimensions", "get_faces_info", "get_edges_info",
        "get_mass_properties", "get_body_relationships", "measure_distance",
    ],
}

# 只读取信息，不改动设计
READ_ONLY_GROUPS = {"query"}
# 会清除已有建模结果
DESTRUCTIVE_GROUPS = {"document"}


@dataclass
class ToolDef:
    """工具定义"""
    name: str
    description: str
    input_schema: dict
    groups: list = field(default_factory=list)

    def to_mcp(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "annotations": self.annotations,
        }

    @property
    def annotations(self) -> dict:
        return {
            "readOnlyHint": any(g in READ_ONLY_GROUPS for g in self.groups),
            "destructiveHint": any(g in DESTRUCTIVE_GROUPS for g in self.groups),
        }

    @property
    def properties(self) -> dict:
        return self.input_schema.get("properties", {}) or {}


class ToolRegistry:
    """工具注册表，单一来源"""

    def __init__(self):
        self._tools: dict[str, ToolDef] = {}

    def register(self, name: str, description: str, input_schema: dict):
        groups = [g for g, names in TOOL_GROUPS.items() if name in names]
        self._tools[name] = ToolDef(
            name=name,
            description=description,
            input_schema=input_schema,
            groups=groups,
        )

    def get(self, name: str) -> Optional[ToolDef]:
        return self._tools.get(name)

    def get_all(self) -> list[ToolDef]:
        return list(self._tools.values())

    def names(self) -> set[str]:
        return set(self._tools)

    @property
    def count(self) -> int:
        return len(self._tools)


# ========== 全局单例 ==========

_registry: Optional[ToolRegistry] = None


def build_registry(tool_defs: list[dict]) -> ToolRegistry:
    registry = ToolRegistry()
    for tool_def in tool_defs:
        registry.register(
            name=tool_def["name"],
            description=tool_def.get("description", ""),
            input_schema=tool_def.get("input_schema", {"type": "object", "properties": {}}),
        )
    return registry


def get_registry() -> ToolRegistry:
    """获取全局工具注册表（懒加载）"""
    global _registry
    if _registry is None:
        from .definitions import TOOLS
        _registry = build_registry(TOOLS)
        _log(f"registered {_registry.count} tools")
    return _registry
