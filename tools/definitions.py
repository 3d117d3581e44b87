"""
Fusion 360 工具定义

MCP Tool 格式：每个工具有 name, description, input_schema。
纯数据，派发层只把它当作"合法命令名集合"使用。
"""

# ========== 公共参数片段 ==========

_BODY_NAME = {"type": "string", "description": "创建的实体名称（可选）"}


def _center():
    return {
        "cx": {"type": "number", "default": 0, "description": "中心 X 坐标 (mm)"},
        "cy": {"type": "number", "default": 0, "description": "中心 Y 坐标 (mm)"},
        "cz": {"type": "number", "default": 0, "description": "中心 Z 坐标 (mm)"},
    }


def _plane(description: str = "基准平面"):
    return {"type": "string", "enum": ["xy", "xz", "yz"], "default": "xy", "description": description}


def _placement(z_default: str = "center"):
    z_options = ["center", "bottom", "top"]
    return {
        "z_placement": {"type": "string", "enum": z_options, "default": z_default, "description": "Z 方向放置基准"},
        "x_placement": {"type": "string", "enum": ["center", "left", "right"], "default": "center", "description": "X 方向放置基准"},
        "y_placement": {"type": "string", "enum": ["center", "front", "back"], "default": "center", "description": "Y 方向放置基准"},
    }


def _extrude_options():
    return {
        "taper_angle": {"type": "number", "default": 0, "minimum": 0, "maximum": 89, "description": "拔模角度（正角度）"},
        "taper_direction": {"type": "string", "enum": ["inward", "outward"], "default": "inward", "description": "拔模方向"},
        "direction": {"type": "string", "enum": ["positive", "negative"], "default": "positive", "description": "拉伸方向"},
    }


def _body_query(name: str, description: str) -> dict:
    return {
        "name": name,
        "description": description,
        "input_schema": {
            "type": "object",
            "properties": {"body_name": {"type": "string", "description": "要查询的实体名称"}},
            "required": ["body_name"],
        },
    }


def _body_only(name: str, description: str, body_description: str) -> dict:
    return {
        "name": name,
        "description": description,
        "input_schema": {
            "type": "object",
            "properties": {"body_name": {"type": "string", "description": body_description}},
            "required": ["body_name"],
        },
    }


def _no_args(name: str, description: str) -> dict:
    return {
        "name": name,
        "description": description,
        "input_schema": {"type": "object", "properties": {}, "required": []},
    }


_BOOLEAN_OPS = ["join", "cut", "intersect"]

# ========== 工具定义 ==========

TOOLS = [
    # ----- 宏 -----
    {
        "name": "execute_macro",
        "description": "按顺序执行多条建模命令，任一步失败即中止后续步骤",
        "input_schema": {
            "type": "object",
            "properties": {
                "commands": {
                    "type": "array",
                    "description": "要执行的命令对象数组",
                    "items": {
                        "type": "object",
                        "properties": {
                            "tool_name": {"type": "string", "description": "要调用的工具名（例如 \"create_box\"）"},
                            "arguments": {"type": "object", "description": "传给该工具的参数"},
                        },
                        "required": ["tool_name"],
                    },
                },
                "macro_id": {
                    "type": "string",
                    "description": "可选的宏标识；嵌套宏复用外层标识会被拒绝",
                },
            },
            "required": ["commands"],
        },
    },
    # ----- 基础几何体 -----
    {
        "name": "create_cube",
        "description": "创建立方体，可指定底面/中心/顶面放置",
        "input_schema": {
            "type": "object",
            "properties": {
                "size": {"type": "number", "default": 50, "minimum": 0, "description": "边长 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
                **_extrude_options(),
            },
            "required": [],
        },
    },
    {
        "name": "create_cylinder",
        "description": "创建圆柱体，可指定底面/中心/顶面放置",
        "input_schema": {
            "type": "object",
            "properties": {
                "radius": {"type": "number", "default": 25, "minimum": 0, "description": "半径 (mm)"},
                "height": {"type": "number", "default": 50, "minimum": 0, "description": "高度 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
                **_extrude_options(),
            },
            "required": [],
        },
    },
    {
        "name": "create_box",
        "description": "创建长方体，可指定底面/中心/顶面放置",
        "input_schema": {
            "type": "object",
            "properties": {
                "width": {"type": "number", "default": 50, "minimum": 0, "description": "宽度，X 轴 (mm)"},
                "depth": {"type": "number", "default": 30, "minimum": 0, "description": "深度，Y 轴 (mm)"},
                "height": {"type": "number", "default": 20, "minimum": 0, "description": "高度，Z 轴 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
                **_extrude_options(),
            },
            "required": [],
        },
    },
    {
        "name": "create_sphere",
        "description": "创建球体，始终以中心放置",
        "input_schema": {
            "type": "object",
            "properties": {
                "radius": {"type": "number", "default": 25, "minimum": 0, "description": "半径 (mm)"},
                "body_name": _BODY_NAME,
                **_center(),
            },
            "required": [],
        },
    },
    {
        "name": "create_hemisphere",
        "description": "创建半球",
        "input_schema": {
            "type": "object",
            "properties": {
                "radius": {"type": "number", "default": 25, "minimum": 0, "description": "半径 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                "orientation": {"type": "string", "enum": ["positive", "negative"], "default": "positive", "description": "半球朝向"},
                **_placement(z_default="bottom"),
            },
            "required": [],
        },
    },
    {
        "name": "create_cone",
        "description": "创建圆锥",
        "input_schema": {
            "type": "object",
            "properties": {
                "radius": {"type": "number", "default": 25, "minimum": 0, "description": "底面半径 (mm)"},
                "height": {"type": "number", "default": 50, "minimum": 0, "description": "高度 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
            },
            "required": [],
        },
    },
    {
        "name": "create_polygon_prism",
        "description": "创建正多棱柱",
        "input_schema": {
            "type": "object",
            "properties": {
                "num_sides": {"type": "integer", "default": 6, "minimum": 3, "maximum": 64, "description": "多边形边数"},
                "radius": {"type": "number", "default": 25, "minimum": 0, "description": "外接圆半径 (mm)"},
                "height": {"type": "number", "default": 50, "minimum": 0, "description": "高度 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
                **_extrude_options(),
            },
            "required": [],
        },
    },
    {
        "name": "create_torus",
        "description": "创建圆环（甜甜圈形状）",
        "input_schema": {
            "type": "object",
            "properties": {
                "major_radius": {"type": "number", "default": 30, "minimum": 0, "description": "大半径 (mm)"},
                "minor_radius": {"type": "number", "default": 10, "minimum": 0, "description": "小半径 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_placement(),
                **_center(),
            },
            "required": [],
        },
    },
    {
        "name": "create_half_torus",
        "description": "创建半圆环",
        "input_schema": {
            "type": "object",
            "properties": {
                "major_radius": {"type": "number", "default": 30, "minimum": 0, "description": "大半径 (mm)"},
                "minor_radius": {"type": "number", "default": 10, "minimum": 0, "description": "小半径 (mm)"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                "orientation": {"type": "string", "enum": ["back", "front", "left", "right"], "default": "back", "description": "开口朝向"},
                "plane_rotation_angle": {"type": "number", "default": 0, "description": "在基准平面上的旋转角度（度）"},
                "opening_extrude_distance": {"type": "number", "default": 0, "description": "把开口两个截面拉伸延长的距离 (mm)，正负表示方向"},
                **_placement(),
                **_center(),
            },
            "required": [],
        },
    },
    {
        "name": "create_pipe",
        "description": "在两点之间创建管道",
        "input_schema": {
            "type": "object",
            "properties": {
                "x1": {"type": "number", "default": 0, "description": "起点 X 坐标 (mm)"},
                "y1": {"type": "number", "default": 0, "description": "起点 Y 坐标 (mm)"},
                "z1": {"type": "number", "default": 0, "description": "起点 Z 坐标 (mm)"},
                "x2": {"type": "number", "default": 50, "description": "终点 X 坐标 (mm)"},
                "y2": {"type": "number", "default": 0, "description": "终点 Y 坐标 (mm)"},
                "z2": {"type": "number", "default": 50, "description": "终点 Z 坐标 (mm)"},
                "radius": {"type": "number", "default": 5, "minimum": 0, "description": "管道半径 (mm)"},
                "body_name": _BODY_NAME,
            },
            "required": [],
        },
    },
    {
        "name": "create_polygon_sweep",
        "description": "多边形截面沿圆形路径扫掠生成实体，可指定扭转圈数",
        "input_schema": {
            "type": "object",
            "properties": {
                "profile_sides": {"type": "integer", "default": 6, "minimum": 3, "maximum": 64, "description": "截面多边形边数"},
                "profile_radius": {"type": "number", "default": 10, "minimum": 0, "description": "截面外接圆半径 (mm)"},
                "path_radius": {"type": "number", "default": 30, "minimum": 0, "description": "扫掠路径圆半径 (mm)"},
                "sweep_angle": {"type": "number", "enum": [360], "default": 360, "description": "扫掠角度（度），仅支持完整的 360 度"},
                "twist_rotations": {"type": "integer", "default": 0, "minimum": 0, "maximum": 10, "description": "扭转圈数，0（不扭转）到 10"},
                "body_name": _BODY_NAME,
                "plane": _plane(),
                **_center(),
                **_placement(),
            },
            "required": [],
        },
    },
    # ----- 复制 / 阵列 -----
    {
        "name": "copy_body_symmetric",
        "description": "以平面为镜像，对称复制实体",
        "input_schema": {
            "type": "object",
            "properties": {
                "source_body_name": {"type": "string", "description": "源实体名称"},
                "new_body_name": {"type": "string", "description": "新实体名称"},
                "plane": _plane("镜像平面"),
            },
            "required": ["source_body_name", "new_body_name"],
        },
    },
    {
        "name": "create_circular_pattern",
        "description": "创建实体的环形阵列",
        "input_schema": {
            "type": "object",
            "properties": {
                "source_body_name": {"type": "string", "description": "要阵列的源实体名称"},
                "axis": {"type": "string", "enum": ["x", "y", "z"], "default": "z", "description": "旋转轴"},
                "quantity": {"type": "integer", "default": 4, "minimum": 1, "maximum": 1000, "description": "实例总数"},
                "angle": {"type": "number", "default": 360.0, "description": "阵列总角度（度）"},
                "new_body_base_name": {"type": "string", "description": "新实体基础名称（可选）"},
            },
            "required": ["source_body_name"],
        },
    },
    {
        "name": "create_rectangular_pattern",
        "description": "创建实体的矩形阵列",
        "input_schema": {
            "type": "object",
            "properties": {
                "source_body_name": {"type": "string", "description": "要阵列的源实体名称"},
                "distance_type": {"type": "string", "enum": ["spacing", "extent"], "default": "spacing", "description": "距离类型（间距或总长）"},
                "quantity_one": {"type": "integer", "default": 2, "minimum": 1, "maximum": 1000, "description": "第一方向数量"},
                "distance_one": {"type": "number", "default": 10, "description": "第一方向距离 (mm)"},
                "direction_one_axis": {"type": "string", "enum": ["x", "y", "z"], "default": "x", "description": "第一方向轴"},
                "quantity_two": {"type": "integer", "default": 1, "minimum": 1, "maximum": 1000, "description": "第二方向数量（一维阵列为 1）"},
                "distance_two": {"type": "number", "default": 10, "description": "第二方向距离 (mm)"},
                "direction_two_axis": {"type": "string", "enum": ["x", "y", "z"], "default": "y", "description": "第二方向轴"},
                "new_body_base_name": {"type": "string", "description": "新实体基础名称（可选）"},
            },
            "required": ["source_body_name", "quantity_one", "distance_one", "direction_one_axis"],
        },
    },
    # ----- 倒角 / 圆角 -----
    {
        "name": "add_fillet",
        "description": "给实体的指定边添加圆角",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "实体名称"},
                "radius": {"type": "number", "default": 1, "minimum": 0, "description": "圆角半径 (mm)"},
                "edge_indices": {
                    "type": "array",
                    "items": {"type": "integer", "minimum": 0},
                    "description": "边索引列表，可用 get_edges_info 查看；省略则作用于全部外轮廓边",
                },
            },
            "required": ["body_name", "radius"],
        },
    },
    {
        "name": "add_chamfer",
        "description": "给实体的指定边添加倒角",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "实体名称"},
                "distance": {"type": "number", "default": 1, "minimum": 0, "description": "倒角距离 (mm)"},
                "edge_indices": {
                    "type": "array",
                    "items": {"type": "integer", "minimum": 0},
                    "description": "边索引列表，可用 get_edges_info 查看；省略则作用于全部外轮廓边",
                },
            },
            "required": ["body_name", "distance"],
        },
    },
    # ----- 布尔运算 -----
    {
        "name": "combine_selection",
        "description": "对选中的实体做布尔运算，第一个选中的为目标",
        "input_schema": {
            "type": "object",
            "properties": {
                "operation": {"type": "string", "enum": _BOOLEAN_OPS, "description": "布尔运算类型"},
                "new_body_name": {"type": "string", "description": "结果实体名称（可选）"},
            },
            "required": ["operation"],
        },
    },
    {
        "name": "combine_selection_all",
        "description": "对所有选中的实体做布尔运算",
        "input_schema": {
            "type": "object",
            "properties": {
                "operation": {"type": "string", "enum": _BOOLEAN_OPS, "default": "join", "description": "布尔运算类型"},
                "new_body_name": {"type": "string", "description": "结果实体名称（可选）"},
            },
            "required": [],
        },
    },
    {
        "name": "combine_by_name",
        "description": "按名称对两个实体做布尔运算",
        "input_schema": {
            "type": "object",
            "properties": {
                "target_body": {"type": "string", "description": "目标实体名称"},
                "tool_body": {"type": "string", "description": "工具实体名称"},
                "operation": {"type": "string", "enum": _BOOLEAN_OPS, "description": "布尔运算类型"},
                "new_body_name": {"type": "string", "description": "结果实体名称（可选）"},
            },
            "required": ["target_body", "tool_body", "operation"],
        },
    },
    # ----- 显示 / 变换 / 选择 -----
    _body_only("hide_body", "按名称隐藏实体", "要隐藏的实体名称"),
    _body_only("show_body", "按名称显示被隐藏的实体", "要显示的实体名称"),
    {
        "name": "move_by_name",
        "description": "按名称移动实体",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "要移动的实体名称"},
                "x_dist": {"type": "number", "default": 0, "description": "X 方向移动距离 (mm)"},
                "y_dist": {"type": "number", "default": 0, "description": "Y 方向移动距离 (mm)"},
                "z_dist": {"type": "number", "default": 0, "description": "Z 方向移动距离 (mm)"},
            },
            "required": ["body_name"],
        },
    },
    {
        "name": "rotate_by_name",
        "description": "按名称旋转实体",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "要旋转的实体名称"},
                "axis": {"type": "string", "enum": ["x", "y", "z"], "default": "z", "description": "旋转轴"},
                "angle": {"type": "number", "default": 90, "description": "旋转角度（度）"},
                "cx": {"type": "number", "default": 0, "description": "旋转中心 X 坐标 (mm)"},
                "cy": {"type": "number", "default": 0, "description": "旋转中心 Y 坐标 (mm)"},
                "cz": {"type": "number", "default": 0, "description": "旋转中心 Z 坐标 (mm)"},
            },
            "required": ["body_name"],
        },
    },
    _body_only("select_body", "按名称选中一个实体", "要选中的实体名称"),
    {
        "name": "select_bodies",
        "description": "按名称选中两个实体",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name1": {"type": "string", "description": "第一个实体名称"},
                "body_name2": {"type": "string", "description": "第二个实体名称"},
            },
            "required": ["body_name1", "body_name2"],
        },
    },
    _no_args("select_all_bodies", "选中文档中的所有实体"),
    # ----- 文档 / 调试 -----
    _no_args("delete_all_features", "删除时间线上的所有特征，重置设计"),
    {
        "name": "debug_coordinate_info",
        "description": "输出坐标系与单位相关的调试信息",
        "input_schema": {
            "type": "object",
            "properties": {
                "show_details": {"type": "boolean", "default": True, "description": "是否显示详细信息"},
            },
            "required": [],
        },
    },
    # ----- 实体信息查询 -----
    _body_query("get_bounding_box", "获取实体的包围盒信息"),
    _body_query("get_body_center", "获取实体的中心点信息（几何中心、质心、包围盒中心）"),
    _body_query("get_body_dimensions", "获取实体的详细尺寸（长、宽、高、体积、表面积）"),
    _body_query("get_faces_info", "获取实体的面信息（类型、面积、法线、中心点等）"),
    _body_query("get_edges_info", "获取实体的边信息（类型、长度、方向、起点/终点等）"),
    {
        "name": "get_mass_properties",
        "description": "获取实体的质量特性（体积、质量、质心、转动惯量）",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "要查询的实体名称"},
                "material_density": {"type": "number", "default": 1.0, "minimum": 0, "description": "材料密度 (g/cm³)，用于计算质量"},
            },
            "required": ["body_name"],
        },
    },
    {
        "name": "get_body_relationships",
        "description": "获取两个实体之间的位置关系（距离、干涉、相对位置等）",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name": {"type": "string", "description": "基准实体名称"},
                "other_body_name": {"type": "string", "description": "比较对象实体名称"},
            },
            "required": ["body_name", "other_body_name"],
        },
    },
    {
        "name": "measure_distance",
        "description": "测量两个实体之间的距离（质心距离与包围盒间隙）",
        "input_schema": {
            "type": "object",
            "properties": {
                "body_name1": {"type": "string", "description": "第一个实体名称"},
                "body_name2": {"type": "string", "description": "第二个实体名称"},
            },
            "required": ["body_name1", "body_name2"],
        },
    },
]
