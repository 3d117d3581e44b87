"""
数值参数容错转换

任意输入 → 有界数值，失败时回退默认值，永不抛异常。
"""

import math


def to_number(value, default=0.0, minimum=-math.inf, maximum=math.inf):
    if value is None:
        return default
    if isinstance(value, str) and value.strip() == "":
        return default
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(num):
        return default
    return max(minimum, min(maximum, num))


def to_integer(value, default=1, minimum=1, maximum=1000):
    num = to_number(value, default, minimum, maximum)
    if num is None:
        return None
    # 四舍五入（远离零）
    rounded = math.floor(abs(num) + 0.5)
    return int(rounded if num >= 0 else -rounded)
