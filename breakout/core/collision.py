"""
碰撞檢測系統
"""

import math
from enum import Enum
from typing import Tuple, Optional


Point = Tuple[float, float]


class Side(Enum):
    """A 撞到 B 的哪一側"""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


def collide(a_pos: Point, a_size: Point,
            b_pos: Point, b_size: Point) -> Optional[Side]:
    """
    檢測兩個軸對齊矩形(AABB)是否重疊

    Args:
        a_pos: A 的中心座標
        a_size: A 的寬高
        b_pos: B 的中心座標
        b_size: B 的寬高

    Returns:
        A 撞到 B 的哪一側；沒有重疊時回傳 None
    """
    a_min_x = a_pos[0] - a_size[0] / 2.0
    a_max_x = a_pos[0] + a_size[0] / 2.0
    a_min_y = a_pos[1] - a_size[1] / 2.0
    a_max_y = a_pos[1] + a_size[1] / 2.0
    b_min_x = b_pos[0] - b_size[0] / 2.0
    b_max_x = b_pos[0] + b_size[0] / 2.0
    b_min_y = b_pos[1] - b_size[1] / 2.0
    b_max_y = b_pos[1] + b_size[1] / 2.0

    if not (a_min_x < b_max_x and a_max_x > b_min_x
            and a_min_y < b_max_y and a_max_y > b_min_y):
        return None

    # 左右
    if a_min_x < b_min_x and b_min_x < a_max_x < b_max_x:
        x_side, x_depth = Side.LEFT, b_min_x - a_max_x
    elif b_min_x < a_min_x < b_max_x and a_max_x > b_max_x:
        x_side, x_depth = Side.RIGHT, a_min_x - b_max_x
    else:
        x_side, x_depth = Side.INSIDE, -math.inf

    # 上下
    if a_min_y < b_min_y and b_min_y < a_max_y < b_max_y:
        y_side, y_depth = Side.BOTTOM, b_min_y - a_max_y
    elif b_min_y < a_min_y < b_max_y and a_max_y > b_max_y:
        y_side, y_depth = Side.TOP, a_min_y - b_max_y
    else:
        y_side, y_depth = Side.INSIDE, -math.inf

    # 穿透較淺的軸才是真正撞上的那一側
    if abs(y_depth) < abs(x_depth):
        return y_side
    return x_side


def reflection_axes(side: Side, velocity_x: float, velocity_y: float) -> Tuple[bool, bool]:
    """
    只有球朝著碰撞面移動時才反彈

    Returns:
        (reflect_x, reflect_y)
    """
    if side is Side.LEFT:
        return velocity_x > 0.0, False
    if side is Side.RIGHT:
        return velocity_x < 0.0, False
    if side is Side.TOP:
        return False, velocity_y < 0.0
    if side is Side.BOTTOM:
        return False, velocity_y > 0.0
    return False, False
