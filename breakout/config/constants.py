"""
遊戲常數定義
座標原點在畫布中心，y 軸朝上
"""

# 遊戲與畫布
TIME_STEP = 1.0 / 60.0
CANVAS_WIDTH = 1000.0
CANVAS_HEIGHT = 800.0

# 擋板
PADDLE_SIZE = (120.0, 20.0)
PADDLE_SPEED = 800.0
PADDLE_PADDING = 20.0

# 球
BALL_STARTING_POSITION = (0.0, -50.0)
BALL_SIZE = (30.0, 30.0)
BALL_SPEED = 500.0
BALL_PADDLE_OFFSET = 25.0          # 等待發球時球心高於擋板中心的距離
COLLISION_SPEED_INCREASE = 10.0

# 擋板反彈轉向
PADDLE_STEER_DIVISOR = 70.0
PADDLE_STEER_LIMIT = 0.8

# 牆
WALL_THICKNESS = 20.0
LEFT_WALL = -(CANVAS_WIDTH / 2.0)
RIGHT_WALL = CANVAS_WIDTH / 2.0
BOTTOM_WALL = -(CANVAS_HEIGHT / 2.0)
TOP_WALL = CANVAS_HEIGHT / 2.0

PADDLE_Y = BOTTOM_WALL + 30.0

# 磚塊
BRICK_SIZE = (70.0, 25.0)
BRICK_COLUMNS = 12
BRICK_ROWS = 6
BRICK_SPACING = (75.0, 30.0)
BRICK_OFFSET = (80.0, 80.0)        # 第一塊磚相對左牆 / 上牆的距離
BRICK_COUNT = BRICK_COLUMNS * BRICK_ROWS

# 遊戲規則
STARTING_LIVES = 3

# 顏色
BACKGROUND_COLOR = (34, 39, 46)
PADDLE_COLOR = (173, 186, 199)
BALL_COLOR = (255, 255, 255)
WALL_COLOR = (204, 204, 204)
TEXT_COLOR = (128, 128, 255)

BRICK_COLORS = [
    (236, 72, 153),   # 粉
    (239, 68, 68),    # 紅
    (249, 115, 22),   # 橘
    (234, 179, 8),    # 黃
    (34, 197, 94),    # 綠
    (6, 182, 212),    # 青
]

# 文字
SCORE_FONT_SIZE = 32
GAME_OVER_FONT_SIZE = 64
SCORE_TEXT_POSITION = (10, 10)
GAME_OVER_TEXT = "Game over!"
GAME_OVER_TEXT_OFFSET = (150, 32)  # 相對畫面中心往左上的偏移

# 碰撞效果
COLLISION_EFFECT_RADIUS_INIT = 8.0
COLLISION_EFFECT_RADIUS_GROW = 2.5
COLLISION_EFFECT_ALPHA_DECAY = 12
PARTICLE_COUNT = 6
PARTICLE_SPEED = 3.0
PARTICLE_LIFETIME = 20.0
PARTICLE_SIZE = 3.0
