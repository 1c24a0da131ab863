"""Breakout - 固定時間步長的打磚塊遊戲"""

__version__ = "0.1.0"
