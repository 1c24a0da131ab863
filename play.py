#!/usr/bin/env python3
"""
Breakout - 互動式遊玩
用法: python play.py [config.yaml]
"""

from breakout.app import main

if __name__ == "__main__":
    print("=" * 60)
    print("Breakout - 固定時間步長打磚塊")
    print("=" * 60)
    main()
