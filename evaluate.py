#!/usr/bin/env python3
"""
evaluate.py ─ 跟球代理評估器
====================================================================
- 以 BallFollowerAgent 在 BreakoutEnv 中連續進行多局遊戲。
- 可在 USER_CONFIG 中調整局數、每局最大步數及代理參數。
- 使用 tqdm 顯示進度，結束後輸出平均分數與存活 tick 數。
"""

from __future__ import annotations

import sys
from typing import Dict, Any, List

import numpy as np
from tqdm import tqdm

from breakout.agents import BallFollowerAgent
from breakout.config import load_settings
from envs.breakout_env import BreakoutEnv

# ────────────────── 用戶配置區域 (USER_CONFIG) ──────────────────
USER_CONFIG: Dict[str, Any] = {
    "episodes": 20,
    "max_steps": 20_000,
    "tolerance": 0.02,
    "aim_left": False,
}
# ────────────────── (用戶配置區域結束) ──────────────────


def run_episode(env: BreakoutEnv, agent: BallFollowerAgent, seed: int) -> Dict[str, float]:
    """進行一局，回傳該局統計"""
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    terminated = truncated = False

    while not (terminated or truncated):
        action = agent.select_action(obs)
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += reward

    return {
        "score": info["score"],
        "lives": info["lives"],
        "ticks": info["tick"],
        "reward": total_reward,
        "cleared": info["bricks_remaining"] == 0,
    }


def evaluate(config: Dict[str, Any], render: bool = False) -> List[Dict[str, float]]:
    env = BreakoutEnv(render_mode="human" if render else None,
                      max_steps=config["max_steps"])
    agent = BallFollowerAgent(tolerance=config["tolerance"], aim_left=config["aim_left"])

    results = []
    try:
        for episode in tqdm(range(config["episodes"]), desc="評估中"):
            results.append(run_episode(env, agent, seed=episode))
    finally:
        env.close()
    return results


def main():
    settings = load_settings(sys.argv[1] if len(sys.argv) > 1 else None)
    results = evaluate(USER_CONFIG, render=settings.enable_render)

    scores = np.array([r["score"] for r in results], dtype=np.float64)
    ticks = np.array([r["ticks"] for r in results], dtype=np.float64)
    cleared = sum(1 for r in results if r["cleared"])

    print("\n--- 評估結束 ---")
    print(f"局數: {len(results)}")
    print(f"平均分數: {scores.mean():.2f} (最高 {scores.max():.0f})")
    print(f"平均存活 tick: {ticks.mean():.0f}")
    print(f"清空磚塊局數: {cleared}")


if __name__ == "__main__":
    main()
