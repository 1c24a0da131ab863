"""
Breakout 主程式
"""

import logging
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .config.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from .core import FixedStepClock, IntentTranslator, Simulation
from .rendering import EffectManager, FrameInput, PygameRenderer, Scoreboard


class BreakoutApp:
    """互動式遊戲"""

    def __init__(self, settings: Settings):
        self.settings = settings

        self.renderer = None
        self.scoreboard = Scoreboard()
        self.effect_manager = EffectManager()
        self.simulation = Simulation(text=self.scoreboard)
        self.translator = IntentTranslator(mouse_control=settings.mouse_control)
        self.clock = FixedStepClock(max_steps=settings.max_steps_per_frame)

        # 還沒被任何 tick 消化的滑鼠點擊
        self.pending_buttons = frozenset()
        self.running = False

    def initialize(self):
        """初始化渲染器"""
        self.renderer = PygameRenderer(font_family=self.settings.font_family)
        self.renderer.init(int(CANVAS_WIDTH), int(CANVAS_HEIGHT), self.settings.window_title)

    def run(self):
        """運行主迴圈直到視窗關閉"""
        if self.renderer is None:
            self.initialize()

        print("[信息] 遊戲開始，左右鍵或滑鼠移動擋板，空白鍵或左鍵發球")
        self.running = True
        frame_seconds = 0.0

        while self.running:
            quit_requested, frame_input = self.renderer.handle_events()
            if quit_requested:
                break

            self.run_frame(frame_input, frame_seconds)
            self._render_frame()
            frame_seconds = self.renderer.tick(self.settings.render_fps)

        state = self.simulation.state
        print(f"[信息] 最終分數 {state.score}，剩餘生命 {state.lives}")
        self.cleanup()

    def run_frame(self, frame_input: FrameInput, frame_seconds: float) -> int:
        """依經過時間執行固定步數的模擬，回傳執行的步數"""
        frame_input = frame_input.with_buttons(self.pending_buttons)
        steps = self.clock.advance(frame_seconds)

        if steps == 0:
            self.pending_buttons = frame_input.buttons_pressed
            return 0
        self.pending_buttons = frozenset()

        intents = self.translator.translate(frame_input)
        for _ in range(steps):
            result = self.simulation.step(intents)
            if self.settings.enable_effects:
                self.effect_manager.on_collisions(result.events)
        return steps

    def _render_frame(self):
        """渲染一幀"""
        self.renderer.draw_background()
        self.renderer.draw_world(self.simulation.world)

        if self.settings.enable_effects:
            self.effect_manager.update()
            self.renderer.draw_effects(self.effect_manager.render_data())

        self.scoreboard.render(self.renderer)
        self.renderer.present()

    def cleanup(self):
        """清理資源"""
        self.running = False
        if self.renderer:
            self.renderer.cleanup()
            self.renderer = None
        print("[信息] 程序正常結束。")


def main(argv: Optional[List[str]] = None):
    """主函數"""
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None

    settings = load_settings(config_path)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config_path:
        print(f"[信息] 使用配置文件: {config_path}")

    app = BreakoutApp(settings)
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
