"""
配置管理系統
"""

from pathlib import Path
from typing import Dict, Any, Optional
import yaml
import json


DEFAULTS: Dict[str, Any] = {
    'window_title': "Breakout",
    'render_fps': 60,
    'enable_render': True,
    'enable_effects': True,
    'mouse_control': True,
    'max_steps_per_frame': 5,
    'log_level': "WARNING",
    'font_family': None,
}


class Settings:
    """配置管理類

    只包含執行期可調整的選項；場地尺寸等常數見 constants.py
    """

    def __init__(self):
        # 視窗
        self.window_title = DEFAULTS['window_title']
        self.render_fps = DEFAULTS['render_fps']
        self.enable_render = DEFAULTS['enable_render']
        self.font_family = DEFAULTS['font_family']

        # 遊戲設定
        self.enable_effects = DEFAULTS['enable_effects']
        self.mouse_control = DEFAULTS['mouse_control']
        self.max_steps_per_frame = DEFAULTS['max_steps_per_frame']

        # 日誌
        self.log_level = DEFAULTS['log_level']

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        # 更新配置，未知的鍵直接忽略
        for key, value in config.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in DEFAULTS}

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """驗證配置的有效性，無效的數值會被重設為預設值"""
        valid = True

        for key in ('render_fps', 'max_steps_per_frame'):
            value = getattr(self, key)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                print(f"警告: {key} 必須為正數，收到 {value!r}，改用預設值 {DEFAULTS[key]}")
                setattr(self, key, DEFAULTS[key])
                valid = False

        self.max_steps_per_frame = int(self.max_steps_per_frame)

        if not isinstance(self.log_level, str):
            print(f"警告: log_level 必須為字串，收到 {self.log_level!r}")
            self.log_level = DEFAULTS['log_level']
            valid = False
        else:
            self.log_level = self.log_level.upper()

        return valid


def load_settings(config_path: Optional[str] = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)

    settings.validate()
    return settings
