"""
Settings management — loads from / saves to settings.json next to main.py.
"""

import json
import os
from dataclasses import dataclass, asdict

SETTINGS_FILE = os.path.join(os.path.dirname(__file__), 'settings.json')

KANA_SCRIPTS = ('hiragana', 'katakana')


@dataclass
class Settings:
    # Answer input
    live_conversion: bool = True          # convert on every keystroke, else on change/enter
    kana_script: str = "hiragana"         # 'hiragana' | 'katakana'

    # Window
    window_width: int = 640
    window_height: int = 360


def load() -> Settings:
    """Load settings from settings.json, or return defaults if not found."""
    if not os.path.exists(SETTINGS_FILE):
        return Settings()
    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            data = json.load(f)
        s = Settings()
        for k, v in data.items():
            if hasattr(s, k):
                setattr(s, k, v)
        return s
    except (OSError, ValueError, AttributeError) as e:
        print(f"[settings] Failed to load, using defaults: {e}")
        return Settings()


def save(settings: Settings) -> None:
    """Persist settings to settings.json."""
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(asdict(settings), f, ensure_ascii=False, indent=2)
    except OSError as e:
        print(f"[settings] Failed to save: {e}")
