"""
Api class — the bridge between the JS frontend and Python backend.
Every public method is callable from JS via window.pywebview.api.method().
"""

from dataclasses import asdict

import settings as settings_module
from pipeline import romaji
from pipeline.utils import to_katakana


class Api:
    def __init__(self):
        self._settings = settings_module.load()

    # ── Settings ──────────────────────────────────────────────────────────────

    def get_settings(self) -> dict:
        """Return current settings as a plain dict for the frontend."""
        return asdict(self._settings)

    def save_settings(self, data: dict) -> dict:
        """
        Save settings from the frontend dict. Unknown keys and bad values are ignored.
        Returns the settings as stored so the page can re-render from them.
        """
        for k, v in data.items():
            if not hasattr(self._settings, k):
                continue
            if k == 'kana_script' and v not in settings_module.KANA_SCRIPTS:
                print(f"[api] Ignoring kana_script={v!r}")
                continue
            if k == 'live_conversion' and not isinstance(v, bool):
                print(f"[api] Ignoring live_conversion={v!r}")
                continue
            if k in ('window_width', 'window_height') and not isinstance(v, int):
                print(f"[api] Ignoring {k}={v!r}")
                continue
            setattr(self._settings, k, v)
        settings_module.save(self._settings)
        return asdict(self._settings)

    # ── Answer input ──────────────────────────────────────────────────────────

    def convert_romaji(self, text: str) -> dict:
        """
        Convert the full answer-field string to kana.
        Called on every keystroke; the frontend drops stale results.
        Returns {ok, kana} or {ok: False, error, kana} with the raw text.
        """
        try:
            kana = romaji.convert(text)
            if self._settings.kana_script == 'katakana':
                kana = to_katakana(kana)
            return {'ok': True, 'kana': kana}
        except Exception as e:
            print(f"[api] convert_romaji error: {e}")
            return {'ok': False, 'error': str(e), 'kana': text if isinstance(text, str) else ''}
