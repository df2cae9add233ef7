"""
Tests for the JS bridge.
"""

from unittest.mock import patch

from api import Api


class TestConvertRomaji:

    def test_hiragana(self, settings_file):
        assert Api().convert_romaji('konnichiwa') == {'ok': True, 'kana': 'こんにちは'}

    def test_katakana_setting(self, settings_file):
        api = Api()
        api.save_settings({'kana_script': 'katakana'})
        assert api.convert_romaji('kitte') == {'ok': True, 'kana': 'キッテ'}

    def test_empty(self, settings_file):
        assert Api().convert_romaji('') == {'ok': True, 'kana': ''}

    def test_error_returns_raw_text(self, settings_file, capsys):
        with patch('api.romaji.convert', side_effect=RuntimeError('boom')):
            res = Api().convert_romaji('ka')
        assert res == {'ok': False, 'error': 'boom', 'kana': 'ka'}
        assert '[api]' in capsys.readouterr().out


class TestSettings:

    def test_get_settings(self, settings_file):
        assert Api().get_settings() == {
            'live_conversion': True,
            'kana_script': 'hiragana',
            'window_width': 640,
            'window_height': 360,
        }

    def test_save_persists(self, settings_file):
        Api().save_settings({'live_conversion': False})
        assert Api().get_settings()['live_conversion'] is False

    def test_save_returns_stored_settings(self, settings_file):
        stored = Api().save_settings({'kana_script': 'katakana', 'window_width': 800})
        assert stored['kana_script'] == 'katakana'
        assert stored['window_width'] == 800

    def test_invalid_values_ignored(self, settings_file):
        api = Api()
        stored = api.save_settings({
            'kana_script': 'romaji',
            'live_conversion': 'yes',
            'window_height': 'tall',
            'unknown': 1,
        })
        assert stored == api.get_settings() == {
            'live_conversion': True,
            'kana_script': 'hiragana',
            'window_width': 640,
            'window_height': 360,
        }
