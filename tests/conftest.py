import pytest

import settings as settings_module


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point settings.json at a temp dir for the duration of a test."""
    path = tmp_path / 'settings.json'
    monkeypatch.setattr(settings_module, 'SETTINGS_FILE', str(path))
    return path
