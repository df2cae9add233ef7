import os
import shutil
import tempfile
import webview
from api import Api

# Smallest window that still fits the answer field and the kana line
MIN_SIZE = (480, 280)


def _clear_webview_cache():
    """Delete WebView2's cached user data so a stale page is never served."""
    try:
        cache_dir = os.path.join(tempfile.gettempdir(), 'pywebview', 'Kana Practice')
        if os.path.isdir(cache_dir):
            shutil.rmtree(cache_dir, ignore_errors=True)
    except OSError as e:
        print(f"[main] Cache cleanup skipped: {e}")


def _window_size(s: dict) -> tuple[int, int]:
    """Saved window size, clamped to MIN_SIZE. Garbage values fall back to MIN_SIZE."""
    try:
        width = int(s.get('window_width') or 0)
        height = int(s.get('window_height') or 0)
    except (TypeError, ValueError):
        width, height = MIN_SIZE
    return max(width, MIN_SIZE[0]), max(height, MIN_SIZE[1])


def main():
    _clear_webview_cache()
    api = Api()
    width, height = _window_size(api.get_settings())
    window = webview.create_window(
        title='Kana Practice',
        url='frontend/index.html',
        js_api=api,
        width=width,
        height=height,
        min_size=MIN_SIZE,
        background_color='#0e0f13',
    )

    def _on_closing():
        # Remember the size for next launch
        api.save_settings({'window_width': window.width, 'window_height': window.height})

    window.events.closing += _on_closing
    webview.start(debug=False, private_mode=True)


if __name__ == '__main__':
    main()
