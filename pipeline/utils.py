"""
Shared kana helpers used by the answer input.
"""


def to_katakana(text: str) -> str:
    """Convert hiragana characters to katakana (ぁ..ゖ block), leave the rest."""
    result = []
    for ch in text:
        code = ord(ch)
        if 0x3041 <= code <= 0x3096:
            result.append(chr(code + 0x60))
        else:
            result.append(ch)
    return ''.join(result)
