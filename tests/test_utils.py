from pipeline.utils import to_katakana


def test_hiragana_to_katakana():
    assert to_katakana('こんにちは') == 'コンニチハ'
    assert to_katakana('ちょっと') == 'チョット'


def test_other_characters_unchanged():
    assert to_katakana('abc 123 日本 カ') == 'abc 123 日本 カ'
    assert to_katakana('') == ''
