"""
Romaji → hiragana conversion for the answer input field.
Greedy longest-match scan over a constant symbol table; doubled consonants
become small tsu (っ). Called on every keystroke with the full input string.

  konnichiwa → こんにちは
  kitte      → きって
"""

from types import MappingProxyType

ROMAJI_TO_HIRAGANA = MappingProxyType({
    # Vowels and plain syllables
    'a': 'あ', 'i': 'い', 'u': 'う', 'e': 'え', 'o': 'お',
    'ka': 'か', 'ki': 'き', 'ku': 'く', 'ke': 'け', 'ko': 'こ',
    'sa': 'さ', 'shi': 'し', 'su': 'す', 'se': 'せ', 'so': 'そ',
    'ta': 'た', 'chi': 'ち', 'tsu': 'つ', 'te': 'て', 'to': 'と',
    'na': 'な', 'ni': 'に', 'nu': 'ぬ', 'ne': 'ね', 'no': 'の',
    'ha': 'は', 'hi': 'ひ', 'fu': 'ふ', 'he': 'へ', 'ho': 'ほ',
    'ma': 'ま', 'mi': 'み', 'mu': 'む', 'me': 'め', 'mo': 'も',
    'ya': 'や', 'yu': 'ゆ', 'yo': 'よ',
    'ra': 'ら', 'ri': 'り', 'ru': 'る', 're': 'れ', 'ro': 'ろ',
    'wa': 'わ', 'wo': 'を', 'n': 'ん',

    # Dakuten / handakuten
    'ga': 'が', 'gi': 'ぎ', 'gu': 'ぐ', 'ge': 'げ', 'go': 'ご',
    'za': 'ざ', 'ji': 'じ', 'zu': 'ず', 'ze': 'ぜ', 'zo': 'ぞ',
    'da': 'だ', 'di': 'ぢ', 'du': 'づ', 'de': 'で', 'do': 'ど',
    'ba': 'ば', 'bi': 'び', 'bu': 'ぶ', 'be': 'べ', 'bo': 'ぼ',
    'pa': 'ぱ', 'pi': 'ぴ', 'pu': 'ぷ', 'pe': 'ぺ', 'po': 'ぽ',

    # Palatalized digraphs
    'kya': 'きゃ', 'kyu': 'きゅ', 'kyo': 'きょ',
    'sha': 'しゃ', 'shu': 'しゅ', 'sho': 'しょ',
    'cha': 'ちゃ', 'chu': 'ちゅ', 'cho': 'ちょ',
    'nya': 'にゃ', 'nyu': 'にゅ', 'nyo': 'にょ',
    'hya': 'ひゃ', 'hyu': 'ひゅ', 'hyo': 'ひょ',
    'mya': 'みゃ', 'myu': 'みゅ', 'myo': 'みょ',
    'rya': 'りゃ', 'ryu': 'りゅ', 'ryo': 'りょ',
    'gya': 'ぎゃ', 'gyu': 'ぎゅ', 'gyo': 'ぎょ',
    'ja': 'じゃ', 'ju': 'じゅ', 'jo': 'じょ',

    # Alternative (Nihon-shiki) spellings
    'si': 'し', 'ti': 'ち', 'tu': 'つ', 'hu': 'ふ', 'zi': 'じ',

    # Small kana
    'xa': 'ぁ', 'xi': 'ぃ', 'xu': 'ぅ', 'xe': 'ぇ', 'xo': 'ぉ',
    'xya': 'ゃ', 'xyu': 'ゅ', 'xyo': 'ょ',
    'xtsu': 'っ', 'xtu': 'っ',
})

# Greetings spelled with the particle は although it is read "wa".
FIXED_EXPRESSIONS = MappingProxyType({
    'konnichiwa': 'こんにちは',
    'konbanwa': 'こんばんは',
})

SMALL_TSU = 'っ'

# n, m, y, r, w and the vowels never geminate via small tsu
_GEMINATING = frozenset('kstpgdjzbh')

# Only A-Z are case-folded; every other character reaches the table as typed
_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')

_LOOKUP = MappingProxyType({**ROMAJI_TO_HIRAGANA, **FIXED_EXPRESSIONS})
_LONGEST_KEY = max(len(k) for k in _LOOKUP)


def longest_key() -> int:
    """Longest romaji key probed by the scan."""
    return _LONGEST_KEY


def convert(text: str) -> str:
    """
    Convert romaji to hiragana. Total: unknown characters pass through as-is.

    Algorithm, left to right from cursor i:
      1. text[i] == text[i+1] and geminating consonant → っ, advance 1
      2. longest table key starting at i → its kana, advance len(key)
      3. otherwise copy text[i] as typed, advance 1
    """
    if not text:
        return ''

    lower = text.translate(_ASCII_LOWER)
    n = len(lower)
    out = []
    i = 0

    while i < n:
        ch = lower[i]

        if i + 1 < n and lower[i + 1] == ch and ch in _GEMINATING:
            out.append(SMALL_TSU)
            i += 1
            continue

        for size in range(min(_LONGEST_KEY, n - i), 0, -1):
            kana = _LOOKUP.get(lower[i:i + size])
            if kana is not None:
                out.append(kana)
                i += size
                break
        else:
            out.append(text[i])
            i += 1

    return ''.join(out)
