import re

import jieba

# Ideographs: radicals, iteration marks, CJK Unified Ideographs with every
# extension, and both compatibility blocks.
_HAN = (
    r"\u2e80-\u2fdf\u3005\u3007\u3021-\u3029\u3038-\u303b"
    r"\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003ffff"
)
_HIRAGANA = r"\u3040-\u309f"
_KATAKANA = r"\u30a0-\u30ff\u31f0-\u31ff\u32d0-\u32fe\uff66-\uff9f"

# Han runs go to jieba, a Katakana run is one word and Hiragana is split
# per character, so none of them stick to adjacent Latin letters.
TOKEN_PATTERN = re.compile(
    rf"(?P<han>[{_HAN}]+)"
    rf"|[{_KATAKANA}]+"
    rf"|(?:[^\W{_HAN}{_HIRAGANA}{_KATAKANA}]|[\u0300-\u036f])+"
    r"|\s+"
    r"|.",
    re.DOTALL,
)


def split_text_into_words(text: str) -> list[str]:
    """Splits a string of text into words, spaces and punctuation, keeping every character."""
    words = []
    for match in TOKEN_PATTERN.finditer(text):
        if match.group("han"):
            words.extend(jieba.cut(match.group("han")))
        else:
            words.append(match.group())
    return words
