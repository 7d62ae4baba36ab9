import unicodedata

from .syllables import is_syllable, segment_word
from .word_splitter import split_text_into_words

PINYIN_TONE_MARKS = {
    "a": "āáǎà",
    "e": "ēéěè",
    "i": "īíǐì",
    "o": "ōóǒò",
    "u": "ūúǔù",
    "ü": "ǖǘǚǜ",
    "A": "ĀÁǍÀ",
    "E": "ĒÉĚÈ",
    "I": "ĪÍǏÌ",
    "O": "ŌÓǑÒ",
    "U": "ŪÚǓÙ",
    "Ü": "ǕǗǙǛ",
}

# Vowels that take the mark on their first occurrence, in order of priority.
FIRST_VOWEL_TIERS = ("aeAE", "oO")
# Otherwise the mark goes on the last of these.
LAST_VOWELS = "iuüIUÜ"


def tone_number(syllable: str) -> int | None:
    """Returns the tone of a numbered syllable, 0 for the neutral tone, None if it has no tone digit."""
    if not syllable or syllable[-1] not in "012345":
        return None
    return int(syllable[-1]) % 5


def tone_target(syllable: str) -> int | None:
    """
    Finds the position of the vowel that carries the tone mark.

    ``a`` and ``e`` win, then ``o``, otherwise the last ``i``, ``u`` or ``ü``
    (so ``liu`` marks the ``u`` and ``gui`` marks the ``i``).
    """
    for vowels in FIRST_VOWEL_TIERS:
        for pos, char in enumerate(syllable):
            if char in vowels:
                return pos
    for pos in range(len(syllable) - 1, -1, -1):
        if syllable[pos] in LAST_VOWELS:
            return pos
    return None


def add_tone(syllable: str, tone: int) -> str:
    """Puts the mark for tone 1-4 on a bare syllable. Tone 0 leaves it untouched."""
    if tone == 0:
        return syllable
    pos = tone_target(syllable)
    if pos is None:
        return syllable
    return syllable[:pos] + PINYIN_TONE_MARKS[syllable[pos]][tone - 1] + syllable[pos + 1 :]


def render_syllable(syllable: str) -> str:
    """Converts one numbered syllable (e.g. ``hao3``) to its tone-marked form (``hǎo``)."""
    if not is_syllable(syllable):
        return syllable
    tone = tone_number(syllable)
    if tone is None:
        return syllable
    return add_tone(unicodedata.normalize("NFC", syllable[:-1]), tone)


def split(text: str) -> list[str]:
    """Splits text into words and every word into syllables."""
    return [piece for word in split_text_into_words(text) for piece in segment_word(word)]


def numbers_to_marks(text: str) -> str:
    """
    Converts numbered pinyin (e.g., Ni3hao3 ma5) to tone-marked pinyin (e.g., Nǐhǎo ma).

    Anything that is not a known syllable, including Chinese characters,
    punctuation and other words, is copied through unchanged.

    Parameters
    ----------
    text : str
        The text to convert.

    Returns
    -------
    str
        The converted text.
    """
    return "".join(
        render_syllable(piece) if is_syllable(piece) else piece for piece in split(text)
    )
