from .constants import SYLLABLE_BASE, SYLLABLE_END, JAMO_CONSONANTS_START, JAMO_CONSONANTS_END, COMPAT_JAMO_START
from .constants import INITIAL_OFFSETS, FINAL_OFFSETS
from .exceptions import InvalidArgument

__all__ = [
    'is_hangul_syllable', 'is_jamo_consonant', 'is_korean', 'is_initial_jamo', 'is_final_jamo', 'split_letters'
]


def is_hangul_syllable(char: str) -> bool:
    if len(char) != 1:
        return False
    return SYLLABLE_BASE <= ord(char) <= SYLLABLE_END


def is_jamo_consonant(char: str) -> bool:
    if len(char) != 1:
        return False
    return JAMO_CONSONANTS_START <= ord(char) <= JAMO_CONSONANTS_END


def is_korean(char: str) -> bool:
    return is_hangul_syllable(char) or is_jamo_consonant(char)


def is_initial_jamo(char: str) -> bool:
    if len(char) != 1:
        return False
    return (ord(char) - COMPAT_JAMO_START) in INITIAL_OFFSETS


def is_final_jamo(char: str) -> bool:
    if len(char) != 1:
        return False
    return (ord(char) - COMPAT_JAMO_START) in FINAL_OFFSETS[1:]  # offset 0 is the empty final


def split_letters(word: str) -> list[str]:
    if not isinstance(word, str):
        raise InvalidArgument(f'Invalid {word=} - expected a str, not {type(word).__name__}')
    return list(word)
