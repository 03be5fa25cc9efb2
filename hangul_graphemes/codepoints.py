"""
Code point conversion and the index arithmetic of the Hangul Syllables block.

Formula from: https://en.wikipedia.org/wiki/Korean_language_and_computers#Hangul_Syllables_block
"""

import math
from typing import NamedTuple

from .constants import SYLLABLE_BASE, INITIAL_BASE, MEDIAL_BASE, FINAL_BASE, MEDIAL_COUNT, FINAL_COUNT
from .exceptions import InvalidArgument, InvalidCodePointType

__all__ = [
    'SyllableIndices', 'code_point_of', 'char_from_code', 'initial_index', 'medial_index', 'final_index',
    'syllable_indices', 'truncated_indices',
]

MAX_CODE_POINT = 0x10FFFF


class SyllableIndices(NamedTuple):
    initial: int
    medial: int
    final: int

    @property
    def offset(self) -> int:
        # syllable = 588 initial + 28 medial + final + 44032
        return self.initial * MEDIAL_COUNT * FINAL_COUNT + self.medial * FINAL_COUNT + self.final

    @property
    def has_final(self) -> bool:
        return self.final != 0

    @property
    def chars(self) -> tuple[str, str, str]:
        return (
            char_from_code(INITIAL_BASE + self.initial),
            char_from_code(MEDIAL_BASE + self.medial),
            char_from_code(FINAL_BASE + self.final),
        )


def code_point_of(letter: str) -> int:
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidArgument(f'Invalid {letter=} - expected exactly 1 character')
    return ord(letter)


def char_from_code(code_point: int) -> str:
    _validate_code_point(code_point)
    if not 0 <= code_point <= MAX_CODE_POINT:
        raise InvalidArgument(f'Invalid {code_point=} - it is outside the unicode range')
    return chr(code_point)


def initial_index(code_point: int) -> int:
    _validate_code_point(code_point)
    return (code_point - SYLLABLE_BASE) // (MEDIAL_COUNT * FINAL_COUNT)


def medial_index(code_point: int) -> int:
    _validate_code_point(code_point)
    return (code_point - SYLLABLE_BASE) // FINAL_COUNT % MEDIAL_COUNT


def final_index(code_point: int) -> int:
    _validate_code_point(code_point)
    return (code_point - SYLLABLE_BASE) % FINAL_COUNT


def syllable_indices(code_point: int) -> SyllableIndices:
    """
    :param code_point: The code point of a composed hangul syllable
    :return: The (initial, medial, final) indices of the jamo in the Hangul Jamo block.  Indices are only meaningful
      for code points in the Hangul Syllables block; no range check is performed here.
    """
    return SyllableIndices(initial_index(code_point), medial_index(code_point), final_index(code_point))


def _validate_code_point(code_point):
    # bool is a subclass of int, but True / False are never intended as code points
    if not isinstance(code_point, int) or isinstance(code_point, bool):
        raise InvalidCodePointType(code_point)


def truncated_indices(code_point: int) -> SyllableIndices:
    """
    Applies the syllable arithmetic with truncated remainders, so the medial and final indices take the sign of the
    offset from the syllable block instead of wrapping around.  For code points at or above the start of the block,
    the result is identical to :func:`syllable_indices`.  Below it (i.e., for standalone compatibility jamo), all three
    indices are negative, and the recomposed :attr:`SyllableIndices.offset` no longer matches the code point.
    """
    _validate_code_point(code_point)
    offset = code_point - SYLLABLE_BASE
    return SyllableIndices(
        math.floor(offset / (MEDIAL_COUNT * FINAL_COUNT)),
        math.floor(math.fmod(offset / FINAL_COUNT, MEDIAL_COUNT)),
        int(math.fmod(offset, FINAL_COUNT)),
    )
