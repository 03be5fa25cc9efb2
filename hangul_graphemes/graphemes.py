"""
The grapheme decomposer: splits text into letters and decomposes each hangul syllable into its jamo.

Korean letters are composed syllables (가-힣) and standalone compatibility consonants (ㄱ-ㅎ).  Everything else is
passed through unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Flag
from threading import RLock
from typing import Iterator, Mapping, Optional, Union

from cachetools import LRUCache, cached

from .classification import is_hangul_syllable, is_jamo_consonant, is_initial_jamo, is_final_jamo, split_letters
from .codepoints import SyllableIndices, code_point_of, syllable_indices, truncated_indices
from .config import DecomposerConfig, JamoForm, JamoMode
from .constants import INITIAL_BASE, FINAL_BASE, COMPAT_JAMO_START, COMPAT_MEDIAL_START, COMPAT_FILLER
from .constants import INITIAL_OFFSETS, FINAL_OFFSETS
from .exceptions import InvalidArgument

__all__ = [
    'JamoType', 'GraphemeResult', 'KoreanGrapheme', 'JamoGrapheme', 'NonKoreanGrapheme', 'decompose',
    'iter_graphemes', 'decompose_syllable',
]
log = logging.getLogger(__name__)

# KS X 1001 covers the 2350 most common syllables
SYLLABLE_CACHE_SIZE = 2350

Config = Union[DecomposerConfig, Mapping[str, object], None]


class JamoType(Flag):
    INITIAL = 1  # Leading consonant
    MEDIAL = 2  # Vowel
    FINAL = 4  # Final consonant


class GraphemeResult(ABC):
    """Base class for decomposition results.  Results are immutable, so cached instances may be shared."""

    __slots__ = ('letter',)
    is_korean: bool = False

    def __init__(self, letter: str):
        object.__setattr__(self, 'letter', letter)

    def __setattr__(self, key: str, value):
        raise AttributeError(f'Unable to set {key!r} - {self.__class__.__name__} objects are immutable')

    def __delattr__(self, key: str):
        raise AttributeError(f'Unable to delete {key!r} - {self.__class__.__name__} objects are immutable')

    def _key(self) -> tuple:
        return (self.letter,)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GraphemeResult):
            return NotImplemented
        return self.__class__ is other.__class__ and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.__class__, self._key()))

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}[{self.letter!r}]>'

    def __str__(self) -> str:
        return self.letter

    @abstractmethod
    def as_dict(self) -> dict[str, object]:
        raise NotImplementedError


class KoreanGrapheme(GraphemeResult):
    """A composed syllable that was decomposed into its initial, medial, and final jamo."""

    __slots__ = ('initial', 'medial', 'final', 'indices')
    is_korean = True

    def __init__(self, letter: str, initial: str, medial: str, final: Optional[str], indices: SyllableIndices):
        super().__init__(letter)
        for key, val in (('initial', initial), ('medial', medial), ('final', final), ('indices', indices)):
            object.__setattr__(self, key, val)

    @classmethod
    def from_indices(
        cls, letter: str, indices: SyllableIndices, form: JamoForm = JamoForm.CONJOINING, fill_final: bool = True
    ) -> KoreanGrapheme:
        i, m, f = indices
        if form == JamoForm.COMPATIBILITY:
            try:
                initial = chr(COMPAT_JAMO_START + INITIAL_OFFSETS[i])
                final = chr(COMPAT_JAMO_START + FINAL_OFFSETS[f]) if f > 0 else chr(COMPAT_FILLER)
            except IndexError as e:
                raise InvalidArgument(f'Invalid {indices=} for {letter=} - no compatibility jamo exist for it') from e
            medial = chr(COMPAT_MEDIAL_START + m)
        else:
            initial, medial, final = indices.chars

        return cls(letter, initial, medial, final if indices.has_final or fill_final else None, indices)

    @property
    def has_final(self) -> bool:
        return self.indices.has_final

    @property
    def jamo(self) -> tuple[str, ...]:
        """The initial, medial, and final jamo, excluding the final placeholder when there is no final consonant"""
        if self.has_final:
            return self.initial, self.medial, self.final
        return self.initial, self.medial

    def _key(self) -> tuple:
        return self.letter, self.initial, self.medial, self.final, self.indices

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}[{self.letter!r}: {self.initial!r}, {self.medial!r}, {self.final!r}]>'

    def as_dict(self) -> dict[str, object]:
        return {'is_korean': True, 'initial': self.initial, 'medial': self.medial, 'final': self.final}


class JamoGrapheme(GraphemeResult):
    """A standalone compatibility consonant (ㄱ-ㅎ), which is Korean but not a composed syllable."""

    __slots__ = ('positions',)
    is_korean = True

    def __init__(self, letter: str):
        super().__init__(letter)
        positions = JamoType(0)
        if is_initial_jamo(letter):
            positions |= JamoType.INITIAL
        if is_final_jamo(letter):
            positions |= JamoType.FINAL
        object.__setattr__(self, 'positions', positions)

    @property
    def as_initial(self) -> Optional[str]:
        """The conjoining initial jamo equivalent to this consonant, if it may be used as an initial"""
        if self.positions & JamoType.INITIAL:
            return chr(INITIAL_BASE + INITIAL_OFFSETS.index(ord(self.letter) - COMPAT_JAMO_START))
        return None

    @property
    def as_final(self) -> Optional[str]:
        """The conjoining final jamo equivalent to this consonant, if it may be used as a final"""
        if self.positions & JamoType.FINAL:
            return chr(FINAL_BASE + FINAL_OFFSETS.index(ord(self.letter) - COMPAT_JAMO_START))
        return None

    def as_dict(self) -> dict[str, object]:
        return {'is_korean': True, 'initial': self.letter, 'medial': None, 'final': None}


class NonKoreanGrapheme(GraphemeResult):
    __slots__ = ()

    def as_dict(self) -> dict[str, object]:
        return {'is_korean': False, 'initial': self.letter}


def decompose(word: str, config: Config = None) -> list[GraphemeResult]:
    """
    Decompose each letter in the given text.

    :param word: The text to decompose.  It must contain at least 1 character.
    :param config: A :class:`DecomposerConfig` or a mapping of config options
    :return: A list containing 1 result per letter in the given text, in the same order
    """
    return list(iter_graphemes(word, config))


def iter_graphemes(word: str, config: Config = None) -> Iterator[GraphemeResult]:
    letters = split_letters(word)
    if not letters:
        raise InvalidArgument('Invalid word - it must contain at least 1 character')
    config = _get_config(config)
    return _iter_graphemes(letters, config.jamo_form, config.fill_final, config.jamo_mode == JamoMode.ARITHMETIC)


def decompose_syllable(char: str, config: Config = None) -> KoreanGrapheme:
    if not is_hangul_syllable(char):
        raise InvalidArgument(f'Invalid {char=} - it is not a composed hangul syllable')
    config = _get_config(config)
    return _decompose_syllable(char, config.jamo_form, config.fill_final)


def _iter_graphemes(
    letters: list[str], jamo_form: JamoForm, fill_final: bool, arithmetic_jamo: bool
) -> Iterator[GraphemeResult]:
    for letter in letters:
        if is_hangul_syllable(letter):
            yield _decompose_syllable(letter, jamo_form, fill_final)
        elif is_jamo_consonant(letter):
            if arithmetic_jamo:
                indices = truncated_indices(code_point_of(letter))
                log.debug(f'Applying syllable arithmetic to standalone jamo {letter!r} => {indices}')
                # Out of range indices only exist in the conjoining block
                yield KoreanGrapheme.from_indices(letter, indices, JamoForm.CONJOINING, fill_final)
            else:
                yield JamoGrapheme(letter)
        else:
            yield NonKoreanGrapheme(letter)


@cached(LRUCache(SYLLABLE_CACHE_SIZE), lock=RLock())
def _decompose_syllable(char: str, form: JamoForm, fill_final: bool) -> KoreanGrapheme:
    return KoreanGrapheme.from_indices(char, syllable_indices(code_point_of(char)), form, fill_final)


def _get_config(config: Config) -> DecomposerConfig:
    if config is None:
        return DecomposerConfig()
    elif isinstance(config, DecomposerConfig):
        return config
    return DecomposerConfig(config)
