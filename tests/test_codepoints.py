#!/usr/bin/env python

import sys
from pathlib import Path

sys.path.append(Path(__file__).resolve().parents[1].as_posix())
from hangul_graphemes.codepoints import SyllableIndices, code_point_of, char_from_code, syllable_indices
from hangul_graphemes.codepoints import initial_index, medial_index, final_index, truncated_indices
from hangul_graphemes.constants import SYLLABLE_BASE, SYLLABLE_END, INITIAL_COUNT, MEDIAL_COUNT, FINAL_COUNT
from hangul_graphemes.exceptions import InvalidArgument, InvalidCodePointType
from hangul_graphemes.test_common import TestCaseBase, main


class CodePointTest(TestCaseBase):
    def test_code_point_of_syllable(self):
        self.assertEqual(44032, code_point_of('가'))
        self.assertEqual(0xD7A3, code_point_of('힣'))
        self.assertEqual(ord('a'), code_point_of('a'))

    def test_code_point_of_astral(self):
        self.assertEqual(0x1F600, code_point_of('\U0001F600'))

    def test_code_point_of_rejects_bad_length(self):
        for value in ('', 'ab', '가나'):
            with self.subTest(value=value), self.assertRaises(InvalidArgument):
                code_point_of(value)

    def test_code_point_of_rejects_non_str(self):
        with self.assertRaises(InvalidArgument):
            code_point_of(44032)  # noqa

    def test_char_from_code(self):
        self.assertEqual('가', char_from_code(0xAC00))
        self.assertEqual('ᄀ', char_from_code(0x1100))

    def test_char_from_code_out_of_range(self):
        for value in (-1, 0x110000):
            with self.subTest(value=value), self.assertRaises(InvalidArgument):
                char_from_code(value)

    def test_char_from_code_type_error(self):
        with self.assertRaises(TypeError):
            char_from_code('가')  # noqa


class IndexTest(TestCaseBase):
    def test_first_syllable(self):
        self.assertEqual(SyllableIndices(0, 0, 0), syllable_indices(SYLLABLE_BASE))

    def test_last_syllable(self):
        self.assertEqual(SyllableIndices(18, 20, 27), syllable_indices(SYLLABLE_END))

    def test_han(self):
        indices = syllable_indices(ord('한'))
        self.assertEqual((18, 0, 4), indices)
        self.assertTrue(indices.has_final)
        self.assertEqual(('ᄒ', 'ᅡ', 'ᆫ'), indices.chars)

    def test_no_final(self):
        indices = syllable_indices(ord('가'))
        self.assertFalse(indices.has_final)
        self.assertEqual('ᆧ', indices.chars[2])

    def test_all_syllables_round_trip(self):
        for code_point in range(SYLLABLE_BASE, SYLLABLE_END + 1):
            i, m, f = initial_index(code_point), medial_index(code_point), final_index(code_point)
            self.assertTrue(0 <= i < INITIAL_COUNT, f'{i=} for {code_point=:X}')
            self.assertTrue(0 <= m < MEDIAL_COUNT, f'{m=} for {code_point=:X}')
            self.assertTrue(0 <= f < FINAL_COUNT, f'{f=} for {code_point=:X}')
            self.assertEqual(code_point - SYLLABLE_BASE, i * 21 * 28 + m * 28 + f)
            self.assertEqual(code_point - SYLLABLE_BASE, syllable_indices(code_point).offset)

    def test_floor_arithmetic_below_block(self):
        # ㄱ is far below the syllable block, so the initial index is negative while the others wrap around
        indices = syllable_indices(ord('ㄱ'))
        self.assertEqual(SyllableIndices(-54, 11, 5), indices)
        self.assertEqual(ord('ㄱ') - SYLLABLE_BASE, indices.offset)

    def test_truncated_indices_below_block(self):
        indices = truncated_indices(ord('ㄱ'))
        self.assertEqual(SyllableIndices(-54, -10, -23), indices)
        self.assertNotEqual(ord('ㄱ') - SYLLABLE_BASE, indices.offset)
        self.assertEqual(SyllableIndices(-54, -9, 0), truncated_indices(ord('ㅈ')))

    def test_truncated_indices_match_in_block(self):
        for code_point in range(SYLLABLE_BASE, SYLLABLE_END + 1):
            self.assertEqual(syllable_indices(code_point), truncated_indices(code_point), f'{code_point=:X}')

    def test_non_numeric_rejected(self):
        for func in (initial_index, medial_index, final_index, syllable_indices, truncated_indices):
            for value in ('가', 1.5, None, True):
                with self.subTest(func=func.__name__, value=value):
                    with self.assertRaises(InvalidCodePointType) as ctx:
                        func(value)  # noqa
                    self.assertIsInstance(ctx.exception, TypeError)
                    self.assertIsInstance(ctx.exception, InvalidArgument)


if __name__ == '__main__':
    main()
