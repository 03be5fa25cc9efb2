"""
Constants describing the Hangul Syllables, Hangul Jamo, and Hangul Compatibility Jamo unicode blocks
"""

# https://en.wikipedia.org/wiki/Korean_language_and_computers#Hangul_Syllables_block
SYLLABLE_BASE = 0xAC00  # 가
SYLLABLE_END = 0xD7A3  # 힣

# https://en.wikipedia.org/wiki/Hangul_Jamo_(Unicode_block)
INITIAL_BASE = 0x1100
MEDIAL_BASE = 0x1161
FINAL_BASE = 0x11A7  # Index 0 = no final consonant

INITIAL_COUNT = 19
MEDIAL_COUNT = 21
FINAL_COUNT = 28

# https://en.wikipedia.org/wiki/Hangul_Compatibility_Jamo
COMPAT_JAMO_START = 0x3130
JAMO_CONSONANTS_START = 0x3131  # ㄱ
JAMO_CONSONANTS_END = 0x314E  # ㅎ
COMPAT_MEDIAL_START = 0x314F  # ㅏ
COMPAT_FILLER = 0x3164
# The 0x3130 - 0x314E block contains both leading and final consonants - offsets from 0x3130 of lead consonants:
INITIAL_OFFSETS = [1, 2, 4, 7, 8, 9, 17, 18, 19, 21, 22, 23, 24, 25, 26, 27, 28, 29, 30]
# There are 3 chars that may not be used as a final consonant:
FINAL_OFFSETS = [i for i in range(31) if i not in (8, 19, 25)]

