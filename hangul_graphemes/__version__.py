__title__ = 'hangul_graphemes'
__description__ = 'Decompose Hangul syllables into their initial, medial, and final jamo'
__url__ = 'https://github.com/hangul-graphemes/hangul_graphemes'
__version__ = '2026.10.19'
__author__ = 'Hangul Graphemes Developers'
__author_email__ = 'hangul.graphemes@users.noreply.github.com'
