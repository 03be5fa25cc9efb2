"""
Decompose Hangul syllables into their initial, medial, and final jamo
"""

from .classification import *
from .codepoints import *
from .config import DecomposerConfig, JamoForm, JamoMode
from .exceptions import *
from .graphemes import *
