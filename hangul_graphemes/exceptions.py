"""
Exceptions used by the hangul_graphemes package
"""

__all__ = ['GraphemeError', 'InvalidArgument', 'InvalidCodePointType']


class GraphemeError(Exception):
    """Base exception for errors raised while decomposing text"""


class InvalidArgument(GraphemeError, ValueError):
    """Exception to be raised when input does not pass validation"""


class InvalidCodePointType(InvalidArgument, TypeError):
    """Raised when a code point that is not an integer is provided"""

    def __init__(self, code_point):
        self.code_point = code_point
        super().__init__(f'Invalid {code_point=} - expected an int, not {type(code_point).__name__}')
