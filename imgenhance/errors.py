"""
Exceptions raised by the image enhancement operators.
"""


class BadArgumentError(ValueError):
    """Raised when an operator receives a parameter or image it cannot process.

    The check always happens before any sample of the target image is written.
    """
