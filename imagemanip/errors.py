"""
Exceptions raised by the imagemanip package.
"""


class ImageManipError(Exception):
    """Base class for all imagemanip errors."""
    pass


class ImageIOError(ImageManipError, OSError):
    """Raised when an image cannot be loaded or saved."""
    pass


class OutOfRangeError(ImageManipError, IndexError):
    """Raised on pixel access outside the buffer."""
    pass


class ShapeMismatchError(ImageManipError, ValueError):
    """Raised when two buffers that must match in size do not."""
    pass


class UnknownOperationError(ImageManipError, KeyError):
    """Raised when the engine is asked for an operation it does not know."""
    pass
