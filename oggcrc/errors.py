class OggCrcError(Exception):
    """Base class for oggcrc-specific errors."""


# Input validation
class InvalidBufferError(OggCrcError, TypeError):
    pass


class BufferLengthError(OggCrcError, ValueError):
    pass
