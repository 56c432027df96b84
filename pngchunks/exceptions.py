class PNGChunksException(Exception):
    '''Base class to extend in order to throw exception in pngchunks.

    It takes a message and an optional argument that represents the chain
    of the layer that caused the exception.
    '''

    def __init__(self, msg='', chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(msg)

    def __str__(self):
        msg = super().__str__()
        if not self.chain:
            return msg

        return '%s (at %s)' % (msg, '.'.join(str(_) for _ in self.chain))


class ChunkTypeException(PNGChunksException):
    pass


class InvalidChunkTypeLength(ChunkTypeException):
    pass


class InvalidChunkTypeCharacter(ChunkTypeException):
    pass


class UnpackException(PNGChunksException):
    pass


class LengthTooLarge(UnpackException):
    pass


class TruncatedInput(UnpackException):
    pass


class ChecksumMismatch(UnpackException):
    pass


class MagicException(PNGChunksException):
    pass


class BadSignature(MagicException):
    pass


class ChunkNotFound(PNGChunksException):
    pass


class NonUtf8Payload(PNGChunksException):
    '''Raised when bytes meant for display are not valid UTF-8.'''
    pass
