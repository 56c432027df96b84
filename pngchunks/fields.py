"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable: here it's only the fixed size integers framing a chunk.
"""
import logging
import struct
from enum import Enum, auto

from .exceptions import TruncatedInput


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()


_endianess2prefix = {
    Endianess.LITTLE_ENDIAN: '<',
    Endianess.BIG_ENDIAN:    '>',
    Endianess.NETWORK:       '!',
    Endianess.NATIVE:        '=',
}


class StructField(object):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.

    It's stateless, a chunk declares it as class attribute and uses it to
    convert its own values.
    """

    def __init__(self, format, name=None, endianess=Endianess.LITTLE_ENDIAN):
        self.format = format
        self.name = name
        self.endianess = endianess
        self.logger = logging.getLogger(__name__)

    def __set_name__(self, owner, name):
        if self.name is None:
            self.name = name

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        return '%s%s' % (_endianess2prefix[self.endianess], self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value: int) -> bytes:
        return struct.pack(self.get_format(), value)

    def unpack(self, raw: bytes) -> int:
        try:
            return struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            self.logger.debug(e)
            raise TruncatedInput(
                f'field \'{self.name}\' needs {self.size} bytes, got {len(raw)}',
                chain=[self.name]) from e

    def read(self, stream) -> int:
        '''Consume exactly the size of the field from the stream and decode it.'''
        return self.unpack(stream.read_exactly(self.size, what=self.name))
