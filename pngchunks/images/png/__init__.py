'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A PNG file is an 8 bytes signature followed by a sequence of chunks; here we
don't interpret the payloads (no IDAT decompression, no ordering rules) we
only keep the container byte-exact so that chunks can be listed, searched,
appended and removed.

'''
import logging

from bitstring import BitArray

from pngchunks import fields
from pngchunks.common import crc
from pngchunks.streams import Stream
from pngchunks.exceptions import (
    BadSignature,
    ChecksumMismatch,
    ChunkNotFound,
    InvalidChunkTypeCharacter,
    InvalidChunkTypeLength,
    LengthTooLarge,
    NonUtf8Payload,
    UnpackException,
)


logger = logging.getLogger(__name__)


SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'
MAX_CHUNK_LENGTH = (1 << 31) - 1

# the property bit of each byte of the chunk type (0x20, the "lowercase" bit)
# is the third one starting from the most significant
PROPERTY_BIT_INDEX = 2


def type_matches(chunk_type, name) -> bool:
    '''Compare a chunk type with its textual form without decoding the
    raw bytes: a type that is not valid UTF-8 simply doesn't match.'''
    if isinstance(name, str):
        name = name.encode('utf-8')

    return chunk_type.raw == bytes(name)


class ChunkType(object):
    '''The 4 bytes tag identifying the purpose of a chunk.

    Built from raw bytes (what we find into a file) no validation is applied
    since the CRC is what guards the integrity of a chunk; built from text
    (what a user asks for) only ASCII letters are allowed.

    Bit 5 of each byte encodes a property of the chunk:

     1. ancillary bit: 0 (uppercase) means critical
     2. private bit: 0 (uppercase) means public
     3. reserved bit: must be 0 (uppercase) for conforming chunks
     4. safe-to-copy bit: 1 (lowercase) means safe to copy
    '''
    __slots__ = ('_raw',)

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != 4:
            raise InvalidChunkTypeLength(f'expected 4 bytes but received {len(raw)} when creating chunk type')

        object.__setattr__(self, '_raw', raw)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def from_text(cls, text):
        raw = text.encode('utf-8') if isinstance(text, str) else bytes(text)

        if len(raw) != 4:
            raise InvalidChunkTypeLength(f'expected 4 bytes but received {len(raw)} when creating chunk type')

        if not raw.isalpha():
            raise InvalidChunkTypeCharacter(f'chunk type {raw!r} contains one or more invalid characters')

        return cls(raw)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __str__(self):
        return self.to_text()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def bytes(self) -> bytes:
        return self._raw

    def to_text(self) -> str:
        try:
            return self._raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NonUtf8Payload(f'chunk type {self._raw!r} is not valid UTF-8') from e

    def _property_bit(self, idx):
        return bool(BitArray(self._raw)[idx * 8 + PROPERTY_BIT_INDEX])

    def is_critical(self):
        return not self._property_bit(0)

    def is_ancillary(self):
        return self._property_bit(0)

    def is_public(self):
        return not self._property_bit(1)

    def is_private(self):
        return self._property_bit(1)

    def is_reserved_bit_valid(self):
        return not self._property_bit(2)

    def is_safe_to_copy(self):
        return self._property_bit(3)

    def is_valid(self):
        return self._raw.isalpha() and self.is_reserved_bit_valid()


class PNGChunk(object):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    # Critical chunks

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk

    A chunk never changes after it's built: to replace one remove it from
    its file and append a new one.
    '''
    length_field = fields.StructField('I', name='length', endianess=fields.Endianess.BIG_ENDIAN)
    crc_field    = crc.CRCField(name='crc', endianess=fields.Endianess.NETWORK)  # network byte order

    __slots__ = ('_type', '_data', '_crc')

    def __init__(self, chunk_type, data: bytes):
        if not isinstance(chunk_type, ChunkType):
            chunk_type = ChunkType.from_text(chunk_type)

        self._type = chunk_type
        self._data = bytes(data)
        self._crc = self.crc_field.calculate(self._type.raw, self._data)

    @classmethod
    def unpack(cls, stream):
        '''Decode a chunk from the current position of the stream (or from
        the start of a bytes-like object), consuming exactly 12 + length bytes.'''
        if not isinstance(stream, Stream):
            stream = Stream(stream)

        offset = stream.tell()

        length = cls.length_field.read(stream)
        if length > MAX_CHUNK_LENGTH:
            raise LengthTooLarge(f'length is too long ({length} > 2^31 - 1)', chain=['length'])

        chunk_type = ChunkType.from_bytes(stream.read_exactly(4, what='type'))
        data = stream.read_exactly(length, what='data')
        expected_crc = cls.crc_field.read(stream)

        if not cls.crc_field.verify(expected_crc, chunk_type.raw, data):
            raise ChecksumMismatch(
                f'bad crc for chunk {chunk_type.raw!r}: found 0x{expected_crc:08x}',
                chain=['crc'])

        chunk = cls(chunk_type, data)

        logger.debug('unpacked chunk %r of length %d at offset %d' % (chunk_type.raw, length, offset))

        return chunk

    def pack(self) -> bytes:
        return (
            self.length_field.pack(self.length) +
            self._type.raw +
            self._data +
            self.crc_field.pack(self._crc)
        )

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def size(self):
        return self.length_field.size + 4 + self.length + self.crc_field.size

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def type(self) -> ChunkType:
        return self._type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NonUtf8Payload(
                f'data of chunk {self._type.raw!r} is not valid UTF-8', chain=['data']) from e

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return (self._type, self._data, self._crc) == (other._type, other._data, other._crc)

    def __hash__(self):
        return hash((self._type, self._data))

    def __repr__(self):
        return '<%s(type=%r,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._type.raw,
            self.length,
            self._crc,
        )

    def __str__(self):
        try:
            text = self.data_as_string()
        except NonUtf8Payload:
            text = '<%d bytes of binary data>' % self.length

        return '%s\t%s' % (self._type.raw.decode('latin1'), text)


class PNGFile(object):
    '''The whole file: the signature and the ordered list of chunks.

    Passing the raw bytes to the constructor unpacks them, otherwise the
    file starts empty (only the signature).
    '''
    header = SIGNATURE

    def __init__(self, data=None):
        self._chunks = []

        if data is not None:
            logger.debug('unpacking \'%s\' from %d bytes' % (self.__class__.__name__, len(data)))
            self.unpack(Stream(data))

    def unpack(self, stream):
        '''Validate the signature and decode chunks until the stream is exhausted.

        Any error aborts the whole operation: the chunks already decoded are
        discarded and the instance is left as it was.
        '''
        signature = stream.read(len(SIGNATURE))
        if signature != SIGNATURE:
            raise BadSignature(f'{signature!r} is not the PNG signature', chain=['header'])

        chunks = []
        while not stream.is_exhausted():
            logger.debug('unpacking chunk #%d at offset %d' % (len(chunks), stream.tell()))
            try:
                chunk = PNGChunk.unpack(stream)
            except UnpackException as e:
                e.chain[:0] = ['chunks', len(chunks)]
                raise

            chunks.append(chunk)

        self._chunks = chunks

        return self

    def pack(self) -> bytes:
        return self.header + b''.join(chunk.pack() for chunk in self._chunks)

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def chunks(self):
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self._chunks == other._chunks

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        return '\n'.join(str(_) for _ in self._chunks)

    def _index(self, name):
        for idx, chunk in enumerate(self._chunks):
            if type_matches(chunk.type, name):
                return idx

        return None

    def get_chunk(self, name):
        '''Returns the first chunk with the given type or None.'''
        idx = self._index(name)

        return self._chunks[idx] if idx is not None else None

    def append(self, chunk: PNGChunk):
        logger.debug('appending chunk %r' % chunk)
        self._chunks.append(chunk)

    def remove(self, name) -> PNGChunk:
        '''Remove and return the first chunk with the given type.'''
        idx = self._index(name)

        if idx is None:
            raise ChunkNotFound(f'no chunk with type {name!r}')

        logger.debug('removing chunk #%d of type %r' % (idx, name))

        return self._chunks.pop(idx)
