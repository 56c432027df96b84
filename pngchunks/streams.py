import io
import logging

from .exceptions import TruncatedInput


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need a read() that refuses
    to return less than what the format declares.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self._type.__name__)

        init_method()

        self.size = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(0)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __del__(self):
        obj = self.__dict__.get('obj')
        if isinstance(obj, io.BytesIO):
            obj.close()

    def __repr__(self):
        return '<%s(offset=%d, size=%d)>' % (self.__class__.__name__, self.tell(), self.size)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    @property
    def remaining(self):
        return self.size - self.tell()

    def is_exhausted(self):
        return self.remaining <= 0

    def read_exactly(self, n, what='data'):
        '''Read n bytes or raise TruncatedInput: a short read always means
        the frame declared more than the buffer holds.'''
        offset = self.tell()
        data = self.obj.read(n)

        if len(data) != n:
            logger.debug('short read for %s at offset %d: %d/%d bytes' % (what, offset, len(data), n))
            raise TruncatedInput(
                f'expected {n} bytes for {what} at offset {offset}, only {len(data)} available',
                chain=[what])

        return data
