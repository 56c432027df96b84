'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32

from .. import fields


# parameters of the CRC-32 variant used by PNG (and zlib, and ISO-HDLC)
CRC32_POLYNOMIAL = 0xEDB88320  # reflected
CRC32_INIT       = 0xFFFFFFFF
CRC32_XOROUT     = 0xFFFFFFFF


def calculate(*raws: bytes) -> int:
    '''Compute the CRC-32 over the concatenation of the arguments.'''
    value = 0
    for raw in raws:
        value = crc32(raw, value)

    return value & 0xFFFFFFFF


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
    """

    def __init__(self, *args, **kwargs):
        super().__init__('I', *args, **kwargs)

    def calculate(self, *raws: bytes) -> int:
        return calculate(*raws)

    def verify(self, expected: int, *raws: bytes) -> bool:
        return self.calculate(*raws) == expected
