"""
# pngchunks: PNG files as a sequence of chunks.

A PNG file is a fixed signature followed by length-prefixed, type-tagged
and CRC-32 checked records called chunks. This package doesn't look into
the image data, it allows to list, find, append and remove chunks keeping
everything else byte-exact.

Two basic main operations are defined for the file and its chunks:

 1. unpack(): reading the binary data and build a high-level representation
    of that, validating signature, framing and checksums.

 2. pack(): encode the high-level representation into binary data.

For any file obtained with unpack(), pack() gives back the same bytes.
"""
