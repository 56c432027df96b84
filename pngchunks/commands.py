'''
Commands exposed by the command line: each one reads the whole file in
memory, works on the PNGFile and eventually writes the whole file back.

    encode <file> <chunk type> <message> [output file]
    decode <file> <chunk type>
    remove <file> <chunk type>
    print  <file>
'''
import logging
import os
import sys
from pathlib import Path

from pngchunks.exceptions import PNGChunksException, ChunkNotFound
from pngchunks.images.png import PNGFile, PNGChunk, ChunkType


logger = logging.getLogger(__name__)


def load(path) -> PNGFile:
    path = Path(path)
    logger.debug(f'reading \'{path}\'')

    return PNGFile(path.read_bytes())


def save(png: PNGFile, path):
    path = Path(path)
    logger.debug(f'writing {len(png)} chunks to \'{path}\'')

    path.write_bytes(png.pack())


def encode(input_path, chunk_type, message, output_path=None):
    png = load(input_path)

    chunk = PNGChunk(ChunkType.from_text(chunk_type), message.encode('utf-8'))
    png.append(chunk)

    save(png, output_path if output_path is not None else input_path)

    return chunk


def decode(input_path, chunk_type):
    png = load(input_path)

    chunk = png.get_chunk(chunk_type)
    if chunk is None:
        logger.warning(f'no chunk of type \'{chunk_type}\' in \'{input_path}\'')
        return None

    print(f'Decoded: {chunk}')

    return chunk


def remove(input_path, chunk_type):
    '''Removing a chunk that is not there is not an error: nothing is
    written and a warning is emitted.'''
    png = load(input_path)

    try:
        chunk = png.remove(chunk_type)
    except ChunkNotFound as e:
        logger.warning(f'error removing chunk: {e}')
        return None

    save(png, input_path)
    print(f'Removed chunk: {chunk}')

    return chunk


def print_chunks(input_path):
    png = load(input_path)

    for chunk in png.chunks:
        print(chunk)

    return png.chunks


def usage(progname):
    print(f'usage: {progname} encode <file> <chunk type> <message> [output file]')
    print(f'       {progname} decode <file> <chunk type>')
    print(f'       {progname} remove <file> <chunk type>')
    print(f'       {progname} print <file>')


# name: (function, minimum number of arguments, maximum number of arguments)
COMMANDS = {
    'encode': (encode, 3, 4),
    'decode': (decode, 2, 2),
    'remove': (remove, 2, 2),
    'print':  (print_chunks, 1, 1),
}


def main(argv=None):
    argv = sys.argv if argv is None else argv
    progname = os.path.basename(argv[0]) if argv else 'pngchunks'

    if len(argv) < 2 or argv[1] not in COMMANDS:
        usage(progname)
        return 1

    command, n_min, n_max = COMMANDS[argv[1]]
    args = argv[2:]

    if not (n_min <= len(args) <= n_max):
        usage(progname)
        return 1

    try:
        command(*args)
    except (PNGChunksException, OSError) as e:
        logger.error(f'{argv[1]} failed: {e}')
        return 1

    return 0
