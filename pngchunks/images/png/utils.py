import logging

from pngchunks.exceptions import ChunkNotFound
from pngchunks.images.png import type_matches


logger = logging.getLogger(__name__)


def get_chunks_by_name(chunks, name):
    return [_ for _ in chunks if type_matches(_.type, name)]


def get_chunk_by_name(chunks, name):
    '''Like PNGFile.get_chunk() but for when the chunk is required.'''
    for chunk in chunks:
        if type_matches(chunk.type, name):
            return chunk

    logger.debug(f'no chunk with name {name} in {len(chunks)} chunks')

    raise ChunkNotFound(f'no chunk with name {name}')
