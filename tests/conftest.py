import io

import pytest
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from pngchunks.images.png import PNGChunk


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_png(size=(5, 5), color='red', text=None):
    '''Generate a real PNG image with pillow, optionally with tEXt chunks.'''
    image = Image.new('RGB', size, color)

    info = None
    if text:
        info = PngInfo()
        for key, value in text.items():
            info.add_text(key, value)

    buffer = io.BytesIO()
    image.save(buffer, format='PNG', pnginfo=info)

    return buffer.getvalue()


def raw_chunk(length, chunk_type, data, crc):
    return length.to_bytes(4, 'big') + chunk_type + data + crc.to_bytes(4, 'big')


@pytest.fixture
def png_data():
    return build_png()


@pytest.fixture
def png_data_with_text():
    return build_png(text={'Comment': 'kebab', 'Author': 'gipi'})


@pytest.fixture
def testing_chunk_raw():
    return raw_chunk(len(MESSAGE), b'RuSt', MESSAGE, MESSAGE_CRC)


@pytest.fixture
def png_path(tmp_path, png_data):
    path = tmp_path / 'red.png'
    path.write_bytes(png_data)

    return path


@pytest.fixture
def testing_chunk():
    return PNGChunk('RuSt', MESSAGE)
