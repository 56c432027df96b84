import logging

from pngchunks import commands
from pngchunks.images.png import PNGChunk, PNGFile


def test_encode_in_place(png_path, png_data):
    assert commands.main(['pngme', 'encode', str(png_path), 'RuSt', 'Secret decoder ring']) == 0

    png = PNGFile(png_path.read_bytes())

    assert png.chunks[-1] == PNGChunk('RuSt', b'Secret decoder ring')
    assert png.pack().startswith(png_data)


def test_encode_to_output(png_path, png_data, tmp_path):
    output = tmp_path / 'out.png'

    assert commands.main(['pngme', 'encode', str(png_path), 'RuSt', 'kebab', str(output)]) == 0

    assert png_path.read_bytes() == png_data
    assert PNGFile(output.read_bytes()).get_chunk('RuSt').data == b'kebab'


def test_encode_invalid_type(png_path, png_data, caplog):
    with caplog.at_level(logging.ERROR):
        assert commands.main(['pngme', 'encode', str(png_path), 'Ru1t', 'kebab']) == 1

    assert 'encode failed' in caplog.text
    assert png_path.read_bytes() == png_data


def test_decode(png_path, capsys):
    commands.encode(png_path, 'RuSt', 'Secret decoder ring')

    assert commands.main(['pngme', 'decode', str(png_path), 'RuSt']) == 0

    assert capsys.readouterr().out == 'Decoded: RuSt\tSecret decoder ring\n'


def test_decode_missing(png_path, capsys, caplog):
    with caplog.at_level(logging.WARNING):
        assert commands.main(['pngme', 'decode', str(png_path), 'RuSt']) == 0

    assert capsys.readouterr().out == ''
    assert 'no chunk of type' in caplog.text


def test_remove(png_path, png_data, capsys):
    commands.encode(png_path, 'RuSt', 'kebab')

    assert commands.main(['pngme', 'remove', str(png_path), 'RuSt']) == 0

    assert capsys.readouterr().out == 'Removed chunk: RuSt\tkebab\n'
    assert png_path.read_bytes() == png_data


def test_remove_missing_is_soft(png_path, png_data, caplog):
    with caplog.at_level(logging.WARNING):
        assert commands.main(['pngme', 'remove', str(png_path), 'RuSt']) == 0

    assert 'error removing chunk' in caplog.text
    assert png_path.read_bytes() == png_data


def test_print(png_path, capsys):
    commands.encode(png_path, 'RuSt', 'kebab')

    assert commands.main(['pngme', 'print', str(png_path)]) == 0

    lines = capsys.readouterr().out.splitlines()

    assert lines[0].startswith('IHDR\t')
    assert lines[-2] == 'IEND\t'
    assert lines[-1] == 'RuSt\tkebab'


def test_not_a_png(tmp_path, caplog):
    path = tmp_path / 'not.png'
    path.write_bytes(b'GIF89a')

    with caplog.at_level(logging.ERROR):
        assert commands.main(['pngme', 'print', str(path)]) == 1

    assert 'print failed' in caplog.text


def test_missing_file(tmp_path):
    assert commands.main(['pngme', 'print', str(tmp_path / 'nope.png')]) == 1


def test_usage(capsys):
    assert commands.main(['pngme']) == 1
    assert commands.main(['pngme', 'explode', 'file']) == 1
    assert commands.main(['pngme', 'decode', 'file']) == 1
    assert commands.main(['pngme', 'print', 'a', 'b']) == 1

    assert 'usage: pngme' in capsys.readouterr().out
