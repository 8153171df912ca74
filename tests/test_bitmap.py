import struct

import pytest

from cubray.bitmap import HEADER_SIZE, encode_bmp, save_bmp


def test_header_fields():
    data = encode_bmp(2, 1, [0x112233, 0x445566])
    assert data[:2] == b"BM"
    assert struct.unpack_from("<I", data, 2)[0] == len(data)
    assert struct.unpack_from("<I", data, 10)[0] == HEADER_SIZE == 54
    width, height, planes, bits = struct.unpack_from("<IIHH", data, 18)
    assert (width, height, planes, bits) == (2, 1, 1, 32)


def test_size_is_header_plus_four_bytes_per_pixel():
    data = encode_bmp(3, 2, [0] * 6)
    assert len(data) == HEADER_SIZE + 3 * 2 * 4


def test_empty_image_is_header_only():
    assert len(encode_bmp(0, 0, [])) == HEADER_SIZE


def test_rows_are_written_bottom_up_in_bgr_order():
    red, blue = 0xFF0000, 0x0000FF
    data = encode_bmp(1, 2, [red, blue])
    assert data[54:58] == b"\xff\x00\x00\x00"
    assert data[58:62] == b"\x00\x00\xff\x00"


def test_high_byte_is_dropped():
    assert encode_bmp(1, 1, [0xFF000000 | 0x123456]) == encode_bmp(1, 1, [0x123456])


def test_wrong_pixel_count_raises():
    with pytest.raises(ValueError):
        encode_bmp(2, 2, [0, 0, 0])


def test_negative_size_raises():
    with pytest.raises(ValueError):
        encode_bmp(-1, 1, [])


def test_save_bmp_writes_encoded_bytes(tmp_path):
    path = tmp_path / "shot.bmp"
    pixels = [0x010203, 0x040506, 0x070809, 0x0A0B0C]
    save_bmp(path, 2, 2, pixels)
    assert path.read_bytes() == encode_bmp(2, 2, pixels)