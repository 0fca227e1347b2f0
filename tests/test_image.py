import pytest

from wireframe.image import LSB_FIRST, MSB_FIRST, new_image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _map_color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(img, kind):
    for y in range(img.height):
        for x in range(img.width):
            img.set_pixel(x, y, _map_color(x, y, img.width, img.height, kind))


def test_new_image_geometry():
    img = new_image(IM1_SX, IM1_SY)
    assert img.bpp == 32
    assert img.size_line == 168
    assert len(img.data) == 168 * IM1_SY


def test_fresh_image_is_black():
    img = new_image(IM1_SX, IM1_SY)
    assert not any(img.data)
    assert img.get_pixel(5, 5) == 0


@pytest.mark.parametrize("byte_order", [LSB_FIRST, MSB_FIRST])
def test_color_map_round_trip(byte_order):
    img = new_image(IM1_SX, IM1_SY, 32, byte_order)
    _fill(img, 1)
    for x, y in [(0, 0), (41, 0), (0, 41), (20, 33)]:
        assert img.get_pixel(x, y) == _map_color(x, y, IM1_SX, IM1_SY, 1)


def test_large_color_map_type_two():
    img = new_image(IM3_SX, IM3_SY)
    _fill(img, 2)
    assert img.get_pixel(241, 241) == _map_color(241, 241, IM3_SX, IM3_SY, 2)
    assert img.get_pixel(0, 100) == _map_color(0, 100, IM3_SX, IM3_SY, 2)


def test_little_endian_layout():
    img = new_image(4, 4, 32, LSB_FIRST)
    img.set_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == b"\x44\x33\x22\x11"


def test_big_endian_layout():
    img = new_image(4, 4, 32, MSB_FIRST)
    img.set_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == b"\x11\x22\x33\x44"


def test_pixel_lands_on_its_row():
    img = new_image(IM1_SX, IM1_SY)
    img.set_pixel(3, 2, 0x11223344)
    offset = 2 * img.size_line + 3 * 4
    assert bytes(img.data[offset:offset + 4]) == b"\x44\x33\x22\x11"
    assert sum(1 for b in img.data if b) == 4


def test_negative_color_stored_unsigned():
    img = new_image(2, 2)
    img.set_pixel(1, 1, -16777216)
    assert img.get_pixel(1, 1) == 0xFF000000


def test_24_bpp_truncates_color():
    img = new_image(3, 3, 24)
    img.set_pixel(2, 2, 0x11223344)
    assert img.get_pixel(2, 2) == 0x223344


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds(x, y):
    img = new_image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.set_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize(
    "args", [(0, 10), (10, 0), (-3, 4), (10, 10, 12), (10, 10, 32, 2)]
)
def test_invalid_images_rejected(args):
    with pytest.raises(ValueError):
        new_image(*args)