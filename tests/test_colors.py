import pytest

from boardview.colors import (
    NUM_DRAW_CHANNELS,
    BitVec,
    ColorScheme,
    DrawChannel,
    FlipMode,
    ShowMode,
)


def test_color_scheme_defaults():
    scheme = ColorScheme()
    assert scheme.background_color == 0xFFFFFFFF
    assert scheme.pin_halo_color == 0x8822FF22
    assert len(scheme.layer_color) == 11
    assert scheme.layer_color[1] == (0xFFFF0000, 0xFFFF8080)


def test_color_scheme_layers_not_shared():
    first = ColorScheme()
    second = ColorScheme()
    first.layer_color[0] = (0, 0)
    assert second.layer_color[0] == (0xFFFFFFFF, 0xFFFFFFFF)


def test_bitvec_set_and_get():
    bits = BitVec(70)
    bits.set(0, True)
    bits.set(33, True)
    bits.set(69, True)
    assert [i for i in range(70) if bits[i]] == [0, 33, 69]
    bits.set(33, False)
    assert bits[33] is False
    assert bits[69] is True


def test_bitvec_clear():
    bits = BitVec(40)
    for i in range(40):
        bits.set(i, True)
    bits.clear()
    assert not any(bits[i] for i in range(40))


def test_bitvec_resize_keeps_bits_that_fit():
    bits = BitVec(10)
    bits.set(3, True)
    bits.set(9, True)
    bits.resize(5)
    assert len(bits) == 5
    assert bits[3] is True
    bits.resize(10)
    assert bits[9] is False


def test_bitvec_out_of_range():
    bits = BitVec(8)
    with pytest.raises(IndexError):
        bits[8]
    with pytest.raises(IndexError):
        bits.set(-1, True)
    with pytest.raises(ValueError):
        BitVec(-1)


def test_enumerations_index_channels():
    assert DrawChannel(0) is DrawChannel.IMAGES
    assert NUM_DRAW_CHANNELS == 6
    assert [m.value for m in FlipMode] == [0, 1]
    assert ShowMode(1) is ShowMode.DIODE
    channels = BitVec(NUM_DRAW_CHANNELS)
    channels.set(int(DrawChannel.IMAGES), True)
    assert channels[0] is True
    assert not any(channels[i] for i in range(1, NUM_DRAW_CHANNELS))