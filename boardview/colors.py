"""Board view colour scheme, bit vector and drawing enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

# Each layer has a pair of colours: the regular one and a lighter variant.
_LAYER_COLORS: tuple[tuple[int, int], ...] = (
    (0xFFFFFFFF, 0xFFFFFFFF),
    (0xFFFF0000, 0xFFFF8080),
    (0xFF00FF00, 0xFF80FF80),
    (0xFF0000FF, 0xFF8080FF),
    (0xFFFFFF00, 0xFFFFFF80),
    (0xFF00FFFF, 0xFF80FFFF),
    (0xFFFF00FF, 0xFFFF80FF),
    (0xFF800000, 0xFFC08080),
    (0xFF008000, 0xFF80C080),
    (0xFF000080, 0xFF8080C0),
    (0xFF808000, 0xFFC0C080),
)


@dataclass
class ColorScheme:
    """Colours used to draw a board, each packed as ABGR (not RGBA)."""

    background_color: int = 0xFFFFFFFF
    board_fill_color: int = 0xFFDDDDDD
    part_outline_color: int = 0xFF444444
    part_hull_color: int = 0x80808080
    part_fill_color: int = 0xFFFFFFFF
    part_text_color: int = 0x80808080
    part_highlighted_color: int = 0xFF0000EE
    part_highlighted_fill_color: int = 0xF4F0F0FF
    part_highlighted_text_color: int = 0xFF808000
    part_highlighted_text_background_color: int = 0xFF00EEEE
    board_outline_color: int = 0xFF00FFFF

    pin_default_color: int = 0xFF0000FF
    pin_default_text_color: int = 0xFFCC0000
    pin_text_background_color: int = 0xFFFFFF80
    pin_ground_color: int = 0xFF0000BB
    pin_not_connected_color: int = 0xFFFF0000
    pin_test_pad_color: int = 0xFF888888
    pin_test_pad_fill_color: int = 0xFF8DC6D6
    pin_a1_pad_color: int = 0xFFDD0000

    pin_selected_color: int = 0x00000000
    pin_selected_fill_color: int = 0xFFFF8888
    pin_selected_text_color: int = 0xFFFFFFFF

    pin_same_net_color: int = 0xFFAA4040
    pin_same_net_fill_color: int = 0xFFFF9999
    pin_same_net_text_color: int = 0xFF111111

    pin_halo_color: int = 0x8822FF22
    pin_net_web_color: int = 0xFF0000FF
    pin_net_web_os_color: int = 0x0000FF22

    annotation_part_alias_color: int = 0xCC00FFFF
    annotation_box_color: int = 0xAA0000FF
    annotation_stalk_color: int = 0xFF000000
    annotation_popup_background_color: int = 0xFFEEEEEE
    annotation_popup_text_color: int = 0xFF000000

    selected_mask_pins: int = 0xFFFFFFFF
    selected_mask_parts: int = 0xFFFFFFFF
    selected_mask_outline: int = 0xFFFFFFFF

    or_mask_pins: int = 0x00000000
    or_mask_parts: int = 0x00000000
    or_mask_outline: int = 0x00000000

    via_color: int = 0xFFC7C7C7
    layer_color: list[tuple[int, int]] = field(default_factory=lambda: list(_LAYER_COLORS))
    default_board_select_color: int = 0xFF00FFFF


class BitVec:
    """A fixed-size vector of booleans."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"negative size: {size}")
        self._size = size
        self._bits = 0

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range for size {self._size}")

    def resize(self, new_size: int) -> None:
        """Change the length, keeping the bits that still fit."""
        if new_size < 0:
            raise ValueError(f"negative size: {new_size}")
        self._bits &= (1 << new_size) - 1
        self._size = new_size

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return bool((self._bits >> index) & 1)

    def set(self, index: int, value: bool) -> None:
        """Set the bit at ``index`` to ``value``."""
        self._check(index)
        mask = 1 << index
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask

    def clear(self) -> None:
        """Reset every bit to False."""
        self._bits = 0


class DrawChannel(IntEnum):
    """Layers of the board drawing, back to front."""

    IMAGES = 0
    FILL = 1
    POLYLINES = 2
    PINS = 3
    TEXT = 4
    ANNOTATIONS = 5


NUM_DRAW_CHANNELS = len(DrawChannel)


class FlipMode(IntEnum):
    """How flipping the board treats the view."""

    VP = 0
    MP = 1


class ShowMode(IntEnum):
    """Which measured value is shown for pins."""

    NONE = 0
    DIODE = 1
    VOLTAGE = 2
    OHM = 3