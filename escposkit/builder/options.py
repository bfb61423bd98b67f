"""
Parameter types for builder operations.

Enum values are the command-table names of the directive each member selects,
so a member can be looked up in a ``CommandTable`` directly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar

from escposkit.core.binary import content
from escposkit.errors import InvalidArgument

logger = logging.getLogger(__name__)

DEFAULT_BARCODE_HEIGHT = 50
DEFAULT_BARCODE_WIDTH = 3
BARCODE_HEIGHT_RANGE = (1, 255)
BARCODE_WIDTH_RANGE = (2, 6)


class TextPosition(str, Enum):
    """Where the human-readable barcode text (HRI) is printed."""
    OFF = "BARCODE_TXT_OFF"
    ABOVE = "BARCODE_TXT_ABV"
    BELOW = "BARCODE_TXT_BLW"
    BOTH = "BARCODE_TXT_BTH"


class BarcodeFormat(str, Enum):
    """One-dimensional symbologies selectable with ``GS k``."""
    UPC_A = "BARCODE_UPC_A"
    UPC_E = "BARCODE_UPC_E"
    EAN13 = "BARCODE_EAN13"
    EAN8 = "BARCODE_EAN8"
    CODE39 = "BARCODE_CODE39"
    ITF = "BARCODE_ITF"
    NW7 = "BARCODE_NW7"


class Alignment(str, Enum):
    LEFT = "TXT_ALIGN_LT"
    CENTER = "TXT_ALIGN_CT"
    RIGHT = "TXT_ALIGN_RT"


class Color(str, Enum):
    BLACK = "TXT_COLOR_BLACK"
    RED = "TXT_COLOR_RED"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], field: str, value: object) -> E:
    """
    Accept an enum member, its name (case-insensitive) or its table value.

    Raises:
        InvalidArgument: If ``value`` does not name a member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in enum_cls.__members__:
            return enum_cls[key]
        for member in enum_cls:
            if member.value == key:
                return member
    allowed = ", ".join(enum_cls.__members__)
    raise InvalidArgument(field, value, f"Wrong {field.replace('_', ' ')}: {value!r}. Expected one of: {allowed}.")


def _check_range(field: str, value: object, bounds: tuple[int, int]) -> int:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, int) or value < low or value > high:
        raise InvalidArgument(field, value, f"{field.capitalize()} must be in range from {low} to {high}.")
    return value


@dataclass(frozen=True)
class BarcodeSpec:
    """
    A validated one-dimensional barcode request.

    Attributes:
        data: Raw barcode payload, sent to the printer unchanged.
        format: The symbology.
        width: Module width, 2-6.
        height: Bar height in dots, 1-255.
        text_position: HRI text placement.
    """
    data: bytes
    format: BarcodeFormat = BarcodeFormat.EAN13
    width: int = DEFAULT_BARCODE_WIDTH
    height: int = DEFAULT_BARCODE_HEIGHT
    text_position: TextPosition = TextPosition.OFF

    @classmethod
    def create(
        cls,
        data: bytes,
        text_position: TextPosition | str = TextPosition.OFF,
        height: Optional[int] = DEFAULT_BARCODE_HEIGHT,
        width: Optional[int] = DEFAULT_BARCODE_WIDTH,
        format: BarcodeFormat | str = BarcodeFormat.EAN13,
    ) -> "BarcodeSpec":
        """
        Validate barcode options and build a spec.

        Checks run in a fixed order: text position, height, width, format.
        ``None`` for height or width selects the default.

        Raises:
            InvalidArgument: On the first option that fails validation.
        """
        try:
            position = coerce_enum(TextPosition, "text_position", text_position)
            checked_height = _check_range(
                "height", DEFAULT_BARCODE_HEIGHT if height is None else height, BARCODE_HEIGHT_RANGE
            )
            checked_width = _check_range(
                "width", DEFAULT_BARCODE_WIDTH if width is None else width, BARCODE_WIDTH_RANGE
            )
            symbology = coerce_enum(BarcodeFormat, "format", format)
        except InvalidArgument as exc:
            logger.debug("barcode rejected: %s=%r", exc.field, exc.value)
            raise
        return cls(
            data=content(data),
            format=symbology,
            width=checked_width,
            height=checked_height,
            text_position=position,
        )
