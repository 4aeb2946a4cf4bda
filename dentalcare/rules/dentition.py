"""Tooth numbering.

Indices run 1-32 through four quadrants of eight teeth:

    1-8    Upper Right
    9-16   Upper Left
    17-24  Lower Left
    25-32  Lower Right
"""

from dentalcare.database.models.enums import JawPosition, JawSide
from dentalcare.rules.types import ToothLayout

TOOTH_COUNT = 32
TEETH_PER_QUADRANT = 8

# Quadrants in index order
QUADRANTS: tuple[tuple[JawPosition, JawSide], ...] = (
    (JawPosition.UPPER, JawSide.RIGHT),
    (JawPosition.UPPER, JawSide.LEFT),
    (JawPosition.LOWER, JawSide.LEFT),
    (JawPosition.LOWER, JawSide.RIGHT),
)


def is_valid_index(index: object) -> bool:
    """Check that index is an int within 1-32."""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 1 <= index <= TOOTH_COUNT
    )


def tooth_layout(index: int) -> ToothLayout | None:
    """Get the fixed layout for a tooth index.

    Args:
        index: Tooth index, 1-32.

    Returns:
        ToothLayout, or None if the index is out of range.

    Examples:
        >>> tooth_layout(3).name
        'Upper Right 3'
        >>> tooth_layout(17).name
        'Lower Left 1'
    """
    if not is_valid_index(index):
        return None

    quadrant, offset = divmod(index - 1, TEETH_PER_QUADRANT)
    position, side = QUADRANTS[quadrant]
    return ToothLayout(index=index, position=position, side=side, number=offset + 1)


def tooth_name(index: int) -> str | None:
    """Get the display name for a tooth index, or None if out of range."""
    layout = tooth_layout(index)
    return layout.name if layout else None


def full_dentition() -> list[ToothLayout]:
    """Layouts for all 32 teeth in index order."""
    return [tooth_layout(i) for i in range(1, TOOTH_COUNT + 1)]
