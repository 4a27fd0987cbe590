"""Pixel addressing and the pixel command wire format."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .color import Color

# A grid coordinate is either an index or a percentage string like "-2%"
Coordinate = Union[int, float, str]


def format_coordinate(value: Coordinate) -> str:
    """Render a coordinate the way the configurator expects it.

    Integral floats drop their decimal point so a computed column of
    ``4.0`` is written as ``4``.

    Example:
        >>> format_coordinate(4.0)
        '4'
        >>> format_coordinate("-2%")
        '-2%'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def percent(value: float) -> str:
    """Turn a number into a percentage coordinate (``50`` -> ``"50%"``)."""
    return f"{format_coordinate(value)}%"


class Position(BaseModel):
    """Where a pixel command applies.

    Exactly one addressing mode is used: a row and/or column (indices or
    percentages), or a direct pixel id.
    """

    model_config = ConfigDict(frozen=True)

    row: Coordinate | None = Field(default=None, description="Row index or percentage")
    col: Coordinate | None = Field(default=None, description="Column index or percentage")
    pixel_id: int | None = Field(default=None, description="Direct pixel identifier")

    @model_validator(mode="after")
    def check_addressing(self) -> "Position":
        """Pixel ids cannot be mixed with row/column addressing."""
        has_grid = self.row is not None or self.col is not None
        if self.pixel_id is not None and has_grid:
            raise ValueError("Position uses either row/column or pixel id, not both")
        if self.pixel_id is None and not has_grid:
            raise ValueError("Position needs a row, a column or a pixel id")
        return self

    @classmethod
    def grid(cls, row: Coordinate, col: Coordinate) -> "Position":
        """Address a single grid cell."""
        return cls(row=row, col=col)

    @classmethod
    def column(cls, col: Coordinate) -> "Position":
        """Address a whole column."""
        return cls(col=col)

    @classmethod
    def row_only(cls, row: Coordinate) -> "Position":
        """Address a whole row."""
        return cls(row=row)

    @classmethod
    def led(cls, pixel_id: int) -> "Position":
        """Address a pixel by id."""
        return cls(pixel_id=pixel_id)

    def address_parts(self) -> list[str]:
        """Address parts in wire order: row, column, id."""
        parts = []
        if self.row is not None:
            parts.append(f"r:{format_coordinate(self.row)}")
        if self.col is not None:
            parts.append(f"c:{format_coordinate(self.col)}")
        if self.pixel_id is not None:
            parts.append(str(self.pixel_id))
        return parts


class PixelCommand(BaseModel):
    """A single color assignment inside a frame."""

    model_config = ConfigDict(frozen=True)

    position: Position
    color: Color = Field(default_factory=Color.off)

    def encode(self) -> str:
        """Serialize to ``P[<address>](<r>,<g>,<b>)``.

        Example:
            >>> PixelCommand(position=Position.grid(2, 3), color=Color(r=10, g=20, b=30)).encode()
            'P[r:2,c:3](10,20,30)'
        """
        address = ",".join(self.position.address_parts())
        return f"P[{address}]({self.color.r},{self.color.g},{self.color.b})"

    def __str__(self) -> str:
        return self.encode()
