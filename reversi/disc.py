from .constants import Color


class Disc:
    """A placed game piece. Its color is toggled in place when captured."""

    __slots__ = ("_color",)

    def __init__(self, color: Color) -> None:
        if color not in (Color.BLACK, Color.WHITE):
            raise ValueError(f"Disc color must be black or white, got {color!r}.")
        self._color = Color(color)

    @property
    def color(self) -> Color:
        return self._color

    def flip(self) -> None:
        """Toggle the disc to the opposite color."""
        self._color = self._color.opposite

    def __repr__(self) -> str:
        return f"Disc({self._color.value!r})"

    def __str__(self) -> str:
        return "B" if self._color is Color.BLACK else "W"
