"""Pydantic models for simple geometric values."""

from pydantic import BaseModel, Field, SkipValidation


class Rectangle(BaseModel):
    """Rectangle with a width, a height and an area.

    Attributes:
        width: Horizontal size, stored exactly as given
        height: Vertical size, stored exactly as given

    Example:
        >>> r = Rectangle(width=10, height=20)
        >>> r.get_area()
        200

    """

    width: SkipValidation[int | float] = Field(description='Rectangle width')
    height: SkipValidation[int | float] = Field(description='Rectangle height')

    def __init__(self, width: int | float, height: int | float, **kwargs):
        super().__init__(width=width, height=height, **kwargs)

    def get_area(self) -> int | float:
        """Return width multiplied by height."""
        return self.width * self.height
