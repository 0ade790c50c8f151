"""
Value objects shipped with selector-builder.
"""

from typing import Any, Union

from pydantic import BaseModel


class Rectangle(BaseModel):
    """Rectangle with a derived area.

    Inputs are not range-checked; negative sizes give a negative area.

    Example:
        >>> Rectangle(10, 20).area
        200
    """

    width: Union[int, float]
    height: Union[int, float]

    def __init__(self, width: Union[int, float], height: Union[int, float], **data: Any) -> None:
        super().__init__(width=width, height=height, **data)

    @property
    def area(self) -> Union[int, float]:
        return self.width * self.height
