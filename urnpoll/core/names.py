"""
urnpoll.core.names
==================

Typed names shared across the package.

- `Label`: an Enum for the two bead colours.
- `LabelLike`: anything accepted where a bead label is expected.

Examples
--------
>>> from urnpoll.core.names import Label
>>> Label.BLUE.value
'blue'
>>> Label.BLUE.code, Label.RED.code
(1, 0)
>>> Label.from_code(1) is Label.BLUE
True
"""

from __future__ import annotations
from enum import Enum
from typing import Union


class Label(str, Enum):
    """Bead colours in the urn.

    - BLUE: the label whose proportion is the parameter p (coded 1)
    - RED: everything else (coded 0)
    """

    BLUE = "blue"
    RED = "red"

    @property
    def code(self) -> int:
        return 1 if self is Label.BLUE else 0

    @classmethod
    def from_code(cls, code: int) -> "Label":
        return cls.BLUE if code else cls.RED


# Label members, "blue"/"red" strings, or 1/0 codes.
LabelLike = Union[Label, str, int, bool]
