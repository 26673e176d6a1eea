# vidmeta/services/extract/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ItemProcessingError(RuntimeError):
    """A single pipeline item failed and the run was not set to continue."""
    message: str
    item_index: Optional[int] = None

    def __str__(self) -> str:
        if self.item_index is None:
            return self.message
        return f"{self.message} [item {self.item_index}]"


@dataclass(eq=False)
class MissingPayloadError(RuntimeError):
    """The item carries no payload under the requested binary/url property."""
    message: str
    property_name: Optional[str] = None

    def __str__(self) -> str:
        return self.message
