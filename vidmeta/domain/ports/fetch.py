from __future__ import annotations
from typing import Protocol
from vidmeta.domain.dataclasses.items import BinaryPayload

class RemoteSourcePort(Protocol):
    def fetch(self, url: str) -> BinaryPayload: ...
