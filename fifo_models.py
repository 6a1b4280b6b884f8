from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

U = TypeVar("U")


@dataclass(frozen=True)
class Stop(Generic[U]):
    """
    for_each のコールバックが返す「ここで終了」の印
    value が None でも終了として扱う
    """
    value: U
