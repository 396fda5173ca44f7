# rasterbench/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, TypeAlias, overload

Scalar: TypeAlias = float

# Flat x, y, z, r, g, b records, see rasterbench.buffers.
VertexBuffer: TypeAlias = List[float]
IndexBuffer: TypeAlias = List[int]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    @overload
    def __getitem__(self, index: int) -> Scalar: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index: Any):
        if isinstance(index, int):
            if index == 0:
                return self.x
            if index == 1:
                return self.y
            raise IndexError(index)

        if isinstance(index, slice):
            return tuple(self)[index]

        raise TypeError(
            f"indices must be int or slice, not {type(index).__name__}"
        )
