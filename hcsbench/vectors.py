"""Vectors in N-dimensional space, held in main memory or on a GPU."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from hcsbench.devices import is_cuda_supported

_CUDA_NOT_SUPPORTED = "CUDA not supported!"


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Vector(ABC):
    """A vector of numbers with a fixed number of elements."""

    @abstractmethod
    def init_by_val(self, value) -> None:
        """Set every element to ``value``."""

    @abstractmethod
    def describe(self) -> str:
        """Text listing of the elements."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements."""


class VectorRam(Vector):
    """A vector stored in main memory."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        self.data: list = [0.0] * size

    @property
    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def init_by_val(self, value) -> None:
        self.data = [value] * len(self.data)

    def describe(self) -> str:
        return "".join(f"{_format_value(value)} " for value in self.data)


class VectorGpu(Vector):
    """A vector stored in GPU memory.

    Creating one needs a CUDA device; without one every operation raises
    ``RuntimeError``.
    """

    def __init__(self, source: int | VectorRam) -> None:
        if not is_cuda_supported():
            raise RuntimeError(_CUDA_NOT_SUPPORTED)
        if isinstance(source, VectorRam):
            size = len(source)
            initial = list(source.data)
        else:
            size = source
            initial = None
        if size == 0:
            raise ValueError("Cannot initialize vector of _size = 0")
        self._size = size
        self.data: list | None = initial if initial is not None else [0.0] * size
        self._is_initialized = initial is not None

    def __len__(self) -> int:
        return self._size

    def check_state(self) -> bool:
        """Whether the vector holds initialized device data."""
        return self._is_initialized and self._size >= 1 and self.data is not None

    def clear(self) -> None:
        """Release the device memory."""
        self._require_cuda()
        if self.data is not None:
            self.data = None
            self._is_initialized = False

    def init_by_val(self, value) -> None:
        self._require_cuda()
        self.data = [value] * self._size
        self._is_initialized = True

    def init_by_range(self, start: float, end: float) -> None:
        """Fill with evenly spaced numbers from ``start`` to ``end``."""
        self._require_cuda()
        if self._size == 1:
            self.data = [start]
        else:
            step = (end - start) / (self._size - 1)
            self.data = [start + i * step for i in range(self._size)]
        self._is_initialized = True

    def describe(self) -> str:
        self._require_cuda()
        if self.data is None:
            return ""
        return "".join(f"{_format_value(value)} " for value in self.data)

    @staticmethod
    def _require_cuda() -> None:
        if not is_cuda_supported():
            raise RuntimeError(_CUDA_NOT_SUPPORTED)