"""
Pattern Container
=================

A pattern is a named numeric feature vector. Filters never build or destroy
patterns; they read the vector through ``get_vector``, replace it wholesale
through ``set_vector`` and duplicate patterns through ``clone``. Any object
offering these three methods can be filtered (see :class:`PatternLike`).
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

__all__ = ["PatternLike", "Pattern"]


@runtime_checkable
class PatternLike(Protocol):
    """Contract the filters rely on."""

    def get_vector(self) -> np.ndarray: ...

    def set_vector(self, vector: Sequence[float]) -> None: ...

    def clone(self) -> "PatternLike": ...


class Pattern:
    r"""
    Mutable container for a one-dimensional ``float64`` feature vector.

    :param vector: Feature values (list, tuple, ``np.ndarray`` or 1-D ``torch.Tensor``).
    :param Optional[str] name: Optional label of the pattern (class, sample id, ...).
    """

    def __init__(self, vector: Sequence[float], name: Optional[str] = None):
        self.name = name
        self.set_vector(vector)

    def get_vector(self) -> np.ndarray:
        """Return the current vector (not a defensive copy)."""
        return self._vector

    def set_vector(self, vector: Sequence[float]) -> None:
        """Replace the vector wholesale."""
        if hasattr(vector, "detach"):
            vector = vector.detach().cpu().numpy()
        array = np.array(vector, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError(f"Pattern vector must be one-dimensional, got shape {array.shape}.")
        self._vector = array

    def clone(self) -> "Pattern":
        """Deep copy: new vector storage with the same values."""
        return Pattern(self._vector.copy(), name=self.name)

    def __len__(self) -> int:
        return self._vector.shape[0]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.name == other.name and np.array_equal(self._vector, other._vector)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pattern(name={self.name!r}, vector={self._vector.tolist()!r})"
