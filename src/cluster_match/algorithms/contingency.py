"""
Contingency tables between two clusterings.

A table of shape (size1 + 1, size2 + 1): co-occurrence counts in the top-left
block, column marginals in the last row, row marginals in the last column and
the total element count in the corner.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple
import numpy as np


def _encode_labels(
    labels: np.ndarray, noise_label: Optional[Any]
) -> Tuple[np.ndarray, int]:
    """Map labels to dense cluster ids; noise elements become singletons."""
    if noise_label is None:
        _, ids = np.unique(labels, return_inverse=True)
        return ids.reshape(-1), int(ids.max()) + 1 if ids.size else 0

    noise = labels == noise_label
    ids = np.empty(labels.shape[0], dtype=np.intp)
    n_regular = 0
    if (~noise).any():
        _, regular = np.unique(labels[~noise], return_inverse=True)
        ids[~noise] = regular.reshape(-1)
        n_regular = int(regular.max()) + 1
    n_noise = int(noise.sum())
    ids[noise] = n_regular + np.arange(n_noise)
    return ids, n_regular + n_noise


class ContingencyTable:
    """
    Read-only cross-tabulation of two clusterings with marginals.

    Construct from a full table (validated), from a bare count matrix with
    ``from_counts`` or from two label vectors with ``from_labels``.
    """

    def __init__(self, table):
        """
        Validate and freeze a full contingency table.

        Args:
            table: Integer matrix of shape (size1 + 1, size2 + 1) whose last
                row/column hold the marginals and whose corner holds the total

        Raises:
            ValueError: If the shape, the counts or the marginals are invalid
        """
        T = np.array(table)
        if T.ndim != 2 or T.shape[0] < 1 or T.shape[1] < 1:
            raise ValueError(
                f"contingency table must be 2-D with a marginal row and "
                f"column, got shape {T.shape}"
            )
        if T.size and not np.issubdtype(T.dtype, np.integer):
            if not np.all(np.isfinite(T)) or not np.array_equal(T, np.round(T)):
                raise ValueError("contingency table must contain integer counts")
        T = T.astype(np.int64)
        if (T < 0).any():
            raise ValueError("contingency table counts must be non-negative")

        counts = T[:-1, :-1]
        if not np.array_equal(T[:-1, -1], counts.sum(axis=1)):
            raise ValueError("row marginals do not match the row sums")
        if not np.array_equal(T[-1, :-1], counts.sum(axis=0)):
            raise ValueError("column marginals do not match the column sums")
        if T[-1, -1] != counts.sum():
            raise ValueError(
                f"total {T[-1, -1]} does not match the sum of counts "
                f"{counts.sum()}"
            )

        T.setflags(write=False)
        self._table = T

    @classmethod
    def from_counts(cls, counts) -> "ContingencyTable":
        """Build a table from a (size1, size2) count matrix, adding marginals."""
        C = np.asarray(counts)
        if C.ndim != 2:
            raise ValueError(f"counts must be 2-D, got shape {C.shape}")
        size1, size2 = C.shape
        T = np.zeros((size1 + 1, size2 + 1), dtype=C.dtype)
        T[:size1, :size2] = C
        T[:size1, size2] = C.sum(axis=1)
        T[size1, :size2] = C.sum(axis=0)
        T[size1, size2] = C.sum()
        return cls(T)

    @classmethod
    def from_labels(
        cls,
        labels_a,
        labels_b,
        *,
        noise_label: Optional[Any] = None,
    ) -> "ContingencyTable":
        """
        Cross-tabulate two clusterings of the same elements.

        Clusters are ordered by their sorted label value. When *noise_label*
        is given, every element carrying it is put in a singleton cluster of
        its own (in whichever clustering it is noise), so noise never counts
        as one big agreeing cluster.

        Args:
            labels_a: Cluster labels of the first clustering (rows)
            labels_b: Cluster labels of the second clustering (columns)
            noise_label: Optional label marking noise elements

        Returns:
            ContingencyTable of shape (size1 + 1, size2 + 1)

        Raises:
            ValueError: If the label vectors differ in length or are not 1-D
        """
        a = np.asarray(labels_a)
        b = np.asarray(labels_b)
        if a.ndim != 1 or b.ndim != 1:
            raise ValueError("labels must be 1-D arrays")
        if a.shape[0] != b.shape[0]:
            raise ValueError(
                f"label vectors differ in length: {a.shape[0]} != {b.shape[0]}"
            )

        ids_a, size1 = _encode_labels(a, noise_label)
        ids_b, size2 = _encode_labels(b, noise_label)
        counts = np.zeros((size1, size2), dtype=np.int64)
        np.add.at(counts, (ids_a, ids_b), 1)
        return cls.from_counts(counts)

    @property
    def table(self) -> np.ndarray:
        """Full read-only table including marginals."""
        return self._table

    @property
    def size1(self) -> int:
        return self._table.shape[0] - 1

    @property
    def size2(self) -> int:
        return self._table.shape[1] - 1

    @property
    def counts(self) -> np.ndarray:
        return self._table[:-1, :-1]

    @property
    def row_totals(self) -> np.ndarray:
        """Cluster sizes of the first clustering."""
        return self._table[:-1, -1]

    @property
    def col_totals(self) -> np.ndarray:
        """Cluster sizes of the second clustering."""
        return self._table[-1, :-1]

    @property
    def total(self) -> int:
        return int(self._table[-1, -1])

    def transposed(self) -> "ContingencyTable":
        """The same table with the two clusterings swapped."""
        return ContingencyTable(self._table.T)

    def __eq__(self, other):
        if not isinstance(other, ContingencyTable):
            return NotImplemented
        return np.array_equal(self._table, other._table)

    def __hash__(self):
        return hash((self._table.shape, self._table.tobytes()))

    def __repr__(self):
        return (
            f"ContingencyTable(size1={self.size1}, size2={self.size2}, "
            f"total={self.total})"
        )
