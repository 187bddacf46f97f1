from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IndexDescription:
    """Metadata and coverage statistics for one index over a dataset.

    Every field is optional; ``None`` means unknown or not applicable.
    ``distance_type`` is only set for vector indices.
    """

    distance_type: str | None = None
    index_type: str | None = None
    num_indexed_rows: int | None = None
    num_unindexed_rows: int | None = None

    @classmethod
    def builder(cls) -> IndexDescriptionBuilder:
        return IndexDescriptionBuilder()


class IndexDescriptionBuilder:
    def __init__(self) -> None:
        self._distance_type: str | None = None
        self._index_type: str | None = None
        self._num_indexed_rows: int | None = None
        self._num_unindexed_rows: int | None = None

    def distance_type(self, value: str | None) -> IndexDescriptionBuilder:
        self._distance_type = value
        return self

    def index_type(self, value: str | None) -> IndexDescriptionBuilder:
        self._index_type = value
        return self

    def num_indexed_rows(self, value: int | None) -> IndexDescriptionBuilder:
        self._num_indexed_rows = value
        return self

    def num_unindexed_rows(self, value: int | None) -> IndexDescriptionBuilder:
        self._num_unindexed_rows = value
        return self

    def build(self) -> IndexDescription:
        return IndexDescription(
            distance_type=self._distance_type,
            index_type=self._index_type,
            num_indexed_rows=self._num_indexed_rows,
            num_unindexed_rows=self._num_unindexed_rows,
        )
