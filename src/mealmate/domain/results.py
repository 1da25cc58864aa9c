"""Write results reported back to API callers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InsertResult:
    """Outcome of a single-document insert."""

    inserted_id: str
    acknowledged: bool = True


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a single-document update."""

    matched_count: int
    modified_count: int
    acknowledged: bool = True


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a single-document delete."""

    deleted_count: int
    acknowledged: bool = True
