"""Job-specific domain helpers."""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, runtime_checkable

from prodfloor.db import Job


class JobSource(Protocol):
    """Read-only capability yielding jobs in a stable source order.

    May return any iterable, including a one-shot iterator.
    """

    def jobs(self) -> Iterable[Job]: ...


@runtime_checkable
class JobLookup(Protocol):
    """Optional direct lookup a source may offer alongside ``jobs()``."""

    def get_by_id(self, job_id: int) -> Optional[Job]: ...


@dataclass(frozen=True, slots=True)
class PagingInfo:
    current_page: int
    items_per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_items // self.items_per_page)


@dataclass(slots=True)
class JobsListView:
    """One page of jobs plus where that page sits in the filtered set."""

    jobs: list[Job]
    paging_info: PagingInfo
    current_category: Optional[str] = None
