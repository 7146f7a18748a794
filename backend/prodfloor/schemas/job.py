"""Job schemas."""

from typing import Optional

from pydantic import BaseModel


class JobResponse(BaseModel):
    """Job response schema."""

    id: int
    name: str
    job_type: Optional[str] = None

    model_config = {"from_attributes": True}


class PagingInfoResponse(BaseModel):
    """Paging metadata for a job listing."""

    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int

    model_config = {"from_attributes": True}


class JobsListResponse(BaseModel):
    """A page of jobs with its paging metadata."""

    jobs: list[JobResponse]
    paging_info: PagingInfoResponse
    current_category: Optional[str] = None

    model_config = {"from_attributes": True}
