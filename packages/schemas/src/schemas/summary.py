"""Run summary model."""

from typing import Dict
from pydantic import BaseModel, Field

from schemas.config import RunMode


class RunSummary(BaseModel):
    """Outcome of one updater run."""

    mode: RunMode = Field(..., description="Mode the run executed in")
    status: str = Field(
        default="success",
        description="success, write_failed, uninstall_failed or restore_failed",
    )
    output_path: str = Field(..., description="Hosts file that was written")
    blocked: int = Field(default=0, description="Lines starting with the sentinel")
    sources: Dict[str, int] = Field(
        default_factory=dict, description="Source count per category"
    )
    domains: Dict[str, int] = Field(
        default_factory=dict, description="Unique domain count per category"
    )
    sources_failed: int = Field(default=0, description="Downloads that failed")
