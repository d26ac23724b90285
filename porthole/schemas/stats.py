from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from typing import List, Optional


class ContainerSummary(BaseModel):
    """One row of the Docker list-containers response."""

    id: str = Field(..., alias="Id")
    names: Optional[List[str]] = Field(None, alias="Names")
    image: Optional[str] = Field(None, alias="Image")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CpuUsagePayload(BaseModel):
    percpu_usage: Optional[List[NonNegativeInt]] = None
    usage_in_usermode: NonNegativeInt
    total_usage: NonNegativeInt
    usage_in_kernelmode: NonNegativeInt


class CpuStatsPayload(BaseModel):
    cpu_usage: CpuUsagePayload
    system_cpu_usage: Optional[NonNegativeInt] = None
    online_cpus: Optional[NonNegativeInt] = None


class MemoryStatsPayload(BaseModel):
    max_usage: Optional[NonNegativeInt] = None
    usage: Optional[NonNegativeInt] = None
    limit: Optional[NonNegativeInt] = None


class StatsPayload(BaseModel):
    """
    A single sample from the container stats endpoint.
    Only the CPU and memory sections are kept; precpu_stats, networks, blkio etc. are dropped.
    """

    cpu_stats: CpuStatsPayload
    memory_stats: MemoryStatsPayload

    model_config = ConfigDict(extra="ignore")
