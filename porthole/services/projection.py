from porthole.domain.stats import ContainerSnapshot, CpuStats, MemoryStats
from porthole.schemas.stats import ContainerSummary, StatsPayload


def _as_tuple(values):
    return tuple(values) if values is not None else None


def project_snapshot(summary: ContainerSummary, payload: StatsPayload) -> ContainerSnapshot:
    """Combine a listing row with one stats sample. Missing metrics stay None."""
    cpu_usage = payload.cpu_stats.cpu_usage
    cpu = CpuStats(
        per_cpu_usage=_as_tuple(cpu_usage.percpu_usage),
        usage_in_usermode=cpu_usage.usage_in_usermode,
        total_usage=cpu_usage.total_usage,
        usage_in_kernelmode=cpu_usage.usage_in_kernelmode,
        system_cpu_usage=payload.cpu_stats.system_cpu_usage,
        online_cpus=payload.cpu_stats.online_cpus,
    )
    memory = MemoryStats(
        max_usage=payload.memory_stats.max_usage,
        usage=payload.memory_stats.usage,
        limit=payload.memory_stats.limit,
    )
    return ContainerSnapshot(
        id=summary.id,
        names=_as_tuple(summary.names),
        image=summary.image,
        cpu=cpu,
        memory=memory,
    )
