from dataclasses import dataclass


@dataclass(frozen=True)
class CpuStats:
    # cumulative counters since container start, as sampled
    per_cpu_usage: tuple[int, ...] | None
    usage_in_usermode: int
    total_usage: int
    usage_in_kernelmode: int
    system_cpu_usage: int | None = None
    online_cpus: int | None = None


@dataclass(frozen=True)
class MemoryStats:
    max_usage: int | None = None  # bytes
    usage: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class ContainerSnapshot:
    id: str
    names: tuple[str, ...] | None
    image: str | None
    cpu: CpuStats
    memory: MemoryStats
