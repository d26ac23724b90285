from typing import AsyncIterator, List, Optional, TextIO

from pydantic import ValidationError

from porthole.core.config import Settings
from porthole.core.console import debug
from porthole.domain.errors import NoRunningContainersError, StatsUnavailableError
from porthole.domain.ports import ContainerRuntime
from porthole.domain.stats import ContainerSnapshot
from porthole.schemas.stats import ContainerSummary, StatsPayload
from porthole.services.projection import project_snapshot
from porthole.services.reporter import report

RUNNING_FILTER = {"status": ["running"]}


class SnapshotService:
    def __init__(self, docker_runtime: ContainerRuntime, settings: Settings | None = None):
        self.docker_runtime = docker_runtime
        self.settings = settings or Settings()

    # -------------------------------
    # Listing
    # -------------------------------
    async def list_running(self) -> List[ContainerSummary]:
        """
        List running containers. An empty result is an error, not an empty report.
        show_all is redundant next to the status filter; the filter decides what comes back.
        """
        containers = await self.docker_runtime.list_containers(
            show_all=True,
            filters=RUNNING_FILTER,
        )
        if not containers:
            raise NoRunningContainersError("No running containers")
        debug(self.settings, f"{len(containers)} running container(s)")
        return containers

    # -------------------------------
    # Sampling
    # -------------------------------
    async def sample(self, summary: ContainerSummary) -> Optional[ContainerSnapshot]:
        """Take one non-streaming stats sample. Returns None if nothing usable came back."""
        try:
            samples = await self.docker_runtime.stats(summary.id, stream=False)
            raw = next(iter(samples), None)
            if raw is None:
                debug(self.settings, f"skipped {summary.id}: empty stats sample")
                return None
            payload = StatsPayload.model_validate(raw)
        except (StatsUnavailableError, ValidationError) as e:
            debug(self.settings, f"skipped {summary.id}: {e}")
            return None
        return project_snapshot(summary, payload)

    async def snapshots(self) -> AsyncIterator[ContainerSnapshot]:
        for summary in await self.list_running():
            snapshot = await self.sample(summary)
            if snapshot is not None:
                yield snapshot

    async def run(self, out: TextIO | None = None) -> int:
        """Print every snapshot and return how many containers were reported."""
        reported = 0
        async for snapshot in self.snapshots():
            report(snapshot, out)
            reported += 1
        return reported
