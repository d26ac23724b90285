import asyncio
from typing import Iterator, List

from docker import DockerClient, from_env
from docker.errors import DockerException
from pydantic import ValidationError
from requests.exceptions import RequestException

from porthole.core.config import Settings
from porthole.domain.errors import (
    ContainerListError,
    RuntimeUnavailableError,
    StatsUnavailableError,
)
from porthole.domain.ports import ContainerRuntime
from porthole.schemas.stats import ContainerSummary


class DockerSDKRuntime(ContainerRuntime):
    def __init__(self, docker_client: DockerClient):
        self.docker_client = docker_client

    @classmethod
    async def connect(cls, settings: Settings) -> "DockerSDKRuntime":
        """Open the default local control socket and make sure the daemon answers."""
        try:
            docker_client = await asyncio.to_thread(from_env, timeout=settings.DOCKER_TIMEOUT)
            await asyncio.to_thread(docker_client.ping)
        except (DockerException, RequestException) as e:
            raise RuntimeUnavailableError(f"Cannot connect to Docker: {e}") from e
        return cls(docker_client)

    async def close(self) -> None:
        await asyncio.to_thread(self.docker_client.close)

    # -------------------------------
    # Containers
    # -------------------------------
    async def list_containers(
        self,
        *,
        show_all: bool,
        filters: dict[str, list[str]],
    ) -> List[ContainerSummary]:
        try:
            rows = await asyncio.to_thread(
                self.docker_client.api.containers,
                all=show_all,
                filters=filters,
            )
            return [ContainerSummary.model_validate(row) for row in rows]
        except (DockerException, RequestException, ValidationError) as e:
            raise ContainerListError(f"Docker list failed: {e}") from e

    # -------------------------------
    # Stats
    # -------------------------------
    async def stats(self, docker_id: str, *, stream: bool = False) -> Iterator[dict]:
        """
        Request stats for a container.
        With stream=False the engine answers with one sample, so the iterator holds at most one item.
        """
        try:
            result = await asyncio.to_thread(
                self.docker_client.api.stats,
                docker_id,
                stream=stream,
                decode=stream,
            )
        except (DockerException, RequestException) as e:
            raise StatsUnavailableError(f"Docker stats failed for {docker_id}: {e}") from e

        if stream:
            return result
        return iter([result] if result else [])
