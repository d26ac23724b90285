from typing import Iterator, List, Protocol

from porthole.schemas.stats import ContainerSummary


class ContainerRuntime(Protocol):
    # -------------------------------
    # Containers
    # -------------------------------
    async def list_containers(
        self,
        *,
        show_all: bool,
        filters: dict[str, list[str]],
    ) -> List[ContainerSummary]:
        """List containers in the order the runtime returns them."""
        ...

    # -------------------------------
    # Stats
    # -------------------------------
    async def stats(self, docker_id: str, *, stream: bool = False) -> Iterator[dict]:
        """Request stats for a container. Yields raw payloads."""
        ...

    async def close(self) -> None:
        """Release the connection to the runtime."""
        ...
