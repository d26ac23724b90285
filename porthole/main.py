import asyncio
import sys
from typing import TextIO

from porthole.core.config import Settings
from porthole.core.console import debug, fatal
from porthole.domain.errors import PortholeError
from porthole.services.docker_runtime import DockerSDKRuntime
from porthole.services.snapshot_service import SnapshotService


async def run(settings: Settings, out: TextIO | None = None) -> int:
    docker_runtime = await DockerSDKRuntime.connect(settings)
    debug(settings, "connected to Docker")
    try:
        service = SnapshotService(docker_runtime, settings)
        return await service.run(out)
    finally:
        await docker_runtime.close()


def main() -> None:
    settings = Settings()
    try:
        reported = asyncio.run(run(settings))
    except PortholeError as e:
        fatal(str(e))
        sys.exit(1)
    debug(settings, f"reported {reported} container(s)")
