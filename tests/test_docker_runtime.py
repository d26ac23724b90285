# tests/test_docker_runtime.py
import pytest
from unittest.mock import MagicMock, patch
from docker.errors import APIError, DockerException, NotFound
from requests.exceptions import ConnectionError as RequestsConnectionError

from porthole.core.config import Settings
from porthole.domain.errors import ContainerListError, RuntimeUnavailableError, StatsUnavailableError
from porthole.services.docker_runtime import DockerSDKRuntime


@pytest.mark.asyncio
async def test_connect_uses_defaults_and_pings():
    docker_client = MagicMock()
    with patch("porthole.services.docker_runtime.from_env", return_value=docker_client) as from_env:
        runtime = await DockerSDKRuntime.connect(Settings())

    from_env.assert_called_once_with(timeout=60)
    docker_client.ping.assert_called_once()
    assert runtime.docker_client is docker_client


@pytest.mark.asyncio
async def test_connect_failure_is_runtime_unavailable():
    with patch(
        "porthole.services.docker_runtime.from_env",
        side_effect=DockerException("Error while fetching server API version"),
    ):
        with pytest.raises(RuntimeUnavailableError):
            await DockerSDKRuntime.connect(Settings())


@pytest.mark.asyncio
async def test_ping_failure_is_runtime_unavailable():
    docker_client = MagicMock()
    docker_client.ping.side_effect = RequestsConnectionError("socket missing")
    with patch("porthole.services.docker_runtime.from_env", return_value=docker_client):
        with pytest.raises(RuntimeUnavailableError):
            await DockerSDKRuntime.connect(Settings())


@pytest.mark.asyncio
async def test_list_containers_keeps_runtime_order():
    docker_client = MagicMock()
    docker_client.api.containers.return_value = [
        {"Id": "bbb", "Names": ["/db"], "Image": "postgres:16", "State": "running"},
        {"Id": "aaa", "Names": ["/web"], "Image": "nginx:latest", "State": "running"},
    ]
    runtime = DockerSDKRuntime(docker_client)

    containers = await runtime.list_containers(show_all=True, filters={"status": ["running"]})

    assert [c.id for c in containers] == ["bbb", "aaa"]
    assert containers[1].names == ["/web"]
    assert containers[1].image == "nginx:latest"
    docker_client.api.containers.assert_called_once_with(
        all=True, filters={"status": ["running"]}
    )


@pytest.mark.asyncio
async def test_list_containers_failure_is_list_error():
    docker_client = MagicMock()
    docker_client.api.containers.side_effect = APIError("500 Server Error")
    runtime = DockerSDKRuntime(docker_client)

    with pytest.raises(ContainerListError):
        await runtime.list_containers(show_all=True, filters={"status": ["running"]})


@pytest.mark.asyncio
async def test_stats_requests_single_sample():
    docker_client = MagicMock()
    docker_client.api.stats.return_value = {"cpu_stats": {}}
    runtime = DockerSDKRuntime(docker_client)

    samples = list(await runtime.stats("abc123", stream=False))

    assert samples == [{"cpu_stats": {}}]
    docker_client.api.stats.assert_called_once_with("abc123", stream=False, decode=False)


@pytest.mark.asyncio
async def test_stats_empty_answer_yields_nothing():
    docker_client = MagicMock()
    docker_client.api.stats.return_value = {}
    runtime = DockerSDKRuntime(docker_client)

    assert list(await runtime.stats("abc123")) == []


@pytest.mark.asyncio
async def test_stats_failure_is_stats_unavailable():
    docker_client = MagicMock()
    docker_client.api.stats.side_effect = NotFound("No such container: abc123")
    runtime = DockerSDKRuntime(docker_client)

    with pytest.raises(StatsUnavailableError):
        await runtime.stats("abc123")


@pytest.mark.asyncio
async def test_close_releases_client():
    docker_client = MagicMock()
    runtime = DockerSDKRuntime(docker_client)

    await runtime.close()

    docker_client.close.assert_called_once()
