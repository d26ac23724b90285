class PortholeError(RuntimeError):
    """Base class for everything porthole raises on purpose."""


class RuntimeUnavailableError(PortholeError):
    """The Docker control socket could not be reached."""


class ContainerListError(PortholeError):
    """The list-containers request failed."""


class NoRunningContainersError(PortholeError):
    """The runtime reported no running containers."""


class StatsUnavailableError(PortholeError):
    """A single container's stats sample could not be obtained."""
