import sys
from typing import List, TextIO

from porthole.domain.stats import ContainerSnapshot


def format_snapshot(snapshot: ContainerSnapshot) -> List[str]:
    names = list(snapshot.names) if snapshot.names is not None else None
    return [
        f"Container ID: {snapshot.id!r}",
        f"Names: {names!r}",
        f"Image: {snapshot.image!r}",
        f"CPU: {snapshot.cpu!r}",
        f"Memory: {snapshot.memory!r}",
    ]


def report(snapshot: ContainerSnapshot, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for line in format_snapshot(snapshot):
        print(line, file=out)
