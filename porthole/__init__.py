"""One-shot CPU and memory snapshot of running Docker containers."""

__version__ = "0.1.0"
