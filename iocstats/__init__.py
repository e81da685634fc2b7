"""Process and host statistics: CPU load, memory, file descriptors and host details."""

__version__ = "1.0.0"