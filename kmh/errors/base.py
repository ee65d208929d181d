"""Root exception for the probe."""


class ProbeError(Exception):
    """Base class for all probe failures."""


__all__ = ["ProbeError"]
