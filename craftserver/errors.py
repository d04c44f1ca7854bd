class CraftServerError(Exception):
    """Base error for the craft server."""


class SerializationError(CraftServerError):
    """A record could not be turned into JSON text."""


class HardwareProbeError(CraftServerError):
    """The host did not report a usable core count."""
