"""Raised when a service name is not defined in the configuration."""


class ServiceNotFoundError(KeyError):
    """Unknown service name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown service: {self.name!r} (configured: {self.available})"
