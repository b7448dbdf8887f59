"""Look up a configured service by name."""

from ..config.StarterConfig import StarterConfig
from .ServerStarterService import ServerStarterService
from .ServiceNotFoundError import ServiceNotFoundError


def get_service(name: str, config: StarterConfig | None = None) -> ServerStarterService:
    """Build the controller for service ``name``.

    Args:
        name: Service full name (key under ``services`` in the config file)
        config: Loaded configuration; loaded from the config file if None

    Raises:
        ServiceNotFoundError: If no service with that name is configured
        ValueError: If the config file is missing or invalid
    """
    if config is None:
        config = StarterConfig.load()
    service_config = config.services.get(name)
    if service_config is None:
        raise ServiceNotFoundError(name, sorted(config.services))
    return ServerStarterService(service_config, name, helper_bin=config.helper.bin)
