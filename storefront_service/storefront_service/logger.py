"""Logger module for the storefront service components."""

from logging_utils.config import get_component_logger

SERVICE_NAME = "storefront-service"


def get_logger(component: str):
    """Return a logger bound to one component of the storefront service."""
    return get_component_logger(SERVICE_NAME, component)
