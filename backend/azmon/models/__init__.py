"""Domain enumerations."""
from azmon.models.service import ServiceType, Endpoint, CLOUD_ENDPOINTS

__all__ = ["ServiceType", "Endpoint", "CLOUD_ENDPOINTS"]
