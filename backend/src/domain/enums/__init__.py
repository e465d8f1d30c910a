"""Domain Enums - Constant values used across the domain."""

from .industry import Industry
from .application_status import ApplicationStatus
from .network_role import NetworkRole

__all__ = ["Industry", "ApplicationStatus", "NetworkRole"]
