from .base import UpdateServiceClient, UpdateServiceError
from .windows_update import WindowsUpdateClient

__all__ = ["UpdateServiceClient", "UpdateServiceError", "WindowsUpdateClient"]
