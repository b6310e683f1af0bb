from .settings import MapLimits, Settings

__all__ = ["MapLimits", "Settings"]
