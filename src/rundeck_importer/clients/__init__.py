from .rundeck import RundeckClient

__all__ = ["RundeckClient"]
