from .rundeck_client import RundeckClient, build_async_client, AUTH_TOKEN_HEADER

__all__ = [
    "RundeckClient",
    "build_async_client",
    "AUTH_TOKEN_HEADER",
]
