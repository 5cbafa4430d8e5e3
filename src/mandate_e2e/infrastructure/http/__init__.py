from .http_client import GatewayHttpClient

__all__ = ["GatewayHttpClient"]
