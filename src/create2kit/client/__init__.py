from .chain import ChainClient, DeploymentResult
from .config import ClientConfig

__all__ = ["ChainClient", "ClientConfig", "DeploymentResult"]
