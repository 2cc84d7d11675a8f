from .config_server import ConfigServer
from .model import Model

__all__ = ["ConfigServer", "Model"]
