from .server import create_server
from .tools import GEO_TOOLS, register_geo_tools

__all__ = ["GEO_TOOLS", "create_server", "register_geo_tools"]
