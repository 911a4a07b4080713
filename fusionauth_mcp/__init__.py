"""
FusionAuth MCP Gateway.

Exposes FusionAuth user and application management as MCP tools and a REST
API, on top of the official FusionAuth Python client.
"""

__version__ = "0.1.0"
