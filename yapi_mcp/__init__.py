"""
YAPI MCP Service

Exposes a YAPI interface registry to MCP clients over stdio.
"""

__version__ = "0.1.0"
