#!/usr/bin/env python3
"""
YAPI MCP Entrypoint

Dispatches to the appropriate mode based on command line argument.

Modes:
  serve        - Run the MCP server on stdio (default)
  init-config  - Write a default ~/.yapi-mcp/config.yaml if none exists
"""

import sys


def main():
    mode = sys.argv[1] if len(sys.argv) > 1 else "serve"

    if mode == "serve":
        from yapi_mcp.server import main as server_main
        server_main()

    elif mode == "init-config":
        from yapi_mcp.configs import create_default_config, get_config_path

        if create_default_config():
            print(f"Created {get_config_path()}", file=sys.stderr)
        else:
            print(f"Config already exists: {get_config_path()}", file=sys.stderr)

    else:
        print(f"Unknown mode: {mode}", file=sys.stderr)
        print("Usage: entrypoint.py [serve|init-config]", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
