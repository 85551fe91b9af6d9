#!/usr/bin/env python3
"""
Entry point for running the D&D 5e MCP server package directly.
This allows the package to be executed as: python -m dnd5e_mcp
"""

from . import main

if __name__ == "__main__":
    main()
