#!/usr/bin/env python3

"""
Main entry point for the ghl_community_mcp package.

This module allows the package to be executed directly with:
python -m ghl_community_mcp
"""

import sys

from ghl_community_mcp.cli.mcp_cli import main

if __name__ == "__main__":
    sys.exit(main())
