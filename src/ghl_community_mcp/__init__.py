"""
ghl_community_mcp exposes the GoHighLevel communities REST API (posts, pins
and channels) as Model Context Protocol tools, so an agent can read and manage
community content without speaking HTTP.
"""

__version__ = "1.0.0"
