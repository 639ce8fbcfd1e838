"""Brave Search video tool for agent runtimes."""

from video_search.agents.toolkit import VideoSearchTool
from video_search.server import ToolServer

__all__ = ["ToolServer", "VideoSearchTool"]
