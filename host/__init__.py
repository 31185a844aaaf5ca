"""Host adapters: Playwright execution context and tool registry"""
from host.context import ContextOptions, LaunchOptions, PlaywrightContext, Tab, default_launch_options
from host.registry import ToolRegistry

__all__ = [
    "ContextOptions",
    "LaunchOptions",
    "PlaywrightContext",
    "Tab",
    "ToolRegistry",
    "default_launch_options",
]
