"""
Tool registry with dispatch table for the host.
"""

from typing import Any

from core.logging import get_logger
from lighthouse_audit.tool import Tool

logger = get_logger(__name__, domain="host")


class ToolRegistry:
    """Registry of tools by name."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool, replacing any tool with the same name."""
        self._tools[tool.schema.name] = tool

    def register_many(self, tools: list[Tool]) -> None:
        for tool in tools:
            self.register(tool)

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def list_schemas(self) -> list[dict[str, Any]]:
        return [tool.schema.to_dict() for tool in self._tools.values()]

    async def dispatch(self, name: str, context: Any, arguments: Any) -> Any:
        """
        Dispatch tool call to its handler.

        Args:
            name: Tool name
            context: Host execution context
            arguments: Raw tool arguments

        Returns:
            Handler response

        Raises:
            KeyError: If tool not found
        """
        tool = self._tools.get(name)
        if tool is None:
            raise KeyError(f"Unknown tool: {name}")

        logger.info(f"Dispatching {name}")
        return await tool.handle(context, arguments)
