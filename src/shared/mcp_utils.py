"""Loaders for the text files shipped beside an MCP server package."""

from pathlib import Path
from typing import Any

import yaml

INSTRUCTIONS_FILE = "instructions.md"
TOOLS_FILE = "tools.yaml"


def _stripped(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def load_instructions(directory: Path) -> str:
    """Server instructions sent to clients during initialize."""
    return (directory / INSTRUCTIONS_FILE).read_text(encoding="utf-8").strip()


def load_tool_descriptions(directory: Path) -> dict[str, dict[str, Any]]:
    """
    Load tool and parameter descriptions keyed by tool name.

    Folded and literal YAML block scalars keep a trailing newline, so every
    description string is stripped. A tool entry must be a mapping with a
    `description`; `parameters` is optional and maps argument names to text.

    Raises:
        ValueError: If the file is not a mapping of tool names to entries.
    """
    path = directory / TOOLS_FILE
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must map tool names to descriptions")

    tools: dict[str, dict[str, Any]] = {}
    for name, entry in data.items():
        if not isinstance(entry, dict) or "description" not in entry:
            raise ValueError(f"{path}: tool {name!r} has no description")
        tool = {**entry, "description": _stripped(entry["description"])}
        if "parameters" in entry:
            tool["parameters"] = {
                param: _stripped(text) for param, text in (entry["parameters"] or {}).items()
            }
        tools[name] = tool
    return tools
