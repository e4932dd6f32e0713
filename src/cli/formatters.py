"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON output for scripting
- plain text listings of demonstrations and their output
"""

import json
from typing import Any, Dict, List


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "text":
        return format_text_output(data)
    return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "demos" in data:
        return format_demo_list(data["demos"])
    elif isinstance(data, dict) and "results" in data:
        return format_demo_results(data["results"])
    elif isinstance(data, dict) and "error" in data:
        return f"Error: {data['message']}"
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_demo_list(demos: List[Dict[str, Any]]) -> str:
    if not demos:
        return "No demonstrations registered."
    width = max(len(item["name"]) for item in demos)
    return "\n".join(f"{item['name']:<{width}}  {item['title']}: {item['idiom']}" for item in demos)


def format_demo_results(results: List[Dict[str, Any]]) -> str:
    blocks = []
    for result in results:
        lines = [f"== {result['title']} =="]
        lines.extend(result["lines"])
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
