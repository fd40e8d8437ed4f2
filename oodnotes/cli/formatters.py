"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for example listings and traces
- Plain list formatting for detailed views
"""
import io
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    elif isinstance(data, dict) and "result" in data:
        return format_trace_table(data["result"])
    elif isinstance(data, dict) and "example" in data:
        return format_examples_table([data["example"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_list(data["examples"])
    elif isinstance(data, dict) and "result" in data:
        result = data["result"]
        header = f"{result['name']} ({result['category']})"
        return "\n".join([header] + [f"  {line}" for line in result["trace"]])
    elif isinstance(data, dict) and "example" in data:
        return format_examples_list([data["example"]])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, force_terminal=False, color_system=None)
    console.print(table)
    return buffer.getvalue().rstrip("\n")


def format_examples_table(examples: List[Dict[str, Any]]) -> str:
    """Format examples as a table using Rich."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Summary")
    for example in examples:
        table.add_row(example["name"], example["category"], example.get("summary", ""))
    return _render(table)


def format_trace_table(result: Dict[str, Any]) -> str:
    """Format a demo trace as a numbered table."""
    table = Table(title=f"{result['name']} ({result['category']})", show_header=True)
    table.add_column("#", justify="right", style="yellow")
    table.add_column("Trace")
    for index, line in enumerate(result["trace"], start=1):
        table.add_row(str(index), line)
    return _render(table)


def format_examples_list(examples: List[Dict[str, Any]]) -> str:
    """Format examples as a detailed list."""
    if not examples:
        return "No examples found."

    lines = []
    for example in examples:
        lines.append(f"Name: {example['name']}")
        lines.append(f"  Category: {example['category']}")
        lines.append(f"  Summary: {example.get('summary', '')}")
        if example.get("details"):
            lines.append(f"  Details: {example['details']}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")
