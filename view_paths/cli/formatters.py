"""
CLI formatting functions for human-readable output.

Tables are rendered with rich and captured to strings so commands can
return their output instead of printing it.
"""
import json
from typing import Any, Dict, Iterable, List, Mapping, Sequence

import yaml
from rich.console import Console
from rich.table import Table

CONFIG_HEADERS = ["Cache Enabled", "Cache Duration", "Cache Key", "Is Cached"]


def format_output(data: Any, format_type: str) -> str:
    """Format structured data as JSON or YAML."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return json.dumps(data, indent=2, default=str)


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def render_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Render a rich table to a string."""
    table = Table(show_header=True, header_style="bold magenta")
    for header in headers:
        table.add_column(header, style="cyan" if header == "Namespace" else None)
    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_config_table(cache_info: Mapping[str, Any]) -> str:
    config = cache_info["config"]
    return render_table(
        CONFIG_HEADERS,
        [[yes_no(config["enabled"]), config["duration"], config["key"], yes_no(config["is_cached"])]],
    )


def format_paths_table(paths: Sequence[str]) -> str:
    return render_table(["Path"], [[path] for path in paths])


def format_namespaced_paths_table(namespaced_paths: Mapping[str, str]) -> str:
    return render_table(["Namespace", "Path"], list(namespaced_paths.items()))


def _paths_section(paths: Mapping[str, Any], empty_suffix: str, always_report: bool) -> List[str]:
    """Regular and namespaced path tables, with a message for each empty group."""
    lines: List[str] = []
    regular = paths.get("paths") or []
    namespaced = paths.get("namespaced_paths") or {}

    if regular:
        lines += ["Regular view paths:", format_paths_table(regular)]
    elif always_report:
        lines.append(f"No regular view paths {empty_suffix}.")

    if namespaced:
        lines += ["Namespaced view paths:", format_namespaced_paths_table(namespaced)]
    elif always_report:
        lines.append(f"No namespaced view paths {empty_suffix}.")

    return lines


def format_cache_result(cache_info: Dict[str, Any]) -> str:
    """Output of the ``cache`` command."""
    lines = [
        "Warming view paths cache...",
        "View paths cache has been warmed successfully.",
        format_config_table(cache_info),
    ]
    lines += _paths_section(cache_info["paths"], "in cache", always_report=False)
    return "\n".join(lines)


def format_clear_result(cleared: bool) -> str:
    """Output of the ``clear`` command."""
    if cleared:
        message = "View paths cache has been cleared successfully."
    else:
        message = "No view paths cache found or cache is disabled."
    return "\n".join(["Clearing view paths cache...", message])


def format_list_result(cache_info: Dict[str, Any], configured: Dict[str, Any]) -> str:
    """Output of the ``list`` command; configured paths are shown when nothing is cached."""
    lines = ["View Paths Configuration:", format_config_table(cache_info), "Cached Paths:"]
    lines += _paths_section(cache_info["paths"], "in cache", always_report=True)

    if not cache_info["config"]["is_cached"]:
        lines.append("Configured paths (not cached):")
        lines += _paths_section(configured, "configured", always_report=True)

    return "\n".join(lines)
