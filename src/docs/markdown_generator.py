"""
Markdown Generator - Renders exploration results as API documentation.

Reads the results and summary files written by an exploration run and
produces one Markdown document with:
- a table of working endpoints
- one section per endpoint with status, schema and a response preview
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.explorer.models import WITH_PARAMS_KEY

logger = logging.getLogger(__name__)


class MarkdownGenerator:
    """Generates Markdown documentation from exploration results"""

    def __init__(self, title: str = "Matter API Documentation", host: str = ""):
        self.title = title
        self.host = host

    def render(
        self,
        results: Dict[str, Any],
        summary: List[Dict[str, Any]],
        generated_at: Optional[datetime] = None,
    ) -> str:
        """
        Render documentation

        Args:
            results: Serialized ResultSet (path -> method -> result)
            summary: Working endpoints as written by the explorer

        Returns:
            Markdown text
        """
        generated_at = generated_at or datetime.now()
        lines = [f"# {self.title}", ""]
        lines.append(f"Generated: {generated_at.isoformat(timespec='seconds')}")
        if self.host:
            lines.append(f"Base URL: `{self.host}`")
        lines.append("")
        lines.append(f"Endpoints tested: {len(results)}  ")
        lines.append(f"Working endpoints: {len(summary)}")
        lines.append("")

        lines.extend(self._render_summary(summary))

        working = {entry["endpoint"] for entry in summary}
        lines.append("## Endpoints")
        lines.append("")
        for path, methods in results.items():
            if path in working:
                lines.extend(self._render_endpoint(path, methods))

        failed = [path for path in results if path not in working]
        if failed:
            lines.append("## Unavailable endpoints")
            lines.append("")
            for path in failed:
                statuses = ", ".join(
                    f"{method} {result.get('status')}"
                    for method, result in results[path].items()
                    if method != WITH_PARAMS_KEY
                )
                lines.append(f"- `{path}` ({statuses})")
            lines.append("")

        return "\n".join(lines)

    def _render_summary(self, summary: List[Dict[str, Any]]) -> List[str]:
        if not summary:
            return ["No working endpoints found.", ""]

        lines = ["## Summary", "", "| Endpoint | Methods | Query parameters |", "|---|---|---|"]
        for entry in summary:
            methods = ", ".join(entry.get("methods", [])) or "-"
            params = ", ".join(f"`{p}`" for p in entry.get("params", [])) or "-"
            lines.append(f"| `{entry['endpoint']}` | {methods} | {params} |")
        lines.append("")
        return lines

    def _render_endpoint(self, path: str, methods: Dict[str, Any]) -> List[str]:
        lines = [f"### `{path}`", ""]

        for method, result in methods.items():
            if method == WITH_PARAMS_KEY:
                continue
            lines.append(f"#### {method}")
            lines.append("")
            lines.append(f"Status: {result.get('status')} {result.get('statusText', '')}".rstrip())
            lines.append("")
            if result.get("success"):
                lines.extend(_json_block("Response schema", result.get("dataSchema")))
                lines.extend(_json_block("Response preview", result.get("dataPreview")))

        with_params = methods.get(WITH_PARAMS_KEY)
        if with_params:
            lines.append("#### Query parameters")
            lines.append("")
            for param, result in with_params.items():
                mark = "yes" if result.get("success") else "no"
                lines.append(f"- `?{param}`: {result.get('status')} ({mark})")
            lines.append("")

        return lines

    def generate(self, results_file: Path, summary_file: Path, output_file: Path) -> Path:
        """Read the exploration output files and write the Markdown document"""
        with open(results_file, "r") as f:
            results = json.load(f)
        with open(summary_file, "r") as f:
            summary = json.load(f)

        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w") as f:
            f.write(self.render(results, summary))

        logger.info(f"Documentation written to {output_file}")
        return output_file


def _json_block(label: str, value: Any) -> List[str]:
    return [f"{label}:", "", "```json", json.dumps(value, indent=2), "```", ""]
