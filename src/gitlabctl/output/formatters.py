"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from gitlabctl.models.drift import DriftReport, EnvironmentRow, ProjectGroup

console = Console()


def _row_to_dict(r: EnvironmentRow) -> dict[str, Any]:
    return {
        "environment": r.environment_name,
        "deployment": r.deployment_label,
        "commit": r.commit_sha,
        "updated": r.updated_label,
    }


def _group_to_dict(g: ProjectGroup) -> dict[str, Any]:
    return {
        "project": g.project_name,
        "consistent": g.consistent,
        "environments": [_row_to_dict(r) for r in g.rows],
    }


def report_to_dict(report: DriftReport) -> dict[str, Any]:
    return {
        "projects": [_group_to_dict(g) for g in report.groups],
        "skipped": [
            {"stage": f.stage.value, "target": f.target, "error": f.error}
            for f in report.skipped
        ],
    }


def output_report(report: DriftReport, fmt: str, out: Console | None = None) -> None:
    out = out or console
    if fmt == "json":
        out.print_json(json.dumps(report_to_dict(report), indent=2))
    elif fmt == "yaml":
        out.print(
            yaml.dump(report_to_dict(report), default_flow_style=False, sort_keys=False),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        from gitlabctl.output.tables import render_table
        render_table(report.groups, out)
