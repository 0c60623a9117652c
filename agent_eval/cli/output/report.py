"""Report rendering — turns an EvaluationReport into terminal text and results.json."""

import json
from pathlib import Path

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.evaluation.domain.run import JudgeRound, RunResult
from agent_eval.evaluation.domain.summary import EvaluationReport
from agent_eval.evaluation.infrastructure.errors import WorkspaceError

RESULTS_FILENAME = "results.json"

_HEADER_WIDTH = 40
_NOT_AVAILABLE = "N/A"


def _header(title: str) -> list[str]:
    rule = "=" * _HEADER_WIDTH
    return ["", rule, f"{title:^{_HEADER_WIDTH}}", rule, ""]


def _judge_row(judge_round: JudgeRound) -> str:
    label = judge_round.round_index + 1
    output = judge_round.output
    if output is None:
        return (
            f"│{label:^7}│{_NOT_AVAILABLE:^6}│{_NOT_AVAILABLE:^8}│ {judge_round.error}"
        )
    thread = str(output.thread.score) if output.thread else _NOT_AVAILABLE
    return f"│{label:^7}│{output.diff.score:^6}│{thread:^8}│"


def _judge_table(judge_rounds: list[JudgeRound]) -> list[str]:
    lines = [
        "┌───────┬──────┬────────┐",
        "│ Judge │ Diff │ Thread │",
        "├───────┼──────┼────────┤",
    ]
    lines.extend(_judge_row(judge_round=r) for r in judge_rounds)
    lines.append("└───────┴──────┴────────┘")
    return lines


def render_tool_metrics(metrics: ToolMetrics) -> list[str]:
    """Render tool counters as a fixed-width table, one row per tool in name order."""
    if not metrics.tool_names:
        return ["No tools used."]
    name_w = max(len("Tool"), *(len(name) for name in metrics.tool_names))
    lines = [
        f"{'Tool':<{name_w}}  {'Uses':>6}  {'Failures':>8}  {'Failure Rate':>12}",
        f"{'─' * name_w}  {'─' * 6}  {'─' * 8}  {'─' * 12}",
    ]
    for name in metrics.tool_names:
        rate = f"{metrics.failure_rate(tool_name=name) * 100:.1f}%"
        lines.append(
            f"{name:<{name_w}}  {metrics.use_counts[name]:>6}"
            f"  {metrics.failure_counts.get(name, 0):>8}  {rate:>12}"
        )
    return lines


def _instance_section(result: RunResult, name_width: int) -> list[str]:
    instance = result.instance
    lines = _header(title=instance.name)
    if result.run_output is None:
        lines.append(f"💥 {instance.log_prefix}{result.error}")
    else:
        lines.extend(_judge_table(judge_rounds=result.judge_rounds))
        lines.extend(render_tool_metrics(metrics=result.run_output.tool_metrics))
    lines.append(f"{' ' * name_width}    > {instance.output_directory}")
    return lines


def render_report(report: EvaluationReport) -> str:
    """Render the full report.

    Instances appear in submission order; the output depends only on the
    report, so equal reports always render to equal text.
    """
    lines = ["", ""]
    lines.extend(_header(title="EVAL RESULTS"))
    for result in report.results:
        lines.extend(_instance_section(result=result, name_width=report.name_width))

    summary = report.summary
    if summary.error_count > 0:
        lines.extend(["", f"{summary.error_count} examples failed to run!"])
    if summary.average_diff_score is not None:
        lines.extend(["", f"Average code diff score: {summary.average_diff_score:.2f}"])
    if summary.average_thread_score is not None:
        lines.extend(["", f"Average thread score: {summary.average_thread_score:.2f}"])

    lines.extend(_header(title="CUMULATIVE TOOL METRICS"))
    lines.extend(render_tool_metrics(metrics=summary.tool_metrics))
    return "\n".join(lines) + "\n"


def build_results_json(report: EvaluationReport) -> dict[str, object]:
    """Build the persisted results document."""
    summary = report.summary
    return {
        "run_id": report.run_id,
        "run_directory": str(report.run_directory),
        "model": report.model.id,
        "model_provider": report.model.provider,
        "summary": {
            "total_instances": summary.total_instances,
            "error_count": summary.error_count,
            "average_diff_score": summary.average_diff_score,
            "average_thread_score": summary.average_thread_score,
            "tool_metrics": summary.tool_metrics.model_dump(mode="json"),
        },
        "instances": [_instance_json(result=r) for r in report.results],
    }


def _instance_json(result: RunResult) -> dict[str, object]:
    instance = result.instance
    data: dict[str, object] = {
        "name": instance.name,
        "example": instance.example.name,
        "repetition_index": instance.repetition_index,
        "output_directory": str(instance.output_directory),
        "error": result.error,
    }
    if result.run_output is not None:
        run_output = result.run_output
        data["response_count"] = run_output.response_count
        data["token_usage"] = run_output.token_usage.model_dump(mode="json")
        data["tool_metrics"] = run_output.tool_metrics.model_dump(mode="json")
        data["diagnostics_before"] = run_output.diagnostics_before
        data["diagnostics_after"] = run_output.diagnostics_after
    data["judge_rounds"] = [
        {
            "round": r.round_index,
            "diff_score": r.output.diff.score if r.output else None,
            "thread_score": r.output.thread.score if r.output and r.output.thread else None,
            "error": r.error,
        }
        for r in result.judge_rounds
    ]
    return data


def write_results(report: EvaluationReport, path: Path) -> None:
    """Write the results document as indented JSON.

    Raises:
        WorkspaceError: if the file cannot be written.
    """
    try:
        path.write_text(
            json.dumps(build_results_json(report=report), indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise WorkspaceError(path=path, reason=str(exc)) from exc
