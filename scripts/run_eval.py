"""Run the evaluation harness against a live Exam RAG Tutor server.

Usage:
    1. Start the server:   python -m exam_rag.main
    2. Run evaluation:     python scripts/run_eval.py [--base-url URL] [--output PATH]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exam_rag.evaluation.metrics import (
    EvalCaseResult,
    compute_metrics,
    compute_topic_metrics,
)
from exam_rag.evaluation.runner import DEFAULT_BASE_URL, run_evaluation


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(metrics: dict) -> None:
    print_header("EVALUATION SUMMARY")
    print(f"  Total cases:             {metrics['total_cases']}")
    print(f"  Valid cases:             {metrics['valid_cases']}")
    print(f"  Errors:                  {metrics['error_count']}")
    print(f"  Accuracy:                {metrics['accuracy']:.1%}")
    print(f"  Avg confidence:          {metrics['avg_confidence']:.4f}")
    print(f"  Avg confidence (right):  {metrics['avg_confidence_correct']:.4f}")
    print(f"  Avg confidence (wrong):  {metrics['avg_confidence_wrong']:.4f}")
    print(f"  Context keyword prec.:   {metrics['keyword_precision']:.1%}")
    print(f"  Avg latency:             {metrics['avg_latency_ms']:.0f} ms")


def print_topic_breakdown(by_topic: dict) -> None:
    print_header("PER-TOPIC BREAKDOWN")
    print(f"  {'Topic':<44} {'Count':>5} {'Accuracy':>10} {'Confidence':>12}")
    print(f"  {'-' * 73}")
    for topic, m in sorted(by_topic.items()):
        print(
            f"  {topic[:44]:<44} {m['count']:>5} "
            f"{m['accuracy']:>9.1%} "
            f"{m['avg_confidence']:>11.4f}"
        )


def print_case_details(results: list[EvalCaseResult]) -> None:
    print_header("INDIVIDUAL CASE RESULTS")
    for r in results:
        if r.error:
            status = "ERROR"
        elif r.correct:
            status = "PASS"
        else:
            status = "FAIL"

        print(
            f"  [{status:>5}] {r.case_id:<24} | "
            f"expected={r.expected_index} predicted={r.predicted_index} | "
            f"conf={r.confidence:.3f}"
        )
        if r.keywords_missing:
            print(f"         missing context keywords: {r.keywords_missing}")
        if r.error:
            print(f"         error: {r.error}")


def save_results(results: list[EvalCaseResult], metrics: dict, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "metrics": metrics,
        "results": [asdict(r) for r in results],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, default=str, ensure_ascii=False)
    print(f"\nRaw results saved to {output_path}")


async def main(base_url: str, output_path: Path) -> None:
    print(f"Running evaluation against {base_url} ...")
    print("Dataset: tests/fixtures/eval_dataset.json")

    results = await run_evaluation(base_url=base_url)

    metrics = compute_metrics(results)
    by_topic = compute_topic_metrics(results)
    metrics["by_topic"] = by_topic

    print_summary(metrics)
    print_topic_breakdown(by_topic)
    print_case_details(results)

    save_results(results, metrics, output_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run exam RAG evaluation harness")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Base URL of the running server (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--output",
        default="data/eval_results.json",
        help="Path to save raw results JSON (default: data/eval_results.json)",
    )
    args = parser.parse_args()
    asyncio.run(main(args.base_url, Path(args.output)))
