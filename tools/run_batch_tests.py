#!/usr/bin/env python3
"""Batch tester for /transliterate API.

Reads a CSV of ``mode,text[,expected]`` rows, posts each row to the API and
writes a CSV report.
"""

from __future__ import annotations

import argparse
import csv
import os
import sys
import time
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

import requests
from requests import Response
from tqdm import tqdm

DEFAULT_CASES = Path(__file__).resolve().parent / "sample_cases.csv"
DEFAULT_RESULTS_CSV = Path("artifacts/batch_results.csv")


@dataclass
class BatchCase:
    line_no: int
    mode: str
    text: str
    expected: str | None = None


@dataclass
class CaseResult:
    case: BatchCase
    status_code: int
    passed: bool
    output: str
    latency_ms: float
    error: str | None = None

    @property
    def pass_flag(self) -> str:
        return "1" if self.passed else "0"


def read_cases(path: Path) -> list[BatchCase]:
    if not path.exists():
        raise FileNotFoundError(f"Case file does not exist: {path}")
    cases: list[BatchCase] = []
    with path.open(newline="", encoding="utf-8") as fh:
        for line_no, row in enumerate(csv.reader(fh), start=1):
            if not row or row[0].startswith("#"):
                continue
            if len(row) < 2:
                print(f"Skipping line {line_no}: expected mode,text[,expected]", file=sys.stderr)
                continue
            expected = row[2] if len(row) > 2 and row[2] else None
            cases.append(BatchCase(line_no=line_no, mode=row[0].strip(), text=row[1], expected=expected))
    return cases


def send_request(
    session: requests.Session,
    base_url: str,
    case: BatchCase,
    timeout: float,
) -> tuple[Response, float]:
    url = base_url.rstrip("/") + "/transliterate"
    start = time.perf_counter()
    response = session.post(url, json={"mode": case.mode, "text": case.text}, timeout=timeout)
    latency_ms = (time.perf_counter() - start) * 1000
    return response, latency_ms


def evaluate_response(response: Response, latency_ms: float, case: BatchCase) -> CaseResult:
    try:
        data = response.json()
    except ValueError:
        return CaseResult(
            case=case,
            status_code=response.status_code,
            passed=False,
            output="",
            latency_ms=latency_ms,
            error="Non-JSON response",
        )

    output = data.get("output") or ""
    passed = response.status_code == 200 and (case.expected is None or output == case.expected)

    error = None
    if response.status_code != 200:
        detail = data.get("detail")
        error = detail.get("error") if isinstance(detail, dict) else str(detail)
    elif not passed:
        error = f"expected {case.expected!r}"

    return CaseResult(
        case=case,
        status_code=response.status_code,
        passed=passed,
        output=output,
        latency_ms=latency_ms,
        error=error,
    )


def process_case(case: BatchCase, base_url: str, timeout: float) -> CaseResult:
    session = requests.Session()
    try:
        response, latency_ms = send_request(session, base_url, case, timeout)
        return evaluate_response(response, latency_ms, case)
    except requests.RequestException as exc:
        return CaseResult(
            case=case,
            status_code=0,
            passed=False,
            output="",
            latency_ms=0.0,
            error=str(exc),
        )
    finally:
        session.close()


def run_batch(
    cases: list[BatchCase],
    base_url: str,
    timeout: float,
    max_workers: int,
) -> list[CaseResult]:
    if not cases:
        print("No cases to run.")
        return []

    results: list[CaseResult] = []

    if max_workers <= 1:
        for case in tqdm(cases, desc="Testing", unit="case"):
            results.append(process_case(case, base_url, timeout))
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_map = {
                executor.submit(process_case, case, base_url, timeout): case for case in cases
            }
            for future in tqdm(
                as_completed(future_map),
                total=len(future_map),
                desc="Testing",
                unit="case",
            ):
                results.append(future.result())

    return results


def write_csv(results: list[CaseResult], output_csv: Path) -> None:
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    with output_csv.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["line", "mode", "text", "status_code", "pass", "output", "latency_ms", "error"])
        for result in sorted(results, key=lambda r: r.case.line_no):
            writer.writerow(
                [
                    result.case.line_no,
                    result.case.mode,
                    result.case.text,
                    result.status_code,
                    result.pass_flag,
                    result.output,
                    f"{result.latency_ms:.1f}",
                    result.error or "",
                ]
            )


def summarize(results: list[CaseResult]) -> None:
    by_mode: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for result in results:
        by_mode[result.case.mode][0 if result.passed else 1] += 1

    total_passed = sum(counts[0] for counts in by_mode.values())
    print("\n=== Summary ===")
    for mode in sorted(by_mode):
        passed, failed = by_mode[mode]
        print(f"{mode:<18} pass={passed} fail={failed}")
    rate = total_passed / len(results) * 100 if results else 0.0
    print(f"{'total':<18} {total_passed}/{len(results)} ({rate:.1f}%)")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Batch tester for /transliterate API")
    parser.add_argument(
        "--base",
        dest="base",
        default=os.environ.get("TRANSLITERATE_BASE_URL", "http://localhost:8000"),
        help="Base URL of the API (default: env TRANSLITERATE_BASE_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--cases",
        dest="cases",
        default=str(DEFAULT_CASES),
        help=f"CSV of mode,text[,expected] rows (default: {DEFAULT_CASES})",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        default=10.0,
        help="Request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--results",
        dest="results",
        default=str(DEFAULT_RESULTS_CSV),
        help=f"Path to CSV output (default: {DEFAULT_RESULTS_CSV})",
    )
    parser.add_argument(
        "--max-workers",
        dest="max_workers",
        type=int,
        default=1,
        help="Number of concurrent workers",
    )
    parser.add_argument(
        "--mode",
        dest="modes",
        action="append",
        help="Only run cases of this mode (repeatable)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        cases = read_cases(Path(args.cases).expanduser().resolve())
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.modes:
        cases = [case for case in cases if case.mode in args.modes]

    if not cases:
        print("No cases found.")
        return 1

    results = run_batch(
        cases=cases,
        base_url=args.base,
        timeout=args.timeout,
        max_workers=max(1, args.max_workers),
    )

    results_csv = Path(args.results).expanduser().resolve()
    write_csv(results, results_csv)
    summarize(results)

    print(f"CSV written to {results_csv}")
    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
