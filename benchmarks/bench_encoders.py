#!/usr/bin/env python3
"""
Benchmark: jsonbytes encoders

Measures marshal + unmarshal latency and throughput for each registered
byte encoding, validating every round trip by SHA-256 checksum.

Usage:
  $ python benchmarks/bench_encoders.py --runs 1000 --size 16384
"""
from __future__ import annotations

import argparse
import hashlib
import os
import time
import uuid
from statistics import quantiles

from rich import box
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from jsonbytes import ByteEncoder, get_encoding, list_encodings


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------
def generate_unique_payload_with_checksum(size: int, run_id: str) -> tuple[bytes, str]:
    base_payload = os.urandom(max(size - len(run_id), 0))
    unique_payload = (base_payload + run_id.encode())[:size]
    checksum = hashlib.sha256(unique_payload).hexdigest()
    return unique_payload, checksum


def validate_response(decoded: bytes, expected_checksum: str, run_num: int) -> bool:
    actual = hashlib.sha256(decoded).hexdigest()
    if actual != expected_checksum:
        print(f"Run {run_num}: checksum mismatch")
        return False
    return True


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------
def bench_encoder(encoder: ByteEncoder, size: int, runs: int) -> dict:
    latencies = []
    validation_errors = 0
    encoded_bytes = 0
    for run_num in tqdm(range(runs), desc=encoder.name):
        payload, checksum = generate_unique_payload_with_checksum(size, str(uuid.uuid4()))
        start = time.perf_counter()
        literal = encoder.marshal(payload)
        decoded = encoder.unmarshal(literal)
        latencies.append(time.perf_counter() - start)
        encoded_bytes += len(literal)
        if not validate_response(decoded, checksum, run_num):
            validation_errors += 1
    return {
        "latencies": latencies,
        "validation_errors": validation_errors,
        "total_runs": runs,
        "expansion": encoded_bytes / (size * runs) if size else float("nan"),
    }


UNITS = {
    "ms": 1e3,
    "us": 1e6,
    "ns": 1e9,
}


def summarise(
    latencies: list[float], size_bytes: int, validation_errors: int, total_runs: int, unit: str = "us"
) -> dict[str, float]:
    if len(latencies) < 2:
        return {"p50": float("nan"), "p95": float("nan"), "p99": float("nan"), "thr": 0.0, "success_rate": 0.0}
    lat = [t * UNITS[unit] for t in latencies]
    cuts = quantiles(lat, n=100)
    p50, p95, p99 = cuts[49], cuts[94], cuts[98]
    throughput = (size_bytes * len(latencies)) / sum(latencies) / (2**20)  # MiB/s
    success_rate = (total_runs - validation_errors) / total_runs * 100
    return {"p50": p50, "p95": p95, "p99": p99, "thr": throughput, "success_rate": success_rate}


def print_table(results: dict[str, dict[str, float]], unit: str = "us"):
    console = Console()
    table = Table(title="jsonbytes Encoder Benchmark (marshal + unmarshal)", box=box.SIMPLE_HEAVY)
    table.add_column("Encoding")
    table.add_column(f"p50 ({unit}, ↓)")
    table.add_column(f"p95 ({unit}, ↓)")
    table.add_column(f"p99 ({unit}, ↓)")
    table.add_column("Throughput (MiB/s, ↑)")
    table.add_column("Size ratio (↓)")
    table.add_column("Success Rate (%)")
    for k, v in results.items():
        success_rate = v.get("success_rate", 100.0)
        success_color = "green" if success_rate == 100.0 else "red"
        table.add_row(
            k,
            f"{v['p50']:.2f}",
            f"{v['p95']:.2f}",
            f"{v['p99']:.2f}",
            f"{v['thr']:.1f}",
            f"{v['expansion']:.3f}",
            f"[{success_color}]{success_rate:.1f}%[/{success_color}]",
        )
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Benchmark jsonbytes encoders")
    parser.add_argument("--runs", type=int, default=100, help="Number of benchmark runs")
    parser.add_argument("--size", type=int, default=1024, help="Payload size in bytes")
    parser.add_argument("--unit", choices=["us", "ms", "ns"], default="us", help="Latency unit")
    parser.add_argument("--encoding", action="append", help="Encoding to run (default: all)")
    args = parser.parse_args()

    names = args.encoding or list_encodings()
    print(f"Benchmarking {args.runs} runs with {args.size} byte payloads")

    results = {}
    for name in names:
        res = bench_encoder(get_encoding(name), args.size, args.runs)
        results[name] = summarise(
            res["latencies"], args.size, res["validation_errors"], res["total_runs"], args.unit
        )
        results[name]["expansion"] = res["expansion"]

    print_table(results, args.unit)


if __name__ == "__main__":
    main()
