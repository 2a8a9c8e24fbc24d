#!/usr/bin/env python3
"""Benchmark script for Library API read latency."""

import argparse
import statistics
import time

import httpx


def benchmark_endpoint(
    client: httpx.Client,
    url: str,
    num_requests: int,
) -> dict:
    """Issue GET requests against one URL and return latency statistics."""
    latencies = []
    errors = 0

    for i in range(num_requests):
        try:
            start = time.perf_counter()
            response = client.get(url)
            elapsed = (time.perf_counter() - start) * 1000  # ms

            if response.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
                print(f"  Request {i + 1}: ERROR ({response.status_code})")

        except httpx.HTTPError as e:
            errors += 1
            print(f"  Request {i + 1}: EXCEPTION ({e})")

    if not latencies:
        return {"error": "All requests failed"}

    ordered = sorted(latencies)
    return {
        "total_requests": num_requests,
        "successful_requests": len(latencies),
        "failed_requests": errors,
        "latency_ms": {
            "min": ordered[0],
            "max": ordered[-1],
            "mean": statistics.mean(latencies),
            "median": statistics.median(latencies),
            "stdev": statistics.stdev(latencies) if len(latencies) > 1 else 0,
            "p95": ordered[int(len(ordered) * 0.95)],
        },
    }


def print_results(name: str, results: dict) -> None:
    print()
    print(f"{name}")
    print("-" * 50)

    if "error" in results:
        print(f"Error: {results['error']}")
        return

    print(f"Total requests:      {results['total_requests']}")
    print(f"Successful:          {results['successful_requests']}")
    print(f"Failed:              {results['failed_requests']}")
    print("Latency (ms):")
    print(f"  Min:               {results['latency_ms']['min']:.2f}")
    print(f"  Max:               {results['latency_ms']['max']:.2f}")
    print(f"  Mean:              {results['latency_ms']['mean']:.2f}")
    print(f"  Median:            {results['latency_ms']['median']:.2f}")
    print(f"  Std Dev:           {results['latency_ms']['stdev']:.2f}")
    print(f"  P95:               {results['latency_ms']['p95']:.2f}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark Library API")
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Base URL of the Library API",
    )
    parser.add_argument(
        "--isbn",
        default="0451527127",
        help="ISBN to fetch in the get-one benchmark",
    )
    parser.add_argument(
        "--requests",
        type=int,
        default=100,
        help="Number of requests per endpoint",
    )

    args = parser.parse_args()

    print("=" * 50)
    print("Library API Benchmark")
    print("=" * 50)

    with httpx.Client(base_url=args.url, timeout=10.0) as client:
        print_results("GET /books", benchmark_endpoint(client, "/books", args.requests))
        print_results(
            f"GET /books/{args.isbn}",
            benchmark_endpoint(client, f"/books/{args.isbn}", args.requests),
        )


if __name__ == "__main__":
    main()
