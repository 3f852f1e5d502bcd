#!/usr/bin/env python3
"""Quick derivation benchmark - direct timing only"""
import time


SECRET = "Hello World Testing Performance Benchmark"
SITE = "https://example.com/login"
ACCOUNT = "benchmark"
RUNS = 5


def bench_python():
    """Benchmark full-cost derivations with the published scheme"""
    import hutch

    start = time.perf_counter()
    for _ in range(RUNS):
        result = hutch.derive_password(SECRET, SITE, ACCOUNT)
    elapsed = time.perf_counter() - start
    return elapsed, result


def main():
    import hutch

    print(f"Benchmarking {hutch.HUTCH_V1.label} derivation ({RUNS} runs)...")
    print(f"PBKDF2 iterations: {hutch.HUTCH_V1.iterations:,}\n")

    py_time, py_result = bench_python()
    print(f"  Time: {py_time:.3f}s ({py_time / RUNS * 1000:.2f} ms/op)")
    print(f"  Output length: {len(py_result)} chars")

    print("\n✅ Python benchmark complete")


if __name__ == '__main__':
    main()
