"""
Benchmark suite for jsonkind scalar rendering performance.

Compares jsonkind against standard JSON libraries including:
- Python standard library json
- orjson (Rust-optimized)
- ujson (ultra-fast JSON)

Measures per-value rendering speed across different scalar mixes.
"""
