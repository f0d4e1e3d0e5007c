"""
Huffman coder experiments

Runs the coder over synthetic datasets, with repeated runs, and reports how
close the codes get to the entropy bound and what the text bit-string costs

Outputs (in --outdir):
  - metrics.csv     (raw row per run)
  - summary.csv     (grouped mean/stdev)
  - *.png           (charts)

How to run:
  python experiments.py --outdir results --runs 5
  python experiments.py --outdir results --runs 3 --sizes_kb 4,16,64,256
  python experiments.py --outdir results --generators uniform256,zipf128,english_like --no_plots

Notes:
  expansion_ratio is the '0'/'1' text size over the input size (about 8x the
  packed size); packed_ratio is what the same bits would take packed
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import time
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

import huffman as huff


# Utilities

def now_ns() -> int:
    return time.perf_counter_ns()

def ns_to_ms(ns: int) -> float:
    return ns / 1_000_000.0

def safe_mkdir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def parse_csv_list(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


# Synthetic dataset generators

def _sample_cdf(rng: random.Random, cdf: List[float]) -> int:
    r = rng.random()
    lo, hi = 0, len(cdf) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if r <= cdf[mid]:
            hi = mid
        else:
            lo = mid + 1
    return lo

def _cdf(weights: List[float]) -> List[float]:
    total = sum(weights)
    cdf = []
    acc = 0.0
    for w in weights:
        acc += w / total
        cdf.append(acc)
    return cdf

def gen_uniform(size: int, alphabet: int = 256, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    return bytes(rng.randrange(0, alphabet) for _ in range(size))

def gen_repetitive(size: int, dominant: int = ord('A'), dom_frac: float = 0.90, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    other_symbols = [i for i in range(256) if i != dominant]
    out = bytearray()
    for _ in range(size):
        if rng.random() < dom_frac:
            out.append(dominant)
        else:
            out.append(rng.choice(other_symbols))
    return bytes(out)

def gen_zipf_like(size: int, alphabet: int = 128, s: float = 1.2, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    cdf = _cdf([1.0 / ((i + 1) ** s) for i in range(alphabet)])
    return bytes(_sample_cdf(rng, cdf) for _ in range(size))

ENGLISH_CHARS = " etaoinshrdlcumwfgypbvkjxqETAOINSHRDLCUMWFGYPBVKJXQ\n"

def gen_english_like(size: int, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    weights = []
    for ch in ENGLISH_CHARS:
        if ch == ' ':
            weights.append(13.0)
        elif ch == '\n':
            weights.append(1.5)
        elif ch.lower() in "etaoinshrdlu":
            weights.append(6.0)
        elif ch.lower() in "cmfwgypbvk":
            weights.append(2.5)
        else:
            weights.append(1.2)
    cdf = _cdf(weights)
    return bytes(ord(ENGLISH_CHARS[_sample_cdf(rng, cdf)]) for _ in range(size))

def gen_single_symbol(size: int, seed: int = 0) -> bytes:
    return bytes([random.Random(seed).randrange(0, 256)]) * size

GENERATOR_REGISTRY: Dict[str, Callable[[int, int], bytes]] = {
    "uniform256": lambda size, seed: gen_uniform(size, alphabet=256, seed=seed),
    "uniform128": lambda size, seed: gen_uniform(size, alphabet=128, seed=seed),
    "zipf128": lambda size, seed: gen_zipf_like(size, alphabet=128, s=1.2, seed=seed),
    "zipf64": lambda size, seed: gen_zipf_like(size, alphabet=64, s=1.2, seed=seed),
    "repetitive90": lambda size, seed: gen_repetitive(size, dominant=ord('A'), dom_frac=0.90, seed=seed),
    "repetitive99": lambda size, seed: gen_repetitive(size, dominant=ord('A'), dom_frac=0.99, seed=seed),
    "english_like": lambda size, seed: gen_english_like(size, seed=seed),
    "single_symbol": lambda size, seed: gen_single_symbol(size, seed=seed),
}

def generate_dataset(name: str, size_bytes: int, seed: int) -> bytes:
    fn = GENERATOR_REGISTRY.get(name)
    if fn is None:
        raise ValueError(f"unknown generator {name!r}, choose from {', '.join(sorted(GENERATOR_REGISTRY))}")
    return fn(size_bytes, seed)


# Experiment runner

@dataclass
class MetricRow:
    dataset_name: str
    file_size_bytes: int
    run_id: int
    unique_symbols: int
    tree_depth: int

    build_ms: float
    encode_ms: float
    decode_ms: float
    total_ms: float

    bit_length: int
    packed_bytes: int
    expansion_ratio: float
    packed_ratio: float

    avg_code_length: float
    entropy_bits: float
    correctness_ok: int  # 1 or 0


def run_one(data: bytes, dataset_name: str = "", run_id: int = 0) -> MetricRow:
    # frequency + tree + table
    t0 = now_ns()
    ft = huff.build_frequency_table(data)
    root = huff.build_huffman_tree(ft)
    code_map = huff.generate_huffman_codes(root)
    t1 = now_ns()
    build_ms = ns_to_ms(t1 - t0)

    # encode
    t2 = now_ns()
    result = huff.EncodedResult(root, huff.huffman_encode(data, code_map))
    t3 = now_ns()
    encode_ms = ns_to_ms(t3 - t2)

    # decode
    t4 = now_ns()
    decoded = huff.decompress(result)
    t5 = now_ns()
    decode_ms = ns_to_ms(t5 - t4)

    size = max(1, len(data))
    return MetricRow(
        dataset_name=dataset_name,
        file_size_bytes=len(data),
        run_id=run_id,
        unique_symbols=len(code_map),
        tree_depth=huff.tree_depth(root),
        build_ms=build_ms,
        encode_ms=encode_ms,
        decode_ms=decode_ms,
        total_ms=build_ms + encode_ms + decode_ms,
        bit_length=result.bit_length,
        packed_bytes=result.packed_size,
        expansion_ratio=result.bit_length / size,
        packed_ratio=result.packed_size / size,
        avg_code_length=huff.average_code_length(ft, code_map),
        entropy_bits=huff.entropy(ft),
        correctness_ok=1 if decoded == data else 0,
    )


def write_csv(path: Path, rows: List[MetricRow]) -> None:
    names = [f.name for f in fields(MetricRow)]
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=names)
        w.writeheader()
        for r in rows:
            w.writerow({k: getattr(r, k) for k in names})


SUMMARY_METRICS = ("packed_ratio", "avg_code_length", "entropy_bits", "build_ms", "encode_ms", "decode_ms", "total_ms")

def mean_stdev(vals: List[float]) -> Tuple[float, float]:
    if len(vals) == 1:
        return vals[0], 0.0
    return statistics.mean(vals), statistics.stdev(vals)

def group_summary(rows: List[MetricRow], out_path: Path) -> None:
    """
    Group by dataset_name, file_size_bytes and compute mean/stdev
    """
    key_to: Dict[Tuple[str, int], List[MetricRow]] = {}
    for r in rows:
        key_to.setdefault((r.dataset_name, r.file_size_bytes), []).append(r)

    summary_fields = ["dataset_name", "file_size_bytes", "n_runs"]
    for m in SUMMARY_METRICS:
        summary_fields += [f"{m}_mean", f"{m}_stdev"]
    summary_fields.append("correctness_ok_rate")

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=summary_fields)
        w.writeheader()
        for (dataset_name, size_b), items in sorted(key_to.items()):
            row = {"dataset_name": dataset_name, "file_size_bytes": size_b, "n_runs": len(items)}
            for m in SUMMARY_METRICS:
                row[f"{m}_mean"], row[f"{m}_stdev"] = mean_stdev([getattr(x, m) for x in items])
            row["correctness_ok_rate"] = sum(x.correctness_ok for x in items) / len(items)
            w.writerow(row)


# Plotting

def plot_code_length(rows: List[MetricRow], outdir: Path) -> None:
    if not rows:
        return

    datasets = sorted(set(r.dataset_name for r in rows))
    largest = max(r.file_size_bytes for r in rows)

    def mean_for(dataset: str, field: str) -> float:
        vals = [getattr(r, field) for r in rows if r.dataset_name == dataset and r.file_size_bytes == largest]
        return statistics.mean(vals) if vals else float("nan")

    x = list(range(len(datasets)))

    plt.figure()
    plt.plot(x, [mean_for(d, "avg_code_length") for d in datasets], marker="o", label="Huffman avg code length")
    plt.plot(x, [mean_for(d, "entropy_bits") for d in datasets], marker="o", label="Entropy")
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Bits per Byte")
    plt.title(f"Code Length vs Entropy ({largest} bytes)")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "code_length_vs_entropy.png", dpi=200)
    plt.close()


def plot_size_scaling(rows: List[MetricRow], outdir: Path) -> None:
    datasets = sorted(set(r.dataset_name for r in rows))

    for dataset in datasets:
        ds_rows = [r for r in rows if r.dataset_name == dataset]
        sizes = sorted(set(r.file_size_bytes for r in ds_rows))
        if len(sizes) < 2:
            continue

        def mean_size(size: int, field: str) -> float:
            vals = [getattr(r, field) for r in ds_rows if r.file_size_bytes == size]
            return statistics.mean(vals) if vals else float("nan")

        plt.figure()
        for field, label in (("encode_ms", "encode"), ("decode_ms", "decode"), ("build_ms", "build")):
            plt.plot(sizes, [mean_size(s, field) for s in sizes], marker="o", label=label)
        plt.xlabel("File Size (bytes)")
        plt.ylabel("Time (ms)")
        plt.title(f"Time vs Size ({dataset})")
        plt.legend()
        plt.tight_layout()
        plt.savefig(outdir / f"time_vs_size_{dataset}.png", dpi=200)
        plt.close()


# Main

def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for CSV and plots")
    ap.add_argument("--runs", type=int, default=5, help="Repetitions per configuration (>=3 recommended for timing)")
    ap.add_argument("--seed", type=int, default=123, help="Base random seed")
    ap.add_argument("--generators", type=str, default="uniform256,zipf128,repetitive90,english_like",
                    help="Comma-separated dataset generator names")
    ap.add_argument("--sizes_kb", type=str, default="4,16,64,256", help="Comma-separated dataset sizes in KB")
    ap.add_argument("--no_plots", action="store_true", help="Only write the CSV files")
    args = ap.parse_args(argv)

    gen_names = parse_csv_list(args.generators)
    for name in gen_names:
        if name not in GENERATOR_REGISTRY:
            ap.error(f"unknown generator {name!r}, choose from {', '.join(sorted(GENERATOR_REGISTRY))}")
    sizes = [max(1, int(s)) * 1024 for s in parse_csv_list(args.sizes_kb)]

    outdir = Path(args.outdir)
    safe_mkdir(outdir)

    rows: List[MetricRow] = []
    for gen_name in gen_names:
        for size_b in sizes:
            for run_id in range(1, args.runs + 1):
                data = generate_dataset(gen_name, size_b, args.seed + size_b + run_id)
                rows.append(run_one(data, gen_name, run_id))
        print(f"{gen_name}: {len(sizes) * args.runs} runs done")

    metrics_csv = outdir / "metrics.csv"
    summary_csv = outdir / "summary.csv"
    write_csv(metrics_csv, rows)
    group_summary(rows, summary_csv)

    if not args.no_plots:
        plot_code_length(rows, outdir)
        plot_size_scaling(rows, outdir)

    ok_rate = sum(r.correctness_ok for r in rows) / max(1, len(rows))
    print(f"Wrote {len(rows)} rows to {metrics_csv}")
    print(f"Wrote grouped summary to {summary_csv}")
    print(f"Correctness rate across all runs: {ok_rate:.3f}")
    if not args.no_plots:
        print("Charts saved in:", outdir.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
