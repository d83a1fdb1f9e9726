# scripts/bench_tensor_ops.py
"""
Microbench: Tensor elementwise ops and reductions vs. raw NumPy.

What it measures
----------------
- Per-op latency for the tensor3d operations (add, sub, scale, divide, abs,
  abs_diff, transform, reshape, min/max, sum) on one (depth, height, width)
  shape.
- The same computation done directly on NumPy arrays, to show the cost of the
  Tensor wrapper (validation, result allocation, Python boundary).
- Uses warmup iterations (not recorded), then repeats with median/p95.

Example
-------
python scripts/bench_tensor_ops.py --shape 8 64 64 --warmup 20 --repeats 100
"""

from __future__ import annotations

import argparse
import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from tensor3d import Shape, Tensor  # noqa: E402


# ----------------------------
# Stats helpers
# ----------------------------
def _median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def _p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def _fmt_us(sec: float) -> str:
    return f"{sec * 1e6:10.1f} us"


@dataclass
class OpResult:
    name: str
    tensor_med: float
    tensor_p95: float
    numpy_med: float
    numpy_p95: float


def _time_op(fn: Callable[[], object], *, warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _build_ops(
    a: Tensor, b: Tensor, a_np: np.ndarray, b_np: np.ndarray, alpha: float
) -> Dict[str, Tuple[Callable[[], object], Callable[[], object]]]:
    # (tensor3d op, NumPy reference) pairs
    flipped = (a.shape.width, a.shape.height, a.shape.depth)
    return {
        "add": (lambda: a + b, lambda: a_np + b_np),
        "sub": (lambda: a - b, lambda: a_np - b_np),
        "scale": (lambda: a * alpha, lambda: a_np * np.float32(alpha)),
        "divide": (lambda: a / alpha, lambda: a_np / np.float32(alpha)),
        "abs": (lambda: abs(a), lambda: np.abs(a_np)),
        "abs_diff": (lambda: a.abs_diff(b), lambda: np.abs(a_np - b_np)),
        "transform": (
            lambda: a.transform(math.tanh),
            lambda: np.tanh(a_np),
        ),
        "reshape": (
            lambda: a.reshape(Shape(*flipped)),
            lambda: a_np.reshape(flipped).copy(),
        ),
        "min_max": (
            lambda: a.min_max_values(),
            lambda: (a_np.min(), a_np.max()),
        ),
        "sum": (lambda: a.sum(), lambda: float(a_np.sum(dtype=np.float64))),
    }


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--shape",
        nargs=3,
        type=int,
        default=[8, 64, 64],
        help="Tensor shape, e.g. --shape 8 64 64",
    )
    ap.add_argument("--warmup", type=int, default=20)
    ap.add_argument("--repeats", type=int, default=100)
    ap.add_argument("--alpha", type=float, default=0.125)
    ap.add_argument("--ops", nargs="*", default=None)
    args = ap.parse_args()

    shape = Shape(*args.shape)

    print("=" * 80)
    print(
        f"tensor3d ops bench | shape={shape} warmup={args.warmup} repeats={args.repeats}"
    )
    print("=" * 80)

    rng = np.random.default_rng(0)
    a_np = rng.standard_normal(size=shape.as_tuple()).astype(np.float32)
    b_np = rng.standard_normal(size=shape.as_tuple()).astype(np.float32)
    a = Tensor.from_numpy(a_np)
    b = Tensor.from_numpy(b_np)

    ops = _build_ops(a, b, a_np, b_np, float(args.alpha))
    selected = [name for name in (args.ops or ops.keys()) if name in ops]
    if not selected:
        raise SystemExit(f"No valid ops selected. Choose from: {' '.join(ops)}")

    results: List[OpResult] = []
    for name in selected:
        tensor_fn, numpy_fn = ops[name]
        t_times = _time_op(tensor_fn, warmup=args.warmup, repeats=args.repeats)
        n_times = _time_op(numpy_fn, warmup=args.warmup, repeats=args.repeats)
        results.append(
            OpResult(
                name=name,
                tensor_med=_median(t_times),
                tensor_p95=_p95(t_times),
                numpy_med=_median(n_times),
                numpy_p95=_p95(n_times),
            )
        )

    print(
        f"{'op':<10} {'tensor med':>14} {'tensor p95':>14} "
        f"{'numpy med':>14} {'numpy p95':>14} {'overhead':>9}"
    )
    for r in results:
        ratio = r.tensor_med / r.numpy_med if r.numpy_med > 0 else float("nan")
        print(
            f"{r.name:<10} {_fmt_us(r.tensor_med)} {_fmt_us(r.tensor_p95)} "
            f"{_fmt_us(r.numpy_med)} {_fmt_us(r.numpy_p95)} {ratio:8.2f}x"
        )


if __name__ == "__main__":
    main()
