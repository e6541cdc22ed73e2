# experiments/run_mvp.py
"""Block timing around a numba kernel: first call (JIT compile) vs. warm calls."""
import argparse

import numpy as np
from numba import njit

from tid.timing.timed import Timed, timed_call


@njit(cache=True, fastmath=True)
def hinge_mean(x: np.ndarray) -> float:
    # mean(max(x + 1, 0))
    s = 0.0
    n = x.size
    for k in range(n):
        t = x[k] + 1.0
        s += t if t > 0.0 else 0.0
    return s / n


def main():
    ap = argparse.ArgumentParser(description="time a numba kernel with tid")
    ap.add_argument("--n", type=int, default=200, help="sample size")
    ap.add_argument("--calls", type=int, default=1000, help="warm calls in the batch")
    ap.add_argument("--seed", type=int, default=2025)
    args = ap.parse_args()

    rng = np.random.default_rng(args.seed)
    xi = rng.lognormal(mean=0.0, sigma=0.6, size=args.n).astype(np.float64)
    xi -= float(np.mean(xi))

    # 第一次调用包含 JIT 编译
    first = timed_call("first call (jit)", hinge_mean, xi)
    print(f"h = {first:.6f}")

    with Timed("single call"):
        h1 = hinge_mean(xi)
    print(f"h = {h1:.6f}")

    with Timed(f"{args.calls} calls") as t:
        s = 0.0
        for _ in range(args.calls):
            s += hinge_mean(xi)
    print(f"avg h over {args.calls} = {s / args.calls:.6f} ({t.elapsed_ms / args.calls:.6f} ms/call)")


if __name__ == "__main__":
    main()
