# experiments/run_stages.py
"""Multi-mark timing of a small numpy pipeline."""
import argparse
import logging
from dataclasses import dataclass

import numpy as np

from tid.timing.timer import Timer


@dataclass
class Params:
    n: int = 500          # matrix size
    reps: int = 5         # matmul repetitions
    seed: int = 42
    debug: bool = False


def parse_params() -> Params:
    d = Params()
    ap = argparse.ArgumentParser(description="multi-mark timing demo")
    ap.add_argument("--n", type=int, default=d.n)
    ap.add_argument("--reps", type=int, default=d.reps)
    ap.add_argument("--seed", type=int, default=d.seed)
    ap.add_argument("--debug", action="store_true", help="enable tid debug logging")
    args = ap.parse_args()
    return Params(n=args.n, reps=args.reps, seed=args.seed, debug=args.debug)


def main():
    params = parse_params()
    if params.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s :: %(message)s")

    t = Timer()
    rng = np.random.default_rng(params.seed)
    a = rng.standard_normal((params.n, params.n))
    b = rng.standard_normal((params.n, params.n))
    t.mark("generate inputs")

    c = a
    for _ in range(params.reps):
        c = (c @ b) / params.n
    t.mark(f"{params.reps} matmuls")

    w = np.linalg.eigvalsh(c + c.T)
    t.mark("symmetric eigvals")

    order = np.argsort(np.abs(w))[::-1]
    t.mark("sort spectrum")

    print(f"[data] n={params.n}, top |λ|={abs(w[order[0]]):.4f}")
    t.present()


if __name__ == "__main__":
    main()
