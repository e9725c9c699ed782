#!/usr/bin/env python3
"""
pointgeom demo: Gauss-Newton on a small chain of points.

Each variable is linked to the next by a noisy "between" measurement and the
first one has a prior. The solver only uses the LieElement contract
(dim/retract/local) and between_with_jacobians, so the same code runs for
Point2, Point3 and StereoPoint2 variables.
"""
import os
import sys
import numpy as np

# Allow running from examples/
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pointgeom.geometry import Point2, Point3, StereoPoint2, between_with_jacobians, retract, local
from pointgeom.utils.log import setup_logging


def make_problem(cls, num_vars: int, noise: float, rng: np.random.Generator):
    """Ground truth chain, noisy odometry and a perturbed initial guess."""
    truth = [cls.from_vector(rng.uniform(-5, 5, cls.dimension)) for _ in range(num_vars)]
    odometry = [
        retract(truth[i].between(truth[i + 1]), rng.normal(0, noise, cls.dimension))
        for i in range(num_vars - 1)
    ]
    initial = [retract(p, rng.normal(0, 1.0, cls.dimension)) for p in truth]
    return truth, odometry, initial


def gauss_newton(values, prior, odometry, iterations: int = 5):
    """Minimize prior and between residuals over a chain of variables."""
    n = len(values)
    d = values[0].dim()

    for it in range(iterations):
        rows = []
        rhs = []

        # Prior on the first variable
        A = np.zeros((d, n * d))
        A[:, :d] = np.eye(d)
        rows.append(A)
        rhs.append(local(values[0], prior))

        for i, measured in enumerate(odometry):
            predicted, H1, H2 = between_with_jacobians(values[i], values[i + 1])
            A = np.zeros((d, n * d))
            A[:, i * d:(i + 1) * d] = H1
            A[:, (i + 1) * d:(i + 2) * d] = H2
            rows.append(A)
            rhs.append(local(predicted, measured))

        A = np.vstack(rows)
        b = np.concatenate(rhs)
        delta = np.linalg.lstsq(A, b, rcond=None)[0]
        values = [retract(v, delta[i * d:(i + 1) * d]) for i, v in enumerate(values)]

        print(f"   iteration {it}: |delta| = {np.linalg.norm(delta):.3e}, "
              f"error = {0.5 * b @ b:.6f}")

        if np.linalg.norm(delta) < 1e-10:
            break

    return values


def run_demo():
    rng = np.random.default_rng(0)

    for cls in (Point2, Point3, StereoPoint2):
        print("=" * 70)
        print(f"{cls.__name__} chain")
        print("=" * 70)

        truth, odometry, initial = make_problem(cls, num_vars=6, noise=0.01, rng=rng)
        result = gauss_newton(initial, truth[0], odometry)

        for estimate, expected in zip(result, truth):
            estimate.print("   estimate ")
            print(f"   error    {np.linalg.norm(local(expected, estimate)):.4f}")
        print()


def main():
    setup_logging()
    try:
        run_demo()
    except KeyboardInterrupt:
        print("\n\nInterrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
