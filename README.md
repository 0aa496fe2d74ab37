# amalgamkit

Building blocks for optimisers in the AMaLGaM-IDEA family. These are
estimation-of-distribution algorithms. They fit multivariate Gaussians to the
best solutions found so far and sample the next population from them.

## Modules

### `amalgamkit.gaussian`

- `MultivariateGaussian(mean, cov)` builds a distribution from a mean vector
  and a square covariance matrix. It stores `mean`, `cov`, `cholesky` (the
  lower Cholesky factor) and `cholesky_inv` (the inverse of that factor).
- `MultivariateGaussian.from_flat(mean, flat_cov)` takes the covariance as
  its flattened upper triangle.
- `MultivariateGaussian.from_observations(observations, cov_type)` estimates
  the mean and the population covariance (divided by the number of
  observations). `cov_type` is `CovMatrixType.FULL` or
  `CovMatrixType.DIAGONAL`.
- `sample(rng=None)` draws one vector. `sample_n(n, rng=None)` draws `n`
  vectors and returns them as the columns of a `(dim, n)` array. `rng` is a
  `numpy.random.Generator`.
- `cholesky_and_inverse(cov)` returns the Cholesky factor and its inverse.
  Before it factorises, it scales the matrix by its Frobenius norm. If the
  factorisation fails, it adds a small jitter (`1e-6`) to the diagonal and
  tries again.
- `flatten_cov(cov)` and `unflatten_cov(flat_cov)` pack and unpack the upper
  triangle, row by row.
- Errors derive from `MultivariateGaussianError`:
  - `InvalidCovMatrixError`
  - `InvalidFlatCovMatrixError`
  - `EmptyObservationSetError`

### `amalgamkit.constraints`

Each constraint's `repair(values)` returns a repaired list. The input is not
changed.

- `SumTo(total)` scales the values so that they add up to `total`. If the
  values add up to zero, every value becomes `total / len(values)`.
- `PositiveSumTo(total)` sets negative values to zero, then rescales them
  like `SumTo`.
- `MaxValue(maximum)`, `MinValue(minimum)` and `MaxMinValue(maximum, minimum)`
  clamp values. Each takes one bound for all values, or one bound per value.
- `NoConstraint()` returns the values unchanged.

### `amalgamkit.fitness`

- `Fitness` is a protocol for any object with a `fitness` float. Larger is
  better.
- `ScalarFitness(fitness)` is a plain fitness value.
- `select_top_n(individuals, fitnesses, n)` returns the `n` fittest
  individuals and their fitnesses, best first. Ties keep their original order.
  NaN fitness values raise `ValueError`.

### `amalgamkit.parameters`

`AmalgamIdeaParameters` holds the following fields:

- `population_size`
- `tau`
- `c_mult_inc`, `c_mult_dec`, `c_mult_min`
- `eta_cov`, `eta_shift`
- `alpha_shift`, `gamma_shift`
- `stagnant_iterations_threshold`

`AmalgamIdeaParameters.auto(problem_size, cov_type, factorized, memory)`
derives all of them from the problem size and the algorithm variant.

### `amalgamkit.verbosity`

`ProgressReporter` writes progress to a text stream, which is standard output
by default.

- `report_start()` writes a banner. At `Verbosity.A_LOT` the banner also lists
  the parameters.
- `report_iteration(i, best_fitness, best_individual)` writes a progress line
  every tenth iteration. It uses ANSI escape codes to replace the previous
  line.
- `Verbosity.NONE` writes no banner and leaves the progress lines empty.

### `amalgamkit.population` and `amalgamkit.means`

These modules split full solutions into per-subset pieces and join the pieces
back together:

- `scramble_population(indices, population)`
- `unscramble_population(indices, population)`
- `scramble_means(indices, mean)`
- `unscramble_means(indices, means)`

Variables that no subset covers are filled with `0.0` when the pieces are
joined.

## Example

```python
import numpy as np
from amalgamkit.gaussian import MultivariateGaussian, CovMatrixType
from amalgamkit.constraints import SumTo
from amalgamkit.fitness import ScalarFitness, select_top_n

rng = np.random.default_rng(0)
dist = MultivariateGaussian([1.0, 2.0], np.eye(2))
population = [list(dist.sample(rng)) for _ in range(20)]

fitnesses = [ScalarFitness(-sum(x * x for x in ind)) for ind in population]
best, best_fit = select_top_n(population, fitnesses, 5)

refit = MultivariateGaussian.from_observations(best, CovMatrixType.FULL)

repaired = SumTo(12.0).repair([1.0, 2.0, 3.0])   # [2.0, 4.0, 6.0]
```

## What is not included

The package provides the components only. It has no complete optimiser
object and no ready-made generational loop. It also has no class that manages
sets of variable subsets together with their distributions and constraints.
You combine the components in your own loop. There is no command-line
program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```