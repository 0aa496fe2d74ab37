"""Progress messages printed while the optimiser runs."""

from __future__ import annotations

import enum
import shutil
import sys
from typing import Sequence, TextIO

from .fitness import Fitness
from .parameters import AmalgamIdeaParameters

_RULE = "============================================="
_MOVE_UP = "\x1b[1A"
_CLEAR_LINE = "\x1b[2K"


class Verbosity(enum.Enum):
    """How much the optimiser reports."""

    A_LOT = "a_lot"
    A_LITTLE = "a_little"
    NONE = "none"


class ProgressReporter:
    """Writes a start-up summary and an in-place progress line every 10 iterations."""

    def __init__(
        self,
        max_iterations: int | None,
        problem_size: int,
        iter_memory: bool,
        manual_population_size: int | None,
        parameters: AmalgamIdeaParameters,
        level: Verbosity = Verbosity.A_LOT,
        stream: TextIO | None = None,
    ) -> None:
        self.max_iterations = max_iterations
        self.problem_size = problem_size
        self.iter_memory = iter_memory
        self.manual_population_size = manual_population_size
        self.parameters = parameters
        self.level = level
        self.stream = stream if stream is not None else sys.stdout
        self._last_message_length = 0

    def _write_line(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def report_start(self) -> None:
        """Write the start-up banner, with the parameters at the highest level."""
        if self.level is Verbosity.NONE:
            return
        self._write_line("\n\nStarting a run of AmalgamIdea")
        self._write_line(_RULE)
        if self.level is Verbosity.A_LITTLE:
            return

        params = self.parameters
        population_size = (
            self.manual_population_size
            if self.manual_population_size is not None
            else params.population_size
        )
        max_iterations = (
            str(self.max_iterations)
            if self.max_iterations is not None
            else "None (runs until convergence)"
        )
        lines = [
            "With parameters:\n",
            f"Maximum Iterations               : {max_iterations}",
            f"Problem Size                     : {self.problem_size}",
            f"Iteration Memory                 : {str(self.iter_memory).lower()}",
            f"Population Size                  : {population_size}",
            f"Selection Fraction (tau)         : {params.tau:.3f}",
            f"C-Multiplier Increase            : {params.c_mult_inc:.3f}",
            f"C-Multiplier Decrease            : {params.c_mult_dec:.3f}",
            f"C-Multiplier Min Threshold       : {params.c_mult_min:.3f}",
            f"Covariance Memory (eta_cov)      : {params.eta_cov:.3f}",
            f"Mean Shift Memory (eta_shift)    : {params.eta_shift:.3f}",
            f"Mean Shift Fraction (alpha_shift): {params.alpha_shift:.3f}",
            f"Mean Shift Factor (gamma_shift)  : {params.gamma_shift:.3f}",
            f"Stagnant Iterations Threshold    : {params.stagnant_iterations_threshold}",
            _RULE + "\n",
        ]
        for line in lines:
            self._write_line(line)

    def _message(
        self, current_iteration: int, best_fitness: Fitness, best_individual: Sequence[float]
    ) -> str:
        if self.level is Verbosity.NONE:
            return ""
        if self.max_iterations is None:
            progress = f"Current Iteration: {current_iteration}"
        else:
            progress = f"Current Iteration: {current_iteration}/{self.max_iterations}"
        if self.level is Verbosity.A_LITTLE:
            return progress
        individual = ", ".join(f"{x:.6f}" for x in best_individual)
        return (
            f"{progress} | Best Fitness: {best_fitness.fitness:.6f}"
            f" | Best Individual: [{individual}]"
        )

    def report_iteration(
        self, current_iteration: int, best_fitness: Fitness, best_individual: Sequence[float]
    ) -> None:
        """Replace the previous progress line; only every tenth iteration is reported."""
        if current_iteration % 10 != 0:
            return
        output = self._message(current_iteration, best_fitness, best_individual)

        width = shutil.get_terminal_size(fallback=(80, 24)).columns or 80
        if self._last_message_length > 0:
            previous_lines = (self._last_message_length + width - 1) // width
            self.stream.write((_MOVE_UP + _CLEAR_LINE) * previous_lines)
            self.stream.write("\r")

        self._write_line(output)
        self.stream.flush()
        self._last_message_length = len(output)