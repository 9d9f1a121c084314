"""Entry point running both demo variants in a fixed order."""

import logging
import typing as tp

from funcprimer.data.fixtures import NUMBERS, PATIENTS
from funcprimer.demos import patients as patient_demos
from funcprimer.demos import scalars as scalar_demos
from funcprimer.logger.logger import setup_logger

__all__ = ["run_routines", "main"]

logger = logging.getLogger(__name__)


def run_routines(
    title: str,
    routines: tp.Sequence[tp.Callable[[tp.Any], tp.List[str]]],
    data: tp.Any,
) -> tp.List[str]:
    """Run ``routines`` over ``data`` and collect their reports.

    Each routine's lines are kept together and separated from the next
    routine's by a blank line.

    Args:
        title: First line of the report.
        routines: Demo routines, run in the given order.
        data: Shared, read-only input passed to every routine.

    Returns:
        The report lines.
    """
    lines = [title]
    for routine in routines:
        logger.debug(f"Running {routine.__module__}.{routine.__name__}")
        report = routine(data)
        logger.debug(f"Finished {routine.__name__} with {len(report)} lines")
        lines.append("")
        lines.extend(report)
    return lines


def main() -> None:
    """Print the patient demos followed by the number demos."""
    setup_logger()
    sections = (
        (patient_demos.TITLE, patient_demos.ROUTINES, PATIENTS),
        (scalar_demos.TITLE, scalar_demos.ROUTINES, NUMBERS),
    )
    for index, (title, routines, data) in enumerate(sections):
        if index:
            print()
        for line in run_routines(title, routines, data):
            print(line)


if __name__ == "__main__":
    main()
