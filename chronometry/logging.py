"""Logging helpers for applications using chronometry."""

import logging


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with a terse format.

    Parameters mirror ``logging.basicConfig``; pass ``force=True`` to
    reconfigure during tests. ``level`` also accepts a level name such as
    ``Settings.log_level``.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
