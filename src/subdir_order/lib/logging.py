import logging
from pathlib import Path


def setup_logging(
    log_path: Path | None = None,
    mode: str = "a",
    quiet: bool = False,
    verbose: bool = False,
) -> None:
    """Configure logging for a planning run.

    Messages go to stderr unless ``quiet`` is true, and additionally to
    ``log_path`` when one is given. ``verbose`` lowers the level to DEBUG so
    cache hits and resolver passes are shown.
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = []
    if log_path is not None:
        handlers.append(logging.FileHandler(log_path, mode=mode))
    if not quiet:
        handlers.append(logging.StreamHandler())
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=handlers,
    )

    # warnings.warn() from the loader should land in the same log
    logging.captureWarnings(True)
