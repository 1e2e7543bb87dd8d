"""Command line entry point: render an engine snapshot's regions to SVG."""

import logging
import sys

from dots_regions.config import settings
from dots_regions.engine import SnapshotEngine
from dots_regions.regions.svg import render_regions_svg
from dots_regions.session import GameSession


def setup_logging() -> None:
    """Configure logging for the renderer."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Render ``<snapshot.json> [output.svg]``; returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    logger = logging.getLogger(__name__)
    if not 1 <= len(args) <= 2:
        logger.error("Usage: dots-regions <snapshot.json> [output.svg]")
        return 2

    try:
        engine = SnapshotEngine.load(args[0])
    except (OSError, ValueError, KeyError, TypeError):
        logger.exception("Could not read snapshot %s", args[0])
        return 1

    session = GameSession(engine, settings)
    frame = session.frame
    document = render_regions_svg(frame.regions, frame.width, frame.height, settings)

    if len(args) == 2:
        try:
            with open(args[1], "w", encoding="utf-8") as f:
                f.write(document)
        except OSError:
            logger.exception("Could not write %s", args[1])
            return 1
        logger.info("Wrote %d regions to %s", len(frame.regions), args[1])
    else:
        sys.stdout.write(document)
    return 0


def run() -> None:
    """Entry point for the renderer."""
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
