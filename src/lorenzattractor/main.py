"""
Application Initialization
==========================
This module constructs the Model / View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the per-run options from the command line.
2. Instantiates the Data Model (LorenzState) and computes the first trajectory.
3. Instantiates the Main Window (View), passing the model into it.
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import List, Optional

from lorenzattractor.config import LORENZ_POINTS, DEFAULT_SPEED, WINDOW_TITLE
from lorenzattractor.logging_config import setup_logging
from lorenzattractor.model.animation import AnimationController
from lorenzattractor.model.colors import ColorMode
from lorenzattractor.model.state import LorenzState

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lorenz-attractor",
        description="Interactive 3D visualization of the Lorenz attractor.",
    )
    parser.add_argument("--points", type=int, default=LORENZ_POINTS,
                        help=f"number of integration steps (default: {LORENZ_POINTS})")
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED,
                        help=f"seconds to reveal the whole trajectory (default: {DEFAULT_SPEED})")
    parser.add_argument("--color", choices=[m.name.lower() for m in ColorMode], default="fade",
                        help="initial color mode (default: fade)")
    parser.add_argument("--no-animate", action="store_true",
                        help="start with the whole trajectory shown")
    parser.add_argument("--loop", action="store_true",
                        help="replay the reveal after it completes")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")

    args = parser.parse_args(argv)
    if args.points <= 0:
        parser.error("--points must be positive")
    return args


def build_state(args: argparse.Namespace) -> LorenzState:
    """Creates the model from parsed options."""
    animation = AnimationController(
        total=args.points,
        speed_seconds=args.speed,
        enabled=not args.no_animate,
        loop=args.loop,
    )
    return LorenzState(
        n_points=args.points,
        color_mode=ColorMode[args.color.upper()],
        animation=animation,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # Qt is imported late so the model stays usable without a display
    from PySide6.QtWidgets import QApplication
    from lorenzattractor.view.main_window import MainWindow

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(WINDOW_TITLE)

    # 3. Initialize the Data Model
    state = build_state(args)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
