import logging
import sys
import os
import argparse
from dataclasses import replace
from PySide6.QtWidgets import QApplication
from config.config_manager import ConfigManager
from gui.preview_window import PreviewWindow


def setup_logging(log_level):
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    log_dir = os.path.expanduser("~/.ratingcontrol")
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "ratingcontrol.log")
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a"),
            logging.StreamHandler(sys.stdout)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview the star-rating control.")
    parser.add_argument('--rating', type=int, default=None,
                        help='Initial rating. Defaults to preview.initial_rating from the config.')
    parser.add_argument('--maximum', type=int, default=None,
                        help='Number of selectable slots (overrides rating.maximum_rating).')
    parser.add_argument('--label', default=None,
                        help='Text shown before the icons (overrides rating.label).')
    parser.add_argument(
        '--constant',
        action='store_true',
        default=False,
        help='Bind the control to a constant value; taps do not change it.'
    )
    parser.add_argument('--config', default=None, help='Path to a YAML config file.')
    return parser


def configured_initial_rating(config_manager) -> int:
    raw = config_manager.get("preview.initial_rating", 0)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for preview.initial_rating: {raw!r}") from exc


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config_manager = ConfigManager(args.config)
    except ValueError as exc:
        print(f"rating-preview: {exc}", file=sys.stderr)
        return 1

    logging_level = config_manager.get("logging_level", "INFO")
    setup_logging(logging_level)

    logging.info("Starting rating preview")

    try:
        style = config_manager.rating_style()
        initial_rating = args.rating
        if initial_rating is None:
            initial_rating = configured_initial_rating(config_manager)
    except ValueError as exc:
        logging.error(str(exc))
        return 1
    if args.maximum is not None:
        style = replace(style, maximum_rating=args.maximum)
    if args.label is not None:
        style = replace(style, label=args.label)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Rating Preview")

    window = PreviewWindow(config_manager, style, initial_rating, constant=args.constant)
    window.show()
    logging.info(f"[startup] window shown (maximum={style.maximum_rating}, rating={initial_rating})")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
