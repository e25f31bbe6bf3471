"""poststyle CLI entry point.

Allows running via ``python -m poststyle`` and provides the console script
defined in ``pyproject.toml``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import platformdirs

from .constants import ComposerConstants
from .templates import template_ids
from .version import get_version_string

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poststyle",
        description="Compose social media posts with Unicode bold and italic.",
    )
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("--template", choices=template_ids(), help="start from a template")
    parser.add_argument("--no-restore", action="store_true", help="ignore the saved draft")
    parser.add_argument("--no-drafts", action="store_true", help="neither restore nor save drafts")
    parser.add_argument("--config-dir", type=Path, help="settings directory (default: user config dir)")
    parser.add_argument("--draft-dir", type=Path, help="draft directory (default: user data dir)")
    parser.add_argument("--debug", action="store_true", help="write a debug log to the user log dir")
    return parser


def configure_logging(debug: bool) -> Optional[Path]:
    """Log to a file when debugging; the terminal belongs to the UI."""
    if not debug:
        logging.getLogger().addHandler(logging.NullHandler())
        return None
    log_dir = Path(platformdirs.user_log_dir(ComposerConstants.APP_NAME, ComposerConstants.APP_AUTHOR))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "poststyle.log"
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return log_file


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.version:
        print(get_version_string())
        return

    log_file = configure_logging(args.debug)

    # Lazy imports keep --version free of UI dependencies
    from .composer import Composer
    from .drafts import DraftStore
    from .settings_persistence import SettingsPersistence
    from .textual_app import run

    settings = SettingsPersistence(args.config_dir).load()
    draft_store = None if args.no_drafts else DraftStore(args.draft_dir)
    composer = Composer(settings, draft_store=draft_store)

    if args.template:
        composer.load_template(args.template)
    elif settings.restore_draft and not args.no_restore:
        composer.restore_draft()

    logger.debug("Starting composer (log: %s)", log_file)
    run(composer)


if __name__ == "__main__":  # pragma: no cover
    main()
