from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from hangul_composer.controllers.transliteration_controller import TransliterationController
from hangul_composer.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-compose",
        description="Compose decomposed Hangul jamo (and dictionary words) into syllables.",
    )
    parser.add_argument("text", nargs="*", help="Text to compose. Reads --file or stdin when omitted.")
    parser.add_argument("--file", type=Path, help="Read input lines from this file.")
    parser.add_argument("--settings", type=Path, help="Path to settings.yaml.")
    parser.add_argument("--dictionary", type=Path, help="Pronunciation dictionary YAML (overrides settings).")
    parser.add_argument("--jamo", action="store_true", help="Compose only; skip the dictionary lookup.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _read_lines(args: argparse.Namespace) -> list[str] | None:
    if args.text:
        return [" ".join(args.text)]
    if args.file is not None:
        try:
            return args.file.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeError) as e:
            logger.error("Cannot read %s: %s", args.file, e)
            return None
    return sys.stdin.read().splitlines()


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    store = SettingsStore(args.settings)
    settings = store.composer_settings()
    if args.dictionary is not None:
        settings = replace(settings, dictionary_path=args.dictionary)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Settings loaded from %s: %s", store.path, settings)

    lines = _read_lines(args)
    if lines is None:
        return 1

    controller = TransliterationController.from_settings(settings)
    for line in lines:
        if args.jamo:
            print(controller.compose_only(line))
        else:
            print(controller.transliterate(line))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
