"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

import argparse

from . import ui_messages as ui
from .contracts import DEFAULT_MINIMUM_TOKENS, cli_help_epilog
from .languages import DEFAULT_LANGUAGE, Language


class _HelpFormatter(
    argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter
):
    pass


def build_parser(version: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cpdrate",
        description="Duplication rates between two source trees from PMD CPD.",
        formatter_class=_HelpFormatter,
        epilog=cli_help_epilog(),
    )
    ap.add_argument(
        "--version",
        action="version",
        version=ui.version_output(version),
        help=ui.HELP_VERSION,
    )

    target_group = ap.add_argument_group("Target")
    target_group.add_argument("-r", "--root", required=True, help=ui.HELP_ROOT)
    target_group.add_argument("-s", "--source", required=True, help=ui.HELP_SOURCE)
    target_group.add_argument(
        "-d", "--destination", required=True, help=ui.HELP_DESTINATION
    )

    tune_group = ap.add_argument_group("Analysis Tuning")
    tune_group.add_argument(
        "-l",
        "--language",
        default=DEFAULT_LANGUAGE.value,
        choices=[lang.value for lang in Language],
        help=ui.HELP_LANGUAGE,
    )
    tune_group.add_argument(
        "--minimum-tokens",
        type=int,
        default=DEFAULT_MINIMUM_TOKENS,
        help=ui.HELP_MINIMUM_TOKENS,
    )
    tune_group.add_argument(
        "--report",
        metavar="FILE",
        default=None,
        help=ui.HELP_REPORT,
    )
    tune_group.add_argument(
        "--count-blank",
        action="store_true",
        help=ui.HELP_COUNT_BLANK,
    )

    out_group = ap.add_argument_group("Reporting")
    out_group.add_argument(
        "--text",
        dest="text_out",
        metavar="FILE",
        help=ui.HELP_TEXT,
    )
    out_group.add_argument(
        "--show-files",
        action="store_true",
        help=ui.HELP_SHOW_FILES,
    )
    out_group.add_argument(
        "--no-color",
        action="store_true",
        help=ui.HELP_NO_COLOR,
    )
    out_group.add_argument(
        "--quiet",
        action="store_true",
        help=ui.HELP_QUIET,
    )
    out_group.add_argument(
        "--debug",
        action="store_true",
        help=ui.HELP_DEBUG,
    )
    return ap
