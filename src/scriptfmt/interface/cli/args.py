from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from scriptfmt.domain.format_models import FormatMode
from scriptfmt.utils.i18n import i18n

# Options that map one-to-one onto configuration keys
_VALUE_OPTIONS = ("input_path", "output_path", "mode", "indent_size", "target_model")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the scriptfmt CLI.

    Value options default to None so that an option left out on the command
    line does not override the saved configuration.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(prog="scriptfmt", description=i18n.t("app.description"))

    io_group = p.add_argument_group("input / output")
    io_group.add_argument("-i", "--input", dest="input_path", metavar="PATH", help=i18n.t("cli.args.input"))
    io_group.add_argument("-o", "--output", dest="output_path", metavar="PATH", help=i18n.t("cli.args.output"))

    render = p.add_argument_group("rendering")
    render.add_argument("-m", "--mode", choices=[m.value for m in FormatMode], help=i18n.t("cli.args.mode"))
    render.add_argument("--minify", action="store_true", help=i18n.t("cli.args.minify"))
    render.add_argument("--indent", dest="indent_size", type=int, metavar="N", help=i18n.t("cli.args.indent"))

    report = p.add_argument_group("reporting")
    report.add_argument("--stats", action="store_true", help=i18n.t("cli.args.stats"))
    report.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    report.add_argument("--model", dest="target_model", metavar="NAME", help=i18n.t("cli.args.model"))

    settings = p.add_argument_group("configuration")
    settings.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    settings.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    settings.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    settings.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None marks a value left to the base
                        configuration.
    """
    overrides: Dict[str, Any] = {key: getattr(args, key) for key in _VALUE_OPTIONS}

    # --minify wins over --mode
    if args.minify:
        overrides["mode"] = FormatMode.MINIFY.value
    if args.stats:
        overrides["show_stats"] = True

    return overrides
