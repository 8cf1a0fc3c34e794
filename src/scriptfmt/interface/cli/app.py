from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults or persisted preferences, then CLI overrides, then validation),
reading the source, formatting it and rendering the result.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from scriptfmt.core.formatting.service import format_source
from scriptfmt.core.validator import validate_config
from scriptfmt.domain.config import get_default_config, load_config, save_config
from scriptfmt.domain.format_models import FormatResult, FormatStats
from scriptfmt.infra.fs import normalize_path, read_text, write_text
from scriptfmt.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from scriptfmt.interface.cli import args as cli_args
from scriptfmt.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing input,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only; --debug also keeps a rotating log file)
    if args.debug:
        configure_logging(LoggingConfig(level="DEBUG", log_file=get_default_log_path()))
    else:
        configure_logging(LoggingConfig(level="WARNING"))

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        if save_config(conf):
            print(i18n.t("cli.status.saved"), file=sys.stderr)

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Source acquisition
    input_path = normalize_path(conf["input_path"])
    output_path = normalize_path(conf["output_path"])
    try:
        if input_path:
            if not os.path.isfile(input_path):
                msg = i18n.t("cli.errors.path_not_exist", path=input_path)
                logger.error(msg)
                print(f"ERROR: {msg}", file=sys.stderr)
                return 2
            source = read_text(input_path)
        else:
            source = sys.stdin.read()
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return 130
    except (OSError, UnicodeDecodeError) as e:
        msg = i18n.t("cli.errors.read_fail", path=input_path or "<stdin>", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 5. Formatting
    logger.debug(f"Formatting {len(source)} chars in {conf['mode']} mode")
    try:
        result = format_source(
            source,
            conf["mode"],
            indent_size=conf["indent_size"],
            with_stats=conf["show_stats"],
            target_model=conf["target_model"],
        )
    except Exception as e:
        msg = i18n.t("cli.errors.format_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1
    if result.fallback:
        print(i18n.t("cli.status.fallback", mode=result.mode.value), file=sys.stderr)

    # 6. Output rendering (--json replaces the text with the whole result)
    payload = result.output
    if args.json_output:
        payload = json.dumps(_result_to_dict(result), ensure_ascii=False, indent=2)
    if output_path:
        ok, err = write_text(output_path, payload)
        if not ok:
            msg = i18n.t("cli.errors.write_fail", path=output_path, error=err)
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 1
        logger.info(i18n.t("cli.status.written", path=output_path))
    else:
        sys.stdout.write(payload)
        if payload and not payload.endswith("\n"):
            sys.stdout.write("\n")

    if conf["show_stats"] and result.stats and not args.json_output:
        _print_stats(result.stats)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into the base config."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _result_to_dict(result: FormatResult) -> Dict[str, Any]:
    data = asdict(result)
    data["mode"] = result.mode.value
    return data


def _print_stats(stats: FormatStats) -> None:
    """Write the statistics report to stderr, keeping stdout clean for piping."""
    out = sys.stderr
    print(f"\n{i18n.t('cli.stats.title')}", file=out)
    print(f"  {i18n.t('cli.stats.input_size', value=stats.input_bytes)}", file=out)
    print(f"  {i18n.t('cli.stats.output_size', value=stats.output_bytes)}", file=out)
    print(f"  {i18n.t('cli.stats.input_lines', value=stats.input_lines)}", file=out)
    print(f"  {i18n.t('cli.stats.output_lines', value=stats.output_lines)}", file=out)
    if stats.compression_ratio is not None:
        print(f"  {i18n.t('cli.stats.compression', value=stats.compression_ratio)}", file=out)
    print(f"  {i18n.t('cli.stats.tokens', before=stats.input_tokens, after=stats.output_tokens)}", file=out)


if __name__ == "__main__":
    sys.exit(main())
