# lineage_metagen/cli.py

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from .config import OUTPUT_FORMATS, MetadataConfig
from .errors import MetadataConfigError, MetadataGenError
from .generator import MetadataGenerator
from .writers import get_writer

PREFIX = "[lineage-metagen]"

# Flag destination -> (environment variable, type)
ENV_SETTINGS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "runs": ("METAGEN_RUNS", int),
    "bytes_per_event": ("METAGEN_BYTES_PER_EVENT", int),
    "inputs_per_event": ("METAGEN_INPUTS_PER_EVENT", int),
    "bytes_per_input": ("METAGEN_BYTES_PER_INPUT", int),
    "outputs_per_event": ("METAGEN_OUTPUTS_PER_EVENT", int),
    "bytes_per_output": ("METAGEN_BYTES_PER_OUTPUT", int),
    "output": ("METAGEN_OUTPUT", str),
    "output_format": ("METAGEN_OUTPUT_FORMAT", str),
    "namespace": ("METAGEN_NAMESPACE", str),
    "time_zone": ("METAGEN_TIME_ZONE", str),
    "producer": ("METAGEN_PRODUCER", str),
    "seed": ("METAGEN_SEED", int),
}


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lineage-metagen",
        description="Generate random source, dataset, and job metadata using the OpenLineage standard.",
    )

    parser.add_argument(
        "--runs",
        type=int,
        default=None,
        help="Limits runs up to N; each run emits a START and a COMPLETE event (default: 25).",
    )
    parser.add_argument(
        "--bytes-per-event",
        type=int,
        default=None,
        help="Approximate size (in bytes) of each START event (default: 25212).",
    )
    parser.add_argument(
        "--inputs-per-event",
        type=int,
        default=None,
        help="Limits inputs per event to N (default: 4).",
    )
    parser.add_argument(
        "--bytes-per-input",
        type=int,
        default=None,
        help="Size (in bytes) per input; accepted but not yet used to size schemas.",
    )
    parser.add_argument(
        "--outputs-per-event",
        type=int,
        default=None,
        help="Limits outputs per event to N (default: 2).",
    )
    parser.add_argument(
        "--bytes-per-output",
        type=int,
        default=None,
        help="Size (in bytes) per output; accepted but not yet used to size schemas.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="The output metadata file (default: metadata.json).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        default=None,
        choices=list(OUTPUT_FORMATS),
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--namespace",
        type=str,
        default=None,
        help="Namespace shared by all jobs and datasets (default: random).",
    )
    parser.add_argument(
        "--time-zone",
        type=str,
        default=None,
        help="Reference time zone for event and nominal times (default: America/Los_Angeles).",
    )
    parser.add_argument(
        "--producer",
        type=str,
        default=None,
        help="Producer URI stamped on every event and facet.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source, for reproducible batches.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=os.getenv("METAGEN_CONFIG"),
        help="Optional YAML file of metagen_* settings (default: METAGEN_CONFIG).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)


def _resolve_param(cli_value: Any, env_key: str, cast: Callable[[str], Any]) -> Any:
    if cli_value is not None:
        return cli_value
    val = os.getenv(env_key)
    if val:
        try:
            return cast(val)
        except ValueError as exc:
            raise MetadataConfigError(f"Invalid value for {env_key}: {val!r}") from exc
    return None


def _build_config(args: argparse.Namespace) -> MetadataConfig:
    """Resolve settings as flag, then environment, then YAML file, then defaults."""

    base = MetadataConfig.from_yaml(Path(args.config)) if args.config else MetadataConfig()
    overrides = {
        dest: _resolve_param(getattr(args, dest), env_key, cast)
        for dest, (env_key, cast) in ENV_SETTINGS.items()
    }
    config = base.merged(**overrides)
    config.validate()
    return config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _build_config(args)
        generator = MetadataGenerator(config=config)
        events = generator.generate()
    except MetadataGenError as e:
        print(f"{PREFIX} ERROR: {e}", file=sys.stderr)
        return 1

    writer = get_writer(config.output_format, config.output)
    try:
        written = writer.write(events)
    except MetadataGenError as e:
        print(f"{PREFIX} ERROR while writing events: {e}", file=sys.stderr)
        return 1

    print(f"{PREFIX} Wrote {written} events ({config.runs} runs) to {writer.path}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
