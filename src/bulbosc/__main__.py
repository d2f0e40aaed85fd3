import argparse
import logging
import sys
from collections.abc import Sequence

from bulbosc.config import load_config
from bulbosc.config.helpers import get_log_level
from bulbosc.core import Bridge
from bulbosc.exceptions import ConfigError, FatalError, FetchError
from bulbosc.logging_ import enable_logging

LOGGER = logging.getLogger("bulbosc.__main__")


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bulbosc", description="Forward a smart bulb's state to VRChat over OSC")
    parser.add_argument(
        "--config-file",
        "-c",
        type=str,
        default=None,
        help="Path to the settings file (YAML or TOML), defaults to settings.yaml",
    )
    parser.add_argument(
        "--env-file",
        "--env",
        "-e",
        type=str,
        default=None,
        help="Path to the environment file, defaults to .env",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> None:
    """Load the configuration and run the bridge forever.

    Raises:
        FatalError: On configuration or state fetch failure.
    """
    args = get_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level

    config = load_config(config_file=args.config_file, env_file=args.env_file, **overrides)
    enable_logging(config.log_level)

    Bridge(config).run_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point, returns the process exit code."""
    enable_logging(get_log_level())

    try:
        run(argv)
    except ConfigError as e:
        LOGGER.critical("Loading configuration failed: %s", e)
        return 1
    except FetchError as e:
        LOGGER.critical("Getting bulb state failed: %s", e)
        return 1
    except FatalError as e:
        LOGGER.critical("Startup failed: %s", e)
        return 1
    except KeyboardInterrupt:
        LOGGER.info("Interrupted, exiting")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
