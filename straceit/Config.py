import logging
import os
import sys
from dataclasses import dataclass

TRUTHY_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUTHY_VALUES


@dataclass(slots=True)
class Config:
    verbose: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """
        Builds a Config from the STRACEIT_VERBOSE and STRACEIT_DEBUG environment variables.
        Any of "1", "true", "yes" or "on" (case-insensitive) enables a flag; anything else, or a missing variable, disables it.
        Returns:
            Config: The configuration read from the environment.
        """
        return cls(verbose=_env_flag("STRACEIT_VERBOSE"), debug=_env_flag("STRACEIT_DEBUG"))


def configure_logging(config: Config) -> None:
    """
    Sets up the root logger for a straceit run. Diagnostics such as "no I/O with ..." are only shown when debug is on.
    Args:
        config (Config): The configuration holding the debug flag.
    """
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)-5.5s] %(name)s\t %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
