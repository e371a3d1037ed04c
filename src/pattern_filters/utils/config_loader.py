"""Load configuration from YAML, JSON, or TOML file and build filters from it."""

import json
from typing import Any, Mapping, Union

import yaml

try:
    import tomllib  # Python 3.11+
except ImportError:
    import toml as tomllib  # pip install toml

from ..errors import InvalidArgumentError
from ..filters.random_sampler import RandomSampler
from .seed import make_random_source

SECTION = "random_sampler"


def load_config(path: str):
    """Load configuration from YAML, JSON, or TOML file.

    :param str path: Path to the configuration file.
    :return dict: Parsed configuration dictionary.
    """
    path = str(path)
    if path.endswith((".yaml", ".yml")):
        with open(path, "r") as f:
            return yaml.safe_load(f)
    elif path.endswith(".json"):
        with open(path, "r") as f:
            return json.load(f)
    elif path.endswith(".toml"):
        if tomllib.__name__ == "toml":
            with open(path, "r") as f:
                return tomllib.load(f)
        with open(path, "rb") as f:
            return tomllib.load(f)
    else:
        raise InvalidArgumentError("Unsupported config file format. Use .yaml, .json, or .toml")


def sampler_from_config(config: Union[str, Mapping[str, Any]]):
    """Build a :class:`~pattern_filters.filters.random_sampler.RandomSampler`.

    The settings are read from a ``random_sampler`` section when present,
    otherwise from the top level of the mapping:

    .. code-block:: yaml

        random_sampler:
          fraction: 0.25
          seed: 42
          backend: numpy

    :param config: Path to a configuration file, or an already parsed mapping.
    :return RandomSampler: Sampler with its own seeded random source.
    """
    if not isinstance(config, Mapping):
        config = load_config(config)
    if config is None:
        raise InvalidArgumentError("Configuration is empty.")
    if not isinstance(config, Mapping):
        raise InvalidArgumentError(
            f"Configuration must be a mapping, got {type(config).__name__}."
        )
    settings = config.get(SECTION, config)
    if not isinstance(settings, Mapping):
        raise InvalidArgumentError(
            f"Section '{SECTION}' must be a mapping, got {type(settings).__name__}."
        )
    if "fraction" not in settings:
        raise InvalidArgumentError("Configuration must define 'fraction'.")

    source = make_random_source(
        seed=settings.get("seed"),
        backend=settings.get("backend", "python"),
    )
    return RandomSampler(settings["fraction"], source)
