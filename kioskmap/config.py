import os
from contextlib import contextmanager
from copy import copy
from typing import Any, Literal, Optional, TypedDict

cache_dir = os.environ.get("KIOSKMAP_CACHE_DIR") or None

Config = TypedDict(
    "Config",
    {
        "cache": Optional[str],
        "fit.padding": float,
        "fit.max_scale": float,
        "inactivity.timeout": float,
        "api.base_url": Optional[str],
        "adapters.http.basic_authentication": Optional[Any],
    },
)

# https://github.com/python/mypy/issues/6262
CONFIG_KEYS = Literal[
    "cache",
    "fit.padding",
    "fit.max_scale",
    "inactivity.timeout",
    "api.base_url",
    "adapters.http.basic_authentication",
]


class PartialConfig(Config, total=False):
    pass


_default_config: Config = {
    "cache": cache_dir,
    "fit.padding": 100.0,
    "fit.max_scale": 1.5,
    "inactivity.timeout": 60.0,
    "api.base_url": os.environ.get("KIOSKMAP_API_URL"),
    "adapters.http.basic_authentication": None,
}

config = copy(_default_config)


def reset_config():
    for key, value in _default_config.items():
        set_config(key, value)  # type: ignore


def set_config(key: CONFIG_KEYS, value: Any):
    if key in config:
        config[key] = value
    else:
        raise KeyError(f"Non existing config '{key}'")


def get_config(key: Optional[CONFIG_KEYS] = None):
    if key is None:
        return config
    elif key in config:
        return config[key]  # type: ignore
    else:
        raise KeyError(f"Non existing config '{key}'")


@contextmanager
def config_context(*args):
    """Set some config items for within a certain context. Code borrowed partly from
    pandas."""
    if len(args) % 2 != 0 or len(args) < 2:
        raise ValueError(
            "Need to invoke as config_context(key, value, [(key, value), ...])."
        )

    configs = list(zip(args[::2], args[1::2]))

    undo = {key: get_config(key) for key, _ in configs}
    try:
        for key, value in configs:
            set_config(key, value)

        yield

    finally:
        for key, value in undo.items():
            set_config(key, value)
