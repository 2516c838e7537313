from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from quart import Config  # noqa

ENV_PREFIX = "CALCDEMO"

DEFAULTS: dict[str, Any] = {
    "HOST": "127.0.0.1",
    "PORT": 5000,
    "LOG_LEVEL": None,
    "CALC_URL_PREFIX": "",
}


def load_config(config: Config, overrides: dict[str, Any] | None = None) -> None:
    """Populate the app config in order of increasing precedence.

    The defaults come first, then any ``CALCDEMO_`` prefixed environment
    variables, and finally the explicit *overrides*.

    Arguments:
        config: The :class:`quart.Config` to update.
        overrides: Values that take precedence over everything else.
    """
    config.update(DEFAULTS)
    config.from_prefixed_env(ENV_PREFIX)
    if overrides is not None:
        config.update(overrides)
    config["PORT"] = int(config["PORT"])
