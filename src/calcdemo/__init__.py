from __future__ import annotations

from typing import Any, Mapping

import click
from quart import Quart

from .__about__ import __version__ as __version__
from .config import load_config
from .logging import configure_logging
from .views import blueprint


def create_app(config: Mapping[str, Any] | None = None) -> Quart:
    """Create the calculator app.

    Arguments:
        config: Configuration values that override both the defaults
            and the ``CALCDEMO_`` environment variables.
    """
    app = Quart(__name__)
    load_config(app.config, dict(config) if config is not None else None)
    configure_logging(app)

    app.register_blueprint(blueprint, url_prefix=app.config["CALC_URL_PREFIX"])

    return app


@click.command("calcdemo", short_help="Serve the calculator.")
@click.option("--host", "-h", default=None, help="The interface to bind to.")
@click.option("--port", "-p", default=None, type=int, help="The port to bind to.")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode and reloading.")
def run(host: str | None, port: int | None, debug: bool) -> None:
    """Run the calculator with the built-in Hypercorn server."""
    overrides: dict[str, Any] = {}
    if host is not None:
        overrides["HOST"] = host
    if port is not None:
        overrides["PORT"] = port
    if debug:
        overrides["DEBUG"] = True

    app = create_app(overrides)
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.debug,
        use_reloader=app.debug,
    )
