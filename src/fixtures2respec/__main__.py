"""Entry point for fixtures2respec."""

from __future__ import annotations

import logging

from fixtures2respec import startup
from fixtures2respec.cli import run as run_cli


def main() -> None:
    """Application entry point.

    Call like:
    ```
    python -m fixtures2respec --config my_settings.toml
    fixtures2respec --respec-html spec.html --fixtures-folder fixtures/
    ```
    """

    # Set up logging and user folder scaffold.
    log: logging.Logger = startup.initialize_application()

    try:
        run_cli()
    except Exception:
        log.exception("Unhandled exception - program crashed.")  # Logs full traceback
        raise  # Still crash, but now it's logged


if __name__ == "__main__":

    main()
