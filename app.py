import logging
import os
import socket

from elle_browser.ui.dash_app import create_dash_app
from elle_browser.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("elle_browser.app")

CONFIG_ROOT = os.getenv("ELLE_BROWSER_CONFIG_ROOT", "config")

app = create_dash_app(CONFIG_ROOT)
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port from start_port up that nothing on localhost is listening on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    preferred_port = int(os.getenv("PORT", "8050"))
    debug = os.getenv("DEBUG", "0") == "1"

    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning(
            "Preferred port taken, using next free one",
            extra={"preferred_port": preferred_port, "port": port},
        )

    logger.info(
        "Starting ELLE browser",
        extra={"host": host, "port": port, "debug": debug, "config_root": CONFIG_ROOT},
    )
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
