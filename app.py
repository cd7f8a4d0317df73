import logging
import os
import socket

from facet_browser.logging_config import configure_logging
from facet_browser.ui.dash_app import create_dash_app

PORT_SEARCH_SPAN = 100

configure_logging()
logger = logging.getLogger("facet_browser.app")

app = create_dash_app(os.getenv("FACET_BROWSER_CONFIG", "config"))
server = app.server


def _port_in_use(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(("localhost", port)) == 0


def find_free_port(start_port: int) -> int:
    """First port in [start_port, start_port + PORT_SEARCH_SPAN) nobody listens on."""
    for port in range(start_port, start_port + PORT_SEARCH_SPAN):
        if not _port_in_use(port):
            return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Preferred port taken, using next free port",
            extra={"preferred_port": preferred_port, "port": port},
        )

    logger.info("Starting server", extra={"port": port, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
