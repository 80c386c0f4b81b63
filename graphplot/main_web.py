import argparse
import sys

import uvicorn

from graphplot.config import Config
from graphplot.exceptions import GraphPlotError
from graphplot.logger import session_logger
from graphplot.web_server import GraphPlotWebServer

logger = session_logger


def main() -> None:
    parser = argparse.ArgumentParser(description="graphplot Web Server - chart data REST API")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: 0.0.0.0, or GRAPHPLOT_WEB_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: 8020, or GRAPHPLOT_WEB_PORT env var)",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Default palette theme (default: neon, or GRAPHPLOT_THEME env var)",
    )
    args = parser.parse_args()

    try:
        logger.set_level(Config.get_log_level())
        host = args.host or Config.get_web_host()
        port = args.port or Config.get_web_port()
        server = GraphPlotWebServer(default_theme=args.theme)
    except GraphPlotError as e:
        logger.error("FATAL: startup failed", error=e.message, code=e.code)
        sys.exit(1)

    logger.info("Starting graphplot web server", host=host, port=port)
    uvicorn.run(server.app, host=host, port=port)


if __name__ == "__main__":
    main()
