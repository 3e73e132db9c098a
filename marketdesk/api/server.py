"""
Server bootstrap.

Binds the listening socket ourselves so a busy port can be skipped:
starting at the configured port, each "address in use" moves on to the
next port, up to PORT_RETRIES extra attempts. Any other bind error, or
running out of ports, exits with status 1.

Usage:
    python -m marketdesk                      # PORT env or 3000
    python -m marketdesk --port 8080
    marketdesk --host 127.0.0.1 --log-level debug
"""

import argparse
import errno
import socket

import uvicorn

from marketdesk.api.config import ServerConfig, config as default_config
from marketdesk.api.main import create_app
from marketdesk.utils import log

DEFAULT_RETRIES = 10


def _bind(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def bind_socket(host: str, port: int, retries: int = DEFAULT_RETRIES) -> socket.socket:
    """
    Bind a listening socket at ``port`` or one of the next ``retries`` ports.

    Raises:
        SystemExit: with code 1 when no port could be bound
    """
    for attempt in range(retries + 1):
        candidate = port + attempt
        try:
            return _bind(host, candidate)
        except OSError as e:
            if e.errno == errno.EADDRINUSE and attempt < retries:
                log.warn(f"Port {candidate} in use, trying {candidate + 1}")
                continue
            log.err(f"Failed to start server: {e}")
            raise SystemExit(1)
    raise SystemExit(1)


def serve(server_config: ServerConfig = default_config, host: str | None = None,
          port: int | None = None, log_level: str | None = None) -> None:
    """Bind with port retry and run uvicorn on the bound socket."""
    host = host or server_config.HOST
    port = port if port is not None else server_config.PORT
    log_level = log_level or server_config.LOG_LEVEL

    log.header("marketdesk API")
    logger = log.setup_verbose_logging("marketdesk")
    logger.info(f"Log file: {logger.handlers[-1].baseFilename}")

    log.step(f"Binding {host}:{port}")
    sock = bind_socket(host, port, retries=server_config.PORT_RETRIES)
    bound_port = sock.getsockname()[1]

    creds = server_config.credentials_env
    log.summary_table("Providers (environment)", [
        ("Finnhub", "configured" if creds["finnhubKey"] else "-"),
        ("NewsAPI", "configured" if creds["newsApiKey"] else "-"),
        ("RSS feed", creds["fxFactoryRss"] or "-"),
        ("TradingEconomics", "configured" if creds["tradingEconomicsUser"] and creds["tradingEconomicsKey"] else "-"),
        ("Settings file", str(server_config.SETTINGS_FILE)),
    ])
    log.ok(f"Server running on http://localhost:{bound_port}")

    app = create_app(server_config)
    uv_config = uvicorn.Config(app, host=host, port=bound_port, log_level=log_level)
    uvicorn.Server(uv_config).run(sockets=[sock])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the marketdesk API server")
    parser.add_argument("--host", type=str, default=None, help="Interface to bind (default: HOST env or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="First port to try (default: PORT env or 3000)")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["critical", "error", "warning", "info", "debug"],
                        help="uvicorn log level")
    args = parser.parse_args(argv)

    serve(host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
