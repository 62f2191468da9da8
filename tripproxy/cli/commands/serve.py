"""Run the proxy listener."""

import cyclopts
import logfire
import uvicorn

from tripproxy.config import Config

app = cyclopts.App(name="serve", help="Run the proxy in the foreground")


@app.default
def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the HTTP listener.

    Args:
        host: Host to bind to. Defaults to server.host from config.
        port: Port to listen on. Defaults to server.port from config (3000).
    """
    config = Config()  # type: ignore[call-arg]

    # Logfire must be configured before the app instruments itself
    logfire.configure(service_name="tripproxy", send_to_logfire="if-token-present")

    uvicorn.run(
        "tripproxy.application.api.rest.app:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        log_config=None,  # configure_logging() owns the handlers
    )
