"""Fire sample requests at a running proxy and print what comes back."""

import sys

import cyclopts
import httpx

from tripproxy.cli.console import Console

app = cyclopts.App(name="probe", help="Send sample requests to a running proxy")

DEFAULT_PATHS = (
    "/fetch-all",
    "/fetch-paginated?page=1&limit=2",
    "/fetch-sorted?sortOrder=asc&sortKey=id",
    "/fetch-sorted-paginated?sortOrder=desc&sortKey=price&page=1&limit=2",
)


def probe_endpoint(client: httpx.Client, path: str) -> tuple[int, object]:
    """GET one path and return (status, decoded body)."""
    response = client.get(path)
    try:
        body = response.json()
    except ValueError:
        body = response.text
    return response.status_code, body


@app.default
def probe(
    *paths: str,
    base_url: str = "http://localhost:3000",
    timeout: float = 30.0,
    quiet: bool = False,
) -> None:
    """Probe proxy endpoints.

    Args:
        paths: Paths (with query string) to request. Defaults to one request per route.
        base_url: Where the proxy listens.
        timeout: Per-request timeout in seconds.
        quiet: Only print the status line for each request.
    """
    console = Console(quiet=quiet)
    console.info(f"Probing {base_url}")
    failures = 0

    with httpx.Client(base_url=base_url, timeout=timeout) as client:
        for path in paths or DEFAULT_PATHS:
            try:
                status, body = probe_endpoint(client, path)
            except httpx.HTTPError as e:
                console.error(f"{path}: {e!r}", hint=f"Is the proxy running on {base_url}?")
                failures += 1
                continue

            if status >= 400:
                console.error(f"{path} -> {status}")
                failures += 1
            else:
                size = len(body) if isinstance(body, list) else "?"
                console.success(f"{path} -> {status} ({size} records)")
            console.json(body)

    if failures:
        sys.exit(1)
