"""Main CLI application using Cyclopts."""

import cyclopts

from tripproxy.cli.commands import probe, serve

app = cyclopts.App(
    name="tripproxy",
    help="Trip details proxy - CLI",
)

app.command(serve.app, name="serve")
app.command(probe.app, name="probe")
