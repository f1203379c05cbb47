"""CLI entrypoint: Typer app definition and command registration"""

import typer

from diffparse.cli.commands import parse_cmd, states_cmd, stats_cmd


app = typer.Typer(name="diffparse", no_args_is_help=True, help="Parse unified diffs into a navigable model")

app.command(name="parse")(parse_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="states")(states_cmd)
