"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import config_cmd, diff_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-based text diff")

app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="config")(config_cmd)
