from __future__ import annotations

import typer

from .commands import api_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="chimp",
        help="chimp CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("ping")(api_cmd.ping)
    app.command("request")(api_cmd.request)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs, including request dumps."),
    ):
        setup_logging(verbose)
        ctx.obj = {"debug": verbose}

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
