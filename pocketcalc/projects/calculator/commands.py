"""Flask CLI commands for the Calculator project"""

import click

from pocketcalc.projects.calculator.core.keys import UnknownKeyError
from pocketcalc.projects.calculator.core.state import CalculatorState, press


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("press-keys")
    @click.argument("labels", nargs=-1, required=True)
    @click.option("--quiet", "-q", is_flag=True, help="Only print the final display.")
    def press_keys(labels, quiet):
        """
        Run keypad labels through a fresh calculator.

        Example: flask press-keys 5 + 3 =

        Each label is echoed with the display it produces. ASCII aliases are
        accepted for the operators (- * /).
        """
        state = CalculatorState()
        for label in labels:
            try:
                press(state, label)
            except UnknownKeyError as e:
                raise click.BadParameter(str(e), param_hint="LABELS")
            if not quiet:
                click.echo(f"{label:>3}  {state.screen}")

        if quiet:
            click.echo(state.screen)
