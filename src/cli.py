#!/usr/bin/env python3
"""Command line front end for the expression evaluator.

Evaluate expressions given as arguments, read them line by line from stdin,
or start the HTTP service.
"""

import sys

import click

from evaluator import EvaluationError, evaluate, evaluate_value, format_value
from observability import configure_logging, track_latency

_evaluate = track_latency("cli")(evaluate)


def _evaluate_strict(expression: str) -> str:
    """Evaluate, letting the structured error escape."""
    if not expression.strip():
        return ""
    return format_value(evaluate_value(expression))


@click.group()
@click.option("--log-level", default="WARNING", show_default=True, help="Logging level for diagnostics")
def cli(log_level):
    """Arithmetic expression evaluator."""
    configure_logging(log_level)


@cli.command("evaluate")
@click.argument("expressions", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Report why an expression failed and exit non-zero")
def evaluate_command(expressions, strict):
    """Evaluate each EXPRESSION and print one result per line."""
    for expression in expressions:
        if not strict:
            click.echo(_evaluate(expression))
            continue
        try:
            click.echo(_evaluate_strict(expression))
        except EvaluationError as e:
            raise click.ClickException(f"{expression}: {e}")


@cli.command()
@click.option("--prompt/--no-prompt", default=None, help="Show a prompt (defaults to on for a terminal)")
def repl(prompt):
    """Read expressions from stdin until EOF, printing each result."""
    if prompt is None:
        prompt = sys.stdin.isatty()

    while True:
        if prompt:
            click.echo("> ", nl=False)
        line = sys.stdin.readline()
        if not line:
            break
        click.echo(_evaluate(line.rstrip("\r\n")))


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST)")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT)")
def serve(host, port):
    """Start the HTTP evaluation service."""
    from app import main

    main(host=host, port=port)


if __name__ == "__main__":
    cli()
