"""
Command-line interface for the Marketeer package.

This module provides the CLI commands for the Marketeer package:
- generate: Generate a marketing strategy from a product brief
- check: Check whether a brief is ready to submit
"""

import sys
import json
import asyncio
from typing import Optional

import click

from marketeer import __version__
from marketeer.core.config import get_config_value
from marketeer.core.constants import DEFAULT_PROVIDER, SECTION_LABELS, STRATEGY_FIELDS, SUPPORTED_PROVIDERS
from marketeer.core.error_handler import ConfigurationError, ValidationError
from marketeer.core.logging_config import get_logger, configure_logging
from marketeer.strategy.input_validator import InputValidator
from marketeer.strategy.models import WorkflowStatus
from marketeer.strategy.session import Notifier, NotificationKind, StrategySession

logger = get_logger(__name__)

SECTION_CHOICES = list(STRATEGY_FIELDS) + ["marketing_copy", "visual_strategy", "target_audience"]


class ClickNotifier(Notifier):
    """Notifier that prints status messages to stderr."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        color = "green" if kind is NotificationKind.SUCCESS else "red"
        click.secho(message, fg=color, err=True)


def _read_brief(brief: Optional[str], brief_file) -> str:
    if brief_file is not None:
        return brief_file.read()
    if brief is not None:
        return brief
    if not sys.stdin.isatty():
        return sys.stdin.read()
    raise click.UsageError("Provide a brief as an argument, with --file, or on stdin")


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level (default: from configuration)')
def main(log_level: Optional[str] = None):
    """
    Marketeer - AI-powered marketing strategy assistant.

    Turns a product description into marketing copy, a visual strategy
    and a target audience analysis.
    """
    configure_logging(level=log_level)


@main.command()
@click.argument('brief', required=False)
@click.option('-f', '--file', 'brief_file', type=click.File('r'), help='Read the brief from a file')
@click.option('--provider', type=click.Choice(SUPPORTED_PROVIDERS), help='Generation provider (default: from configuration)')
@click.option('--model', type=str, help='Model to use (default: from configuration)')
@click.option('-s', '--section', type=click.Choice(SECTION_CHOICES), help='Print only this section, without heading')
@click.option('--json', 'as_json', is_flag=True, default=False, help='Print the strategy as JSON')
@click.option('--log', 'log_file', type=click.Path(dir_okay=False),
              help='Log generation requests and responses to this file (OpenRouter only)')
def generate(brief: Optional[str], brief_file=None, provider: Optional[str] = None,
             model: Optional[str] = None, section: Optional[str] = None,
             as_json: bool = False, log_file: Optional[str] = None):
    """
    Generate a marketing strategy from a product brief.

    BRIEF: Product or service description (20 to 2000 characters)

    Examples:
      marketeer generate "A sustainable water bottle made from recycled ocean plastic"
      marketeer generate -f brief.txt --section marketingCopy
      cat brief.txt | marketeer generate --json
    """
    from marketeer.clients import create_generation_client

    text = _read_brief(brief, brief_file)

    kwargs = {}
    if log_file:
        if (provider or get_config_value("generation.provider", DEFAULT_PROVIDER)).lower() != "openrouter":
            raise click.UsageError("--log is only supported with the openrouter provider")
        kwargs["log_file"] = log_file

    try:
        client = create_generation_client(provider=provider, model=model, **kwargs)
    except ConfigurationError as e:
        logger.error(str(e))
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    session = StrategySession(client, notifier=ClickNotifier())

    try:
        state = asyncio.run(session.generate(text))
    except ValidationError:
        # The notifier has already shown the reason
        sys.exit(1)

    if state.status is not WorkflowStatus.SUCCEEDED:
        click.echo(f"Error: {state.reason}", err=True)
        sys.exit(1)

    strategy = state.strategy
    if section:
        click.echo(strategy.section(section))
    elif as_json:
        click.echo(json.dumps(strategy.to_dict(), indent=2, ensure_ascii=False))
    else:
        for name in STRATEGY_FIELDS:
            click.secho(SECTION_LABELS[name].upper(), bold=True)
            click.echo(strategy.section(name))
            click.echo()


@main.command()
@click.argument('brief', required=False)
@click.option('-f', '--file', 'brief_file', type=click.File('r'), help='Read the brief from a file')
def check(brief: Optional[str], brief_file=None):
    """
    Check whether a brief is ready to submit.

    Prints the character counter and, when the brief is not eligible, the reason.
    Exits with status 1 for ineligible briefs.
    """
    result = InputValidator().validate(_read_brief(brief, brief_file))

    click.echo(result.counter)
    if result.eligible:
        click.secho("Ready to generate", fg="green")
    else:
        click.secho(result.reason, fg="red")
        sys.exit(1)


if __name__ == '__main__':
    main()
