#!/usr/bin/env python3
"""Matter API Explorer - Entry point."""
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
import requests
from colorama import Fore, Style, init

from src.auth.qr_login import AuthenticationError
from src.cli.interactive import InteractiveCLI
from src.explorer.runner import PreconditionError

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    print(f"{Fore.CYAN}{'=' * 44}")
    print(f"{Fore.CYAN}║   {Fore.WHITE}Matter API Explorer{Fore.CYAN}                  ║")
    print(f"{Fore.CYAN}║   {Fore.WHITE}Endpoint probing & documentation{Fore.CYAN}     ║")
    print(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    print()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Matter API Explorer - Probe and document the Matter API."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s - %(name)s - %(message)s",
    )


@cli.command()
def auth():
    """Authenticate with a QR code."""
    print_banner()

    try:
        InteractiveCLI().authenticate()
    except (AuthenticationError, requests.exceptions.RequestException) as e:
        click.echo(f"{Fore.RED}Authentication failed: {e}")
        sys.exit(1)


@cli.command()
@click.option("--skip-docs", is_flag=True, help="Only probe, do not render Markdown")
def explore(skip_docs):
    """Probe the endpoint catalog and generate documentation."""
    print_banner()

    cli_tool = InteractiveCLI()
    try:
        if skip_docs:
            summary = cli_tool.explore()
            click.echo(f"{Fore.GREEN}Found {len(summary)} working endpoints.")
        else:
            cli_tool.explore_and_document()
    except PreconditionError as e:
        click.echo(f"{Fore.RED}{e}")
        sys.exit(1)


@cli.command()
def docs():
    """Render Markdown documentation from the last exploration."""
    print_banner()

    try:
        InteractiveCLI().generate_docs()
    except (OSError, ValueError) as e:
        click.echo(f"{Fore.RED}Cannot read exploration results: {e}")
        sys.exit(1)


@cli.command()
def highlights():
    """Export all highlights to JSON."""
    print_banner()

    try:
        InteractiveCLI().export_highlights()
    except (AuthenticationError, requests.exceptions.RequestException) as e:
        click.echo(f"{Fore.RED}Error: {e}")
        sys.exit(1)


@cli.command()
def menu():
    """Interactive menu."""
    print_banner()

    InteractiveCLI().run()


if __name__ == "__main__":
    cli()
