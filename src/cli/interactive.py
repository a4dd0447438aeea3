"""Interactive CLI for the Matter API Explorer."""
import json
from typing import Any, Dict, List, Optional

import click
import requests
from colorama import Fore, Style

from config import AppConfig, app_config
from src.api.highlights import fetch_highlights
from src.api.matter_client import MatterClient
from src.auth.qr_login import AuthenticationError, QrAuthenticator
from src.auth.settings import Settings, SettingsStore
from src.docs.markdown_generator import MarkdownGenerator
from src.explorer.runner import ApiExplorer, PreconditionError


class InteractiveCLI:
    """Interactive CLI interface."""

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize CLI."""
        self.config = config or app_config
        self.settings_store = SettingsStore(self.config.settings_file)

    def print_header(self, title: str):
        """Print a section header."""
        print(f"\n{Fore.CYAN}{'━' * 45}")
        print(f"{Fore.CYAN}{title}")
        print(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")

    def run(self):
        """Run interactive CLI."""
        while True:
            self.print_header("Options")
            click.echo("1. Authenticate with Matter API")
            click.echo("2. Run API exploration and generate documentation")
            click.echo("3. Exit\n")

            choice = click.prompt("Enter your choice (1-3)", type=int, default=2)

            if choice == 1:
                try:
                    self.authenticate()
                except (AuthenticationError, requests.exceptions.RequestException) as e:
                    click.echo(f"{Fore.RED}Authentication failed: {e}")
            elif choice == 2:
                try:
                    self.explore_and_document()
                except PreconditionError as e:
                    click.echo(f"{Fore.RED}{e}")
            elif choice == 3:
                click.echo(f"{Fore.YELLOW}Exiting...")
                break
            else:
                click.echo(f"{Fore.RED}Invalid choice. Please select 1, 2, or 3.")

    def authenticate(self) -> Settings:
        """Run the QR login flow."""
        self.print_header("Authenticate")

        client = MatterClient(self.config.matter_api)
        settings = QrAuthenticator(client, self.settings_store).authenticate()

        click.echo(f"{Fore.GREEN}✅ Authentication successful! Access token: {settings.access_token[:10]}...")
        return settings

    def explore(self) -> List[Dict[str, Any]]:
        """
        Probe the endpoint catalog.

        Raises:
            PreconditionError: If there is no token or no usable catalog
        """
        self.print_header("API Exploration")
        click.echo(f"{Fore.CYAN}Exploring {self.config.matter_api.host}...")

        summary = ApiExplorer(self.config, settings_store=self.settings_store).run()

        click.echo(f"{Fore.GREEN}Results saved to {self.config.results_file}")
        click.echo(f"{Fore.GREEN}Summary saved to {self.config.summary_file}")
        return summary

    def generate_docs(self):
        """Render Markdown documentation from the last exploration."""
        self.print_header("Documentation")

        generator = MarkdownGenerator(host=self.config.matter_api.host)
        output = generator.generate(
            self.config.results_file,
            self.config.summary_file,
            self.config.docs_file,
        )
        click.echo(f"{Fore.GREEN}✅ Documentation written to {output}")

    def explore_and_document(self) -> List[Dict[str, Any]]:
        """Explore, then document the working endpoints."""
        summary = self.explore()

        if not summary:
            click.echo(f"{Fore.YELLOW}No working endpoints found. Check your authentication token.")
            return summary

        click.echo(f"\n{Fore.GREEN}Found {len(summary)} working endpoints.")
        self.generate_docs()

        click.echo(f"\n{Fore.GREEN}API exploration and documentation complete!")
        click.echo(f"Check {self.config.output_dir} for results:")
        click.echo(f"- {self.config.results_file.name}: Raw API responses")
        click.echo(f"- {self.config.summary_file.name}: Summary of working endpoints")
        click.echo(f"- {self.config.docs_file.name}: Markdown documentation")
        return summary

    def export_highlights(self) -> int:
        """Download every highlight, authenticating first when needed."""
        self.print_header("Highlights Export")

        settings = self.settings_store.load()
        if not settings.access_token:
            settings = self.authenticate()

        client = MatterClient(self.config.matter_api, access_token=settings.access_token)
        click.echo(f"{Fore.CYAN}Fetching highlights...")
        highlights = fetch_highlights(client)

        output_file = self.config.highlights_file
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w") as f:
            json.dump(highlights, f, indent=2)

        click.echo(f"{Fore.GREEN}Saved {len(highlights)} highlights to {output_file}")
        return len(highlights)
