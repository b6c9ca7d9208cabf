#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
SearchServer - Interactive CLI Interface
A rich console front end for the SearchServer keyword search engine
"""

import argparse
import logging
import time
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

from SearchServer.config import load_config
from SearchServer.exceptions import SearchServerError
from SearchServer.main import DEMO_DOCUMENTS, DEMO_STOP_WORDS, load_documents
from SearchServer.preprocessing.document import Document, DocumentStatus
from SearchServer.tfidf_search.search_server import SearchServer

# Initialize rich console
console = Console()


class SearchServerCLI:
    def __init__(self, config=None, stop_words=None, output: Console = None):
        """Initialize the CLI interface"""
        self.config = config if config is not None else load_config()
        self.stop_words = stop_words
        self.console = output or console
        self.server: Optional[SearchServer] = None

    def print_header(self):
        """Display the application header"""
        self.console.print(Panel(
            "[bold blue]SearchServer[/bold blue] [yellow]Keyword Search[/yellow]",
            border_style="blue",
            subtitle="TF-IDF ranking with plus/minus words",
            width=80
        ))

    def init_server(self, documents: List[dict], stop_words=None) -> bool:
        """Create a server and index the given documents"""
        try:
            stop_words = stop_words if stop_words is not None else self.stop_words
            server = SearchServer(stop_words, config=self.config)
            server.add_documents(documents)
        except (SearchServerError, ValueError, KeyError) as e:
            self.console.print(f"[bold red]Error building index:[/bold red] {e}")
            return False

        self.server = server
        stats = server.get_stats()
        self.console.print(
            f"[green]Indexed [bold]{stats['num_documents']}[/bold] documents, "
            f"[bold]{stats['num_terms']}[/bold] terms[/green]"
        )
        return True

    def load_documents(self, documents_path: str) -> bool:
        """Load documents from a JSON file and index them"""
        self.console.print(f"Loading documents from: [cyan]{documents_path}[/cyan]")
        try:
            documents = load_documents(documents_path)
        except (OSError, ValueError) as e:
            self.console.print(f"[bold red]Error loading documents:[/bold red] {e}")
            return False
        return self.init_server(documents)

    def load_sample(self) -> bool:
        self.console.print("[cyan]Using built-in sample documents[/cyan]")
        return self.init_server(DEMO_DOCUMENTS, stop_words=DEMO_STOP_WORDS)

    def search(self, query: str, status_or_predicate=None) -> Optional[List[Document]]:
        """Run a ranked search, returning None if the query was rejected"""
        if self.server is None:
            self.console.print("[bold red]No documents indexed.[/bold red]")
            return None

        start_time = time.time()
        try:
            results = self.server.find_top_documents(query, status_or_predicate)
        except SearchServerError as e:
            self.console.print(f"[bold red]Invalid query:[/bold red] {e}")
            return None
        execution_time = time.time() - start_time

        self.console.print(f"[green]Found {len(results)} documents in {execution_time:.6f} seconds[/green]")
        return results

    def match(self, query: str, document_id: int) -> bool:
        if self.server is None:
            self.console.print("[bold red]No documents indexed.[/bold red]")
            return False

        try:
            matched_words, status = self.server.match_document(query, document_id)
        except SearchServerError as e:
            self.console.print(f"[bold red]Error:[/bold red] {e}")
            return False

        words = " ".join(matched_words) if matched_words else "[dim]<no words>[/dim]"
        self.console.print(Panel(
            f"Status: [yellow]{status.name}[/yellow]\nMatched words: [cyan]{words}[/cyan]",
            title=f"Document {document_id}",
            border_style="cyan",
            width=80
        ))
        return True

    def display_results(self, results: List[Document]):
        """Display search results as a table"""
        if not results:
            self.console.print("[yellow]No matching documents.[/yellow]")
            return

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]Top {len(results)} document(s) ranked by relevance[/bold]",
            title_style="yellow"
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Document ID", style="cyan bold", justify="right")
        table.add_column("Relevance", style="yellow", justify="right")
        table.add_column("Rating", style="green", justify="right")

        for i, document in enumerate(results):
            # Highlight the row for the top result
            row_style = "on blue" if i == 0 else ""
            table.add_row(
                str(i + 1),
                str(document.id),
                f"{document.relevance:.6f}",
                str(document.rating),
                style=row_style
            )

        self.console.print(table)

    def list_documents(self):
        if self.server is None:
            self.console.print("[bold red]No documents indexed.[/bold red]")
            return

        table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
        table.add_column("Position", style="dim", justify="right")
        table.add_column("Document ID", style="cyan", justify="right")
        table.add_column("Status", style="yellow")
        table.add_column("Rating", style="green", justify="right")

        for position in range(self.server.get_document_count()):
            document_id = self.server.get_document_id(position)
            data = self.server.get_document_data(document_id)
            table.add_row(str(position), str(document_id), data.status.name, str(data.rating))

        self.console.print(table)

    def ask_status(self) -> Optional[DocumentStatus]:
        names = ", ".join(status.name for status in DocumentStatus)
        answer = self.console.input(f"Status ({names}, default: ACTUAL): ")
        if not answer.strip():
            return DocumentStatus.ACTUAL
        try:
            return DocumentStatus.from_name(answer)
        except ValueError as e:
            self.console.print(f"[bold red]{e}[/bold red]")
            return None

    def interactive_mode(self):
        """Run the application in interactive mode"""
        while True:
            self.console.rule("[bold blue]SearchServer[/bold blue]")

            if self.server is None:
                documents_path = self.console.input(
                    "\n[bold cyan]Enter path to documents JSON file (empty for sample): [/bold cyan]"
                )
                loaded = self.load_documents(documents_path) if documents_path else self.load_sample()
                if not loaded:
                    continue

            menu_table = Table(show_header=False, box=box.SIMPLE)
            menu_table.add_column("Option", style="dim")
            menu_table.add_column("Description", style="yellow")

            menu_table.add_row("1", "Top documents (ACTUAL)")
            menu_table.add_row("2", "Top documents by status")
            menu_table.add_row("3", "Match document")
            menu_table.add_row("4", "List documents")
            menu_table.add_row("5", "Quit")

            self.console.print("\n[bold cyan]Available Actions:[/bold cyan]")
            self.console.print(menu_table)

            choice = self.console.input("\n[bold cyan]Enter choice (1-5): [/bold cyan]")

            if choice == '5' or choice.lower() == 'quit':
                break

            if choice == '4':
                self.list_documents()
                continue

            if choice not in ['1', '2', '3']:
                self.console.print("[bold red]Invalid choice. Please enter a number between 1 and 5.[/bold red]")
                continue

            query = self.console.input("\nEnter search query: ")

            if choice == '1':
                results = self.search(query)
                if results is not None:
                    self.display_results(results)

            elif choice == '2':
                status = self.ask_status()
                if status is None:
                    continue
                results = self.search(query, status)
                if results is not None:
                    self.display_results(results)

            else:
                document_id = self.console.input("Document ID: ")
                try:
                    self.match(query, int(document_id))
                except ValueError:
                    self.console.print(f"[bold red]Invalid document ID: {document_id!r}[/bold red]")


def setup_logging(level):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)]
    )


def main(argv=None):
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='SearchServer - interactive keyword search'
    )
    parser.add_argument('--config', help='Path to configuration JSON file')
    parser.add_argument('--documents', help='Path to documents JSON file')
    parser.add_argument('--sample', action='store_true', help='Index the built-in sample documents')
    parser.add_argument('--query', help='Query to run once, then exit')
    parser.add_argument('--status', choices=[status.name for status in DocumentStatus],
                        help='Only return documents with this status (default: ACTUAL)')
    parser.add_argument('--log-level', help='Logging level (default: from config)')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config.get("logging", {}).get("level", "WARNING"))

    app = SearchServerCLI(config=config)
    app.print_header()

    if args.documents:
        if not app.load_documents(args.documents):
            return 1
    elif args.sample:
        app.load_sample()

    if args.query:
        if app.server is None:
            app.load_sample()
        status = DocumentStatus[args.status] if args.status else None
        results = app.search(args.query, status)
        if results is None:
            return 1
        app.display_results(results)
        return 0

    app.interactive_mode()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
