# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""CLI interface for proxy operations.

Provides commands for:
- Running the proxy server
- Viewing configuration and slot tables
- Resolving slots
- Running a single auction from a file
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="bid-proxy",
    help="Bid Proxy CLI - OpenRTB auction proxy for PubMatic and Jio",
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option(None, "--host", "-h", help="Bind address (default from settings)"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port (default from settings)"),
):
    """Run the proxy HTTP server."""
    import uvicorn

    from ...config import get_settings

    settings = get_settings()

    host = host or settings.host
    port = port or settings.port
    console.print(Panel(f"Listening on [cyan]{host}:{port}[/cyan]", title="Bid Proxy"))

    uvicorn.run(
        "bid_proxy.interfaces.api.main:app",
        host=host,
        port=port,
        log_config=None,
    )


@app.command()
def config():
    """View the effective configuration and slot tables."""
    from ...config import load_proxy_config

    proxy_config = load_proxy_config()

    table = Table(title="Proxy Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Prebid auction URL", proxy_config.prebid_auction_url)
    table.add_row("Jio DSP URL", proxy_config.jio_dsp_url)
    table.add_row("Publisher ID", proxy_config.publisher_id or "[dim](empty)[/dim]")
    table.add_row("Jio ssp / spid", f"{proxy_config.jio_ssp} / {proxy_config.jio_spid}")
    table.add_row(
        "Downstream timeout",
        f"{proxy_config.downstream_timeout}s" if proxy_config.downstream_timeout else "httpx default",
    )
    console.print(table)

    slots = Table(title="Slot Mappings")
    slots.add_column("Bundle", style="cyan")
    slots.add_column("Ad Type", style="yellow")
    slots.add_column("Slot", style="green")
    for bundle, mapping in proxy_config.slots.bundles.items():
        for ad_type, slot in mapping.items():
            slots.add_row(bundle, ad_type, slot)
    for ad_type, slot in proxy_config.slots.fallback.items():
        slots.add_row("[dim](fallback)[/dim]", ad_type, slot)
    console.print(slots)


@app.command()
def slot(
    bundle: str = typer.Argument(..., help="App bundle identifier"),
    ad_type: str = typer.Argument(..., help="Ad type: banner, video, native"),
):
    """Resolve the PubMatic ad slot for a bundle and ad type."""
    from ...config import load_proxy_config
    from ...engines import SlotResolver

    resolver = SlotResolver(load_proxy_config().slots)
    resolved = resolver.resolve(bundle, ad_type.lower())

    if resolved is None:
        console.print(f"[yellow]No slot mapped for {bundle} / {ad_type}[/yellow]")
        raise typer.Exit(1)

    console.print(resolved)


@app.command()
def auction(
    request_file: Path = typer.Argument(..., exists=True, readable=True, help="OpenRTB request JSON"),
    show_body: bool = typer.Option(False, "--body", "-b", help="Print the winning response body"),
):
    """Run one auction against the configured destinations."""
    from ...clients import Dispatcher, DownstreamClient
    from ...config import load_proxy_config
    from ...errors import MalformedRequestError
    from ...flows import AuctionFlow

    proxy_config = load_proxy_config()
    body = request_file.read_bytes()

    async def run_auction():
        async with DownstreamClient(timeout=proxy_config.downstream_timeout) as client:
            flow = AuctionFlow(proxy_config, Dispatcher(client))
            return await flow.run(body)

    try:
        outcome = asyncio.run(run_auction())
    except MalformedRequestError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Auction Result")
    table.add_column("Destination", style="cyan")
    table.add_column("Price", style="green")
    for destination, price in outcome.prices.items():
        table.add_row(destination.label, f"{price:.2f}")
    console.print(table)

    if outcome.no_bid:
        console.print("[yellow]No valid bids received[/yellow]")
        return

    console.print(f"[green]✓ Winner: {outcome.winner.label}[/green]")
    if show_body and outcome.body is not None:
        console.print(outcome.body.decode("utf-8", errors="replace"))


if __name__ == "__main__":
    app()
