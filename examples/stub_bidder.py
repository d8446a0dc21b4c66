#!/usr/bin/env python3
# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Stub bidder for running the proxy locally.

Answers every OpenRTB request with a single bid at a fixed price, so the
proxy can be pointed at it in place of Prebid Server or the Jio DSP.

Usage:
    python examples/stub_bidder.py --port 8001 --price 1.50
    PREBID_AUCTION_URL=http://localhost:8001/openrtb2/auction bid-proxy serve

Pass --price 0 to simulate a bidder that never bids.
"""

import uuid

import typer
import uvicorn
from fastapi import FastAPI, Request, Response
from rich.console import Console

console = Console()


def create_bidder(price: float, seat: str) -> FastAPI:
    """Create a bidder app that bids `price` on the first impression."""
    bidder = FastAPI(title=f"Stub Bidder ({seat})")

    @bidder.get("/health")
    async def health():
        return {"status": "healthy"}

    @bidder.post("/{path:path}")
    async def bid(path: str, request: Request):
        document = await request.json()
        imps = document.get("imp") or [{}]
        bundle = (document.get("app") or {}).get("bundle", "unknown")
        console.print(f"[cyan]{seat}[/cyan] /{path} bundle={bundle} -> {price:.2f}")

        if price <= 0:
            return Response(status_code=204)

        return {
            "id": document.get("id", ""),
            "seatbid": [
                {
                    "seat": seat,
                    "bid": [
                        {
                            "id": uuid.uuid4().hex[:8],
                            "impid": imps[0].get("id", "1"),
                            "price": price,
                        }
                    ],
                }
            ],
            "cur": "USD",
        }

    return bidder


def main(
    port: int = typer.Option(8001, "--port", "-p"),
    price: float = typer.Option(1.0, "--price"),
    seat: str = typer.Option("stub", "--seat"),
):
    """Run the stub bidder."""
    console.print(f"[bold green]Stub bidder[/bold green] {seat} on port {port}, price {price:.2f}")
    uvicorn.run(create_bidder(price, seat), host="0.0.0.0", port=port, log_level="warning")


if __name__ == "__main__":
    typer.run(main)
