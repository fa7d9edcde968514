"""High-level pipeline for ride search.

The pipeline is organized in three stages:

1. Intent resolution (remote extraction or local heuristics).
2. Listing acquisition from the ride repository.
3. Tiered filtering of the listing.

This module wires the stages together through the container and
formats the outcome as a printable message, so it can be reused from
a command line, a chat front-end or tests.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import ObservabilityConfig, get_config
from .container import Container, get_container
from .domain.errors import RepositoryError
from .domain.models import Ride
from .services import RideSearchService


def format_ride(ride: Ride) -> str:
    """One listing line: route, vehicle, price and seats."""
    seats = "seat" if ride.seats_left == 1 else "seats"
    line = (
        f"{ride.origin} -> {ride.destination} | {ride.vehicle_type} | "
        f"{ride.price:g} | {ride.seats_left} {seats} left"
    )
    if ride.badge:
        line += f" [{ride.badge}]"
    return line


def search_rides(query: str, container: Optional[Container] = None) -> str:
    """Run a search and return a human-readable message."""
    container = container or get_container()
    service: RideSearchService = container.resolve(RideSearchService)

    try:
        response = service.search(query)
    except RepositoryError as e:
        return f"Error: {e.message}"

    rides = response.result.rides
    if not rides:
        return f"No rides found for {query.strip()!r}"

    lines = []
    if response.intent is not None:
        filters = ", ".join(f"{k}={v}" for k, v in response.intent.to_dict().items())
        lines.append(f"Filters: {filters}")
    noun = "ride" if len(rides) == 1 else "rides"
    lines.append(f"{len(rides)} {noun} found")
    lines.extend(format_ride(r) for r in rides)
    return "\n".join(lines)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def run_pipeline(argv: Optional[Sequence[str]] = None) -> None:
    """Search rides for the query given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging()

    query = " ".join(args)
    print("Query:", query or "(all rides)")
    print(search_rides(query))


if __name__ == "__main__":
    run_pipeline()
