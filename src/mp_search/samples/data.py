"""Samples – synthetic, process-wide sample catalogues.

Each catalogue is generated once per ``(count, seed)`` and then shared by
every request as an immutable tuple.
"""
from __future__ import annotations

import functools
import random

from mp_search.observability.logging import get_logger

_log = get_logger(__name__)

GIVEN_NAMES: tuple[str, ...] = (
    "Ada", "Alan", "Ann", "Barbara", "Ben", "Carmen", "Cid", "Dana", "Edsger",
    "Elena", "Frances", "Grace", "Hedy", "Ivan", "Jean", "Kathleen", "Linus",
    "Margaret", "Niklaus", "Olga", "Priya", "Radia", "Sophie", "Tim", "Yuki",
)

FAMILY_NAMES: tuple[str, ...] = (
    "Allen", "Backus", "Cerf", "Dijkstra", "Easley", "Floyd", "Goldberg",
    "Hamilton", "Hopper", "Iverson", "Johnson", "Kahn", "Lamport", "Liskov",
    "McCarthy", "Naur", "Ousterhout", "Perlman", "Ritchie", "Sammet",
    "Thompson", "Ullman", "Wirth", "Yao", "Zuse",
)

EMAIL_DOMAINS: tuple[str, ...] = ("example.com", "example.org", "example.net", "mail.test")

STREET_STEMS: tuple[str, ...] = (
    "Acacia", "Bramble", "Cedar", "Dockside", "Elm", "Fairview", "Granite",
    "Harbour", "Ivy", "Juniper", "Kingfisher", "Lantern", "Maple", "Northgate",
    "Orchard", "Pelican", "Quarry", "Riverside", "Sycamore", "Tannery",
    "Union", "Viaduct", "Willow", "Yarrow",
)

STREET_SUFFIXES: tuple[str, ...] = (
    "Street", "Road", "Avenue", "Lane", "Way", "Crescent", "Terrace", "Row",
)

COUNTRIES: tuple[str, ...] = (
    "Argentina", "Australia", "Brazil", "Canada", "Chile", "Denmark", "Egypt",
    "Finland", "France", "Germany", "Ghana", "India", "Ireland", "Italy",
    "Japan", "Kenya", "Mexico", "Netherlands", "New Zealand", "Norway",
    "Peru", "Portugal", "Spain", "Sweden", "United Kingdom", "Vietnam",
)


def rng_for(catalogue: str, seed: int) -> random.Random:
    """Independent deterministic stream per catalogue."""
    return random.Random(f"{catalogue}:{seed}")  # noqa: S311


@functools.lru_cache(maxsize=None)
def people_catalogue(count: int, seed: int) -> tuple:
    from mp_search.samples.people import Person, UserState

    rng = rng_for("people", seed)
    states = list(UserState)
    people = []
    for _ in range(count):
        given = rng.choice(GIVEN_NAMES)
        family = rng.choice(FAMILY_NAMES)
        email = f"{given}.{family}{rng.randint(1, 99)}@{rng.choice(EMAIL_DOMAINS)}".lower()
        people.append(
            Person(
                given_name=given,
                family_name=family,
                email_address=email,
                is_archived=rng.random() < 0.5,
                state=rng.choice(states),
            )
        )
    _log.info("samples.generated", catalogue="people", count=count, seed=seed)
    return tuple(people)


@functools.lru_cache(maxsize=None)
def location_catalogue(count: int, seed: int) -> tuple:
    from mp_search.samples.locations import Location

    rng = rng_for("locations", seed)
    locations = [
        Location(
            name=f"{rng.choice(STREET_STEMS)} {rng.choice(STREET_SUFFIXES)}",
            country=rng.choice(COUNTRIES),
            population=rng.randint(100_000, 10_000_000),
        )
        for _ in range(count)
    ]
    _log.info("samples.generated", catalogue="locations", count=count, seed=seed)
    return tuple(locations)


__all__ = ["location_catalogue", "people_catalogue", "rng_for"]
