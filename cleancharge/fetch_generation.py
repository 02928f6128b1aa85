from datetime import datetime, timezone
from typing import List, Optional

import click
import requests

from cleancharge.models import FuelMix, GenerationSample

DEFAULT_BASE_URL = "https://api.carbonintensity.org.uk"
DEFAULT_TIMEOUT  = 10.0
API_FORMAT       = "%Y-%m-%dT%H:%MZ"


class MalformedPayload(requests.RequestException):
    """Response decoded as JSON but does not have the /generation shape."""


def format_api_time(instant: datetime) -> str:
    """UTC, minute precision, trailing 'Z' as the Carbon Intensity API expects."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).strftime(API_FORMAT)


def parse_api_time(value: str) -> datetime:
    """Parse '2025-01-01T00:30Z' style timestamps into aware UTC datetimes."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_generation_payload(payload: Optional[dict]) -> List[GenerationSample]:
    """
    Transform the raw /generation payload into GenerationSample objects:
      - 'from' / 'to' become aware UTC datetimes,
      - 'generationmix' entries become FuelMix tuples in provider order.
    A payload without data yields an empty list; any other shape raises
    MalformedPayload.
    """
    if not payload:
        return []

    try:
        points = payload.get("data") or []
        samples = []
        for point in points:
            mix = tuple(
                FuelMix(fuel=gm["fuel"], perc=float(gm["perc"]))
                for gm in point.get("generationmix") or []
            )
            samples.append(GenerationSample(
                start=parse_api_time(point["from"]),
                end=parse_api_time(point["to"]),
                mix=mix,
            ))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedPayload(f"Unexpected generation payload: {e!r}") from e
    return samples


class CarbonIntensityClient:
    """Fetches half-hourly generation mix from the GB Carbon Intensity API."""

    def __init__(self,
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout  = timeout
        self.session  = session or requests.Session()

    def generation_url(self, start_utc: datetime, end_utc: datetime) -> str:
        return f"{self.base_url}/generation/{format_api_time(start_utc)}/{format_api_time(end_utc)}"

    def fetch(self, start_utc: datetime, end_utc: datetime) -> List[GenerationSample]:
        """
        Fetch samples for [start_utc, end_utc).
        Transport, HTTP status, JSON decoding and payload shape failures
        propagate as requests.RequestException; an empty response gives an
        empty list.
        """
        url = self.generation_url(start_utc, end_utc)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return parse_generation_payload(resp.json())
        except requests.RequestException as e:
            click.echo(f"❌ Error fetching generation mix from {url}: {e}", err=True)
            raise
