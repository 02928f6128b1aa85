import json
import sys
from pathlib import Path

import click

from cleancharge.aggregator import GenerationAggregator
from cleancharge.config import BUNDLED_CONFIG, ConfigError, load_config
from cleancharge.errors import (
    InsufficientData,
    InvalidWindowLength,
    NoDataFound,
    ProviderUnavailable,
)
from cleancharge.fetch_generation import CarbonIntensityClient
from cleancharge.time_source import SystemTimeSource

EXIT_CONFIG   = 1
EXIT_INVALID  = 2
EXIT_NO_DATA  = 3
EXIT_PROVIDER = 4


def exit_code_for(error) -> int:
    if isinstance(error, InvalidWindowLength):
        return EXIT_INVALID
    if isinstance(error, (NoDataFound, InsufficientData)):
        return EXIT_NO_DATA
    if isinstance(error, ProviderUnavailable):
        return EXIT_PROVIDER
    return 1


def build_aggregator(cfg: dict) -> GenerationAggregator:
    provider = CarbonIntensityClient(
        base_url = cfg["provider"]["base_url"],
        timeout  = cfg["provider"]["timeout"],
    )
    return GenerationAggregator(SystemTimeSource(), provider)


def fail(error) -> None:
    click.echo(f"❌ {error.message}", err=True)
    sys.exit(exit_code_for(error))


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to YAML config file (overrides bundled one)"
)
@click.pass_context
def cli(ctx: click.Context, config: Path):
    """Clean-energy forecast and EV charging window finder."""
    ctx.ensure_object(dict)
    config = Path(config) if config else BUNDLED_CONFIG

    try:
        cfg = load_config(config)
    except ConfigError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(EXIT_CONFIG)

    ctx.obj["config"] = cfg
    # Tests and embedders may hand in their own aggregator
    if "aggregator" not in ctx.obj:
        ctx.obj["aggregator"] = build_aggregator(cfg)


@cli.command("three-days")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON instead of a summary")
@click.pass_obj
def three_days(obj: dict, as_json: bool):
    """Average clean-energy share for each of the next three days."""
    result = obj["aggregator"].three_day_average()
    if not result.ok:
        fail(result.error)

    summaries = result.value
    if as_json:
        click.echo(json.dumps([s.to_dict() for s in summaries], ensure_ascii=False, indent=4))
        return

    for summary in summaries:
        click.echo(f"📅 {summary.date}: {summary.clean_energy_percentage:.2f}% clean energy")
        for fuel, perc in sorted(summary.average_mix_by_source.items()):
            click.echo(f"   {fuel:<8} {perc:6.2f}%")


@cli.command("charge-window")
@click.option("--hours", "-h", type=int, required=True, help="Charging window length in hours (1-6)")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON instead of a summary")
@click.pass_obj
def charge_window(obj: dict, hours: int, as_json: bool):
    """Best contiguous charging window within the next two days."""
    result = obj["aggregator"].optimal_charging_window(hours)
    if not result.ok:
        fail(result.error)

    window = result.value
    if as_json:
        click.echo(json.dumps(window.to_dict(), ensure_ascii=False, indent=4))
        return

    click.echo(
        f"⏳ Optimal {hours}h window: {window.start.isoformat()} → {window.end.isoformat()} "
        f"(avg clean energy {window.average_clean_energy_percentage:.2f}%)"
    )


@cli.command()
@click.option("--host", help="Interface to bind (defaults to server.host in config)")
@click.option("--port", type=int, help="Port to bind (defaults to server.port in config)")
@click.pass_obj
def serve(obj: dict, host: str, port: int):
    """Run the HTTP API."""
    import uvicorn

    from cleancharge.api import create_app

    server = obj["config"]["server"]
    host = host or server["host"]
    port = port or server["port"]
    click.echo(f"🔌 Serving on http://{host}:{port}")
    uvicorn.run(create_app(obj["aggregator"]), host=host, port=port)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
