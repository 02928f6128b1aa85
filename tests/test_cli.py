import json

from click.testing import CliRunner

from cleancharge.aggregator import GenerationAggregator
from cleancharge.cli import EXIT_CONFIG, EXIT_INVALID, EXIT_NO_DATA, EXIT_PROVIDER, cli

from tests.conftest import FakeProvider


def invoke(args, aggregator):
    return CliRunner().invoke(cli, args, obj={"aggregator": aggregator})


def test_three_days_json(time_source, three_day_samples):
    result = invoke(["three-days", "--json"], GenerationAggregator(time_source, FakeProvider(three_day_samples)))

    assert result.exit_code == 0
    days = json.loads(result.output)
    assert [d["date"] for d in days] == ["2025-01-01", "2025-01-02", "2025-01-03"]
    assert days[1]["cleanEnergyPercentage"] == 60.0


def test_three_days_summary(time_source, three_day_samples):
    result = invoke(["three-days"], GenerationAggregator(time_source, FakeProvider(three_day_samples)))

    assert result.exit_code == 0
    assert "2025-01-02: 60.00% clean energy" in result.output


def test_charge_window_json(time_source, window_samples):
    result = invoke(["charge-window", "--hours", "1", "--json"],
                    GenerationAggregator(time_source, FakeProvider(window_samples)))

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "start": "2025-01-01T01:00:00Z",
        "end": "2025-01-01T02:00:00Z",
        "averageCleanEnergyPercentage": 85.0,
    }


def test_charge_window_invalid_hours(time_source, window_samples):
    provider = FakeProvider(window_samples)
    result = invoke(["charge-window", "--hours", "9"], GenerationAggregator(time_source, provider))

    assert result.exit_code == EXIT_INVALID
    assert provider.calls == []


def test_no_data_exit_code(time_source):
    result = invoke(["three-days"], GenerationAggregator(time_source, FakeProvider([])))
    assert result.exit_code == EXIT_NO_DATA


def test_provider_failure_exit_code(time_source, connection_error):
    result = invoke(["charge-window", "--hours", "2"],
                    GenerationAggregator(time_source, FakeProvider(error=connection_error)))
    assert result.exit_code == EXIT_PROVIDER


def test_bad_config_exit_code(tmp_path, time_source):
    path = tmp_path / "bad.yml"
    path.write_text("- nope\n", encoding="utf-8")

    result = invoke(["--config", str(path), "three-days"], GenerationAggregator(time_source, FakeProvider([])))
    assert result.exit_code == EXIT_CONFIG
