from sentibot.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.ANALYTICS_URL == "https://api.example.com/analytics"
    assert s.CHART_PATH == "world_population_growth.svg"
    assert s.POPULATION_PROJECTION_YEARS == 50
    assert s.quit_commands == ["quit", "exit", "bye"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ANALYTICS_URL", "http://localhost:9000/analytics")
    monkeypatch.setenv("ANALYTICS_ENABLED", "false")
    monkeypatch.setenv("QUIT_COMMANDS", " Quit, STOP ,, ")
    s = Settings(_env_file=None)
    assert s.ANALYTICS_URL == "http://localhost:9000/analytics"
    assert s.ANALYTICS_ENABLED is False
    assert s.quit_commands == ["quit", "stop"]


def test_debug_forces_debug_log_level():
    assert Settings(_env_file=None, DEBUG=True, LOG_LEVEL="warning").log_level == "DEBUG"
    assert Settings(_env_file=None, LOG_LEVEL="warning").log_level == "WARNING"
