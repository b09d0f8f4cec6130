from sentibot import main, population
from sentibot.config import settings
from sentibot.services.population_service import PopulationDataError


def test_chat_exits_1_on_missing_knowledge_base(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "KNOWLEDGE_BASE_PATH", str(tmp_path / "missing.json"))
    assert main.run() == 1


def test_chat_exits_1_on_malformed_knowledge_base(monkeypatch, tmp_path):
    path = tmp_path / "kb.json"
    path.write_text('{"keywords": ["hi"]}', encoding="utf-8")
    monkeypatch.setattr(settings, "KNOWLEDGE_BASE_PATH", str(path))
    assert main.run() == 1


def test_population_exits_1_on_data_error(monkeypatch):
    def failing_fetch(url=None, client=None):
        raise PopulationDataError("Failed to fetch population dataset: boom")

    monkeypatch.setattr(population, "fetch_dataset", failing_fetch)
    assert population.run() == 1


def test_population_exits_0_on_success(monkeypatch, tmp_path):
    payload = [{"page": 1}, [{"date": "2000", "value": 100}, {"date": "2001", "value": 110}]]
    monkeypatch.setattr(population, "fetch_dataset", lambda url=None, client=None: payload)
    monkeypatch.setattr(settings, "CHART_PATH", str(tmp_path / "chart.svg"))

    assert population.run() == 0
    assert (tmp_path / "chart.svg").exists()
