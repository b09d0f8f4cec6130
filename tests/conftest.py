import json

import pytest

from sentibot.models.schemas import KnowledgeEntry


class ScriptedInput:
    """Stands in for ``input``: replays lines, then raises EOFError."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def entries():
    return (
        KnowledgeEntry(keywords=["hello", "hi"], response="Hi there!"),
        KnowledgeEntry(keywords=["order", "delivery"], response="Your order is on its way."),
        KnowledgeEntry(keywords=["hello", "bye"], response="Later!"),
    )


@pytest.fixture
def kb_file(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(
        json.dumps([
            {"keywords": ["Hello", " HI "], "response": "Hi there!"},
            {"keywords": ["order"], "response": "Your order is on its way."},
        ]),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def scripted_input():
    return ScriptedInput
