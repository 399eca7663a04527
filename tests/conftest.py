import pytest

from database import Database
from managing_system import ManagingSystem


class ScriptedPrompt:
    """Stands in for input(): hands out canned answers and records each question."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def __call__(self, label=""):
        self.asked.append(label)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)


@pytest.fixture
def db():
    database = Database.connect_sqlite(":memory:")
    database.create_tables()
    yield database
    database.close()


@pytest.fixture
def run(db):
    """Run one operation against db with the given answers; returns its result"""
    def _run(operation, *answers):
        prompt = ScriptedPrompt(*answers)
        system = ManagingSystem(prompt=prompt, currency="₹")
        return getattr(system, operation)(db)
    return _run
