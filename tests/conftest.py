import pytest

from json_sql_explorer.session import QuerySession


class RecordingExecutor:
    """Stand-in engine that remembers every call."""

    def __init__(self, output=None):
        self.calls = []
        self.output = [] if output is None else output

    def __call__(self, sql, params):
        self.calls.append((sql, params))
        return self.output


@pytest.fixture()
def session():
    return QuerySession()


@pytest.fixture()
def recording_executor():
    return RecordingExecutor()
