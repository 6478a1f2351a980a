"""
End-to-end tests for QuerySession: load, validate, rewrite, execute, record.
"""

import pytest

from json_sql_explorer.engine import placeholder
from json_sql_explorer.errors import ParseError
from json_sql_explorer.session import QuerySession


class TestLoadDataset:

    def test_load_sets_records_and_alias(self, session):
        dataset = session.load_dataset('[{"a": 1}, {"a": 2}]', alias="nums")

        assert dataset.records == [{"a": 1}, {"a": 2}]
        assert session.dataset.alias == "nums"

    def test_blank_alias_falls_back_to_default(self, session):
        session.load_dataset('[{"a": 1}]', alias="  ")

        assert session.dataset.alias == "table"

    def test_load_resets_result_and_history(self, session):
        session.load_dataset('[{"a": 1}]')
        session.execute("SELECT * FROM table")
        assert len(session.history) == 1
        assert session.result is not None

        session.load_dataset('[{"b": 2}]')

        assert session.result is None
        assert len(session.history) == 0

    def test_parse_error_keeps_previous_dataset(self, session):
        session.load_dataset('[{"a": 1}]')
        session.execute("SELECT * FROM table")

        with pytest.raises(ParseError):
            session.load_dataset('[{"a": ')

        assert session.dataset.records == [{"a": 1}]
        assert len(session.history) == 1
        assert session.result.kind == "parse"
        assert session.result.error.startswith("Invalid JSON")

    def test_paste_keeps_current_alias(self, session):
        session.load_sample("states")
        session.load_dataset('[{"state": "Ohio"}]')

        assert session.dataset.alias == "states"

    def test_load_sample_uses_sample_name_as_alias(self, session):
        session.load_sample("books")

        assert session.dataset.alias == "books"
        assert len(session.dataset) == 5

    def test_unload_keeps_history(self, session):
        session.load_dataset('[{"a": 1}]')
        session.execute("SELECT * FROM table")
        session.unload()

        assert session.dataset.is_empty
        assert session.result is None
        assert len(session.history) == 1


class TestExecute:

    def test_end_to_end_filter(self, session):
        session.load_dataset('[{"a": 1}, {"a": 2}]', alias="table")

        result = session.execute("SELECT * FROM table WHERE a > 1")

        assert result.ok
        assert result.rows == [{"a": 2}]
        assert len(session.history) == 1
        assert session.history.entries()[0].query_text == "SELECT * FROM table WHERE a > 1"

    def test_sample_query(self, session):
        session.load_sample("states")

        result = session.execute("SELECT state FROM states WHERE region = 'South'")

        assert [r["state"] for r in result.rows] == ["Texas", "Florida", "Georgia", "North Carolina"]

    def test_empty_dataset_is_rejected(self, recording_executor):
        session = QuerySession(executor=recording_executor)

        result = session.execute("SELECT * FROM table")

        assert result.kind == "validation"
        assert result.error == "Please load JSON data first"
        assert len(session.history) == 0
        assert recording_executor.calls == []

    def test_empty_object_is_one_empty_record(self, session):
        session.load_dataset("{}")

        result = session.execute("SELECT * FROM table")

        assert result.ok
        assert result.rows == [{}]
        assert len(session.history) == 1

    def test_heterogeneous_integers_survive_end_to_end(self, session):
        session.load_dataset('[{"a": 1}, {"b": 2}]')

        result = session.execute("SELECT a FROM table WHERE a IS NOT NULL")

        assert result.rows == [{"a": 1}]
        assert isinstance(result.rows[0]["a"], int)

    def test_empty_array_counts_as_empty_dataset(self, session):
        session.load_dataset("[]")

        assert session.execute("SELECT * FROM table").kind == "validation"

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_blank_query_never_reaches_engine(self, recording_executor, query):
        session = QuerySession(executor=recording_executor)
        session.load_dataset('[{"a": 1}]')

        result = session.execute(query)

        assert result.error == "Please enter a SQL query"
        assert recording_executor.calls == []
        assert len(session.history) == 0

    def test_engine_error_is_not_recorded(self, session):
        session.load_dataset('[{"a": 1}]')

        result = session.execute("SELECT nope FROM table")

        assert result.kind == "engine"
        assert result.rows == []
        assert len(session.history) == 0

    def test_executor_receives_rewritten_sql_and_records(self, recording_executor):
        session = QuerySession(executor=recording_executor)
        session.load_dataset('[{"a": 1}, {"b": 2}]', alias="data")

        session.execute("SELECT * FROM data")

        sql, params = recording_executor.calls[0]
        assert sql == f"SELECT * FROM {placeholder(0)}"
        assert params == [[{"a": 1}, {"b": 2}]]

    def test_scalar_engine_output_is_wrapped(self):
        session = QuerySession(executor=lambda sql, params: 42)
        session.load_dataset('[{"a": 1}]')

        assert session.execute("SELECT COUNT(*) FROM table").rows == [42]

    def test_execute_uses_buffer_when_no_text_given(self, session):
        session.load_dataset('[{"a": 1}]')
        session.query_text = "SELECT a FROM table"

        assert session.execute().rows == [{"a": 1}]

    def test_clear_query(self, session):
        session.load_dataset('[{"a": 1}]')
        session.execute("SELECT * FROM table")
        session.clear_query()

        assert session.query_text == ""
        assert session.result is None
        assert len(session.history) == 1


class TestHistoryReplay:

    def test_replay_appends_new_entry(self, session):
        session.load_dataset('[{"a": 1}, {"a": 2}]')
        session.execute("SELECT * FROM table WHERE a > 1")
        session.execute("SELECT a FROM table")
        original = session.history.entries()[-1]
        n = len(session.history)

        text = session.use_history(original.id)
        assert len(session.history) == n

        session.execute(text)

        entries = session.history.entries()
        assert len(entries) == n + 1
        assert entries[0].query_text == original.query_text
        assert entries[0].id != original.id
        assert entries[-1] is original

    def test_use_history_does_not_execute(self, recording_executor):
        session = QuerySession(executor=recording_executor)
        session.load_dataset('[{"a": 1}]')
        session.execute("SELECT 1 FROM table")
        entry = session.history.entries()[0]
        session.clear_query()

        session.use_history(entry.id)

        assert session.query_text == "SELECT 1 FROM table"
        assert len(recording_executor.calls) == 1
        assert session.result is None

    def test_unknown_entry(self, session):
        with pytest.raises(KeyError):
            session.use_history("missing")

    def test_clear_history(self, session):
        session.load_dataset('[{"a": 1}]')
        for _ in range(3):
            session.execute("SELECT * FROM table")

        session.clear_history()

        assert session.history_entries() == []
