"""Tests for the command line entry point."""

import logging

import pytest

from wordtables import cli


def test_missing_files_exit_with_error(caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--no-progress"]) == 1
    assert "one or more files" in caplog.text


def test_unreadable_file_exit_with_error(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main([str(tmp_path / "nope.txt"), "--no-progress"]) == 1
    assert "nope.txt" in caplog.text


def test_dry_run_prints_summary(write_word_list, capsys, monkeypatch):
    def fail_write(*args, **kwargs):
        raise AssertionError("database must not be touched in a dry run")

    monkeypatch.setattr(cli, "write_tables", fail_write)
    path = write_word_list("words.txt", ["коты", "слон", "слово", "кот"])

    assert cli.main([str(path), "--dry-run", "--no-progress"]) == 0

    out = capsys.readouterr().out
    assert "words4:        2 words" in out
    assert "words7:        0 words" in out
    assert "[OK] Dry run complete" in out


def test_writes_tables_with_config_and_schema(write_word_list, capsys, monkeypatch, tmp_path):
    calls = []

    def record_write(result, config_file, schema):
        calls.append((result, config_file, schema))

    monkeypatch.setattr(cli, "write_tables", record_write)
    path = write_word_list("words.txt", ["коты", "машина"])
    config_file = tmp_path / "config.json"

    code = cli.main([str(path), "--config", str(config_file), "--schema", "game", "--no-progress"])

    assert code == 0
    assert "[OK] Tables created" in capsys.readouterr().out
    result, used_config, schema = calls[0]
    assert used_config == config_file
    assert schema == "game"
    assert result.summary() == {4: 1, 5: 0, 6: 1, 7: 0}


def test_database_error_exit_with_error(write_word_list, monkeypatch, caplog):
    import psycopg

    def broken_write(*args):
        raise psycopg.OperationalError("connection refused")

    monkeypatch.setattr(cli, "write_tables", broken_write)
    path = write_word_list("words.txt", ["коты"])

    with caplog.at_level(logging.ERROR):
        assert cli.main([str(path), "--no-progress"]) == 1
    assert "connection refused" in caplog.text


def test_invalid_log_level_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["words.txt", "--log-level", "LOUD"])


def test_write_tables_logs_target_and_uses_schema(write_word_list, monkeypatch, tmp_path, caplog):
    from wordtables import database_manager, persistence

    written = []

    class FakeManager:
        def __init__(self, config, schema=None):
            self.schema = schema or config.schema
            self.config = config

        def get_connection_info(self):
            return {'host': self.config.host, 'port': self.config.port,
                    'database': self.config.database, 'schema': self.schema}

        def __enter__(self):
            return self

        def __exit__(self, *exc_info):
            return False

    class FakeWriter:
        def __init__(self, db_manager):
            self.db_manager = db_manager

        def write(self, result):
            written.append((self.db_manager.schema, result.summary()))

    monkeypatch.setattr(database_manager, "DatabaseManager", FakeManager)
    monkeypatch.setattr(persistence, "PostgresTableWriter", FakeWriter)
    for var in ['DB_HOST', 'DB_USER', 'DB_PASSWORD', 'DB_NAME', 'WORDTABLES_CONFIG']:
        monkeypatch.delenv(var, raising=False)
    path = write_word_list("words.txt", ["коты"])

    with caplog.at_level(logging.INFO):
        code = cli.main([str(path), "--config", str(tmp_path / "absent.json"),
                         "--schema", "game", "--no-progress"])

    assert code == 0
    assert written == [("game", {4: 1, 5: 0, 6: 0, 7: 0})]
    assert "Writing tables to words on localhost:5432 (schema game)" in caplog.text
