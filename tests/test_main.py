import pytest

import main
from conftest import ScriptedPrompt
from database import Database, DatabaseError

LOGIN = ("", "", "")  # host, database and user all take their defaults


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("DB_HOST", "DB_NAME", "DB_USER", "DB_PORT", "CURRENCY_SYMBOL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sqlite_login(monkeypatch, tmp_path):
    """Route the MySQL login to a SQLite file; returns the recorded connect arguments"""
    calls = []
    path = tmp_path / "employees.db"

    def fake_connect(cls, host, database, user, password, port=3306):
        calls.append((host, database, user, password, port))
        return Database.connect_sqlite(str(path))

    monkeypatch.setattr(Database, "connect_mysql", classmethod(fake_connect))
    return calls, path


def test_exit_closes_session_with_status_zero(sqlite_login, capsys):
    calls, _ = sqlite_login
    status = main.main(prompt=ScriptedPrompt(*LOGIN, "7"), password_prompt=lambda label: "pw")

    assert status == 0
    assert calls == [("localhost", "library_db", "root", "pw", 3306)]
    out = capsys.readouterr().out
    assert "✓ Table 'Employee' is ready" in out
    assert "✓ MySQL connection closed" in out


def test_connection_failure_exits_non_zero_before_menu(monkeypatch, capsys):
    def refuse(cls, *args, **kwargs):
        raise DatabaseError("Can't connect to MySQL server on 'localhost:3306'")

    monkeypatch.setattr(Database, "connect_mysql", classmethod(refuse))
    status = main.main(prompt=ScriptedPrompt(*LOGIN), password_prompt=lambda label: "")

    assert status == 1
    out = capsys.readouterr().out
    assert "✗ Error connecting to MySQL: Can't connect" in out
    assert "Failed to connect to database. Exiting..." in out
    assert "MAIN MENU" not in out


def test_invalid_choice_shows_menu_again(sqlite_login, capsys):
    status = main.main(prompt=ScriptedPrompt(*LOGIN, "9", "abc", "7"), password_prompt=lambda label: "")

    assert status == 0
    out = capsys.readouterr().out
    assert out.count("Invalid choice! Please enter a number between 1-7") == 2
    assert out.count("MAIN MENU") == 3


def test_session_runs_operations_against_one_connection(sqlite_login):
    _, path = sqlite_login
    answers = LOGIN + (
        "1", "Asha", "Engineering", "75000", "2023-04-01", "a@x.com", "555-1",
        "3", "1", "", "Platform", "", "", "", "",
        "1", "Ravi", "", "50000", "2022-01-10", "", "",
        "2", "2", "yes",
        "7",
    )
    assert main.main(prompt=ScriptedPrompt(*answers), password_prompt=lambda label: "") == 0

    db = Database.connect_sqlite(str(path))
    employees = db.fetch_all_employees()
    db.close()
    assert [(e.emp_id, e.name, e.department) for e in employees] == [(1, "Asha", "Platform")]


def test_end_of_input_ends_session_cleanly(sqlite_login, capsys):
    assert main.main(prompt=ScriptedPrompt(*LOGIN), password_prompt=lambda label: "") == 0
    assert "✓ MySQL connection closed" in capsys.readouterr().out


def test_unexpected_operation_error_does_not_end_loop(sqlite_login, monkeypatch, capsys):
    def explode(self, db):
        raise RuntimeError("boom")

    monkeypatch.setattr(main.ManagingSystem, "show_statistics", explode)
    status = main.main(prompt=ScriptedPrompt(*LOGIN, "6", "7"), password_prompt=lambda label: "")

    assert status == 0
    out = capsys.readouterr().out
    assert "✗ An error occurred: boom" in out
    assert "Thank you for using Employee Management System!" in out


def test_settings_come_from_environment(sqlite_login, monkeypatch):
    calls, _ = sqlite_login
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_NAME", "hr")
    monkeypatch.setenv("DB_PORT", "3307")

    main.main(prompt=ScriptedPrompt("", "", "admin", "7"), password_prompt=lambda label: "s3")

    assert calls == [("db.internal", "hr", "admin", "s3", 3307)]


def test_operation_errors_reach_the_user_as_one_line(sqlite_login, monkeypatch, capsys):
    def explode(self, db):
        raise RuntimeError("boom")

    monkeypatch.setattr(main.ManagingSystem, "show_statistics", explode)
    main.main(prompt=ScriptedPrompt(*LOGIN, "6", "7"), password_prompt=lambda label: "")

    captured = capsys.readouterr()
    assert "Traceback" not in captured.err
    assert "Traceback" not in captured.out


def test_query_errors_do_not_dump_sql(sqlite_login, monkeypatch, capsys):
    # Without the table every statistics query fails inside the driver
    monkeypatch.setattr(Database, "create_tables", lambda self: None)
    main.main(prompt=ScriptedPrompt(*LOGIN, "6", "7"), password_prompt=lambda label: "")

    captured = capsys.readouterr()
    assert "✗ Error fetching statistics: no such table: Employee" in captured.out
    assert "SQL:" not in captured.err
    assert "SQL:" not in captured.out


def test_bad_port_is_reported_in_one_line(monkeypatch, capsys):
    monkeypatch.setenv("DB_PORT", "mysql")
    prompt = ScriptedPrompt()

    assert main.main(prompt=prompt, password_prompt=lambda label: "") == 1
    captured = capsys.readouterr()
    assert "✗ Invalid configuration: DB_PORT must be a number, got 'mysql'" in captured.out
    assert "Traceback" not in captured.err
    assert prompt.asked == []


def test_banner_names_the_connected_database(sqlite_login, capsys):
    _, path = sqlite_login
    main.main(prompt=ScriptedPrompt(*LOGIN, "7"), password_prompt=lambda label: "")
    assert f"✓ Connected to database: {path}" in capsys.readouterr().out
