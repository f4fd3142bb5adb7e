"""
Tests for userledger CLI.
"""

import json

import pytest

from userledger.cli import main, create_parser


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove userledger environment overrides."""
    for key in ("USERLEDGER_STORE_STORE_PATH", "USERLEDGER_STORE_ENCODING", "USERLEDGER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def register_args(store_path, full_name="Anna Smith", age="20",
                  phone="+79990000001", email="anna@a.ru"):
    return [
        "--store", str(store_path),
        "register",
        "--full-name", full_name,
        "--age", age,
        "--phone", phone,
        "--email", email,
    ]


class TestCLI:
    """Test CLI functionality."""

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_register_success(self, store_path, capsys):
        exit_code = main(register_args(store_path))
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "✅ Registered: Anna Smith" in output
        assert store_path.read_text(encoding="utf-8") == "Anna Smith|+79990000001|anna@a.ru|20\n"

    def test_register_invalid(self, store_path, capsys):
        exit_code = main(register_args(store_path, age="abc", phone="+78990000001"))
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "❌ Registration rejected:" in output
        assert "age: Age must contain only digits" in output
        assert "phone: Third character of the phone must be 9" in output
        assert not store_path.exists()

    def test_register_duplicate(self, store_path, capsys):
        main(register_args(store_path))
        capsys.readouterr()

        exit_code = main(register_args(store_path, full_name="ANNA SMITH", phone="+79990000002",
                                       email="other@a.ru"))
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "already exists" in output

    def test_list_json(self, store_path, capsys):
        main(register_args(store_path))
        main(register_args(store_path, full_name="Борис", phone="+79990000002", email="boris@b.ru"))
        capsys.readouterr()

        exit_code = main(["--store", str(store_path), "list", "--format", "json"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert [item["full_name"] for item in data] == ["Anna Smith", "Борис"]
        assert data[1]["phone"] == "+79990000002"

    def test_list_table_with_limit(self, store_path, capsys):
        main(register_args(store_path))
        main(register_args(store_path, full_name="Boris", phone="+79990000002", email="boris@b.ru"))
        capsys.readouterr()

        exit_code = main(["--store", str(store_path), "list", "--limit", "1"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Anna Smith" in output
        assert "Boris" not in output
        assert "Showing 1 of 2 users" in output

    def test_list_empty(self, store_path, capsys):
        exit_code = main(["--store", str(store_path), "list"])

        assert exit_code == 0
        assert "No users registered" in capsys.readouterr().out

    def test_check_valid(self, store_path, capsys):
        exit_code = main(["--store", str(store_path), "check", "email", "a@b.co"])

        assert exit_code == 0
        assert "✅ email is valid" in capsys.readouterr().out

    def test_check_invalid(self, store_path, capsys):
        exit_code = main(["--store", str(store_path), "check", "phone", "89991234567"])

        assert exit_code == 1
        assert "phone must contain 12 characters" in capsys.readouterr().out.lower()
        assert not store_path.exists()

    def test_bad_config_file(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text("{broken")

        exit_code = main(["--config", str(config_file), "list"])

        assert exit_code == 1
        assert "Failed to load config" in capsys.readouterr().err

    def test_config_with_wrong_shape(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"log_level": null}')

        exit_code = main(["--config", str(config_file), "list"])

        assert exit_code == 1
        assert "log_level must be a string" in capsys.readouterr().err

    def test_undecodable_store(self, store_path, capsys):
        store_path.write_bytes(b"\xff\xfe|x|y|1\n")

        exit_code = main(["--store", str(store_path), "list"])

        assert exit_code == 1
