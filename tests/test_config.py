"""Tests for configuration loading and the settings surface."""

import logging
from pathlib import Path

import pytest

from cleandone.config import Config, config_items, load_config, save_config, set_option
from cleandone.core.insertion import InsertPosition
from cleandone.errors import ConfigError


@pytest.fixture
def conf(tmp_path):
    return tmp_path / "cleandone.conf"


class TestLoadConfig:
    def test_defaults_when_missing(self, conf):
        assert load_config(conf) == Config()

    def test_reads_all_options(self, conf):
        conf.write_text(
            "# settings\n"
            "DAYS_THRESHOLD=10\n"
            'TODO_NOTE_FILENAME="Inbox/Todo.md"  # quoted\n'
            "INSERT_POSITION=append # trailing comment\n"
            "AUTO_MOVE_CHECKED=yes\n"
            "VAULT_DIR='~/notes'\n"
        )
        config = load_config(conf)
        assert config.days_threshold == 10
        assert config.todo_note_filename == "Inbox/Todo.md"
        assert config.insert_position is InsertPosition.APPEND
        assert config.auto_move_checked is True
        assert config.vault_dir == "~/notes"

    @pytest.mark.parametrize("value", ["-1", "abc", "2.5", ""])
    def test_bad_days_keep_default(self, conf, value, caplog):
        conf.write_text(f"DAYS_THRESHOLD={value}\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(conf)
        assert config.days_threshold == 5
        assert "days_threshold" in caplog.text

    def test_unknown_keys_and_junk_lines_ignored(self, conf):
        conf.write_text("COLOR=blue\nnot a setting\n\nDAYS_THRESHOLD=0\n")
        assert load_config(conf).days_threshold == 0


class TestSetOption:
    def test_returns_new_config(self):
        config = Config()
        updated = set_option(config, "days_threshold", "7")
        assert updated.days_threshold == 7
        assert config.days_threshold == 5

    def test_key_is_case_insensitive(self):
        assert set_option(Config(), "AUTO_MOVE_CHECKED", "on").auto_move_checked is True

    @pytest.mark.parametrize(
        "key, value",
        [
            ("days_threshold", "-2"),
            ("insert_position", "middle"),
            ("auto_move_checked", "maybe"),
            ("todo_note_filename", "  "),
            ("nope", "1"),
        ],
    )
    def test_rejects_bad_values(self, key, value):
        with pytest.raises(ConfigError):
            set_option(Config(), key, value)


class TestSaveConfig:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "cleandone.conf"
        config = Config(
            days_threshold=3,
            todo_note_filename="Work.md",
            insert_position=InsertPosition.APPEND,
            auto_move_checked=True,
            vault_dir="/tmp/vault",
        )
        assert save_config(config, path) == path
        assert load_config(path) == config

    def test_items_are_display_strings(self):
        assert ("insert_position", "prepend") in config_items(Config())
        assert ("auto_move_checked", "false") in config_items(Config())


class TestQuoting:
    @pytest.mark.parametrize("name", ['My "Q" list.md', "Bob's list.md", "Notes # work.md"])
    def test_note_names_survive_save_and_load(self, conf, name):
        config = Config(todo_note_filename=name)
        save_config(config, conf)
        assert load_config(conf).todo_note_filename == name

    def test_set_via_option_then_reload(self, conf):
        config = set_option(Config(), "todo_note_filename", 'My "Q" list.md')
        save_config(config, conf)
        assert load_config(conf) == config

    @pytest.mark.parametrize("key", ["todo_note_filename", "vault_dir"])
    def test_rejects_both_quote_kinds(self, key):
        with pytest.raises(ConfigError, match="quote"):
            set_option(Config(), key, "a'b\"c")


class TestConfig:
    def test_vault_path_defaults_to_cwd(self):
        assert Config().vault_path == Path.cwd()

    def test_vault_path_expands_user(self):
        assert Config(vault_dir="~/notes").vault_path == Path.home() / "notes"

    def test_snapshot_is_equal_copy(self):
        config = Config(days_threshold=2)
        snap = config.snapshot()
        assert snap == config
        assert snap is not config
