"""Tests for JsonStore load/save and its recovery paths."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from settingstore.core.backup import find_backups
from settingstore.core.config import StoreOptions
from settingstore.core.shared.exceptions import DefaultValueError, StoreStateError
from settingstore.core.store import JSON_STORAGE, JsonStore
from settingstore.core.version_gate import StorageKind
from tests.settings_models import AccountSettings, LauncherSettings, RecordingGate


def _store(path: Path, gate: RecordingGate | None = None, **kwargs: Any) -> JsonStore:
    return JsonStore(path, LauncherSettings, version_gate=gate, **kwargs)


class TestMissingFile:
    """Loading a path that does not exist yet."""

    def test_returns_default_value(self, settings_path):
        value = _store(settings_path).load()
        assert value == LauncherSettings()

    def test_writes_default_to_disk(self, settings_path):
        _store(settings_path).load()
        assert settings_path.exists()
        assert json.loads(settings_path.read_text()) == {
            "hotkey": "Alt+Space",
            "max_results": 4,
            "theme": "dark",
            "plugins": ["calculator", "shell"],
            "window": {"width": 800, "height": 600},
        }

    def test_reload_is_idempotent(self, settings_path):
        first = _store(settings_path).load()
        second = _store(settings_path).load()
        assert first == second

    def test_no_backup_created(self, settings_path):
        _store(settings_path).load()
        assert find_backups(settings_path) == []


class TestRoundTrip:
    """Save followed by load."""

    def test_mutations_survive_reload(self, settings_path):
        store = _store(settings_path)
        settings = store.load()
        settings.max_results = 9
        settings.nickname = "ada"
        settings.window.width = 1024
        store.save()

        reloaded = _store(settings_path).load()
        assert reloaded == settings
        assert reloaded.window.width == 1024

    def test_valid_file_is_left_untouched(self, settings_path):
        content = '{"hotkey": "Ctrl+K", "max_results": 2}'
        settings_path.write_text(content)

        value = _store(settings_path).load()

        assert value.hotkey == "Ctrl+K"
        assert value.max_results == 2
        assert value.theme == "dark"
        assert settings_path.read_text() == content

    def test_written_file_is_indented_without_nulls(self, settings_path):
        store = _store(settings_path)
        store.load()
        text = settings_path.read_text()
        assert '\n  "hotkey": "Alt+Space"' in text
        assert "nickname" not in text

    def test_custom_indent(self, settings_path):
        store = _store(settings_path, options=StoreOptions(indent=4))
        store.load()
        assert '\n    "hotkey"' in settings_path.read_text()

    def test_repeated_cycles_create_no_backups(self, settings_path):
        store = _store(settings_path)
        store.load()
        store.save()
        for _ in range(2):
            cycle = _store(settings_path)
            cycle.load()
            cycle.save()
        assert find_backups(settings_path) == []


class TestRecovery:
    """Unusable contents are backed up and replaced by the default."""

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "   \n\t ",
            "{not valid",
            "null",
            '{"max_results": "lots"}',
            "[1, 2, 3]",
        ],
    )
    def test_unusable_contents_reset_to_default(self, settings_path, fixed_clock, content):
        settings_path.write_text(content)

        value = _store(settings_path, clock=fixed_clock).load()

        assert value == LauncherSettings()
        backups = find_backups(settings_path)
        assert len(backups) == 1
        assert backups[0].read_bytes() == content.encode()
        assert LauncherSettings.model_validate_json(settings_path.read_text()) == value

    def test_invalid_utf8_bytes_reset_to_default(self, settings_path, fixed_clock):
        content = b'{"theme": "\xff\xfe"}'
        settings_path.write_bytes(content)

        value = _store(settings_path, clock=fixed_clock).load()

        assert value == LauncherSettings()
        (backup,) = find_backups(settings_path)
        assert backup.read_bytes() == content
        assert LauncherSettings.model_validate_json(settings_path.read_text()) == value

    def test_byte_order_mark_is_accepted(self, settings_path):
        settings_path.write_bytes(b'\xef\xbb\xbf{"theme": "light"}')

        value = _store(settings_path).load()

        assert value.theme == "light"
        assert find_backups(settings_path) == []

    def test_backup_name_uses_stem_timestamp_and_suffix(self, settings_path, fixed_clock):
        settings_path.write_text("{not valid")
        _store(settings_path, clock=fixed_clock).load()

        (backup,) = find_backups(settings_path)
        assert backup.parent == settings_path.parent
        assert backup.name.startswith("launcher-")
        assert backup.name.endswith("-1234567.json")

    def test_malformed_file_is_logged_with_path(self, settings_path, caplog):
        caplog.set_level(logging.INFO, logger="settingstore")
        settings_path.write_text("{not valid")

        _store(settings_path).load()

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert str(settings_path) in warnings[0].getMessage()

    def test_null_members_keep_field_defaults(self, settings_path):
        settings_path.write_text('{"hotkey": null, "max_results": 7, "window": {"width": null}}')

        value = _store(settings_path).load()

        assert value.hotkey == "Alt+Space"
        assert value.max_results == 7
        assert value.window.width == 800
        assert find_backups(settings_path) == []

    def test_decode_replaces_nested_collections(self, settings_path):
        settings_path.write_text('{"plugins": ["web"]}')
        value = _store(settings_path).load()
        assert value.plugins == ["web"]

    def test_each_failure_gets_its_own_backup(self, settings_path):
        ticks = iter([1_700_000_000_000_000_100, 1_700_000_000_000_000_200])

        settings_path.write_text("{broken")
        _store(settings_path, clock=lambda: next(ticks)).load()
        settings_path.write_text("null")
        _store(settings_path, clock=lambda: next(ticks)).load()

        backups = find_backups(settings_path)
        assert [b.read_text() for b in backups] == ["{broken", "null"]

    def test_backup_collision_overwrites(self, settings_path, fixed_clock):
        settings_path.write_text("{first")
        _store(settings_path, clock=fixed_clock).load()
        settings_path.write_text("{second")
        _store(settings_path, clock=fixed_clock).load()

        (backup,) = find_backups(settings_path)
        assert backup.read_text() == "{second"


class TestVersionGate:
    """Interaction with the version compatibility gate."""

    def test_stale_file_is_deleted_without_backup(self, settings_path):
        settings_path.write_text('{"max_results": 9}')
        gate = RecordingGate(clear=True)

        value = _store(settings_path, gate).load()

        assert value == LauncherSettings()
        assert find_backups(settings_path) == []
        assert json.loads(settings_path.read_text())["max_results"] == 4

    def test_stale_gate_without_file_is_harmless(self, settings_path):
        value = _store(settings_path, RecordingGate(clear=True)).load()
        assert value == LauncherSettings()

    def test_gate_queried_once_per_load(self, settings_path, gate):
        store = _store(settings_path, gate)
        store.load()
        store.load()
        assert gate.queries == [(settings_path, JSON_STORAGE)] * 2
        assert JSON_STORAGE is StorageKind.JSON

    def test_gate_marked_current_after_each_save(self, settings_path, gate):
        store = _store(settings_path, gate)
        store.load()
        store.save()
        # one commit from the default write during load, one from save
        assert gate.commits == [settings_path, settings_path]

    def test_valid_file_load_does_not_commit(self, settings_path, gate):
        settings_path.write_text("{}")
        _store(settings_path, gate).load()
        assert gate.commits == []


class TestOrderingAndErrors:
    """Misuse and I/O failures."""

    def test_save_before_load_fails_fast(self, settings_path, gate):
        store = _store(settings_path, gate)
        with pytest.raises(StoreStateError):
            store.save()
        assert not settings_path.exists()
        assert gate.commits == []

    def test_value_before_load_fails_fast(self, settings_path):
        with pytest.raises(StoreStateError):
            _ = _store(settings_path).value

    def test_value_property_is_live_object(self, settings_path):
        store = _store(settings_path)
        loaded = store.load()
        assert store.value is loaded
        assert store.is_loaded

    def test_directory_path(self, settings_path):
        assert _store(settings_path).directory_path == settings_path.parent

    def test_missing_directory_propagates_os_error(self, tmp_path):
        store = _store(tmp_path / "absent" / "launcher.json")
        with pytest.raises(FileNotFoundError):
            store.load()

    def test_failed_load_is_not_marked_loaded(self, tmp_path):
        store = _store(tmp_path / "absent" / "launcher.json")
        with pytest.raises(FileNotFoundError):
            store.load()
        assert not store.is_loaded

    def test_required_fields_without_factory(self, settings_path):
        store = JsonStore(settings_path, AccountSettings)
        with pytest.raises(DefaultValueError):
            store.load()

    def test_required_fields_with_factory(self, settings_path):
        settings_path.write_text("{}")
        store = JsonStore(
            settings_path,
            AccountSettings,
            default_factory=lambda: AccountSettings(user="guest"),
        )

        value = store.load()

        assert value == AccountSettings(user="guest")
        assert len(find_backups(settings_path)) == 1
        assert json.loads(settings_path.read_text()) == {"user": "guest", "retries": 3}

    def test_plain_dict_target(self, settings_path):
        settings_path.write_text('{"a": 1, "b": null}')
        value = JsonStore(settings_path, dict[str, Any]).load()
        assert value == {"a": 1}
