import json
import logging
from pathlib import Path

from screen_graph import config


def test_deep_merge_handles_nested_dicts_without_mutating_inputs() -> None:
    base = {"display": {"fps": 60}, "controller": {"strict": False}}
    override = {
        "display": {"fps": 30},
        "controller": {"allow_overwrite": False},
        "logging": {"level": "DEBUG"},
    }

    merged = config._deep_merge(base, override)

    assert merged["display"]["fps"] == 30
    assert merged["controller"]["strict"] is False
    assert merged["controller"]["allow_overwrite"] is False
    assert merged["logging"]["level"] == "DEBUG"

    assert base["display"]["fps"] == 60
    assert "allow_overwrite" not in base["controller"]


def test_load_config_merges_defaults_with_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "display": {"scale": 3.0},
                "new_option": {"enabled": True},
            }
        ),
        encoding="utf-8",
    )

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded["display"]["scale"] == 3.0
    assert loaded["display"]["fps"] == 60
    assert loaded["new_option"] == {"enabled": True}
    assert loaded is not config.DEFAULT_CONFIG


def test_load_config_falls_back_to_defaults_on_invalid_json(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("not valid json", encoding="utf-8")

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded == config.DEFAULT_CONFIG
    assert loaded["display"] is not config.DEFAULT_CONFIG["display"]


def test_load_config_ignores_non_object_payload(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    loaded, _ = config.load_config(path=config_path)

    assert loaded == config.DEFAULT_CONFIG


def test_load_config_uses_user_config_path_by_default(
    tmp_path: Path, monkeypatch
) -> None:
    target = tmp_path / "nested" / "config.json"
    monkeypatch.setattr(config, "user_config_path", lambda: target)

    loaded, resolved_path = config.load_config()

    assert resolved_path == target
    assert loaded == config.DEFAULT_CONFIG


def test_save_config_persists_to_disk(tmp_path: Path) -> None:
    config_path = tmp_path / "sub" / "config.json"
    payload = {"controller": {"strict": True}}

    config.save_config(payload, config_path)

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved == payload


def test_load_config_replaces_ill_typed_values_with_defaults(
    tmp_path: Path, caplog
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "display": {"fps": -5, "width": 640, "scale": "big"},
                "controller": {"strict": "yes", "dispose_inactive": True},
                "logging": {"level": "LOUD"},
            }
        ),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="screen_graph"):
        loaded, _ = config.load_config(path=config_path)

    assert loaded["display"]["fps"] == 60
    assert loaded["display"]["width"] == 640
    assert loaded["display"]["scale"] == 2.0
    assert loaded["controller"]["strict"] is False
    assert loaded["controller"]["dispose_inactive"] is True
    assert loaded["logging"]["level"] == "WARNING"
    messages = [record.getMessage() for record in caplog.records]
    assert any("controller.strict" in message for message in messages)
    assert any("display.fps" in message for message in messages)


def test_validate_config_restores_non_object_sections() -> None:
    broken = {"controller": True, "display": {"caption": 7, "height": 1.5}}

    validated = config.validate_config(broken)

    assert validated["controller"] == config.DEFAULT_CONFIG["controller"]
    assert validated["display"]["caption"] == "Screen Graph"
    assert validated["display"]["height"] == 300
    assert broken["controller"] is True
