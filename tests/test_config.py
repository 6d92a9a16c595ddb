"""RotoConfig and config file tests."""

from __future__ import annotations

import argparse

import pygame
import pytest

from rotoscope.config.schema import RotoConfig
from rotoscope.config_file import dump_config, flatten_config, load_config


def test_defaults():
    cfg = RotoConfig()
    assert cfg.environment == "simulator"
    assert cfg.image_format == "png"
    assert cfg.writer == "pygame"
    assert cfg.surface_flags == pygame.SRCALPHA
    assert cfg.supports_capture


@pytest.mark.parametrize(
    "env,ok",
    [
        ("simulator", True),
        ("development", True),
        ("Headless", True),
        ("test", True),
        ("device", False),
        ("production", False),
        ("somewhere", False),
    ],
)
def test_supports_capture(env, ok):
    assert RotoConfig(environment=env).supports_capture is ok


def test_from_env():
    cfg = RotoConfig.from_env(
        {"ROTO_ENVIRONMENT": "device", "ROTO_IMAGE_FORMAT": "bmp", "ROTO_WRITER": "pillow"}
    )
    assert cfg.environment == "device"
    assert cfg.image_format == "bmp"
    assert cfg.writer == "pillow"


def test_from_env_overrides():
    cfg = RotoConfig.from_env({"ROTO_ENVIRONMENT": "device"}, environment="test", writer=None)
    assert cfg.environment == "test"
    assert cfg.writer == "pygame"


def test_config_is_frozen():
    cfg = RotoConfig()
    with pytest.raises(Exception):
        cfg.environment = "device"


def test_load_config_strips_comments(tmp_path):
    p = tmp_path / "roto.jsonc"
    p.write_text(
        "// header\n"
        "{\n"
        '  "capture": {"frames": 8}, # frames\n'
        '  /* block */ "export": {"mode": "both", "prefix": "a//b"}\n'
        "}\n",
        encoding="utf-8",
    )
    cfg = load_config(str(p))
    assert cfg["capture"]["frames"] == 8
    assert cfg["export"]["prefix"] == "a//b"


def test_load_config_rejects_non_object(tmp_path):
    p = tmp_path / "bad.jsonc"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_flatten_config():
    flat = flatten_config(
        {
            "capture": {"frames": 8, "environment": "headless"},
            "export": {"columns": 4, "writer": "pillow"},
            "demo": {"size": 48},
            "unknown": {"x": 1},
        }
    )
    assert flat == {
        "frames": 8,
        "environment": "headless",
        "columns": 4,
        "writer": "pillow",
        "size": 48,
    }


def test_dump_then_load_roundtrip(tmp_path):
    args = argparse.Namespace(frames=24, out="sheets", mode="both", columns=6, size=40)
    p = tmp_path / "out.jsonc"
    p.write_text(dump_config(args), encoding="utf-8")
    flat = flatten_config(load_config(str(p)))
    assert flat["frames"] == 24
    assert flat["out"] == "sheets"
    assert flat["mode"] == "both"
    assert flat["columns"] == 6
    assert flat["size"] == 40
    assert flat["writer"] == "pygame"


def test_comment_markers_inside_strings_are_kept(tmp_path):
    p = tmp_path / "strings.jsonc"
    p.write_text(
        "{\n"
        '  "export": {"prefix": "a#b /* c */ \\"d // e\\""}, // trailing\n'
        "  /* multi\n     line */\n"
        '  "capture": {"environment": "headless"} # done\n'
        "}\n",
        encoding="utf-8",
    )
    cfg = load_config(str(p))
    assert cfg["export"]["prefix"] == 'a#b /* c */ "d // e"'
    assert cfg["capture"]["environment"] == "headless"
