"""Capture config files (JSON with comments).

CLI args override values loaded from the file.
"""

from __future__ import annotations

import json
import os
import re
from typing import Any, Dict


_JSONC_TOKEN = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|#[^\n]*|/\*.*?\*/', re.S)


def _strip_jsonc_comments(src: str) -> str:
    # //, # and /* */ comments are dropped; double-quoted strings are kept whole
    return _JSONC_TOKEN.sub(lambda m: m.group(1) or "", src)


def load_config(path: str) -> Dict[str, Any]:
    with open(os.path.expanduser(path), "r", encoding="utf-8") as f:
        raw = f.read()
    raw = raw.lstrip("\ufeff")
    data = json.loads(_strip_jsonc_comments(raw))
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")
    return data


def _get_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    v = cfg.get(key)
    return v if isinstance(v, dict) else {}


def flatten_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Map the sectioned config onto flat CLI argument names."""
    flat: Dict[str, Any] = {}

    capture = _get_section(cfg, "capture")
    export = _get_section(cfg, "export")
    demo = _get_section(cfg, "demo")

    def pull(dst_key: str, section: Dict[str, Any], section_key: str):
        if section_key in section:
            flat[dst_key] = section.get(section_key)

    pull("environment", capture, "environment")
    pull("frames", capture, "frames")

    pull("out", export, "out")
    pull("mode", export, "mode")
    pull("prefix", export, "prefix")
    pull("columns", export, "columns")
    pull("writer", export, "writer")
    pull("format", export, "format")

    pull("size", demo, "size")
    pull("points", demo, "points")
    pull("pulse", demo, "pulse")

    return flat


def dump_config(args: Any) -> str:
    cfg: Dict[str, Any] = {
        "version": 1,
        "capture": {
            "environment": str(getattr(args, "environment", "simulator")),
            "frames": int(getattr(args, "frames", 16)),
        },
        "export": {
            "out": str(getattr(args, "out", ".")),
            "mode": str(getattr(args, "mode", "matrix")),
            "prefix": getattr(args, "prefix", None),
            "columns": getattr(args, "columns", None),
            "writer": str(getattr(args, "writer", "pygame")),
            "format": str(getattr(args, "format", "png")),
        },
        "demo": {
            "size": int(getattr(args, "size", 32)),
            "points": int(getattr(args, "points", 5)),
            "pulse": int(getattr(args, "pulse", 6)),
        },
    }

    header_lines = [
        "// rotoscope config (JSON with comments)",
        "//",
        "// Basic usage:",
        "//   python3 -m rotoscope --config <this_file>",
        "//   python3 -m rotoscope --frames 24 --save_config roto.jsonc",
        "//",
        "// Notes:",
        "// - Lines starting with // or # are comments.",
        "// - CLI args override config values.",
        "",
    ]
    header = "\n".join(header_lines)

    body = json.dumps(cfg, ensure_ascii=False, indent=2)
    return header + body + "\n"
