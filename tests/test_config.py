from __future__ import annotations

import json
import os
import tempfile
import unittest

from hanoi_console.config import (
    ConfigError,
    GameConfig,
    load_config,
    merge_dicts,
    resolve_config,
)


class TestConfig(unittest.TestCase):
    def test_load_config_expands_env_vars(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            os.environ["HANOI_TEST_LABEL"] = "fast"
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"labels": ["$HANOI_TEST_LABEL"]}, f)
            loaded = load_config(path)
            self.assertEqual(loaded["labels"], ["fast"])

    def test_load_config_rejects_bad_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertRaises(ConfigError):
                load_config(path)
            with open(path, "w", encoding="utf-8") as f:
                f.write("[1, 2]")
            with self.assertRaises(ConfigError):
                load_config(path)

    def test_merge_dicts_nested(self) -> None:
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        override = {"nested": {"y": 3, "z": 4}}
        merged = merge_dicts(base, override)
        self.assertEqual(merged, {"a": 1, "nested": {"x": 1, "y": 3, "z": 4}})

    def test_resolve_config_layers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"frame_delay_s": 0.1, "max_disks": 8}, f)
            config = resolve_config(path, {"frame_delay_s": 0.0, "color": None})
        self.assertEqual(config.frame_delay_s, 0.0)
        self.assertEqual(config.max_disks, 8)
        self.assertTrue(config.color)
        self.assertEqual(config.default_disks, 4)

    def test_defaults(self) -> None:
        config = resolve_config()
        self.assertEqual(config, GameConfig())
        self.assertEqual((config.min_disks, config.max_disks), (1, 12))
        self.assertEqual(config.clamp_disks(40), 12)

    def test_rejects_unknown_keys_and_bad_values(self) -> None:
        with self.assertRaises(ConfigError):
            GameConfig.from_dict({"pegs": 4})
        with self.assertRaises(ConfigError):
            GameConfig(frame_delay_s=-1)
        with self.assertRaises(ConfigError):
            GameConfig(min_disks=5, max_disks=3)
        with self.assertRaises(ConfigError):
            GameConfig(max_disks=64)
        with self.assertRaises(ConfigError):
            GameConfig(default_disks="4")  # type: ignore[arg-type]
        with self.assertRaises(ConfigError):
            GameConfig(color="yes")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
