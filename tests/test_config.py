"""
Config and Logging Tests

Tests:
- Loading the JSON config into typed models
- Defaults for missing sections
- Validation errors
- Building loggers and stream managers from config
- DebugLogger filtering and buffering
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import io
import json
import tempfile
import unittest
from alxlib.config import (
    AlxConfig, ConfigError, ConfigLoader, LoggingConfig, RNGConfig, load_config,
)
from alxlib.output.debug_logger import (
    DebugLogger, LogLevel, get_logger, set_logger,
)
from alxlib.utils.math_utils import SMALL_NUMBER
from alxlib.utils.rng import LehmerRNG

REPO_CONFIG_DIR = os.path.join(os.path.dirname(__file__), '..', 'config')


class ConfigTestCase(unittest.TestCase):
    """Base class writing config files into a temp directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()
        set_logger(None)

    def write(self, data, filename="alxlib.json"):
        path = os.path.join(self.config_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path


class TestConfigLoading(ConfigTestCase):
    """Test config loading."""

    def test_repo_config(self):
        config = load_config(REPO_CONFIG_DIR)
        self.assertEqual(config.rng.master_seed, 1337)
        self.assertEqual(config.rng.streams, ["spawns", "loot"])
        self.assertEqual(config.logging.level, LogLevel.INFO)

    def test_empty_file_uses_defaults(self):
        self.write({})
        config = load_config(self.config_dir)
        self.assertEqual(config, AlxConfig())
        self.assertEqual(config.tolerance, SMALL_NUMBER)
        self.assertEqual(config.rng, RNGConfig())
        self.assertEqual(config.logging, LoggingConfig())

    def test_full_file(self):
        self.write({
            "tolerance": 0.001,
            "rng": {"master_seed": 7, "streams": ["a"]},
            "logging": {"level": "trace", "categories": ["rng"], "use_colors": True},
        })
        config = load_config(self.config_dir)
        self.assertEqual(config.tolerance, 0.001)
        self.assertEqual(config.rng.master_seed, 7)
        self.assertEqual(config.logging.level, LogLevel.TRACE)
        self.assertEqual(config.logging.categories, ["rng"])
        self.assertTrue(config.logging.use_colors)

    def test_named_file(self):
        self.write({"rng": {"master_seed": 2}}, filename="tools.json")
        config = ConfigLoader(self.config_dir).load("tools.json")
        self.assertEqual(config.rng.master_seed, 2)

    def test_load_is_logged(self):
        logger = DebugLogger(level=LogLevel.INFO, use_colors=False)
        set_logger(logger)
        self.write({"rng": {"streams": ["a", "b"]}})
        load_config(self.config_dir)
        entries = logger.get_entries(category="config")
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].data, {'streams': 2})


class TestConfigErrors(ConfigTestCase):
    """Test config validation."""

    def test_missing_directory(self):
        with self.assertRaises(ConfigError):
            ConfigLoader(os.path.join(self.config_dir, "nope"))

    def test_missing_file(self):
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.file, "alxlib.json")

    def test_invalid_json(self):
        self.write("{not json")
        with self.assertRaises(ConfigError):
            load_config(self.config_dir)

    def test_top_level_must_be_object(self):
        self.write([1, 2])
        with self.assertRaises(ConfigError):
            load_config(self.config_dir)

    def test_bad_level(self):
        self.write({"logging": {"level": "LOUD"}})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "logging.level")

    def test_negative_tolerance(self):
        self.write({"tolerance": -1.0})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "tolerance")

    def test_non_integer_seed(self):
        self.write({"rng": {"master_seed": "abc"}})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "rng.master_seed")

    def test_bad_streams(self):
        self.write({"rng": {"streams": "spawns"}})
        with self.assertRaises(ConfigError):
            load_config(self.config_dir)

    def test_null_section(self):
        self.write({"rng": None})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "rng")

    def test_list_section(self):
        self.write({"logging": []})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "logging")

    def test_invalid_utf8(self):
        path = os.path.join(self.config_dir, "alxlib.json")
        with open(path, 'wb') as f:
            f.write(b'{"tolerance": "\xff"}')
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.file, "alxlib.json")

    def test_string_bool_rejected(self):
        self.write({"logging": {"console": "false"}})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "logging.console")

        self.write({"logging": {"use_colors": 1}})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_dir)
        self.assertEqual(ctx.exception.path, "logging.use_colors")

    def test_error_message(self):
        error = ConfigError("bad", file="alxlib.json", path="tolerance")
        self.assertEqual(str(error), "[alxlib.json] bad (at tolerance)")


class TestConfigFactories(unittest.TestCase):
    """Test objects built from config."""

    def test_create_rng(self):
        config = AlxConfig(rng=RNGConfig(master_seed=5, streams=["x", "y"]))
        manager = config.create_rng()
        self.assertEqual(manager.names, ["x", "y"])
        self.assertEqual(manager.master_seed, 5)

    def test_create_rng_matches_manual_order(self):
        config = AlxConfig(rng=RNGConfig(master_seed=5, streams=["x"]))
        from alxlib.utils.rng import RNGManager
        manual = RNGManager(master_seed=5)
        self.assertEqual(config.create_rng().get("x").seed, manual.get("x").seed)

    def test_create_logger(self):
        config = AlxConfig(logging=LoggingConfig(level=LogLevel.DEBUG,
                                                 categories=["rng"]))
        logger = config.create_logger()
        self.assertEqual(logger.level, LogLevel.DEBUG)
        self.assertIsNone(logger.output)
        self.assertIsNone(logger.debug("config", "filtered"))
        self.assertIsNotNone(logger.debug("rng", "kept"))

    def test_console_logger(self):
        config = AlxConfig(logging=LoggingConfig(console=True))
        self.assertIs(config.create_logger().output, sys.stderr)

    def test_is_near_zero(self):
        config = AlxConfig(tolerance=0.5)
        self.assertTrue(config.is_near_zero(0.4))
        self.assertFalse(config.is_near_zero(0.6))


class TestDebugLogger(unittest.TestCase):
    """Test DebugLogger."""

    def test_level_filter(self):
        logger = DebugLogger(level=LogLevel.INFO)
        self.assertIsNone(logger.debug("rng", "hidden"))
        self.assertIsNotNone(logger.info("rng", "shown"))
        self.assertEqual(logger.count, 1)

    def test_none_level_records_nothing(self):
        logger = DebugLogger(level=LogLevel.NONE)
        logger.error("rng", "hidden")
        self.assertEqual(len(logger), 0)

    def test_category_filter(self):
        logger = DebugLogger(level=LogLevel.TRACE)
        logger.set_category_filter(["config"])
        logger.info("rng", "hidden")
        logger.info("config", "shown")
        self.assertEqual([e.message for e in logger.get_entries()], ["shown"])
        logger.set_category_filter(None)
        logger.info("rng", "now shown")
        self.assertEqual(logger.count, 2)

    def test_get_entries_filters(self):
        logger = DebugLogger(level=LogLevel.TRACE)
        logger.log_seed_advance("loot", 1)
        logger.log_stream_created("loot", 7)
        logger.log_config_loaded("alxlib.json", 0)
        self.assertEqual(len(logger.get_entries(level=LogLevel.DEBUG)), 2)
        self.assertEqual(len(logger.get_entries(category="rng")), 2)
        self.assertEqual(logger.get_entries(category="config")[0].data, {'streams': 0})

    def test_console_output(self):
        stream = io.StringIO()
        logger = DebugLogger(level=LogLevel.INFO, output=stream, use_colors=False)
        logger.info("rng", "Stream loot", seed=3)
        self.assertEqual(stream.getvalue(), "INFO  rng          Stream loot (seed=3)\n")

    def test_colored_output(self):
        stream = io.StringIO()
        logger = DebugLogger(level=LogLevel.INFO, output=stream, use_colors=True)
        logger.warning("rng", "careful")
        self.assertIn("\033[", stream.getvalue())
        self.assertIn("careful", stream.getvalue())

    def test_max_entries(self):
        logger = DebugLogger(level=LogLevel.INFO, max_entries=3)
        for i in range(5):
            logger.info("rng", f"m{i}")
        self.assertEqual([e.message for e in logger.get_entries()], ["m2", "m3", "m4"])

    def test_traced_draws_keep_buffer_bounded(self):
        """A full buffer keeps only the newest seed advances."""
        logger = DebugLogger(level=LogLevel.TRACE, max_entries=100)
        set_logger(logger)
        try:
            rng = LehmerRNG(seed=0, name="busy")
            for _ in range(1000):
                rng.next_int()
        finally:
            set_logger(None)
        entries = logger.get_entries()
        self.assertEqual(len(entries), 100)
        self.assertEqual(entries[0].data, {'seed': 901})
        self.assertEqual(entries[-1].data, {'seed': 1000})

    def test_clear(self):
        logger = DebugLogger(level=LogLevel.INFO)
        logger.info("rng", "gone")
        logger.clear()
        self.assertEqual(logger.count, 0)

    def test_default_library_logger_is_quiet(self):
        set_logger(None)
        logger = get_logger()
        self.assertEqual(logger.level, LogLevel.WARNING)
        self.assertIsNone(logger.output)
        self.assertIs(get_logger(), logger)


def run_tests():
    """Run all config and logging tests."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestConfigLoading))
    suite.addTests(loader.loadTestsFromTestCase(TestConfigErrors))
    suite.addTests(loader.loadTestsFromTestCase(TestConfigFactories))
    suite.addTests(loader.loadTestsFromTestCase(TestDebugLogger))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


if __name__ == '__main__':
    success = run_tests()
    sys.exit(0 if success else 1)
