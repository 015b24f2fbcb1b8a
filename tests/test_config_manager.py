"""Tests for configuration management."""

import json
import os
import shutil
import tempfile
import unittest

import yaml

from statement_merger.utils.config_manager import ConfigManager
from statement_merger.models.core import MergerConfig


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, 'test_config.json')

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_default_config_loading(self):
        """Test loading default configuration when no file exists"""
        manager = ConfigManager(config_path="nonexistent_file.json")
        config = manager.load_config()

        self.assertIsInstance(config, MergerConfig)
        self.assertEqual(config.output_directory, ".")
        self.assertEqual(config.output_prefix, "combined_statements")
        self.assertTrue(config.include_account_columns)
        self.assertFalse(config.isolate_failures)
        self.assertIn("%m/%d/%Y", config.date_formats)

    def test_config_file_loading(self):
        """Test loading configuration from JSON file"""
        test_config = {
            "output_directory": "exports",
            "isolate_failures": True,
            "date_formats": ["%Y-%m-%d"],
            "encoding": "latin-1"
        }

        with open(self.config_file, 'w') as f:
            json.dump(test_config, f)

        config = ConfigManager(config_path=self.config_file).load_config()

        self.assertEqual(config.output_directory, "exports")
        self.assertTrue(config.isolate_failures)
        self.assertEqual(config.date_formats, ["%Y-%m-%d"])
        self.assertEqual(config.encoding, "latin-1")

    def test_yaml_config_loading(self):
        """Test loading configuration from YAML file"""
        yaml_file = os.path.join(self.temp_dir, 'config.yml')
        with open(yaml_file, 'w', encoding='utf-8') as f:
            yaml.dump({"include_account_columns": False, "output_prefix": "merged"}, f)

        config = ConfigManager(config_path=yaml_file).load_config()

        self.assertFalse(config.include_account_columns)
        self.assertEqual(config.output_prefix, "merged")

    def test_config_validation(self):
        """Test that invalid configuration falls back to defaults"""
        invalid_config = {
            "output_directory": "",
            "isolate_failures": "yes",
            "date_formats": "not_a_list"
        }

        with open(self.config_file, 'w') as f:
            json.dump(invalid_config, f)

        config = ConfigManager(config_path=self.config_file).load_config()

        self.assertEqual(config.output_directory, ".")
        self.assertFalse(config.isolate_failures)
        self.assertIsInstance(config.date_formats, list)

    def test_unknown_encoding_rejected(self):
        """Test that an unknown codec name falls back to defaults and is reported"""
        with open(self.config_file, 'w') as f:
            json.dump({"encoding": "utf-9", "output_prefix": "merged"}, f)

        manager = ConfigManager(config_path=self.config_file)
        config = manager.load_config()

        self.assertEqual(config.encoding, "utf-8-sig")
        self.assertEqual(config.output_prefix, "combined_statements")
        self.assertIn("utf-9", manager.config_error)
        self.assertEqual(manager.config_file, self.config_file)

    def test_valid_config_has_no_error(self):
        with open(self.config_file, 'w') as f:
            json.dump({"encoding": "latin-1"}, f)

        manager = ConfigManager(config_path=self.config_file)
        manager.load_config()
        self.assertIsNone(manager.config_error)

    def test_malformed_json_falls_back(self):
        with open(self.config_file, 'w') as f:
            f.write("{not json")

        config = ConfigManager(config_path=self.config_file).load_config()
        self.assertEqual(config.output_prefix, "combined_statements")

    def test_unknown_keys_ignored(self):
        with open(self.config_file, 'w') as f:
            json.dump({"raw_directory": "raw", "output_prefix": "merged"}, f)

        config = ConfigManager(config_path=self.config_file).load_config()
        self.assertEqual(config.output_prefix, "merged")
        self.assertFalse(hasattr(config, "raw_directory"))

    def test_config_template_generation(self):
        """Test configuration template generation"""
        template_file = os.path.join(self.temp_dir, 'template.json')

        ConfigManager().save_config_template(template_file)

        with open(template_file, 'r') as f:
            template = json.load(f)

        self.assertEqual(template['output_prefix'], 'combined_statements')
        self.assertIn('date_formats', template)

        # A generated template loads back cleanly
        config = ConfigManager(config_path=template_file).load_config()
        self.assertEqual(config.output_prefix, 'combined_statements')

    def test_yaml_template_generation(self):
        template_file = os.path.join(self.temp_dir, 'template.yml')
        ConfigManager().save_config_template(template_file)

        with open(template_file, 'r', encoding='utf-8') as f:
            template = yaml.safe_load(f)

        self.assertFalse(template['isolate_failures'])

    def test_config_caching(self):
        """Test configuration caching"""
        with open(self.config_file, 'w') as f:
            json.dump({"output_prefix": "cached"}, f)

        manager = ConfigManager(config_path=self.config_file)
        self.assertEqual(manager.load_config().output_prefix, "cached")

        with open(self.config_file, 'w') as f:
            json.dump({"output_prefix": "modified"}, f)

        self.assertEqual(manager.load_config().output_prefix, "cached")
        self.assertEqual(manager.load_config(force_reload=True).output_prefix, "modified")

    def test_update_config(self):
        manager = ConfigManager(config_path="nonexistent_file.json")
        config = manager.load_config()
        manager.update_config({"isolate_failures": True})
        self.assertTrue(config.isolate_failures)


if __name__ == '__main__':
    unittest.main()
