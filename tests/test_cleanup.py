# SPDX-License-Identifier: MIT

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from yaml import safe_dump, safe_load

from yeargrid import cleanup, configuration
from yeargrid.repository.configuration import CONFIGURATION_REPO, get_default_config


class CleanupTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.yaml"

        patcher = patch.object(configuration, "APP_CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.config_path.write_text(safe_dump(dict(get_default_config())))
        CONFIGURATION_REPO.reset()
        self.addCleanup(CONFIGURATION_REPO.reset)

    def test_register_cleanup_registers_flush_and_sync(self) -> None:
        with patch.object(cleanup.atexit, "register") as register:
            cleanup.register_cleanup()
        register.assert_called_once_with(cleanup.flush_and_sync)

    def test_exit_hook_writes_unflushed_settings(self) -> None:
        with patch.object(cleanup.atexit, "register") as register:
            cleanup.register_cleanup()
        exit_hook = register.call_args.args[0]

        CONFIGURATION_REPO.update_config(marked_color="gold")
        self.assertTrue(CONFIGURATION_REPO.is_dirty)
        self.assertEqual(
            safe_load(self.config_path.read_text())["marked_color"],
            get_default_config()["marked_color"],
        )

        exit_hook()

        self.assertFalse(CONFIGURATION_REPO.is_dirty)
        self.assertEqual(safe_load(self.config_path.read_text())["marked_color"], "gold")

    def test_exit_hook_leaves_clean_settings_alone(self) -> None:
        CONFIGURATION_REPO.get_config()
        self.config_path.write_text(safe_dump({"show_header": False}))

        cleanup.flush_and_sync()

        self.assertEqual(safe_load(self.config_path.read_text()), {"show_header": False})
