import os
import sys
import unittest
from pathlib import Path
from unittest import mock

from configr.errors import PathUnresolvableError
from configr.paths import (
    CONFIG_FILE_NAME,
    app_slug,
    expand_directory,
    resolve_config_path,
    system_config_dir,
)


class AppSlugTests(unittest.TestCase):
    def test_spaces_become_hyphens(self) -> None:
        self.assertEqual(app_slug("bot app"), "bot-app")

    def test_lowercases(self) -> None:
        self.assertEqual(app_slug("Bot App"), "bot-app")

    def test_every_whitespace_character_is_replaced(self) -> None:
        self.assertEqual(app_slug("bot\tapp  two"), "bot-app--two")

    def test_stable_across_calls(self) -> None:
        self.assertEqual(app_slug("My Tool"), app_slug("My Tool"))

    def test_blank_name_is_rejected(self) -> None:
        for name in ("", "   "):
            with self.assertRaises(PathUnresolvableError):
                app_slug(name)


@unittest.skipIf(os.name == "nt", "POSIX home directory layout")
class OverrideDirectoryTests(unittest.TestCase):
    def test_home_variable_is_expanded(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/alice"}):
            path = resolve_config_path("bot app", "$HOME")
        self.assertEqual(path, Path("/home/alice/bot-app/config.toml"))

    def test_braced_variable_and_tilde_are_expanded(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/alice"}):
            self.assertEqual(expand_directory("${HOME}/cfg"), Path("/home/alice/cfg"))
            self.assertEqual(expand_directory("~/cfg"), Path("/home/alice/cfg"))

    def test_os_lookup_is_not_consulted(self) -> None:
        with mock.patch("configr.paths.user_config_dir") as lookup:
            path = resolve_config_path("bot app", "/srv/configs")
        lookup.assert_not_called()
        self.assertEqual(path, Path("/srv/configs/bot-app") / CONFIG_FILE_NAME)

    def test_relative_directory_becomes_absolute(self) -> None:
        path = resolve_config_path("bot app", "relative/dir")
        self.assertTrue(path.is_absolute())
        self.assertEqual(path, Path.cwd() / "relative" / "dir" / "bot-app" / "config.toml")

    def test_accepts_path_objects(self) -> None:
        path = resolve_config_path("bot app", Path("/srv/configs"))
        self.assertEqual(path, Path("/srv/configs/bot-app/config.toml"))

    def test_dollar_inside_directory_is_literal(self) -> None:
        with mock.patch.dict(os.environ):
            os.environ.pop("v2", None)
            path = resolve_config_path("bot app", "/srv/cfg$v2")
        self.assertEqual(path, Path("/srv/cfg$v2/bot-app/config.toml"))

    def test_unset_variable_is_reported(self) -> None:
        with mock.patch.dict(os.environ):
            os.environ.pop("CONFIGR_UNSET_DIR", None)
            with self.assertRaises(PathUnresolvableError) as ctx:
                resolve_config_path("bot app", "$CONFIGR_UNSET_DIR/apps")
        self.assertIn("CONFIGR_UNSET_DIR", str(ctx.exception))


class SystemConfigDirTests(unittest.TestCase):
    def test_uses_os_config_dir(self) -> None:
        base = Path.cwd() / "os-config"
        with mock.patch("configr.paths.user_config_dir", return_value=str(base)):
            first = resolve_config_path("bot app")
            second = resolve_config_path("bot app")
        self.assertEqual(first, base / "bot-app" / "config.toml")
        self.assertEqual(first, second)

    def test_roaming_directory_is_requested(self) -> None:
        base = str(Path.cwd() / "os-config")
        with mock.patch("configr.paths.user_config_dir", return_value=base) as lookup:
            system_config_dir()
        lookup.assert_called_once_with(roaming=True)

    def test_missing_directory_is_unresolvable(self) -> None:
        for value in ("", "relative/config"):
            with mock.patch("configr.paths.user_config_dir", return_value=value):
                with self.assertRaises(PathUnresolvableError):
                    resolve_config_path("bot app")

    def test_lookup_failure_is_unresolvable(self) -> None:
        with mock.patch("configr.paths.user_config_dir", side_effect=OSError("no profile")):
            with self.assertRaises(PathUnresolvableError) as ctx:
                system_config_dir()
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    @unittest.skipUnless(sys.platform.startswith("linux"), "XDG lookup is Linux only")
    def test_xdg_config_home_is_honored(self) -> None:
        with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg-config"}):
            self.assertEqual(system_config_dir(), Path("/tmp/xdg-config"))
            self.assertEqual(
                resolve_config_path("bot app"),
                Path("/tmp/xdg-config/bot-app/config.toml"),
            )

    @unittest.skipUnless(sys.platform.startswith("linux"), "XDG lookup is Linux only")
    def test_xdg_falls_back_to_dot_config(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/alice"}):
            os.environ.pop("XDG_CONFIG_HOME", None)
            self.assertEqual(system_config_dir(), Path("/home/alice/.config"))


if __name__ == "__main__":
    unittest.main()
