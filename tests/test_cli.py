import contextlib
import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from configr import ConfigDirError
from configr.__main__ import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.system_dir = root / "system"
        self.user_dir = root / "user"
        self.system_dir.mkdir()
        self.user_dir.mkdir()
        self._saved_handlers = list(logging.getLogger().handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in self._saved_handlers:
            root.addHandler(handler)
        self._tmp.cleanup()

    def _run(self, *argv: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("configr.dirs.system_or_local_dir", return_value=self.system_dir), mock.patch(
            "configr.dirs.user_config_dir", return_value=self.user_dir
        ), contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_locate_prints_system_path(self) -> None:
        code, out, _ = self._run("locate", "My App")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), str(self.system_dir / "my-app" / "config.toml"))
        self.assertFalse((self.system_dir / "my-app").exists())

    def test_locate_user(self) -> None:
        code, out, _ = self._run("locate", "My App", "--user")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), str(self.user_dir / "my-app" / "config.toml"))

    def test_show_prints_parsed_config(self) -> None:
        config_dir = self.user_dir / "my-app"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('greeting = "hi"\n', encoding="utf-8")

        code, out, _ = self._run("show", "My App", "--user")
        self.assertEqual(code, 0)
        self.assertEqual(out, 'greeting = "hi"\n')

    def test_show_bootstraps_empty_file(self) -> None:
        code, out, _ = self._run("show", "My App")
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertTrue((self.system_dir / "my-app" / "config.toml").is_file())

    def test_log_level_is_case_insensitive(self) -> None:
        code, _, _ = self._run("--log-level", "debug", "locate", "My App")
        self.assertEqual(code, 0)

    def test_unknown_log_level_exits_with_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run("--log-level", "chatty", "locate", "My App")
        self.assertEqual(ctx.exception.code, 2)

    def test_show_reports_errors(self) -> None:
        with mock.patch("configr.dirs.user_config_dir", side_effect=ConfigDirError()):
            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                code = main(["show", "My App", "--user"])
        self.assertEqual(code, 1)
        self.assertIn("Unable to get config directory from OS", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
