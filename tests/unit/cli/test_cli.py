"""CLI step replay and output-mode tests.

Verifies how ``vfsbrowser.cli.main`` loads file maps, replays ordered
actions, keys and clicks, and reports configuration errors.
"""

from __future__ import annotations

import io
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from vfsbrowser import cli


class _CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.json"
        patcher = mock.patch("vfsbrowser.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_cli(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(list(argv))
        return stdout.getvalue()


class CliListingTests(_CliTestCase):
    def test_demo_listing_without_arguments(self) -> None:
        output = self.run_cli()

        self.assertEqual(
            output,
            "Demo\n"
            "  0 [ ] Documents/\n"
            "  1 [ ] Photos/\n"
            "  2 [ ] README.md\n"
            "  3 [ ] system.bin\n"
            "0 selected\n",
        )

    def test_steps_replay_in_command_line_order(self) -> None:
        output = self.run_cli("-c", "2", "-k", "ctrl+x", "-c", "0:double", "-k", "ctrl+v")

        self.assertEqual(
            output,
            "Demo / Documents\n"
            "  0 [ ] report.pdf\n"
            "  1 [ ] budget.xlsx\n"
            "  2 [ ] README.md\n"
            "0 selected\n",
        )

    def test_open_flag_and_action_payload(self) -> None:
        output = self.run_cli("--open", "photos", "-a", 'create_folder={"name": "Trips"}')

        self.assertIn("  2 [ ] Trips/", output)
        self.assertTrue(output.startswith("Demo / Photos\n"))

    def test_modifier_clicks_select_range(self) -> None:
        output = self.run_cli("-c", "0", "-c", "2:shift")

        self.assertIn("3 selected", output)

    def test_explicit_file_map_path(self) -> None:
        path = Path(self._tmp.name) / "map.json"
        path.write_text(
            json.dumps(
                {
                    "rootFolderId": "R",
                    "fileMap": {
                        "R": {"id": "R", "name": "Top", "isDir": True, "childrenIds": ["x"]},
                        "x": {"id": "x", "name": "x.txt", "parentId": "R"},
                    },
                }
            ),
            encoding="utf-8",
        )

        output = self.run_cli(str(path), "-k", "ctrl+a")

        self.assertEqual(output, "Top\n  0 [x] x.txt\n1 selected\n")

    def test_behavior_flags_come_from_config(self) -> None:
        self.config_path.write_text(json.dumps({"disable_selection": True}), encoding="utf-8")

        output = self.run_cli("-c", "2")

        self.assertIn("0 selected", output)

    def test_hotkey_overrides_come_from_config(self) -> None:
        self.config_path.write_text(json.dumps({"hotkeys": {"select_all_files": ["ctrl+e"]}}), encoding="utf-8")

        self.assertIn("3 selected", self.run_cli("-k", "ctrl+e"))
        with self.assertLogs("vfsbrowser.cli", level="WARNING"):
            self.assertIn("0 selected", self.run_cli("-k", "ctrl+a"))


class CliOutputModeTests(_CliTestCase):
    def test_dump_state_prints_plain_json_when_not_a_tty(self) -> None:
        output = self.run_cli("-c", "2", "--dump-state")

        data = json.loads(output)
        self.assertEqual(data["currentFolderId"], "root")
        self.assertEqual(data["selection"]["selectedIds"], ["readme"])
        self.assertIn("locked", data["fileMap"])

    def test_list_actions_shows_hotkeys(self) -> None:
        output = self.run_cli("--list-actions")

        lines = {line.split()[0]: line for line in output.splitlines()}
        self.assertIn("ctrl+x", lines["cut_files"])
        self.assertIn("selection", lines["delete_files"])
        self.assertIn("mouse_click_file", lines)


class CliErrorTests(_CliTestCase):
    def test_unknown_action_exits_with_status_two(self) -> None:
        with self.assertLogs("vfsbrowser.cli", level="ERROR"), self.assertRaises(SystemExit) as exc_info:
            self.run_cli("-a", "teleport")

        self.assertEqual(exc_info.exception.code, 2)

    def test_unknown_open_folder_exits_with_status_two(self) -> None:
        with self.assertLogs("vfsbrowser.cli", level="ERROR"), self.assertRaises(SystemExit) as exc_info:
            self.run_cli("--open", "readme")

        self.assertEqual(exc_info.exception.code, 2)

    def test_missing_path_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as exc_info:
            self.run_cli(str(Path(self._tmp.name) / "nope.json"))

        self.assertIn("Path not found", str(exc_info.exception.code))

    def test_unreadable_file_map_exits_with_status_two(self) -> None:
        with self.assertLogs("vfsbrowser.cli", level="ERROR"), self.assertRaises(SystemExit) as exc_info:
            self.run_cli(self._tmp.name)

        self.assertEqual(exc_info.exception.code, 2)

    def test_malformed_payload_json_exits(self) -> None:
        with self.assertRaises(SystemExit) as exc_info:
            self.run_cli("-a", "create_folder={oops")

        self.assertIn("Invalid JSON payload", str(exc_info.exception.code))

    def test_click_step_parsing(self) -> None:
        self.assertEqual(cli.parse_click_step("4:Ctrl, shift"), (4, {"ctrl", "shift"}))
        self.assertEqual(cli.parse_click_step("0"), (0, set()))
        with self.assertRaises(SystemExit):
            cli.parse_click_step("1:hyper")
        with self.assertRaises(SystemExit):
            cli.parse_click_step("first")

    def test_action_step_parsing(self) -> None:
        self.assertEqual(cli.parse_action_step("cut_files"), ("cut_files", None))
        self.assertEqual(cli.parse_action_step(" open_files ={\"file_ids\": [\"a\"]}"), ("open_files", {"file_ids": ["a"]}))
        with self.assertRaises(SystemExit):
            cli.parse_action_step("=1")


if __name__ == "__main__":
    unittest.main()
