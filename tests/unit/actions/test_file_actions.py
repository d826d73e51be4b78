"""Tests for the folder, clipboard, navigation and context-menu actions."""

from __future__ import annotations

import unittest
from unittest import mock

from vfsbrowser.actions import default_action_registry
from vfsbrowser.dispatcher import Dispatcher
from vfsbrowser.errors import InvalidParent
from vfsbrowser.file_tree_model import Node, NodeStore, find_integrity_violations
from vfsbrowser.runtime import BrowserState, ContextMenu, CutState


def _make_dispatcher(current_folder_id: str = "R", **settings: bool) -> Dispatcher:
    store = NodeStore.from_nodes(
        "R",
        [
            Node(id="R", name="Root", is_dir=True, children_ids=("A", "B", "x", "y")),
            Node(id="A", name="A", is_dir=True, parent_id="R", children_ids=("a1",)),
            Node(id="a1", name="a1.txt", parent_id="A"),
            Node(id="B", name="B", is_dir=True, parent_id="R"),
            Node(id="x", name="x.txt", parent_id="R"),
            Node(id="y", name="y.txt", parent_id="R"),
        ],
    )
    state = BrowserState.initial(store, current_folder_id, **settings)
    return Dispatcher(default_action_registry(), state)


class CreateFolderActionTests(unittest.TestCase):
    def test_creates_folder_in_open_folder(self) -> None:
        dispatcher = _make_dispatcher("B")

        state = dispatcher.dispatch("create_folder", {"name": "Reports"})

        self.assertEqual(state.display_ids, ("new-folder-0",))
        created = state.store.nodes["new-folder-0"]
        self.assertEqual((created.name, created.is_dir, created.parent_id), ("Reports", True, "B"))
        self.assertEqual(find_integrity_violations(state.store), [])

    def test_blank_name_is_ignored(self) -> None:
        dispatcher = _make_dispatcher()
        before = dispatcher.state

        state = dispatcher.dispatch("create_folder", {"name": "   "})

        self.assertIs(state, before)

    def test_repeated_creates_use_fresh_ids(self) -> None:
        dispatcher = _make_dispatcher("B")
        dispatcher.dispatch("create_folder", {"name": "one"})

        state = dispatcher.dispatch("create_folder", {"name": "two"})

        self.assertEqual(state.display_ids, ("new-folder-0", "new-folder-1"))


class DeleteFilesActionTests(unittest.TestCase):
    def test_requires_selection(self) -> None:
        dispatcher = _make_dispatcher()
        before = dispatcher.state

        self.assertIs(dispatcher.dispatch("delete_files"), before)

    def test_deletes_selected_subtree_and_prunes_selection(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("select_all_files")
        dispatcher.dispatch("mouse_click_file", {"file_id": "A", "file_display_index": 0})

        state = dispatcher.dispatch("delete_files")

        self.assertNotIn("A", state.store)
        self.assertNotIn("a1", state.store)
        self.assertEqual(state.display_ids, ("B", "x", "y"))
        self.assertTrue(state.selection.is_empty)
        self.assertEqual(find_integrity_violations(state.store), [])

    def test_deletes_deeply_nested_folder_chain(self) -> None:
        nodes = [Node(id="R", name="Root", is_dir=True, children_ids=("d0",))]
        for level in range(1500):
            children = (f"d{level + 1}",) if level < 1499 else ()
            parent_id = f"d{level - 1}" if level else "R"
            nodes.append(Node(id=f"d{level}", name=f"d{level}", is_dir=True, parent_id=parent_id, children_ids=children))
        dispatcher = Dispatcher(default_action_registry(), BrowserState.initial(NodeStore.from_nodes("R", nodes)))
        dispatcher.dispatch("mouse_click_file", {"file_id": "d0", "file_display_index": 0})

        state = dispatcher.dispatch("delete_files")

        self.assertEqual(len(state.store), 1)
        self.assertEqual(state.display_ids, ())
        self.assertEqual(find_integrity_violations(state.store), [])


class CutPasteActionTests(unittest.TestCase):
    def test_cut_stages_selection_from_open_folder(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})
        dispatcher.dispatch("mouse_click_file", {"file_id": "y", "file_display_index": 3, "ctrl_key": True})

        state = dispatcher.dispatch("cut_files")

        self.assertEqual(state.cut_state, CutState(source_id="R", node_ids=("x", "y")))
        self.assertEqual(state.store.nodes["R"].children_ids, ("A", "B", "x", "y"))

    def test_paste_moves_staged_nodes_and_clears_staging(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})
        dispatcher.dispatch("cut_files")
        dispatcher.dispatch("open_files", {"target_file_id": "B"})

        state = dispatcher.dispatch("paste_files")

        self.assertEqual(state.display_ids, ("x",))
        self.assertEqual(state.store.nodes["x"].parent_id, "B")
        self.assertEqual(state.store.nodes["R"].children_ids, ("A", "B", "y"))
        self.assertFalse(state.cut_state.is_staged)
        self.assertEqual(find_integrity_violations(state.store), [])

    def test_paste_into_source_folder_leaves_everything_untouched(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})
        staged = dispatcher.dispatch("cut_files")

        state = dispatcher.dispatch("paste_files")

        self.assertIs(state, staged)
        self.assertEqual(state.cut_state, CutState(source_id="R", node_ids=("x",)))

    def test_paste_with_nothing_staged_is_noop(self) -> None:
        dispatcher = _make_dispatcher("B")
        before = dispatcher.state

        self.assertIs(dispatcher.dispatch("paste_files"), before)

    def test_paste_runs_move_before_clearing_staging(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "y", "file_display_index": 3})
        dispatcher.dispatch("cut_files")
        dispatcher.dispatch("open_files", {"target_file_id": "A"})
        seen: list[tuple[str, bool]] = []
        dispatcher.add_file_action_listener(lambda data: seen.append((data.id, data.state.cut_state.is_staged)))

        dispatcher.dispatch("paste_files")

        self.assertEqual(seen, [("paste_files", True), ("move_files", True)])

    def test_staged_ids_deleted_elsewhere_drop_out(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})
        dispatcher.dispatch("cut_files")
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})

        state = dispatcher.dispatch("delete_files")

        self.assertFalse(state.cut_state.is_staged)


class MoveFilesActionTests(unittest.TestCase):
    def test_moving_folder_into_itself_is_skipped(self) -> None:
        dispatcher = _make_dispatcher()
        before = dispatcher.state

        state = dispatcher.dispatch(
            "move_files", {"file_ids": ["A"], "source_id": "R", "destination_id": "A"}
        )

        self.assertEqual(state.store.nodes, before.store.nodes)

    def test_same_source_and_destination_is_noop(self) -> None:
        dispatcher = _make_dispatcher()
        before = dispatcher.state

        state = dispatcher.dispatch(
            "move_files", {"file_ids": ["x"], "source_id": "R", "destination_id": "R"}
        )

        self.assertIs(state, before)

    def test_unknown_destination_raises(self) -> None:
        dispatcher = _make_dispatcher()

        with self.assertRaises(InvalidParent):
            dispatcher.dispatch("move_files", {"file_ids": ["x"], "source_id": "R", "destination_id": "x"})
        self.assertEqual(dispatcher.state.store.version, 0)


class NavigationActionTests(unittest.TestCase):
    def test_open_files_enters_folder_and_resets_selection(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})

        state = dispatcher.dispatch("open_files", {"file_ids": ["A"]})

        self.assertEqual(state.current_folder_id, "A")
        self.assertTrue(state.selection.is_empty)
        self.assertIsNone(state.selection.last_click)

    def test_open_files_on_plain_file_keeps_folder(self) -> None:
        dispatcher = _make_dispatcher()
        before = dispatcher.state

        self.assertIs(dispatcher.dispatch("open_files", {"target_file_id": "x"}), before)

    def test_open_parent_folder_walks_up(self) -> None:
        dispatcher = _make_dispatcher("A")

        state = dispatcher.dispatch("open_parent_folder")

        self.assertEqual(state.current_folder_id, "R")

    def test_open_parent_at_root_warns_unless_forced(self) -> None:
        dispatcher = _make_dispatcher()
        with self.assertLogs("vfsbrowser.actions.essential", level="WARNING"):
            dispatcher.dispatch("open_parent_folder")

        forced = _make_dispatcher(force_enable_open_parent=True)
        with mock.patch("vfsbrowser.actions.essential.logger") as logger:
            state = forced.dispatch("open_parent_folder")
        logger.warning.assert_not_called()
        self.assertEqual(state.current_folder_id, "R")


class ContextMenuActionTests(unittest.TestCase):
    def test_menu_is_offset_from_pointer(self) -> None:
        dispatcher = _make_dispatcher()

        state = dispatcher.dispatch("open_file_context_menu", {"client_x": 100, "client_y": 50})

        self.assertEqual(state.context_menu, ContextMenu(None, 98, 46))

    def test_trigger_outside_selection_becomes_the_selection(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("mouse_click_file", {"file_id": "x", "file_display_index": 2})

        state = dispatcher.dispatch(
            "open_file_context_menu", {"client_x": 10, "client_y": 10, "trigger_file_id": "y"}
        )

        self.assertEqual(state.selection.selected_ids, {"y"})
        self.assertEqual(state.context_menu.trigger_file_id, "y")

    def test_trigger_inside_selection_keeps_it(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("select_all_files")

        state = dispatcher.dispatch(
            "open_file_context_menu", {"client_x": 10, "client_y": 10, "trigger_file_id": "y"}
        )

        self.assertEqual(state.selection.selected_ids, {"A", "B", "x", "y"})

    def test_clear_selection_also_hides_menu(self) -> None:
        dispatcher = _make_dispatcher()
        dispatcher.dispatch("open_file_context_menu", {"client_x": 10, "client_y": 10, "trigger_file_id": "x"})

        state = dispatcher.dispatch("clear_selection")

        self.assertTrue(state.selection.is_empty)
        self.assertIsNone(state.context_menu)


class SelectionHelperActionTests(unittest.TestCase):
    def test_select_all_selects_listing(self) -> None:
        dispatcher = _make_dispatcher()

        state = dispatcher.dispatch("select_all_files")

        self.assertEqual(state.selection.selected_ids, {"A", "B", "x", "y"})

    def test_toggle_selection_mode_flips_flag(self) -> None:
        dispatcher = _make_dispatcher()

        self.assertTrue(dispatcher.dispatch("toggle_selection_mode").selection_mode)
        self.assertFalse(dispatcher.dispatch("toggle_selection_mode").selection_mode)


if __name__ == "__main__":
    unittest.main()
