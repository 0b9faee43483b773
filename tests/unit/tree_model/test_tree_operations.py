"""Tree identity, expand-state, ordering, and flattening tests."""

from __future__ import annotations

import unittest
import uuid
from pathlib import Path

from ledit.tree_model import (
    Node,
    NodeKind,
    WorkspaceTree,
    compare_nodes,
    node_sort_key,
    row_index_of,
    sort_nodes,
)


def _file(name: str, depth: int = 0) -> Node:
    return Node(name, Path(name), NodeKind.FILE, depth=depth)


def _dir(name: str, children: list[Node], depth: int = 0, expanded: bool = False) -> Node:
    return Node(name, Path(name), NodeKind.DIRECTORY, depth=depth, children=children, expanded=expanded)


def _sample_tree() -> tuple[WorkspaceTree, dict[str, Node]]:
    main_rs = _file("main.rs", depth=2)
    util = _dir("util", [main_rs], depth=1)
    lib_rs = _file("lib.rs", depth=1)
    src = _dir("src", [util, lib_rs])
    cargo = _file("Cargo.toml")
    dotfile = _file(".gitignore")
    tree = WorkspaceTree([src, dotfile, cargo])
    nodes = {node.display_name: node for node in tree.iter_nodes()}
    return tree, nodes


def _count_with_expanded_ancestors(tree: WorkspaceTree) -> int:
    def count(nodes: list[Node], chain_open: bool) -> int:
        total = 0
        for node in nodes:
            if chain_open:
                total += 1
            if node.children:
                total += count(node.children, chain_open and bool(node.expanded))
        return total

    return count(tree.roots, True)


class TreeIdentityTests(unittest.TestCase):
    def test_find_by_id_searches_all_roots_and_descendants(self) -> None:
        tree, nodes = _sample_tree()

        self.assertIs(tree.find_by_id(nodes["main.rs"].id), nodes["main.rs"])
        self.assertIs(tree.find_by_id(nodes["Cargo.toml"].id), nodes["Cargo.toml"])
        self.assertIsNone(tree.find_by_id(uuid.uuid4()))

    def test_child_depth_is_parent_depth_plus_one(self) -> None:
        tree, _nodes = _sample_tree()

        for node in tree.iter_nodes():
            for child in node.children or []:
                self.assertEqual(child.depth, node.depth + 1)


class ToggleExpandTests(unittest.TestCase):
    def test_toggle_twice_restores_previous_state(self) -> None:
        tree, nodes = _sample_tree()
        src = nodes["src"]

        self.assertTrue(tree.toggle_expand(src.id))
        self.assertTrue(src.expanded)
        self.assertTrue(tree.toggle_expand(src.id))
        self.assertFalse(src.expanded)

    def test_toggle_on_leaf_or_unknown_id_is_noop(self) -> None:
        tree, nodes = _sample_tree()
        before = tree.flatten()

        self.assertFalse(tree.toggle_expand(nodes["Cargo.toml"].id))
        self.assertIsNone(nodes["Cargo.toml"].expanded)
        self.assertFalse(tree.toggle_expand(uuid.uuid4()))
        self.assertEqual(tree.flatten(), before)

    def test_set_expanded_reports_only_real_changes(self) -> None:
        tree, nodes = _sample_tree()

        self.assertFalse(tree.set_expanded(nodes["src"].id, False))
        self.assertTrue(tree.set_expanded(nodes["src"].id, True))
        self.assertFalse(tree.set_expanded(nodes["lib.rs"].id, True))


class FlattenTests(unittest.TestCase):
    def test_collapsed_tree_shows_only_roots_with_glyphs(self) -> None:
        tree, _nodes = _sample_tree()

        rows = tree.flatten()

        self.assertEqual([row.text for row in rows], ["▶ src", ".gitignore", "Cargo.toml"])
        self.assertEqual([row.style for row in rows], ["directory", "hidden", "file"])

    def test_expanded_nodes_emit_indented_children_in_pre_order(self) -> None:
        tree, nodes = _sample_tree()
        tree.toggle_expand(nodes["src"].id)
        tree.toggle_expand(nodes["util"].id)

        rows = tree.flatten()

        self.assertEqual(
            [row.text for row in rows],
            ["▼ src", "   ▼ util", "      main.rs", "   lib.rs", ".gitignore", "Cargo.toml"],
        )
        self.assertEqual(rows[2].node_id, nodes["main.rs"].id)
        self.assertEqual(rows[2].depth, 2)

    def test_children_of_collapsed_parent_stay_hidden_even_if_expanded(self) -> None:
        tree, nodes = _sample_tree()
        tree.toggle_expand(nodes["util"].id)

        rows = tree.flatten()

        self.assertNotIn(nodes["main.rs"].id, [row.node_id for row in rows])

    def test_flatten_is_deterministic(self) -> None:
        tree, nodes = _sample_tree()
        tree.toggle_expand(nodes["src"].id)

        self.assertEqual(tree.flatten(), tree.flatten())

    def test_row_count_matches_nodes_with_expanded_ancestor_chain(self) -> None:
        tree, nodes = _sample_tree()
        states = [(), ("src",), ("util",), ("src", "util")]
        for expanded_names in states:
            for name in ("src", "util"):
                nodes[name].expanded = name in expanded_names
            with self.subTest(expanded=expanded_names):
                expected = _count_with_expanded_ancestors(tree)
                self.assertEqual(len(tree.flatten()), expected)
                self.assertEqual(tree.visible_node_count(), expected)

    def test_hidden_entries_and_their_subtrees_can_be_filtered(self) -> None:
        secret = _file("key", depth=1)
        dot_dir = _dir(".config", [secret], expanded=True)
        tree = WorkspaceTree([dot_dir, _file("visible.txt")])

        self.assertEqual(len(tree.flatten(show_hidden=True)), 3)
        self.assertEqual([row.text for row in tree.flatten(show_hidden=False)], ["visible.txt"])
        self.assertEqual(tree.visible_node_count(show_hidden=False), 1)

    def test_row_index_of_maps_ids_to_current_positions(self) -> None:
        tree, nodes = _sample_tree()
        rows = tree.flatten()
        self.assertEqual(row_index_of(nodes["Cargo.toml"].id, rows), 2)
        self.assertIsNone(row_index_of(nodes["lib.rs"].id, rows))

        tree.toggle_expand(nodes["src"].id)
        self.assertEqual(row_index_of(nodes["Cargo.toml"].id, tree.flatten()), 4)


class OrderingTests(unittest.TestCase):
    def test_comparator_puts_directories_before_files_before_info(self) -> None:
        directory = _dir("zzz", [])
        file_node = _file("aaa")
        info = Node("Empty workspace", None, NodeKind.INFO)

        self.assertLess(compare_nodes(directory, file_node), 0)
        self.assertGreater(compare_nodes(file_node, directory), 0)
        self.assertLess(compare_nodes(file_node, info), 0)
        self.assertLess(compare_nodes(directory, info), 0)
        self.assertEqual(compare_nodes(file_node, _file("aaa")), 0)

    def test_same_kind_orders_by_display_name(self) -> None:
        self.assertLess(compare_nodes(_file("a.txt"), _file("b.txt")), 0)
        self.assertLess(node_sort_key(_dir("alpha", [])), node_sort_key(_dir("beta", [])))

    def test_sort_nodes_orders_every_level(self) -> None:
        nested = _dir("pkg", [_file("z.py", 1), _dir("sub", [], 1), _file("a.py", 1)])
        roots = [Node("note", None, NodeKind.INFO), _file("b.txt"), nested, _file("a.txt")]

        sort_nodes(roots)

        self.assertEqual([node.display_name for node in roots], ["pkg", "a.txt", "b.txt", "note"])
        self.assertEqual([node.display_name for node in nested.children], ["sub", "a.py", "z.py"])


if __name__ == "__main__":
    unittest.main()
