"""Tests for depth-first tree rendering.

Checks branch markers, prefixes, extension filtering, counters and the
depth/unreadable notices against small temporary trees.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from interscan.file_tree_model import DirectoryListing, list_directory_entries
from interscan.output import plain_text
from interscan.tree_model import (
    StyledSpan,
    StyleTag,
    TraversalCounts,
    is_ignored_extension,
    iter_tree_lines,
    render_tree,
    split_extension,
)


def _make_project(root: Path) -> Path:
    proj = root / "proj"
    (proj / "src").mkdir(parents=True)
    (proj / "src" / "main.cpp").write_text("int main() {}\n", encoding="utf-8")
    (proj / "readme.md").write_text("# proj\n", encoding="utf-8")
    return proj


class ExtensionHelpersTests(unittest.TestCase):
    def test_split_extension_uses_final_dot(self) -> None:
        self.assertEqual(split_extension("archive.tar.gz"), ("archive.tar", ".gz"))
        self.assertEqual(split_extension("Makefile"), ("Makefile", ""))
        self.assertEqual(split_extension(".bashrc"), ("", ".bashrc"))

    def test_is_ignored_extension_is_case_insensitive(self) -> None:
        self.assertTrue(is_ignored_extension("Main.CPP", (".cpp",)))
        self.assertFalse(is_ignored_extension("main.cpp.bak", (".cpp",)))

    def test_dotless_names_are_never_ignored(self) -> None:
        self.assertFalse(is_ignored_extension("cpp", (".cpp",)))
        self.assertFalse(is_ignored_extension("Makefile", (".makefile",)))


class RenderTreeTests(unittest.TestCase):
    def test_project_scenario_lines_and_counts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            proj = _make_project(Path(tmp))

            lines, counts = render_tree(proj)

            self.assertEqual(
                plain_text(lines),
                [
                    "|-->readme.md",
                    "#-->[src]",
                    "     #-->main.cpp",
                ],
            )
            self.assertEqual((counts.folders, counts.files), (1, 2))

    def test_line_spans_carry_style_tags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            proj = _make_project(Path(tmp))

            lines, _counts = render_tree(proj)

            readme, src, _main = lines
            self.assertEqual(readme.kind, "file")
            self.assertEqual(
                readme.spans,
                (
                    StyledSpan("|-->", StyleTag.TREE_MARKER),
                    StyledSpan("readme", StyleTag.DEFAULT),
                    StyledSpan(".md", StyleTag.EXTENSION),
                ),
            )
            self.assertEqual(src.kind, "folder")
            self.assertEqual(
                src.spans,
                (StyledSpan("#-->", StyleTag.TREE_MARKER), StyledSpan("[src]", StyleTag.FOLDER)),
            )

    def test_ignored_extension_is_neither_shown_nor_counted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            proj = _make_project(Path(tmp))

            lines, counts = render_tree(proj, (".cpp",))

            self.assertEqual(plain_text(lines), ["|-->readme.md", "#-->[src]"])
            self.assertEqual((counts.folders, counts.files), (1, 1))

    def test_dotless_file_is_emitted_whole(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "Makefile").write_text("all:\n", encoding="utf-8")

            lines, counts = render_tree(root, (".makefile",))

            self.assertEqual(len(lines), 1)
            self.assertEqual(lines[0].spans, (StyledSpan("#-->", StyleTag.TREE_MARKER), StyledSpan("Makefile")))
            self.assertEqual(counts.files, 1)

    def test_nested_prefixes_track_ancestor_last_child_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a" / "inner").mkdir(parents=True)
            (root / "a" / "inner" / "x.txt").write_text("", encoding="utf-8")
            (root / "a" / "y.txt").write_text("", encoding="utf-8")
            (root / "b").mkdir()

            lines, counts = render_tree(root)

            self.assertEqual(
                plain_text(lines),
                [
                    "|-->[a]",
                    "|    |-->[inner]",
                    "|    |    #-->x.txt",
                    "|    #-->y.txt",
                    "#-->[b]",
                ],
            )
            self.assertEqual((counts.folders, counts.files), (3, 2))

    def test_counters_match_emitted_entry_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("one", "Two", "three"):
                folder = root / name
                folder.mkdir()
                (folder / f"{name}.py").write_text("", encoding="utf-8")
                (folder / f"{name}.log").write_text("", encoding="utf-8")

            lines, counts = render_tree(root, (".log",))

            self.assertEqual(counts.folders, sum(1 for line in lines if line.kind == "folder"))
            self.assertEqual(counts.files, sum(1 for line in lines if line.kind == "file"))
            self.assertEqual(counts.files, 3)

    def test_repeated_runs_are_identical(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            proj = _make_project(Path(tmp))
            first, _ = render_tree(proj, (".md",))
            second, _ = render_tree(proj, (".md",))
            self.assertEqual(first, second)


class DepthGuardTests(unittest.TestCase):
    def test_folder_past_limit_is_listed_but_not_entered(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a" / "b" / "c").mkdir(parents=True)

            lines, counts = render_tree(root, max_depth=2)

            self.assertEqual(
                plain_text(lines),
                [
                    "#-->[a]",
                    "     #-->[b]",
                    "          #-->(max depth 2 reached)",
                ],
            )
            self.assertEqual(lines[-1].kind, "notice")
            self.assertEqual((counts.folders, counts.truncated), (2, 1))

    def test_trees_deeper_than_the_call_stack_render_completely(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            levels = 400
            deepest = root.joinpath(*(["a"] * levels))
            deepest.mkdir(parents=True)
            (deepest / "leaf.txt").write_text("", encoding="utf-8")

            lines, counts = render_tree(root, max_depth=1000)

            self.assertEqual((counts.folders, counts.files, counts.truncated), (levels, 1, 0))
            self.assertEqual(lines[-1].text, " " * (5 * levels) + "#-->leaf.txt")

    def test_deep_tree_is_cut_at_a_large_limit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            root.joinpath(*(["a"] * 350)).mkdir(parents=True)

            lines, counts = render_tree(root, max_depth=320)

            self.assertEqual((counts.folders, counts.truncated), (320, 1))
            self.assertEqual(lines[-1].text, " " * (5 * 320) + "#-->(max depth 320 reached)")


class UnreadableDirectoryTests(unittest.TestCase):
    def _patched_lister(self, blocked: Path):
        def fake_list(directory: Path) -> DirectoryListing:
            if Path(directory) == blocked:
                return DirectoryListing(error=PermissionError(13, "Permission denied"))
            return list_directory_entries(directory)

        return mock.patch("interscan.tree_model.rendering.list_directory_entries", side_effect=fake_list)

    def test_silent_mode_renders_unreadable_folder_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "locked").mkdir()
            (root / "open.txt").write_text("", encoding="utf-8")

            with self._patched_lister(root / "locked"):
                lines, counts = render_tree(root)

            self.assertEqual(plain_text(lines), ["|-->[locked]", "#-->open.txt"])
            self.assertEqual(counts.folders, 1)
            self.assertEqual(counts.unreadable, 1)

    def test_mark_mode_emits_reason_notice(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "locked").mkdir()

            counts = TraversalCounts()
            with self._patched_lister(root / "locked"):
                lines = list(iter_tree_lines(root, (), counts, unreadable_mode="mark"))

            self.assertEqual(plain_text(lines), ["#-->[locked]", "     #-->(unreadable: Permission denied)"])
            self.assertEqual((counts.folders, counts.unreadable), (1, 1))

    def test_unknown_mode_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                list(iter_tree_lines(Path(tmp), (), TraversalCounts(), unreadable_mode="loud"))


if __name__ == "__main__":
    unittest.main()
