"""Tests for directory-lineage clustering and singleton pooling."""

from __future__ import annotations

import unittest

from lazybuffers.grouping import (
    Group,
    RelativePath,
    cluster_by_directory,
    group_by_path,
    merge_singletons,
    sort_by_path,
)
from lazybuffers.records import BufferRecord


def _rec(name: str, directory: str, category: str = "text") -> BufferRecord:
    return BufferRecord(name, directory, name, category)


def _names(groups: list[Group]) -> list[list[str]]:
    return [group.names() for group in groups]


def _relative(groups: list[Group]) -> dict[str, RelativePath | None]:
    return {member.name: member.relative_path for group in groups for member in group}


class ClusterTests(unittest.TestCase):
    def test_nested_directory_joins_group_and_stranger_is_pooled_last(self) -> None:
        records = [
            _rec("c.txt", "/q/"),
            _rec("b.txt", "/p/x/y/"),
            _rec("a.txt", "/p/x/"),
        ]

        clusters = cluster_by_directory(records)
        groups = group_by_path(records)

        # Groups come out in reverse opening order: /q/ opened last.
        self.assertEqual(_names(clusters), [["c.txt"], ["a.txt", "b.txt"]])
        self.assertEqual(_names(groups), [["a.txt", "b.txt"], ["c.txt"]])
        relative = _relative(groups)
        self.assertEqual(relative["a.txt"], RelativePath("", "/p/x/"))
        self.assertEqual(relative["b.txt"], RelativePath("/p/x/", "y/"))
        self.assertEqual(relative["c.txt"], RelativePath("", "/q/"))

    def test_multi_member_groups_are_reversed(self) -> None:
        records = [
            _rec("a1", "/a/"),
            _rec("a2", "/a/"),
            _rec("b1", "/b/"),
            _rec("b2", "/b/"),
        ]
        self.assertEqual(_names(group_by_path(records)), [["b1", "b2"], ["a1", "a2"]])

    def test_members_sorted_by_directory_then_base_name(self) -> None:
        records = [
            _rec("z.py", "/w/"),
            _rec("m.py", "/w/sub/"),
            _rec("a.py", "/w/"),
        ]
        self.assertEqual(_names(group_by_path(records)), [["a.py", "z.py", "m.py"]])

    def test_tail_is_preferred_anchor(self) -> None:
        records = [_rec("h", "/r/"), _rec("t", "/r/s/"), _rec("x", "/r/s/u/")]
        relative = _relative(cluster_by_directory(records))
        self.assertEqual(relative["t"], RelativePath("/r/", "s/"))
        self.assertEqual(relative["x"], RelativePath("/r/s/", "u/"))

    def test_head_anchor_used_when_tail_does_not_contain(self) -> None:
        records = [_rec("h", "/r/"), _rec("t", "/r/s/"), _rec("w", "/r/v/")]
        groups = cluster_by_directory(records)
        self.assertEqual(_names(groups), [["h", "t", "w"]])
        self.assertEqual(_relative(groups)["w"], RelativePath("/r/", "v/"))

    def test_unrelated_directory_opens_new_group(self) -> None:
        records = [_rec("h", "/r/"), _rec("t", "/r/s/"), _rec("z", "/z/")]
        self.assertEqual(_names(cluster_by_directory(records)), [["z"], ["h", "t"]])

    def test_containment_is_literal_string_prefix(self) -> None:
        separated = [_rec("a", "/p/x/"), _rec("b", "/p/xy/")]
        bare = [_rec("a", "/p/x"), _rec("b", "/p/xy")]
        self.assertEqual(_names(cluster_by_directory(separated)), [["b"], ["a"]])
        self.assertEqual(_names(cluster_by_directory(bare)), [["a", "b"]])

    def test_group_head_is_not_the_anchor_for_sibling_of_deeper_tail(self) -> None:
        # The scan only compares against head and tail, not every member.
        records = [_rec("h", "/r/"), _rec("s", "/r/s/"), _rec("u", "/r/s/u/"), _rec("v", "/r/s/v/")]
        relative = _relative(cluster_by_directory(records))
        self.assertEqual(relative["v"], RelativePath("/r/", "s/v/"))

    def test_relative_path_round_trips_to_directory(self) -> None:
        records = [
            _rec("1", "/a/"),
            _rec("2", "/a/b/"),
            _rec("3", "/a/b/c/"),
            _rec("4", "/a/d/"),
            _rec("5", "/e/"),
            _rec("6", "/e/f/"),
            _rec("7", "/g/"),
        ]
        by_name = {record.name: record for record in records}
        for group in group_by_path(records):
            for member in group:
                assert member.relative_path is not None
                self.assertEqual(member.relative_path.full, by_name[member.name].directory)

    def test_group_contents_stay_in_path_order(self) -> None:
        records = [
            _rec("k", "/m/n/"),
            _rec("j", "/m/"),
            _rec("q", "/a/b/"),
            _rec("p", "/a/"),
        ]
        for group in group_by_path(records):
            keys = [(member.record.directory, member.record.base_name) for member in group]
            self.assertEqual(keys, sorted(keys))

    def test_degenerate_inputs(self) -> None:
        self.assertEqual(group_by_path([]), [])
        self.assertEqual(_names(group_by_path([_rec("only", "/o/")])), [["only"]])

    def test_sort_is_stable_for_identical_keys(self) -> None:
        first = BufferRecord("first", "/d/", "same.py", "python")
        second = BufferRecord("second", "/d/", "same.py", "python")
        self.assertEqual([r.name for r in sort_by_path([first, second])], ["first", "second"])


class MergeSingletonsTests(unittest.TestCase):
    def test_singletons_pool_after_kept_groups_in_existing_order(self) -> None:
        records = [_rec("a1", "/a/"), _rec("b1", "/b/"), _rec("b2", "/b/"), _rec("c1", "/c/")]
        clusters = cluster_by_directory(records)
        self.assertEqual(_names(clusters), [["c1"], ["b1", "b2"], ["a1"]])
        self.assertEqual(_names(merge_singletons(clusters)), [["b1", "b2"], ["c1", "a1"]])

    def test_no_trailing_group_without_singletons(self) -> None:
        records = [_rec("a1", "/a/"), _rec("a2", "/a/")]
        self.assertEqual(_names(merge_singletons(cluster_by_directory(records))), [["a1", "a2"]])

    def test_merge_is_idempotent(self) -> None:
        cases = [
            [_rec("a1", "/a/"), _rec("b1", "/b/"), _rec("b2", "/b/"), _rec("c1", "/c/")],
            [_rec("a1", "/a/"), _rec("b1", "/b/"), _rec("b2", "/b/")],
            [_rec("a1", "/a/")],
            [],
        ]
        for records in cases:
            once = merge_singletons(cluster_by_directory(records))
            self.assertEqual(merge_singletons(once), once)


if __name__ == "__main__":
    unittest.main()
