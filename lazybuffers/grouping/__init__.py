"""Partitioning and directory-lineage grouping of document records."""

from __future__ import annotations

from .partition import categories_of, records_of, split_file_backed
from .paths import cluster_by_directory, group_by_path, merge_singletons, sort_by_path
from .sections import build_sections, build_unbacked_groups
from .types import CategorySection, Group, GroupedRecord, RelativePath

__all__ = [
    "CategorySection",
    "Group",
    "GroupedRecord",
    "RelativePath",
    "build_sections",
    "build_unbacked_groups",
    "categories_of",
    "cluster_by_directory",
    "group_by_path",
    "merge_singletons",
    "records_of",
    "sort_by_path",
    "split_file_backed",
]
