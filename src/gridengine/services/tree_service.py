"""Tree logic for hierarchical rows.

Trees are held as a flat, depth-first ordered list of rows. Each row records
its parent id and level instead of holding child objects:

    _tree_id           node id (from the input's id field)
    _tree_parent_id    parent node id, None for roots
    _tree_level        0 for roots
    _tree_has_children True when some row names this row as parent
    _tree_expanded     False hides every descendant

A node's subtree is the contiguous run of rows after it with a greater level.
Drag and drop moves that run as one block.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from ..debug_trace import log_perf, logger
from ..models.constants import (
    ROW_KEY_FIELD,
    TREE_EXPANDED_FIELD,
    TREE_FIELDS,
    TREE_HAS_CHILDREN_FIELD,
    TREE_ID_FIELD,
    TREE_LEVEL_FIELD,
    TREE_PARENT_ID_FIELD,
)
from ..models.row import Row, RowKey, tree_expanded, tree_id, tree_level, tree_parent_id

DROP_MODES = ("before", "after", "child")


class TreeManager:
    """Flatten/unflatten, expand/collapse and drag-drop reparenting.

    All methods are static and return new lists; input rows are not mutated.
    """

    @staticmethod
    def flatten(
        nodes: Sequence[dict[str, Any]],
        id_field: str = "id",
        children_field: str = "children",
        level: int = 0,
        parent_id: Any = None,
    ) -> list[Row]:
        """Convert nested nodes into a flat, depth-first list with tree fields.

        Example:
            [{"id": 1, "children": [{"id": 2}]}] ->
            [{"id": 1, _tree_level: 0, _tree_has_children: True, ...},
             {"id": 2, _tree_level: 1, _tree_parent_id: 1, ...}]

        Args:
            nodes: Input nodes shaped {id, children?, ...fields}
            id_field: Key holding the node id
            children_field: Key holding child nodes

        Returns:
            Flat row list; the children key is stripped from every row
        """
        result: list[Row] = []
        for node in nodes:
            node_id = node.get(id_field)
            children = node.get(children_field) or []

            row = {k: v for k, v in node.items() if k != children_field}
            row[TREE_ID_FIELD] = node_id
            row[TREE_PARENT_ID_FIELD] = parent_id
            row[TREE_LEVEL_FIELD] = level
            row[TREE_HAS_CHILDREN_FIELD] = len(children) > 0
            if row.get(TREE_EXPANDED_FIELD) is None:
                row[TREE_EXPANDED_FIELD] = True

            result.append(row)
            if children:
                result.extend(
                    TreeManager.flatten(children, id_field, children_field, level + 1, node_id)
                )
        return result

    @staticmethod
    def unflatten(rows: Sequence[Row], children_field: str = "children") -> list[dict[str, Any]]:
        """Rebuild nested nodes from a flat tree list.

        Tree bookkeeping is stripped except the expanded flag, so
        ``flatten(unflatten(flatten(nodes))) == flatten(nodes)``. Rows whose
        parent is missing become roots. Leaves get no children key.

        Args:
            rows: Flat rows in depth-first order

        Returns:
            Root nodes with nested children lists
        """
        strip = set(TREE_FIELDS) - {TREE_EXPANDED_FIELD}
        nodes = [{k: v for k, v in row.items() if k not in strip} for row in rows]
        by_id = {tree_id(row): node for row, node in zip(rows, nodes) if tree_id(row) is not None}

        roots: list[dict[str, Any]] = []
        for row, node in zip(rows, nodes):
            parent_id = tree_parent_id(row)
            parent = by_id.get(parent_id) if parent_id is not None else None
            if parent is None or parent is node:
                roots.append(node)
            else:
                parent.setdefault(children_field, []).append(node)

        return roots

    # --- Visibility ---

    @staticmethod
    def index_by_id(rows: Sequence[Row]) -> dict[Any, Row]:
        return {tree_id(r): r for r in rows if tree_id(r) is not None}

    @staticmethod
    def ancestors(row: Row, rows_by_id: dict[Any, Row]) -> Iterator[Row]:
        """Walk the parent chain upwards; stops at a missing parent or a cycle."""
        seen = {tree_id(row)}
        parent_id = tree_parent_id(row)
        while parent_id is not None and parent_id != "" and parent_id not in seen:
            parent = rows_by_id.get(parent_id)
            if parent is None:
                return
            yield parent
            seen.add(parent_id)
            parent_id = tree_parent_id(parent)

    @staticmethod
    def is_visible(row: Row, rows_by_id: dict[Any, Row]) -> bool:
        """Hidden when any ancestor is collapsed."""
        return all(tree_expanded(a) for a in TreeManager.ancestors(row, rows_by_id))

    @staticmethod
    def visible_rows(rows: Sequence[Row], all_rows: Sequence[Row] | None = None) -> list[Row]:
        """Filter rows down to those whose ancestors are all expanded.

        Args:
            rows: Rows to filter (e.g. after sorting)
            all_rows: Rows used to resolve parents (defaults to rows)
        """
        rows_by_id = TreeManager.index_by_id(all_rows if all_rows is not None else rows)
        return [r for r in rows if TreeManager.is_visible(r, rows_by_id)]

    # --- Mutations ---

    @staticmethod
    def toggle_row(rows: Sequence[Row], target_id: Any) -> list[Row] | None:
        """Flip the expanded flag of the row with this tree id.

        Returns:
            New row list, or None when nothing changes (unknown id, or a
            row without children)
        """
        if target_id is None:
            return None
        for idx, row in enumerate(rows):
            if tree_id(row) == target_id:
                if not row.get(TREE_HAS_CHILDREN_FIELD):
                    return None
                updated = list(rows)
                updated[idx] = {**row, TREE_EXPANDED_FIELD: not tree_expanded(row)}
                return updated
        return None

    @staticmethod
    def subtree_span(rows: Sequence[Row], index: int) -> int:
        """Length of the block made of rows[index] and its descendants."""
        level = tree_level(rows[index])
        end = index + 1
        while end < len(rows) and tree_level(rows[end]) > level:
            end += 1
        return end - index

    @staticmethod
    def is_descendant(rows_by_id: dict[Any, Row], candidate: Row, ancestor_id: Any) -> bool:
        """True when ancestor_id appears in candidate's parent chain."""
        return any(tree_id(a) == ancestor_id for a in TreeManager.ancestors(candidate, rows_by_id))

    @staticmethod
    def recompute_has_children(rows: Sequence[Row]) -> list[Row]:
        """Re-derive every row's has-children flag from actual parent references."""
        ids = {tree_id(r) for r in rows}
        parents = {tree_parent_id(r) for r in rows if tree_parent_id(r) in ids}
        result: list[Row] = []
        for row in rows:
            has_children = tree_id(row) in parents
            if row.get(TREE_HAS_CHILDREN_FIELD) == has_children:
                result.append(row)
            else:
                result.append({**row, TREE_HAS_CHILDREN_FIELD: has_children})
        return result

    @staticmethod
    @log_perf
    def reparent(
        rows: Sequence[Row],
        source_key: RowKey,
        target_key: RowKey | None,
        mode: str = "child",
    ) -> list[Row] | None:
        """Move a node and its subtree relative to a target row.

        Steps:
        1. Find the source and its subtree block (following deeper rows)
        2. Remove the block
        3. No target: append the block at root level
        4. child mode: block goes right after the target, one level deeper,
           and the target is forced expanded with children;
           before/after: block takes the target's parent and level
        5. Shift the levels of the block's descendants by the same delta
        6. Recompute has-children for every row

        Args:
            rows: Flat tree rows
            source_key: Internal key of the dragged row
            target_key: Internal key of the drop target, None for empty area
            mode: before, after or child

        Returns:
            New row list, or None when the drop is rejected (missing rows,
            unknown mode, dropping onto itself or into its own subtree)
        """
        if mode not in DROP_MODES:
            logger.debug("Tree drop rejected: unknown mode %r", mode)
            return None

        keys = [r.get(ROW_KEY_FIELD) for r in rows]
        if source_key not in keys:
            logger.debug("Tree drop rejected: source %r not found", source_key)
            return None
        src_index = keys.index(source_key)
        src_row = rows[src_index]
        src_level = tree_level(src_row)

        span = TreeManager.subtree_span(rows, src_index)
        block = list(rows[src_index : src_index + span])

        if target_key is not None:
            if target_key not in keys:
                logger.debug("Tree drop rejected: target %r not found", target_key)
                return None
            target_row = rows[keys.index(target_key)]
            in_block = any(r.get(ROW_KEY_FIELD) == target_key for r in block)
            rows_by_id = TreeManager.index_by_id(rows)
            src_id = tree_id(src_row)
            if (
                in_block
                or target_key == source_key
                or (src_id is not None and TreeManager.is_descendant(rows_by_id, target_row, src_id))
            ):
                logger.debug("Tree drop rejected: %r is inside the moved subtree", target_key)
                return None

        remaining = list(rows[:src_index]) + list(rows[src_index + span :])

        if target_key is None:
            insert_index = len(remaining)
            new_parent_id = None
            new_level = 0
        else:
            target_index = next(
                i for i, r in enumerate(remaining) if r.get(ROW_KEY_FIELD) == target_key
            )
            target_row = remaining[target_index]
            if mode == "child":
                insert_index = target_index + 1
                new_parent_id = tree_id(target_row)
                new_level = tree_level(target_row) + 1
                remaining[target_index] = {
                    **target_row,
                    TREE_HAS_CHILDREN_FIELD: True,
                    TREE_EXPANDED_FIELD: True,
                }
            else:
                new_parent_id = tree_parent_id(target_row)
                new_level = tree_level(target_row)
                insert_index = target_index if mode == "before" else target_index + 1

        level_delta = new_level - src_level
        moved = [{**block[0], TREE_PARENT_ID_FIELD: new_parent_id, TREE_LEVEL_FIELD: new_level}]
        moved.extend({**r, TREE_LEVEL_FIELD: tree_level(r) + level_delta} for r in block[1:])

        result = remaining[:insert_index] + moved + remaining[insert_index:]
        return TreeManager.recompute_has_children(result)
