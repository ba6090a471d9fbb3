#!/usr/bin/env python3
"""
PVLSCAN TREE BUILDER - The Architect
------------------------------------
Assembles the flat entry stream into nested maps. The reader only reports
GROUP/OBJECT openings and END_GROUP/END_OBJECT keys; this module keeps the
stack of open contexts and checks that every closing marker matches.

Comments met between entries are re-attached above the next key so they
survive a YAML export.

Author: PvlScan Team
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from pvlscan.core.errors import LabelSyntaxError
from pvlscan.core.models import Comment, KeyValuePair, SymbolKind

logger = logging.getLogger("pvlscan.tree")

END_MARKERS = {
    "END_GROUP": SymbolKind.GROUP,
    "END_OBJECT": SymbolKind.OBJECT,
}
END_OF_LABEL = "END"


@dataclass
class _OpenContext:
    kind: SymbolKind
    name: str
    node: CommentedMap
    line_no: int


class PvlTreeBuilder:
    """
    Turns KeyValuePair/Comment items into a CommentedMap.
    Repeated GROUP/OBJECT names under one parent become a list of maps.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def _context_name(self, kvp: KeyValuePair) -> str:
        name = kvp.value.to_python()
        if not isinstance(name, str) or not name:
            raise LabelSyntaxError(f"{kvp.key.kind.name} without a name", kvp.line_no)
        return name

    def _insert_child(self, parent: CommentedMap, name: str, child: CommentedMap):
        existing = parent.get(name)
        if existing is None:
            parent[name] = child
        elif isinstance(existing, CommentedSeq):
            existing.append(child)
        else:
            parent[name] = CommentedSeq([existing, child])

    def _attach_comments(self, node: CommentedMap, key: str, pending: List[str], depth: int):
        if not pending:
            return
        node.yaml_set_comment_before_after_key(key, before="\n".join(pending), indent=depth * self.indent)
        pending.clear()

    def _close(self, stack: List[_OpenContext], kvp: KeyValuePair):
        marker = kvp.key.name
        if not stack:
            raise LabelSyntaxError(f"{marker} with no open context", kvp.line_no)

        top = stack[-1]
        if END_MARKERS[marker] != top.kind:
            raise LabelSyntaxError(
                f"{marker} closes {top.kind.name} '{top.name}' opened at line {top.line_no}",
                kvp.line_no,
            )
        closing_name = kvp.value.to_python()
        if closing_name and closing_name != top.name:
            raise LabelSyntaxError(
                f"{marker} = {closing_name} does not match open {top.kind.name} '{top.name}'",
                kvp.line_no,
            )
        stack.pop()

    def build(self, items: Iterable[Union[KeyValuePair, Comment]]) -> CommentedMap:
        root = CommentedMap()
        stack: List[_OpenContext] = []
        pending: List[str] = []

        for item in items:
            if isinstance(item, Comment):
                pending.append(item.text.strip())
                continue

            kind = item.key.kind
            node = stack[-1].node if stack else root

            if kind == SymbolKind.BLANK_LINE:
                continue

            if kind in (SymbolKind.GROUP, SymbolKind.OBJECT):
                name = self._context_name(item)
                child = CommentedMap()
                self._insert_child(node, name, child)
                self._attach_comments(node, name, pending, len(stack))
                stack.append(_OpenContext(kind, name, child, item.line_no))
                continue

            name = item.key.name
            if name in END_MARKERS:
                self._close(stack, item)
                continue
            if name == END_OF_LABEL:
                break

            if name in node:
                logger.warning("Line %d: duplicate key %s, keeping the last value", item.line_no, name)
            node[name] = self._convert(item)
            self._attach_comments(node, name, pending, len(stack))

        if stack:
            top = stack[-1]
            raise LabelSyntaxError(f"{top.kind.name} '{top.name}' is never closed", top.line_no)
        return root

    def _convert(self, kvp: KeyValuePair) -> Any:
        value = kvp.value.to_python()
        if isinstance(value, list):
            return CommentedSeq(value)
        return value
