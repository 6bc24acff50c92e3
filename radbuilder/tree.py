"""Indented item lists parsed into a tree of labelled nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class TreeNode:
    """One labelled node with its child nodes."""

    label: str
    children: list[TreeNode] = field(default_factory=list)


def _indent_level(line: str) -> int:
    return (len(line) - len(line.lstrip(" "))) // 2


def _build(pending: deque[tuple[int, str]], level: int) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    while pending and pending[0][0] == level:
        _, label = pending.popleft()
        nodes.append(TreeNode(label, _build(pending, level + 1)))
    return nodes


def parse_nodes(lines: Iterable[str]) -> list[TreeNode]:
    """Build a tree from lines indented by two spaces per level.

    Blank lines are ignored. Parsing stops at the first line whose indentation
    cannot be attached to the tree built so far (a jump of more than one level,
    or an indented first line); everything from there on is dropped.
    """
    pending = deque(
        (_indent_level(line), line.strip())
        for line in lines
        if line.strip()
    )
    return _build(pending, 0)