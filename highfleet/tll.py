"""Nodes of the triply linked list used for loadouts and keyboard input."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from highfleet.escadra_string import EscadraString


@dataclass(frozen=True)
class TLLRef:
    """The three links held by one TLL node."""

    a: Optional[TLL]
    b: Optional[TLL]
    c: Optional[TLL]


def _address(node: Optional[TLL]) -> str:
    return "0x0" if node is None else hex(id(node))


@dataclass(eq=False)
class TLL:
    """An element of a triply linked list.

    Nodes compare and hash by identity, as their links may form cycles.
    """

    a: Optional[TLL] = field(default=None, repr=False)
    b: Optional[TLL] = field(default=None, repr=False)
    c: Optional[TLL] = field(default=None, repr=False)
    end: bool = False
    flag: bool = False
    padding_1ah: int = 0
    index: int = 0
    string: EscadraString = field(default_factory=EscadraString, repr=False)
    unknown_40h: int = 0
    padding_44h: int = 0
    data1: int = 0
    data2: int = 0
    data3: int = 0

    def _links(self) -> tuple[Optional[TLL], Optional[TLL], Optional[TLL]]:
        return self.a, self.b, self.c

    def explore(self) -> dict[TLL, TLLRef]:
        """Map every node reachable from this one to its links, depth first."""
        result: dict[TLL, TLLRef] = {}
        stack: list[TLL] = [self]
        while stack:
            node = stack.pop()
            if node in result:
                continue
            result[node] = TLLRef(node.a, node.b, node.c)
            stack.extend(link for link in reversed(node._links()) if link is not None)
        return result

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write this node and every node reachable from it, each once."""
        out = sys.stdout if file is None else file
        visited: set[int] = set()
        stack: list[tuple[TLL, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            if id(node) in visited:
                continue
            visited.add(id(node))
            node._write(out, depth)
            stack.extend(
                (link, depth + 1)
                for link in reversed(node._links())
                if link is not None
            )

    def _write(self, out: TextIO, depth: int) -> None:
        indent = "  " * depth
        lines = [
            f"TLL {_address(self)} {{",
            f"  a: {_address(self.a)}",
            f"  b: {_address(self.b)}",
            f"  c: {_address(self.c)}",
            f"  end: {str(self.end).lower()}",
            f"  flag: {str(self.flag).lower()}",
            f"  padding_1ah: {self.padding_1ah}",
            f"  index: {self.index}",
            f"  string: {self.string!r}",
            f"  unknown_40h: {self.unknown_40h}",
            f"  padding_44h: {self.padding_44h}",
            f"  data1: {self.data1:#x}",
            f"  data2: {self.data2:#x}",
            f"  data3: {self.data3:#x}",
            "}",
        ]
        for line in lines:
            out.write(f"{indent}{line}\n")