"""Count occurrences of a substring with an Aho-Corasick automaton."""

from __future__ import annotations


class _Automaton:
    def __init__(self, pattern: str) -> None:
        self._next: list[dict[str, int]] = [{}]
        self._go: list[dict[str, int]] = [{}]
        self._parent: list[int] = [-1]
        self._char: list[str] = [""]
        self._leaf: list[bool] = [False]
        self._link: dict[int, int] = {}

        node = 0
        for ch in pattern:
            if ch not in self._next[node]:
                self._next.append({})
                self._go.append({})
                self._parent.append(node)
                self._char.append(ch)
                self._leaf.append(False)
                self._next[node][ch] = len(self._next) - 1
            node = self._next[node][ch]
        self._leaf[node] = True

    def is_leaf(self, node: int) -> bool:
        return self._leaf[node]

    def link(self, node: int) -> int:
        if node not in self._link:
            parent = self._parent[node]
            if node == 0 or parent == 0:
                self._link[node] = 0
            else:
                self._link[node] = self.go(self.link(parent), self._char[node])
        return self._link[node]

    def go(self, node: int, ch: str) -> int:
        table = self._go[node]
        if ch not in table:
            if ch in self._next[node]:
                table[ch] = self._next[node][ch]
            else:
                table[ch] = 0 if node == 0 else self.go(self.link(node), ch)
        return table[ch]


def search_substr(text: str, pattern: str, allow_overlap: bool) -> int:
    """Count occurrences of `pattern` in `text`.

    Without overlap, matching restarts after each occurrence. An empty
    pattern matches once per character.
    """
    automaton = _Automaton(pattern)
    count = 0
    state = 0
    for ch in text:
        state = automaton.go(state, ch)
        if not automaton.is_leaf(state):
            continue
        count += 1
        if not allow_overlap:
            state = 0
    return count