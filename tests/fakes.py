from __future__ import annotations

from typing import List


class FakeConsole:
    """Scripted console: replays `answers` and records everything shown."""

    def __init__(self, answers: List[str]):
        self._answers = list(answers)
        self.prompts: List[str] = []
        self.chunks: List[str] = []

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        self.chunks.append(prompt)
        if not self._answers:
            raise EOFError("no more scripted answers")
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def output(self) -> str:
        return "".join(self.chunks)
