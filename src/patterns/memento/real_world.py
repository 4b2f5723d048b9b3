"""Memento, real world: undo/redo and named snapshots for a text editor.

`EditorHistory` keeps a linear list of snapshots with a cursor. Saving after
an undo drops the redo branch, and the oldest snapshot is dropped once the
history is longer than `max_history_size`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.config import get_settings


def _default_formatting() -> dict[str, Any]:
    return {"bold": False, "italic": False, "font_size": 12}


@dataclass(frozen=True)
class EditorSnapshot:
    content: str
    cursor_position: int
    selected_text: str
    formatting: dict[str, Any]
    timestamp: str = field(default_factory=lambda: f"{datetime.now():%Y-%m-%d %H:%M:%S}")

    def get_description(self) -> str:
        preview = self.content[:20] + "..." if len(self.content) > 20 else self.content
        return f'{self.timestamp} - "{preview}" (pos: {self.cursor_position})'

    def get_state(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "cursor_position": self.cursor_position,
            "selected_text": self.selected_text,
            "formatting": dict(self.formatting),
        }


class TextEditor:
    def __init__(self) -> None:
        self.content = ""
        self.cursor_position = 0
        self.selected_text = ""
        self.formatting = _default_formatting()

    def type(self, text: str) -> None:
        pos = self.cursor_position
        self.content = self.content[:pos] + text + self.content[pos:]
        self.cursor_position += len(text)
        print(f"Typed: '{text}' | Content: '{self.content}'")

    def delete(self, length: int) -> None:
        if self.cursor_position < length:
            return
        start = self.cursor_position - length
        deleted = self.content[start : self.cursor_position]
        self.content = self.content[:start] + self.content[self.cursor_position :]
        self.cursor_position = start
        print(f"Deleted: '{deleted}' | Content: '{self.content}'")

    def select_text(self, start: int, length: int) -> None:
        self.selected_text = self.content[start : start + length]
        print(f"Selected: '{self.selected_text}'")

    def apply_formatting(self, formatting: dict[str, Any]) -> None:
        self.formatting = {**self.formatting, **formatting}
        print(f"Applied formatting: {json.dumps(formatting)}")

    def set_cursor_position(self, position: int) -> None:
        self.cursor_position = max(0, min(position, len(self.content)))
        print(f"Cursor moved to position: {self.cursor_position}")

    def create_memento(self) -> EditorSnapshot:
        return EditorSnapshot(self.content, self.cursor_position, self.selected_text, dict(self.formatting))

    def restore_from_memento(self, memento: EditorSnapshot) -> None:
        state = memento.get_state()
        self.content = state["content"]
        self.cursor_position = state["cursor_position"]
        self.selected_text = state["selected_text"]
        self.formatting = state["formatting"]
        print(f"State restored | Content: '{self.content}' | Cursor: {self.cursor_position}")

    def current_state(self) -> str:
        return (
            f"Content: '{self.content}' | Cursor: {self.cursor_position} | "
            f"Selected: '{self.selected_text}' | Format: {json.dumps(self.formatting)}"
        )


class EditorHistory:
    def __init__(self, editor: TextEditor, max_history_size: int | None = None) -> None:
        self.editor = editor
        if max_history_size is None:
            max_history_size = get_settings().history_max_size
        if max_history_size < 1:
            raise ValueError("max_history_size must be at least 1")
        self.max_history_size = max_history_size
        self.history: list[EditorSnapshot] = []
        self.current_index = -1

    def save_state(self) -> None:
        del self.history[self.current_index + 1 :]
        self.history.append(self.editor.create_memento())
        self.current_index += 1

        if len(self.history) > self.max_history_size:
            self.history.pop(0)
            self.current_index -= 1
        print(f"State saved to history (index: {self.current_index})")

    def undo(self) -> bool:
        if self.current_index > 0:
            self.current_index -= 1
            self.editor.restore_from_memento(self.history[self.current_index])
            print("Undo successful")
            return True
        print("Nothing to undo")
        return False

    def redo(self) -> bool:
        if self.current_index < len(self.history) - 1:
            self.current_index += 1
            self.editor.restore_from_memento(self.history[self.current_index])
            print("Redo successful")
            return True
        print("Nothing to redo")
        return False

    def show_history(self) -> None:
        print("\n=== Editor History ===")
        if not self.history:
            print("No history available")
            return
        for index, memento in enumerate(self.history):
            marker = " -> " if index == self.current_index else "    "
            print(f"{marker}[{index}] {memento.get_description()}")
        print("======================\n")

    def clear_history(self) -> None:
        self.history = []
        self.current_index = -1
        print("History cleared")


class AdvancedEditorHistory(EditorHistory):
    def __init__(self, editor: TextEditor, max_history_size: int | None = None) -> None:
        super().__init__(editor, max_history_size)
        self.named_snapshots: dict[str, EditorSnapshot] = {}

    def save_named_snapshot(self, name: str) -> None:
        self.named_snapshots[name] = self.editor.create_memento()
        print(f"Named snapshot '{name}' saved")

    def restore_named_snapshot(self, name: str) -> bool:
        snapshot = self.named_snapshots.get(name)
        if snapshot is None:
            print(f"Named snapshot '{name}' not found")
            return False
        self.editor.restore_from_memento(snapshot)
        print(f"Restored from named snapshot '{name}'")
        return True

    def list_named_snapshots(self) -> None:
        print("\n=== Named Snapshots ===")
        if not self.named_snapshots:
            print("No named snapshots")
        for name, memento in self.named_snapshots.items():
            print(f"'{name}' - {memento.get_description()}")
        print("========================\n")


def main() -> None:
    print("=== Text Editor with Memento Pattern Demo ===\n")
    editor = TextEditor()
    history = AdvancedEditorHistory(editor)

    print("1. Initial state:")
    print(editor.current_state())
    history.save_state()

    print("\n2. Typing 'Hello World':")
    editor.type("Hello World")
    history.save_state()

    print("\n3. Applying bold formatting:")
    editor.apply_formatting({"bold": True})
    history.save_state()
    history.save_named_snapshot("hello_world_bold")

    print("\n4. Adding more text:")
    editor.type(" - This is amazing!")
    history.save_state()

    print("\n5. Deleting some text:")
    editor.delete(10)
    history.save_state()
    history.show_history()

    print("6. Undo operations:")
    history.undo()
    history.undo()

    print("\n7. Redo operation:")
    history.redo()
    history.show_history()

    print("8. Named snapshots:")
    history.list_named_snapshots()

    print("9. Restoring from named snapshot:")
    history.restore_named_snapshot("hello_world_bold")

    print("\n10. Final state:")
    print(editor.current_state())


if __name__ == "__main__":
    main()
