"""Formatting state shared by the RTF decoder and encoder."""

from dataclasses import dataclass, replace


@dataclass
class FormatState:
    """Bold/italic flags in effect at a point in the document.

    Treated as a value: entering a group pushes a copy, so a child
    scope's changes never reach its parent.
    """

    bold: bool = False
    italic: bool = False

    def copy(self) -> "FormatState":
        return replace(self)


class ScopeStack:
    """Stack of FormatState frames, one per open RTF group.

    The root frame is always present and is never popped, so the height
    is 1 + the number of currently open groups.
    """

    def __init__(self) -> None:
        self._frames: list[FormatState] = [FormatState()]

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> FormatState:
        """The frame that control words mutate."""
        return self._frames[-1]

    @property
    def depth(self) -> int:
        """Number of open groups above the root frame."""
        return len(self._frames) - 1

    def push(self) -> FormatState:
        """Enter a group, inheriting a copy of the current formatting."""
        frame = self.top.copy()
        self._frames.append(frame)
        return frame

    def pop(self) -> FormatState:
        """Leave a group. Unbalanced closes stop at the root frame."""
        if len(self._frames) > 1:
            self._frames.pop()
        return self.top


class MarkerCursor:
    """Tracks which markdown markers are open in the output stream.

    Bold markers always enclose italic markers: ``**`` is opened before
    any ``*`` inside it, and an open ``*`` is closed before the
    surrounding ``**`` is.
    """

    BOLD = "**"
    ITALIC = "*"

    def __init__(self) -> None:
        self.bold_open = False
        self.italic_open = False

    def sync(self, state: FormatState) -> str:
        """Return the marker transitions needed to match ``state``."""
        parts: list[str] = []

        # Bold first, since ** must sit outside *
        if state.bold and not self.bold_open:
            if self.italic_open:
                parts.append(self.ITALIC)
                self.italic_open = False
            parts.append(self.BOLD)
            self.bold_open = True
        elif not state.bold and self.bold_open:
            # Italic is left as-is here; see DESIGN.md (bold-off ordering)
            parts.append(self.BOLD)
            self.bold_open = False

        if state.italic and not self.italic_open:
            parts.append(self.ITALIC)
            self.italic_open = True
        elif not state.italic and self.italic_open:
            parts.append(self.ITALIC)
            self.italic_open = False

        return "".join(parts)

    def close_all(self) -> str:
        """Close every open marker, italic before bold."""
        parts: list[str] = []
        if self.italic_open:
            parts.append(self.ITALIC)
            self.italic_open = False
        if self.bold_open:
            parts.append(self.BOLD)
            self.bold_open = False
        return "".join(parts)

    @property
    def any_open(self) -> bool:
        return self.bold_open or self.italic_open
