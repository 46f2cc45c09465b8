"""A text console that records styled runs of text and renders them as HTML."""

from __future__ import annotations

import enum
import html
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace

from rescuekit.color import Color

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class TextStyle(enum.IntFlag):
    """Font effects that may be combined."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class Style:
    """The colour, effects and point size of a run of text."""

    color: Color = field(default_factory=Color.black)
    font_style: TextStyle = TextStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if self.font_size < 0:
            raise ValueError("Font size cannot be negative.")


class StyledConsole:
    """A writable text stream whose output keeps the style it was written in.

    Text written is buffered until the style changes or the console is
    flushed; each buffered run is then stored with the style it was written
    in. ``flush`` renders everything and passes the HTML to ``on_update``.
    """

    def __init__(self, on_update: Callable[[str], None] | None = None) -> None:
        self._style = Style()
        self._buffer: list[str] = []
        self._contents: list[tuple[Style, str]] = []
        self._on_update = on_update

    @property
    def style(self) -> Style:
        """The style that newly written text receives."""
        return self._style

    @property
    def contents(self) -> list[tuple[Style, str]]:
        """All runs of text stored so far, each with its style."""
        self._flush_buffer()
        return list(self._contents)

    def write(self, text: str) -> int:
        """Append ``text`` in the current style and return its length."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Render the console and hand the HTML to the update callback, if any."""
        rendered = self.render_html()
        if self._on_update is not None:
            self._on_update(rendered)

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        self._buffer.clear()
        if text:
            self._contents.append((self._style, text))

    def set_style(
        self,
        color: Color | None = None,
        style: TextStyle = TextStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Switch the style for subsequent text; colour defaults to black."""
        new_style = Style(color if color is not None else Color.black(), TextStyle(style), size)
        self._flush_buffer()
        self._style = new_style

    def clear_display(self) -> None:
        """Discard all text written so far."""
        self._flush_buffer()
        self._contents.clear()

    def render_html(self) -> str:
        """Return the whole console as an HTML document."""
        self._flush_buffer()
        parts = [_HTML_HEADER]
        for style, text in self._contents:
            css = [f"color:{style.color.to_html()};"]
            if style.font_style & TextStyle.BOLD:
                css.append("font-weight:bold;")
            if style.font_style & TextStyle.ITALIC:
                css.append("font-style:italic;")
            css.append(f"font-size:{style.font_size}pt;")
            parts.append(f'<span style="{"".join(css)}">{html.escape(text)}</span>')
        parts.append(_HTML_FOOTER)
        return "".join(parts)

    @contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: TextStyle | None = None,
        size: int | None = None,
    ) -> Iterator[StyledConsole]:
        """Temporarily change the style; unspecified parts keep their current value."""
        previous = self._style
        changes: dict[str, object] = {}
        if color is not None:
            changes["color"] = color
        if style is not None:
            changes["font_style"] = TextStyle(style)
        if size is not None:
            changes["font_size"] = size
        target = replace(previous, **changes)
        self.set_style(target.color, target.font_style, target.font_size)
        try:
            yield self
        finally:
            self.set_style(previous.color, previous.font_style, previous.font_size)