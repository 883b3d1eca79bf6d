"""Screen layers holding a console and retained-mode controls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple

from roguekit.color import Color
from roguekit.controls import (
    BorderBox,
    Checkbox,
    Console,
    GuiControl,
    HBar,
    ListBox,
    ListItem,
    Radio,
    RadioButtons,
    StaticText,
    VBar,
)


class TerminalLike(Protocol):
    """The part of a console a layer adjusts on resize."""

    visible: bool
    dirty: bool

    def set_offset(self, x: int, y: int) -> None:
        ...

    def resize_pixels(self, w: int, h: int) -> None:
        ...


class LayerKind(Enum):
    """How a layer draws itself."""

    CONSOLE = "console"
    SPARSE = "sparse"
    OWNER_DRAW = "owner_draw"


ResizeFunc = Callable[["Layer", int, int], None]


@dataclass
class Layer:
    """A rectangular screen region in pixels, with its console and controls."""

    x: int
    y: int
    w: int
    h: int
    resize_func: ResizeFunc
    kind: LayerKind = LayerKind.CONSOLE
    font: str = ""
    has_background: bool = True
    owner_draw_func: Optional[Callable[..., Any]] = None
    console: Optional[TerminalLike] = None
    controls: Dict[int, GuiControl] = field(default_factory=dict)

    def on_resize(self, width: int, height: int) -> None:
        """Let the resize callback lay the layer out for a new window size."""
        self.resize_func(self, width, height)
        if self.console is not None and self.console.visible:
            self.console.set_offset(self.x, self.y)
            self.console.resize_pixels(self.w, self.h)
            self.console.dirty = True

    def control(self, handle: int) -> GuiControl:
        try:
            return self.controls[handle]
        except KeyError:
            raise KeyError(f"Unknown GUI control handle: {handle}") from None

    def remove_control(self, handle: int) -> None:
        self.controls.pop(handle, None)

    def _add(self, handle: int, control: GuiControl) -> GuiControl:
        if handle in self.controls:
            raise ValueError(f"Adding a duplicate control handle: {handle}")
        self.controls[handle] = control
        return control

    def add_static_text(self, handle: int, x: int, y: int, text: str, fg: Color, bg: Color) -> StaticText:
        return self._add(handle, StaticText(x, y, text, fg, bg))  # type: ignore[return-value]

    def add_boundary_box(self, handle: int, double_lines: bool, fg: Color, bg: Color) -> BorderBox:
        return self._add(handle, BorderBox(double_lines, fg, bg))  # type: ignore[return-value]

    def add_checkbox(
        self, handle: int, x: int, y: int, label: str, checked: bool, fg: Color, bg: Color
    ) -> Checkbox:
        return self._add(handle, Checkbox(x, y, checked, label, fg, bg))  # type: ignore[return-value]

    def add_radioset(
        self, handle: int, x: int, y: int, caption: str, fg: Color, bg: Color, options: Sequence[Radio]
    ) -> RadioButtons:
        return self._add(handle, RadioButtons(x, y, caption, fg, bg, options))  # type: ignore[return-value]

    def add_hbar(
        self,
        handle: int,
        x: int,
        y: int,
        w: int,
        minimum: int,
        maximum: int,
        value: int,
        full_start: Color,
        full_end: Color,
        empty_start: Color,
        empty_end: Color,
        text_color: Color,
        prefix: str = "",
    ) -> HBar:
        bar = HBar(x, y, w, minimum, maximum, value, full_start, full_end, empty_start, empty_end, text_color, prefix)
        return self._add(handle, bar)  # type: ignore[return-value]

    def add_vbar(
        self,
        handle: int,
        x: int,
        y: int,
        h: int,
        minimum: int,
        maximum: int,
        value: int,
        full_start: Color,
        full_end: Color,
        empty_start: Color,
        empty_end: Color,
        text_color: Color,
        prefix: str = "",
    ) -> VBar:
        bar = VBar(x, y, h, minimum, maximum, value, full_start, full_end, empty_start, empty_end, text_color, prefix)
        return self._add(handle, bar)  # type: ignore[return-value]

    def add_listbox(
        self,
        handle: int,
        x: int,
        y: int,
        value: int,
        options: Sequence[ListItem],
        label: str,
        label_fg: Color,
        label_bg: Color,
        item_fg: Color,
        item_bg: Color,
        sel_fg: Color,
        sel_bg: Color,
    ) -> ListBox:
        box = ListBox(x, y, value, options, label, label_fg, label_bg, item_fg, item_bg, sel_fg, sel_bg)
        return self._add(handle, box)  # type: ignore[return-value]

    def clear_gui(self) -> None:
        self.controls.clear()

    def process_mouse(
        self, mouse_x: int, mouse_y: int, left_down: bool, font_size: Tuple[int, int]
    ) -> None:
        """Start a frame: fire render-start callbacks, then dispatch mouse events to controls."""
        for control in self.controls.values():
            if control.on_render_start is not None:
                control.on_render_start(control)

        if not (self.x <= mouse_x <= self.x + self.w and self.y <= mouse_y <= self.y + self.h):
            return

        font_w, font_h = font_size
        terminal_x = (mouse_x - self.x) // font_w
        terminal_y = (mouse_y - self.y) // font_h

        for control in self.controls.values():
            if not control.mouse_in_control(terminal_x, terminal_y):
                continue
            if control.on_mouse_over is not None:
                control.on_mouse_over(control, terminal_x, terminal_y)
            if left_down and control.on_mouse_down is not None:
                control.on_mouse_down(control, terminal_x, terminal_y)
            if not left_down and control.on_mouse_up is not None:
                control.on_mouse_up(control, terminal_x, terminal_y)

    def render_controls(self, console: Console) -> None:
        """Draw every control onto console."""
        for control in self.controls.values():
            control.render(console)


def resize_fullscreen(layer: Layer, w: int, h: int) -> None:
    """Resize callback that makes a layer cover the whole window."""
    layer.w = w
    layer.h = h