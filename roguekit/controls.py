"""Retained-mode GUI controls drawn onto a character console."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from roguekit.color import Color, lerp
from roguekit.rexpaint import RexTile

BOX_LEFT_JOIN = 180
BOX_RIGHT_JOIN = 195


class Console(Protocol):
    """What a control needs from the terminal it draws on."""

    def print(self, x: int, y: int, text: str, fg: Color, bg: Color) -> None:
        ...

    def set_char(self, x: int, y: int, tile: RexTile) -> None:
        ...

    def box(self, fg: Color, bg: Color, double: bool) -> None:
        ...

    def box_at(self, x: int, y: int, w: int, h: int, fg: Color, bg: Color, double: bool) -> None:
        ...


RenderHook = Callable[["GuiControl"], None]
MouseHook = Callable[["GuiControl", int, int], None]


def _start_click(control: "GuiControl", tx: int, ty: int) -> None:
    control.click_started = True  # type: ignore[attr-defined]


class GuiControl(ABC):
    """Base of all controls; carries the optional event callbacks."""

    def __init__(self) -> None:
        self.on_render_start: Optional[RenderHook] = None
        self.on_mouse_over: Optional[MouseHook] = None
        self.on_mouse_down: Optional[MouseHook] = None
        self.on_mouse_up: Optional[MouseHook] = None

    @abstractmethod
    def render(self, console: Console) -> None:
        """Draw the control onto console."""

    def mouse_in_control(self, tx: int, ty: int) -> bool:
        """Whether terminal cell (tx, ty) lies on the control."""
        return False


class StaticText(GuiControl):
    """A line of text."""

    def __init__(self, x: int, y: int, text: str, foreground: Color, background: Color) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.text = text
        self.foreground = foreground
        self.background = background

    def render(self, console: Console) -> None:
        console.print(self.x, self.y, self.text, self.foreground, self.background)

    def mouse_in_control(self, tx: int, ty: int) -> bool:
        return self.x <= tx <= self.x + len(self.text) and ty == self.y


class BorderBox(GuiControl):
    """A border around the whole console."""

    def __init__(self, is_double: bool, foreground: Color, background: Color) -> None:
        super().__init__()
        self.is_double = is_double
        self.foreground = foreground
        self.background = background

    def render(self, console: Console) -> None:
        console.box(self.foreground, self.background, self.is_double)


class Checkbox(GuiControl):
    """A labelled box that toggles when clicked."""

    def __init__(
        self, x: int, y: int, checked: bool, label: str, foreground: Color, background: Color
    ) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.checked = checked
        self.label = label
        self.foreground = foreground
        self.background = background
        self.click_started = False
        self.on_mouse_down = _start_click
        self.on_mouse_up = Checkbox._release

    @staticmethod
    def _release(control: GuiControl, tx: int, ty: int) -> None:
        assert isinstance(control, Checkbox)
        if control.click_started:
            control.checked = not control.checked
        control.click_started = False

    def render(self, console: Console) -> None:
        fg, bg = self.foreground, self.background
        console.set_char(self.x, self.y, RexTile(ord("["), fg, bg))
        mark = "X" if self.checked else " "
        console.set_char(self.x + 1, self.y, RexTile(ord(mark), fg, bg))
        console.print(self.x + 2, self.y, "] " + self.label, fg, bg)

    def mouse_in_control(self, tx: int, ty: int) -> bool:
        return self.x <= tx <= self.x + len(self.label) + 4 and ty == self.y


@dataclass
class Radio:
    """One option of a radio-button set."""

    checked: bool
    label: str
    value: int


class RadioButtons(GuiControl):
    """A captioned set of mutually exclusive options."""

    def __init__(
        self,
        x: int,
        y: int,
        caption: str,
        foreground: Color,
        background: Color,
        options: Sequence[Radio],
    ) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.caption = caption
        self.foreground = foreground
        self.background = background
        self.options: List[Radio] = [dataclasses.replace(option) for option in options]
        self.selected_value = -1
        self.width = len(caption)
        for option in self.options:
            self.width = max(self.width, len(option.label))
            if option.checked:
                self.selected_value = option.value
        self.height = len(self.options) + 1
        self.click_started = False
        self.on_mouse_down = _start_click
        self.on_mouse_up = RadioButtons._release

    @staticmethod
    def _release(control: GuiControl, tx: int, ty: int) -> None:
        assert isinstance(control, RadioButtons)
        if control.click_started:
            option_number = (ty - control.y) - 1
            if 0 <= option_number < len(control.options):
                control.selected_value = control.options[option_number].value
                for option in control.options:
                    option.checked = option.value == control.selected_value
        control.click_started = False

    def render(self, console: Console) -> None:
        fg, bg = self.foreground, self.background
        console.print(self.x, self.y, self.caption, fg, bg)
        for row, option in enumerate(self.options, start=self.y + 1):
            console.set_char(self.x, row, RexTile(ord("("), fg, bg))
            mark = "*" if option.checked else " "
            console.set_char(self.x + 1, row, RexTile(ord(mark), fg, bg))
            console.print(self.x + 2, row, ") " + option.label, fg, bg)

    def mouse_in_control(self, tx: int, ty: int) -> bool:
        return self.x <= tx <= self.x + self.width and self.y <= ty <= self.y + self.height


class _Bar(GuiControl):
    """Shared layout of the horizontal and vertical bars."""

    def __init__(
        self,
        x: int,
        y: int,
        minimum: int,
        maximum: int,
        value: int,
        full_start: Color,
        full_end: Color,
        empty_start: Color,
        empty_end: Color,
        text_color: Color,
        prefix: str,
    ) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.full_start = full_start
        self.full_end = full_end
        self.empty_start = empty_start
        self.empty_end = empty_end
        self.text_color = text_color
        self.prefix = prefix

    @property
    def _length(self) -> int:
        raise NotImplementedError

    def _position(self, offset: int) -> tuple:
        raise NotImplementedError

    def render(self, console: Console) -> None:
        length = self._length
        if self.maximum == 0:
            raise ValueError("bar maximum must not be zero")
        full = int((self.value - self.minimum) / self.maximum * length)

        text = f"{self.prefix}{self.value}/{self.maximum}"
        start = max(0, length // 2 - len(text) // 2)
        shown = text[: max(0, length - start)]
        cells = list(" " * length)
        cells[start : start + len(shown)] = shown

        for offset, char in enumerate(cells):
            pct = offset / length
            if offset <= full:
                back = lerp(self.full_start, self.full_end, pct)
            else:
                back = lerp(self.empty_start, self.empty_end, pct)
            cx, cy = self._position(offset)
            console.set_char(cx, cy, RexTile(ord(char), self.text_color, back))


class HBar(_Bar):
    """A horizontal bar showing value/maximum, e.g. health."""

    def __init__(
        self,
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
    ) -> None:
        super().__init__(
            x, y, minimum, maximum, value, full_start, full_end, empty_start, empty_end, text_color, prefix
        )
        self.w = w

    @property
    def _length(self) -> int:
        return self.w

    def _position(self, offset: int) -> tuple:
        return self.x + offset, self.y

    def render(self, console: Console) -> None:
        super().render(console)


class VBar(_Bar):
    """A vertical bar showing value/maximum."""

    def __init__(
        self,
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
    ) -> None:
        super().__init__(
            x, y, minimum, maximum, value, full_start, full_end, empty_start, empty_end, text_color, prefix
        )
        self.h = h

    @property
    def _length(self) -> int:
        return self.h

    def _position(self, offset: int) -> tuple:
        return self.x, self.y + offset

    def render(self, console: Console) -> None:
        super().render(console)


@dataclass(frozen=True)
class ListItem:
    """One entry of a list box."""

    value: int
    label: str


class ListBox(GuiControl):
    """A captioned, boxed list with one selected entry."""

    def __init__(
        self,
        x: int,
        y: int,
        selected_value: int,
        items: Sequence[ListItem],
        caption: str,
        caption_fg: Color,
        caption_bg: Color,
        item_fg: Color,
        item_bg: Color,
        selected_fg: Color,
        selected_bg: Color,
    ) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.selected_value = selected_value
        self.items: List[ListItem] = list(items)
        self.caption = caption
        self.caption_fg = caption_fg
        self.caption_bg = caption_bg
        self.item_fg = item_fg
        self.item_bg = item_bg
        self.selected_fg = selected_fg
        self.selected_bg = selected_bg
        self.w = max([len(caption) + 2] + [len(item.label) for item in self.items])
        self.click_started = False
        self.on_mouse_down = _start_click
        self.on_mouse_up = ListBox._release

    @staticmethod
    def _release(control: GuiControl, tx: int, ty: int) -> None:
        assert isinstance(control, ListBox)
        if control.click_started:
            option_number = (ty - control.y) - 1
            if 0 <= option_number < len(control.items):
                control.selected_value = control.items[option_number].value
        control.click_started = False

    def render(self, console: Console) -> None:
        x, y, w = self.x, self.y, self.w
        fg, bg = self.caption_fg, self.caption_bg
        console.box_at(x, y, w + 3, len(self.items) + 1, fg, bg, False)
        console.print(x + 3, y, self.caption, fg, bg)
        console.set_char(x + 1, y, RexTile(BOX_LEFT_JOIN, fg, bg))
        console.set_char(x + 2, y, RexTile(ord(" "), fg, bg))
        console.set_char(x + w, y, RexTile(ord(" "), fg, bg))
        console.set_char(x + w + 1, y, RexTile(BOX_RIGHT_JOIN, fg, bg))
        for row, item in enumerate(self.items, start=y + 1):
            if item.value == self.selected_value:
                console.print(x + 2, row, item.label, self.selected_fg, self.selected_bg)
            else:
                console.print(x + 2, row, item.label, self.item_fg, self.item_bg)

    def mouse_in_control(self, tx: int, ty: int) -> bool:
        return self.x <= tx <= self.x + self.w and self.y <= ty <= self.y + len(self.items) + 1