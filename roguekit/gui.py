"""The overall GUI: a set of layers kept in render order."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from roguekit.layer import Layer, LayerKind, ResizeFunc


class Gui:
    """Holds the screen layers by handle and the order they are drawn in."""

    def __init__(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height
        self._layers: Dict[int, Layer] = {}
        self._render_order: List[Tuple[int, int]] = []
        self._next_order = 0

    def on_resize(self, w: int, h: int) -> None:
        """Record the new window size and let every layer lay itself out."""
        self.screen_width = w
        self.screen_height = h
        for layer in self._layers.values():
            layer.on_resize(w, h)

    def _check_handle_uniqueness(self, handle: int) -> None:
        if handle in self._layers:
            raise ValueError(f"Adding a duplicate layer handle: {handle}")

    def _insert(self, handle: int, layer: Layer, order: int) -> Layer:
        self._layers[handle] = layer
        if order == -1:
            order = self._next_order
            self._next_order += 1
        self._render_order.append((order, handle))
        self._render_order.sort(key=lambda entry: entry[0])
        return layer

    def add_layer(
        self,
        handle: int,
        x: int,
        y: int,
        w: int,
        h: int,
        font_name: str,
        resize_func: ResizeFunc,
        has_background: bool = True,
        order: int = -1,
    ) -> Layer:
        """Add a console layer; order -1 places it above the layers added so far."""
        self._check_handle_uniqueness(handle)
        layer = Layer(
            x, y, w, h, resize_func, kind=LayerKind.CONSOLE, font=font_name, has_background=has_background
        )
        return self._insert(handle, layer, order)

    def add_sparse_layer(
        self,
        handle: int,
        x: int,
        y: int,
        w: int,
        h: int,
        font_name: str,
        resize_func: ResizeFunc,
        order: int = -1,
    ) -> Layer:
        """Add a sparse console layer."""
        self._check_handle_uniqueness(handle)
        layer = Layer(x, y, w, h, resize_func, kind=LayerKind.SPARSE, font=font_name)
        return self._insert(handle, layer, order)

    def add_owner_layer(
        self,
        handle: int,
        x: int,
        y: int,
        w: int,
        h: int,
        resize_func: ResizeFunc,
        owner_draw_func: Callable[..., Any],
        order: int = -1,
    ) -> Layer:
        """Add a layer that draws itself through owner_draw_func."""
        self._check_handle_uniqueness(handle)
        layer = Layer(x, y, w, h, resize_func, kind=LayerKind.OWNER_DRAW, owner_draw_func=owner_draw_func)
        return self._insert(handle, layer, order)

    def delete_layer(self, handle: int) -> None:
        """Remove a layer; an unknown handle raises KeyError."""
        self.get_layer(handle)
        self._render_order = [entry for entry in self._render_order if entry[1] != handle]
        del self._layers[handle]

    def get_layer(self, handle: int) -> Layer:
        try:
            return self._layers[handle]
        except KeyError:
            raise KeyError(f"Unknown layer handle: {handle}") from None

    def layers_in_render_order(self) -> List[Layer]:
        """Layers from the bottom of the stack to the top."""
        return [self._layers[handle] for _, handle in self._render_order]