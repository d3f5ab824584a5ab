from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from PySide6.QtCore import QObject, Signal

from .errors import ShapeError
from .schema import ArrayNode, ObjectNode, SchemaNode, child_node
from .validation import FormError

logger = logging.getLogger(__name__)

Path = tuple[str, ...]


class Direction(Enum):
    UP = "up"
    DOWN = "down"


def normalize_path(path: Iterable[str | int]) -> Path:
    return tuple(str(seg) for seg in path)


def _index(segment: str, path: Sequence[str]) -> int:
    try:
        return int(segment)
    except ValueError:
        raise ShapeError(f"List index expected at {list(path)}, got {segment!r}") from None


def _make_container(node: SchemaNode | None, segment: str) -> list | dict:
    if isinstance(node, ArrayNode):
        return []
    if isinstance(node, ObjectNode):
        return {}
    return [] if segment.isdigit() else {}


class FormState(QObject):
    """ The single source of truth for one form: the data tree, the error list and the readonly flag.

    The data tree is never mutated in place. Writes copy the containers along the path and share every
    untouched branch, so a value read earlier stays valid after later edits.

    Signals
    -------
    dataChanged(tuple): emitted with the written path after the new tree is in place.
    errorsChanged(): emitted when the error list is replaced.
    readonlyChanged(bool): emitted when the readonly flag flips.
    """
    dataChanged = Signal(object)
    errorsChanged = Signal()
    readonlyChanged = Signal(bool)

    def __init__(self, schema: SchemaNode | None = None, data: Any = None, readonly: bool = False,
                 parent: QObject | None = None):
        super().__init__(parent)
        self._schema = schema
        self._data = data
        self._errors: list[FormError] = []
        self._readonly = readonly

    # --- getters ---
    def schema(self) -> SchemaNode | None: return self._schema
    def data(self) -> Any: return self._data
    def errors(self) -> list[FormError]: return list(self._errors)
    def readonly(self) -> bool: return self._readonly

    def snapshot(self) -> Any:
        return copy.deepcopy(self._data)

    # --- path access ---
    def get(self, path: Iterable[str | int], default: Any = None) -> Any:
        """ Resolve a path through the data tree.

        Missing keys, out of range indices and None along the way give ``default``. Indexing into a
        primitive raises ShapeError.
        """
        path = normalize_path(path)
        current = self._data
        for depth, seg in enumerate(path):
            if current is None:
                return default
            if isinstance(current, dict):
                if seg not in current:
                    return default
                current = current[seg]
            elif isinstance(current, list):
                idx = _index(seg, path[:depth + 1])
                if not 0 <= idx < len(current):
                    return default
                current = current[idx]
            else:
                raise ShapeError(f"Can't index {type(current).__name__} at {list(path[:depth + 1])}")
        return current

    def set(self, path: Iterable[str | int], value: Any) -> None:
        path = normalize_path(path)
        self._data = self._assoc(self._schema, self._data, path, 0, value)
        self.dataChanged.emit(path)

    def clear(self, path: Iterable[str | int]) -> None:
        """ Remove the value at path. Mapping keys are dropped, list slots become None. """
        path = normalize_path(path)
        if not path:
            self._data = None
        else:
            self._data = self._dissoc(self._data, path, 0)
        self.dataChanged.emit(path)

    def _assoc(self, node: SchemaNode | None, container: Any, path: Path, depth: int, value: Any) -> Any:
        if depth == len(path):
            return value
        seg = path[depth]
        child = child_node(node, seg)
        if container is None:
            container = _make_container(node, seg)

        if isinstance(container, list):
            idx = _index(seg, path[:depth + 1])
            if idx < 0:
                raise ShapeError(f"Negative index at {list(path[:depth + 1])}")
            new = list(container)
            while len(new) <= idx:
                new.append(None)
            new[idx] = self._assoc(child, new[idx], path, depth + 1, value)
            return new

        if isinstance(container, dict):
            new = dict(container)
            new[seg] = self._assoc(child, container.get(seg), path, depth + 1, value)
            return new

        raise ShapeError(f"Can't set inside {type(container).__name__} at {list(path[:depth + 1])}")

    def _dissoc(self, container: Any, path: Path, depth: int) -> Any:
        seg = path[depth]
        last = depth == len(path) - 1

        if container is None:
            return None

        if isinstance(container, dict):
            if seg not in container:
                return container
            new = dict(container)
            if last:
                del new[seg]
            else:
                new[seg] = self._dissoc(container[seg], path, depth + 1)
            return new

        if isinstance(container, list):
            idx = _index(seg, path[:depth + 1])
            if not 0 <= idx < len(container):
                return container
            new = list(container)
            new[idx] = None if last else self._dissoc(container[idx], path, depth + 1)
            return new

        raise ShapeError(f"Can't clear inside {type(container).__name__} at {list(path[:depth + 1])}")

    # --- array operations ---
    def _array_at(self, path: Path) -> list:
        value = self.get(path)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ShapeError(f"Array operation on {type(value).__name__} at {list(path)}")
        return value

    def add_item(self, path: Iterable[str | int], factory: Callable[[], Any]) -> None:
        path = normalize_path(path)
        items = self._array_at(path)
        self.set(path, [*items, factory()])

    def remove_item(self, path: Iterable[str | int], index: int) -> None:
        path = normalize_path(path)
        items = self._array_at(path)
        if not 0 <= index < len(items):
            logger.debug("remove_item: index %s out of range for %s (len %d)", index, list(path), len(items))
            return
        self.set(path, items[:index] + items[index + 1:])

    def move_item(self, path: Iterable[str | int], index: int, direction: Direction | str) -> None:
        """ Swap the item at index with its neighbour. "up" is towards index 0. Out of range moves are no-ops. """
        if isinstance(direction, str):
            direction = Direction(direction)
        path = normalize_path(path)
        items = self._array_at(path)
        target = index - 1 if direction is Direction.UP else index + 1
        if not (0 <= index < len(items) and 0 <= target < len(items)):
            logger.debug("move_item: can't move %s %s in %s (len %d)", index, direction.value, list(path), len(items))
            return
        new = list(items)
        new[index], new[target] = new[target], new[index]
        self.set(path, new)

    # --- errors ---
    def errors_at(self, path: Iterable[str | int]) -> list[FormError]:
        path = normalize_path(path)
        return [e for e in self._errors if e.path == path]

    def set_errors(self, errors: Iterable[FormError] | None) -> None:
        self._errors = list(errors) if errors else []
        self.errorsChanged.emit()

    # --- readonly ---
    def set_readonly(self, on: bool) -> None:
        if on == self._readonly: return
        self._readonly = on
        self.readonlyChanged.emit(on)
