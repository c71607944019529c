"""State of the viewer window, advanced by a pure reducer."""

from dataclasses import dataclass, field, replace
from enum import Enum


class Status(Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    LOADING = "loading"
    VIEWING = "viewing"
    ERROR = "error"


@dataclass(frozen=True)
class ViewerState:
    status: Status = Status.IDLE
    directory_path: str = ""
    image_files: tuple[str, ...] = field(default_factory=tuple)
    current_index: int = 0
    error_message: str | None = None


@dataclass(frozen=True)
class Action:
    type: str
    payload: object = None


SELECT_DIRECTORY = "SELECT_DIRECTORY"
CANCEL_SELECTION = "CANCEL_SELECTION"
DIRECTORY_SELECTED = "DIRECTORY_SELECTED"
IMAGES_LOADED = "IMAGES_LOADED"
IMAGE_LOAD_FAILED = "IMAGE_LOAD_FAILED"
NEXT_IMAGE = "NEXT_IMAGE"
PREV_IMAGE = "PREV_IMAGE"
CLEAR_ERROR = "CLEAR_ERROR"


def reduce(state: ViewerState, action: Action) -> ViewerState:
    t = action.type
    if t == SELECT_DIRECTORY:
        return replace(state, status=Status.SELECTING)
    if t == CANCEL_SELECTION:
        return replace(state, status=Status.IDLE)
    if t == DIRECTORY_SELECTED:
        return replace(state, status=Status.LOADING, directory_path=action.payload,
                       image_files=(), current_index=0)
    if t == IMAGES_LOADED:
        return replace(state, status=Status.VIEWING, image_files=tuple(action.payload),
                       current_index=0)
    if t == IMAGE_LOAD_FAILED:
        return replace(state, status=Status.ERROR, error_message=action.payload)
    if t == NEXT_IMAGE:
        last = max(len(state.image_files) - 1, 0)
        return replace(state, current_index=min(state.current_index + 1, last))
    if t == PREV_IMAGE:
        return replace(state, current_index=max(state.current_index - 1, 0))
    if t == CLEAR_ERROR:
        return replace(state, status=Status.IDLE, error_message=None)
    return state


def current_image(state: ViewerState) -> str | None:
    if state.status != Status.VIEWING or not state.image_files:
        return None
    return state.image_files[state.current_index]


def can_go_previous(state: ViewerState) -> bool:
    return state.status == Status.VIEWING and state.current_index > 0


def can_go_next(state: ViewerState) -> bool:
    return state.status == Status.VIEWING and state.current_index < len(state.image_files) - 1


def counter_text(state: ViewerState) -> str:
    return f"{state.current_index + 1} / {len(state.image_files)}"
