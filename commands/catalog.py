"""Static catalog of built-in commands and name/description lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from config.defaults import NOT_FOUND
from protocol import command_ids as ids
from protocol.tokens import matches_name


@dataclass(frozen=True)
class Command:
    id: int
    name: str
    description: str


COMMANDS: tuple[Command, ...] = (
    Command(ids.CMD_OPEN_FILE, "OpenFile", "Open File..."),
    Command(ids.CMD_CLOSE, "Close", "Close Document"),
    Command(ids.CMD_SAVE_AS, "SaveAs", "Save As..."),
    Command(ids.CMD_PRINT, "Print", "Print..."),
    Command(ids.CMD_RELOAD, "Reload", "Reload Document"),
    Command(ids.CMD_NEW_WINDOW, "NewWindow", "Open New Window"),
    Command(ids.CMD_SHOW_IN_FOLDER, "ShowInFolder", "Show File In Folder"),
    Command(ids.CMD_RENAME_FILE, "RenameFile", "Rename File..."),
    Command(ids.CMD_DELETE_FILE, "DeleteFile", "Delete File"),
    Command(ids.CMD_COPY_FILE_PATH, "CopyFilePath", "Copy File Path"),
    Command(ids.CMD_PROPERTIES, "Properties", "Show Document Properties"),
    Command(ids.CMD_EXIT, "Exit", "Exit Application"),
    Command(ids.CMD_TOGGLE_FULLSCREEN, "ToggleFullscreen", "Toggle Fullscreen"),
    Command(ids.CMD_TOGGLE_PRESENTATION_MODE, "TogglePresentationMode", "View: Presentation Mode"),
    Command(ids.CMD_TOGGLE_BOOKMARKS, "ToggleBookmarks", "Toggle Bookmarks"),
    Command(ids.CMD_TOGGLE_TOOLBAR, "ToggleToolbar", "Toggle Toolbar"),
    Command(ids.CMD_TOGGLE_MENU_BAR, "ToggleMenuBar", "Toggle Menu Bar"),
    Command(ids.CMD_SINGLE_PAGE_VIEW, "SinglePageView", "View: Single Page"),
    Command(ids.CMD_FACING_VIEW, "FacingView", "View: Facing"),
    Command(ids.CMD_BOOK_VIEW, "BookView", "View: Book"),
    Command(ids.CMD_TOGGLE_CONTINUOUS_VIEW, "ToggleContinuousView", "View: Toggle Continuous"),
    Command(ids.CMD_ROTATE_LEFT, "RotateLeft", "Rotate Left"),
    Command(ids.CMD_ROTATE_RIGHT, "RotateRight", "Rotate Right"),
    Command(ids.CMD_SCROLL_UP, "ScrollUp", "Scroll Up"),
    Command(ids.CMD_SCROLL_DOWN, "ScrollDown", "Scroll Down"),
    Command(ids.CMD_SCROLL_LEFT, "ScrollLeft", "Scroll Left"),
    Command(ids.CMD_SCROLL_RIGHT, "ScrollRight", "Scroll Right"),
    Command(ids.CMD_SCROLL_UP_PAGE, "ScrollUpPage", "Scroll Up By Page"),
    Command(ids.CMD_SCROLL_DOWN_PAGE, "ScrollDownPage", "Scroll Down By Page"),
    Command(ids.CMD_GO_TO_NEXT_PAGE, "GoToNextPage", "Next Page"),
    Command(ids.CMD_GO_TO_PREV_PAGE, "GoToPrevPage", "Previous Page"),
    Command(ids.CMD_GO_TO_FIRST_PAGE, "GoToFirstPage", "First Page"),
    Command(ids.CMD_GO_TO_LAST_PAGE, "GoToLastPage", "Last Page"),
    Command(ids.CMD_GO_TO_PAGE, "GoToPage", "Go to Page..."),
    Command(ids.CMD_NAVIGATE_BACK, "NavigateBack", "Navigate: Back"),
    Command(ids.CMD_NAVIGATE_FORWARD, "NavigateForward", "Navigate: Forward"),
    Command(ids.CMD_FIND_FIRST, "FindFirst", "Find..."),
    Command(ids.CMD_FIND_NEXT, "FindNext", "Find Next"),
    Command(ids.CMD_FIND_PREV, "FindPrev", "Find Previous"),
    Command(ids.CMD_FIND_MATCH_CASE, "FindMatchCase", "Find: Match Case"),
    Command(ids.CMD_COPY_SELECTION, "CopySelection", "Copy Selection"),
    Command(ids.CMD_SELECT_ALL, "SelectAll", "Select All"),
    Command(ids.CMD_ZOOM_IN, "ZoomIn", "Zoom In"),
    Command(ids.CMD_ZOOM_OUT, "ZoomOut", "Zoom Out"),
    Command(ids.CMD_ZOOM_FIT_PAGE, "ZoomFitPage", "Zoom: Fit Page"),
    Command(ids.CMD_ZOOM_FIT_WIDTH, "ZoomFitWidth", "Zoom: Fit Width"),
    Command(ids.CMD_ZOOM_ACTUAL_SIZE, "ZoomActualSize", "Zoom: Actual Size"),
    Command(ids.CMD_CREATE_ANNOT_TEXT, "CreateAnnotText", "Create Text Annotation"),
    Command(ids.CMD_CREATE_ANNOT_LINK, "CreateAnnotLink", "Create Link Annotation"),
    Command(ids.CMD_CREATE_ANNOT_FREE_TEXT, "CreateAnnotFreeText", "Create Free Text Annotation"),
    Command(ids.CMD_CREATE_ANNOT_LINE, "CreateAnnotLine", "Create Line Annotation"),
    Command(ids.CMD_CREATE_ANNOT_SQUARE, "CreateAnnotSquare", "Create Square Annotation"),
    Command(ids.CMD_CREATE_ANNOT_CIRCLE, "CreateAnnotCircle", "Create Circle Annotation"),
    Command(ids.CMD_CREATE_ANNOT_POLYGON, "CreateAnnotPolygon", "Create Polygon Annotation"),
    Command(ids.CMD_CREATE_ANNOT_POLY_LINE, "CreateAnnotPolyLine", "Create Poly Line Annotation"),
    Command(ids.CMD_CREATE_ANNOT_HIGHLIGHT, "CreateAnnotHighlight", "Create Highlight Annotation"),
    Command(ids.CMD_CREATE_ANNOT_UNDERLINE, "CreateAnnotUnderline", "Create Underline Annotation"),
    Command(ids.CMD_CREATE_ANNOT_SQUIGGLY, "CreateAnnotSquiggly", "Create Squiggly Annotation"),
    Command(ids.CMD_CREATE_ANNOT_STRIKE_OUT, "CreateAnnotStrikeOut", "Create Strike Out Annotation"),
    Command(ids.CMD_CREATE_ANNOT_REDACT, "CreateAnnotRedact", "Create Redact Annotation"),
    Command(ids.CMD_CREATE_ANNOT_STAMP, "CreateAnnotStamp", "Create Stamp Annotation"),
    Command(ids.CMD_CREATE_ANNOT_CARET, "CreateAnnotCaret", "Create Caret Annotation"),
    Command(ids.CMD_CREATE_ANNOT_INK, "CreateAnnotInk", "Create Ink Annotation"),
    Command(ids.CMD_CREATE_ANNOT_POPUP, "CreateAnnotPopup", "Create Popup Annotation"),
    Command(ids.CMD_CREATE_ANNOT_FILE_ATTACHMENT, "CreateAnnotFileAttachment", "Create File Attachment Annotation"),
    Command(ids.CMD_OPTIONS, "Options", "Options..."),
    Command(ids.CMD_COMMAND_PALETTE, "CommandPalette", "Command Palette"),
    Command(ids.CMD_EXEC, "Exec", "Run External Program"),
)

_BY_ID: dict[int, Command] = {}


def _check_catalog(commands: tuple[Command, ...]) -> None:
    seen_ids: set[int] = set()
    seen_names: set[str] = set()
    seen_descriptions: set[str] = set()
    for command in commands:
        if command.id == ids.CMD_NONE or command.id in seen_ids:
            raise ValueError(f"invalid or duplicate command id: {command.id}")
        if command.name.casefold() in seen_names:
            raise ValueError(f"duplicate command name: {command.name}")
        if command.description.casefold() in seen_descriptions:
            raise ValueError(f"duplicate command description: {command.description}")
        seen_ids.add(command.id)
        seen_names.add(command.name.casefold())
        seen_descriptions.add(command.description.casefold())


def _lookup(text: str, key: Callable[[Command], str]) -> int:
    for command in COMMANDS:
        if matches_name(text, key(command)):
            return command.id
    return NOT_FOUND


def command_id_by_name(name: str) -> int:
    return _lookup(name, lambda command: command.name)


def command_id_by_description(description: str) -> int:
    return _lookup(description, lambda command: command.description)


def find_command(cmd_id: int) -> Command | None:
    return _BY_ID.get(cmd_id)


def max_command_id() -> int:
    return max(command.id for command in COMMANDS)


_check_catalog(COMMANDS)
_BY_ID.update((command.id, command) for command in COMMANDS)
