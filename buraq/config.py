"""Application configuration read from an XML document."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from .api import ErrorCode


class ConfigError(Exception):
    """Raised when the configuration is missing or malformed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ERROR_INVALID_FORMAT) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class WindowConfig:
    """Main window geometry and icon names."""

    min_width: int = 0
    min_height: int = 0
    normal_size: int = 0
    minimize_icon: str = ""
    maximize_icon: str = ""
    restore_icon: str = ""
    close_icon: str = ""


@dataclass
class AppIcons:
    """Theme icon names used by the application."""

    settings_icon: str = ""
    folder_icon: str = ""
    terminal_icon: str = ""
    play_code: str = ""
    execute_icon: str = ""
    execute_selected_icon: str = ""
    add_file_icon: str = ""


@dataclass
class StyleSheet:
    """Style properties of one widget group and the combined style sheet."""

    color: str = ""
    background_color: str = ""
    padding: str = ""
    border: str = ""
    height: str = ""
    border_color: str = ""
    border_bottom: str = ""
    style_sheet: str = ""

    def _combine(self) -> None:
        self.style_sheet = (
            self.background_color
            + self.padding
            + self.color
            + self.border
            + self.height
            + self.border_color
            + self.border_bottom
        )


@dataclass
class MainStyles:
    """Styles of the main window's tool bars."""

    common_style: StyleSheet = field(default_factory=StyleSheet)
    control_tool_bar: StyleSheet = field(default_factory=StyleSheet)
    tool_bar: StyleSheet = field(default_factory=StyleSheet)
    status_tool_bar: StyleSheet = field(default_factory=StyleSheet)
    tool_bar_hover: StyleSheet = field(default_factory=StyleSheet)


@dataclass
class Config:
    """The complete application configuration."""

    title: str = ""
    version: str = ""
    powershell_path: str = ""
    app_logo: str = ""
    window: WindowConfig = field(default_factory=WindowConfig)
    app_icons: AppIcons = field(default_factory=AppIcons)
    main_styles: MainStyles = field(default_factory=MainStyles)


_WINDOW_INT_ATTRS = {
    "minWidth": "min_width",
    "minHeight": "min_height",
    "normalSize": "normal_size",
}

_WINDOW_ICON_ATTRS = {
    "minimizeIcon": "minimize_icon",
    "maximizeIcon": "maximize_icon",
    "restoreIcon": "restore_icon",
    "closeIcon": "close_icon",
}

_APP_ICON_TAGS = {
    "settings": "settings_icon",
    "folder": "folder_icon",
    "terminal": "terminal_icon",
    "playCode": "play_code",
    "execute": "execute_icon",
    "executeSelected": "execute_selected_icon",
    "addFile": "add_file_icon",
}

_STYLE_BLOCK_TAGS = {
    "controlToolBar": "control_tool_bar",
    "toolBar": "tool_bar",
    "statusToolBar": "status_tool_bar",
    "toolBarHover": "tool_bar_hover",
}

# Child tag -> (attribute, CSS prefix). borderTop deliberately fills border_bottom.
_STYLE_PROPERTIES = {
    "backgroundColor": ("background_color", "background-color:"),
    "border": ("border", "border: "),
    "borderBottom": ("border_bottom", "border-bottom:"),
    "borderTop": ("border_bottom", "border-top:"),
    "borderColor": ("border_color", "border-color:"),
    "padding": ("padding", "padding:"),
    "height": ("height", "height:"),
}


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def _first(root: ET.Element, tag: str) -> ET.Element:
    for element in root.iter(tag):
        if element is not root:
            return element
    raise ConfigError(f"Configuration is missing a '{tag}'.")


def _process_window(element: ET.Element, window: WindowConfig) -> None:
    for name, value in element.attrib.items():
        if name in _WINDOW_INT_ATTRS:
            setattr(window, _WINDOW_INT_ATTRS[name], _to_int(value))
        elif name in _WINDOW_ICON_ATTRS:
            setattr(window, _WINDOW_ICON_ATTRS[name], value)


def _process_app_icons(element: ET.Element, icons: AppIcons) -> None:
    for child in element:
        attr = _APP_ICON_TAGS.get(child.tag)
        if attr is not None:
            setattr(icons, attr, _text(child))


def _has_child_nodes(element: ET.Element) -> bool:
    return len(element) > 0 or bool(element.text and element.text.strip())


def _process_style_block(element: ET.Element, style: StyleSheet, common: StyleSheet) -> None:
    if element.get("inherits") == "commonStyle":
        style.color = common.color
        style.background_color = common.background_color
        style.padding = common.padding
        style.border = common.border
        style.height = common.height

    for child in element:
        prop = _STYLE_PROPERTIES.get(child.tag)
        if prop is not None:
            attr, prefix = prop
            setattr(style, attr, f"{prefix}{_text(child)};")
    if _has_child_nodes(element):
        style._combine()


def _process_styles(element: ET.Element, styles: MainStyles) -> None:
    common = next((child for child in element if child.tag == "commonStyle"), None)
    if common is not None:
        _process_style_block(common, styles.common_style, styles.common_style)

    for child in element:
        attr = _STYLE_BLOCK_TAGS.get(child.tag)
        if attr is not None:
            _process_style_block(child, getattr(styles, attr), styles.common_style)


def parse_config(text: str | bytes) -> Config:
    """Parse a configuration document; raise ConfigError if it is invalid."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ConfigError(f"Error parsing XML config: {exc}") from exc
    if root.tag != "configuration":
        raise ConfigError(f"Unexpected root element '{root.tag}'.")

    config = Config()
    config.title = _text(_first(root, "Title"))
    config.version = _text(_first(root, "Version"))
    config.app_logo = _text(_first(root, "AppLogo"))
    _process_window(_first(root, "window"), config.window)
    _process_app_icons(_first(root, "AppIcons"), config.app_icons)
    _process_styles(_first(root, "Styles"), config.main_styles)
    return config


def load_config(path: Path | str) -> Config:
    """Read and parse a configuration file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigError(
            f"Cannot open configuration {path}: {exc}", ErrorCode.ERROR_FILE_NOT_FOUND
        ) from exc
    return parse_config(data)