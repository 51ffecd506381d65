import pytest

from buraq.theme import AppTheme, ThemeManager, theme_from_color


class _Styles:
    def __init__(self, fail=False):
        self.calls = []
        self.applied = []
        self.fail = fail

    def load(self, theme):
        self.calls.append(theme)
        if self.fail:
            raise OSError("missing")
        return f"style-{theme.name}"

    def apply(self, style):
        self.applied.append(style)


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((0, 0, 0), AppTheme.DARK),
        ((255, 255, 255), AppTheme.LIGHT),
        ((0, 0, 255), AppTheme.DARK),
        ((0, 255, 0), AppTheme.LIGHT),
    ],
)
def test_theme_from_color(rgb, expected):
    assert theme_from_color(*rgb) == expected


def test_initial_theme_is_dark_and_applied():
    styles = _Styles()
    manager = ThemeManager(styles.load, styles.apply)
    assert manager.current_theme() == AppTheme.DARK
    assert styles.applied == [manager.style_sheet]
    assert styles.calls == [AppTheme.DARK]


def test_same_theme_is_not_reloaded():
    styles = _Styles()
    manager = ThemeManager(styles.load, styles.apply)
    assert manager.set_app_theme(AppTheme.DARK) is False
    assert len(styles.calls) == 1


def test_switch_notifies_subscribers():
    styles = _Styles()
    manager = ThemeManager(styles.load, styles.apply)
    seen = []
    manager.subscribe(seen.append)
    assert manager.set_app_theme(AppTheme.LIGHT) is True
    assert seen == [AppTheme.LIGHT]
    assert manager.current_theme() == AppTheme.LIGHT
    assert styles.applied[-1] == manager.style_sheet


def test_failed_load_keeps_theme():
    styles = _Styles(fail=True)
    manager = ThemeManager(styles.load, styles.apply)
    seen = []
    manager.subscribe(seen.append)
    assert manager.set_app_theme(AppTheme.LIGHT) is False
    assert manager.current_theme() == AppTheme.DARK
    assert seen == []
    assert styles.applied == []


def test_palette_change_switches_theme():
    styles = _Styles()
    manager = ThemeManager(styles.load, styles.apply)
    assert manager.on_palette_change(255, 255, 255) == AppTheme.LIGHT
    assert manager.current_theme() == AppTheme.LIGHT
    assert manager.on_palette_change(10, 10, 10) == AppTheme.DARK
    assert manager.current_theme() == AppTheme.DARK


def test_palette_change_same_theme_no_reload():
    styles = _Styles()
    manager = ThemeManager(styles.load, styles.apply)
    manager.on_palette_change(0, 0, 0)
    assert styles.calls == [AppTheme.DARK]