"""Tests for design_system.button_library — gallery rows, dividers and press binding."""
from unittest.mock import MagicMock, patch

import pytest

from design_system import button_library
from design_system.catalog import enumerate_button_configs
from design_system.components.icons import IconProvider
from design_system.components.variants import ButtonStyle
from design_system.theme import BUTTON_PALETTE, GALLERY_CONFIG


@pytest.fixture
def frames():
    """Every CTkFrame created by the gallery, in creation order."""
    created = []

    def new_frame(*args, **kwargs):
        frame = MagicMock()
        frame.master = args[0] if args else kwargs.get("master")
        frame.options = kwargs
        created.append(frame)
        return frame

    with patch.object(button_library, "ctk") as ctk:
        ctk.CTkFrame.side_effect = new_frame
        yield created


@pytest.fixture
def mock_make_button():
    with patch.object(button_library, "make_button") as make:
        make.side_effect = lambda row, config, icons=None: MagicMock(name=config.title)
        yield make


def build_rows(configs, on_press=None):
    body = MagicMock()
    icons = IconProvider()
    buttons = [button_library.add_button_row(body, c, icons, on_press) for c in configs]
    return body, buttons


class TestGalleryRows:

    def test_one_row_and_divider_per_config(self, frames, mock_make_button):
        configs = enumerate_button_configs()
        body, _ = build_rows(configs)

        rows, dividers = frames[0::2], frames[1::2]
        assert len(rows) == len(dividers) == len(configs) == 54
        assert mock_make_button.call_count == len(configs)
        assert all(f.master is body for f in frames)

    def test_row_height_is_fixed(self, frames, mock_make_button):
        build_rows(enumerate_button_configs()[:3])

        for row in frames[0::2]:
            assert row.options["height"] == GALLERY_CONFIG.ROW_HEIGHT == 56
            row.pack_propagate.assert_called_once_with(False)
            assert row.pack.call_args.kwargs["fill"] == "x"

    def test_divider_follows_each_row(self, frames, mock_make_button):
        build_rows(enumerate_button_configs()[:3])

        for divider in frames[1::2]:
            assert divider.options["height"] == GALLERY_CONFIG.DIVIDER_HEIGHT == 1
            assert divider.options["fg_color"] == BUTTON_PALETTE.DIVIDER
            assert divider.pack.call_args.kwargs["fill"] == "x"

    def test_buttons_are_mounted_in_their_row(self, frames, mock_make_button):
        configs = enumerate_button_configs()[:3]
        build_rows(configs)

        for n, call in enumerate(mock_make_button.call_args_list):
            assert call.args[0] is frames[2 * n]
            assert call.args[1] == configs[n]


class TestGalleryButtonLayout:

    def test_text_buttons_hug_content(self, frames, mock_make_button):
        configs = [c for c in enumerate_button_configs() if c.style is ButtonStyle.TEXT]
        _, buttons = build_rows(configs)

        for button in buttons:
            assert "fill" not in button.pack.call_args.kwargs

    @pytest.mark.parametrize("style", [ButtonStyle.FILLED, ButtonStyle.BORDERED])
    def test_other_styles_fill_the_row(self, frames, mock_make_button, style):
        configs = [c for c in enumerate_button_configs() if c.style is style]
        _, buttons = build_rows(configs)

        for button in buttons:
            assert button.pack.call_args.kwargs["fill"] == "x"


class TestPressBinding:

    def test_press_reports_its_config(self, frames, mock_make_button):
        configs = enumerate_button_configs()
        pressed = []
        build_rows(configs, on_press=pressed.append)

        for n in (0, 17, 53):
            mock_make_button.call_args_list[n].args[1].action()
        assert pressed == [configs[0], configs[17], configs[53]]
        assert [c.title for c in pressed] == [configs[0].title, configs[17].title, configs[53].title]

    def test_without_on_press_keeps_config_action(self, frames, mock_make_button):
        calls = []
        configs = enumerate_button_configs(action=lambda: calls.append(1))[:1]
        build_rows(configs)

        mock_make_button.call_args.args[1].action()
        assert calls == [1]

    def test_bind_press_keeps_identity(self):
        config = enumerate_button_configs()[4]
        pressed = []
        bound = button_library.bind_press(config, pressed.append)

        assert bound == config
        assert bound.icon == config.icon
        assert bound.action() is None
        assert pressed == [config]
