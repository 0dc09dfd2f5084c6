"""Tests for design_system.components.widgets — mounting onto customtkinter."""
from unittest.mock import MagicMock, patch

import pytest

from design_system.components.icons import IconProvider
from design_system.components.rendering import render_button
from design_system.components.variants import (
    ButtonConfig,
    ButtonIcon,
    ButtonSize,
    ButtonStyle,
    ButtonType,
)
from design_system.components import widgets


@pytest.fixture
def mock_ctk():
    with patch.object(widgets, "ctk") as ctk:
        yield ctk


def button_kwargs(mock_ctk):
    assert mock_ctk.CTkButton.call_count == 1
    return mock_ctk.CTkButton.call_args.kwargs


class TestMountButton:

    def test_filled_button_kwargs(self, mock_ctk):
        parent = MagicMock()
        element = render_button(ButtonConfig(type=ButtonType.PRIMARY, title="Continue"))
        widgets.mount_button(parent, element, icons=IconProvider())

        kwargs = button_kwargs(mock_ctk)
        assert kwargs["master"] is parent
        assert kwargs["text"] == "Continue"
        assert kwargs["height"] == 48
        assert kwargs["corner_radius"] == 24
        assert kwargs["fg_color"] == "#007AFF"
        assert kwargs["text_color"] == "#FFFFFF"
        assert kwargs["border_width"] == 0
        assert kwargs["font"][1:] == (17, "bold")
        assert kwargs["hover"] is False
        assert "image" not in kwargs
        mock_ctk.CTkImage.assert_not_called()

    def test_bordered_button_strokes(self, mock_ctk):
        element = render_button(ButtonConfig(
            type=ButtonType.SECONDARY, style=ButtonStyle.BORDERED,
            size=ButtonSize.SMALL, title="Edit",
        ))
        widgets.mount_button(MagicMock(), element, icons=IconProvider())

        kwargs = button_kwargs(mock_ctk)
        assert kwargs["fg_color"] == "transparent"
        assert kwargs["border_width"] == 1
        assert kwargs["border_color"] == "#32ADE6"
        assert kwargs["height"] == 42

    @pytest.mark.parametrize("icon,compound", [
        (ButtonIcon.leading(), "left"),
        (ButtonIcon.trailing(), "right"),
    ])
    def test_icon_placement_maps_to_compound(self, mock_ctk, icon, compound):
        element = render_button(ButtonConfig(type=ButtonType.TERTIARY, title="Me", icon=icon))
        widgets.mount_button(MagicMock(), element, icons=IconProvider())

        kwargs = button_kwargs(mock_ctk)
        assert kwargs["compound"] == compound
        assert kwargs["image"] is mock_ctk.CTkImage.return_value
        assert mock_ctk.CTkImage.call_args.kwargs["size"] == (22, 22)

    def test_command_invokes_action_once(self, mock_ctk):
        calls = []
        element = render_button(ButtonConfig(
            type=ButtonType.PRIMARY, title="Go", action=lambda: calls.append(1),
        ))
        widgets.mount_button(MagicMock(), element, icons=IconProvider())

        button_kwargs(mock_ctk)["command"]()
        assert calls == [1]

    def test_make_button_renders_and_mounts(self, mock_ctk):
        result = widgets.make_button(
            MagicMock(), ButtonConfig(type=ButtonType.PRIMARY, title="Go", style=ButtonStyle.TEXT),
        )
        assert result is mock_ctk.CTkButton.return_value
        assert button_kwargs(mock_ctk)["fg_color"] == "transparent"
