"""
Unit tests for the pure Python models.

No Qt instance is needed here.
"""

import pytest

from quickforms.errors import InvalidConfiguration
from quickforms.models import (
    Alignment,
    Color,
    Docked,
    DropdownConfig,
    FlowLayout,
    GridCell,
    GridLayout,
    LabelConfig,
    ListBoxConfig,
    Manual,
    ManualLayout,
    PanelConfig,
    SelectionMode,
    SizeKind,
    SizeRule,
    StartPosition,
    TextBoxConfig,
    WindowOptions,
    WindowState,
    DialogOutcome,
    normalize_flags,
    resolve_placement,
)


class TestPlacement:
    """Tests for placement variants."""

    def test_manual_defaults(self):
        placement = Manual()
        assert (placement.x, placement.y, placement.height, placement.width) == (0, 0, 0, 0)
        assert not placement.has_extent

    @pytest.mark.parametrize("field", ["x", "y", "height", "width"])
    def test_manual_rejects_negative(self, field):
        with pytest.raises(InvalidConfiguration) as exc_info:
            Manual(**{field: -1})
        assert exc_info.value.field == field

    def test_manual_rejects_non_integers(self):
        with pytest.raises(InvalidConfiguration):
            Manual(x=1.5)
        with pytest.raises(InvalidConfiguration):
            Manual(width=True)
        with pytest.raises(InvalidConfiguration):
            Manual(height="10")

    def test_grid_cell_span_must_be_positive(self):
        with pytest.raises(InvalidConfiguration):
            GridCell(0, 0, column_span=0)
        with pytest.raises(InvalidConfiguration):
            GridCell(0, 0, row_span=0)

    def test_resolve_manual(self):
        placement = resolve_placement(x=5, width=80)
        assert placement == Manual(x=5, y=0, height=0, width=80)

    def test_resolve_docked(self):
        assert resolve_placement(docked=True) == Docked()

    def test_resolve_cell_tuple(self):
        assert resolve_placement(cell=(1, 0, 1, 2)) == GridCell(1, 0, 1, 2)

    def test_resolve_default_is_manual_origin(self):
        assert resolve_placement() == Manual()

    def test_resolve_rejects_two_parameter_sets(self):
        with pytest.raises(InvalidConfiguration):
            resolve_placement(x=1, docked=True)
        with pytest.raises(InvalidConfiguration):
            resolve_placement(height=10, cell=(0, 0))
        with pytest.raises(InvalidConfiguration):
            resolve_placement(docked=True, cell=(0, 0))

    def test_resolve_rejects_bad_cell(self):
        with pytest.raises(InvalidConfiguration):
            resolve_placement(cell=(0, 0, 1, 1, 1))


class TestFlags:
    """Tests for inverted public flag mapping."""

    def test_disabled_maps_to_enabled(self):
        assert normalize_flags({"disabled": True}) == {"enabled": False}
        assert normalize_flags({"disabled": False}) == {"enabled": True}

    def test_hidden_and_taskbar(self):
        flags = normalize_flags({"hidden": True, "hide_in_taskbar": True})
        assert flags == {"visible": False, "show_in_taskbar": False}

    def test_other_options_untouched(self):
        assert normalize_flags({"text": "a"}) == {"text": "a"}

    def test_contradiction_rejected(self):
        with pytest.raises(InvalidConfiguration):
            normalize_flags({"disabled": True, "enabled": True})

    def test_agreement_accepted(self):
        assert normalize_flags({"disabled": True, "enabled": False}) == {"enabled": False}

    @pytest.mark.parametrize("name", ["disabled", "hidden", "hide_in_taskbar", "enabled"])
    def test_non_bool_rejected(self, name):
        """Test string flags are rejected instead of coerced."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            normalize_flags({name: "false"})
        assert exc_info.value.field == name

    def test_config_flags_must_be_bool(self):
        with pytest.raises(InvalidConfiguration):
            LabelConfig(enabled="no")
        with pytest.raises(InvalidConfiguration):
            LabelConfig(visible=1)


class TestColor:
    """Tests for Color parsing."""

    def test_from_hex(self):
        assert Color.from_hex("#ff8000") == Color(255, 128, 0)
        assert Color.from_hex("#ff800080").alpha == 128

    def test_named(self):
        assert Color.named("Red") == Color(255, 0, 0)

    def test_invalid(self):
        with pytest.raises(InvalidConfiguration):
            Color(256, 0, 0)
        with pytest.raises(InvalidConfiguration):
            Color.from_hex("#12")
        with pytest.raises(InvalidConfiguration):
            Color.named("chartreuse-ish")

    def test_coerce_in_config(self):
        config = LabelConfig(foreground="#000000", background=(1, 2, 3))
        assert config.foreground == Color(0, 0, 0)
        assert config.background == Color(1, 2, 3)

    def test_to_hex(self):
        assert Color(1, 2, 255).to_hex() == "#0102ff"


class TestWidgetConfigs:
    """Tests for widget configuration validation."""

    def test_defaults(self):
        config = LabelConfig()
        assert config.placement == Manual()
        assert config.enabled is True
        assert config.visible is True

    def test_configs_are_immutable(self):
        config = LabelConfig(text="a")
        with pytest.raises(Exception):
            config.text = "b"

    def test_rejects_unknown_placement(self):
        with pytest.raises(InvalidConfiguration):
            LabelConfig(placement=(0, 0))

    def test_alignment_components(self):
        assert Alignment.BOTTOM_RIGHT.vertical == "bottom"
        assert Alignment.BOTTOM_RIGHT.horizontal == "right"
        assert Alignment.MIDDLE_CENTER.horizontal == "center"

    def test_textbox_password_requires_single_line(self):
        with pytest.raises(InvalidConfiguration):
            TextBoxConfig(multiline=True, password=True)

    def test_textbox_negative_max_length(self):
        with pytest.raises(InvalidConfiguration):
            TextBoxConfig(max_length=-1)

    def test_listbox_selection_out_of_range(self):
        with pytest.raises(InvalidConfiguration):
            ListBoxConfig(items=("a", "b"), selected=(2,))

    def test_listbox_single_mode_one_selection(self):
        with pytest.raises(InvalidConfiguration):
            ListBoxConfig(items=("a", "b"), selected=(0, 1))
        config = ListBoxConfig(
            items=("a", "b"), selected=(0, 1), selection_mode=SelectionMode.MULTI_SIMPLE
        )
        assert config.selected == (0, 1)

    def test_listbox_none_mode_rejects_selection(self):
        with pytest.raises(InvalidConfiguration):
            ListBoxConfig(items=("a",), selected=(0,), selection_mode=SelectionMode.NONE)

    def test_items_stored_as_strings(self):
        config = DropdownConfig(items=[1, 2])
        assert config.items == ("1", "2")

    def test_dropdown_selected_index_range(self):
        with pytest.raises(InvalidConfiguration):
            DropdownConfig(items=("a",), selected_index=1)


class TestWindowOptions:
    """Tests for WindowOptions parsing and the taskbar inversion."""

    def test_defaults(self):
        options = WindowOptions()
        assert options.window_state == WindowState.NORMAL
        assert options.start_position == StartPosition.CENTER_SCREEN
        assert options.show_in_taskbar is True
        assert options.hide_in_taskbar is False

    def test_hide_in_taskbar_is_inverted(self):
        options = WindowOptions.from_dict({"hideInTaskbar": True})
        assert options.show_in_taskbar is False
        assert options.hide_in_taskbar is True

    def test_taskbar_flag_must_be_bool(self):
        """Test a string hideInTaskbar value is rejected."""
        with pytest.raises(InvalidConfiguration):
            WindowOptions.from_dict({"hideInTaskbar": "false"})
        with pytest.raises(InvalidConfiguration):
            WindowOptions(show_in_taskbar="yes")

    def test_create_with_public_names(self):
        options = WindowOptions.create(hide_in_taskbar=False, window_state="Maximized")
        assert options.show_in_taskbar is True
        assert options.window_state == WindowState.MAXIMIZED

    def test_from_dict_enum_names(self):
        options = WindowOptions.from_dict({
            "windowState": "Minimized",
            "startPosition": "WindowsDefaultBounds",
        })
        assert options.window_state == WindowState.MINIMIZED
        assert options.start_position == StartPosition.WINDOWS_DEFAULT_BOUNDS

    def test_snake_case_aliases(self):
        options = WindowOptions.from_dict({"start_position": "center_parent"})
        assert options.start_position == StartPosition.CENTER_PARENT

    def test_unknown_key(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            WindowOptions.from_dict({"alwaysOnTop": True})
        assert exc_info.value.field == "alwaysOnTop"

    def test_unknown_value(self):
        with pytest.raises(InvalidConfiguration):
            WindowOptions.from_dict({"windowState": "Huge"})

    def test_location_requires_manual(self):
        with pytest.raises(InvalidConfiguration):
            WindowOptions(location=(10, 10))
        options = WindowOptions.from_dict({"startPosition": "Manual", "location": [10, 20]})
        assert options.location == (10, 20)

    def test_to_dict_uses_public_names(self):
        options = WindowOptions.create(hide_in_taskbar=True)
        assert options.to_dict() == {
            "windowState": "Normal",
            "startPosition": "CenterScreen",
            "hideInTaskbar": True,
        }

    def test_round_trip_keeps_location(self):
        options = WindowOptions(start_position=StartPosition.MANUAL, location=(3, 4))
        assert WindowOptions.from_dict(options.to_dict()) == options

    def test_coerce_rejects_other_types(self):
        with pytest.raises(InvalidConfiguration):
            WindowOptions.coerce("Normal")


class TestPanelConfig:
    """Tests for panel configuration and layout conflicts."""

    def test_grid_with_manual_coordinates_rejected(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            PanelConfig(layout=GridLayout(), placement=Manual(x=0, y=0, height=50, width=50))
        assert exc_info.value.field == "placement"

    def test_flow_with_manual_coordinates_rejected(self):
        with pytest.raises(InvalidConfiguration):
            PanelConfig(layout=FlowLayout(), placement=Manual(x=10))

    def test_manual_layout_with_manual_placement_allowed(self):
        config = PanelConfig(layout=ManualLayout(), placement=Manual(x=1, y=2, height=3, width=4))
        assert not config.is_grid and not config.is_flow

    def test_default_panel_is_docked(self):
        assert PanelConfig(layout=GridLayout()).placement == Docked()

    def test_size_rules(self):
        assert SizeRule.percent(50).kind == SizeKind.PERCENT
        assert SizeRule.auto().value == 0
        with pytest.raises(InvalidConfiguration):
            SizeRule.percent(0)
        with pytest.raises(InvalidConfiguration):
            SizeRule.percent(101)

    def test_grid_needs_rows_and_columns(self):
        with pytest.raises(InvalidConfiguration):
            GridLayout(rows=(), columns=(SizeRule.auto(),))

    def test_check_cell_bounds(self):
        grid = GridLayout(rows=(SizeRule.auto(),) * 2, columns=(SizeRule.percent(50),) * 2)
        grid.check_cell(GridCell(0, 0, column_span=2))
        with pytest.raises(InvalidConfiguration):
            grid.check_cell(GridCell(0, 1, column_span=2))
        with pytest.raises(InvalidConfiguration):
            grid.check_cell(GridCell(2, 0))


class TestDialogOutcome:
    def test_truthiness(self):
        assert DialogOutcome.ACCEPTED
        assert not DialogOutcome.DECLINED
