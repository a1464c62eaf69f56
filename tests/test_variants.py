"""Tests for control properties and the concrete frame variants."""

import pytest

from fdfgen.core import AlphaMode, ControlStyle, CornerFlag, Font, LayerType, Vector2, Vector4
from fdfgen.frames import (
    CONTROL_FIELDS,
    Backdrop,
    Button,
    CommonProperties,
    ControlProperties,
    Frame,
    GlueTextButton,
    Highlight,
    Layer,
    String,
    TextFrame,
    Texture,
)


def compile_lines(frame) -> list[str]:
    return frame.to_text().splitlines()


def test_control_field_order_is_fixed():
    assert [f.header for f in CONTROL_FIELDS] == [
        "ControlStyle",
        "ControlBackdrop",
        "ControlPushedBackdrop",
        "ControlDisabledBackdrop",
        "ControlDisabledPushedBackdrop",
        "ControlMouseOverHighlight",
    ]


def test_button_control_properties():
    """Styles join with '|', references are written by name."""
    backdrop = Backdrop("ButtonBackdrop")
    button = Button("OkButton", control=ControlProperties(
        style=[ControlStyle.HIGHLIGHTONMOUSEOVER, ControlStyle.AUTOTRACK],
        backdrop=backdrop,
        pushed_backdrop="ButtonPushed",
        disabled_backdrop="ButtonDisabled",
        disabled_pushed_backdrop="ButtonDisabledPushed",
        mouse_over_highlight="ButtonHighlight",
    ))
    button.add_child(backdrop)

    assert compile_lines(button) == [
        'Frame "BUTTON" "OkButton" {',
        '    ControlStyle "HIGHLIGHTONMOUSEOVER|AUTOTRACK",',
        '    ControlBackdrop "ButtonBackdrop",',
        '    ControlPushedBackdrop "ButtonPushed",',
        '    ControlDisabledBackdrop "ButtonDisabled",',
        '    ControlDisabledPushedBackdrop "ButtonDisabledPushed",',
        '    ControlMouseOverHighlight "ButtonHighlight",',
        '    Frame "BACKDROP" "ButtonBackdrop" {',
        "    }",
        "}",
    ]


def test_empty_control_writes_nothing():
    assert compile_lines(Button("B")) == ['Frame "BUTTON" "B" {', "}"]


def test_style_order_and_deduplication():
    control = ControlProperties(style=["AUTOTRACK", ControlStyle.CLICKONMOUSEDOWN, "AUTOTRACK"])
    assert control.style == (ControlStyle.AUTOTRACK, ControlStyle.CLICKONMOUSEDOWN)

    control = ControlProperties(style="HIGHLIGHTONFOCUS|AUTOTRACK")
    assert control.style == (ControlStyle.HIGHLIGHTONFOCUS, ControlStyle.AUTOTRACK)


def test_single_style_has_no_separator():
    button = Button("B", control=ControlProperties(style=[ControlStyle.AUTOTRACK]))
    assert '    ControlStyle "AUTOTRACK",' in compile_lines(button)


def test_common_properties_come_before_control():
    button = Button(
        "B",
        common=CommonProperties(width=0.1),
        control=ControlProperties(backdrop="Bd"),
    )
    assert compile_lines(button)[1:3] == ["    Width 0.1,", '    ControlBackdrop "Bd",']


def test_glue_text_button():
    button = GlueTextButton(
        "Ok",
        control=ControlProperties(style=[ControlStyle.AUTOTRACK]),
        pushed_text_offset=Vector2.of(0.001, -0.001),
    )
    button.inherit("EscMenuButtonTemplate", with_children=True)
    label = button.add_child(TextFrame("OkText", text="OK"))
    button.button_text = label

    assert compile_lines(button) == [
        'Frame "GLUETEXTBUTTON" "Ok" INHERITS WITHCHILDREN "EscMenuButtonTemplate" {',
        '    ControlStyle "AUTOTRACK",',
        "    ButtonPushedTextOffset 0.001 -0.001,",
        '    ButtonText "OkText",',
        '    Frame "TEXT" "OkText" {',
        '        Text "OK",',
        "    }",
        "}",
    ]


def test_backdrop_properties():
    backdrop = Backdrop(
        "Panel",
        tile_background=True,
        background="ToolTipBackground",
        corner_flags="UL|UR|BL|BR",
        corner_size=0.008,
        background_size=0.032,
        background_insets=Vector4.of(0.0025, 0.0025, 0.0025, 0.0025),
        edge_file="ToolTipBorder",
        blend_all=True,
    )
    assert backdrop.corner_flags == (CornerFlag.UL, CornerFlag.UR, CornerFlag.BL, CornerFlag.BR)
    assert compile_lines(backdrop) == [
        'Frame "BACKDROP" "Panel" {',
        "    BackdropTileBackground,",
        '    BackdropBackground "ToolTipBackground",',
        '    BackdropCornerFlags "UL|UR|BL|BR",',
        "    BackdropCornerSize 0.008,",
        "    BackdropBackgroundSize 0.032,",
        "    BackdropBackgroundInsets 0.0025 0.0025 0.0025 0.0025,",
        '    BackdropEdgeFile "ToolTipBorder",',
        "    BackdropBlendAll,",
        "}",
    ]


def test_highlight_properties():
    highlight = Highlight(
        "Hover",
        highlight_type="FILETEXTURE",
        alpha_file="UI\\Glues\\ScoreScreen\\scorescreen-tab-hilight.blp",
        alpha_mode="ADD",
    )
    assert highlight.alpha_mode is AlphaMode.ADD
    assert compile_lines(highlight) == [
        'Frame "HIGHLIGHT" "Hover" {',
        '    HighlightType "FILETEXTURE",',
        '    HighlightAlphaFile "UI\\Glues\\ScoreScreen\\scorescreen-tab-hilight.blp",',
        '    HighlightAlphaMode "ADD",',
        "}",
    ]


def test_generic_frame_type():
    assert compile_lines(Frame("Bar", frame_type="SIMPLEFRAME"))[0] == 'Frame "SIMPLEFRAME" "Bar" {'


def test_layer_with_string_and_texture():
    layer = Layer(layer_type="BACKGROUND")
    assert layer.layer_type is LayerType.BACKGROUND
    layer.add_child(Texture(
        "Icon",
        file="Icon.blp",
        tex_coord=Vector4.of(0, 1, 0, 1),
        alpha_mode=AlphaMode.BLEND,
    ))
    layer.add_child(String("Label", font=Font("InfoPanelTextFont", 0.011), text="Ready"))

    assert layer.to_text(indent="\t") == (
        'Layer "BACKGROUND" "" {\n'
        '\tTexture "Icon" {\n'
        '\t\tFile "Icon.blp",\n'
        "\t\tTexCoord 0.0 1.0 0.0 1.0,\n"
        '\t\tAlphaMode "BLEND",\n'
        "\t}\n"
        '\tString "Label" {\n'
        '\t\tFont "InfoPanelTextFont", 0.011,\n'
        '\t\tText "Ready",\n'
        "\t}\n"
        "}\n"
    )


def test_string_font_follows_common_properties():
    string = String(
        "S",
        font=Font("MasterFont", 0.01),
        common=CommonProperties(font_flags="FIXEDSIZE"),
    )
    assert compile_lines(string)[1:3] == ['    FontFlags "FIXEDSIZE",', '    Font "MasterFont", 0.01,']


def test_variants_compare_by_identity():
    a, b = Frame("Same"), Frame("Same")
    assert a != b
    assert a == a


def test_frame_base_is_abstract():
    from fdfgen.frames import FrameBase

    with pytest.raises(TypeError):
        FrameBase("x")


def test_styles_assigned_after_construction():
    button = Button("B", control=ControlProperties())
    button.control.style = "AUTOTRACK|EXCLUSIVE"
    assert '    ControlStyle "AUTOTRACK|EXCLUSIVE",' in compile_lines(button)

    button.control.style = [ControlStyle.EXCLUSIVE, "AUTOTRACK", ControlStyle.EXCLUSIVE]
    assert '    ControlStyle "EXCLUSIVE|AUTOTRACK",' in compile_lines(button)


def test_corner_flags_assigned_after_construction():
    backdrop = Backdrop("Panel")
    backdrop.corner_flags = "UL|BR"
    assert compile_lines(backdrop)[1] == '    BackdropCornerFlags "UL|BR",'

    backdrop.corner_flags = [CornerFlag.T, "B|T"]
    assert compile_lines(backdrop)[1] == '    BackdropCornerFlags "T|B",'
