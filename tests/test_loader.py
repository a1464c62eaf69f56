"""Tests for the YAML frame loader and FdfDocument."""

import pytest

from fdfgen.core import ControlStyle, Named, RGBColor
from fdfgen.document import FdfDocument
from fdfgen.frames import Backdrop, Frame, GlueTextButton, String, TextFrame
from fdfgen.layout import FRAME_REGISTRY, FrameLoader


PANEL_YAML = """
includes: [Templates.fdf]
frames:
  - type: backdrop
    name: Panel
    inherits: EscMenuBackdrop
    width: 0.3
    points:
      - [CENTER, ConsoleUI, CENTER, 0.0, 0.0]
    children:
      - type: glue_text_button
        name: Ok
        control:
          style: [AUTOTRACK, HIGHLIGHTONMOUSEOVER]
          backdrop: OkBackdrop
        pushed_text_offset: [0.001, -0.001]
        button_text: OkText
        children:
          - type: text
            name: OkText
            text: OK
            font_color: "#ffcc00"
            frame_font: [MasterFont, 0.012]
"""


@pytest.fixture
def loader() -> FrameLoader:
    return FrameLoader()


def test_load_string_builds_tree(loader):
    document = loader.load_string(PANEL_YAML)

    assert document.includes == ["Templates.fdf"]
    assert len(document.frames) == 1
    panel = document.frames[0]
    assert isinstance(panel, Backdrop)
    assert panel.common.inherits == Named("EscMenuBackdrop")

    button = document.find("Ok")
    assert isinstance(button, GlueTextButton)
    assert button.control.style == (ControlStyle.AUTOTRACK, ControlStyle.HIGHLIGHTONMOUSEOVER)

    text = document.find("OkText")
    assert isinstance(text, TextFrame)
    assert str(text.common.font_color) == str(RGBColor(1.0, 0.8, 0.0, 1.0))


def test_loaded_document_text(loader):
    document = loader.load_string(PANEL_YAML)
    assert document.to_text() == (
        'IncludeFile "Templates.fdf",\n'
        "\n"
        'Frame "BACKDROP" "Panel" INHERITS "EscMenuBackdrop" {\n'
        "    Width 0.3,\n"
        '    SetPoint CENTER, "ConsoleUI", CENTER, 0, 0, \n'
        '    Frame "GLUETEXTBUTTON" "Ok" {\n'
        '        ControlStyle "AUTOTRACK|HIGHLIGHTONMOUSEOVER",\n'
        '        ControlBackdrop "OkBackdrop",\n'
        "        ButtonPushedTextOffset 0.001 -0.001,\n"
        '        ButtonText "OkText",\n'
        '        Frame "TEXT" "OkText" {\n'
        "            FontColor 1.0 0.8 0.0 1.0,\n"
        '            FrameFont "MasterFont", 0.012, "",\n'
        '            Text "OK",\n'
        "        }\n"
        "    }\n"
        "}\n"
    )


def test_single_frame_mapping(loader):
    document = loader.load_string("type: string\nname: Label\ntext: Hi\nfont: [MasterFont, 0.01]\n")
    assert document.includes == []
    assert isinstance(document.frames[0], String)
    assert document.to_text() == 'String "Label" {\n    Font "MasterFont", 0.01,\n    Text "Hi",\n}\n'


def test_null_name_is_empty(loader):
    document = loader.load_string("type: string\nname:\n")
    assert document.frames[0].name == ""
    assert document.to_text() == 'String "" {\n}\n'


def test_point_mapping_form(loader):
    document = loader.load_string(
        "type: frame\n"
        "name: F\n"
        "points:\n"
        "  - {my_point: TOP, parent_frame: Parent, parent_point: BOTTOM, y: -0.01}\n"
    )
    assert '    SetPoint TOP, "Parent", BOTTOM, 0, -0.01, ' in document.to_text().splitlines()


def test_load_file(loader, tmp_path):
    path = tmp_path / "panel.yaml"
    path.write_text(PANEL_YAML, encoding="utf-8")
    document = loader.load(path)
    assert document.to_text() == loader.load_string(PANEL_YAML).to_text()


def test_missing_file(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.yaml")


@pytest.mark.parametrize("yaml_text,message", [
    ("type: widget\nname: W\n", "unknown type 'widget'"),
    ("type: frame\nname: F\ncolour: red\n", "unknown key 'colour'"),
    ("type: backdrop\nname: B\ncontrol: {style: [AUTOTRACK]}\n", "has no control properties"),
    ("type: button\nname: B\ncontrol: {styles: [AUTOTRACK]}\n", "unknown control keys"),
    ("type: text\nname: T\nfont_color: '#zzzzzz'\n", "bad value for 'font_color'"),
    ("type: frame\nname: F\npoints: [[MIDDLE, P, TOP, 0, 0]]\n", "bad value for 'points'"),
    ("type: frame\nname: F\nchildren: [{type: nope}]\n", "Frame '/F/nope'"),
    ("- just\n- a list\n", "must be a mapping"),
    ("frames: []\nextra: 1\n", "Unknown document keys"),
    ("frames: [\n  - type: frame\n", "Invalid YAML"),
])
def test_invalid_definitions(loader, yaml_text, message):
    with pytest.raises(ValueError, match=message):
        loader.load_string(yaml_text)


def test_registry_covers_every_variant():
    assert set(FRAME_REGISTRY) == {
        "layer", "string", "texture", "frame", "backdrop",
        "highlight", "text", "button", "glue_text_button",
    }


def test_document_save(tmp_path):
    document = FdfDocument()
    document.add_frame(Frame("A"))
    document.add_frame(Frame("B"))

    path = document.save(tmp_path / "out" / "ui.fdf", indent="\t")

    assert path.exists()
    assert path.read_text(encoding="utf-8") == 'Frame "FRAME" "A" {\n}\nFrame "FRAME" "B" {\n}\n'


def test_document_without_includes_has_no_blank_line():
    document = FdfDocument(frames=[Frame("A")])
    assert document.to_text().startswith('Frame "FRAME" "A" {')
