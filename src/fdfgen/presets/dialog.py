"""Dialog preset: a centred panel with a title and a close button."""

from ..core.enums import BaseFrame, ControlStyle, FontJustify, FramePoint
from ..core.fonts import FrameFont
from ..core.values import RGBColor, Vector2
from ..document import FdfDocument
from ..frames import Backdrop, CommonProperties, ControlProperties, GlueTextButton, TextFrame


def create_dialog_document() -> FdfDocument:
    """Create a dialog panel built on the escape-menu templates.

    Returns:
        An FdfDocument with a single top-level backdrop.
    """
    document = FdfDocument(includes=["UI\\FrameDef\\UI\\EscMenuTemplates.fdf"])

    panel = document.add_frame(Backdrop(
        "FdfgenDialog",
        common=CommonProperties(width=0.32, height=0.18),
    ))
    panel.inherit(BaseFrame.ESC_MENU_BACKDROP)
    panel.add_point(FramePoint.CENTER, BaseFrame.CONSOLE_UI, FramePoint.CENTER, 0.0, 0.04)

    title = panel.add_child(TextFrame(
        "FdfgenDialogTitle",
        text="Dialog",
        common=CommonProperties(
            font_color=RGBColor(1.0, 0.8, 0.0, 1.0),
            frame_font=FrameFont("MasterFont", 0.014),
            font_justification_h=FontJustify.JUSTIFYCENTER,
            font_justification_v=FontJustify.JUSTIFYMIDDLE,
        ),
    ))
    title.add_point(FramePoint.TOP, panel, FramePoint.TOP, 0.0, -0.02)

    close = GlueTextButton(
        "FdfgenDialogClose",
        common=CommonProperties(width=0.12, height=0.03),
        control=ControlProperties(
            style=[ControlStyle.AUTOTRACK, ControlStyle.HIGHLIGHTONMOUSEOVER],
            backdrop="EscMenuButtonBackdrop",
            pushed_backdrop="EscMenuButtonPushedBackdrop",
            disabled_backdrop="EscMenuButtonDisabledBackdrop",
            mouse_over_highlight="EscMenuButtonMouseOverHighlight",
        ),
        pushed_text_offset=Vector2.of(0.001, -0.001),
    )
    close.inherit("EscMenuButtonTemplate", with_children=True)
    close.add_point(FramePoint.BOTTOM, panel, FramePoint.BOTTOM, 0.0, 0.02)
    panel.add_child(close)

    label = close.add_child(TextFrame(
        "FdfgenDialogCloseText",
        text="Close",
        common=CommonProperties(inherits_from="EscMenuButtonTextTemplate"),
    ))
    close.button_text = label

    return document
