"""Status bar preset: an icon and a label drawn on a simple frame."""

from ..core.enums import AlphaMode, BaseFrame, FontJustify, FramePoint, LayerType
from ..core.fonts import Font
from ..core.values import RGBColor, Vector4
from ..document import FdfDocument
from ..frames import CommonProperties, Frame, Layer, String, Texture


def create_status_bar_document() -> FdfDocument:
    """Create a SIMPLEFRAME status bar anchored above the console.

    Returns:
        An FdfDocument with a single top-level frame.
    """
    document = FdfDocument()

    bar = document.add_frame(Frame(
        "FdfgenStatusBar",
        frame_type="SIMPLEFRAME",
        common=CommonProperties(width=0.24, height=0.024, decorate_file_names=True),
    ))
    bar.add_point(FramePoint.BOTTOM, BaseFrame.CONSOLE_UI, FramePoint.TOP, 0.0, 0.0)

    layer = bar.add_child(Layer(layer_type=LayerType.ARTWORK))

    icon = layer.add_child(Texture(
        "FdfgenStatusBarIcon",
        file="InfoPanelIconTimedLife",
        tex_coord=Vector4.of(0.0, 1.0, 0.0, 1.0),
        alpha_mode=AlphaMode.BLEND,
        common=CommonProperties(width=0.02, height=0.02),
    ))
    icon.add_point(FramePoint.LEFT, bar, FramePoint.LEFT, 0.002, 0.0)

    label = layer.add_child(String(
        "FdfgenStatusBarText",
        font=Font("InfoPanelTextFont", 0.011),
        text="Ready",
        common=CommonProperties(
            font_color=RGBColor(1.0, 1.0, 1.0, 1.0),
            font_shadow_color=RGBColor(0.0, 0.0, 0.0, 0.9),
            font_justification_h=FontJustify.JUSTIFYLEFT,
        ),
    ))
    label.add_point(FramePoint.LEFT, icon, FramePoint.RIGHT, 0.004, 0.0)

    return document
