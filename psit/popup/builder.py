from collections.abc import Mapping

from ..errors import DialogValidationError, UnsupportedContentError
from . import styles
from .document import (Border, Button, DropShadowEffect, Grid, Image, StackPanel,
                       TextBlock, Window)

# --- Constants ---
BUTTON_WIDTH = 100
CONTENT_PADDING = 10
WRAP_WIDTH = 400


class DialogSpec:
    """ Style, behaviour and content for one message box.

    Built once per popup call and validated with validate() before any
    document is produced. Colour, font and sound options are checked
    against the tables in ``styles``.
    """

    def __init__(self, content, title=None,
                 title_font_size=14, title_font_weight="Normal",
                 title_background="White", title_text_foreground="Black",
                 content_font_size=12, content_font_weight="Normal",
                 content_background="White", content_text_foreground="Black",
                 button_text_foreground="Black", button_type="OK", custom_buttons=None,
                 font_family="Segoe UI", corner_radius=15, border_thickness=0,
                 border_brush="Black", shadow_depth=3, blur_radius=20,
                 timeout=None, sound=None, on_loaded=None, on_closed=None,
                 icon_path=None):
        self.content = content
        self.title = title

        # Title bar
        self.title_font_size = title_font_size
        self.title_font_weight = title_font_weight
        self.title_background = title_background
        self.title_text_foreground = title_text_foreground

        # Content
        self.content_font_size = content_font_size
        self.content_font_weight = content_font_weight
        self.content_background = content_background
        self.content_text_foreground = content_text_foreground

        # Buttons
        self.button_text_foreground = button_text_foreground
        self.button_type = button_type
        if isinstance(custom_buttons, str):
            custom_buttons = [custom_buttons]
        self.custom_buttons = list(custom_buttons) if custom_buttons else []

        # Window chrome
        self.font_family = font_family
        self.corner_radius = corner_radius
        self.border_thickness = border_thickness
        self.border_brush = border_brush
        self.shadow_depth = shadow_depth
        self.blur_radius = blur_radius
        self.icon_path = icon_path

        # Behaviour
        self.timeout = timeout
        self.sound = sound
        self.on_loaded = on_loaded
        self.on_closed = on_closed

    @property
    def buttons(self):
        """ Button labels in display order; custom buttons win over button_type. """
        if self.custom_buttons:
            return tuple(str(label) for label in self.custom_buttons)
        return styles.BUTTON_LAYOUTS[self.button_type]

    def color(self, option):
        """ Hex value for one of the colour options, e.g. color('title_background'). """
        return styles.COLORS[getattr(self, option)]

    def validate(self):
        check_content(self.content)

        for option in ("title_background", "title_text_foreground", "content_background",
                       "content_text_foreground", "button_text_foreground", "border_brush"):
            value = getattr(self, option)
            if value not in styles.COLORS:
                raise DialogValidationError(f"{option}: '{value}' is not a supported colour")

        for option in ("title_font_weight", "content_font_weight"):
            value = getattr(self, option)
            if value not in styles.FONT_WEIGHTS:
                raise DialogValidationError(
                    f"{option}: '{value}' is not one of {', '.join(styles.FONT_WEIGHTS)}")

        if self.font_family not in styles.FONT_FAMILIES:
            raise DialogValidationError(f"font_family: '{self.font_family}' is not a supported font")

        if not self.custom_buttons and self.button_type not in styles.BUTTON_LAYOUTS:
            raise DialogValidationError(
                f"button_type: '{self.button_type}' is not one of {', '.join(styles.BUTTON_LAYOUTS)}")

        if self.sound is not None and self.sound not in styles.SOUNDS:
            raise DialogValidationError(
                f"sound: '{self.sound}' is not one of {', '.join(styles.SOUNDS)}")

        for option in ("title_font_size", "content_font_size", "corner_radius",
                       "border_thickness", "shadow_depth", "blur_radius"):
            value = getattr(self, option)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise DialogValidationError(f"{option}: expected a non-negative number, got {value!r}")

        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
                raise DialogValidationError(f"timeout: expected a positive number of seconds, got {self.timeout!r}")

        for option in ("on_loaded", "on_closed"):
            value = getattr(self, option)
            if value is not None and not callable(value):
                raise DialogValidationError(f"{option}: expected a callable")
        return self


def check_content(content):
    """ Accepts a str or a flat mapping; arrays and everything else are rejected. """
    if isinstance(content, str) or isinstance(content, Mapping):
        return content
    if isinstance(content, (list, tuple)):
        raise UnsupportedContentError("Content of type array is not supported (array not supported)")
    raise UnsupportedContentError(f"Content of type '{type(content).__name__}' is not supported")


# --- Document Building ---
def _content_node(spec):
    font = dict(
        font_family=spec.font_family,
        font_size=spec.content_font_size,
        font_weight=spec.content_font_weight,
        foreground=spec.color("content_text_foreground"),
    )
    if isinstance(spec.content, str):
        return TextBlock(spec.content, name="ContentText", text_wrapping="Wrap",
                         max_width=WRAP_WIDTH, margin=CONTENT_PADDING, **font)

    # Flat record: one bordered name / value row per key
    grid = Grid(name="ContentGrid", rows=len(spec.content), columns=2, margin=CONTENT_PADDING)
    for row, (key, value) in enumerate(spec.content.items()):
        grid.add(Border(TextBlock(str(key), **dict(font, font_weight="Bold")),
                        border_thickness=1, border_brush=spec.color("border_brush"),
                        padding=(5, 2, 5, 2), grid_row=row, grid_column=0))
        grid.add(Border(TextBlock("" if value is None else str(value), text_wrapping="Wrap",
                                  max_width=WRAP_WIDTH, **font),
                        border_thickness=1, border_brush=spec.color("border_brush"),
                        padding=(5, 2, 5, 2), grid_row=row, grid_column=1))
    return grid


def _title_node(spec):
    children = []
    if spec.icon_path:
        children.append(Image(spec.icon_path, name="TitleIcon", width=16, height=16, margin=(0, 0, 5, 0)))
    children.append(TextBlock(spec.title, name="TitleText",
                              font_family=spec.font_family,
                              font_size=spec.title_font_size,
                              font_weight=spec.title_font_weight,
                              foreground=spec.color("title_text_foreground")))
    radius = spec.corner_radius
    return Border(StackPanel(children, orientation="Horizontal"), name="TitleBar",
                  background=spec.color("title_background"),
                  corner_radius=(radius, radius, 0, 0), padding=(10, 5, 10, 5))


def _button_panel(spec):
    buttons = [
        Button(label, name=f"Button{index}", width=BUTTON_WIDTH, margin=5,
               font_family=spec.font_family, font_size=spec.content_font_size,
               foreground=spec.color("button_text_foreground"))
        for index, label in enumerate(spec.buttons)
    ]
    return StackPanel(buttons, name="ButtonPanel", orientation="Horizontal",
                      horizontal_alignment="Right", margin=(0, 0, 5, 5))


def build_document(spec):
    """ Validates the dialog options and returns the Window node tree for them. """
    spec.validate()

    body = []
    if spec.title:
        body.append(_title_node(spec))
    body.append(_content_node(spec))
    if spec.buttons:
        body.append(_button_panel(spec))

    chrome = Border(
        StackPanel(body, name="Body"),
        name="MainBorder",
        effect=DropShadowEffect(shadow_depth=spec.shadow_depth, blur_radius=spec.blur_radius, opacity=0.5),
        background=spec.color("content_background"),
        border_brush=spec.color("border_brush"),
        border_thickness=spec.border_thickness,
        corner_radius=spec.corner_radius,
        margin=spec.blur_radius,
    )
    return Window(
        [chrome],
        title=spec.title or "",
        size_to_content="WidthAndHeight",
        window_style="None",
        resize_mode="NoResize",
        allows_transparency=True,
        background="Transparent",
        topmost=True,
        window_startup_location="CenterScreen",
    )
