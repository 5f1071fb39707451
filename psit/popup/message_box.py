import logging

from .builder import DialogSpec, build_document
from .session import DialogSession

logger = logging.getLogger(__name__)

__all__ = ("new_message_box",)


def new_message_box(content, title=None, return_button=False, renderer=None, master=None, **style):
    """ Shows a styled, modal message box and optionally returns the pressed button.

    ``content`` is either a string (one text element) or a flat mapping,
    shown as a bordered name / value list in mapping order. Arrays and any
    other type raise UnsupportedContentError before a window is created.

    Style keywords (defaults in brackets): title_font_size [14],
    title_font_weight [Normal], title_background [White],
    title_text_foreground [Black], content_font_size [12],
    content_font_weight [Normal], content_background [White],
    content_text_foreground [Black], button_text_foreground [Black],
    button_type [OK], custom_buttons, font_family [Segoe UI],
    corner_radius [15], border_thickness [0], border_brush [Black],
    shadow_depth [3], blur_radius [20], timeout (seconds), sound,
    on_loaded, on_closed, icon_path.

    Returns the label of the clicked button when ``return_button`` is set
    (None if the box timed out or was dismissed), otherwise None.
    """
    spec = DialogSpec(content, title=title, **style)
    document = build_document(spec)
    session = DialogSession(spec)

    if renderer is None:
        from .render import show_dialog as renderer

    logger.debug(f"Showing message box '{title or ''}' with buttons {spec.buttons}")
    renderer(document, session, master=master)

    if return_button:
        return session.result
    return None
