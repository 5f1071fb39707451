import logging
import sys

import customtkinter as ctk
from PIL import Image as PILImage

from . import styles
from .document import Border, Button, Grid, Image, StackPanel, TextBlock
from .session import TIMER_INTERVAL_MS

logger = logging.getLogger(__name__)

# --- Attempt Imports ---
# winsound (Windows only)
try:
    import winsound
    _winsound_available = True
except ImportError:
    winsound = None
    _winsound_available = False

# Window colour punched out with -transparentcolor so the rounded
# border floats on the desktop (Windows only).
TRANSPARENT_KEY = "#010203"


def play_sound(name):
    """ Plays one of the named system sounds once, asynchronously. """
    if not _winsound_available:
        logger.debug(f"winsound not available, skipping sound '{name}'")
        return
    try:
        winsound.MessageBeep(styles.SOUNDS[name])
    except (RuntimeError, OverflowError, ValueError) as e:
        logger.error(f"Could not play sound '{name}': {e}")


def _edges(value):
    """ XAML thickness (n or l,t,r,b) -> tkinter (padx, pady). """
    if value is None:
        return 0, 0
    if isinstance(value, (tuple, list)):
        left, top, right, bottom = value
        return (left, right), (top, bottom)
    return value, value


def _radius(value):
    if isinstance(value, (tuple, list)):
        return max(value)
    return value or 0


def _font(node):
    weight = "bold" if styles.is_bold(node.get("font_weight", "Normal")) else "normal"
    return ctk.CTkFont(family=node.get("font_family"), size=node.get("font_size", 12), weight=weight)


class _WidgetBuilder:
    """ Turns document nodes into customtkinter widgets. """

    def __init__(self, session):
        self.session = session
        self.images = []  # keep CTkImage references alive
        self.widgets = {}

    def build(self, node, parent):
        widget = self._build(node, parent)
        if node.name:
            self.widgets[node.name] = widget
        return widget

    def _build(self, node, parent):
        if isinstance(node, Border):
            return self._border(node, parent)
        if isinstance(node, StackPanel):
            return self._stack_panel(node, parent)
        if isinstance(node, Grid):
            return self._grid(node, parent)
        if isinstance(node, TextBlock):
            return self._text_block(node, parent)
        if isinstance(node, Button):
            return self._button(node, parent)
        if isinstance(node, Image):
            return self._image(node, parent)
        raise TypeError(f"Cannot render node type {type(node).__name__}")

    def _border(self, node, parent):
        frame = ctk.CTkFrame(parent,
                             fg_color=node.get("background", "transparent"),
                             border_color=node.get("border_brush"),
                             border_width=node.get("border_thickness", 0),
                             corner_radius=_radius(node.get("corner_radius")))
        if node.child is not None:
            padx, pady = _edges(node.get("padding"))
            widget = self.build(node.child, frame)
            widget.pack(fill="both", expand=True, padx=padx, pady=pady)
        return frame

    def _stack_panel(self, node, parent):
        frame = ctk.CTkFrame(parent, fg_color="transparent")
        side = "left" if node.get("orientation") == "Horizontal" else "top"
        for child in node.children:
            padx, pady = _edges(child.get("margin"))
            widget = self.build(child, frame)
            if side == "left":
                widget.pack(side=side, padx=padx, pady=pady)
            elif child.get("horizontal_alignment") == "Right":
                widget.pack(side=side, anchor="e", padx=padx, pady=pady)
            else:
                widget.pack(side=side, fill="x", padx=padx, pady=pady)
        return frame

    def _grid(self, node, parent):
        frame = ctk.CTkFrame(parent, fg_color="transparent")
        for child in node.children:
            widget = self.build(child, frame)
            widget.grid(row=child.get("grid_row", 0), column=child.get("grid_column", 0), sticky="nsew")
        if node.columns:
            frame.grid_columnconfigure(node.columns - 1, weight=1)
        return frame

    def _text_block(self, node, parent):
        return ctk.CTkLabel(parent,
                            text=node.text,
                            font=_font(node),
                            text_color=node.get("foreground"),
                            wraplength=node.get("max_width", 0),
                            justify="left",
                            anchor="w")

    def _button(self, node, parent):
        label = node.label
        return ctk.CTkButton(parent,
                             text=label,
                             width=node.get("width", 100),
                             font=_font(node),
                             text_color=node.get("foreground"),
                             command=lambda: self.session.click(label))

    def _image(self, node, parent):
        size = (node.get("width", 16), node.get("height", 16))
        try:
            pil_image = PILImage.open(node["source"])
        except (OSError, ValueError) as e:
            logger.error(f"Error loading icon '{node['source']}': {e}")
            return ctk.CTkLabel(parent, text="")
        image = ctk.CTkImage(light_image=pil_image, dark_image=pil_image, size=size)
        self.images.append(image)
        return ctk.CTkLabel(parent, image=image, text="")


def _center_window(window):
    """ Centers a window on the screen once its size is known. """
    window.update_idletasks()
    width, height = window.winfo_reqwidth(), window.winfo_reqheight()
    x_co = int((window.winfo_screenwidth() / 2) - (width / 2))
    y_co = int((window.winfo_screenheight() / 2) - (height / 2))
    window.geometry(f"+{x_co}+{y_co}")


def _make_draggable(window, widget):
    """ Lets the borderless window be moved by dragging the given widget. """
    offset = {}

    def start(event):
        offset["x"] = event.x_root - window.winfo_x()
        offset["y"] = event.y_root - window.winfo_y()

    def drag(event):
        window.geometry(f"+{event.x_root - offset['x']}+{event.y_root - offset['y']}")

    widget.bind("<ButtonPress-1>", start)
    widget.bind("<B1-Motion>", drag)


def show_dialog(document, session, master=None):
    """ Shows the document as a modal, borderless, non-resizable window.

    Without a master a fresh CTk root is created and its mainloop runs
    until the dialog closes; with a master the dialog is a grabbed
    CTkToplevel and we wait on it. Either way the call blocks.
    """
    spec = session.spec
    window = ctk.CTk() if master is None else ctk.CTkToplevel(master)
    window.title(document.get("title", ""))
    window.resizable(False, False)
    window.overrideredirect(True)
    window.attributes("-topmost", True)

    margin = 0
    if sys.platform == "win32":
        window.configure(fg_color=TRANSPARENT_KEY)
        window.attributes("-transparentcolor", TRANSPARENT_KEY)
        margin = document.content.get("margin", 0)

    pending = {"tick": None}

    def close_window():
        if pending["tick"] is not None:
            window.after_cancel(pending["tick"])
            pending["tick"] = None
        if master is not None:
            window.grab_release()
        window.destroy()

    session.close_window = close_window
    window.protocol("WM_DELETE_WINDOW", session.close)
    window.bind("<Escape>", lambda event: session.close())

    builder = _WidgetBuilder(session)
    root_widget = builder.build(document.content, window)
    root_widget.pack(fill="both", expand=True, padx=margin, pady=margin)
    _make_draggable(window, root_widget)
    if "TitleBar" in builder.widgets:
        _make_draggable(window, builder.widgets["TitleBar"])

    _center_window(window)

    def on_loaded():
        session.loaded(window)
        if spec.sound:
            play_sound(spec.sound)

    def on_tick():
        pending["tick"] = None
        if session.tick():
            pending["tick"] = window.after(TIMER_INTERVAL_MS, on_tick)

    window.after_idle(on_loaded)
    if spec.timeout is not None:
        pending["tick"] = window.after(TIMER_INTERVAL_MS, on_tick)

    if master is None:
        window.mainloop()
    else:
        window.grab_set()
        window.focus()
        master.wait_window(window)
    return session.result
