""" Fixed option sets for the message box.

Colours are named so callers can write ``title_background="SteelBlue"``;
the renderer only ever sees the hex value from this table.
"""

# Named colour -> hex
COLORS = {
    "Black": "#000000",
    "White": "#FFFFFF",
    "WhiteSmoke": "#F5F5F5",
    "Gainsboro": "#DCDCDC",
    "LightGray": "#D3D3D3",
    "Silver": "#C0C0C0",
    "DarkGray": "#A9A9A9",
    "Gray": "#808080",
    "DimGray": "#696969",
    "SlateGray": "#708090",
    "DarkSlateGray": "#2F4F4F",
    "Red": "#FF0000",
    "DarkRed": "#8B0000",
    "Crimson": "#DC143C",
    "Firebrick": "#B22222",
    "IndianRed": "#CD5C5C",
    "Tomato": "#FF6347",
    "OrangeRed": "#FF4500",
    "Orange": "#FFA500",
    "DarkOrange": "#FF8C00",
    "Gold": "#FFD700",
    "Yellow": "#FFFF00",
    "LightYellow": "#FFFFE0",
    "Khaki": "#F0E68C",
    "Green": "#008000",
    "DarkGreen": "#006400",
    "ForestGreen": "#228B22",
    "SeaGreen": "#2E8B57",
    "LimeGreen": "#32CD32",
    "LightGreen": "#90EE90",
    "Olive": "#808000",
    "Teal": "#008080",
    "DarkCyan": "#008B8B",
    "Cyan": "#00FFFF",
    "LightCyan": "#E0FFFF",
    "Blue": "#0000FF",
    "DarkBlue": "#00008B",
    "Navy": "#000080",
    "MidnightBlue": "#191970",
    "RoyalBlue": "#4169E1",
    "SteelBlue": "#4682B4",
    "DodgerBlue": "#1E90FF",
    "CornflowerBlue": "#6495ED",
    "DeepSkyBlue": "#00BFFF",
    "SkyBlue": "#87CEEB",
    "LightBlue": "#ADD8E6",
    "AliceBlue": "#F0F8FF",
    "Purple": "#800080",
    "Indigo": "#4B0082",
    "DarkViolet": "#9400D3",
    "MediumPurple": "#9370DB",
    "Magenta": "#FF00FF",
    "Orchid": "#DA70D6",
    "Pink": "#FFC0CB",
    "HotPink": "#FF69B4",
    "DeepPink": "#FF1493",
    "Brown": "#A52A2A",
    "Maroon": "#800000",
    "Chocolate": "#D2691E",
    "SaddleBrown": "#8B4513",
    "Tan": "#D2B48C",
    "Beige": "#F5F5DC",
    "Ivory": "#FFFFF0",
    "Linen": "#FAF0E6",
}

FONT_FAMILIES = frozenset((
    "Segoe UI",
    "Arial",
    "Calibri",
    "Cambria",
    "Candara",
    "Consolas",
    "Courier New",
    "Georgia",
    "Lucida Console",
    "Tahoma",
    "Times New Roman",
    "Trebuchet MS",
    "Verdana",
))

# Ordered light -> heavy
FONT_WEIGHTS = (
    "Thin",
    "ExtraLight",
    "Light",
    "Normal",
    "Medium",
    "SemiBold",
    "Bold",
    "ExtraBold",
    "Black",
)

BUTTON_LAYOUTS = {
    "OK": ("OK",),
    "OK-Cancel": ("OK", "Cancel"),
    "Abort-Retry-Ignore": ("Abort", "Retry", "Ignore"),
    "Yes-No-Cancel": ("Yes", "No", "Cancel"),
    "Yes-No": ("Yes", "No"),
    "Retry-Cancel": ("Retry", "Cancel"),
    "Cancel-TryAgain-Continue": ("Cancel", "TryAgain", "Continue"),
    "None": (),
}

# System sound name -> winsound MessageBeep type
SOUNDS = {
    "Asterisk": 0x40,     # MB_ICONASTERISK
    "Beep": -1,           # simple beep (0xFFFFFFFF as a signed int)
    "Exclamation": 0x30,  # MB_ICONEXCLAMATION
    "Hand": 0x10,         # MB_ICONHAND
    "Question": 0x20,     # MB_ICONQUESTION
}


def is_bold(weight):
    """ customtkinter only knows normal/bold. """
    return FONT_WEIGHTS.index(weight) >= FONT_WEIGHTS.index("SemiBold")
