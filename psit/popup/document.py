""" Typed node tree for the message box window, serialised to XAML.

Properties are stored under snake_case names and converted to XAML
names (``corner_radius`` -> ``CornerRadius``) on output. Text goes into
element attributes through ElementTree, so it is always escaped.
"""
import xml.etree.ElementTree as ET

XAML_NS = "http://schemas.microsoft.com/winfx/2006/xaml/presentation"
X_NS = "http://schemas.microsoft.com/winfx/2006/xaml"

# attached properties that don't follow the PascalCase rule
_ATTACHED = {
    "grid_row": "Grid.Row",
    "grid_column": "Grid.Column",
    "grid_column_span": "Grid.ColumnSpan",
}


def xaml_name(name):
    if name in _ATTACHED:
        return _ATTACHED[name]
    return "".join(part.capitalize() for part in name.split("_"))


def xaml_value(value):
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (tuple, list)):
        return ",".join(str(v) for v in value)
    return str(value)


class Node:
    tag = None

    def __init__(self, children=None, name=None, **properties):
        self.name = name
        self.children = list(children or [])
        self.properties = {k: v for k, v in properties.items() if v is not None}

    def __getitem__(self, key):
        return self.properties[key]

    def get(self, key, default=None):
        return self.properties.get(key, default)

    def add(self, child):
        self.children.append(child)
        return child

    def walk(self):
        """ Depth-first iteration over this node and all descendants. """
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name):
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def find_all(self, node_type):
        return [node for node in self.walk() if isinstance(node, node_type)]

    def to_element(self):
        element = ET.Element(self.tag)
        if self.name:
            element.set("x:Name", self.name)
        for key, value in self.properties.items():
            element.set(xaml_name(key), xaml_value(value))
        for child in self.children:
            element.append(child.to_element())
        return element

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, children={len(self.children)})"


class Window(Node):
    tag = "Window"

    def to_element(self):
        element = super().to_element()
        element.set("xmlns", XAML_NS)
        element.set("xmlns:x", X_NS)
        return element

    def to_xaml(self):
        return ET.tostring(self.to_element(), encoding="unicode")

    @property
    def content(self):
        return self.children[0] if self.children else None


class DropShadowEffect(Node):
    tag = "DropShadowEffect"


class Border(Node):
    tag = "Border"

    def __init__(self, child=None, effect=None, **properties):
        super().__init__([child] if child is not None else [], **properties)
        self.effect = effect

    @property
    def child(self):
        return self.children[0] if self.children else None

    def to_element(self):
        element = super().to_element()
        if self.effect is not None:
            # <Border.Effect> property element has to come first
            holder = ET.Element(f"{self.tag}.Effect")
            holder.append(self.effect.to_element())
            element.insert(0, holder)
        return element


class StackPanel(Node):
    tag = "StackPanel"

    def __init__(self, children=None, orientation="Vertical", **properties):
        super().__init__(children, orientation=orientation, **properties)


class Grid(Node):
    """ Grid whose children carry grid_row / grid_column. """
    tag = "Grid"

    def __init__(self, children=None, rows=0, columns=0, **properties):
        super().__init__(children, **properties)
        self.rows = rows
        self.columns = columns

    def to_element(self):
        element = super().to_element()
        definitions = []
        if self.columns:
            cols = ET.Element("Grid.ColumnDefinitions")
            for _ in range(self.columns):
                ET.SubElement(cols, "ColumnDefinition", Width="Auto")
            definitions.append(cols)
        if self.rows:
            rows = ET.Element("Grid.RowDefinitions")
            for _ in range(self.rows):
                ET.SubElement(rows, "RowDefinition", Height="Auto")
            definitions.append(rows)
        for index, definition in enumerate(definitions):
            element.insert(index, definition)
        return element

    def cell(self, row, column):
        for child in self.children:
            if child.get("grid_row", 0) == row and child.get("grid_column", 0) == column:
                return child
        return None


class TextBlock(Node):
    tag = "TextBlock"

    def __init__(self, text, **properties):
        super().__init__(text=text, **properties)

    @property
    def text(self):
        return self.properties["text"]


class Button(Node):
    tag = "Button"

    def __init__(self, label, **properties):
        super().__init__(content=label, **properties)

    @property
    def label(self):
        return self.properties["content"]


class Image(Node):
    tag = "Image"

    def __init__(self, source, **properties):
        super().__init__(source=source, **properties)
