"""
SoupEnvironment - a rendering environment backed by BeautifulSoup.

The environment owns an HTML document and implements the RenderEnvironment
protocol on top of ``bs4.Tag`` nodes. Styles are read from and written to the
inline ``style`` attribute; there is no cascade. Clicks are simulated with
:meth:`SoupEnvironment.click`.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from panelkit.domain.protocols import ClickListener
from panelkit.logger import get_logger

logger = get_logger("environment.soup")

PARSER = "html.parser"
DEFAULT_DOCUMENT = "<html><head></head><body></body></html>"


class SoupEnvironment:
    """Rendering environment holding a BeautifulSoup document."""

    def __init__(self, document: Optional[str | BeautifulSoup] = None):
        """
        Initialize the environment.

        Args:
            document: Markup of the hosting document, or an already parsed
                BeautifulSoup. Defaults to an empty HTML page.
        """
        if isinstance(document, BeautifulSoup):
            self.document = document
        else:
            self.document = BeautifulSoup(document if document is not None else DEFAULT_DOCUMENT, PARSER)
        self._click_listeners: list[tuple[Tag, ClickListener]] = []

    # ------------------------------------------------------------------
    # Document access
    # ------------------------------------------------------------------

    def parse(self, markup: str) -> Tag:
        """
        Parse markup into a detached node.

        Raises:
            ValueError: If the markup contains no element
        """
        fragment = BeautifulSoup(markup, PARSER)
        root = next((child for child in fragment.contents if isinstance(child, Tag)), None)
        if root is None:
            raise ValueError(f"Markup does not contain an element: {markup!r}")
        root = root.extract()
        # Templates with an unset class placeholder render class=""
        if "class" in root.attrs and not self._classes(root):
            del root["class"]
        return root

    def query(self, selector: str) -> Optional[Tag]:
        if not selector:
            return None
        return self.document.select_one(selector)

    def children_by_class(self, node: Tag, css_class: str) -> list[Tag]:
        return node.find_all(class_=css_class, recursive=False)

    def find_by_class(self, node: Tag, css_class: str) -> Optional[Tag]:
        return node.find(class_=css_class)

    def to_html(self) -> str:
        """Serialize the whole document."""
        return str(self.document)

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    def add_class(self, node: Tag, css_class: str) -> None:
        classes = self._classes(node)
        for name in css_class.split():
            if name not in classes:
                classes.append(name)
        node["class"] = classes

    def remove_class(self, node: Tag, css_class: str) -> None:
        removed = set(css_class.split())
        classes = [name for name in self._classes(node) if name not in removed]
        if classes:
            node["class"] = classes
        elif "class" in node.attrs:
            del node["class"]

    def has_class(self, node: Tag, css_class: str) -> bool:
        return css_class in self._classes(node)

    @staticmethod
    def _classes(node: Tag) -> list[str]:
        value = node.get("class") or []
        # html.parser yields a list for class; attributes set by hand may be strings
        if isinstance(value, str):
            return value.split()
        return list(value)

    # ------------------------------------------------------------------
    # Styles and visibility
    # ------------------------------------------------------------------

    def get_style(self, node: Tag, prop: str) -> Optional[str]:
        return self._styles(node).get(prop)

    def set_style(self, node: Tag, prop: str, value: Optional[str]) -> None:
        styles = self._styles(node)
        if value is None:
            styles.pop(prop, None)
        else:
            styles[prop] = value

        if styles:
            node["style"] = "; ".join(f"{key}: {val}" for key, val in styles.items())
        elif "style" in node.attrs:
            del node["style"]

    def set_visible(self, node: Tag, visible: bool) -> None:
        self.set_style(node, "display", None if visible else "none")

    def is_visible(self, node: Tag) -> bool:
        return self.get_style(node, "display") != "none"

    @staticmethod
    def _styles(node: Tag) -> dict[str, str]:
        styles: dict[str, str] = {}
        for declaration in (node.get("style") or "").split(";"):
            prop, sep, value = declaration.partition(":")
            if sep and prop.strip():
                styles[prop.strip().lower()] = value.strip()
        return styles

    # ------------------------------------------------------------------
    # Tree mutation
    # ------------------------------------------------------------------

    def append_child(self, parent: Tag, child: Tag) -> None:
        # Tag.append extracts the child from its current parent first
        parent.append(child)

    def set_text(self, node: Tag, text: str) -> None:
        node.string = text

    # ------------------------------------------------------------------
    # Click listeners
    # ------------------------------------------------------------------

    def on_click(self, node: Tag, listener: ClickListener) -> None:
        self._click_listeners.append((node, listener))

    def off_click(self, node: Tag) -> None:
        self._click_listeners = [(target, listener) for target, listener in self._click_listeners if target is not node]

    def click(self, node: Tag) -> None:
        """
        Simulate a click on ``node``.

        Listeners registered on the node run first, then those registered on
        each ancestor, innermost first.
        """
        targets = [node, *node.parents]
        for target in targets:
            for listener_node, listener in list(self._click_listeners):
                if listener_node is target:
                    logger.debug(f"Click on <{node.name}> handled by listener on <{target.name}>")
                    listener()
