"""Low-level access to runs and text nodes of a python-docx paragraph."""

from collections.abc import Iterable

from docx.oxml.ns import qn
from docx.text.paragraph import Paragraph
from docx.text.run import Run
from lxml import etree

_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


def collect_text_nodes(paragraph: Paragraph) -> list:
    """Return every ``w:t`` element of the paragraph in document order.

    Runs nested in hyperlinks are included, so the joined node content is
    the paragraph's logical text minus tabs and breaks.
    """
    return paragraph._p.xpath("./w:r/w:t | ./w:hyperlink/w:r/w:t")


def joined_text(nodes: Iterable) -> str:
    return "".join(node.text or "" for node in nodes)


def set_node_text(node, content: str) -> None:
    """Write ``content`` into a ``w:t`` element, keeping edge whitespace."""
    node.text = content
    if content != content.strip():
        node.set(_XML_SPACE, "preserve")


def formatting_key(run: Run) -> bytes:
    """Canonical serialization of a run's formatting properties."""
    rpr = run._r.find(qn("w:rPr"))
    if rpr is None:
        return b""
    return etree.tostring(rpr, method="c14n")


def remove_run(run: Run) -> None:
    element = run._r
    element.getparent().remove(element)


def are_adjacent(first: Run, second: Run) -> bool:
    """Whether ``second`` is the XML sibling immediately after ``first``."""
    return first._r.getnext() is second._r
