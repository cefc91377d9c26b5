"""
XML building blocks for sitemap documents.

SitemapDocument wraps a minidom document whose root always carries the base
sitemap namespace. Optional namespaces (image, news, xhtml) are declared on
the root only at finalize time, from the NamespaceUsage collected while the
body was written, so a prefix is declared exactly when it is used.
"""

from dataclasses import dataclass
import re
from xml.dom import minidom

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

OPTIONAL_NAMESPACES = {
    "image": "http://www.google.com/schemas/sitemap-image/1.1",
    "news": "http://www.google.com/schemas/sitemap-news/0.9",
    "xhtml": "http://www.w3.org/1999/xhtml",
}

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


def xml_safe(value) -> str:
    """
    Return ``value`` as text that can be placed in a text node or attribute.

    Characters XML cannot represent are dropped. Markup characters
    (``& < >``, and ``"`` at least inside attributes) are escaped by the serializer
    when the document is written, so callers must not pre-escape.
    """
    if value is None:
        return ""
    return _ILLEGAL_XML_CHARS.sub("", str(value))


@dataclass
class NamespaceUsage:
    """Which optional namespaces were written while building one document."""

    image: bool = False
    news: bool = False
    xhtml: bool = False

    def mark_used(self, kind: str):
        if kind not in OPTIONAL_NAMESPACES:
            raise ValueError(f"Unknown sitemap namespace: {kind}")
        setattr(self, kind, True)

    def is_used(self, kind: str) -> bool:
        return bool(getattr(self, kind, False))

    def used(self) -> list:
        return [kind for kind in OPTIONAL_NAMESPACES if self.is_used(kind)]

    def apply_to(self, element):
        for kind in self.used():
            element.setAttribute(f"xmlns:{kind}", OPTIONAL_NAMESPACES[kind])


class SitemapDocument:
    """An in-memory sitemap document with a single ``urlset`` or ``sitemapindex`` root."""

    def __init__(self, root_tag: str = "urlset"):
        self.dom = minidom.Document()
        self.root = self.dom.createElement(root_tag)
        self.root.setAttribute("xmlns", SITEMAP_NS)
        self.dom.appendChild(self.root)
        self.finalized = False

    def element(self, tag: str, text=None, **attrs):
        """Create a detached element, optionally with a text child and attributes."""
        node = self.dom.createElement(tag)
        for name, value in attrs.items():
            node.setAttribute(name, xml_safe(value))
        if text is not None:
            node.appendChild(self.dom.createTextNode(xml_safe(text)))
        return node

    def append(self, element):
        if self.finalized:
            raise RuntimeError("Sitemap document is already finalized")
        self.root.appendChild(element)
        return element

    def __len__(self):
        return len(self.root.childNodes)

    def finalize(self, usage: NamespaceUsage = None) -> str:
        """Declare the used namespaces and serialize the document to text."""
        if not self.finalized:
            if usage is not None:
                usage.apply_to(self.root)
            self.finalized = True
        return self.to_xml()

    def to_xml(self) -> str:
        return self.dom.toprettyxml(indent="  ", encoding="UTF-8").decode("utf-8")
