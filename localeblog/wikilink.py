from __future__ import annotations

import xml.etree.ElementTree as etree
from urllib.parse import quote

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor

RE_WIKILINK = r"\[\[(?P<target>[^\]|#]*)(?P<fragment>#[^\]|]*)?(?:\|(?P<label>[^\]]+))?\]\]"


def wikilink_url(target: str, fragment: str, end: str) -> str:
    url = f"{quote(target)}{end}" if target else ""
    if fragment:
        url += "#" + quote(fragment[1:])
    return url


class WikiLinkProcessor(InlineProcessor):
    def __init__(self, pattern, md, end_url: str, html_class: str):
        super().__init__(pattern, md)
        self.end_url = end_url
        self.html_class = html_class

    def handleMatch(self, m, data):
        target = m.group("target").strip()
        fragment = (m.group("fragment") or "").strip()
        if not target and not fragment:
            return None, None, None
        label = (m.group("label") or "").strip() or f"{target}{fragment}"

        el = etree.Element("a")
        el.set("href", wikilink_url(target, fragment, self.end_url))
        if self.html_class:
            el.set("class", self.html_class)
        el.text = label
        return el, m.start(0), m.end(0)


class WikiLinkExtension(Extension):
    """``[[Target]]``, ``[[Target|label]]`` and ``[[Target#fragment]]`` links."""

    def __init__(self, **kwargs):
        self.config = {
            "end_url": [".html", "Suffix appended to the link target."],
            "html_class": ["wikilink", "CSS class of generated links."],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            WikiLinkProcessor(
                RE_WIKILINK, md, self.getConfig("end_url"), self.getConfig("html_class")
            ),
            "wikilink",
            175,
        )
