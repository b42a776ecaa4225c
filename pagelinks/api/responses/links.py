"""Markup for pagination links."""

from html import escape
from typing import Iterable

from pagelinks.api.adapters import UrlBuilder
from pagelinks.models.pagination import DisplayConfig, LinkDescriptor, LinkKind


class LinkRenderer:
    """Turns link descriptors into markup fragments."""

    def __init__(self, url_builder: UrlBuilder):
        self.url_builder = url_builder

    def anchor(self, text: str, page: int) -> str:
        url = self.url_builder.url_for_page(page)
        return f'<a href="{escape(url)}">{escape(text, quote=False)}</a>'

    def render(self, link: LinkDescriptor, config: DisplayConfig) -> str:
        """
        Render a single link.

        Disabled navigation links render as their disabled text alone, with
        no surrounding tags. Numbered links always carry an anchor; the
        active one opens with ``active_open_tag``.
        """
        if link.kind is LinkKind.NUMBER:
            open_tag = config.active_open_tag if link.is_active else config.open_tag
            label = str(link.target_page)
            return open_tag + self.anchor(label, link.target_page) + config.close_tag

        if not link.enabled:
            return config.text_for(link.kind, enabled=False)

        text = config.text_for(link.kind, enabled=True)
        return config.open_tag + self.anchor(text, link.target_page) + config.close_tag

    def render_all(self, links: Iterable[LinkDescriptor], config: DisplayConfig) -> str:
        return "".join(self.render(link, config) for link in links)

    def wrap(self, content: str, config: DisplayConfig) -> str:
        """Insert ``content`` into the paging wrapper template."""
        return config.paging_wrapper.replace("{content}", content)
