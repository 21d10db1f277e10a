import logging


LOGGER = logging.getLogger("rax:load-balancer")


class Pager(object):
    """Follows ``next`` links from a first page URL.

    ``fetch_page`` is a coroutine taking a URL and returning a page that
    provides ``raise_for_error()``, ``is_empty()`` and ``next_page_url()``.
    """

    def __init__(self, fetch_page, url):
        self.fetch_page = fetch_page
        self.url = url

    async def pages(self):
        url = self.url
        while url:
            page = await self.fetch_page(url)
            page.raise_for_error()
            if page.is_empty():
                return
            yield page
            url = page.next_page_url()
            LOGGER.debug("Next load balancer page: {0}".format(url))

    async def all_items(self, extract):
        items = []
        async for page in self.pages():
            items.extend(extract(page))
        return items
