import json
import logging
from collections.abc import Mapping
from urllib.parse import urljoin

from tornadolb import errors
from tornadolb.resources.load_balancers import LoadBalancer


LOGGER = logging.getLogger("rax:load-balancer")

SINGLE_KEY = "loadBalancer"
COLLECTION_KEY = "loadBalancers"


def _load_body(raw_body):
    if not raw_body:
        return None
    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf8")
        return json.loads(raw_body)
    except ValueError as exc:
        raise errors.DecodeError(
            "Response body is not JSON: {0}".format(exc))


class Result(object):
    """One response body and the transport error, if the request failed."""

    def __init__(self, body=None, error=None, raw_body=None):
        self.body = body
        self.error = error
        # response bytes, parsed on first use
        self.raw_body = raw_body

    @classmethod
    def from_response(cls, response, service):
        error = errors.service_error(response, service)
        if error is not None:
            return cls(error=error)
        return cls(raw_body=response.body)

    def raise_for_error(self):
        if self.error is not None:
            raise self.error

    def document(self):
        self.raise_for_error()
        if self.raw_body is not None:
            self.body = _load_body(self.raw_body)
            self.raw_body = None
        return self.body

    def extract(self):
        return extract(self)


class LoadBalancerPage(Result):
    """One page of a load balancer listing."""

    def __init__(self, body=None, url=None, error=None, raw_body=None):
        super(LoadBalancerPage, self).__init__(
            body=body, error=error, raw_body=raw_body)
        self.url = url

    @classmethod
    def from_response(cls, response, service):
        page = super(LoadBalancerPage, cls).from_response(response, service)
        page.url = response.effective_url
        return page

    def next_page_url(self):
        body = self.document()
        if not isinstance(body, Mapping):
            return None
        links = body.get("links")
        if isinstance(links, Mapping):
            next_urls = [links.get("next")]
        elif not isinstance(links, list):
            return None
        else:
            next_urls = [
                link.get("href") for link in links
                if isinstance(link, Mapping) and link.get("rel") == "next"]
        next_urls = [u for u in next_urls if isinstance(u, str) and u]
        if not next_urls:
            return None
        if self.url:
            return urljoin(self.url, next_urls[0])
        return next_urls[0]

    def is_empty(self):
        return is_empty(self)

    def extract(self):
        return extract_lbs(self)


def extract(result):
    """Decode a create or get response into a ``LoadBalancer``.

    A transport error on the result is raised as is, before any decoding.
    """
    body = result.document()
    if not isinstance(body, Mapping) or SINGLE_KEY not in body:
        raise errors.DecodeError(
            "Response has no {0!r} object: {1!r}".format(SINGLE_KEY, body))
    config = body[SINGLE_KEY]
    if not isinstance(config, Mapping):
        raise errors.DecodeError(
            "{0!r} is not an object: {1!r}".format(SINGLE_KEY, config))
    return LoadBalancer.from_config(config)


def extract_lbs(page):
    """Decode every load balancer on a page, in document order."""
    body = page.document()
    if not isinstance(body, Mapping):
        raise errors.DecodeError(
            "Page is not an object: {0!r}".format(body))
    configs = body.get(COLLECTION_KEY)
    if configs is None:
        return []
    if not isinstance(configs, list):
        raise errors.DecodeError(
            "{0!r} is not a list: {1!r}".format(COLLECTION_KEY, configs))
    return [LoadBalancer.from_config(config) for config in configs]


def is_empty(page):
    # a page that fails to decode counts as empty so paging loops still
    # terminate, at the cost of silently dropping that page
    try:
        return len(extract_lbs(page)) == 0
    except errors.DecodeError as exc:
        LOGGER.warning(
            "Treating undecodable page {0} as empty: {1}".format(
                page.url, exc))
        return True
