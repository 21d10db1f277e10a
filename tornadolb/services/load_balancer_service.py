import json
import logging

from tornado.httpclient import AsyncHTTPClient
from tornado.httputil import url_concat

from tornadolb.pagination import Pager
from tornadolb.results import LoadBalancerPage, Result, extract_lbs


LOGGER = logging.getLogger("rax:load-balancer")

SERVICE_NAME = "loadbalancers"


class LoadBalancerService(object):

    def __init__(self, service_url, fetch_token):
        self.service_url = service_url
        self.fetch_token = fetch_token
        self.client = AsyncHTTPClient()

    async def _fetch(self, url, method="GET", body=None):
        token = await self.fetch_token()
        headers = {"X-Auth-Token": token}
        if body is not None:
            headers["Content-type"] = "application/json"
            body = json.dumps(body)
        LOGGER.debug("{0} {1}".format(method, url))
        return await self.client.fetch(
            url, method=method, headers=headers, body=body,
            raise_error=False)

    async def _request(self, url, method="GET", body=None):
        response = await self._fetch(url, method=method, body=body)
        return Result.from_response(response, SERVICE_NAME)

    async def fetch_page(self, url):
        response = await self._fetch(url)
        return LoadBalancerPage.from_response(response, SERVICE_NAME)

    def _url(self, lb_id=None):
        if lb_id is None:
            return "{0}/loadbalancers".format(self.service_url)
        return "{0}/loadbalancers/{1}".format(self.service_url, lb_id)

    def list_load_balancers(self, limit=None, marker=None):
        params = {}
        if limit is not None:
            params["limit"] = limit
        if marker is not None:
            params["marker"] = marker
        return Pager(self.fetch_page, url_concat(self._url(), params))

    async def fetch_load_balancers(self, limit=None, marker=None):
        pager = self.list_load_balancers(limit=limit, marker=marker)
        return await pager.all_items(extract_lbs)

    async def fetch_load_balancer(self, lb_id):
        result = await self._request(self._url(lb_id))
        return result.extract()

    async def create_load_balancer(
            self, name, protocol, port, virtual_ips, nodes=None, **options):
        config = {
            "name": name,
            "port": port,
            "protocol": protocol,
            "virtualIps": virtual_ips
        }
        if nodes is not None:
            config["nodes"] = nodes
        config.update(options)
        result = await self._request(
            self._url(), method="POST", body={"loadBalancer": config})
        return result.extract()

    async def update_load_balancer(self, lb_id, **attributes):
        result = await self._request(
            self._url(lb_id), method="PUT",
            body={"loadBalancer": attributes})
        result.raise_for_error()

    async def delete_load_balancer(self, lb_id):
        result = await self._request(self._url(lb_id), method="DELETE")
        result.raise_for_error()
