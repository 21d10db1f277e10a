import os
import sys

from tornado.ioloop import IOLoop

from tornadolb.services.load_balancer_service import LoadBalancerService


# identity is handled elsewhere, so this expects a ready token and the
# load balancer endpoint for the account (ending in /v1.0/<account>)
SERVICE_URL = os.environ["LB_SERVICE_URL"]
AUTH_TOKEN = os.environ["LB_AUTH_TOKEN"]


async def fetch_token():
    return AUTH_TOKEN


def connect():
    return LoadBalancerService(SERVICE_URL, fetch_token)


async def list_lbs():
    service = connect()
    async for page in service.list_load_balancers(limit=10).pages():
        for lb in page.extract():
            print(lb.id, lb.name, lb.status, lb.protocol, lb.port)


async def create_lb():
    service = connect()
    lb = await service.create_load_balancer(
        "tornadolb-test", port=443, protocol="TCP",
        virtual_ips=[{"type": "SERVICENET"}])
    print(lb.id, lb.name, lb.status)


async def delete_lb(lbid):
    service = connect()
    lb = await service.fetch_load_balancer(lbid)
    print("Delete load balancer {0} [{1}]? (y/n)".format(lb.name, lb.id))
    if sys.stdin.readline().strip() != "y":
        raise Exception("Not deleting load balancer.")
    await service.delete_load_balancer(lbid)


def main():
    IOLoop.current().run_sync(list_lbs)
    print("Finished.")


if __name__ == "__main__":
    main()
