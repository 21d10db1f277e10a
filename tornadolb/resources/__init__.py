from tornadolb.resources.load_balancers import (  # noqa: F401
    Algorithm, Cluster, ConnectionLogging, ConnectionThrottle, Datetime,
    LoadBalancer, Protocol, SessionPersistence, SourceAddrs, Status)
from tornadolb.resources.nodes import Node  # noqa: F401
from tornadolb.resources.vips import VIP  # noqa: F401
