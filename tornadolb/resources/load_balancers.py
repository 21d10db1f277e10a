import dateutil.parser

from tornadolb.resources.nodes import Node
from tornadolb.resources.vips import VIP
from tornadolb.schema import Field, Record, Vocabulary


DEFAULT_TIMEOUT = 30
MAX_TIMEOUT = 120


class Protocol(Vocabulary):
    """Network protocol accepted by the load balancer."""

    # DNS over TCP or UDP port 53, works with IPv6
    DNS_TCP = "DNS_TCP"
    DNS_UDP = "DNS_UDP"
    TCP = "TCP"
    # like TCP, but more efficient when the client writes first
    TCP_CLIENT_FIRST = "TCP_CLIENT_FIRST"
    UDP = "UDP"
    # media streaming on top of UDP
    UDP_STREAM = "UDP_STREAM"

    VALUES = (DNS_TCP, DNS_UDP, TCP, TCP_CLIENT_FIRST, UDP, UDP_STREAM)

    @property
    def supports_half_closed(self):
        return self in (self.TCP, self.TCP_CLIENT_FIRST)


class Algorithm(Vocabulary):
    """How traffic is spread across the back-end nodes."""

    LEAST_CONNECTIONS = "LEAST_CONNECTIONS"
    RANDOM = "RANDOM"
    ROUND_ROBIN = "ROUND_ROBIN"
    # weighted variants use the weight set on each node
    WEIGHTED_LEAST_CONNECTIONS = "WEIGHTED_LEAST_CONNECTIONS"
    WEIGHTED_ROUND_ROBIN = "WEIGHTED_ROUND_ROBIN"

    VALUES = (
        LEAST_CONNECTIONS, RANDOM, ROUND_ROBIN, WEIGHTED_LEAST_CONNECTIONS,
        WEIGHTED_ROUND_ROBIN)

    # what the API applies when a create request leaves it out
    DEFAULT = RANDOM


class Status(Vocabulary):
    """Lifecycle state reported by the API.

    BUILD follows a create and settles into ACTIVE. PENDING_UPDATE and
    PENDING_DELETE are entered from ACTIVE while a change is applied.
    ERROR can follow BUILD or either PENDING state, and DELETED follows
    PENDING_DELETE. Transitions are not checked here.
    """

    ACTIVE = "ACTIVE"
    BUILD = "BUILD"
    PENDING_UPDATE = "PENDING_UPDATE"
    PENDING_DELETE = "PENDING_DELETE"
    SUSPENDED = "SUSPENDED"
    ERROR = "ERROR"
    DELETED = "DELETED"

    VALUES = (
        ACTIVE, BUILD, PENDING_UPDATE, PENDING_DELETE, SUSPENDED, ERROR,
        DELETED)

    @property
    def is_terminal(self):
        return self == self.DELETED


class Datetime(Record):
    """Wraps a ``created`` or ``updated`` time string exactly as sent."""

    FIELDS = (
        Field("time", "time"),
    )

    def to_datetime(self):
        if not self.time:
            return None
        return dateutil.parser.parse(self.time)


class SourceAddrs(Record):

    FIELDS = (
        Field("ipv4_public", "ipv4Public"),
        Field("ipv4_private", "ipv4Servicenet"),
        Field("ipv6_public", "ipv6Public"),
        Field("ipv6_private", "ipv6Servicenet"),
    )


class SessionPersistence(Record):

    FIELDS = (
        Field("type", "persistenceType"),
    )


class ConnectionThrottle(Record):

    FIELDS = (
        Field("min_connections", "minConnections", int),
        Field("max_connections", "maxConnections", int),
        Field("max_connection_rate", "maxConnectionRate", int),
        Field("rate_interval", "rateInterval", int),
    )


class ConnectionLogging(Record):

    FIELDS = (
        Field("enabled", "enabled", bool),
    )


class Cluster(Record):

    FIELDS = (
        Field("name", "name"),
    )


class LoadBalancer(Record):
    """A load balancer as reported by the API.

    Every attribute comes straight from the response document. Sub-records
    that the document leaves out are present but zero-valued.
    """

    FIELDS = (
        Field("id", "id", int),
        Field("name", "name"),
        Field("protocol", "protocol", Protocol),
        Field("algorithm", "algorithm", Algorithm),
        Field("status", "status", Status),
        Field("node_count", "nodeCount", int),
        Field("vips", "virtualIps", record=VIP, many=True),
        Field("created", "created", record=Datetime),
        Field("updated", "updated", record=Datetime),
        Field("port", "port", int),
        Field("half_closed", "halfClosed", bool),
        Field("timeout", "timeout", int),
        Field("cluster", "cluster", record=Cluster),
        Field("nodes", "nodes", record=Node, many=True),
        Field("connection_logging", "connectionLogging",
              record=ConnectionLogging),
        Field("session_persistence", "sessionPersistence",
              record=SessionPersistence),
        Field("connection_throttle", "connectionThrottle",
              record=ConnectionThrottle),
        Field("source_addrs", "sourceAddresses", record=SourceAddrs),
    )
