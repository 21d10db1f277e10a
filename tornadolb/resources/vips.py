from tornadolb.schema import Field, Record, Vocabulary


class VIPType(Vocabulary):
    PUBLIC = "PUBLIC"
    SERVICENET = "SERVICENET"

    VALUES = (PUBLIC, SERVICENET)


class IPVersion(Vocabulary):
    IPV4 = "IPV4"
    IPV6 = "IPV6"

    VALUES = (IPV4, IPV6)


class VIP(Record):
    """A virtual IP through which client traffic reaches a load balancer."""

    FIELDS = (
        Field("id", "id", int),
        Field("address", "address"),
        Field("type", "type", VIPType),
        Field("version", "ipVersion", IPVersion),
    )
