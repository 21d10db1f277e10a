from tornadolb.schema import Field, Record, Vocabulary


class Condition(Vocabulary):
    # DRAINING stops new connections but lets existing ones finish
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"
    DRAINING = "DRAINING"

    VALUES = (ENABLED, DISABLED, DRAINING)


class NodeStatus(Vocabulary):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    ERROR = "ERROR"

    VALUES = (ONLINE, OFFLINE, ERROR)


class NodeType(Vocabulary):
    # SECONDARY nodes only receive traffic when every PRIMARY node fails
    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"

    VALUES = (PRIMARY, SECONDARY)


class Node(Record):
    """A back-end server registered to receive balanced traffic."""

    FIELDS = (
        Field("id", "id", int),
        Field("address", "address"),
        Field("port", "port", int),
        Field("condition", "condition", Condition),
        Field("status", "status", NodeStatus),
        Field("weight", "weight", int),
        Field("type", "type", NodeType),
    )
