LB_TEST = {
    "loadBalancer": {
        "id": 12345,
        "name": "lb-test",
        "protocol": "TCP",
        "algorithm": "RANDOM",
        "status": "ACTIVE",
        "nodeCount": 2,
        "port": 80,
        "timeout": 30
    }
}


LIST_RESPONSE = {
    "loadBalancers": [
        {
            "name": "lb1",
            "id": 1,
            "protocol": "HTTP",
            "port": 80,
            "algorithm": "RANDOM",
            "status": "ACTIVE",
            "nodeCount": 3,
            "virtualIps": [
                {
                    "id": 401,
                    "address": "206.55.130.1",
                    "type": "PUBLIC",
                    "ipVersion": "IPV4"
                }
            ],
            "created": {
                "time": "2010-11-30T03:23:42Z"
            },
            "updated": {
                "time": "2010-11-30T03:23:44Z"
            }
        },
        {
            "name": "lb2",
            "id": 2,
            "protocol": "HTTPS",
            "port": 443,
            "algorithm": "RANDOM",
            "status": "ACTIVE",
            "nodeCount": 4,
            "virtualIps": [
                {
                    "id": 402,
                    "address": "206.55.130.2",
                    "type": "PUBLIC",
                    "ipVersion": "IPV4"
                }
            ],
            "created": {
                "time": "2010-11-30T03:23:42Z"
            },
            "updated": {
                "time": "2010-11-30T03:23:44Z"
            }
        }
    ]
}


CREATE_RESPONSE = {
    "loadBalancer": {
        "name": "a-new-loadbalancer",
        "id": 3,
        "protocol": "HTTP",
        "halfClosed": "true",
        "port": 80,
        "algorithm": "RANDOM",
        "status": "BUILD",
        "timeout": 30,
        "cluster": {
            "name": "cluster1"
        },
        "nodes": [],
        "virtualIps": [
            {
                "address": "206.10.10.210",
                "id": 39,
                "type": "PUBLIC",
                "ipVersion": "IPV4"
            }
        ],
        "connectionLogging": {
            "enabled": False
        }
    }
}

GET_RESPONSE = {
    "loadBalancer": {
        "id": 2000,
        "name": "sample-loadbalancer",
        "protocol": "TCP_CLIENT_FIRST",
        "port": 80,
        "algorithm": "WEIGHTED_ROUND_ROBIN",
        "status": "ACTIVE",
        "timeout": 60,
        "halfClosed": True,
        "nodeCount": 2,
        "connectionLogging": {
            "enabled": True
        },
        "virtualIps": [
            {
                "id": 1000,
                "address": "206.10.10.210",
                "type": "PUBLIC",
                "ipVersion": "IPV4"
            },
            {
                "id": 1001,
                "address": "2001:4800:7901:0000:9a32:3c2a:0000:0001",
                "type": "PUBLIC",
                "ipVersion": "IPV6"
            }
        ],
        "nodes": [
            {
                "id": 1041,
                "address": "10.1.1.1",
                "port": 80,
                "condition": "ENABLED",
                "status": "ONLINE",
                "weight": 3,
                "type": "PRIMARY"
            },
            {
                "id": 1411,
                "address": "10.1.1.2",
                "port": 80,
                "condition": "DRAINING",
                "status": "ONLINE",
                "weight": 8,
                "type": "SECONDARY"
            }
        ],
        "sessionPersistence": {
            "persistenceType": "HTTP_COOKIE"
        },
        "connectionThrottle": {
            "minConnections": 10,
            "maxConnections": 100,
            "maxConnectionRate": 50,
            "rateInterval": 60
        },
        "cluster": {
            "name": "c1.dfw1"
        },
        "created": {
            "time": "2010-11-30T03:23:42Z"
        },
        "updated": {
            "time": "2010-11-30T03:23:44Z"
        },
        "sourceAddresses": {
            "ipv6Public": "2001:4801:79f1:1::1/64",
            "ipv4Servicenet": "10.0.0.0",
            "ipv4Public": "10.12.99.28",
            "ipv6Servicenet": "2001:4801:79f1:2::1/64"
        }
    }
}

MALFORMED_LIST_RESPONSE = {
    "loadBalancers": [
        {"id": 1, "name": "lb1"},
        {"id": "not-a-number", "name": "lb2"}
    ]
}
