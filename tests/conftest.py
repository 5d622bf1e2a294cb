import copy

import pytest

VALID_TOKEN = "dop_v1_" + "0123456789abcdef" * 4

VALID_DOCUMENT = {
    "project": {
        "name": "acme-platform",
        "domain": "acme.io",
        "email": "admin@acme.io",
    },
    "environments": [
        {
            "name": "production",
            "cluster": {
                "region": "nyc3",
                "nodeSize": "s-2vcpu-4gb",
                "nodeCount": 3,
                "haControlPlane": False,
            },
            "domain": "acme.io",
        }
    ],
}


@pytest.fixture
def document():
    """A valid configuration document that tests are free to modify."""
    return copy.deepcopy(VALID_DOCUMENT)


@pytest.fixture
def cluster(document):
    return document["environments"][0]["cluster"]


@pytest.fixture
def valid_token():
    return VALID_TOKEN
