import pytest

from remote_export.models.config import ExportConfig
from remote_export.models.record import Row


@pytest.fixture()
def row():
    return Row(
        source_id="src-1",
        destination={
            "endpoint": {"url": "https://api.example.test/orders"},
            "sku": "SKU-9",
            "quantity": 3,
        },
    )


@pytest.fixture()
def config():
    return ExportConfig.from_dict({
        "migration_id": "orders",
        "url_property": "endpoint/url",
    })
