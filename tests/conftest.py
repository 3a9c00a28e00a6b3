"""
Shared test fixtures and sample payloads for edi-transform tests.

Sample payloads are defined here as module-level constants and exposed
through fixtures, so every test module works from the same inputs.
"""

import pytest

from edi_transform.config import TransformOptions

# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------
ORDER_STRING = "ProductID*4*8*15*16*23~AddressID*42*108*3*14~ContactID*59*26~"

ORDER_DOCUMENT = {
    "ProductID": [
        {
            "ProductID1": "4",
            "ProductID2": "8",
            "ProductID3": "15",
            "ProductID4": "16",
            "ProductID5": "23",
        }
    ],
    "AddressID": [
        {
            "AddressID1": "42",
            "AddressID2": "108",
            "AddressID3": "3",
            "AddressID4": "14",
        }
    ],
    "ContactID": [{"ContactID1": "59", "ContactID2": "26"}],
}

ORDER_XML = (
    "<ProductID><ProductID1>4</ProductID1><ProductID2>8</ProductID2>"
    "<ProductID3>15</ProductID3><ProductID4>16</ProductID4>"
    "<ProductID5>23</ProductID5></ProductID>"
    "<AddressID><AddressID1>42</AddressID1><AddressID2>108</AddressID2>"
    "<AddressID3>3</AddressID3><AddressID4>14</AddressID4></AddressID>"
    "<ContactID><ContactID1>59</ContactID1><ContactID2>26</ContactID2></ContactID>"
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def default_options() -> TransformOptions:
    return TransformOptions()


@pytest.fixture()
def order_string() -> str:
    return ORDER_STRING


@pytest.fixture()
def order_document() -> dict:
    # Fresh copy per test; parsers and callers may mutate what they get.
    return {group: [dict(r) for r in records] for group, records in ORDER_DOCUMENT.items()}


@pytest.fixture()
def order_xml() -> str:
    return ORDER_XML


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full pipeline)",
    )
