import json
from pathlib import Path

import pytest

from swagger_to_code.pipeline.schema_model import parse_document

TEST_DATA = Path(__file__).parent / "test_data"


def load_json(name: str) -> dict:
    with open(TEST_DATA / name) as f:
        return json.load(f)


@pytest.fixture
def petstore_data() -> dict:
    """The raw Petstore document"""
    return load_json("petstore.json")


@pytest.fixture
def petstore(petstore_data):
    """The parsed Petstore document"""
    return parse_document(petstore_data)
