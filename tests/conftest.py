import re
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from urshort.services.mapping import MappingResolver, PatternRule, parse_uri
from urshort.settings import Settings
from urshort.web.application import get_app


@pytest.fixture
def resolver() -> MappingResolver:
    """Resolver with exact entries that overlap the pattern rules."""
    standard = {
        "i": parse_uri("https://example.com"),
        "i5": parse_uri("https://example.com/five"),
        "unrelated": parse_uri("https://example.com/byebye"),
    }
    pattern = [
        PatternRule(re.compile(r"^(?P<index>\d+)$"), "https://example.com/$index"),
        PatternRule(re.compile(r"^i(?P<index>\d+)$"), "https://example.com/$index"),
        PatternRule(re.compile(r"(?P<last>[^,\s]+),\s+(?P<first>\S+)"), "$first $last"),
    ]
    return MappingResolver(standard, pattern)


@pytest.fixture
def client(resolver: MappingResolver) -> Iterator[TestClient]:
    """Test client over the fixture resolver."""
    app = get_app(app_settings=Settings(), resolver=resolver)
    with TestClient(app) as test_client:
        yield test_client
