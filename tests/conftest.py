"""
Pytest Configuration and Fixtures

Shared fixtures for the name search test suite.
Run with: pytest -v
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.name_search_engine import NameSearchEngine, get_name_search_engine
from services.name_trie import NameTrie
from services.transliteration_service import Transliterator
from utils.name_dictionary import ENGLISH_TO_AMHARIC


@pytest.fixture
def trie():
    """Trie built from the bundled dictionary."""
    return NameTrie.from_mappings(ENGLISH_TO_AMHARIC)


@pytest.fixture
def small_trie():
    """Hand-sized trie for exact assertions."""
    return NameTrie.from_mappings({
        "amanuel": "አማኑኤል",
        "emanuel": "አማኑኤል",
        "selam": "ሰላም",
        "selamawit": "ሰላማዊት",
        "abebe": "አበበ",
    })


@pytest.fixture
def transliterator(trie):
    """Transliterator with its own cache."""
    return Transliterator(trie)


@pytest.fixture
def engine():
    """Fresh engine, isolated from the process default."""
    return NameSearchEngine()


@pytest.fixture(autouse=True)
def clear_default_cache():
    """Start every test with an empty default transliteration cache."""
    get_name_search_engine().clear_cache()
    yield
    get_name_search_engine().clear_cache()
