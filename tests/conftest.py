"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from zhengyu.dictionary import JyutpingDictionary, reset_dictionary

SAMPLE_READINGS = {
    "我": "ngo5",
    "你": "nei5",
    "佢": "keoi5",
    "屋": "uk1",
    "企": "kei2",
    "有": "jau5",
    "人": "jan4",
    "食": "sik6",
    "咗": "zo2",
    "飯": "faan6",
    "去": "heoi3",
    "街": "gaai1",
    "好": "hou2",
    "唔": "m4",
    "嘅": "ge3",
    "啦": "laa1",
    "書": "syu1",
    "行": "haang4",
    "香": "hoeng1",
    "港": "gong2",
}

SAMPLE_TSV = (
    "CH\tUCODE\tJP\tINIT\tFINL\tTONE\tDESC\tDESC_JP\n"
    "我\t6211\tngo5\tng\to\t5\t\t\n"
    "行\t884C\thaang4\th\taang\t4\t\t\n"
    "行\t884C\thang4\th\tang\t4\t\t\n"
    "\n"
    "broken line\n"
    "食\t98DF\tsik6\ts\tik\t6\t\t\n"
)

@pytest.fixture
def sample_dictionary():
    """Small in-memory jyutping dictionary."""
    return JyutpingDictionary(SAMPLE_READINGS)

@pytest.fixture
def sample_tsv_path(tmp_path):
    """LSHK-format table on disk."""
    path = tmp_path / "list.tsv"
    path.write_text(SAMPLE_TSV, encoding="utf-8")
    return str(path)

@pytest.fixture
def mock_completion_client():
    """Mock AI completion client."""
    client = Mock()
    client.complete.return_value = '{"keywords": []}'
    return client

@pytest.fixture(autouse=True)
def clean_shared_dictionary():
    """Every test starts and ends without a process-wide dictionary."""
    reset_dictionary()
    yield
    reset_dictionary()
