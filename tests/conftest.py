"""
Shared fixtures for QuickDict tests.

QUICKDICT_CONFIG must point at a throwaway file BEFORE config.py is imported,
otherwise the cfg singleton writes settings.ini into the working directory.
"""
import os
import tempfile
from unittest.mock import MagicMock

import pytest

_CONFIG_DIR = tempfile.mkdtemp(prefix="quickdict-tests-")
os.environ["QUICKDICT_CONFIG"] = os.path.join(_CONFIG_DIR, "settings.ini")


HELLO_SNIPPET = (
    '<div class="ht_title">hello</div>'
    '<span class="ht_attr" lang="en-us">[h ə ˈ l oʊ] </span>'
    '<ul><li><span class="ht_pos">int.</span><span class="ht_trs">你好；喂</span></li></ul>'
)

SEARCH_PAGE = (
    '<html><head><title>hello - Bing Dictionary</title>'
    '<meta name="description" content="必应词典为您提供hello的释义，'
    '美[həˈloʊ]，英[həˈləʊ]，int. 你好；喂； 网络释义： 哈罗；哈喽；" />'
    '</head><body></body></html>'
)

SEARCH_PAGE_DESCRIPTION = (
    '必应词典为您提供hello的释义，美[həˈloʊ]，英[həˈləʊ]，'
    'int. 你好；喂； 网络释义： 哈罗；哈喽；'
)


def make_response(status_code=200, text=""):
    """Fake requests.Response with only the fields network.py reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


@pytest.fixture
def restore_config():
    """Snapshot NETWORK section of cfg and restore it after the test."""
    from config import cfg

    saved = dict(cfg.config["NETWORK"])
    yield cfg
    for key, value in saved.items():
        cfg.config.set("NETWORK", key, value)
    cfg._save()
