"""Shared fixtures: sample feeds and a fake clock."""

import os
import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

# api.py 在导入时配置日志, 避免测试写入仓库目录
os.environ.setdefault("SCIJOURNAL_LOG_DIR", tempfile.mkdtemp(prefix="scijournal-logs-"))

import pytest


RSS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Journal A</title>
    <link>https://a.example.org</link>
    <item>
      <title>Middle paper</title>
      <link>https://a.example.org/2</link>
      <description>&lt;p&gt;Second &amp;amp; middle&lt;/p&gt;</description>
      <pubDate>Tue, 04 Mar 2025 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Oldest paper</title>
      <link>https://a.example.org/1</link>
      <description>First</description>
      <dc:date>2025-03-01T08:00:00Z</dc:date>
    </item>
    <item>
      <title>Newest paper</title>
      <link>https://a.example.org/3</link>
      <description><![CDATA[<b>Third</b> paper]]></description>
      <pubDate>Wed, 05 Mar 2025 10:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

SCIENCEDIRECT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:prism="http://prismstandard.org/namespaces/basic/2.0/">
  <channel>
    <title>ScienceDirect Publication: Technovation</title>
    <item>
      <title>Open innovation in SMEs</title>
      <link>https://www.sciencedirect.com/science/article/pii/S0166497225000001</link>
      <description><![CDATA[<p>Publication date: March 2025</p><p>Source: Technovation, Volume 141</p><p>Author(s): A. Smith</p>]]></description>
      <pubDate>Mon, 01 Jan 2024 00:00:00 GMT</pubDate>
      <dc:date>2024-01-01</dc:date>
    </item>
    <item>
      <title>Patent thickets</title>
      <link>https://www.sciencedirect.com/science/article/pii/S0166497225000002</link>
      <description><![CDATA[<p>Source: Technovation, Volume 142</p>]]></description>
      <prism:coverDate>2025-04-01</prism:coverDate>
      <dc:date>2025-02-01</dc:date>
    </item>
  </channel>
</rss>
"""

ATOM_XML = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom Journal</title>
  <id>urn:journal</id>
  <entry>
    <title>Atom entry</title>
    <link rel="related" href="https://atom.example.org/related"/>
    <link rel="alternate" href="https://atom.example.org/1"/>
    <id>urn:entry:1</id>
    <updated>2025-01-02T00:00:00Z</updated>
    <summary type="html">&lt;b&gt;Bold&lt;/b&gt; summary</summary>
  </entry>
</feed>
"""

RDF_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/"
         xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel rdf:about="https://rdf.example.org">
    <title>RDF Journal</title>
  </channel>
  <item rdf:about="https://rdf.example.org/1">
    <title>RDF one</title>
    <link>https://rdf.example.org/1</link>
    <description>One</description>
    <dc:date>2025-02-01</dc:date>
  </item>
  <item rdf:about="https://rdf.example.org/2">
    <title>RDF two</title>
    <link>https://rdf.example.org/2</link>
    <dc:date>2025-02-03</dc:date>
  </item>
</rdf:RDF>
"""


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def rss_xml():
    return RSS_XML


@pytest.fixture
def sciencedirect_xml():
    return SCIENCEDIRECT_XML


@pytest.fixture
def atom_xml():
    return ATOM_XML


@pytest.fixture
def rdf_xml():
    return RDF_XML


@pytest.fixture
def clock():
    return FakeClock()
