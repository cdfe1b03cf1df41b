"""Tests for sitemap.xml and robots.txt generation."""

import xml.etree.ElementTree as ET
from datetime import date

from folio.core.sitemap import write_robots, write_sitemap

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


class TestSitemap:
    def test_lists_pages_with_lastmod(self, tmp_path):
        path = tmp_path / "sitemap.xml"
        count = write_sitemap(path, "https://example.com/photos/", today=date(2024, 5, 17))
        assert count == 3

        root = ET.parse(path).getroot()
        assert root.tag == "{http://www.sitemaps.org/schemas/sitemap/0.9}urlset"

        urls = root.findall("sm:url", NS)
        locs = [u.find("sm:loc", NS).text for u in urls]
        assert locs == [
            "https://example.com/photos/",
            "https://example.com/photos/about_me.html",
            "https://example.com/photos/contact.html",
        ]
        assert {u.find("sm:lastmod", NS).text for u in urls} == {"2024-05-17"}
        assert [u.find("sm:priority", NS).text for u in urls] == ["1.0", "0.8", "0.8"]

    def test_site_url_without_trailing_slash(self, tmp_path):
        path = tmp_path / "sitemap.xml"
        write_sitemap(path, "https://example.com", today=date(2024, 1, 1))
        root = ET.parse(path).getroot()
        assert root.find("sm:url/sm:loc", NS).text == "https://example.com/"

    def test_xml_declaration(self, tmp_path):
        path = tmp_path / "sitemap.xml"
        write_sitemap(path, "https://example.com/")
        assert path.read_text().startswith("<?xml")


class TestRobots:
    def test_allows_all_and_references_sitemap(self, tmp_path):
        path = tmp_path / "robots.txt"
        write_robots(path, "https://example.com/photos/")
        lines = path.read_text().splitlines()
        assert lines[0] == "User-agent: *"
        assert lines[1] == "Allow: /"
        assert lines[-1] == "Sitemap: https://example.com/photos/sitemap.xml"
