"""
sitemap.xml and robots.txt generation.
"""

import xml.etree.ElementTree as ET
from datetime import date, datetime, timezone
from pathlib import Path

from .constants import SITEMAP_NAMESPACE, SITEMAP_PAGES


def _base_url(site_url: str) -> str:
    return site_url if site_url.endswith("/") else site_url + "/"


def write_sitemap(path: Path, site_url: str, today: date | None = None) -> int:
    """
    Write a sitemap listing the site root and the secondary pages.

    Args:
        path: Destination file
        site_url: Absolute URL of the deployed site
        today: Date used for every <lastmod>, defaults to today (UTC)

    Returns:
        Number of URLs written
    """
    if today is None:
        today = datetime.now(timezone.utc).date()
    base = _base_url(site_url)

    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for page, priority in SITEMAP_PAGES:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = base + page
        ET.SubElement(url, "lastmod").text = today.isoformat()
        ET.SubElement(url, "priority").text = priority

    tree = ET.ElementTree(urlset)
    ET.indent(tree, space="  ")
    tree.write(path, encoding="utf-8", xml_declaration=True)
    return len(SITEMAP_PAGES)


def write_robots(path: Path, site_url: str) -> None:
    """Allow all crawlers and point them at the sitemap."""
    robots = f"User-agent: *\nAllow: /\n\nSitemap: {_base_url(site_url)}sitemap.xml\n"
    path.write_text(robots, encoding="utf-8")
