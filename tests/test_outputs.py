"""Tests for redirect pages, redirect lists, and route lists."""

import tomllib

import pytest

from pagebake.render.redirects import RedirectList, RedirectRecord, base_redirect_page
from pagebake.render.routes import RouteList

_PAIRS = [RedirectRecord("/old", "/new"), RedirectRecord("/a", "/b")]


class TestBaseRedirectPage:
    def test_meta_refresh(self) -> None:
        html = base_redirect_page("/home")
        assert '<meta http-equiv="refresh" content="0; url=/home">' in html

    def test_script_redirect(self) -> None:
        assert 'window.location.replace("/home");' in base_redirect_page("/home")

    def test_fallback_link(self) -> None:
        assert '<a href="/home">/home</a>' in base_redirect_page("/home")

    def test_is_html_document(self) -> None:
        html = base_redirect_page("/")
        assert html.startswith("<!DOCTYPE HTML>")
        assert html.rstrip().endswith("</html>")

    def test_escapes_target(self) -> None:
        html = base_redirect_page('/x"><script>alert(1)</script>')
        assert "<script>alert(1)</script>" not in html

    def test_script_target_not_html_escaped(self) -> None:
        html = base_redirect_page("/search?a=1&b=2")
        assert 'window.location.replace("/search?a=1&b=2");' in html
        assert 'href="/search?a=1&amp;b=2"' in html

    def test_script_target_cannot_close_script(self) -> None:
        html = base_redirect_page("/x</script><b>")
        assert 'window.location.replace("/x\\u003c/script>\\u003cb>");' in html
        assert html.count("</script>") == 1

    def test_script_target_quotes(self) -> None:
        html = base_redirect_page('/say"hi"')
        assert 'window.location.replace("/say\\"hi\\"");' in html


class TestCloudflarePages:
    def test_file_name(self) -> None:
        assert RedirectList.for_cloudflare_pages().file_name == "_redirects"

    def test_content(self) -> None:
        content = RedirectList.for_cloudflare_pages().content_renderer(_PAIRS)
        assert content == "/old /new\n/a /b"

    def test_empty(self) -> None:
        assert RedirectList.for_cloudflare_pages().content_renderer([]) == ""


class TestStaticWebServer:
    def test_file_name(self) -> None:
        assert RedirectList.for_static_web_server().file_name == "config.toml"

    def test_content(self) -> None:
        content = RedirectList.for_static_web_server().content_renderer(_PAIRS)
        assert tomllib.loads(content) == {
            "advanced": {
                "redirects": [
                    {"source": "/old", "destination": "/new", "kind": 302},
                    {"source": "/a", "destination": "/b", "kind": 302},
                ]
            }
        }

    def test_special_characters(self) -> None:
        pairs = [RedirectRecord('/say"hi"', "/back\\slash")]
        content = RedirectList.for_static_web_server().content_renderer(pairs)
        (rule,) = tomllib.loads(content)["advanced"]["redirects"]
        assert rule["source"] == '/say"hi"'
        assert rule["destination"] == "/back\\slash"

    def test_empty(self) -> None:
        content = RedirectList.for_static_web_server().content_renderer([])
        assert tomllib.loads(content) == {"advanced": {"redirects": []}}


class TestSitemap:
    def test_defaults(self) -> None:
        sitemap = RouteList.sitemap("https://x.test")
        assert sitemap.file_name == "sitemap.xml"
        assert sitemap.include_redirects is False

    def test_content(self) -> None:
        xml = RouteList.sitemap("https://x.test").content_renderer(["/", "/about"])
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
        assert "<loc>https://x.test/</loc>" in xml
        assert "<loc>https://x.test/about</loc>" in xml
        assert xml.endswith("</urlset>")

    def test_trailing_slash_origin(self) -> None:
        xml = RouteList.sitemap("https://x.test/").content_renderer(["/about"])
        assert "<loc>https://x.test/about</loc>" in xml

    def test_escapes_ampersand(self) -> None:
        xml = RouteList.sitemap("https://x.test").content_renderer(["/a&b"])
        assert "<loc>https://x.test/a&amp;b</loc>" in xml

    def test_frozen(self) -> None:
        sitemap = RouteList.sitemap("https://x.test")
        with pytest.raises(AttributeError):
            sitemap.file_name = "other.xml"  # type: ignore[misc]
