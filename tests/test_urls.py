import unittest

import upnpdevice as upnp
from upnpdevice.urls import derive_url_base, is_absolute_url, url_root


class TestResolveURL(unittest.TestCase):
    base = "http://host:80/x/y"

    def test_absolute_unchanged(self):
        """
        An absolute URL should be returned as it is, whatever the base.
        """
        url = "https://media.example.com/a/b.png?size=large&x=%20y"
        self.assertEqual(upnp.resolve_url(url, self.base), url)
        self.assertEqual(upnp.resolve_url(url, None), url)

    def test_root_relative(self):
        """
        A URL starting with a slash should only keep the scheme, host and port of the base.
        """
        self.assertEqual(upnp.resolve_url("/path", self.base), "http://host:80/path")

    def test_relative_inserts_slash(self):
        """
        A relative URL should be appended to the base with exactly one slash between them.
        """
        self.assertEqual(
            upnp.resolve_url("rel/path", self.base), "http://host:80/x/y/rel/path"
        )
        self.assertEqual(upnp.resolve_url("rel", "http://host:80/x/y/"), "http://host:80/x/y/rel")

    def test_relative_keeps_query_and_encoding(self):
        """
        Joining should not re-encode or drop the query string.
        """
        self.assertEqual(
            upnp.resolve_url("desc.xml?a=1&b=%2F", self.base),
            "http://host:80/x/y/desc.xml?a=1&b=%2F",
        )

    def test_backslashes(self):
        """
        Backslashes in relative URLs should be treated as path separators.
        """
        self.assertEqual(
            upnp.resolve_url("icons\\small.png", self.base),
            "http://host:80/x/y/icons/small.png",
        )

    def test_blank(self):
        """
        Missing or blank URLs should resolve to None.
        """
        self.assertIsNone(upnp.resolve_url(None, self.base))
        self.assertIsNone(upnp.resolve_url("", self.base))
        self.assertIsNone(upnp.resolve_url("   ", self.base))

    def test_relative_without_base(self):
        """
        A relative URL without a base should raise MalformedURL.
        """
        self.assertRaises(upnp.MalformedURL, upnp.resolve_url, "rel", None)

    def test_relative_with_bad_base(self):
        """
        A relative URL with a base that isn't absolute should raise MalformedURL.
        """
        self.assertRaises(upnp.MalformedURL, upnp.resolve_url, "rel", "not/a/url")

    def test_root_drops_userinfo(self):
        self.assertEqual(url_root("http://user:pw@host:8080/a/b"), "http://host:8080")

    def test_is_absolute(self):
        self.assertTrue(is_absolute_url("http://10.0.0.1:49152/desc.xml"))
        self.assertFalse(is_absolute_url("/desc.xml"))
        self.assertFalse(is_absolute_url("desc.xml"))
        self.assertFalse(is_absolute_url("http://host:port/desc.xml"))

    def test_file_urls(self):
        """
        `file` URLs with an empty host should count as absolute.
        """
        self.assertTrue(is_absolute_url("file:///srv/upnp/desc.xml"))
        self.assertFalse(is_absolute_url("file:desc.xml"))
        self.assertEqual(
            upnp.resolve_url("icons/small.png", "file:///srv/upnp"),
            "file:///srv/upnp/icons/small.png",
        )
        self.assertEqual(upnp.resolve_url("/icon.png", "file:///srv/upnp"), "file:///icon.png")


class TestDeriveURLBase(unittest.TestCase):
    def test_drops_file_name(self):
        self.assertEqual(
            derive_url_base("http://192.168.1.254:80/upnp/IGD.xml"),
            "http://192.168.1.254:80/upnp",
        )

    def test_no_path(self):
        self.assertEqual(derive_url_base("http://192.168.1.254:5000"), "http://192.168.1.254:5000")

    def test_file_location(self):
        self.assertEqual(derive_url_base("file:///srv/upnp/desc.xml"), "file:///srv/upnp")

    def test_relative_location(self):
        """
        A location that isn't an absolute URL can't give a base.
        """
        self.assertRaises(upnp.MalformedURL, derive_url_base, "upnp/IGD.xml")
