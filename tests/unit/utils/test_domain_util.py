"""domain_util tests."""

from __future__ import annotations

from bitflip.utils.domain_util import _debug, domain_tld


class TestDomainTld:
    """domain_tld() tests."""

    def test_simple(self):
        """No subdomain."""
        assert domain_tld("example.com") == ("", "example", "com")

    def test_subdomain(self):
        """Subdomain is split off."""
        assert domain_tld("www.example.com") == ("www", "example", "com")

    def test_multi_part_suffix(self):
        """Public suffix with a dot."""
        assert domain_tld("shop.example.co.uk") == ("shop", "example", "co.uk")

    def test_unknown_suffix(self):
        """Falls back to splitting on the last dots."""
        assert domain_tld("a.b.notarealtld") == ("a", "b", "notarealtld")

    def test_single_label(self):
        """A bare label is the TLD."""
        assert domain_tld("localhost") == ("", "", "localhost")


class TestDebug:
    """_debug() tests."""

    def test_silent_without_env(self, capsys, monkeypatch):
        """Nothing printed unless DEBUG is set."""
        monkeypatch.delenv("DEBUG", raising=False)
        _debug("hello")
        assert capsys.readouterr().err == ""

    def test_prints_with_env(self, capsys, monkeypatch):
        """Printed to stderr when DEBUG is set."""
        monkeypatch.setenv("DEBUG", "1")
        _debug("hello")
        assert capsys.readouterr().err == "hello\n"
