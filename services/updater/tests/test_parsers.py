"""Tests for domain list parsers."""

import pytest
from updater.parsers import DomainListParser, extract_domains


def test_extract_example_list():
    """Test comments and blank lines are dropped."""
    content = "ads.example.com\n#comment\n\nbad.example.com\n"

    assert extract_domains(content) == ["ads.example.com", "bad.example.com"]


def test_extract_sorted_and_unique():
    """Test output is strictly ascending without duplicates."""
    content = "zeta.com\nalpha.com\nzeta.com\nmid.com\nalpha.com\n"

    domains = extract_domains(content)

    assert domains == ["alpha.com", "mid.com", "zeta.com"]
    assert all(a < b for a, b in zip(domains, domains[1:]))


def test_extract_strips_whitespace_and_crlf():
    """Test surrounding whitespace and carriage returns are trimmed."""
    content = "  padded.com  \r\ncrlf.com\r\n\ttabbed.com\t\n"

    assert extract_domains(content) == ["crlf.com", "padded.com", "tabbed.com"]


def test_extract_unicode_whitespace_trimmed():
    """Test Unicode spaces are trimmed like ASCII ones."""
    content = "\xa0nbsp.com\u3000\n\u2003em.com\x85\n"

    assert extract_domains(content) == ["em.com", "nbsp.com"]


def test_extract_keeps_ascii_separators():
    """Test file and unit separator characters are not trimmed."""
    content = "\x1cads.com\nsep.com\x1f\n"

    assert extract_domains(content) == ["\x1cads.com", "sep.com\x1f"]


def test_extract_is_case_sensitive():
    """Test domains differing only in case are kept apart."""
    assert extract_domains("Ads.com\nads.com\n") == ["Ads.com", "ads.com"]


def test_extract_keeps_lines_verbatim():
    """Test hosts-style and inline-comment lines are not rewritten."""
    content = "0.0.0.0 tracker.com\nsite.com # note\n"

    assert extract_domains(content) == ["0.0.0.0 tracker.com", "site.com # note"]


def test_extract_indented_comment():
    """Test a comment preceded by whitespace is still a comment."""
    assert extract_domains("   # indented\nkept.com") == ["kept.com"]


@pytest.mark.parametrize("content", ["", "\n\n", "# only\n#comments\n", "   \n\t\n"])
def test_extract_nothing(content):
    """Test inputs without entries give an empty list."""
    assert extract_domains(content) == []


def test_parser_statistics():
    """Test parser counts skipped and duplicate lines."""
    parser = DomainListParser("whitelist")

    domains = parser.parse("a.com\n# c\n\na.com\nb.com")

    assert domains == ["a.com", "b.com"]
    assert parser.category == "whitelist"
    assert parser.stats == {"lines": 5, "skipped": 2, "duplicates": 1}


def test_parser_large_input():
    """Test parser with large content."""
    lines = [f"domain{i}.com" for i in range(10000)]
    content = "\n".join(lines + lines)

    domains = DomainListParser("blacklist").parse(content)

    assert len(domains) == 10000
    assert domains == sorted(lines)
