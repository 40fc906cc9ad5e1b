import pytest
from namehack.config import DEFAULT_PUBLIC_SUFFIXES
from namehack.suffixes import (
    PUBLIC_SUFFIXES, UnknownSuffixError, parse_public_suffix_csv, known_tlds, parse_public_suffix_list,
)

ACCEPTED = {
    "com", "net", "org",
    "us", "im", "io",
    "ca", "co", "in",
    "com.br", "org.br", "co.uk",
}


def test_parse_public_suffix_csv():
    csv = "us, im, in, io, ,, ca,co,co ,,ca , com"
    assert parse_public_suffix_csv(csv, ACCEPTED) == ["us", "im", "in", "io", "ca", "co", "com"]


@pytest.mark.parametrize("csv", ["com,net,org,unk", "unk,com,net", "com,unk,net"])
def test_parse_public_suffix_csv_for_unknown_suffix(csv):
    with pytest.raises(UnknownSuffixError) as exc:
        parse_public_suffix_csv(csv, ACCEPTED)
    assert exc.value.suffix == "unk"
    assert "unk" in str(exc.value)


def test_parse_public_suffix_csv_allows_unknown():
    assert parse_public_suffix_csv("com, unk ,com", ACCEPTED, allow_unknown=True) == ["com", "unk"]


def test_parse_empty_csv():
    assert parse_public_suffix_csv(" , ,", ACCEPTED) == []


def test_known_tlds_skips_multi_label_suffixes():
    assert known_tlds(ACCEPTED) == ["ca", "co", "com", "im", "in", "io", "net", "org", "us"]


def test_default_suffixes_are_known():
    assert parse_public_suffix_csv(DEFAULT_PUBLIC_SUFFIXES, PUBLIC_SUFFIXES)


def test_parse_public_suffix_list_reads_icann_section_only():
    text = "\n".join([
        "// ===BEGIN ICANN DOMAINS===",
        "// ac : https://en.wikipedia.org/wiki/.ac",
        "ac",
        "com.ac",
        "",
        "*.ck",
        "!www.ck",
        "COM",
        "// ===END ICANN DOMAINS===",
        "// ===BEGIN PRIVATE DOMAINS===",
        "blogspot.com",
    ])
    assert parse_public_suffix_list(text) == {"ac", "com.ac", "com"}
