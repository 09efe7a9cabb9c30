"""Unit tests for URL detection in terminal rows."""

from termlinks.core.links import LinkKind
from termlinks.core.url_tokenizer import detect_urls, find_urls_in_line


def test_detect_http_url():
    links = detect_urls(["Visit http://example.com for info"])
    assert len(links) == 1
    assert links[0].kind is LinkKind.URL
    assert links[0].text == "http://example.com"
    assert links[0].start[0] == 0


def test_url_with_path_query_and_fragment():
    links = detect_urls(["See https://example.com/path?q=1&b=2#frag here"])
    assert [link.text for link in links] == ["https://example.com/path?q=1&b=2#frag"]


def test_url_stops_at_closing_paren():
    links = detect_urls(["(see https://example.com) for details"])
    assert len(links) == 1
    assert links[0].text == "https://example.com"
    assert not links[0].text.endswith(")")


def test_url_stops_at_angle_bracket():
    links = detect_urls(["<https://example.com> is the link"])
    assert len(links) == 1
    assert not links[0].text.endswith(">")


def test_plain_text_has_no_urls():
    lines = [
        "Hello world, this is just text.",
        "No URLs here at all.",
        "foo bar baz 12345",
    ]
    assert detect_urls(lines) == []


def test_bare_domains_and_emails_are_ignored():
    assert detect_urls(["mail me at someone@example.com or visit example.com"]) == []


def test_multiple_urls_same_line_in_order():
    links = detect_urls(["http://a.com and https://b.com here"])
    assert [link.text for link in links] == ["http://a.com", "https://b.com"]
    assert links[0].start[1] < links[1].start[1]


def test_urls_across_rows_keep_row_index():
    links = detect_urls([
        "line0 https://first.com",
        "no url",
        "line2 https://second.com end",
    ])
    assert [link.start[0] for link in links] == [0, 2]


def test_url_columns_are_inclusive():
    links = find_urls_in_line(0, "abc https://x.com end")
    assert len(links) == 1
    assert links[0].start == (0, 4)
    assert links[0].end == (0, 4 + len("https://x.com") - 1)


def test_url_columns_count_characters_not_bytes():
    line = "日本語 https://example.com"
    links = find_urls_in_line(5, line)
    assert len(links) == 1
    assert links[0].start == (5, 4)
    assert line[links[0].start[1]:links[0].end[1] + 1] == links[0].text


def test_empty_line():
    assert find_urls_in_line(0, "") == []


def test_ssh_and_git_urls():
    links = detect_urls([
        "clone ssh://git@host.example/repo.git",
        "git://example.com/x.git",
    ])
    assert [link.text for link in links] == [
        "ssh://git@host.example/repo.git",
        "git://example.com/x.git",
    ]
    assert [link.start for link in links] == [(0, 6), (1, 0)]


def test_file_url_with_empty_host():
    (link,) = detect_urls(["open file:///tmp/report.html"])
    assert link.kind is LinkKind.URL
    assert link.text == "file:///tmp/report.html"
    assert link.start == (0, 5)


def test_file_url_drops_trailing_punctuation():
    (link,) = detect_urls(["(wrote file:///tmp/out.txt)."])
    assert link.text == "file:///tmp/out.txt"
