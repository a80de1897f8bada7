from script.build_start_words import select_words, page_text, unique_preserve_order


class _Resp:
    def __init__(self, text, content_type):
        self.text = text
        self.headers = {"Content-Type": content_type}


def test_select_words_filters_length_and_dedupes():
    text = "Silkworm\nkeyboard\nsilk\nsilkworm\nsilk-wrm\nnotebook\n"
    assert select_words(text, 8) == ["silkworm", "keyboard", "notebook"]


def test_page_text_strips_html():
    resp = _Resp("<html><body><p>silkworm</p><p>keyboard</p></body></html>", "text/html")
    assert select_words(page_text(resp), 8) == ["silkworm", "keyboard"]


def test_page_text_plain_passthrough():
    resp = _Resp("silkworm\n", "text/plain; charset=utf-8")
    assert page_text(resp) == "silkworm\n"


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b"]) == ["b", "a"]
