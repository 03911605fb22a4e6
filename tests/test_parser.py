"""
HTML parsing and URL helper tests
"""

from photo_scout.utils import HTMLParser, resolve_url, page_key, origin_of, is_data_uri, is_vector_image


def test_image_sources_in_document_order():
    html = """
    <div><img src="/b.jpg"><img alt="no source"></div>
    <p><img src="/a.png"><img src=""><img src="   "></p>
    <img src="data:image/png;base64,AAAA">
    """
    assert HTMLParser(html).image_sources() == ["/b.jpg", "/a.png", "data:image/png;base64,AAAA"]


def test_anchors_with_visible_text():
    html = """
    <nav>
      <a href="/gallery"><span>Photo</span> <b>Gallery</b></a>
      <a name="top">Anchor without href</a>
      <a href="/menu">  Menu  </a>
      <a href="">Empty</a>
    </nav>
    """
    assert HTMLParser(html).anchors() == [("/gallery", "Photo Gallery"), ("/menu", "Menu")]


def test_malformed_html_does_not_raise():
    html = "<html><body><div><img src='/x.jpg'><a href='/gallery'>Gallery<p></div>"
    parser = HTMLParser(html)

    assert parser.image_sources() == ["/x.jpg"]
    assert parser.anchors()[0][0] == "/gallery"


def test_empty_document():
    parser = HTMLParser("")
    assert parser.image_sources() == []
    assert parser.anchors() == []


def test_resolve_url():
    assert resolve_url("https://example.test/", "/a.jpg") == "https://example.test/a.jpg"
    assert resolve_url("https://example.test/menu/", "b.jpg") == "https://example.test/menu/b.jpg"
    assert resolve_url("https://example.test/", "//cdn.test/c.jpg") == "https://cdn.test/c.jpg"
    assert resolve_url("https://example.test/", " /padded.jpg ") == "https://example.test/padded.jpg"


def test_resolve_url_rejects_unusable_references():
    assert resolve_url("https://example.test/", "mailto:hi@example.test") is None
    assert resolve_url("https://example.test/", "http://[broken/a.jpg") is None
    assert resolve_url("https://example.test/", "https://example.test:99999/a.jpg") is None


def test_page_key():
    assert page_key("https://example.test") == "https://example.test/"
    assert page_key("https://example.test#about") == "https://example.test/"
    assert page_key("https://example.test/gallery#slide-2") == "https://example.test/gallery"
    assert page_key("https://example.test/menu?lang=en") == "https://example.test/menu?lang=en"


def test_origin_of():
    assert origin_of("https://Example.test/a") == ("https", "example.test", 443)
    assert origin_of("http://example.test/a") == ("http", "example.test", 80)
    assert origin_of("http://example.test:8080/") == ("http", "example.test", 8080)
    assert origin_of("not a url") is None


def test_image_reference_filters():
    assert is_data_uri("data:image/gif;base64,R0lGOD")
    assert is_data_uri(" DATA:image/png;base64,AAAA")
    assert not is_data_uri("/data/photo.jpg")

    assert is_vector_image("/logo.svg")
    assert is_vector_image("/icons/logo.SVG?v=2")
    assert not is_vector_image("/photo.jpg")
