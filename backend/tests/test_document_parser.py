from services.document_parser import count_words, extract_bullets


def test_extract_bullets():
    text = """John Doe
Software Engineer

Experience:
• Built REST APIs serving 1M requests/day
- Led team of 5 engineers
* Improved test coverage from 40% to 90%
1. Deployed microservices on Kubernetes

Skills:
Python, JavaScript, Docker
"""
    bullets = extract_bullets(text)
    assert len(bullets) == 4
    assert "Built REST APIs serving 1M requests/day" in bullets
    assert "Led team of 5 engineers" in bullets
    assert "Deployed microservices on Kubernetes" in bullets


def test_extract_bullets_empty():
    assert extract_bullets("") == []
    assert extract_bullets("No bullets here\nJust plain text") == []


def test_extract_bullets_unicode_markers():
    text = "◆ Designed CI/CD pipeline\n■ Automated testing process\n→ Reduced deploy time"
    bullets = extract_bullets(text)
    assert len(bullets) == 3
    assert "Designed CI/CD pipeline" in bullets


def test_extract_bullets_two_digit_numbered():
    text = "10. Managed Kubernetes cluster\n12) Wrote integration tests"
    assert extract_bullets(text) == ["Managed Kubernetes cluster", "Wrote integration tests"]


def test_marker_only_lines_skipped():
    assert extract_bullets("-\n•  \n- Shipped v2") == ["Shipped v2"]


def test_count_words():
    assert count_words("") == 0
    assert count_words("  one\ttwo\nthree  ") == 3
