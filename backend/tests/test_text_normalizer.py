from services.text_normalizer import STOPWORDS, normalize, tokenize


def test_normalize_counts_tokens():
    counts = normalize("The Python developer, with Python!", 1)
    assert counts == {"python": 2, "developer": 1}


def test_normalize_applies_weight():
    assert normalize("Kubernetes", 3) == {"kubernetes": 3}


def test_normalize_drops_short_tokens_and_stopwords():
    counts = normalize("We use Go and AI for all of our work", 1)
    assert "go" not in counts
    assert "and" not in counts
    assert "our" not in counts
    assert counts == {"use": 1, "work": 1}


def test_normalize_does_not_mutate_accumulator():
    base = {"python": 1}
    out = normalize("python docker", 2, base)
    assert base == {"python": 1}
    assert out == {"python": 3, "docker": 2}


def test_normalize_preserves_first_seen_order():
    counts = normalize("docker python", 1, {"rust": 5})
    assert list(counts) == ["rust", "docker", "python"]


def test_normalize_empty_text():
    assert normalize("", 5) == {}
    assert normalize("   \n\t ", 1, {"sql": 1}) == {"sql": 1}


def test_normalize_custom_stopwords():
    assert normalize("python django", stopwords={"django"}) == {"python": 1}


def test_tokenize_replaces_punctuation():
    assert tokenize("Kubernetes and Docker; kubernetes") == ["kubernetes", "docker", "kubernetes"]
    assert tokenize("node.js") == ["node"]


def test_stopword_set_size():
    assert 80 <= len(STOPWORDS) <= 140
