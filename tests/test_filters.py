from raiz.filters import StemFilter
from raiz.stemmer import stem


class Token(object):
    def __init__(self, text, stopped=False):
        self.text = text
        self.stopped = stopped

    def __repr__(self):
        return "Token(%r)" % self.text


def _tokens(*words):
    return [Token(w) for w in words]


def test_stemfilter():
    sf = StemFilter()
    tokens = sf(_tokens("gatos", "caminando", "perros"))
    assert [t.text for t in tokens] == ["gat", "camin", "perr"]


def test_stemfilter_ignore():
    sf = StemFilter(ignore=["gatos"])
    tokens = sf(_tokens("gatos", "perros"))
    assert [t.text for t in tokens] == ["gatos", "perr"]


def test_stemfilter_stopped():
    tokens = [Token("las", stopped=True), Token("chicas")]
    assert [t.text for t in StemFilter()(tokens)] == ["las", "chic"]


def test_stemfilter_plain_objects():
    class Bare(object):
        def __init__(self, text):
            self.text = text

    assert [t.text for t in StemFilter()([Bare("gatos")])] == ["gat"]


def test_stemfilter_custom_function():
    sf = StemFilter(stemfn=str.upper)
    assert [t.text for t in sf(_tokens("gatos"))] == ["GATOS"]


def test_stemfilter_equality():
    assert StemFilter() == StemFilter()
    assert StemFilter() != StemFilter(stemfn=str.upper)
    assert StemFilter().stemfn is stem
