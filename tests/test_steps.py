# coding=utf-8

from raiz import rules, steps
from raiz.regions import segment


def _rv(word):
    return segment(word).rv


def test_pronoun_accent_dropped():
    word = "haci\xe9ndola"
    assert steps.remove_pronoun(word, _rv(word)) == "haciendo"


def test_pronoun_after_infinitive():
    word = "comprarlo"
    assert steps.remove_pronoun(word, _rv(word)) == "comprar"

    word = "d\xe1rselos"
    assert _rv(word) == "selos"
    # The ending is not inside RV
    assert steps.remove_pronoun(word, _rv(word)) == word


def test_pronoun_uyendo():
    word = "construyendolo"
    assert steps.remove_pronoun(word, _rv(word)) == "construyendo"


def test_pronoun_yendo_without_u():
    word = "leeyendolo"
    assert _rv(word) == "yendolo"
    assert steps.pronoun_suffix(word, _rv(word)) is None
    assert steps.remove_pronoun(word, _rv(word)) == word


def test_pronoun_no_match():
    for word in ("gatos", "caminando", "comer", ""):
        assert steps.remove_pronoun(word, _rv(word)) == word


def test_pronoun_table():
    # Every combination of ending and pronoun is recognized
    for ending in rules.PRONOUN_ENDINGS:
        for pronoun in rules.PRONOUNS:
            suffix = ending + pronoun
            assert rules.pronoun_rule.search(suffix) == suffix


def test_standard_suffixes():
    def std(word):
        r = segment(word)
        return steps.remove_standard_suffix(word, r.r1, r.r2)

    assert std("nacionalidad") == "nacional"
    assert std("educaci\xf3n") == "educ"
    assert std("metodolog\xedas") == "metodolog"
    assert std("revoluci\xf3n") == "revolu"
    assert std("independencia") == "independente"
    assert std("cuidadosamente") == "cuidad"
    assert std("r\xe1pidamente") == "r\xe1pid"
    assert std("felizmente") == "feliz"
    assert std("posibilidades") == "posibil"
    assert std("organismos") == "organ"
    assert std("abundancias") == "abund"
    # "ic" before "ador" is removed along with it
    assert std("comunicadores") == "comun"
    assert std("informativos") == "inform"
    assert std("comunicativas") == "comunic"
    # No standard suffix
    assert std("caminando") == "caminando"
    assert std("gatos") == "gatos"


def test_standard_rule_order():
    def first_rule(word):
        r = segment(word)
        regions = {"r1": r.r1, "r2": r.r2}
        for i, rule in enumerate(rules.standard_rules):
            if rule.search(regions[rule.region]) is not None:
                return i

    assert first_rule("organismos") == 0
    assert first_rule("comunicadores") == 1
    assert first_rule("abundancias") == 1
    assert first_rule("informativos") == 9
    assert first_rule("comunicativas") == 9


def test_standard_suffix_not_applied():
    r = segment("caminando")
    assert steps.standard_suffix(r.word, r.r1, r.r2) is None


def test_standard_rule_region():
    # The prefixed form must lie entirely in R2
    r = segment("cuidadosamente")
    assert r.r2 == "osamente"
    assert rules.standard_rules[5].search(r.r2) == "osamente"
    # Bare "amente" only has to lie in R1
    r = segment("r\xe1pidamente")
    assert rules.standard_rules[5].search(r.r2) is None
    assert rules.standard_rules[6].search(r.r1) == "amente"


def test_y_verb_suffix():
    word = "construyeron"
    assert steps.remove_y_verb_suffix(word, _rv(word)) == "constru"


def test_y_verb_table():
    for suffix in rules.Y_VERB_SUFFIXES:
        assert rules.y_verb_rule.search(suffix) == suffix


def test_y_verb_suffix_without_u():
    word = "apoyan"
    assert _rv(word) == "yan"
    assert steps.y_verb_suffix(word, _rv(word)) is None
    assert steps.remove_y_verb_suffix(word, _rv(word)) == word


def test_other_verb_suffix():
    def verb(word):
        return steps.remove_other_verb_suffix(word, _rv(word))

    assert verb("caminando") == "camin"
    assert verb("hablar\xedamos") == "habl"
    assert verb("chicas") == "chic"
    assert verb("canciones") == "cancion"
    assert verb("comprar") == "compr"
    assert verb("gatos") == "gatos"


def test_other_verb_longest_first():
    # "aremos" (6) is tried before "emos" and "os"
    word = "hablaremos"
    assert _rv(word) == "laremos"
    assert verb_rule_index(_rv(word)) == 1
    assert steps.remove_other_verb_suffix(word, _rv(word)) == "habl"


def verb_rule_index(rv):
    for i, rule in enumerate(rules.other_verb_rules):
        if rule.search(rv) is not None:
            return i


def test_gu_undo():
    word = "persiguen"
    assert steps.remove_other_verb_suffix(word, _rv(word)) == "persig"


def test_residual_suffix():
    def residual(word):
        return steps.remove_residual_suffix(word, _rv(word))

    assert residual("gatos") == "gat"
    assert residual("independente") == "independent"
    assert residual("camin") == "camin"


def test_residual_gu_undo():
    word = "llegue"
    assert _rv(word) == "gue"
    assert steps.remove_residual_suffix(word, _rv(word)) == "lleg"

    # The "u" is only removed when it lies in RV
    word = "tgue"
    assert _rv(word) == "e"
    assert steps.remove_residual_suffix(word, _rv(word)) == "tgu"


def test_suffix_step_falls_through():
    # Standard suffix
    assert steps.suffix_step(segment("nacionalidad")) == "nacional"
    # y-verb suffix
    assert steps.suffix_step(segment("construyeron")) == "constru"
    # other verb suffix
    assert steps.suffix_step(segment("apoyan")) == "apoy"
    # nothing
    assert steps.suffix_step(segment("perr")) == "perr"


def test_suffix_step_reuses_regions(monkeypatch):
    seen = []

    def y_verb(word, rv):
        seen.append(rv)
        return None

    def other_verb(word, rv):
        seen.append(rv)
        return None

    monkeypatch.setattr(steps, "y_verb_suffix", y_verb)
    monkeypatch.setattr(steps, "other_verb_suffix", other_verb)

    regions = segment("apoyan")
    assert steps.suffix_step(regions) == "apoyan"
    assert seen == [regions.rv, regions.rv]
