# coding=utf-8

# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
The steps of the Spanish stemming algorithm.

Each ``*_suffix`` function returns the new word if the step applied, or
``None`` if it did not, so the caller can decide whether to fall through to
the next alternative. The ``remove_*`` functions wrap them and always return
a word (the input unchanged when nothing applied).
"""

import logging
from typing import Optional

from raiz import rules
from raiz.accents import strip_accents
from raiz.regions import Regions
from raiz.util import chop


logger = logging.getLogger(__name__)


def _applied(word: str, result: Optional[str]) -> str:
    return word if result is None else result


# Step 0

def pronoun_suffix(word: str, rv: str) -> Optional[str]:
    """
    Removes an enclitic pronoun attached to a gerund or infinitive, keeping
    the verb ending without its accent (``haci\xe9ndola`` -> ``haciendo``).
    """

    m = rules.pronoun_rule.pattern.search(rv)
    if not m:
        return None

    ending = m.group(1)
    stem = chop(word, m.group(0))
    # The "u" before "yendo" may lie outside RV
    if ending == "yendo" and not stem.endswith("u"):
        return None
    return stem + strip_accents(ending)


# Step 1

def standard_suffix(word: str, r1: str, r2: str) -> Optional[str]:
    regions = {"r1": r1, "r2": r2}
    for rule in rules.standard_rules:
        suffix = rule.search(regions[rule.region])
        if suffix is not None:
            return chop(word, suffix) + rule.replacement
    return None


# Step 2a

def y_verb_suffix(word: str, rv: str) -> Optional[str]:
    suffix = rules.y_verb_rule.search(rv)
    if suffix is not None:
        stem = chop(word, suffix)
        # The preceding "u" need not be in RV
        if stem.endswith("u"):
            return stem
    return None


# Step 2b

def other_verb_suffix(word: str, rv: str) -> Optional[str]:
    for rule in rules.other_verb_rules:
        suffix = rule.search(rv)
        if suffix is not None:
            return chop(word, suffix)

    suffix = rules.gu_verb_rule.search(rv)
    if suffix is not None:
        stem = chop(word, suffix)
        # Undo the "u" written after "g" to keep it hard before "e"
        if stem.endswith("gu"):
            stem = stem[:-1]
        return stem
    return None


# Step 3

def residual_suffix(word: str, rv: str) -> Optional[str]:
    suffix = rules.residual_rule.search(rv)
    if suffix is not None:
        return chop(word, suffix)

    suffix = rules.residual_e_rule.search(rv)
    if suffix is not None:
        if suffix.startswith("u") and word[-3:-1] == "gu":
            return word[:-2]
        return word[:-1]
    return None


def remove_pronoun(word: str, rv: str) -> str:
    return _applied(word, pronoun_suffix(word, rv))


def remove_standard_suffix(word: str, r1: str, r2: str) -> str:
    return _applied(word, standard_suffix(word, r1, r2))


def remove_y_verb_suffix(word: str, rv: str) -> str:
    return _applied(word, y_verb_suffix(word, rv))


def remove_other_verb_suffix(word: str, rv: str) -> str:
    return _applied(word, other_verb_suffix(word, rv))


def remove_residual_suffix(word: str, rv: str) -> str:
    return _applied(word, residual_suffix(word, rv))


def suffix_step(regions: Regions) -> str:
    """
    Runs standard suffix removal, and if it removed nothing, the two verb
    suffix steps, all against the same regions.
    """

    word = regions.word
    alternatives = (
        ("standard", lambda: standard_suffix(word, regions.r1, regions.r2)),
        ("y-verb", lambda: y_verb_suffix(word, regions.rv)),
        ("verb", lambda: other_verb_suffix(word, regions.rv)),
    )
    for name, fn in alternatives:
        result = fn()
        if result is not None:
            logger.debug("%s suffix: %r -> %r", name, word, result)
            return result
    return word
