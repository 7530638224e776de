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
Reimplementation of the Porter-style
`Spanish stemming algorithm <http://snowball.tartarus.org/algorithms/spanish/stemmer.html>`_
in Python.

>>> stem("caminando")
'camin'
>>> stem("Haci\xe9ndola")
'hac'
"""

import logging

from raiz import steps
from raiz.accents import strip_accents
from raiz.regions import segment


logger = logging.getLogger(__name__)


class InvalidInput(Exception):
    """
    Raised when the object passed to :func:`stem` is not a string.
    """


def stem(word: str) -> str:
    """
    Returns the stem of a Spanish word. The result is lower-case, trimmed and
    has no acute accents. Words no rule applies to are returned normalized
    but otherwise unchanged.

    :param word: the word to stem.
    :raises InvalidInput: if ``word`` is None or not a string.
    """

    if not isinstance(word, str):
        raise InvalidInput("Can't stem %r" % (word, ))

    original = word
    word = word.lower().strip()

    # Attached pronoun
    word = steps.remove_pronoun(word, segment(word).rv)
    # Standard suffix, or if there was none, verb suffixes
    word = steps.suffix_step(segment(word))
    # Residual suffix
    word = steps.remove_residual_suffix(word, segment(word).rv)

    word = strip_accents(word)
    logger.debug("stem(%r) = %r", original, word)
    return word


class SpanishStemmer(object):
    """
    Object wrapper around :func:`stem`, for code that expects a stemmer
    object with a ``stem`` method.

    >>> SpanishStemmer().stem("gatos")
    'gat'
    """

    language = "es"

    def stem(self, word: str) -> str:
        return stem(word)

    def __call__(self, word: str) -> str:
        return stem(word)

    def __eq__(self, other):
        return other and self.__class__ is other.__class__

    def __hash__(self):
        return hash(self.__class__)

    def __repr__(self):
        return "%s()" % self.__class__.__name__


# Map two-letter language codes to stemming classes

classes = {"es": SpanishStemmer}
