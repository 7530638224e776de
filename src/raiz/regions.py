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
Computes the R1, R2 and RV regions of a Spanish word. Suffix rules are only
allowed to remove characters that lie inside one of these regions.

R1 is the region after the first non-vowel following a vowel, or the empty
region at the end of the word if there is no such non-vowel. R2 is the R1 of
R1.

RV depends on the first two letters. If the second letter is a consonant, RV
is the region after the next following vowel. If the first two letters are
vowels, RV is the region after the next consonant. Otherwise (consonant then
vowel) RV is the region after the third letter. RV is the empty region at the
end of the word if these positions cannot be found.

See http://snowball.tartarus.org/texts/r1r2.html
"""

from collections import namedtuple

from raiz.util import rcompile


# The Spanish vowels. Every other character counts as a consonant.

VOWELS = "aeiou\xe1\xe9\xed\xf3\xfa\xfc"

_v = "[%s]" % VOWELS
_c = "[^%s]" % VOWELS

r1_pattern = rcompile("^.*?%s%s(.*)" % (_v, _c))

rv_pattern = rcompile("""
^(
    .%(c)s+%(v)s       # second letter a consonant: up to the next vowel
  | %(v)s{2,}%(c)s     # two vowels: up to the next consonant
  | %(c)s%(v)s.        # consonant, vowel: the first three letters
)(.*)
""" % {"v": _v, "c": _c}, verbose=True)


class Regions(namedtuple("Regions", "word r1 r2 rv")):
    """
    The regions of a single word state. Every region is a suffix of
    ``word``, possibly the empty string.
    """


def r1_of(text: str) -> str:
    m = r1_pattern.match(text)
    return m.group(1) if m else ""


def rv_of(word: str) -> str:
    m = rv_pattern.match(word)
    return m.group(2) if m else ""


def segment(word: str) -> Regions:
    """
    Computes the regions of the given (already lower-cased) word.

    >>> segment("caminando")
    Regions(word='caminando', r1='inando', r2='ando', rv='inando')
    """

    r1 = r1_of(word)
    return Regions(word, r1, r1_of(r1), rv_of(word))
