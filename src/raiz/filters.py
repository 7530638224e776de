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
Filters for plugging the stemmer into a token-based analysis chain. A token
is any object with a mutable ``text`` attribute, optionally with a
``stopped`` attribute marking stop words (which are passed through without
stemming).
"""

from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from raiz.stemmer import stem


StemFunction = Callable[[str], str]


class StemFilter(object):
    """
    Stems (removes suffixes from) the text of tokens using the Spanish
    stemming algorithm. Stemming reduces multiple forms of the same root word
    (for example, "caminando", "caminamos", "caminaron") to a single word in
    the index.

    You can pass your own stemming function to the StemFilter:

    >>> stemfilter = StemFilter(stem_function)
    """

    def __init__(self, stemfn: StemFunction=stem,
                 ignore: Optional[Sequence[str]]=None):
        """
        :param stemfn: the function to use for stemming.
        :param ignore: a set/list of words that should not be stemmed. This is
            converted into a frozenset. If you omit this argument, all tokens
            are stemmed.
        """

        self.stemfn = stemfn
        self.ignore = frozenset() if ignore is None else frozenset(ignore)

    def __eq__(self, other):
        return (other and self.__class__ is other.__class__
                and self.stemfn == other.stemfn)

    def __ne__(self, other):
        return not self == other

    def __call__(self, tokens: Iterable[Any]) -> Iterator[Any]:
        stemfn = self.stemfn
        ignore = self.ignore

        for t in tokens:
            if not getattr(t, "stopped", False):
                text = t.text
                if text not in ignore:
                    t.text = stemfn(text)
            yield t
